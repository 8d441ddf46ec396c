"""Communication admin."""
from django.contrib import admin
from apps.core.admin import BaseModelAdmin
from .models import Notification


@admin.register(Notification)
class NotificationAdmin(BaseModelAdmin):
    list_display = ['profile', 'title', 'kind', 'is_read', 'email_sent_at', 'created_at']
    list_filter = ['kind', 'is_read']
    search_fields = ['title', 'message']
