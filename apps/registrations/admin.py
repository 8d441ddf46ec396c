"""Registrations admin configuration."""
from django.contrib import admin

from apps.core.admin import BaseModelAdmin

from .models import Registration


@admin.register(Registration)
class RegistrationAdmin(BaseModelAdmin):
    """Read-mostly admin; status changes belong to the approval workflow."""
    list_display = ['volunteer', 'slot', 'status', 'registered_at', 'status_changed_at']
    list_filter = ['status', 'slot__activity_type']
    search_fields = ['volunteer__profile__first_name', 'volunteer__profile__last_name']
    readonly_fields = ['id', 'created_at', 'updated_at', 'registered_at', 'status', 'status_changed_at']
    raw_id_fields = ['slot', 'volunteer']
    ordering = ['-registered_at']
