"""Scheduling admin configuration."""
from django.contrib import admin

from apps.core.admin import BaseModelAdmin

from .models import ActivityType, Slot


@admin.register(ActivityType)
class ActivityTypeAdmin(BaseModelAdmin):
    list_display = ['name', 'default_start_time', 'default_end_time', 'recurrence_enabled', 'auto_create_slots', 'is_active']
    list_filter = ['recurrence_enabled', 'auto_create_slots', 'is_active']
    search_fields = ['name', 'description']
    ordering = ['name']


@admin.register(Slot)
class SlotAdmin(BaseModelAdmin):
    """Admin for slots; deleting is blocked once registrations exist."""
    list_display = ['activity_type', 'date', 'start_time', 'end_time', 'min_participants', 'max_participants', 'is_active']
    list_filter = ['activity_type', 'is_active', 'date']
    search_fields = ['activity_type__name', 'notes']
    date_hierarchy = 'date'
    ordering = ['-date', 'start_time']
