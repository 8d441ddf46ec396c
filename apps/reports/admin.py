"""Reports admin configuration."""
from django.contrib import admin

from apps.core.admin import BaseModelAdmin

from .models import Report


@admin.register(Report)
class ReportAdmin(BaseModelAdmin):
    list_display = ['volunteer', 'year', 'month', 'hours', 'placements', 'is_approved', 'is_public']
    list_filter = ['year', 'month', 'is_approved', 'is_public']
    search_fields = ['volunteer__profile__first_name', 'volunteer__profile__last_name']
    readonly_fields = ['id', 'created_at', 'updated_at', 'submitted_at', 'approved_by', 'approved_at']
    raw_id_fields = ['volunteer', 'slot']
    ordering = ['-year', '-month']
