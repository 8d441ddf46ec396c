"""Profile and volunteer admin configuration."""
from django.contrib import admin

from apps.core.admin import BaseModelAdmin

from .models import Profile, Volunteer


class VolunteerInline(admin.StackedInline):
    """Inline for the volunteer record attached to a profile."""
    model = Volunteer
    can_delete = False
    extra = 0


@admin.register(Profile)
class ProfileAdmin(BaseModelAdmin):
    """Admin for profiles with role and status management."""
    list_display = ['full_name', 'email', 'role', 'status', 'is_active']
    list_filter = ['role', 'status', 'is_active']
    search_fields = ['first_name', 'last_name', 'email']
    ordering = ['last_name', 'first_name']
    inlines = [VolunteerInline]


@admin.register(Volunteer)
class VolunteerAdmin(BaseModelAdmin):
    list_display = ['profile', 'is_elder', 'is_ministerial_servant', 'is_pioneer', 'is_brother', 'is_active']
    list_filter = ['is_elder', 'is_ministerial_servant', 'is_pioneer', 'is_brother', 'is_active']
    search_fields = ['profile__first_name', 'profile__last_name', 'profile__email']
    autocomplete_fields = ['profile']
    ordering = ['profile__last_name', 'profile__first_name']
