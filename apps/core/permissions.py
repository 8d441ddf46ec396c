"""DRF permission classes for role-based access control."""
from rest_framework import permissions

from .constants import Roles
from .exceptions import NotFoundError


def get_profile(user):
    """Return the Profile linked to `user`, or None."""
    if not user or not user.is_authenticated:
        return None
    return getattr(user, 'profile', None)


class IsVolunteer(permissions.BasePermission):
    """Allows any authenticated user with a profile."""
    message = "Vous devez avoir un profil pour accéder à cette ressource."

    def has_permission(self, request, view):
        if not request.user or not request.user.is_authenticated:
            return False
        return get_profile(request.user) is not None or request.user.is_staff


class IsSupervisorOrAdmin(permissions.BasePermission):
    """Requires supervisor (responsable) or admin role."""
    message = "Vous devez être responsable ou administrateur pour accéder à cette ressource."

    def has_permission(self, request, view):
        if not request.user or not request.user.is_authenticated:
            return False

        profile = get_profile(request.user)
        if profile is not None:
            return profile.role in Roles.STAFF_ROLES

        return request.user.is_superuser


class IsAdmin(permissions.BasePermission):
    """Requires admin role or superuser."""
    message = "Vous devez être administrateur pour accéder à cette ressource."

    def has_permission(self, request, view):
        if not request.user or not request.user.is_authenticated:
            return False

        profile = get_profile(request.user)
        if profile is not None:
            return profile.role == Roles.ADMIN

        return request.user.is_superuser


def get_own_volunteer(request):
    """Volunteer record of the requesting user, or NotFoundError."""
    profile = get_profile(request.user)
    volunteer = getattr(profile, 'volunteer', None) if profile else None
    if volunteer is None:
        raise NotFoundError('Aucun proclamateur associé à ce compte')
    return volunteer
