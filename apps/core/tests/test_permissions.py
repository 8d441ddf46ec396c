"""Tests for core permissions."""
from unittest.mock import Mock

import pytest
from django.contrib.auth.models import AnonymousUser

from apps.core.exceptions import NotFoundError
from apps.core.permissions import IsAdmin, IsSupervisorOrAdmin, IsVolunteer, get_own_volunteer
from apps.members.tests.factories import (
    AdminProfileFactory, ProfileFactory, SupervisorProfileFactory, UserFactory, VolunteerFactory,
)


def request_for(user):
    request = Mock()
    request.user = user
    return request


@pytest.mark.django_db
class TestRolePermissions:

    def test_anonymous_refused_everywhere(self):
        request = request_for(AnonymousUser())
        for permission in (IsVolunteer(), IsSupervisorOrAdmin(), IsAdmin()):
            assert permission.has_permission(request, None) is False

    def test_volunteer(self):
        request = request_for(ProfileFactory().user)
        assert IsVolunteer().has_permission(request, None) is True
        assert IsSupervisorOrAdmin().has_permission(request, None) is False
        assert IsAdmin().has_permission(request, None) is False

    def test_supervisor(self):
        request = request_for(SupervisorProfileFactory().user)
        assert IsSupervisorOrAdmin().has_permission(request, None) is True
        assert IsAdmin().has_permission(request, None) is False

    def test_admin(self):
        request = request_for(AdminProfileFactory().user)
        assert IsSupervisorOrAdmin().has_permission(request, None) is True
        assert IsAdmin().has_permission(request, None) is True

    def test_superuser_without_profile(self):
        request = request_for(UserFactory(is_superuser=True))
        assert IsAdmin().has_permission(request, None) is True


@pytest.mark.django_db
class TestGetOwnVolunteer:

    def test_returns_linked_volunteer(self):
        volunteer = VolunteerFactory()
        assert get_own_volunteer(request_for(volunteer.profile.user)) == volunteer

    def test_profile_without_volunteer(self):
        with pytest.raises(NotFoundError):
            get_own_volunteer(request_for(ProfileFactory().user))
