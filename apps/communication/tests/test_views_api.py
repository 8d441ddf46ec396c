"""Tests for communication API views."""
import pytest
from rest_framework import status
from rest_framework.test import APIClient

from apps.communication.models import Notification
from apps.members.tests.factories import ProfileFactory, UserFactory
from .factories import NotificationFactory


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def volunteer_profile():
    return ProfileFactory()


@pytest.mark.django_db
class TestNotificationViewSet:

    def test_lists_only_own_notifications(self, api_client, volunteer_profile):
        own = NotificationFactory(profile=volunteer_profile)
        NotificationFactory()
        api_client.force_authenticate(user=volunteer_profile.user)

        response = api_client.get('/api/v1/communication/notifications/')

        assert response.status_code == status.HTTP_200_OK
        ids = [row['id'] for row in response.data['results']]
        assert ids == [str(own.pk)]

    def test_user_without_profile_is_refused(self, api_client):
        api_client.force_authenticate(user=UserFactory())
        response = api_client.get('/api/v1/communication/notifications/')
        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_mark_all_read(self, api_client, volunteer_profile):
        NotificationFactory.create_batch(2, profile=volunteer_profile)
        other = NotificationFactory()
        api_client.force_authenticate(user=volunteer_profile.user)

        response = api_client.post('/api/v1/communication/notifications/read/', {}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['updated'] == 2
        assert not Notification.objects.filter(profile=volunteer_profile, is_read=False).exists()
        other.refresh_from_db()
        assert other.is_read is False

    def test_unread_count(self, api_client, volunteer_profile):
        NotificationFactory(profile=volunteer_profile)
        NotificationFactory(profile=volunteer_profile, is_read=True)
        api_client.force_authenticate(user=volunteer_profile.user)

        response = api_client.get('/api/v1/communication/notifications/unread_count/')
        assert response.data == {'count': 1}
