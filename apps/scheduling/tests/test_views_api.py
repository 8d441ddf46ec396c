"""Tests for scheduling API views."""
from datetime import date

import pytest
from rest_framework import status
from rest_framework.test import APIClient

from apps.members.tests.factories import ProfileFactory, SupervisorProfileFactory
from apps.scheduling.models import ActivityType, Slot

from .factories import ActivityTypeFactory, SlotFactory

SLOTS_URL = '/api/v1/scheduling/slots/'
TYPES_URL = '/api/v1/scheduling/activity-types/'


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def supervisor_client(api_client):
    api_client.force_authenticate(user=SupervisorProfileFactory().user)
    return api_client


@pytest.mark.django_db
class TestSlotViewSet:

    def test_supervisor_creates_slot(self, supervisor_client):
        activity_type = ActivityTypeFactory()

        response = supervisor_client.post(SLOTS_URL, {
            'activity_type': str(activity_type.pk),
            'date': '2024-03-02',
            'start_time': '09:00',
            'end_time': '11:00',
            'min_participants': 2,
            'max_participants': 4,
        }, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert Slot.objects.get().max_participants == 4

    def test_inverted_window_is_conflict(self, supervisor_client):
        response = supervisor_client.post(SLOTS_URL, {
            'activity_type': str(ActivityTypeFactory().pk),
            'date': '2024-03-02',
            'start_time': '11:00',
            'end_time': '09:00',
        }, format='json')

        assert response.status_code == status.HTTP_409_CONFLICT
        assert not Slot.objects.exists()

    def test_volunteer_cannot_create(self, api_client):
        api_client.force_authenticate(user=ProfileFactory().user)
        response = api_client.post(SLOTS_URL, {}, format='json')
        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_month_listing(self, api_client):
        march = SlotFactory(date=date(2024, 3, 9))
        SlotFactory(date=date(2024, 4, 9))
        SlotFactory(date=date(2024, 3, 10), is_active=False)
        api_client.force_authenticate(user=ProfileFactory().user)

        response = api_client.get(SLOTS_URL, {'year': 2024, 'month': 3})

        assert response.status_code == status.HTTP_200_OK
        assert [row['id'] for row in response.data['results']] == [str(march.pk)]

    def test_delete_deactivates(self, supervisor_client):
        slot = SlotFactory()

        response = supervisor_client.delete(f'{SLOTS_URL}{slot.pk}/')

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert Slot.all_objects.get(pk=slot.pk).is_active is False

    def test_occupancy(self, api_client):
        slot = SlotFactory(max_participants=2)
        api_client.force_authenticate(user=ProfileFactory().user)

        response = api_client.get(f'{SLOTS_URL}{slot.pk}/occupancy/')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['available_places'] == 2
        assert response.data['is_full'] is False
        assert response.data['needs_brother'] is False

    def test_generate_sundays(self, supervisor_client):
        activity_type = ActivityTypeFactory()

        response = supervisor_client.post(f'{SLOTS_URL}generate/', {
            'activity_type': str(activity_type.pk),
            'weekday': 6,
            'frequency': 'weekly',
            'start_time': '14:00',
            'end_time': '16:00',
            'start_date': '2024-01-01',
            'end_date': '2024-01-31',
            'min_participants': 1,
            'max_participants': 3,
        }, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['created'] == 4
        assert sorted(s.date.day for s in Slot.objects.all()) == [7, 14, 21, 28]


@pytest.mark.django_db
class TestActivityTypeViewSet:

    def test_delete_disables_type(self, supervisor_client):
        activity_type = ActivityTypeFactory()

        response = supervisor_client.delete(f'{TYPES_URL}{activity_type.pk}/')

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert ActivityType.all_objects.get(pk=activity_type.pk).is_active is False

    def test_invalid_recurrence_weeks(self, supervisor_client):
        response = supervisor_client.post(TYPES_URL, {
            'name': 'Marché',
            'recurrence_enabled': True,
            'recurrence_days': [5],
            'recurrence_weeks': [5],
        }, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'recurrence_weeks' in response.data


@pytest.mark.django_db
class TestInactiveSlotUpdate:

    def test_patch_deactivated_slot_is_not_found(self, supervisor_client):
        slot = SlotFactory(notes='')
        slot.deactivate()

        response = supervisor_client.patch(f'{SLOTS_URL}{slot.pk}/', {'notes': 'modifié'}, format='json')

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert Slot.all_objects.get(pk=slot.pk).notes == ''

    def test_staff_may_patch_with_explicit_flag(self, supervisor_client):
        slot = SlotFactory()
        slot.deactivate()

        response = supervisor_client.patch(
            f'{SLOTS_URL}{slot.pk}/?include_inactive=true', {'notes': 'modifié'}, format='json',
        )

        assert response.status_code == status.HTTP_200_OK
        assert Slot.all_objects.get(pk=slot.pk).notes == 'modifié'

    def test_patch_active_slot(self, supervisor_client):
        slot = SlotFactory()
        response = supervisor_client.patch(f'{SLOTS_URL}{slot.pk}/', {'max_participants': 5}, format='json')
        assert response.status_code == status.HTTP_200_OK
        assert response.data['max_participants'] == 5


@pytest.mark.django_db
class TestSlotQueryParams:

    @pytest.mark.parametrize('params', [
        {'activity_type': 'pas-un-uuid'},
        {'year': 'abc', 'month': 3},
        {'year': 2024, 'month': 'mars'},
        {'year': 2024, 'month': 13},
    ])
    def test_bad_params_give_validation_error(self, api_client, params):
        api_client.force_authenticate(user=ProfileFactory().user)

        response = api_client.get(SLOTS_URL, params)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['code'] == 'validation_error'
