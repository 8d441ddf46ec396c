"""Tests for the slot catalog service."""
from datetime import date, time

import pytest

from apps.core.constants import RegistrationStatus
from apps.core.exceptions import ConflictError, NotFoundError, ValidationError
from apps.members.tests.factories import VolunteerFactory
from apps.registrations.tests.factories import RegistrationFactory
from apps.scheduling.models import Slot
from apps.scheduling.services_catalog import SlotCatalog

from .factories import ActivityTypeFactory, SlotFactory

pytestmark = pytest.mark.django_db


class TestCreateSlot:

    def test_create_slot(self):
        activity_type = ActivityTypeFactory()
        slot = SlotCatalog.create_slot(
            activity_type.pk, '2024-03-02', '09:00', '11:30', 2, 4, notes='Gare',
        )
        assert slot.date == date(2024, 3, 2)
        assert slot.start_time == time(9, 0)
        assert slot.end_time == time(11, 30)
        assert slot.min_participants == 2
        assert slot.max_participants == 4
        assert slot.notes == 'Gare'
        assert slot.is_active is True

    def test_min_greater_than_max_is_rejected(self):
        activity_type = ActivityTypeFactory()
        with pytest.raises(ValidationError):
            SlotCatalog.create_slot(activity_type.pk, '2024-03-02', '09:00', '11:00', 5, 2)
        assert Slot.objects.count() == 0

    def test_zero_minimum_is_rejected(self):
        activity_type = ActivityTypeFactory()
        with pytest.raises(ValidationError):
            SlotCatalog.create_slot(activity_type.pk, '2024-03-02', '09:00', '11:00', 0, 2)

    def test_end_before_start_is_a_conflict(self):
        activity_type = ActivityTypeFactory()
        with pytest.raises(ConflictError):
            SlotCatalog.create_slot(activity_type.pk, '2024-03-02', '11:00', '09:00', 1, 2)

    def test_equal_times_are_a_conflict(self):
        activity_type = ActivityTypeFactory()
        with pytest.raises(ConflictError):
            SlotCatalog.create_slot(activity_type.pk, '2024-03-02', '09:00', '09:00', 1, 2)

    def test_malformed_date_is_rejected(self):
        activity_type = ActivityTypeFactory()
        with pytest.raises(ValidationError):
            SlotCatalog.create_slot(activity_type.pk, '02/03/2024', '09:00', '11:00', 1, 2)

    def test_missing_time_is_rejected(self):
        activity_type = ActivityTypeFactory()
        with pytest.raises(ValidationError):
            SlotCatalog.create_slot(activity_type.pk, '2024-03-02', None, '11:00', 1, 2)

    def test_disabled_activity_type_is_not_found(self):
        activity_type = ActivityTypeFactory(is_active=False)
        with pytest.raises(NotFoundError):
            SlotCatalog.create_slot(activity_type.pk, '2024-03-02', '09:00', '11:00', 1, 2)


class TestListSlots:

    def test_ordered_by_date_then_start_time(self):
        activity_type = ActivityTypeFactory()
        late = SlotFactory(activity_type=activity_type, date=date(2024, 3, 2), start_time=time(14, 0), end_time=time(16, 0))
        early = SlotFactory(activity_type=activity_type, date=date(2024, 3, 2), start_time=time(9, 0))
        first = SlotFactory(activity_type=activity_type, date=date(2024, 3, 1), start_time=time(18, 0), end_time=time(19, 0))

        slots = list(SlotCatalog.list_slots(activity_type.pk))
        assert slots == [first, early, late]

    def test_date_range_filter(self):
        activity_type = ActivityTypeFactory()
        SlotFactory(activity_type=activity_type, date=date(2024, 2, 28))
        inside = SlotFactory(activity_type=activity_type, date=date(2024, 3, 10))
        SlotFactory(activity_type=activity_type, date=date(2024, 4, 1))

        slots = list(SlotCatalog.list_slots(activity_type.pk, '2024-03-01', '2024-03-31'))
        assert slots == [inside]

    def test_inactive_slots_hidden_unless_requested(self):
        activity_type = ActivityTypeFactory()
        active = SlotFactory(activity_type=activity_type)
        inactive = SlotFactory(activity_type=activity_type, is_active=False)

        assert list(SlotCatalog.list_slots(activity_type.pk)) == [active]
        assert set(SlotCatalog.list_slots(activity_type.pk, only_active=False)) == {active, inactive}

    def test_inverted_range_is_rejected(self):
        with pytest.raises(ValidationError):
            SlotCatalog.list_slots(date_from='2024-03-31', date_to='2024-03-01')

    def test_month_slots(self):
        activity_type = ActivityTypeFactory()
        SlotFactory(activity_type=activity_type, date=date(2024, 1, 31))
        feb = SlotFactory(activity_type=activity_type, date=date(2024, 2, 29))
        SlotFactory(activity_type=activity_type, date=date(2024, 3, 1))

        assert list(SlotCatalog.month_slots(2024, 2)) == [feb]


class TestDeactivateSlot:

    def test_deactivate_is_idempotent(self):
        slot = SlotFactory()
        SlotCatalog.deactivate_slot(slot.pk)
        SlotCatalog.deactivate_slot(slot.pk)

        slot.refresh_from_db()
        assert slot.is_active is False

    def test_unknown_slot_is_not_found(self):
        with pytest.raises(NotFoundError):
            SlotCatalog.deactivate_slot('00000000-0000-0000-0000-000000000000')


class TestUpdateSlot:

    def test_update_times(self):
        slot = SlotFactory()
        SlotCatalog.update_slot(slot.pk, {'start_time': '10:00', 'end_time': '12:00'})

        slot.refresh_from_db()
        assert slot.start_time == time(10, 0)
        assert slot.end_time == time(12, 0)

    def test_update_revalidates_bounds(self):
        slot = SlotFactory(min_participants=1, max_participants=3)
        with pytest.raises(ValidationError):
            SlotCatalog.update_slot(slot.pk, {'min_participants': 4})

        slot.refresh_from_db()
        assert slot.min_participants == 1

    def test_update_inverted_window_is_a_conflict(self):
        slot = SlotFactory()
        with pytest.raises(ConflictError):
            SlotCatalog.update_slot(slot.pk, {'end_time': '08:00'})

    def test_unknown_field_is_rejected(self):
        slot = SlotFactory()
        with pytest.raises(ValidationError):
            SlotCatalog.update_slot(slot.pk, {'color': 'red'})

    def test_inactive_slot_requires_flag(self):
        slot = SlotFactory(is_active=False)
        with pytest.raises(NotFoundError):
            SlotCatalog.update_slot(slot.pk, {'notes': 'x'})

        updated = SlotCatalog.update_slot(slot.pk, {'notes': 'x'}, include_inactive=True)
        assert updated.notes == 'x'


class TestOccupancy:

    def test_empty_slot(self):
        slot = SlotFactory(min_participants=2, max_participants=3)
        occupancy = SlotCatalog.occupancy(slot)

        assert occupancy['confirmed'] == 0
        assert occupancy['available_places'] == 3
        assert occupancy['is_full'] is False
        assert occupancy['needs_more'] is True
        assert occupancy['needs_brother'] is False

    def test_needs_brother_without_brother_registered(self):
        slot = SlotFactory()
        RegistrationFactory(slot=slot, volunteer=VolunteerFactory(is_brother=False))

        assert SlotCatalog.occupancy(slot)['needs_brother'] is True

        RegistrationFactory(slot=slot, volunteer=VolunteerFactory(is_brother=True))

        assert SlotCatalog.occupancy(slot)['needs_brother'] is False

    def test_rejected_brother_does_not_count(self):
        slot = SlotFactory()
        RegistrationFactory(slot=slot, volunteer=VolunteerFactory(is_brother=False))
        RegistrationFactory(
            slot=slot,
            volunteer=VolunteerFactory(is_brother=True),
            status=RegistrationStatus.REJECTED,
        )

        assert SlotCatalog.occupancy(slot)['needs_brother'] is True
