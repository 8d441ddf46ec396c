"""Tests for eligibility rules, priority tiers and the pending queue."""
from datetime import date, datetime, time, timedelta

import pytest
from django.utils import timezone

from apps.core import parameters
from apps.core.constants import PRIORITY_RANK, PriorityTier, RegistrationStatus, RuleViolation
from apps.core.models import Parameter
from apps.members.tests.factories import VolunteerFactory
from apps.registrations.services_eligibility import EligibilityService
from apps.scheduling.tests.factories import ActivityTypeFactory, SlotFactory

from .factories import RegistrationFactory

pytestmark = pytest.mark.django_db


def register_in_march(volunteer, count, status=RegistrationStatus.CONFIRMED):
    for day in range(count):
        RegistrationFactory(
            volunteer=volunteer,
            slot=SlotFactory(date=date(2024, 3, day + 1)),
            status=status,
        )


class TestEvaluate:

    def test_no_violation(self):
        assert EligibilityService().evaluate(VolunteerFactory().pk, SlotFactory().pk) == []

    def test_monthly_limit(self):
        volunteer = VolunteerFactory()
        register_in_march(volunteer, 2)
        slot = SlotFactory(date=date(2024, 3, 20))

        assert EligibilityService().evaluate(volunteer.pk, slot.pk) == [RuleViolation.MONTHLY_LIMIT_REACHED]

    def test_rejected_registrations_do_not_count(self):
        volunteer = VolunteerFactory()
        register_in_march(volunteer, 3, status=RegistrationStatus.REJECTED)
        slot = SlotFactory(date=date(2024, 3, 20))

        assert EligibilityService().evaluate(volunteer.pk, slot.pk) == []

    def test_limit_follows_parameter_row(self):
        volunteer = VolunteerFactory()
        register_in_march(volunteer, 2)
        slot = SlotFactory(date=date(2024, 3, 20))
        Parameter.objects.create(key=parameters.MONTHLY_LIMIT, value='3')

        assert EligibilityService().evaluate(volunteer.pk, slot.pk) == []

    def test_invalid_parameter_value_falls_back_to_setting(self):
        volunteer = VolunteerFactory()
        register_in_march(volunteer, 2)
        slot = SlotFactory(date=date(2024, 3, 20))
        Parameter.objects.create(key=parameters.MONTHLY_LIMIT, value='beaucoup')

        assert EligibilityService().evaluate(volunteer.pk, slot.pk) == [RuleViolation.MONTHLY_LIMIT_REACHED]


class TestIsSlotFull:

    def test_full_when_confirmed_reaches_max(self):
        slot = SlotFactory(max_participants=2)
        RegistrationFactory(slot=slot, status=RegistrationStatus.CONFIRMED)
        assert EligibilityService.is_slot_full(slot) is False

        RegistrationFactory(slot=slot, status=RegistrationStatus.CONFIRMED)
        assert EligibilityService.is_slot_full(slot) is True

    def test_provisional_and_pending_do_not_fill(self):
        slot = SlotFactory(max_participants=1)
        RegistrationFactory(slot=slot, status=RegistrationStatus.PROVISIONAL)
        RegistrationFactory(slot=slot, status=RegistrationStatus.PENDING)
        assert EligibilityService.is_slot_full(slot) is False


class TestPriority:

    @pytest.mark.parametrize('count,expected', [
        (0, PriorityTier.HIGH),
        (2, PriorityTier.HIGH),
        (3, PriorityTier.MEDIUM),
        (4, PriorityTier.MEDIUM),
        (5, PriorityTier.LOW),
    ])
    def test_tiers(self, count, expected):
        volunteer = VolunteerFactory()
        register_in_march(volunteer, count)
        assert EligibilityService().priority(volunteer.pk, 3, 2024) == expected

    def test_monotonic_in_count(self):
        tiers = [EligibilityService.tier_for_count(count) for count in range(10)]
        ranks = [PRIORITY_RANK[tier] for tier in tiers]
        assert ranks == sorted(ranks)


class TestPendingQueue:

    def test_ordered_by_tier_then_slot_date_then_time(self):
        activity_type = ActivityTypeFactory()
        busy = VolunteerFactory()
        register_in_march(busy, 4)
        now = timezone.make_aware(datetime(2024, 2, 1, 9, 0))

        late_slot = SlotFactory(activity_type=activity_type, date=date(2024, 3, 25))
        early_slot = SlotFactory(activity_type=activity_type, date=date(2024, 3, 10))

        busy_pending = RegistrationFactory(volunteer=busy, slot=early_slot, registered_at=now)
        late = RegistrationFactory(slot=late_slot, registered_at=now)
        early_second = RegistrationFactory(slot=early_slot, registered_at=now + timedelta(hours=2))
        early_first = RegistrationFactory(
            slot=early_slot, registered_at=now + timedelta(hours=1),
            status=RegistrationStatus.PROVISIONAL,
        )
        RegistrationFactory(slot=early_slot, status=RegistrationStatus.CONFIRMED)

        queue = EligibilityService().pending_queue(activity_type.pk)

        assert queue == [early_first, early_second, late, busy_pending]
        assert queue[0].priority == PriorityTier.HIGH
        assert queue[-1].priority == PriorityTier.LOW

    def test_inactive_slots_are_left_out(self):
        RegistrationFactory(slot=SlotFactory(is_active=False))
        assert EligibilityService().pending_queue() == []

    def test_same_day_ordered_by_start_time(self):
        activity_type = ActivityTypeFactory()
        afternoon = SlotFactory(activity_type=activity_type, date=date(2024, 3, 10),
                                start_time=time(14, 0), end_time=time(16, 0))
        morning = SlotFactory(activity_type=activity_type, date=date(2024, 3, 10))
        second = RegistrationFactory(slot=afternoon)
        first = RegistrationFactory(slot=morning)

        assert EligibilityService().pending_queue(activity_type.pk) == [first, second]
