"""Eligibility rules and priority tiers for registrations."""
import logging
from collections import Counter

from apps.core import parameters
from apps.core.constants import (
    COUNTED_REGISTRATION_STATUSES, PRIORITY_RANK, REVIEWABLE_REGISTRATION_STATUSES,
    PriorityTier, RegistrationStatus, RuleViolation,
)
from apps.core.exceptions import NotFoundError
from apps.core.utils import coerce_uuid
from apps.scheduling.models import Slot

from .models import Registration

logger = logging.getLogger(__name__)


class EligibilityService:
    """
    Decide whether a volunteer may register on a slot, and how urgently a
    pending registration should be reviewed.
    """

    def __init__(self, ledger=None):
        if ledger is None:
            from .services_ledger import RegistrationLedger
            ledger = RegistrationLedger(eligibility=self)
        self.ledger = ledger

    def evaluate(self, volunteer_id, slot_id):
        """
        Return every violated rule name for (volunteer, slot).

        Rules are always all evaluated, in a fixed order, so the caller sees
        the complete list. An empty list means the registration may proceed.
        """
        try:
            slot = Slot.all_objects.only('date').get(pk=slot_id)
        except (Slot.DoesNotExist, ValueError, TypeError):
            raise NotFoundError('Créneau introuvable', slot_id=str(slot_id))

        violations = []

        count = self.ledger.count_for_volunteer_in_month(volunteer_id, slot.date.year, slot.date.month)
        if count >= parameters.monthly_limit():
            violations.append(RuleViolation.MONTHLY_LIMIT_REACHED)

        if self.ledger.has_registration_for_slot(volunteer_id, slot_id):
            violations.append(RuleViolation.ALREADY_REGISTERED)

        if violations:
            logger.debug('Volunteer %s on slot %s violates %s', volunteer_id, slot_id, violations)
        return violations

    @staticmethod
    def is_slot_full(slot):
        """A slot is full once confirmed registrations reach max_participants."""
        confirmed = Registration.objects.filter(
            slot=slot,
            status=RegistrationStatus.CONFIRMED,
        ).count()
        return confirmed >= slot.max_participants

    @staticmethod
    def tier_for_count(count, thresholds=None):
        high_max, medium_max = thresholds or parameters.priority_thresholds()
        if count <= high_max:
            return PriorityTier.HIGH
        if count <= medium_max:
            return PriorityTier.MEDIUM
        return PriorityTier.LOW

    def priority(self, volunteer_id, month, year):
        """Priority tier from the volunteer's registration count for the month."""
        count = self.ledger.count_for_volunteer_in_month(volunteer_id, year, month)
        return self.tier_for_count(count)

    def pending_queue(self, activity_type_id=None):
        """
        Registrations awaiting a decision, most urgent first.

        Ordered by priority tier (high first), then slot date, then
        registration time. Each registration carries a `priority` attribute.
        """
        qs = Registration.objects.filter(
            status__in=REVIEWABLE_REGISTRATION_STATUSES,
            slot__is_active=True,
        ).select_related('slot__activity_type', 'volunteer__profile')
        if activity_type_id:
            qs = qs.filter(slot__activity_type_id=coerce_uuid(activity_type_id, 'activity_type'))
        queue = list(qs)

        volunteer_ids = {r.volunteer_id for r in queue}
        counts = Counter()
        rows = Registration.objects.filter(
            volunteer_id__in=volunteer_ids,
            status__in=COUNTED_REGISTRATION_STATUSES,
        ).values_list('volunteer_id', 'slot__date')
        for volunteer_id, slot_date in rows:
            counts[(volunteer_id, slot_date.year, slot_date.month)] += 1

        thresholds = parameters.priority_thresholds()
        for registration in queue:
            slot_date = registration.slot.date
            registration.priority = self.tier_for_count(
                counts[(registration.volunteer_id, slot_date.year, slot_date.month)],
                thresholds,
            )

        queue.sort(key=lambda r: (
            PRIORITY_RANK[r.priority], r.slot.date, r.slot.start_time, r.registered_at,
        ))
        return queue
