"""Recurrence service - expand recurrence rules into concrete slots."""
import logging
from datetime import timedelta

from django.db import transaction
from django.utils import timezone

from apps.core.constants import RecurrenceFrequency
from apps.core.exceptions import ValidationError
from apps.core.utils import coerce_date, local_today, week_of_month

from .models import Slot
from .services_catalog import get_active_activity_type, validate_slot_window

logger = logging.getLogger(__name__)


class RecurrenceService:
    """Generate slots from a weekday/frequency rule or an activity type's stored rule."""

    def __init__(self, clock=None):
        self.clock = clock or timezone.now

    @staticmethod
    def occurrence_dates(weekday, frequency, start_date, end_date):
        """
        Dates produced by a weekday + frequency rule between two bounds.

        The first occurrence is the first `weekday` on or after `start_date`;
        subsequent ones follow every 7, 14 or 28 days. `end_date` is inclusive.
        """
        step = timedelta(days=RecurrenceFrequency.STEP_DAYS[frequency])
        cursor = start_date
        while cursor.weekday() != weekday:
            cursor += timedelta(days=1)

        dates = []
        while cursor <= end_date:
            dates.append(cursor)
            cursor += step
        return dates

    def generate(self, activity_type_id, weekday, start_time, end_time, frequency,
                 end_date, min_participants, max_participants, notes=None, start_date=None):
        """
        Create one slot per occurrence of the rule.

        `weekday` is 0 (Monday) to 6 (Sunday). `start_date` defaults to today.
        Returns the created slots; occurrences already present as an active
        slot with the same window are skipped. All inserts commit together.
        """
        if frequency not in RecurrenceFrequency.STEP_DAYS:
            raise ValidationError('Fréquence inconnue: %s' % frequency, frequency=frequency)
        try:
            weekday = int(weekday)
        except (TypeError, ValueError):
            raise ValidationError('Jour de semaine invalide', weekday=weekday)
        if not 0 <= weekday <= 6:
            raise ValidationError('Jour de semaine invalide', weekday=weekday)

        end_date = coerce_date(end_date, 'end_date')
        if start_date is None:
            start_date = local_today(self.clock)
        else:
            start_date = coerce_date(start_date, 'start_date')
        if end_date < start_date:
            raise ValidationError(
                'La date de fin précède la date de début',
                start_date=start_date.isoformat(), end_date=end_date.isoformat(),
            )

        start_time, end_time, min_participants, max_participants = validate_slot_window(
            start_time, end_time, min_participants, max_participants,
        )
        activity_type = get_active_activity_type(activity_type_id)

        dates = self.occurrence_dates(weekday, frequency, start_date, end_date)
        return self._create_slots(
            activity_type, dates, start_time, end_time,
            min_participants, max_participants, notes,
        )

    def generate_from_activity_type(self, activity_type, start_date, end_date,
                                    min_participants=1, max_participants=3):
        """
        Expand an activity type's stored rule (weekdays x weeks of month).

        Week-of-month is computed as (day - 1) // 7 + 1, so days 29-31 never
        match. Returns [] when recurrence is off or default times are missing.
        """
        if not activity_type.recurrence_enabled:
            return []
        if not activity_type.default_start_time or not activity_type.default_end_time:
            logger.warning(
                'Activity type %s has recurrence enabled but no default times',
                activity_type.pk,
            )
            return []

        start_date = coerce_date(start_date, 'start_date')
        end_date = coerce_date(end_date, 'end_date')
        if end_date < start_date:
            raise ValidationError(
                'La date de fin précède la date de début',
                start_date=start_date.isoformat(), end_date=end_date.isoformat(),
            )

        days = {int(d) for d in activity_type.recurrence_days or []}
        weeks = {int(w) for w in activity_type.recurrence_weeks or []}

        dates = []
        cursor = start_date
        while cursor <= end_date:
            if cursor.weekday() in days and week_of_month(cursor) in weeks:
                dates.append(cursor)
            cursor += timedelta(days=1)

        start_time, end_time, min_participants, max_participants = validate_slot_window(
            activity_type.default_start_time, activity_type.default_end_time,
            min_participants, max_participants,
        )
        return self._create_slots(
            activity_type, dates, start_time, end_time,
            min_participants, max_participants, None,
        )

    def _create_slots(self, activity_type, dates, start_time, end_time,
                      min_participants, max_participants, notes):
        if not dates:
            logger.warning(
                'Recurrence for %s produced no occurrence; nothing created',
                activity_type.name,
            )
            return []

        with transaction.atomic():
            existing = set(
                Slot.objects.filter(
                    activity_type=activity_type,
                    date__in=dates,
                    start_time=start_time,
                    end_time=end_time,
                ).values_list('date', flat=True)
            )
            slots = [
                Slot(
                    activity_type=activity_type,
                    date=day,
                    start_time=start_time,
                    end_time=end_time,
                    min_participants=min_participants,
                    max_participants=max_participants,
                    notes=notes or '',
                )
                for day in dates if day not in existing
            ]
            created = Slot.objects.bulk_create(slots)

        logger.info(
            'Generated %d slots for %s (%d already present)',
            len(created), activity_type.name, len(existing),
        )
        return created
