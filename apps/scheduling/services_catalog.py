"""Slot catalog - create, query, update and deactivate slots."""
import logging

from django.db.models import Count, Q

from apps.core.constants import RegistrationStatus
from apps.core.exceptions import ConflictError, NotFoundError, ValidationError
from apps.core.utils import coerce_date, coerce_time, coerce_uuid, get_month_range

from .models import ActivityType, Slot

logger = logging.getLogger(__name__)


def validate_slot_window(start_time, end_time, min_participants, max_participants):
    """
    Check slot bounds shared by manual creation, updates and generation.

    Returns the normalized (start_time, end_time, min, max) tuple.
    """
    start_time = coerce_time(start_time, 'start_time')
    end_time = coerce_time(end_time, 'end_time')

    try:
        min_participants = int(min_participants)
        max_participants = int(max_participants)
    except (TypeError, ValueError):
        raise ValidationError(
            'Les bornes de participants doivent être des entiers',
            min_participants=min_participants, max_participants=max_participants,
        )

    if min_participants <= 0:
        raise ValidationError(
            'Le minimum de participants doit être positif',
            min_participants=min_participants,
        )
    if min_participants > max_participants:
        raise ValidationError(
            'Le minimum de participants dépasse le maximum',
            min_participants=min_participants, max_participants=max_participants,
        )
    if end_time <= start_time:
        raise ConflictError(
            "L'heure de fin doit être postérieure à l'heure de début",
            start_time=start_time.isoformat(), end_time=end_time.isoformat(),
        )

    return start_time, end_time, min_participants, max_participants


def get_active_activity_type(activity_type_id):
    try:
        return ActivityType.objects.get(pk=activity_type_id)
    except (ActivityType.DoesNotExist, ValueError, TypeError):
        raise NotFoundError("Type d'activité introuvable ou désactivé", activity_type_id=str(activity_type_id))


class SlotCatalog:
    """CRUD and query operations on slots."""

    UPDATABLE_FIELDS = {
        'date', 'start_time', 'end_time', 'min_participants',
        'max_participants', 'notes', 'supervisor', 'activity_type_id',
    }

    @staticmethod
    def list_slots(activity_type_id=None, date_from=None, date_to=None, only_active=True):
        """Slots matching the filters, ordered by date then start time."""
        manager = Slot.objects if only_active else Slot.all_objects
        qs = manager.select_related('activity_type', 'supervisor')

        if activity_type_id:
            qs = qs.filter(activity_type_id=coerce_uuid(activity_type_id, 'activity_type'))
        if date_from:
            date_from = coerce_date(date_from, 'date_from')
            qs = qs.filter(date__gte=date_from)
        if date_to:
            date_to = coerce_date(date_to, 'date_to')
            qs = qs.filter(date__lte=date_to)
        if date_from and date_to and date_from > date_to:
            raise ValidationError('date_from est postérieure à date_to')

        return qs.order_by('date', 'start_time')

    @staticmethod
    def month_slots(year, month, activity_type_id=None):
        """Active slots of a calendar month, for the monthly planning view."""
        start, end = get_month_range(year, month)
        return SlotCatalog.list_slots(activity_type_id, start, end)

    @staticmethod
    def create_slot(activity_type_id, date, start_time, end_time,
                    min_participants, max_participants, notes=None, supervisor=None):
        """
        Create a single slot.

        Raises ValidationError for malformed input or bad participant bounds,
        ConflictError when the end time is not after the start time and
        NotFoundError when the activity type is absent or disabled.
        """
        date = coerce_date(date, 'date')
        start_time, end_time, min_participants, max_participants = validate_slot_window(
            start_time, end_time, min_participants, max_participants,
        )
        activity_type = get_active_activity_type(activity_type_id)

        slot = Slot.objects.create(
            activity_type=activity_type,
            date=date,
            start_time=start_time,
            end_time=end_time,
            min_participants=min_participants,
            max_participants=max_participants,
            notes=notes or '',
            supervisor=supervisor,
        )
        logger.info(
            'Slot %s created for %s on %s %s-%s',
            slot.pk, activity_type.name, date, start_time, end_time,
        )
        return slot

    @staticmethod
    def get_slot(slot_id, include_inactive=False):
        manager = Slot.all_objects if include_inactive else Slot.objects
        try:
            return manager.select_related('activity_type').get(pk=slot_id)
        except (Slot.DoesNotExist, ValueError, TypeError):
            raise NotFoundError('Créneau introuvable', slot_id=str(slot_id))

    @staticmethod
    def deactivate_slot(slot_id):
        """Soft-delete a slot. Idempotent; registrations are left untouched."""
        slot = SlotCatalog.get_slot(slot_id, include_inactive=True)
        if slot.is_active:
            slot.deactivate()
            logger.info('Slot %s deactivated', slot.pk)
        return slot

    @staticmethod
    def update_slot(slot_id, patch, include_inactive=False):
        """Apply `patch` to a slot and re-validate it as on creation."""
        unknown = set(patch) - SlotCatalog.UPDATABLE_FIELDS
        if unknown:
            raise ValidationError(
                'Champs non modifiables: %s' % ', '.join(sorted(unknown)),
                fields=sorted(unknown),
            )

        slot = SlotCatalog.get_slot(slot_id, include_inactive=include_inactive)

        if 'activity_type_id' in patch:
            slot.activity_type = get_active_activity_type(patch['activity_type_id'])
        if 'date' in patch:
            slot.date = coerce_date(patch['date'], 'date')
        if 'notes' in patch:
            slot.notes = patch['notes'] or ''
        if 'supervisor' in patch:
            slot.supervisor = patch['supervisor']

        (
            slot.start_time, slot.end_time,
            slot.min_participants, slot.max_participants,
        ) = validate_slot_window(
            patch.get('start_time', slot.start_time),
            patch.get('end_time', slot.end_time),
            patch.get('min_participants', slot.min_participants),
            patch.get('max_participants', slot.max_participants),
        )

        slot.save()
        logger.info('Slot %s updated (%s)', slot.pk, ', '.join(sorted(patch)))
        return slot

    @staticmethod
    def occupancy(slot):
        """
        Registration counts and remaining capacity for a slot.

        `needs_brother` is set when the slot has open registrations but none
        of them from a brother; a team needs at least one.
        """
        open_registrations = slot.registrations.exclude(status=RegistrationStatus.REJECTED)
        counts = open_registrations.aggregate(
            confirmed=Count('id', filter=Q(status=RegistrationStatus.CONFIRMED)),
            provisional=Count('id', filter=Q(status=RegistrationStatus.PROVISIONAL)),
            pending=Count('id', filter=Q(status=RegistrationStatus.PENDING)),
            brothers=Count('id', filter=Q(volunteer__is_brother=True)),
            open=Count('id'),
        )
        confirmed = counts['confirmed']
        return {
            'slot': str(slot.pk),
            'confirmed': confirmed,
            'provisional': counts['provisional'],
            'pending': counts['pending'],
            'min_participants': slot.min_participants,
            'max_participants': slot.max_participants,
            'available_places': max(0, slot.max_participants - confirmed),
            'is_full': confirmed >= slot.max_participants,
            'needs_more': confirmed < slot.min_participants,
            'needs_brother': counts['open'] > 0 and counts['brothers'] == 0,
        }
