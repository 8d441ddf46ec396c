"""Registration ledger - create, withdraw and count registrations."""
import logging

from django.db import IntegrityError, OperationalError, transaction
from django.utils import timezone

from apps.core.constants import (
    COUNTED_REGISTRATION_STATUSES, NotificationKind, RegistrationStatus, Roles, RuleViolation,
)
from apps.core.exceptions import (
    ConflictError, DatastoreError, DispatchError, ForbiddenError, NotFoundError, RuleViolationError,
)
from apps.core.utils import get_month_range
from apps.members.models import Volunteer
from apps.scheduling.models import Slot

from .models import Registration
from .services_eligibility import EligibilityService

logger = logging.getLogger(__name__)


def registration_context(registration):
    """Template context shared by every registration notification."""
    slot = registration.slot
    return {
        'registration_id': str(registration.pk),
        'slot_id': str(slot.pk),
        'activity': slot.activity_type.name,
        'date': slot.date,
        'start_time': slot.start_time,
        'end_time': slot.end_time,
        'status': registration.status,
    }


def notify_registration(dispatcher, registration, kind):
    """Send a registration notification; a dispatch failure is only logged."""
    if dispatcher is None:
        from apps.communication.services_notifications import DefaultNotificationDispatcher
        dispatcher = DefaultNotificationDispatcher()

    profile = registration.volunteer.profile
    try:
        dispatcher.notify(profile, kind, registration_context(registration))
    except DispatchError as exc:
        logger.error(
            'Notification %s for registration %s failed: %s',
            kind, registration.pk, exc.message,
        )
        return False
    return True


class RegistrationLedger:
    """
    Owns Registration rows.

    `clock` stamps registration times; `dispatcher` receives the provisional
    notice when a registration lands on a full slot.
    """

    def __init__(self, clock=None, dispatcher=None, eligibility=None):
        self.clock = clock or timezone.now
        self.dispatcher = dispatcher
        self.eligibility = eligibility or EligibilityService(ledger=self)

    # ──────────────────────────────────────────────────────────────────────
    # Queries
    # ──────────────────────────────────────────────────────────────────────

    @staticmethod
    def count_for_volunteer_in_month(volunteer_id, year, month):
        """Pending, provisional and confirmed registrations on slots in the month."""
        start, end = get_month_range(year, month)
        return Registration.objects.filter(
            volunteer_id=volunteer_id,
            status__in=COUNTED_REGISTRATION_STATUSES,
            slot__date__range=(start, end),
        ).count()

    @staticmethod
    def has_registration_for_slot(volunteer_id, slot_id):
        return Registration.objects.filter(
            volunteer_id=volunteer_id,
            slot_id=slot_id,
        ).exclude(status=RegistrationStatus.REJECTED).exists()

    @staticmethod
    def registrations_for_volunteer(volunteer_id, year=None, month=None):
        """A volunteer's registrations, by slot date, optionally for one month."""
        qs = Registration.objects.filter(volunteer_id=volunteer_id)
        if year and month:
            start, end = get_month_range(year, month)
            qs = qs.filter(slot__date__range=(start, end))
        return qs.select_related('slot__activity_type').order_by('slot__date', 'slot__start_time')

    # ──────────────────────────────────────────────────────────────────────
    # Commands
    # ──────────────────────────────────────────────────────────────────────

    def register(self, volunteer_id, slot_id, notes=None, force=False, actor=None):
        """
        Register a volunteer on a slot.

        Raises RuleViolationError listing every violated rule. With
        `force=True` an admin `actor` may override the monthly limit; the
        registration is then created provisional. A registration on a full
        slot is created provisional as a replacement, otherwise pending.
        """
        if force and (actor is None or actor.role != Roles.ADMIN):
            raise ForbiddenError(
                "Seul un administrateur peut forcer une inscription",
                volunteer_id=str(volunteer_id), slot_id=str(slot_id),
            )

        try:
            try:
                registration = self._register_once(volunteer_id, slot_id, notes, force)
            except IntegrityError:
                logger.warning(
                    'Concurrent registration of volunteer %s on slot %s; re-checking',
                    volunteer_id, slot_id,
                )
                try:
                    registration = self._register_once(volunteer_id, slot_id, notes, force)
                except IntegrityError:
                    raise ConflictError(
                        'Inscription déjà enregistrée pour ce créneau',
                        volunteer_id=str(volunteer_id), slot_id=str(slot_id),
                    )
        except OperationalError as exc:
            logger.error('Datastore failure registering volunteer %s: %s', volunteer_id, exc)
            raise DatastoreError('Base de données indisponible, réessayez')

        if registration.status == RegistrationStatus.PROVISIONAL:
            notify_registration(self.dispatcher, registration, NotificationKind.INSCRIPTION_PROVISIONAL)
        return registration

    def _register_once(self, volunteer_id, slot_id, notes, force):
        with transaction.atomic():
            try:
                volunteer = Volunteer.objects.select_for_update().get(pk=volunteer_id)
            except (Volunteer.DoesNotExist, ValueError, TypeError):
                raise NotFoundError('Proclamateur introuvable', volunteer_id=str(volunteer_id))
            try:
                slot = Slot.objects.select_related('activity_type').get(pk=slot_id)
            except (Slot.DoesNotExist, ValueError, TypeError):
                raise NotFoundError('Créneau introuvable', slot_id=str(slot_id))

            violations = self.eligibility.evaluate(volunteer.pk, slot.pk)
            blocking = [
                v for v in violations
                if not (force and v in RuleViolation.OVERRIDABLE)
            ]
            if blocking:
                logger.info(
                    'Registration of volunteer %s on slot %s refused: %s',
                    volunteer.pk, slot.pk, violations,
                )
                raise RuleViolationError(violations, volunteer_id=str(volunteer.pk), slot_id=str(slot.pk))

            if force or self.eligibility.is_slot_full(slot):
                status = RegistrationStatus.PROVISIONAL
            else:
                status = RegistrationStatus.PENDING

            now = self.clock()
            registration = Registration.objects.create(
                slot=slot,
                volunteer=volunteer,
                registered_at=now,
                status=status,
                status_changed_at=now,
                notes=notes or '',
            )

        logger.info(
            'Volunteer %s registered on slot %s as %s%s',
            volunteer.pk, slot.pk, status, ' (forced)' if force else '',
        )
        return registration

    def withdraw(self, registration_id, requesting_volunteer_id):
        """Delete a registration; only its owner may withdraw it."""
        try:
            registration = Registration.objects.get(pk=registration_id)
        except (Registration.DoesNotExist, ValueError, TypeError):
            raise NotFoundError('Inscription introuvable', registration_id=str(registration_id))

        if str(registration.volunteer_id) != str(requesting_volunteer_id):
            raise ForbiddenError(
                "Vous ne pouvez pas retirer l'inscription d'un autre proclamateur",
                registration_id=str(registration_id),
            )

        registration.delete()
        logger.info('Registration %s withdrawn by volunteer %s', registration_id, requesting_volunteer_id)
