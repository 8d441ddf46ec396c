"""Approval workflow for registrations: confirm, hold as provisional, or reject."""
import logging

from django.db import transaction
from django.utils import timezone

from apps.core.constants import NotificationKind, RegistrationStatus, Roles
from apps.core.exceptions import ForbiddenError, InvalidTransitionError, NotFoundError

from .models import Registration
from .services_ledger import notify_registration

logger = logging.getLogger(__name__)


# Confirmed and rejected are terminal
ALLOWED_TRANSITIONS = {
    RegistrationStatus.PENDING: {
        RegistrationStatus.CONFIRMED,
        RegistrationStatus.PROVISIONAL,
        RegistrationStatus.REJECTED,
    },
    RegistrationStatus.PROVISIONAL: {
        RegistrationStatus.CONFIRMED,
        RegistrationStatus.REJECTED,
    },
    RegistrationStatus.CONFIRMED: set(),
    RegistrationStatus.REJECTED: set(),
}

NOTIFICATION_KINDS = {
    RegistrationStatus.CONFIRMED: NotificationKind.INSCRIPTION_CONFIRMED,
    RegistrationStatus.PROVISIONAL: NotificationKind.INSCRIPTION_PROVISIONAL,
    RegistrationStatus.REJECTED: NotificationKind.INSCRIPTION_REJECTED,
}


class ApprovalService:
    """
    Moves registrations through their lifecycle.

    The status change commits before the volunteer is notified; a failed
    notification is logged and never undoes the change.
    """

    def __init__(self, dispatcher=None, clock=None):
        self.dispatcher = dispatcher
        self.clock = clock or timezone.now

    def approve(self, registration_id, actor=None):
        return self.transition(registration_id, RegistrationStatus.CONFIRMED, actor)

    def mark_provisional(self, registration_id, actor=None):
        return self.transition(registration_id, RegistrationStatus.PROVISIONAL, actor)

    def reject(self, registration_id, actor=None):
        """Reject a registration; the row is kept with status rejected."""
        return self.transition(registration_id, RegistrationStatus.REJECTED, actor)

    @staticmethod
    def can_review(actor, registration):
        """Admins, supervisors and the activity type's approver may decide."""
        if actor.role in Roles.STAFF_ROLES:
            return True
        return registration.slot.activity_type.approver_id == actor.pk

    def transition(self, registration_id, target, actor=None):
        """Move a registration to `target`, enforcing the allowed transitions."""
        with transaction.atomic():
            try:
                registration = Registration.objects.select_for_update().get(pk=registration_id)
            except (Registration.DoesNotExist, ValueError, TypeError):
                raise NotFoundError('Inscription introuvable', registration_id=str(registration_id))

            if actor is not None and not self.can_review(actor, registration):
                raise ForbiddenError(
                    "Vous n'êtes pas valideur pour cette activité",
                    registration_id=str(registration.pk),
                )

            current = registration.status
            if target not in ALLOWED_TRANSITIONS[current]:
                raise InvalidTransitionError(
                    'Transition %s -> %s interdite' % (current, target),
                    registration_id=str(registration.pk), current=current, target=target,
                )

            registration.status = target
            registration.status_changed_at = self.clock()
            registration.save(update_fields=['status', 'status_changed_at', 'updated_at'])

        logger.info(
            'Registration %s: %s -> %s (by %s)',
            registration.pk, current, target, actor.pk if actor else 'system',
        )
        notify_registration(self.dispatcher, registration, NOTIFICATION_KINDS[target])
        return registration
