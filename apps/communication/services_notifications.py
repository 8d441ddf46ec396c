"""
Notification dispatch for registration status changes.

`NotificationDispatcher` is the contract the registration services depend on;
`DefaultNotificationDispatcher` stores an in-app Notification and queues the
e-mail copy through Celery.
"""
import logging

from django.db import DatabaseError

from apps.core import parameters
from apps.core.constants import NotificationKind
from apps.core.exceptions import DispatchError
from apps.core.utils import format_time

from .models import Notification

logger = logging.getLogger(__name__)


SUBJECTS = {
    NotificationKind.INSCRIPTION_CONFIRMED: '✅ Inscription confirmée',
    NotificationKind.INSCRIPTION_REJECTED: '❌ Inscription refusée',
    NotificationKind.INSCRIPTION_PROVISIONAL: '⏰ Inscription provisoire',
}

BODIES = {
    NotificationKind.INSCRIPTION_CONFIRMED: (
        'Bonjour {name},\n\n'
        'Votre inscription pour l\'activité "{activity}" le {date} de {time} a été confirmée.\n\n'
        'Vous pouvez consulter vos inscriptions dans votre espace personnel.\n\n'
        'À bientôt !'
    ),
    NotificationKind.INSCRIPTION_REJECTED: (
        'Bonjour {name},\n\n'
        'Nous vous informons que votre inscription pour l\'activité "{activity}" le {date} '
        'de {time} n\'a pas pu être acceptée.\n\n'
        'N\'hésitez pas à vous inscrire pour d\'autres créneaux disponibles.\n\n'
        'Cordialement'
    ),
    NotificationKind.INSCRIPTION_PROVISIONAL: (
        'Bonjour {name},\n\n'
        'Votre inscription pour l\'activité "{activity}" le {date} de {time} a été mise en '
        'statut provisoire.\n\n'
        'Elle sera automatiquement confirmée {days} jours avant l\'activité si aucune autre '
        'inscription n\'est reçue.\n\n'
        'Cordialement'
    ),
}


class NotificationDispatcher:
    """Contract: deliver a notification of `kind` to `profile` or raise DispatchError."""

    def notify(self, profile, kind, context):
        raise NotImplementedError


def render_notification(profile, kind, context):
    """Return (subject, message) for a registration notification."""
    if kind not in SUBJECTS:
        raise DispatchError('Type de notification inconnu: %s' % kind, kind=kind)

    slot_date = context.get('date')
    message = BODIES[kind].format(
        name=profile.full_name,
        activity=context.get('activity', ''),
        date=slot_date.strftime('%d/%m/%Y') if slot_date else '',
        time='%s - %s' % (format_time(context.get('start_time')), format_time(context.get('end_time'))),
        days=parameters.provisional_confirm_days(),
    )
    return SUBJECTS[kind], message


class DefaultNotificationDispatcher(NotificationDispatcher):
    """In-app notification plus a queued e-mail."""

    def notify(self, profile, kind, context):
        from .tasks import send_notification_email

        subject, message = render_notification(profile, kind, context)
        slot_date = context.get('date')

        try:
            notification = Notification.objects.create(
                profile=profile,
                title=subject,
                message=message,
                kind=kind,
                metadata={
                    'registration_id': context.get('registration_id'),
                    'activity_type': context.get('activity'),
                    'date': slot_date.isoformat() if slot_date else None,
                    'status': kind,
                },
            )
        except DatabaseError as exc:
            raise DispatchError('Notification non enregistrée: %s' % exc, kind=kind)

        try:
            send_notification_email.delay(str(notification.pk))
        except Exception as exc:  # broker errors vary by transport
            raise DispatchError("Envoi du courriel impossible: %s" % exc, kind=kind)

        logger.info('Notification %s (%s) queued for profile %s', notification.pk, kind, profile.pk)
        return notification
