"""Celery tasks for communication app."""
import logging

from celery import shared_task

logger = logging.getLogger(__name__)


@shared_task
def send_notification_email(notification_id):
    """E-mail the content of an in-app notification to its profile."""
    from django.conf import settings
    from django.core.mail import send_mail
    from django.utils import timezone
    from .models import Notification

    notification = Notification.objects.select_related('profile').filter(pk=notification_id).first()
    if notification is None:
        logger.warning('Notification %s not found; e-mail skipped', notification_id)
        return False

    recipient = notification.profile.email
    if not recipient:
        logger.info('Profile %s has no e-mail; notification %s kept in-app only',
                    notification.profile_id, notification_id)
        return False

    send_mail(
        subject=notification.title,
        message=notification.message,
        from_email=settings.DEFAULT_FROM_EMAIL,
        recipient_list=[recipient],
    )
    notification.email_sent_at = timezone.now()
    notification.save(update_fields=['email_sent_at', 'updated_at'])

    logger.info('Notification %s e-mailed to %s', notification_id, recipient)
    return True
