"""Celery tasks for the registration workflow."""
import logging
from datetime import timedelta

from celery import shared_task
from django.utils import timezone

from apps.core import parameters
from apps.core.constants import RegistrationStatus
from apps.core.exceptions import PlanningError

logger = logging.getLogger(__name__)


@shared_task
def confirm_provisional_registrations():
    """
    Confirm provisional registrations once their slot is close.

    Slots starting within the configured number of days get their
    provisional registrations confirmed, oldest first, while places remain.
    """
    from apps.scheduling.models import Slot
    from .models import Registration
    from .services_approval import ApprovalService

    today = timezone.localdate()
    horizon = today + timedelta(days=parameters.provisional_confirm_days())

    slots = Slot.objects.filter(
        date__gte=today,
        date__lte=horizon,
        registrations__status=RegistrationStatus.PROVISIONAL,
    ).distinct()

    service = ApprovalService()
    total_confirmed = 0

    for slot in slots:
        confirmed = Registration.objects.filter(slot=slot, status=RegistrationStatus.CONFIRMED).count()
        places = slot.max_participants - confirmed
        if places <= 0:
            continue

        provisional = Registration.objects.filter(
            slot=slot,
            status=RegistrationStatus.PROVISIONAL,
        ).order_by('registered_at')[:places]

        for registration in provisional:
            try:
                service.approve(registration.pk)
            except PlanningError as exc:
                logger.warning('Auto-confirmation of registration %s skipped: %s', registration.pk, exc.message)
                continue
            total_confirmed += 1

    logger.info('Confirmed %d provisional registrations up to %s', total_confirmed, horizon)
    return total_confirmed
