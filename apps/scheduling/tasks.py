"""Celery tasks for automatic slot creation."""
import logging

from celery import shared_task
from dateutil.relativedelta import relativedelta
from django.utils import timezone

from apps.core.utils import get_month_range

logger = logging.getLogger(__name__)


@shared_task
def generate_recurring_slots():
    """Create next month's slots for every activity type with auto-creation on."""
    from .models import ActivityType
    from .services_recurrence import RecurrenceService

    next_month = timezone.localdate() + relativedelta(months=1)
    start, end = get_month_range(next_month.year, next_month.month)

    service = RecurrenceService()
    total_created = 0

    activity_types = ActivityType.objects.filter(
        auto_create_slots=True,
        recurrence_enabled=True,
    )
    for activity_type in activity_types:
        created = service.generate_from_activity_type(activity_type, start, end)
        total_created += len(created)

    logger.info('Created %d recurring slots for %s-%02d', total_created, start.year, start.month)
    return total_created
