"""Lookup of tunable domain limits: Parameter table first, then Django settings."""
import logging

from django.conf import settings

logger = logging.getLogger(__name__)

MONTHLY_LIMIT = 'REGISTRATION_MONTHLY_LIMIT'
PRIORITY_HIGH_MAX = 'PRIORITY_HIGH_MAX'
PRIORITY_MEDIUM_MAX = 'PRIORITY_MEDIUM_MAX'
PROVISIONAL_CONFIRM_DAYS = 'REGISTRATION_PROVISIONAL_CONFIRM_DAYS'

DEFAULTS = {
    MONTHLY_LIMIT: 2,
    PRIORITY_HIGH_MAX: 2,
    PRIORITY_MEDIUM_MAX: 4,
    PROVISIONAL_CONFIRM_DAYS: 3,
}


def get_int_parameter(key):
    """
    Return the integer value configured for `key`.

    An active Parameter row with the same key wins over the Django setting;
    a row whose value is not an integer is ignored with a warning.
    """
    from .models import Parameter

    fallback = getattr(settings, key, DEFAULTS[key])
    row = Parameter.objects.filter(key=key).values_list('value', flat=True).first()
    if row is None:
        return fallback

    try:
        return int(row)
    except (TypeError, ValueError):
        logger.warning('Parameter %s has non-integer value %r; using %s', key, row, fallback)
        return fallback


def monthly_limit():
    return get_int_parameter(MONTHLY_LIMIT)


def priority_thresholds():
    """Return (high_max, medium_max) registration counts."""
    return get_int_parameter(PRIORITY_HIGH_MAX), get_int_parameter(PRIORITY_MEDIUM_MAX)


def provisional_confirm_days():
    return get_int_parameter(PROVISIONAL_CONFIRM_DAYS)
