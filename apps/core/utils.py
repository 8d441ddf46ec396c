"""Utility functions for date/time parsing, month ranges, and formatting."""
from __future__ import annotations

import uuid
from datetime import date, datetime, time, timedelta
from typing import Callable, Optional, Union

from django.utils import timezone
from django.utils.dateparse import parse_date, parse_time

from .exceptions import ValidationError

Clock = Callable[[], datetime]


def local_today(clock: Optional[Clock] = None) -> date:
    """Today's date in the project time zone, according to `clock`."""
    now = (clock or timezone.now)()
    if timezone.is_aware(now):
        return timezone.localdate(now)
    return now.date()


def coerce_date(value: Union[date, str, None], field: str = 'date') -> date:
    """
    Return `value` as a date.

    Accepts a date (datetimes are truncated) or an ISO 'YYYY-MM-DD' string.
    Raises ValidationError for anything missing or unparseable.
    """
    if value is None or value == '':
        raise ValidationError(f'{field} est requis', field=field)
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        parsed = parse_date(str(value))
    except ValueError:
        parsed = None
    if parsed is None:
        raise ValidationError(f'{field} invalide: {value!r}', field=field)
    return parsed


def coerce_time(value: Union[time, str, None], field: str = 'time') -> time:
    """Return `value` as a wall-clock time; accepts time or 'HH:MM[:SS]'."""
    if value is None or value == '':
        raise ValidationError(f'{field} est requis', field=field)
    if isinstance(value, time):
        return value
    try:
        parsed = parse_time(str(value))
    except ValueError:
        parsed = None
    if parsed is None:
        raise ValidationError(f'{field} invalide: {value!r}', field=field)
    return parsed


def coerce_int(value: Union[int, str, None], field: str) -> int:
    """Return `value` as an int; raises ValidationError when it is not one."""
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f'{field} invalide: {value!r}', field=field)


def coerce_uuid(value: Union[uuid.UUID, str, None], field: str) -> uuid.UUID:
    """Return `value` as a UUID; raises ValidationError when it is not one."""
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value))
    except (TypeError, ValueError, AttributeError):
        raise ValidationError(f'{field} invalide: {value!r}', field=field)


def get_month_range(year: int, month: int) -> tuple[date, date]:
    """Get first-last day date range for a calendar month."""
    year = coerce_int(year, 'year')
    month = coerce_int(month, 'month')
    if not 1 <= month <= 12:
        raise ValidationError(f'Mois invalide: {month}', field='month')
    if not 1 <= year <= 9999:
        raise ValidationError(f'Année invalide: {year}', field='year')

    start = date(year, month, 1)
    if start.month == 12:
        end = start.replace(day=31)
    else:
        end = start.replace(month=start.month + 1, day=1) - timedelta(days=1)

    return start, end


def week_of_month(day: date) -> int:
    """Week-of-month number: days 1-7 -> 1, 8-14 -> 2, ..., 29-31 -> 5."""
    return (day.day - 1) // 7 + 1


def format_time(value: Optional[time]) -> str:
    """Format a time as HH:MM (seconds dropped)."""
    if not value:
        return ''
    return value.strftime('%H:%M')
