''"Tests for core utilities.''"
from datetime import date, datetime, time

import uuid

import pytest
from django.utils import timezone

from apps.core.exceptions import ValidationError
from apps.core.utils import (
    coerce_date,
    coerce_int,
    coerce_time,
    coerce_uuid,
    format_time,
    get_month_range,
    local_today,
    week_of_month,
)


class TestCoerceDate:
    ''"Tests for coerce_date function.''"

    def test_iso_string(self):
        assert coerce_date('2024-03-05') == date(2024, 3, 5)

    def test_datetime_is_truncated(self):
        assert coerce_date(datetime(2024, 3, 5, 22, 30)) == date(2024, 3, 5)

    @pytest.mark.parametrize('value', [None, '', '05/03/2024', '2024-02-30'])
    def test_rejects_bad_values(self, value):
        with pytest.raises(ValidationError) as excinfo:
            coerce_date(value, field='end_date')
        assert excinfo.value.context == {'field': 'end_date'}


class TestCoerceTime:

    def test_parses_hours_minutes(self):
        assert coerce_time('09:30') == time(9, 30)

    def test_rejects_garbage(self):
        with pytest.raises(ValidationError):
            coerce_time('9h30')


class TestMonthRange:
    ''"Tests for get_month_range function.''"

    def test_leap_february(self):
        assert get_month_range(2024, 2) == (date(2024, 2, 1), date(2024, 2, 29))

    def test_december(self):
        assert get_month_range(2023, 12) == (date(2023, 12, 1), date(2023, 12, 31))

    def test_invalid_month(self):
        with pytest.raises(ValidationError):
            get_month_range(2024, 13)

    @pytest.mark.parametrize('year,month', [('abc', 3), (2024, 'mars'), (0, 3), (None, 3)])
    def test_rejects_non_numeric_or_out_of_range(self, year, month):
        with pytest.raises(ValidationError):
            get_month_range(year, month)

    def test_accepts_query_string_numbers(self):
        assert get_month_range('2024', '3') == (date(2024, 3, 1), date(2024, 3, 31))


class TestCoerceIds:

    def test_coerce_int(self):
        assert coerce_int('12', 'year') == 12
        with pytest.raises(ValidationError) as excinfo:
            coerce_int('douze', 'year')
        assert excinfo.value.context == {'field': 'year'}

    def test_coerce_uuid(self):
        value = uuid.uuid4()
        assert coerce_uuid(value, 'activity_type') is value
        assert coerce_uuid(str(value), 'activity_type') == value
        with pytest.raises(ValidationError):
            coerce_uuid('nope', 'activity_type')


@pytest.mark.parametrize('day,expected', [(1, 1), (7, 1), (8, 2), (28, 4), (29, 5)])
def test_week_of_month(day, expected):
    assert week_of_month(date(2024, 1, day)) == expected


def test_format_time():
    assert format_time(time(9, 5, 30)) == '09:05'
    assert format_time(None) == ''


def test_local_today_uses_clock():
    now = timezone.make_aware(datetime(2024, 3, 1, 12, 0))
    assert local_today(lambda: now) == date(2024, 3, 1)
