"""Unit tests for date and money helpers"""

import pytest
from datetime import date, datetime, timedelta, timezone
from decimal import Decimal
from runway_gateway.utils.date_utils import (
    calendar_day,
    due_instant,
    from_epoch_millis,
    generate_date_range,
)
from runway_gateway.utils.money_utils import round_money, safe_number


def test_generate_date_range_inclusive():
    days = generate_date_range(date(2026, 2, 27), date(2026, 3, 2))

    assert days == [date(2026, 2, 27), date(2026, 2, 28), date(2026, 3, 1), date(2026, 3, 2)]


def test_calendar_day_uses_reference_zone():
    reference = datetime(2026, 1, 1, 12, 0, tzinfo=timezone(timedelta(hours=-8)))
    instant = datetime(2026, 1, 2, 3, 0, tzinfo=timezone.utc)  # 2026-01-01 19:00 at UTC-8

    assert calendar_day(instant, reference) == date(2026, 1, 1)


def test_calendar_day_naive():
    assert calendar_day(datetime(2026, 1, 2, 23, 59), datetime(2026, 1, 5)) == date(2026, 1, 2)


def test_due_instant_is_local_midnight():
    tz = timezone(timedelta(hours=2))
    reference = datetime(2026, 5, 1, 15, 30, tzinfo=tz)

    assert due_instant(date(2026, 5, 3), reference) == datetime(2026, 5, 3, 0, 0, tzinfo=tz)


def test_from_epoch_millis():
    assert from_epoch_millis(0) == datetime(1970, 1, 1, tzinfo=timezone.utc)
    assert from_epoch_millis(86_400_000 + 500) == datetime(1970, 1, 2, 0, 0, 0, 500_000, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    "value,expected",
    [
        (12, 12.0),
        (3.5, 3.5),
        (Decimal("2.25"), 2.25),
        (float("nan"), 0.0),
        (float("inf"), 0.0),
        (float("-inf"), 0.0),
        (None, 0.0),
        ("100", 0.0),
        (True, 0.0),
    ],
)
def test_safe_number(value, expected):
    assert safe_number(value) == expected


def test_round_money():
    assert round_money(1.005) == 1.01
    assert round_money(-1.005) == -1.01
    assert round_money(333.3333) == 333.33
    assert round_money(0) == 0.0
