"""Date manipulation utilities"""

from datetime import date, datetime, time, timedelta, timezone, tzinfo
from typing import List


def generate_date_range(start: date, end: date) -> List[date]:
    """Generate list of dates from start to end (inclusive)"""
    days = (end - start).days + 1
    return [start + timedelta(days=i) for i in range(days)]


def calendar_day(instant: datetime, reference: datetime) -> date:
    """Calendar day of an instant, read in the reference instant's timezone"""
    if instant.tzinfo is not None and reference.tzinfo is not None:
        instant = instant.astimezone(reference.tzinfo)
    return instant.date()


def due_instant(due_date: date, reference: datetime) -> datetime:
    """Midnight of a due date in the reference instant's timezone"""
    return datetime.combine(due_date, time.min, tzinfo=reference.tzinfo)


def from_epoch_millis(millis: int, tz: tzinfo = timezone.utc) -> datetime:
    """Convert milliseconds since the Unix epoch to an aware datetime"""
    return datetime.fromtimestamp(millis / 1000, tz=tz)
