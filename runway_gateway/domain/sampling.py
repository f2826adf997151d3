"""Daily spend extraction - turns irregular expense events into a dense daily series"""

from datetime import date, datetime
from typing import Dict, Iterable, List

from runway_gateway.domain.models import Transaction, TransactionKind
from runway_gateway.utils.date_utils import calendar_day, generate_date_range

MIN_SAMPLING_DAYS = 5
PADDING_ZEROS = 3


def extract_daily_vector(transactions: Iterable[Transaction], now: datetime) -> List[float]:
    """
    Build the zero-filled daily expense series used for resampling.

    Requirements:
    - Only expenses at or before `now` count
    - One entry per calendar day from the first expense's day through `now`'s day
    - Same-day expenses are summed, days without expenses are 0

    Returns an empty list when there is no qualifying expense.
    """
    expenses = [
        t for t in transactions
        if t.kind == TransactionKind.EXPENSE and t.timestamp <= now
    ]
    if not expenses:
        return []

    # Bucket by calendar day
    spend_by_date: Dict[date, float] = {}
    for txn in expenses:
        day = calendar_day(txn.timestamp, now)
        spend_by_date[day] = spend_by_date.get(day, 0.0) + txn.amount

    first_day = min(spend_by_date)
    last_day = calendar_day(now, now)

    # Zero-fill; buckets outside the window are dropped
    return [spend_by_date.get(day, 0.0) for day in generate_date_range(first_day, max(first_day, last_day))]


def calculate_burn_rate(vector: List[float]) -> float:
    """Average daily spend over the observed window"""
    if not vector:
        return 0.0
    return sum(vector) / len(vector)


def build_sampling_vector(vector: List[float]) -> List[float]:
    """
    Pad short histories before resampling.

    With fewer than 5 days observed, resampling would keep redrawing the same
    one or two values. The vector is extended with its own mean and three idle
    days. Burn rate reporting keeps using the unpadded vector.
    """
    if len(vector) >= MIN_SAMPLING_DAYS:
        return list(vector)
    return list(vector) + [calculate_burn_rate(vector)] + [0.0] * PADDING_ZEROS
