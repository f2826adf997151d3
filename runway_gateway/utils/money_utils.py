"""Numeric coercion and rounding for monetary values"""

import math
from decimal import ROUND_HALF_UP, Decimal
from numbers import Real
from typing import Any


def safe_number(value: Any) -> float:
    """Return value as a float, or 0.0 when it is not a finite real number"""
    if isinstance(value, bool) or not isinstance(value, (Real, Decimal)):
        return 0.0
    value = float(value)
    return value if math.isfinite(value) else 0.0


def round_money(amount: float) -> float:
    """Round to cents, halves away from zero (1.005 -> 1.01)"""
    return float(Decimal(str(amount)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))
