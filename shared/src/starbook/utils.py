"""Small numeric and calendar helpers shared by the calculators."""

from __future__ import annotations

import calendar
import math
from datetime import date, timedelta

from starbook.errors import validate_date


def round_half_up(value: float, digits: int = 0) -> float:
    """Round with .5 going up (toward +inf), unlike the built-in ``round``."""
    factor = 10.0 ** digits
    return math.floor(value * factor + 0.5) / factor


def round_half_up_int(value: float) -> int:
    return int(math.floor(value + 0.5))


def month_dates(year: int, month: int) -> list[date]:
    """Every calendar day of a month, ascending."""
    first = validate_date(year, month, 1)
    _, days_in_month = calendar.monthrange(first.year, first.month)
    return [first + timedelta(days=offset) for offset in range(days_in_month)]
