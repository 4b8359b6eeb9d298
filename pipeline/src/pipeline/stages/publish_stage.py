"""Publish stage: check a generated month and write it to disk."""

from __future__ import annotations

import logging
from pathlib import Path

from starbook.errors import StarbookError
from starbook.schemas.auspicious import MonthData
from starbook.services.month_store import write_month
from starbook.utils import month_dates

logger = logging.getLogger(__name__)


class IncompleteMonthError(StarbookError):
    """A month's day list does not cover its calendar days exactly once, in order."""


def check_month_complete(month_data: MonthData) -> None:
    expected = month_dates(month_data.year, month_data.month)
    actual = [day.calendar_date for day in month_data.days]
    if actual != expected:
        raise IncompleteMonthError(
            f"{month_data.year}-{month_data.month:02d} has {len(actual)} records, "
            f"expected {len(expected)} consecutive days"
        )


def run_publish_stage(month_data: MonthData, output_dir: str | Path) -> Path:
    check_month_complete(month_data)
    return write_month(output_dir, month_data)
