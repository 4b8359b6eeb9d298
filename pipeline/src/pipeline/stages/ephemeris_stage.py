"""Ephemeris calculation stage."""

from __future__ import annotations

import logging
from datetime import date

from starbook.schemas.auspicious import WesternDay

logger = logging.getLogger(__name__)


def run_ephemeris_stage(target_date: date, voc_offset_hours: float | None = None) -> tuple[WesternDay, float]:
    """Return the Western fields for a day and the raw noon Moon phase angle."""
    from ephemeris.calculator import calculate_day_with_phase

    return calculate_day_with_phase(target_date, voc_offset_hours=voc_offset_hours)
