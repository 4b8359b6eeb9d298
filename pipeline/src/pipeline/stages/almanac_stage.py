"""Chinese almanac stage."""

from __future__ import annotations

from datetime import date

from almanac.calculator import calculate_almanac
from starbook.schemas.auspicious import ChineseAlmanac


def run_almanac_stage(target_date: date, phase_angle: float) -> ChineseAlmanac:
    return calculate_almanac(target_date, phase_angle)
