"""Day pillar, Day Officer and approximate lunar date from a Gregorian date.

Everything here is closed-form arithmetic over the tables in
``almanac.tables``; no ephemeris is consulted except the Moon phase angle
passed in for the lunar day.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import NamedTuple

from starbook.schemas.auspicious import ChineseAlmanac
from starbook.utils import round_half_up_int

from almanac.tables import (
    ANIMALS,
    CLASH_ANIMALS,
    DAY_OFFICERS,
    EARTHLY_BRANCHES,
    EARTHLY_BRANCHES_EN,
    ELEMENTS,
    HEAVENLY_STEMS,
    HEAVENLY_STEMS_EN,
    LUNAR_DAY_NAMES,
    LUNAR_MONTH_NAMES,
    MONTH_BRANCHES,
    DayOfficer,
)

logger = logging.getLogger(__name__)

SYNODIC_MONTH_DAYS = 29.5


def julian_day_number(day: date) -> int:
    """Julian Day Number (noon-referenced) for a proleptic Gregorian date."""
    a = (14 - day.month) // 12
    y = day.year + 4800 - a
    m = day.month + 12 * a - 3
    return day.day + (153 * m + 2) // 5 + 365 * y + y // 4 - y // 100 + y // 400 - 32045


# 2019-02-05 is taken as a 甲子 day (stem 0, branch 0)
REFERENCE_DATE = date(2019, 2, 5)
REFERENCE_JDN = julian_day_number(REFERENCE_DATE)


class DayPillar(NamedTuple):
    stem_index: int
    branch_index: int

    @property
    def stem(self) -> str:
        return HEAVENLY_STEMS[self.stem_index]

    @property
    def branch(self) -> str:
        return EARTHLY_BRANCHES[self.branch_index]

    @property
    def glyphs(self) -> str:
        return f"{self.stem}{self.branch}"

    @property
    def romanized(self) -> str:
        return f"{HEAVENLY_STEMS_EN[self.stem_index]}-{EARTHLY_BRANCHES_EN[self.branch_index]}"


def day_pillar(day: date) -> DayPillar:
    days_diff = julian_day_number(day) - REFERENCE_JDN
    return DayPillar(days_diff % 10, days_diff % 12)


def month_branch(month: int) -> int:
    """Branch index of the solar month containing most of a Gregorian month."""
    return MONTH_BRANCHES[month - 1]


def officer_index(branch_index: int, month_branch_index: int) -> int:
    return (branch_index - month_branch_index + 12) % 12


def day_officer(day: date) -> DayOfficer:
    return DAY_OFFICERS[officer_index(day_pillar(day).branch_index, month_branch(day.month))]


def lunar_day(phase_angle: float) -> int:
    """Approximate lunar day-of-month (1-30) from the Moon phase angle."""
    value = round_half_up_int(phase_angle / 360.0 * SYNODIC_MONTH_DAYS) + 1
    return max(1, min(30, value))


def lunar_month(day: date) -> int:
    """Coarse lunar month number (1-12) from the Gregorian month and day."""
    if day.month == 1:
        # Early January still belongs to the previous year's twelfth month
        return 12 if day.day < 20 else 1
    value = (day.month - 1) + (0 if day.day < 15 else 1)
    return max(1, min(12, value))


def approximate_lunar_date(day: date, phase_angle: float) -> str:
    """Render e.g. ``正月十五``. Not a true lunisolar conversion."""
    return f"{LUNAR_MONTH_NAMES[lunar_month(day)]}{LUNAR_DAY_NAMES[lunar_day(phase_angle)]}"


def calculate_almanac(target_date: date, phase_angle: float) -> ChineseAlmanac:
    """Build the almanac entry for a date.

    Args:
        target_date: Gregorian calendar date
        phase_angle: Moon phase angle at noon UTC, used only for the lunar day
    """
    pillar = day_pillar(target_date)
    officer = DAY_OFFICERS[officer_index(pillar.branch_index, month_branch(target_date.month))]

    logger.debug("Almanac for %s: %s (%s) officer=%s", target_date, pillar.glyphs, pillar.romanized, officer.english)

    return ChineseAlmanac(
        lunar_date=approximate_lunar_date(target_date, phase_angle),
        heavenly_stem=pillar.stem,
        earthly_branch=pillar.branch,
        stem_branch_day=pillar.glyphs,
        day_officer=officer.english,
        day_officer_chinese=officer.chinese,
        auspicious_activities=list(officer.auspicious),
        inauspicious_activities=list(officer.inauspicious),
        element=ELEMENTS[pillar.stem_index],
        animal_day=ANIMALS[pillar.branch_index],
        clash_animal=CLASH_ANIMALS[pillar.branch_index],
    )
