"""Lunar phase and void-of-course calculations."""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from datetime import UTC, date, datetime, timedelta

from starbook.schemas.auspicious import MoonPhaseData, MoonPhaseName, VoidOfCourseMoon
from starbook.utils import round_half_up

from ephemeris.bodies import normalize_angle, sign_index

logger = logging.getLogger(__name__)

# Upper bounds (exclusive) of each named band, checked in order after New Moon
PHASE_BANDS: tuple[tuple[float, MoonPhaseName], ...] = (
    (85.0, MoonPhaseName.WAXING_CRESCENT),
    (95.0, MoonPhaseName.FIRST_QUARTER),
    (175.0, MoonPhaseName.WAXING_GIBBOUS),
    (185.0, MoonPhaseName.FULL_MOON),
    (265.0, MoonPhaseName.WANING_GIBBOUS),
    (275.0, MoonPhaseName.THIRD_QUARTER),
    (360.0, MoonPhaseName.WANING_CRESCENT),
)

QUARTER_ANGLES = (90.0, 180.0, 270.0)
QUARTER_HALF_WIDTH = 5.0

VOC_SEARCH_ITERATIONS = 20


def calculate_phase_angle(sun_longitude: float, moon_longitude: float) -> float:
    """Moon's elongation from the Sun: 0 = new moon, 180 = full moon."""
    return normalize_angle(moon_longitude - sun_longitude)


def illumination(angle: float) -> float:
    """Illuminated fraction of the disc for a phase angle, in [0, 1]."""
    return (1.0 - math.cos(angle * math.pi / 180.0)) / 2.0


def phase_name(angle: float) -> MoonPhaseName:
    if angle < QUARTER_HALF_WIDTH or angle > 360.0 - QUARTER_HALF_WIDTH:
        return MoonPhaseName.NEW_MOON
    for upper, name in PHASE_BANDS:
        if angle < upper:
            return name
    return MoonPhaseName.WANING_CRESCENT


def is_exact_quarter(angle: float) -> bool:
    if angle < QUARTER_HALF_WIDTH or angle > 360.0 - QUARTER_HALF_WIDTH:
        return True
    return any(abs(angle - q) < QUARTER_HALF_WIDTH for q in QUARTER_ANGLES)


def classify_moon_phase(angle: float) -> MoonPhaseData:
    """Build the phase record for a raw phase angle."""
    angle = normalize_angle(angle)
    return MoonPhaseData(
        angle=round_half_up(angle, 1),
        name=phase_name(angle),
        illumination=round_half_up(illumination(angle), 2),
        is_exact_quarter=is_exact_quarter(angle),
    )


def _clock(dt: datetime) -> str:
    return f"{dt.hour:02d}:{dt.minute:02d}"


def find_sign_change(
    start: datetime,
    end: datetime,
    moon_longitude_at: Callable[[datetime], float],
) -> datetime:
    """Binary-search the instant the Moon leaves the sign it holds at ``start``."""
    start_sign = sign_index(moon_longitude_at(start))
    lo, hi = start, end
    for _ in range(VOC_SEARCH_ITERATIONS):
        mid = lo + (hi - lo) / 2
        if sign_index(moon_longitude_at(mid)) == start_sign:
            lo = mid
        else:
            hi = mid
    return lo + (hi - lo) / 2


def calculate_void_of_course(
    target_date: date,
    moon_longitude_at: Callable[[datetime], float],
    offset_hours: float = 3.0,
) -> VoidOfCourseMoon:
    """Approximate the void-of-course window for a UTC calendar day.

    The Moon counts as void only on days it changes sign. The window runs
    from ``offset_hours`` before the sign change (never earlier than 00:00)
    up to the change itself. This is an approximation; it does not search
    for the Moon's last major aspect.
    """
    day_start = datetime(target_date.year, target_date.month, target_date.day, tzinfo=UTC)
    day_end = day_start + timedelta(hours=23, minutes=59, seconds=59)

    if sign_index(moon_longitude_at(day_start)) == sign_index(moon_longitude_at(day_end)):
        return VoidOfCourseMoon(is_void=False)

    ingress = find_sign_change(day_start, day_end, moon_longitude_at)
    void_start = max(ingress - timedelta(hours=offset_hours), day_start)
    logger.debug("Moon changes sign on %s at %s", target_date, ingress.isoformat())

    return VoidOfCourseMoon(
        is_void=True,
        start_time=_clock(void_start),
        end_time=_clock(ingress),
    )
