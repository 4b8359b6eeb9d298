"""Ephemeris provider and the Western astrology entry point, calculate_day()."""

from __future__ import annotations

import logging
from datetime import UTC, date, datetime, timedelta

import swisseph as swe
from starbook.config import get_settings
from starbook.errors import EphemerisError
from starbook.schemas.auspicious import WesternDay

from ephemeris.aspects import find_aspects
from ephemeris.bodies import BODY_IDS, RETROGRADE_BODIES, TRACKED_BODIES, display_name, sign_of, signed_delta
from ephemeris.lunar import calculate_phase_angle, calculate_void_of_course, classify_moon_phase

logger = logging.getLogger(__name__)

# Use tropical zodiac, geocentric
_ephe_path = get_settings().ephe_path.strip()
swe.set_ephe_path(_ephe_path if _ephe_path else None)


def datetime_to_jd(dt: datetime) -> float:
    """Convert an aware datetime to a UT Julian Day."""
    utc = dt.astimezone(UTC)
    return swe.julday(
        utc.year,
        utc.month,
        utc.day,
        utc.hour + utc.minute / 60.0 + (utc.second + utc.microsecond / 1e6) / 3600.0,
    )


def noon_utc(target_date: date) -> datetime:
    return datetime(target_date.year, target_date.month, target_date.day, 12, 0, 0, tzinfo=UTC)


def body_longitude_jd(body_name: str, jd: float) -> float:
    """Ecliptic longitude of a body at a Julian Day, in [0, 360).

    Raises:
        EphemerisError: when neither Swiss nor Moshier ephemeris can answer.
    """
    try:
        body_id = BODY_IDS[body_name]
    except KeyError as exc:
        raise EphemerisError(body_name, jd, "unknown body") from exc

    try:
        result, _ = swe.calc_ut(jd, body_id, swe.FLG_SWIEPH)
    except Exception:
        # Fallback to Moshier (no external files needed)
        try:
            result, _ = swe.calc_ut(jd, body_id, swe.FLG_MOSEPH)
        except Exception as exc:
            raise EphemerisError(body_name, jd, str(exc)) from exc

    return float(result[0]) % 360.0


def body_longitude(body_name: str, dt: datetime) -> float:
    return body_longitude_jd(body_name, datetime_to_jd(dt))


def moon_longitude(dt: datetime) -> float:
    return body_longitude("moon", dt)


def moon_phase_angle(dt: datetime) -> float:
    """Moon phase angle in [0, 360): 0 = new moon, 180 = full moon."""
    jd = datetime_to_jd(dt)
    return calculate_phase_angle(body_longitude_jd("sun", jd), body_longitude_jd("moon", jd))


def calculate_longitudes(dt: datetime, bodies: list[str] | None = None) -> dict[str, float]:
    jd = datetime_to_jd(dt)
    return {name: body_longitude_jd(name, jd) for name in (bodies or TRACKED_BODIES)}


def find_retrogrades(today: dict[str, float], yesterday: dict[str, float]) -> list[str]:
    """Bodies whose longitude moved backwards over the preceding 24 hours."""
    return [
        display_name(body)
        for body in RETROGRADE_BODIES
        if body in today and body in yesterday and signed_delta(today[body], yesterday[body]) < 0
    ]


def calculate_day_with_phase(target_date: date, voc_offset_hours: float | None = None) -> tuple[WesternDay, float]:
    """Calculate the Western astrology fields for a date, fixed at noon UTC.

    Args:
        target_date: The calendar date to calculate for
        voc_offset_hours: Lead of the void-of-course window before the
            Moon's sign change; defaults to the configured value

    Returns:
        WesternDay with moon phase, signs, void-of-course, aspects and
        retrogrades, plus the unrounded noon Moon phase angle it was built from.
    """
    if voc_offset_hours is None:
        voc_offset_hours = get_settings().voc_offset_hours

    dt = noon_utc(target_date)
    longitudes = calculate_longitudes(dt)
    previous = calculate_longitudes(dt - timedelta(days=1), RETROGRADE_BODIES)

    phase_angle = calculate_phase_angle(longitudes["sun"], longitudes["moon"])

    western = WesternDay(
        moon_phase=classify_moon_phase(phase_angle),
        moon_sign=sign_of(longitudes["moon"]),
        sun_sign=sign_of(longitudes["sun"]),
        void_of_course_moon=calculate_void_of_course(target_date, moon_longitude, voc_offset_hours),
        planetary_aspects=find_aspects(longitudes),
        retrograde=find_retrogrades(longitudes, previous),
    )
    logger.debug(
        "Western data for %s: phase=%s moon=%s sun=%s aspects=%d retrograde=%s",
        target_date,
        western.moon_phase.name.value,
        western.moon_sign,
        western.sun_sign,
        len(western.planetary_aspects),
        western.retrograde,
    )
    return western, phase_angle


def calculate_day(target_date: date, voc_offset_hours: float | None = None) -> WesternDay:
    """Calculate the Western astrology fields for a date, fixed at noon UTC."""
    western, _ = calculate_day_with_phase(target_date, voc_offset_hours)
    return western
