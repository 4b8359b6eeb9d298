"""Error types shared across the Starbook packages."""

from __future__ import annotations

from datetime import date


class StarbookError(Exception):
    """Base class for Starbook failures."""


class EphemerisError(StarbookError):
    """An ephemeris lookup failed; the day's record cannot be produced."""

    def __init__(self, body: str, julian_day: float, reason: str) -> None:
        self.body = body
        self.julian_day = julian_day
        self.reason = reason
        super().__init__(f"Ephemeris lookup failed for {body} at JD {julian_day:.5f}: {reason}")


class InvalidDateError(StarbookError, ValueError):
    """A calendar date outside the Gregorian range was requested."""


def validate_date(year: int, month: int, day: int = 1) -> date:
    """Return the ``date`` for the given parts or raise ``InvalidDateError``."""
    try:
        return date(int(year), int(month), int(day))
    except (TypeError, ValueError) as exc:
        raise InvalidDateError(f"Invalid calendar date {year}-{month}-{day}: {exc}") from exc
