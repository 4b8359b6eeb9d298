"""Body definitions, aspect table, and sign data."""

from __future__ import annotations

import math
from typing import NamedTuple

from starbook.schemas.auspicious import AspectType

# Celestial body IDs for pyswisseph
# These map to swisseph constants
BODY_IDS: dict[str, int] = {
    "sun": 0,  # SE_SUN
    "moon": 1,  # SE_MOON
    "mercury": 2,  # SE_MERCURY
    "venus": 3,  # SE_VENUS
    "mars": 4,  # SE_MARS
    "jupiter": 5,  # SE_JUPITER
    "saturn": 6,  # SE_SATURN
}

# Aspect pairs are enumerated in this order (body1 before body2)
TRACKED_BODIES = list(BODY_IDS.keys())

# Bodies checked for retrograde motion
RETROGRADE_BODIES = ["mercury", "venus", "mars", "jupiter", "saturn"]

# Zodiac signs in order
SIGNS = [
    "Aries",
    "Taurus",
    "Gemini",
    "Cancer",
    "Leo",
    "Virgo",
    "Libra",
    "Scorpio",
    "Sagittarius",
    "Capricorn",
    "Aquarius",
    "Pisces",
]


class AspectDefinition(NamedTuple):
    type: AspectType
    angle: float
    orb: float
    harmonious: bool


# Checked in this order; the first match for a pair wins
ASPECTS: tuple[AspectDefinition, ...] = (
    AspectDefinition(AspectType.CONJUNCTION, 0.0, 8.0, True),
    AspectDefinition(AspectType.SEXTILE, 60.0, 4.0, True),
    AspectDefinition(AspectType.SQUARE, 90.0, 6.0, False),
    AspectDefinition(AspectType.TRINE, 120.0, 6.0, True),
    AspectDefinition(AspectType.OPPOSITION, 180.0, 8.0, False),
)


def display_name(body: str) -> str:
    return body.title()


def normalize_angle(angle: float) -> float:
    """Map any angle into [0, 360)."""
    result = angle % 360.0
    # -1e-17 % 360 rounds up to 360.0
    return 0.0 if result >= 360.0 else result


def signed_delta(later: float, earlier: float) -> float:
    """Shortest signed change from ``earlier`` to ``later``, in (-180, 180]."""
    diff = normalize_angle(later - earlier)
    if diff > 180.0:
        diff -= 360.0
    return diff


def sign_index(longitude: float) -> int:
    return int(math.floor(normalize_angle(longitude) / 30.0)) % 12


def longitude_to_sign(longitude: float) -> tuple[str, float]:
    """Convert ecliptic longitude to sign and degree within sign."""
    longitude = normalize_angle(longitude)
    index = sign_index(longitude)
    degree = longitude - (index * 30.0)
    return SIGNS[index], degree


def sign_of(longitude: float) -> str:
    return SIGNS[sign_index(longitude)]
