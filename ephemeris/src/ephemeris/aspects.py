"""Aspect detection between the tracked bodies."""

from __future__ import annotations

import logging

from starbook.schemas.auspicious import PlanetaryAspect

from ephemeris.bodies import ASPECTS, TRACKED_BODIES, AspectDefinition, display_name

logger = logging.getLogger(__name__)


def angular_distance(lon1: float, lon2: float) -> float:
    """Calculate the shortest angular distance between two longitudes."""
    diff = abs(lon1 - lon2) % 360.0
    if diff > 180.0:
        diff = 360.0 - diff
    return diff


def match_aspect(lon1: float, lon2: float) -> AspectDefinition | None:
    """Return the highest-priority aspect within orb, if any."""
    dist = angular_distance(lon1, lon2)
    for definition in ASPECTS:
        if abs(dist - definition.angle) <= definition.orb:
            return definition
    return None


def find_aspects(longitudes: dict[str, float]) -> list[PlanetaryAspect]:
    """Find at most one aspect per unordered pair of tracked bodies.

    Args:
        longitudes: Dict of body name -> ecliptic longitude in degrees.

    Returns:
        Aspects in pair order (body1 precedes body2 in ``TRACKED_BODIES``).
    """
    aspects_found: list[PlanetaryAspect] = []
    bodies = [b for b in TRACKED_BODIES if b in longitudes]

    for i, body1 in enumerate(bodies):
        for body2 in bodies[i + 1:]:
            definition = match_aspect(longitudes[body1], longitudes[body2])
            if definition is None:
                continue
            aspects_found.append(
                PlanetaryAspect(
                    aspect=definition.type,
                    planet1=display_name(body1),
                    planet2=display_name(body2),
                    is_harmonious=definition.harmonious,
                )
            )

    logger.debug("Found %d aspects among %d bodies", len(aspects_found), len(bodies))
    return aspects_found
