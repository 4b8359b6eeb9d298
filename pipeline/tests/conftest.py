"""Factories for synthetic day fields used across the pipeline tests."""

from __future__ import annotations

import pytest
from starbook.schemas.auspicious import (
    AspectType,
    ChineseAlmanac,
    MoonPhaseData,
    MoonPhaseName,
    PlanetaryAspect,
    VoidOfCourseMoon,
    WesternDay,
)

_PHASE_ANGLES = {
    MoonPhaseName.NEW_MOON: 0.0,
    MoonPhaseName.WAXING_CRESCENT: 45.0,
    MoonPhaseName.FIRST_QUARTER: 90.0,
    MoonPhaseName.WAXING_GIBBOUS: 135.0,
    MoonPhaseName.FULL_MOON: 180.0,
    MoonPhaseName.WANING_GIBBOUS: 225.0,
    MoonPhaseName.THIRD_QUARTER: 270.0,
    MoonPhaseName.WANING_CRESCENT: 315.0,
}


def _aspects(harmonious: int, challenging: int) -> list[PlanetaryAspect]:
    aspects = [
        PlanetaryAspect(aspect=AspectType.TRINE, planet1="Sun", planet2=f"Body{i}", is_harmonious=True)
        for i in range(harmonious)
    ]
    aspects += [
        PlanetaryAspect(aspect=AspectType.SQUARE, planet1="Moon", planet2=f"Body{i}", is_harmonious=False)
        for i in range(challenging)
    ]
    return aspects


@pytest.fixture
def make_western():
    def _make(
        phase: MoonPhaseName = MoonPhaseName.WAXING_GIBBOUS,
        exact: bool = False,
        moon_sign: str = "Leo",
        void: tuple[str | None, str | None] | None = None,
        harmonious: int = 0,
        challenging: int = 0,
        retrograde: list[str] | None = None,
    ) -> WesternDay:
        voc = (
            VoidOfCourseMoon(is_void=False)
            if void is None
            else VoidOfCourseMoon(is_void=True, start_time=void[0], end_time=void[1])
        )
        return WesternDay(
            moon_phase=MoonPhaseData(
                angle=_PHASE_ANGLES[phase],
                name=phase,
                illumination=0.5,
                is_exact_quarter=exact,
            ),
            moon_sign=moon_sign,
            sun_sign="Aries",
            void_of_course_moon=voc,
            planetary_aspects=_aspects(harmonious, challenging),
            retrograde=retrograde or [],
        )

    return _make


@pytest.fixture
def make_chinese():
    def _make(
        officer: str = "Balance",
        good: list[str] | None = None,
        bad: list[str] | None = None,
    ) -> ChineseAlmanac:
        return ChineseAlmanac(
            lunar_date="正月初一",
            heavenly_stem="甲",
            earthly_branch="子",
            stem_branch_day="甲子",
            day_officer=officer,
            day_officer_chinese="平",
            auspicious_activities=["Painting", "Decorating"] if good is None else good,
            inauspicious_activities=["Travel"] if bad is None else bad,
            element="Wood",
            animal_day="Rat",
            clash_animal="Horse",
        )

    return _make
