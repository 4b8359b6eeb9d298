"""Pydantic schemas for per-day auspiciousness records and month files."""

from __future__ import annotations

from datetime import date, datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

_RECORD_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    frozen=True,
)


class MoonPhaseName(str, Enum):
    NEW_MOON = "New Moon"
    WAXING_CRESCENT = "Waxing Crescent"
    FIRST_QUARTER = "First Quarter"
    WAXING_GIBBOUS = "Waxing Gibbous"
    FULL_MOON = "Full Moon"
    WANING_GIBBOUS = "Waning Gibbous"
    THIRD_QUARTER = "Third Quarter"
    WANING_CRESCENT = "Waning Crescent"


class AspectType(str, Enum):
    CONJUNCTION = "conjunction"
    SEXTILE = "sextile"
    SQUARE = "square"
    TRINE = "trine"
    OPPOSITION = "opposition"


class ScoreLabel(str, Enum):
    AVOID = "Avoid"
    POOR = "Poor"
    NEUTRAL = "Neutral"
    GOOD = "Good"
    GREAT = "Great"


# Indexed by score - 1.
SCORE_LABELS: tuple[ScoreLabel, ...] = (
    ScoreLabel.AVOID,
    ScoreLabel.POOR,
    ScoreLabel.NEUTRAL,
    ScoreLabel.GOOD,
    ScoreLabel.GREAT,
)


class MoonPhaseData(BaseModel):
    """Moon phase classification for a single instant."""

    model_config = _RECORD_CONFIG

    angle: float = Field(ge=0.0, le=360.0)
    name: MoonPhaseName
    illumination: float = Field(ge=0.0, le=1.0)
    is_exact_quarter: bool


class VoidOfCourseMoon(BaseModel):
    """Approximate void-of-course window; times are ``HH:MM`` UTC."""

    model_config = _RECORD_CONFIG

    is_void: bool
    start_time: str | None = None
    end_time: str | None = None


class PlanetaryAspect(BaseModel):
    """An aspect between two tracked bodies."""

    model_config = _RECORD_CONFIG

    aspect: AspectType
    planet1: str
    planet2: str
    is_harmonious: bool


class ChineseAlmanac(BaseModel):
    """Day-almanac entry derived from the sexagenary day pillar."""

    model_config = _RECORD_CONFIG

    lunar_date: str
    heavenly_stem: str
    earthly_branch: str
    stem_branch_day: str
    day_officer: str
    day_officer_chinese: str
    auspicious_activities: list[str] = Field(default_factory=list)
    inauspicious_activities: list[str] = Field(default_factory=list)
    element: str
    animal_day: str
    clash_animal: str


class WesternDay(BaseModel):
    """Western astrology fields for one day, before almanac and scoring."""

    model_config = _RECORD_CONFIG

    moon_phase: MoonPhaseData
    moon_sign: str
    sun_sign: str
    void_of_course_moon: VoidOfCourseMoon
    planetary_aspects: list[PlanetaryAspect] = Field(default_factory=list)
    retrograde: list[str] = Field(default_factory=list)


class AuspiciousDayData(BaseModel):
    """Complete record for one calendar day."""

    model_config = _RECORD_CONFIG

    calendar_date: date = Field(alias="date")
    moon_phase: MoonPhaseData
    moon_sign: str
    sun_sign: str
    void_of_course_moon: VoidOfCourseMoon
    planetary_aspects: list[PlanetaryAspect] = Field(default_factory=list)
    retrograde: list[str] = Field(default_factory=list)
    chinese: ChineseAlmanac
    score: int = Field(ge=1, le=5)
    score_label: ScoreLabel
    summary: str

    @property
    def date_key(self) -> str:
        return self.calendar_date.isoformat()


class MonthData(BaseModel):
    """One generated month; the unit written to disk."""

    model_config = _RECORD_CONFIG

    year: int
    month: int = Field(ge=1, le=12)
    generated_at: datetime
    days: list[AuspiciousDayData] = Field(default_factory=list)
