"""Summary stage: one short sentence describing the day."""

from __future__ import annotations

from starbook.schemas.auspicious import ChineseAlmanac, WesternDay

from pipeline.stages.scoring_stage import count_aspects

FAVORABLE_OFFICERS = ("Success", "Open")
CAUTION_OFFICERS = ("Break", "Close")


def summary_fragments(western: WesternDay, chinese: ChineseAlmanac) -> list[str]:
    parts: list[str] = []

    if western.moon_phase.is_exact_quarter:
        parts.append(f"{western.moon_phase.name.value} in {western.moon_sign}")

    harmonious, challenging = count_aspects(western)
    if harmonious > challenging and harmonious >= 2:
        parts.append("Favorable planetary energy")
    elif challenging > harmonious and challenging >= 2:
        parts.append("Challenging aspects present")

    if western.void_of_course_moon.is_void:
        parts.append("Moon void-of-course")

    if western.retrograde:
        parts.append(f"{', '.join(western.retrograde)} retrograde")

    if chinese.day_officer in FAVORABLE_OFFICERS:
        parts.append(f"{chinese.day_officer} day")
    elif chinese.day_officer in CAUTION_OFFICERS:
        parts.append(f"{chinese.day_officer} day — caution advised")

    return parts


def fallback_fragment(score: int) -> str:
    if score >= 4:
        return "Generally favorable energy"
    if score <= 2:
        return "Exercise caution today"
    return "A balanced day"


def generate_summary(western: WesternDay, chinese: ChineseAlmanac, score: int) -> str:
    parts = summary_fragments(western, chinese) or [fallback_fragment(score)]
    return ". ".join(parts) + "."
