"""Scoring stage: reduce a day's fields to a 1-5 score and label.

Six sub-scores, each on a 1-5 scale, are combined by weight then rounded
half-up and clamped to [1, 5].
"""

from __future__ import annotations

import logging

from starbook.schemas.auspicious import (
    SCORE_LABELS,
    ChineseAlmanac,
    MoonPhaseName,
    ScoreLabel,
    VoidOfCourseMoon,
    WesternDay,
)
from starbook.utils import round_half_up_int

logger = logging.getLogger(__name__)

WEIGHTS: dict[str, float] = {
    "moon_phase": 0.20,
    "void_of_course": 0.20,
    "aspects": 0.25,
    "retrograde": 0.10,
    "day_officer": 0.15,
    "activities": 0.10,
}

OFFICER_SCORES: dict[str, int] = {
    "Success": 5,
    "Open": 5,
    "Establish": 5,
    "Remove": 4,
    "Full": 4,
    "Balance": 3,
    "Stable": 3,
    "Danger": 2,
    "Receive": 2,
    "Break": 1,
    "Close": 1,
}


def moon_phase_score(name: MoonPhaseName) -> int:
    if name is MoonPhaseName.FULL_MOON:
        return 5
    if name is MoonPhaseName.NEW_MOON:
        return 4
    if name in (MoonPhaseName.FIRST_QUARTER, MoonPhaseName.THIRD_QUARTER):
        return 3
    if name in (MoonPhaseName.WAXING_CRESCENT, MoonPhaseName.WAXING_GIBBOUS):
        return 4
    return 2


def _minutes(clock: str) -> int:
    hours, minutes = clock.split(":")
    return int(hours) * 60 + int(minutes)


def void_of_course_duration(voc: VoidOfCourseMoon) -> int | None:
    """Window length in minutes, or ``None`` when the times cannot be read."""
    if not voc.start_time or not voc.end_time:
        return None
    try:
        return _minutes(voc.end_time) - _minutes(voc.start_time)
    except ValueError:
        return None


def void_of_course_score(voc: VoidOfCourseMoon) -> int:
    if not voc.is_void:
        return 5
    duration = void_of_course_duration(voc)
    if duration is None:
        return 3
    if duration > 240:
        return 1
    if duration > 120:
        return 3
    return 4


def aspect_score(harmonious: int, challenging: int) -> int:
    net = harmonious - challenging
    if net >= 3:
        return 5
    if net >= 1:
        return 4
    if net == 0:
        return 3
    if net >= -2:
        return 2
    return 1


def retrograde_score(count: int) -> int:
    if count == 0:
        return 5
    if count == 1:
        return 3
    return 2


def day_officer_score(officer: str) -> int:
    # Initiate is absent from the table and scores like Break and Close
    return OFFICER_SCORES.get(officer, 1)


def activity_score(good: int, bad: int) -> int:
    if good >= 4 and bad <= 1:
        return 5
    if good >= 3:
        return 4
    if good >= 2:
        return 3
    if bad >= 3:
        return 2
    return 1


def count_aspects(western: WesternDay) -> tuple[int, int]:
    """Return (harmonious, challenging) aspect counts."""
    harmonious = sum(1 for a in western.planetary_aspects if a.is_harmonious)
    return harmonious, len(western.planetary_aspects) - harmonious


def sub_scores(western: WesternDay, chinese: ChineseAlmanac) -> dict[str, int]:
    harmonious, challenging = count_aspects(western)
    return {
        "moon_phase": moon_phase_score(western.moon_phase.name),
        "void_of_course": void_of_course_score(western.void_of_course_moon),
        "aspects": aspect_score(harmonious, challenging),
        "retrograde": retrograde_score(len(western.retrograde)),
        "day_officer": day_officer_score(chinese.day_officer),
        "activities": activity_score(
            len(chinese.auspicious_activities),
            len(chinese.inauspicious_activities),
        ),
    }


def score_label(score: int) -> ScoreLabel:
    return SCORE_LABELS[score - 1]


def compute_score(western: WesternDay, chinese: ChineseAlmanac) -> tuple[int, ScoreLabel]:
    """Weighted 1-5 score and its label."""
    parts = sub_scores(western, chinese)
    raw = 0.0
    # Summed in WEIGHTS order so equal inputs give bit-identical totals
    for factor, weight in WEIGHTS.items():
        raw += parts[factor] * weight

    score = max(1, min(5, round_half_up_int(raw)))
    logger.debug("Score %.3f -> %d from %s", raw, score, parts)
    return score, score_label(score)
