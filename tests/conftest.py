"""Integration test configuration."""

import pytest
from starbook.config import reset_settings_cache


@pytest.fixture(autouse=True)
def _fresh_settings():
    reset_settings_cache()
    yield
    reset_settings_cache()


@pytest.fixture
def sample_month():
    """A one-day month file as written by the generator."""
    return {
        "year": 2026,
        "month": 2,
        "generatedAt": "2026-01-31T05:01:12Z",
        "days": [
            {
                "date": "2026-02-13",
                "moonPhase": {"angle": 318.4, "name": "Waning Crescent", "illumination": 0.12, "isExactQuarter": False},
                "moonSign": "Capricorn",
                "sunSign": "Aquarius",
                "voidOfCourseMoon": {"isVoid": True, "startTime": "14:10", "endTime": "17:10"},
                "planetaryAspects": [
                    {"aspect": "conjunction", "planet1": "Sun", "planet2": "Mercury", "isHarmonious": True},
                    {"aspect": "square", "planet1": "Mars", "planet2": "Jupiter", "isHarmonious": False},
                ],
                "retrograde": ["Jupiter"],
                "chinese": {
                    "lunarDate": "正月廿七",
                    "heavenlyStem": "丙",
                    "earthlyBranch": "辰",
                    "stemBranchDay": "丙辰",
                    "dayOfficer": "Open",
                    "dayOfficerChinese": "开",
                    "auspiciousActivities": ["Opening business", "Marriage"],
                    "inauspiciousActivities": ["Funerals"],
                    "element": "Fire",
                    "animalDay": "Dragon",
                    "clashAnimal": "Dog",
                },
                "score": 3,
                "scoreLabel": "Neutral",
                "summary": "Moon void-of-course. Jupiter retrograde. Open day.",
            }
        ],
    }
