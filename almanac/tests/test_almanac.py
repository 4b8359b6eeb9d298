"""Tests for the Chinese almanac arithmetic."""

from datetime import date, timedelta

import pytest
from almanac.calculator import (
    REFERENCE_JDN,
    approximate_lunar_date,
    calculate_almanac,
    day_officer,
    day_pillar,
    julian_day_number,
    lunar_day,
    lunar_month,
    month_branch,
    officer_index,
)
from almanac.tables import ANIMALS, CLASH_ANIMALS, DAY_OFFICERS, ELEMENTS


def test_julian_day_number():
    assert julian_day_number(date(2000, 1, 1)) == 2451545
    assert julian_day_number(date(2019, 2, 5)) == 2458520
    assert REFERENCE_JDN == 2458520


def test_reference_date_is_jia_zi():
    pillar = day_pillar(date(2019, 2, 5))
    assert pillar.stem_index == 0
    assert pillar.branch_index == 0
    assert pillar.stem == "甲"
    assert pillar.branch == "子"
    assert pillar.glyphs == "甲子"
    assert pillar.romanized == "Jia-Zi"


def test_dates_before_reference_wrap_into_range():
    pillar = day_pillar(date(2019, 2, 4))
    assert pillar.stem_index == 9
    assert pillar.branch_index == 11
    assert pillar.glyphs == "癸亥"


def test_pillar_periodicity():
    start = date(2024, 6, 1)
    base = day_pillar(start)
    assert day_pillar(start + timedelta(days=10)).stem_index == base.stem_index
    assert day_pillar(start + timedelta(days=12)).branch_index == base.branch_index
    assert day_pillar(start + timedelta(days=60)) == base
    seen = {day_pillar(start + timedelta(days=n)).glyphs for n in range(60)}
    assert len(seen) == 60


def test_month_branch_table():
    assert month_branch(1) == 1
    assert month_branch(2) == 2
    assert month_branch(11) == 11
    assert month_branch(12) == 0


def test_officer_index():
    assert officer_index(0, 2) == 10
    assert officer_index(5, 5) == 0
    assert officer_index(11, 0) == 11


def test_reference_date_officer():
    officer = day_officer(date(2019, 2, 5))
    assert officer.english == "Open"
    assert officer.chinese == "开"


def test_element_and_animal_tables():
    assert len(ELEMENTS) == 10
    assert ELEMENTS[0] == ELEMENTS[1] == "Wood"
    assert ELEMENTS[8] == ELEMENTS[9] == "Water"
    for index, animal in enumerate(ANIMALS):
        assert CLASH_ANIMALS[index] == ANIMALS[(index + 6) % 12]
        assert animal != CLASH_ANIMALS[index]
    assert len(DAY_OFFICERS) == 12


@pytest.mark.parametrize(
    ("angle", "expected"),
    [(0.0, 1), (6.0, 1), (7.0, 2), (180.0, 16), (359.9, 30)],
)
def test_lunar_day(angle, expected):
    assert lunar_day(angle) == expected


@pytest.mark.parametrize(
    ("day", "expected"),
    [
        (date(2025, 1, 10), 12),
        (date(2025, 1, 20), 1),
        (date(2025, 2, 14), 1),
        (date(2025, 2, 15), 2),
        (date(2025, 7, 1), 6),
        (date(2025, 12, 14), 11),
        (date(2025, 12, 20), 12),
    ],
)
def test_lunar_month(day, expected):
    assert lunar_month(day) == expected


def test_approximate_lunar_date():
    assert approximate_lunar_date(date(2024, 2, 20), 0.0) == "二月初一"
    assert approximate_lunar_date(date(2024, 1, 5), 180.0) == "腊月十六"


def test_calculate_almanac_reference_date():
    almanac = calculate_almanac(date(2019, 2, 5), 0.0)
    assert almanac.heavenly_stem == "甲"
    assert almanac.earthly_branch == "子"
    assert almanac.stem_branch_day == "甲子"
    assert almanac.element == "Wood"
    assert almanac.animal_day == "Rat"
    assert almanac.clash_animal == "Horse"
    assert almanac.day_officer == "Open"
    assert almanac.day_officer_chinese == "开"
    assert almanac.auspicious_activities[0] == "Opening business"
    assert almanac.inauspicious_activities == ["Funerals"]
    assert almanac.lunar_date == "正月初一"


def test_calculate_almanac_ten_days_later():
    almanac = calculate_almanac(date(2019, 2, 15), 120.0)
    assert almanac.heavenly_stem == "甲"
    assert almanac.earthly_branch == "戌"
    assert almanac.animal_day == "Dog"
    assert almanac.clash_animal == "Dragon"
    # branch 10 in the 寅 month
    assert almanac.day_officer == "Success"
