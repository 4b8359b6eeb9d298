"""Fixed almanac tables: stems, branches, animals, elements, officers.

All tables are indexed by integer position in their cycle.
"""

from __future__ import annotations

from typing import NamedTuple

# Heavenly Stems (天干): glyph, romanization
HEAVENLY_STEMS: tuple[str, ...] = ("甲", "乙", "丙", "丁", "戊", "己", "庚", "辛", "壬", "癸")
HEAVENLY_STEMS_EN: tuple[str, ...] = (
    "Jia", "Yi", "Bing", "Ding", "Wu", "Ji", "Geng", "Xin", "Ren", "Gui",
)

# Earthly Branches (地支)
EARTHLY_BRANCHES: tuple[str, ...] = ("子", "丑", "寅", "卯", "辰", "巳", "午", "未", "申", "酉", "戌", "亥")
EARTHLY_BRANCHES_EN: tuple[str, ...] = (
    "Zi", "Chou", "Yin", "Mao", "Chen", "Si", "Wu", "Wei", "Shen", "You", "Xu", "Hai",
)

ANIMALS: tuple[str, ...] = (
    "Rat", "Ox", "Tiger", "Rabbit", "Dragon", "Snake",
    "Horse", "Goat", "Monkey", "Rooster", "Dog", "Pig",
)

# Six branches on from each day animal
CLASH_ANIMALS: tuple[str, ...] = ANIMALS[6:] + ANIMALS[:6]

# Two stems per element
ELEMENTS: tuple[str, ...] = (
    "Wood", "Wood", "Fire", "Fire", "Earth", "Earth", "Metal", "Metal", "Water", "Water",
)

# Gregorian month (index 0 = January) -> branch index of the solar month.
# Approximates the solar-term boundaries that fall early in each month.
MONTH_BRANCHES: tuple[int, ...] = (1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 0)


class DayOfficer(NamedTuple):
    english: str
    chinese: str
    auspicious: tuple[str, ...]
    inauspicious: tuple[str, ...]


# Twelve Day Officers (建除十二神), indexed by officer position
DAY_OFFICERS: tuple[DayOfficer, ...] = (
    DayOfficer(
        "Establish", "建",
        ("Worship", "Travel", "Meeting friends"),
        ("Construction", "Moving", "Opening business"),
    ),
    DayOfficer(
        "Remove", "除",
        ("Cleaning", "Medical treatment", "Pest control", "Ending bad habits"),
        ("Marriage", "Opening business"),
    ),
    DayOfficer(
        "Full", "满",
        ("Worship", "Engagements", "Moving", "Construction"),
        ("Medical treatment", "Lawsuits"),
    ),
    DayOfficer(
        "Balance", "平",
        ("Road repairs", "Painting", "Decorating"),
        ("Marriage", "Travel", "Lawsuits"),
    ),
    DayOfficer(
        "Stable", "定",
        ("Marriage", "Engagements", "Construction", "Moving", "Signing contracts"),
        ("Lawsuits", "Travel far"),
    ),
    DayOfficer(
        "Initiate", "执",
        ("Construction", "Planting", "Catching pests"),
        ("Moving", "Travel", "Opening business"),
    ),
    DayOfficer(
        "Break", "破",
        ("Demolition", "Medical treatment"),
        ("Marriage", "Moving", "Opening business", "Signing contracts", "Travel"),
    ),
    DayOfficer(
        "Danger", "危",
        ("Worship", "Fasting", "Quiet activities"),
        ("Construction", "Moving", "Travel", "Marriage", "Opening business"),
    ),
    DayOfficer(
        "Success", "成",
        ("Marriage", "Opening business", "Construction", "Moving", "Signing contracts", "Travel"),
        ("Lawsuits",),
    ),
    DayOfficer(
        "Receive", "收",
        ("Collecting debts", "Savings", "Storage", "Harvest"),
        ("Medical treatment", "Funerals"),
    ),
    DayOfficer(
        "Open", "开",
        ("Opening business", "Marriage", "Moving", "Construction", "Travel", "Celebrations"),
        ("Funerals",),
    ),
    DayOfficer(
        "Close", "闭",
        ("Storage", "Burial", "Quiet reflection"),
        ("Opening business", "Marriage", "Construction", "Moving", "Travel"),
    ),
)

# Index 0 unused; 11 and 12 use their customary names
LUNAR_MONTH_NAMES: tuple[str, ...] = (
    "", "正月", "二月", "三月", "四月", "五月", "六月",
    "七月", "八月", "九月", "十月", "冬月", "腊月",
)

# Index 0 unused
LUNAR_DAY_NAMES: tuple[str, ...] = (
    "",
    "初一", "初二", "初三", "初四", "初五", "初六", "初七", "初八", "初九", "初十",
    "十一", "十二", "十三", "十四", "十五", "十六", "十七", "十八", "十九", "二十",
    "廿一", "廿二", "廿三", "廿四", "廿五", "廿六", "廿七", "廿八", "廿九", "三十",
)
