"""Tests for the shared rounding and calendar helpers."""

from datetime import date

import pytest
from pipeline import orchestrator
from pipeline.stages import publish_stage
from starbook.errors import InvalidDateError
from starbook.utils import month_dates, round_half_up, round_half_up_int


def test_round_half_up():
    assert round_half_up_int(4.5) == 5
    assert round_half_up_int(2.5) == 3
    assert round_half_up_int(-0.5) == 0
    assert round_half_up(12.25, 1) == pytest.approx(12.3)


def test_month_dates_cover_the_month():
    dates = month_dates(2025, 12)
    assert dates[0] == date(2025, 12, 1)
    assert dates[-1] == date(2025, 12, 31)
    assert len(dates) == 31
    assert len(month_dates(2100, 2)) == 28


def test_month_dates_rejects_invalid_month():
    with pytest.raises(InvalidDateError):
        month_dates(2025, 13)


def test_generation_and_publish_share_month_dates():
    assert orchestrator.month_dates is month_dates
    assert publish_stage.month_dates is month_dates
