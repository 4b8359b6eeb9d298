"""Month file storage: one JSON document per ``{year}/{month:02}.json``.

Readers treat a missing or unreadable month as "no data" and never raise.
"""

from __future__ import annotations

import logging
import os
import tempfile
from collections.abc import Iterable
from datetime import date
from pathlib import Path

from pydantic import ValidationError

from starbook.schemas.auspicious import AuspiciousDayData, MonthData

logger = logging.getLogger(__name__)


def month_path(base_dir: str | Path, year: int, month: int) -> Path:
    return Path(base_dir) / str(year) / f"{month:02d}.json"


def write_month(base_dir: str | Path, month_data: MonthData) -> Path:
    """Write a month file atomically and return its path."""
    path = month_path(base_dir, month_data.year, month_data.month)
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = month_data.model_dump_json(by_alias=True, indent=2)

    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.stem}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            fh.write(payload)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise

    logger.info("Wrote %s (%d days)", path, len(month_data.days))
    return path


def load_month(base_dir: str | Path, year: int, month: int) -> MonthData | None:
    """Load a month file, or ``None`` when it is missing or malformed."""
    path = month_path(base_dir, year, month)
    try:
        # Bytes, so a bad encoding surfaces as a ValidationError below
        raw = path.read_bytes()
    except FileNotFoundError:
        logger.debug("No month data at %s", path)
        return None
    except OSError as exc:
        logger.warning("Could not read month data at %s: %s", path, exc)
        return None

    try:
        return MonthData.model_validate_json(raw)
    except ValidationError as exc:
        logger.warning("Malformed month data at %s: %s", path, exc.error_count())
        return None


def index_days(month_data: MonthData | None) -> dict[str, AuspiciousDayData]:
    if month_data is None:
        return {}
    return {day.date_key: day for day in month_data.days}


def load_day(base_dir: str | Path, target: date) -> AuspiciousDayData | None:
    return index_days(load_month(base_dir, target.year, target.month)).get(target.isoformat())


def load_days(base_dir: str | Path, dates: Iterable[date | str]) -> dict[str, AuspiciousDayData]:
    """Look up records for a range of dates that may span several months.

    Returns a mapping keyed by ``yyyy-mm-dd`` holding only the dates that
    have data.
    """
    wanted: set[str] = set()
    months: dict[tuple[int, int], None] = {}
    for item in dates:
        day = date.fromisoformat(item) if isinstance(item, str) else item
        wanted.add(day.isoformat())
        months.setdefault((day.year, day.month), None)

    found: dict[str, AuspiciousDayData] = {}
    for year, month in months:
        for key, record in index_days(load_month(base_dir, year, month)).items():
            if key in wanted:
                found[key] = record
    return found
