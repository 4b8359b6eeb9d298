"""Pipeline orchestrator - builds day records and month files."""

from __future__ import annotations

import asyncio
import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import UTC, date, datetime
from pathlib import Path

from starbook.config import get_settings
from starbook.errors import StarbookError
from starbook.schemas.auspicious import AuspiciousDayData, MonthData
from starbook.utils import month_dates

from pipeline.stages.almanac_stage import run_almanac_stage
from pipeline.stages.ephemeris_stage import run_ephemeris_stage
from pipeline.stages.publish_stage import run_publish_stage
from pipeline.stages.scoring_stage import compute_score
from pipeline.stages.summary_stage import generate_summary

logger = logging.getLogger(__name__)

ALL_MONTHS = list(range(1, 13))


def generate_day(target_date: date, voc_offset_hours: float | None = None) -> AuspiciousDayData:
    """Run every stage for one day and return its finished record.

    Raises:
        EphemerisError: the ephemeris could not answer for this day.
    """
    western, phase_angle = run_ephemeris_stage(target_date, voc_offset_hours)
    chinese = run_almanac_stage(target_date, phase_angle)

    score, label = compute_score(western, chinese)
    summary = generate_summary(western, chinese, score)

    return AuspiciousDayData(
        calendar_date=target_date,
        moon_phase=western.moon_phase,
        moon_sign=western.moon_sign,
        sun_sign=western.sun_sign,
        void_of_course_moon=western.void_of_course_moon,
        planetary_aspects=western.planetary_aspects,
        retrograde=western.retrograde,
        chinese=chinese,
        score=score,
        score_label=label,
        summary=summary,
    )


async def generate_month(
    year: int,
    month: int,
    *,
    max_workers: int | None = None,
    voc_offset_hours: float | None = None,
) -> MonthData:
    """Compute every day of a month on a worker pool and collect them in order."""
    dates = month_dates(year, month)
    settings = get_settings()
    workers = max_workers or settings.max_workers
    if voc_offset_hours is None:
        voc_offset_hours = settings.voc_offset_hours

    loop = asyncio.get_running_loop()
    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="starbook-day") as pool:
        days = await asyncio.gather(
            *(loop.run_in_executor(pool, generate_day, d, voc_offset_hours) for d in dates)
        )

    logger.debug("Generated %d days for %d-%02d with %d workers", len(days), year, month, workers)
    return MonthData(
        year=year,
        month=month,
        generated_at=datetime.now(UTC),
        days=list(days),
    )


async def run_pipeline(
    years: list[int] | None = None,
    months: list[int] | None = None,
    *,
    output_dir: str | Path | None = None,
    strict: bool | None = None,
    max_workers: int | None = None,
) -> list[Path]:
    """Generate and write one file per requested month.

    In strict mode the first failing month aborts the run. Otherwise the
    failure is logged and that month is skipped; a month is never written
    with missing days.
    """
    settings = get_settings()
    years = years or settings.years
    months = months or ALL_MONTHS
    output_dir = output_dir or settings.data_dir
    strict = settings.strict if strict is None else strict

    written: list[Path] = []
    failed: list[str] = []
    for year in years:
        for month in months:
            logger.info("Generating %d/%02d", year, month)
            try:
                month_data = await generate_month(year, month, max_workers=max_workers)
                path = run_publish_stage(month_data, output_dir)
            except StarbookError as exc:
                if strict:
                    raise
                logger.error("Skipping %d/%02d: %s", year, month, exc)
                failed.append(f"{year}-{month:02d}")
                continue
            written.append(path)

    if failed:
        logger.warning("Finished with %d skipped month(s): %s", len(failed), ", ".join(failed))
    logger.info("Generated %d month file(s) under %s", len(written), output_dir)
    return written
