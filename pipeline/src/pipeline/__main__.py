"""Pipeline entry point for running as a module: python -m pipeline."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from starbook.config import get_settings

from pipeline.orchestrator import run_pipeline

logger = logging.getLogger("pipeline")


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="python -m pipeline", description="Generate monthly auspicious-day files.")
    parser.add_argument("--year", type=int, action="append", dest="years", help="year to generate (repeatable)")
    parser.add_argument("--month", type=int, action="append", dest="months", help="month 1-12 (repeatable)")
    parser.add_argument("--output", default=None, help="output root directory")
    parser.add_argument("--workers", type=int, default=None, help="worker threads per month")
    parser.add_argument(
        "--lenient",
        action="store_true",
        help="skip months that fail instead of aborting",
    )
    return parser.parse_args(argv)


async def main(argv: list[str] | None = None) -> int:
    args = _parse_args(sys.argv[1:] if argv is None else argv)
    settings = get_settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        stream=sys.stdout,
    )
    logger.info("Starting Starbook data generation")

    try:
        written = await run_pipeline(
            args.years,
            args.months,
            output_dir=args.output,
            strict=False if args.lenient else None,
            max_workers=args.workers,
        )
    except Exception as exc:
        logger.error("Data generation failed: %s", exc)
        return 1

    logger.info("Done: %d file(s) written", len(written))
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
