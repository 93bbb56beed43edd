"""Command-line entry point for the daily analytics report."""

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Optional, Sequence

import structlog

from .config.settings import load_settings
from .runner import build_report, run
from .utils.log_config import configure_logging

logger = structlog.get_logger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Fetch Mailchimp and PostHog metrics and email the daily report")
    parser.add_argument('--preview', action='store_true',
                        help='Print the report HTML to stdout instead of sending it')
    parser.add_argument('--output', type=str,
                        help='Also save the report HTML to this file')
    return parser.parse_args(argv)


async def main(argv: Optional[Sequence[str]] = None) -> None:
    """Run one report cycle."""
    args = parse_args(argv)
    settings = load_settings()
    configure_logging(settings.log_level)

    if args.preview:
        document = await build_report(settings)
        print(document.html)
    else:
        document = await run(settings)

    if args.output:
        Path(args.output).write_text(document.html, encoding="utf-8")
        logger.info("HTML saved", path=args.output)


def cli(argv: Optional[Sequence[str]] = None) -> None:
    """Console script wrapper: exit 0 on success, 1 on any failure."""
    try:
        asyncio.run(main(argv))
    except KeyboardInterrupt:
        logger.info("Report run interrupted")
        sys.exit(130)
    except Exception as e:
        logger.error("Report failed", error=str(e), exc_info=True)
        print(f"Report failed: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    cli()
