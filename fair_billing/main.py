from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from dotenv import load_dotenv

from .billing import compute_billing
from .config import load_config
from .errors import FairBillingError
from .loader import load_lines
from .reporter import format_report, select_rows

logger = logging.getLogger("fair-billing")


def configure_logging(level: int = logging.INFO) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fair-billing",
        description="Compute billable session time per user from a Start/End log",
    )
    parser.add_argument(
        "log_file",
        nargs="?",
        help="Path to the log file. Defaults to FAIR_BILLING_LOG_FILE or test.log.",
    )
    parser.add_argument("--user", "-u", default=None, help="Only print the row for this user.")
    parser.add_argument("--hms", action="store_true", help="Show totals as HH:MM:SS instead of seconds.")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    load_dotenv()
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config()
    except ValueError as exc:
        parser.error(str(exc))

    configure_logging(config.log_level)
    log_file = args.log_file or config.log_file

    try:
        lines = load_lines(log_file)
    except FairBillingError as exc:
        logger.error("Unexpected error: %s", exc)
        return 1

    results = compute_billing(lines)
    logger.info("Processed %d lines from %s into %d user totals", len(lines), log_file, len(results))

    print(format_report(select_rows(results, args.user), hms=args.hms))
    return 0


if __name__ == "__main__":
    sys.exit(main())
