"""passport-check CLI — validate the passport batch and print both counts.

Invariants:
    - stdout carries exactly two lines: structural count, then semantic count
    - PassportCheckError → message on stderr once, envelope logged at DEBUG, exit_code returned
    - Bad --workers flag → argparse usage error (exit 2); invalid environment settings → exit 4
    - Any other exception propagates (a bug, not an input condition)

Design Decisions:
    - argparse flags override Settings for one run via model_validate (cached settings untouched)
"""

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from passport_check import __version__
from passport_check.config import LOG_LEVELS, Settings, get_settings
from passport_check.core.batch_counter import BatchReport
from passport_check.core.errors import PassportCheckError
from passport_check.infrastructure.input_source import load_input
from passport_check.infrastructure.observability import setup_logging
from passport_check.services.run_batch import run_batch

logger = logging.getLogger(__name__)

CONFIG_ERROR_EXIT_CODE = 4


def positive_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {raw!r}") from None
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="passport-check",
        description="Count passports with valid keys and with valid values.",
    )
    parser.add_argument(
        "--input", type=Path, default=None,
        help="Read records from this file instead of the packaged data.",
    )
    parser.add_argument(
        "--workers", type=positive_int, default=None,
        help="Threads used to count records (default: 1).",
    )
    parser.add_argument(
        "--log-level", choices=LOG_LEVELS, type=str.upper, default=None,
    )
    parser.add_argument("--log-format", choices=("json", "text"), default=None)
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def resolve_settings(args: argparse.Namespace, base: Settings) -> Settings:
    overrides = {
        "input_path": args.input,
        "workers": args.workers,
        "log_level": args.log_level,
        "log_format": args.log_format,
    }
    update = {key: value for key, value in overrides.items() if value is not None}
    return Settings.model_validate({**base.model_dump(), **update})


def format_report(report: BatchReport) -> str:
    return (
        f"Passports with valid keys: {report.structural}\n"
        f"Passports with valid values: {report.semantic}"
    )


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = resolve_settings(args, get_settings())
    except ValidationError as exc:
        # Logging is not configured yet: report straight to stderr
        print(f"error: invalid configuration\n{exc}", file=sys.stderr)
        return CONFIG_ERROR_EXIT_CODE
    setup_logging(settings.log_level, settings.log_format)

    try:
        text = load_input(settings.input_path)
        report = run_batch(text, workers=settings.workers)
    except PassportCheckError as exc:
        logger.debug(
            f"PassportCheckError: {exc.message}",
            extra={"error_code": exc.code, **exc.to_response()},
        )
        print(f"error: {exc.message}", file=sys.stderr)
        return exc.exit_code

    print(format_report(report))
    return 0


if __name__ == "__main__":
    sys.exit(main())
