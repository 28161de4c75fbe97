"""CLI entry point: argument parsing and dispatch."""

from __future__ import annotations

import argparse

from . import __version__
from .log import setup_logging
from .models import InvalidJobNumber, JobNumber
from .settings import LOG_LEVELS, SETTINGS


def _job_number_arg(raw: str) -> JobNumber:
    try:
        return JobNumber.from_str(raw)
    except InvalidJobNumber as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jobsched",
        description="Open a job by number and view its schedule",
    )
    parser.add_argument(
        "job_number",
        nargs="?",
        type=_job_number_arg,
        help="Job number to open. If omitted, a prompt asks for one.",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help=f"Log level (default: {SETTINGS.log.level})",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level or SETTINGS.log.level, SETTINGS.log.file)

    # Imported late so --help and --version don't pay for Textual.
    from .ui import cmd_app

    cmd_app(args)
