"""Common CLI utilities for validation scripts."""

from __future__ import annotations

import argparse
from pathlib import Path


def create_base_parser(description: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument("path", type=Path, help="Stations CSV file (';'-separated, UTF-8).")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML file overriding the default rule-set parameters.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log at DEBUG level.",
    )
    return parser


def add_rule_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--workers",
        type=int,
        default=1,
        help="Evaluate rules on a thread pool of this size (1 = sequential).",
    )
    parser.add_argument(
        "--only",
        nargs="+",
        default=None,
        metavar="RULE",
        help="Run only the named rules.",
    )
    parser.add_argument(
        "--skip",
        nargs="+",
        default=None,
        metavar="RULE",
        help="Do not run the named rules.",
    )
    parser.add_argument(
        "--report-json",
        type=Path,
        default=None,
        help="Write the full validation report as JSON to this path.",
    )
