"""Validate a stations CSV against the integrity rule catalog.

Run:
  python scripts/validate_stations.py data/stations.csv
  python scripts/validate_stations.py data/stations.csv --workers 4 --report-json reports/stations.json
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Ensure repo root is on sys.path so `import station_qa...` works when executing this file directly.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from station_qa.core.cli_utils import add_rule_flags, create_base_parser
from station_qa.core.config import configure_logging
from station_qa.io import load_validation_config, read_stations_csv, write_json
from station_qa.models.schemas import stations_schema
from station_qa.report import EXIT_UNREADABLE, exit_code, log_report
from station_qa.rules import RuleEngine

LOGGER = logging.getLogger("validate_stations")


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = create_base_parser("Check the stations dataset for data-entry errors.")
    add_rule_flags(parser)
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.INFO)

    config = load_validation_config(args.config)
    engine = RuleEngine(config, max_workers=args.workers, only=args.only, skip=args.skip)

    try:
        dataset = read_stations_csv(args.path, schema=stations_schema(config))
    except (FileNotFoundError, ValueError) as e:
        LOGGER.error("Cannot read %s: %s", args.path, e)
        return EXIT_UNREADABLE

    report = engine.run(dataset)
    log_report(report)

    if args.report_json is not None:
        write_json(report.model_dump(mode="json"), args.report_json)
        LOGGER.info("Wrote report to %s", args.report_json)

    return exit_code(report)


if __name__ == "__main__":
    sys.exit(main())
