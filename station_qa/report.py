"""Turn a `ValidationReport` into log lines and a process exit code."""

from __future__ import annotations

import logging

from station_qa.models.schemas import RuleResult, ValidationReport

LOGGER = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_VIOLATIONS = 1
EXIT_UNREADABLE = 2


def status(result: RuleResult) -> str:
    if result.passed:
        return "PASS"
    return "FAIL" if result.fatal else "WARN"


def log_report(report: ValidationReport, *, max_violations: int | None = None) -> None:
    """Log one summary line per rule, then its violations."""
    for result in report.results:
        level = logging.INFO
        if not result.passed:
            level = logging.ERROR if result.fatal else logging.WARNING
        LOGGER.log(level, "%-24s %s (%d)", result.rule, status(result), len(result.violations))
        if not result.passed and result.description:
            LOGGER.log(level, "  expected: %s", result.description)

        shown = result.violations if max_violations is None else result.violations[:max_violations]
        for v in shown:
            LOGGER.log(level, "  - [%s] %s", v.station_id or "-", v.message)
        hidden = len(result.violations) - len(shown)
        if hidden:
            LOGGER.log(level, "  ... and %d more", hidden)

    failed = [r.rule for r in report.failed() if r.fatal]
    if failed:
        LOGGER.error("%d of %d rules failed: %s", len(failed), len(report.results), ", ".join(failed))
    else:
        LOGGER.info("All %d rules passed on %d stations", len(report.results), report.records)


def exit_code(report: ValidationReport) -> int:
    return EXIT_OK if report.ok else EXIT_VIOLATIONS
