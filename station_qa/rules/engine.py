"""Evaluate the rule catalog against a loaded dataset."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor

from station_qa.core.config import DEFAULT_CONFIG, ValidationConfig
from station_qa.graph.index import DatasetIndex, build_index
from station_qa.io import StationDataset
from station_qa.models.schemas import RuleResult, ValidationReport, Violation
from station_qa.rules.base import Rule
from station_qa.rules.catalog import default_rules

LOGGER = logging.getLogger(__name__)


class RuleEngine:
    """Run every rule of a catalog over one dataset snapshot.

    Rules are independent pure functions of (dataset, index, config), so with
    `max_workers > 1` they are fanned out on a thread pool; results always come
    back in catalog order.
    """

    def __init__(
        self,
        config: ValidationConfig = DEFAULT_CONFIG,
        rules: Iterable[Rule] | None = None,
        *,
        max_workers: int | None = None,
        only: Iterable[str] | None = None,
        skip: Iterable[str] | None = None,
    ) -> None:
        self.config = config
        catalog = list(default_rules(config) if rules is None else rules)

        known = {r.name for r in catalog}
        for names in (only, skip):
            unknown = sorted(set(names or ()) - known)
            if unknown:
                raise ValueError(f"unknown rules: {unknown}; known rules: {sorted(known)}")

        if only is not None:
            wanted = set(only)
            catalog = [r for r in catalog if r.name in wanted]
        if skip is not None:
            unwanted = set(skip)
            catalog = [r for r in catalog if r.name not in unwanted]

        self.rules: tuple[Rule, ...] = tuple(catalog)
        self.max_workers = max_workers

    def run_rule(self, rule: Rule, dataset: StationDataset, index: DatasetIndex) -> RuleResult:
        """Evaluate one rule; an exception escaping it is reported as a violation."""
        try:
            violations = rule(dataset, index, self.config)
        except Exception as exc:  # noqa: BLE001 - a broken rule must not abort the run
            LOGGER.exception("Rule %s raised", rule.name)
            violations = [Violation(rule=rule.name, message=f"Rule {rule.name} raised: {exc!r}")]
        return RuleResult(
            rule=rule.name, description=rule.description, fatal=rule.fatal, violations=violations
        )

    def run(self, dataset: StationDataset) -> ValidationReport:
        index = build_index(dataset.records())
        LOGGER.info(
            "Running %d rules over %d stations from %s", len(self.rules), len(dataset), dataset.source
        )

        if self.max_workers is not None and self.max_workers > 1:
            with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
                futures = [pool.submit(self.run_rule, r, dataset, index) for r in self.rules]
                results = [f.result() for f in futures]
        else:
            results = [self.run_rule(r, dataset, index) for r in self.rules]

        report = ValidationReport(records=len(dataset), results=results)
        LOGGER.info(
            "Validation %s: %d/%d rules passed",
            "passed" if report.ok else "failed",
            sum(r.passed for r in results),
            len(results),
        )
        return report


def validate(
    dataset: StationDataset,
    config: ValidationConfig = DEFAULT_CONFIG,
    **kwargs,
) -> ValidationReport:
    """Convenience wrapper: run the default catalog once."""
    return RuleEngine(config, **kwargs).run(dataset)
