"""Station dataset integrity rules and the engine that runs them."""

from __future__ import annotations

from station_qa.rules.base import Rule, check_each
from station_qa.rules.catalog import default_rules
from station_qa.rules.engine import RuleEngine, validate

__all__ = ["Rule", "RuleEngine", "check_each", "default_rules", "validate"]
