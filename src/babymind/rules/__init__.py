"""Age-bucketed rule engine."""

from babymind.rules.engine import (
    AgeRangeRule,
    RuleEngine,
    RuleTable,
    build_table,
    load_rule_tables,
)
from babymind.rules.upcoming import overdue, upcoming

__all__ = [
    "AgeRangeRule",
    "RuleEngine",
    "RuleTable",
    "build_table",
    "load_rule_tables",
    "overdue",
    "upcoming",
]
