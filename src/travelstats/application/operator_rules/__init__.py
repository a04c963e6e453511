"""Operator classification rules: hardcoded rules and declarative definitions."""

from travelstats.application.operator_rules.declarative import DeclarativeRuleSet
from travelstats.application.operator_rules.hardcoded import HARDCODED_RULES
from travelstats.application.operator_rules.matching import matches_any, matches_types

__all__ = ["HARDCODED_RULES", "DeclarativeRuleSet", "matches_any", "matches_types"]
