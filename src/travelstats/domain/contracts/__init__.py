"""Protocols for pluggable behaviour."""

from travelstats.domain.contracts.operator_rule import OperatorRule
from travelstats.domain.contracts.report_renderer import ReportRendererProtocol

__all__ = ["OperatorRule", "ReportRendererProtocol"]
