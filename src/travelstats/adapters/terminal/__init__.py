"""Terminal output adapters."""

from travelstats.adapters.terminal.report_renderer import (
    TerminalReportRenderer,
    format_german_datetime,
)

__all__ = ["TerminalReportRenderer", "format_german_datetime"]
