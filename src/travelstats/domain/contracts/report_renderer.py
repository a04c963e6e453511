"""Protocol for rendering reports."""

from typing import Protocol

from travelstats.domain.models.report import (
    CheckInSummary,
    CountTable,
    LineOperatorRow,
    MetadataSummary,
    ModeStatistics,
    StationCount,
)


class ReportRendererProtocol(Protocol):
    """Protocol for presenting computed reports to the user."""

    def render_metadata(self, summary: MetadataSummary) -> None:
        """Render the export metadata summary."""
        ...

    def render_check_ins(self, check_ins: list[CheckInSummary]) -> None:
        """Render every check-in."""
        ...

    def render_count_table(self, table: CountTable) -> None:
        """Render a counted table such as events, modes, lines or operators."""
        ...

    def render_mode_stats(self, stats: list[ModeStatistics]) -> None:
        """Render per-mode aggregates."""
        ...

    def render_all_lines(self, rows: list[LineOperatorRow]) -> None:
        """Render unique lines with their operators."""
        ...

    def render_seen_stations(self, stations: list[StationCount]) -> None:
        """Render station visit counts."""
        ...
