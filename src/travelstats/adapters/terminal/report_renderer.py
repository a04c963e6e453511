"""Plain-text report renderer for the terminal."""

import sys
from collections.abc import Sequence
from datetime import datetime
from typing import TextIO

from travelstats.domain.contracts.report_renderer import ReportRendererProtocol
from travelstats.domain.models.report import (
    CheckInSummary,
    CountTable,
    LineOperatorRow,
    MetadataSummary,
    ModeStatistics,
    StationCount,
)

# Locale-independent German names; datetime.weekday() indexes from Monday
GERMAN_WEEKDAYS = (
    "Montag",
    "Dienstag",
    "Mittwoch",
    "Donnerstag",
    "Freitag",
    "Samstag",
    "Sonntag",
)

GERMAN_MONTHS = (
    "Januar",
    "Februar",
    "März",
    "April",
    "Mai",
    "Juni",
    "Juli",
    "August",
    "September",
    "Oktober",
    "November",
    "Dezember",
)

COLUMN_GAP = "  "


def format_german_datetime(value: datetime) -> str:
    """Format a timestamp like "Montag, 03. Juli 2023 14:05" in its own offset."""
    weekday = GERMAN_WEEKDAYS[value.weekday()]
    month = GERMAN_MONTHS[value.month - 1]
    return f"{weekday}, {value.day:02d}. {month} {value.year} {value:%H:%M}"


def _cell(value: object) -> str:
    return f"{value:.2f}" if isinstance(value, float) else str(value)


def format_table(header: Sequence[str], rows: Sequence[Sequence[object]]) -> list[str]:
    """Align columns to their widest cell.

    Numeric cells are right-aligned and floats are shown with two decimals.
    """
    cells = [[str(c) for c in header]] + [[_cell(c) for c in row] for row in rows]
    widths = [max(len(row[i]) for row in cells) for i in range(len(header))]

    lines = []
    for row_index, row in enumerate(cells):
        parts = []
        for i, cell in enumerate(row):
            numeric = row_index > 0 and isinstance(rows[row_index - 1][i], int | float)
            parts.append(cell.rjust(widths[i]) if numeric else cell.ljust(widths[i]))
        lines.append(COLUMN_GAP.join(parts).rstrip())
    return lines


class TerminalReportRenderer(ReportRendererProtocol):
    """Writes reports as plain, aligned text."""

    def __init__(self, stream: TextIO | None = None) -> None:
        """Initialize the renderer.

        Args:
            stream: Output stream, stdout when not given.
        """
        self._stream = stream if stream is not None else sys.stdout

    def _print(self, line: str = "") -> None:
        print(line, file=self._stream)

    def _print_title(self, title: str) -> None:
        self._print(title)
        self._print("=" * len(title))

    def render_metadata(self, summary: MetadataSummary) -> None:
        """Render the export metadata summary."""
        self._print(
            f"{summary.date_from:%Y-%m-%d %H:%M:%S} - {summary.date_to:%Y-%m-%d %H:%M:%S}"
        )
        self._print()
        self._print(f"Distance travelled: {summary.distance_km} km")
        self._print(f"Duration: {summary.duration_hours} h")
        self._print(f"Points: {summary.points} (total: {summary.total_entry_points})")
        self._print()

    def render_check_ins(self, check_ins: list[CheckInSummary]) -> None:
        """Render every check-in as a short block."""
        for check_in in check_ins:
            self._print(f"{check_in.line} {check_in.origin} -> {check_in.destination}")
            if check_in.event is not None:
                self._print(f"\tEvent: {check_in.event}")
            if check_in.note is not None:
                self._print(f'\tNote: "{check_in.note}"')
            if check_in.operator is not None:
                self._print(f"\tOperator: {check_in.operator}")
            self._print(
                f"\t{format_german_datetime(check_in.departure)} ({check_in.delay_at_origin})"
                f" -> {format_german_datetime(check_in.arrival)}"
                f" ({check_in.delay_at_destination})"
            )
            self._print(
                f"\t{check_in.distance_km:.2f} km, {check_in.duration_minutes} min"
                f" ({check_in.speed_kmh} km/h)"
            )

    def render_count_table(self, table: CountTable) -> None:
        """Render a counted table with percentages and a truncation footer."""
        self._print_title(table.title)
        rows = [(row.label, row.count, row.percentage) for row in table.rows]
        for line in format_table((table.header, "Count", "%"), rows):
            self._print(line)
        if table.remaining:
            self._print(f"... and {table.remaining} more")
        self._print()

    def render_mode_stats(self, stats: list[ModeStatistics]) -> None:
        """Render per-mode aggregates, one line per mode."""
        self._print_title("Mode statistics")
        width = max((len(s.name) for s in stats), default=0)
        for s in stats:
            self._print(
                f"{s.name.ljust(width)}: {s.check_ins} check-ins, {s.distance_km} km,"
                f" {s.duration_hours} hours, {s.average_speed_kmh} km/h"
            )
        self._print()

    def render_all_lines(self, rows: list[LineOperatorRow]) -> None:
        """Render unique lines with their endpoints and operators."""
        self._print_title("All lines")
        for row in rows:
            self._print(f"{row.line} from {row.origin} to {row.destination} {row.operator}")
        self._print()

    def render_seen_stations(self, stations: list[StationCount]) -> None:
        """Render station visit counts, most visited first."""
        self._print_title("Seen stations")
        for station in stations:
            self._print(f"{station.count} {station.station}")
        self._print()
