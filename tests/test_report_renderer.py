"""Tests for the terminal report renderer."""

import io
from datetime import datetime

import pytest

from travelstats.adapters.terminal import TerminalReportRenderer, format_german_datetime
from travelstats.domain.models import (
    CheckInSummary,
    CountRow,
    CountTable,
    LineOperatorRow,
    MetadataSummary,
    ModeStatistics,
    StationCount,
)


@pytest.fixture
def stream() -> io.StringIO:
    """Captured renderer output."""
    return io.StringIO()


@pytest.fixture
def renderer(stream: io.StringIO) -> TerminalReportRenderer:
    """Renderer writing to the captured stream."""
    return TerminalReportRenderer(stream)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("2023-07-03T14:05:00+02:00", "Montag, 03. Juli 2023 14:05"),
        ("2023-03-12T08:30:00+01:00", "Sonntag, 12. März 2023 08:30"),
        ("2024-12-31T23:59:00+01:00", "Dienstag, 31. Dezember 2024 23:59"),
    ],
)
def test_format_german_datetime(value: str, expected: str) -> None:
    """Given a timestamp, when formatting, then German weekday and month names are used."""
    assert format_german_datetime(datetime.fromisoformat(value)) == expected


def test_render_count_table(renderer: TerminalReportRenderer, stream: io.StringIO) -> None:
    """Given a counted table, when rendering, then columns are aligned with two-decimal percentages."""
    table = CountTable(
        title="Operators (all time)",
        header="Operator",
        rows=[
            CountRow("DB Regio AG Südost", 2, 200 / 3),
            CountRow("BSAG", 1, 100 / 3),
        ],
        total=3,
    )

    renderer.render_count_table(table)

    lines = stream.getvalue().splitlines()
    assert lines[0] == "Operators (all time)"
    assert lines[2].split() == ["Operator", "Count", "%"]
    assert lines[3].startswith("DB Regio AG Südost")
    assert lines[3].endswith("66.67")
    assert lines[4].endswith("33.33")
    # Counts share a right-aligned column
    assert lines[3].index("2  ") == lines[4].index("1  ")
    assert "more" not in stream.getvalue()


def test_render_count_table_right_aligns_percentages(
    renderer: TerminalReportRenderer, stream: io.StringIO
) -> None:
    """Given percentages of different widths, when rendering, then they share a right edge."""
    table = CountTable(
        title="Events",
        header="Event",
        rows=[CountRow("[No event]", 20, 100.0), CountRow("CCC", 1, 5.0)],
        total=21,
    )

    renderer.render_count_table(table)

    lines = stream.getvalue().splitlines()
    assert lines[3].endswith(" 100.00")
    assert lines[4].endswith("   5.00")
    assert len(lines[3]) == len(lines[4])


def test_render_count_table_with_remaining(
    renderer: TerminalReportRenderer, stream: io.StringIO
) -> None:
    """Given a truncated table, when rendering, then the remainder is mentioned."""
    table = CountTable(
        title="Lines (top 1)",
        header="Line",
        rows=[CountRow("RE 30", 5, 50.0)],
        total=10,
        remaining=4,
    )

    renderer.render_count_table(table)

    assert "... and 4 more" in stream.getvalue()


def test_render_metadata(renderer: TerminalReportRenderer, stream: io.StringIO) -> None:
    """Given a metadata summary, when rendering, then range, distance, duration and points are shown."""
    renderer.render_metadata(
        MetadataSummary(
            date_from=datetime.fromisoformat("2023-07-01T00:00:00+02:00"),
            date_to=datetime.fromisoformat("2023-07-31T23:59:59+02:00"),
            distance_km=123,
            duration_hours=10,
            points=42,
            total_entry_points=45,
        )
    )

    output = stream.getvalue()
    assert "2023-07-01 00:00:00 - 2023-07-31 23:59:59" in output
    assert "Distance travelled: 123 km" in output
    assert "Duration: 10 h" in output
    assert "Points: 42 (total: 45)" in output


def test_render_check_ins(renderer: TerminalReportRenderer, stream: io.StringIO) -> None:
    """Given a check-in, when rendering, then times are German and optional details appear."""
    renderer.render_check_ins(
        [
            CheckInSummary(
                line="RE 30",
                origin="Magdeburg Hbf",
                destination="Halle(Saale)Hbf",
                departure=datetime.fromisoformat("2023-07-03T14:05:00+02:00"),
                arrival=datetime.fromisoformat("2023-07-03T15:05:00+02:00"),
                delay_at_origin="on time",
                delay_at_destination="+120 sec",
                distance_km=80.0,
                duration_minutes=60,
                speed_kmh=80,
                event="CCC",
                note="Crowded",
            )
        ]
    )

    lines = stream.getvalue().splitlines()
    assert lines[0] == "RE 30 Magdeburg Hbf -> Halle(Saale)Hbf"
    assert lines[1] == "\tEvent: CCC"
    assert lines[2] == '\tNote: "Crowded"'
    assert lines[3] == (
        "\tMontag, 03. Juli 2023 14:05 (on time) -> Montag, 03. Juli 2023 15:05 (+120 sec)"
    )
    assert lines[4] == "\t80.00 km, 60 min (80 km/h)"


def test_render_mode_stats(renderer: TerminalReportRenderer, stream: io.StringIO) -> None:
    """Given mode statistics, when rendering, then mode names are padded to one width."""
    renderer.render_mode_stats(
        [
            ModeStatistics("Fernverkehr", 1, 160, 1, 137),
            ModeStatistics("Bus", 2, 4, 0, 0),
        ]
    )

    output = stream.getvalue()
    assert "Fernverkehr: 1 check-ins, 160 km, 1 hours, 137 km/h" in output
    assert "Bus        : 2 check-ins, 4 km, 0 hours, 0 km/h" in output


def test_render_all_lines_and_stations(
    renderer: TerminalReportRenderer, stream: io.StringIO
) -> None:
    """Given lines and stations, when rendering, then each gets one line."""
    renderer.render_all_lines(
        [LineOperatorRow("Bus 50", "Bremen Hbf", "Bremen Domsheide", "Bremer Straßenbahn AG")]
    )
    renderer.render_seen_stations([StationCount("Halle(Saale)Hbf", 3)])

    output = stream.getvalue()
    assert "Bus 50 from Bremen Hbf to Bremen Domsheide Bremer Straßenbahn AG" in output
    assert "3 Halle(Saale)Hbf" in output
