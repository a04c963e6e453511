"""Report domain models produced by the statistics service."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class CountRow:
    """A label with its count and share of the table total."""

    label: str
    count: int
    percentage: float  # 0-100


@dataclass(frozen=True)
class CountTable:
    """A counted report, sorted by count descending and possibly truncated."""

    title: str
    header: str  # Label column heading (e.g., "Operator")
    rows: list[CountRow]
    total: int
    remaining: int = 0  # Rows dropped by the top limit


@dataclass(frozen=True)
class MetadataSummary:
    """Basic statistics from the export meta blocks."""

    date_from: datetime
    date_to: datetime
    distance_km: int
    duration_hours: int
    points: int
    total_entry_points: int


@dataclass(frozen=True)
class ModeStatistics:
    """Aggregates for one broad transit mode."""

    name: str
    check_ins: int
    distance_km: int
    duration_hours: int
    average_speed_kmh: int


@dataclass(frozen=True)
class LineOperatorRow:
    """A unique line/endpoint combination and the operator assigned to it."""

    line: str
    origin: str
    destination: str
    operator: str


@dataclass(frozen=True)
class CheckInSummary:
    """A single check-in prepared for display."""

    line: str
    origin: str
    destination: str
    departure: datetime
    arrival: datetime
    delay_at_origin: str  # e.g. "+120 sec", "-30 sec", "on time"
    delay_at_destination: str
    distance_km: float
    duration_minutes: int
    speed_kmh: int
    event: str | None = None
    note: str | None = None
    operator: str | None = None


@dataclass(frozen=True)
class StationCount:
    """How often a station was an origin or destination."""

    station: str
    count: int

