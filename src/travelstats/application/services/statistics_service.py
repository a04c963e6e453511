"""Statistics service computing report data from a merged dataset."""

from collections import Counter
from collections.abc import Callable, Iterable

from travelstats.application.services.operator_classification_service import (
    OperatorClassificationService,
)
from travelstats.domain.models.dataset import Dataset
from travelstats.domain.models.export import CheckInEntry, Train, TrainStop
from travelstats.domain.models.report import (
    CheckInSummary,
    CountRow,
    CountTable,
    LineOperatorRow,
    MetadataSummary,
    ModeStatistics,
    StationCount,
)

# Delays within this many seconds count as on time
ON_TIME_RANGE_SECONDS = 60

NO_EVENT = "[No event]"

# Träwelling category -> display name
MODE_DISPLAY_NAMES = {
    "bus": "Bus",
    "tram": "Tram",
    "suburban": "S-Bahn",
    "subway": "U-Bahn",
    "regional": "Regional (RB, RE, ...)",
    "regionalExp": "Fernverkehr (andere)",
    "national": "Fernverkehr (IC, EC, ...)",
    "nationalExpress": "Fernverkehr (ICE, ...)",
    "ferry": "Fähre",
}

LONG_DISTANCE_PREFIXES = frozenset(
    {"ICE", "IC", "EC", "ECE", "EN", "NJ", "RJ", "RJX", "TGV", "FLX", "IR"}
)

REGIONAL_PREFIXES = frozenset(
    {
        "RE",
        "RB",
        "IRE",
        "MEX",
        "FEX",
        "HBX",
        "ALX",
        "TLX",
        "TL",
        "OPX",
        "BRB",
        "ME",
        "erx",
        "NBE",
        "WFB",
        "NWB",
        "DWE",
        "KD",
    }
)


def mode_display_name(category: str) -> str:
    """Map a Träwelling category to its display name."""
    if category in MODE_DISPLAY_NAMES:
        return MODE_DISPLAY_NAMES[category]
    return category[:1].upper() + category[1:]


def is_long_distance(line: str) -> bool:
    return line.split(" ", 1)[0] in LONG_DISTANCE_PREFIXES


def is_regional(line: str) -> bool:
    """Regional lines by category; unspaced labels like "RE7" by prefix."""
    if " " in line:
        return line.split(" ", 1)[0] in REGIONAL_PREFIXES
    return any(line.startswith(prefix) for prefix in REGIONAL_PREFIXES)


def is_s_bahn(line: str) -> bool:
    return line.startswith("S") and not line.startswith("ST")


def is_u_bahn(line: str) -> bool:
    return line.startswith("U")


def is_tram(line: str) -> bool:
    # Covers both "STR" and Stuttgart's "STB"
    return line.startswith("ST")


def is_bus(line: str) -> bool:
    return line.startswith("Bus")


MODE_FILTERS: tuple[tuple[str, Callable[[str], bool]], ...] = (
    ("Fernverkehr", is_long_distance),
    ("Regional", is_regional),
    ("S-Bahn", is_s_bahn),
    ("U-Bahn", is_u_bahn),
    ("Tram", is_tram),
    ("Bus", is_bus),
)


def percentage(count: int, total: int) -> float:
    """Share of count in total, in percent."""
    if total == 0:
        return 0.0
    return count / total * 100


def format_delay(stop: TrainStop) -> str:
    """Describe the accumulated departure and arrival delay at a stop.

    Returns "+N sec" when late beyond the on-time range, "-N sec" when early,
    otherwise "on time".
    """
    departure = (stop.departure_real or stop.departure) - (
        stop.departure_planned or stop.departure
    )
    arrival = (stop.arrival_real or stop.arrival) - (stop.arrival_planned or stop.arrival)
    accumulated = int((departure + arrival).total_seconds())

    if accumulated > ON_TIME_RANGE_SECONDS:
        return f"+{accumulated} sec"
    if accumulated < 0:
        return f"{accumulated} sec"
    return "on time"


def average_speed_kmh(distance_m: int, duration_min: int) -> int:
    """Average speed in km/h, 0 when no duration was recorded."""
    if duration_min <= 0:
        return 0
    # Halves round up
    return int(distance_m * 60 / (duration_min * 1000) + 0.5)


class StatisticsService:
    """Computes the statistics shown by each report step."""

    def __init__(
        self, classifier: OperatorClassificationService, top_limit: int | None = None
    ) -> None:
        """Initialize the service.

        Args:
            classifier: Operator classification used by operator reports.
            top_limit: Maximum rows for counted tables; None shows every row.
        """
        self._classifier = classifier
        self._top_limit = top_limit

    def _title(self, name: str) -> str:
        if self._top_limit is None:
            return f"{name} (all time)"
        return f"{name} (top {self._top_limit})"

    def _count_table(self, title: str, header: str, labels: Iterable[str]) -> CountTable:
        """Count labels, sort by count descending and apply the top limit.

        Ties keep the order of first appearance.
        """
        counts = Counter(labels)
        total = sum(counts.values())
        ordered = sorted(counts.items(), key=lambda item: -item[1])

        remaining = 0
        if self._top_limit is not None and len(ordered) > self._top_limit:
            remaining = len(ordered) - self._top_limit
            ordered = ordered[: self._top_limit]

        rows = [CountRow(label, count, percentage(count, total)) for label, count in ordered]
        return CountTable(title=title, header=header, rows=rows, total=total, remaining=remaining)

    def metadata(self, dataset: Dataset) -> MetadataSummary:
        """Summarize the exports' date range, distance, duration and points."""
        user = dataset.user
        return MetadataSummary(
            date_from=dataset.date_from,
            date_to=dataset.date_to,
            distance_km=user.train_distance // 1000,
            duration_hours=user.train_duration // 60,
            points=user.points,
            total_entry_points=sum(e.status.train.points for e in dataset.entries),
        )

    def events(self, dataset: Dataset) -> CountTable:
        """Count check-ins per event. Not limited by the top limit."""
        counts = Counter(
            e.status.event.name if e.status.event is not None else NO_EVENT
            for e in dataset.entries
        )
        total = sum(counts.values())
        rows = [
            CountRow(event, count, percentage(count, total))
            for event, count in sorted(counts.items(), key=lambda item: -item[1])
        ]
        return CountTable(title="Events", header="Event", rows=rows, total=total)

    def modes(self, dataset: Dataset) -> CountTable:
        """Count check-ins per transit mode."""
        return self._count_table(
            self._title("Modes"),
            "Mode",
            (mode_display_name(e.status.train.category) for e in dataset.entries),
        )

    def lines(self, dataset: Dataset) -> CountTable:
        """Count check-ins per line name."""
        return self._count_table(
            self._title("Lines"), "Line", (e.trip.line_name for e in dataset.entries)
        )

    def operators(self, dataset: Dataset) -> CountTable:
        """Count check-ins per operator."""
        return self._count_table(
            self._title("Operators"),
            "Operator",
            (self._classifier.classify_entry(e) for e in dataset.entries),
        )

    def mode_stats(self, dataset: Dataset) -> list[ModeStatistics]:
        """Aggregate check-ins, distance, duration and speed per broad mode."""
        trains = [e.status.train for e in dataset.entries]
        return [
            self._mode_statistics(name, [t for t in trains if matches(t.line_name)])
            for name, matches in MODE_FILTERS
        ]

    @staticmethod
    def _mode_statistics(name: str, trains: list[Train]) -> ModeStatistics:
        distance = sum(t.distance for t in trains)
        duration = sum(t.duration for t in trains)
        return ModeStatistics(
            name=name,
            check_ins=len(trains),
            distance_km=distance // 1000,
            duration_hours=duration // 60,
            average_speed_kmh=average_speed_kmh(distance, duration),
        )

    def all_lines(self, dataset: Dataset) -> list[LineOperatorRow]:
        """List unique line/endpoint combinations with their operator, sorted by line."""
        seen: set[LineOperatorRow] = set()
        rows: list[LineOperatorRow] = []
        for entry in sorted(dataset.entries, key=lambda e: e.trip.line_name):
            row = LineOperatorRow(
                line=entry.trip.line_name,
                origin=entry.trip.origin.name,
                destination=entry.trip.destination.name,
                operator=self._classifier.classify_entry(entry),
            )
            if row not in seen:
                seen.add(row)
                rows.append(row)
        return rows

    def seen_stations(self, dataset: Dataset) -> list[StationCount]:
        """Count how often each station was an origin or destination."""
        counts: Counter[str] = Counter()
        for entry in dataset.entries:
            counts[entry.status.train.origin.name] += 1
            counts[entry.status.train.destination.name] += 1
        return [
            StationCount(station, count)
            for station, count in sorted(counts.items(), key=lambda item: -item[1])
        ]

    def check_ins(self, dataset: Dataset) -> list[CheckInSummary]:
        """Prepare every check-in for display, in export order."""
        return [self._check_in_summary(entry) for entry in dataset.entries]

    def _check_in_summary(self, entry: CheckInEntry) -> CheckInSummary:
        status = entry.status
        train = status.train
        return CheckInSummary(
            line=train.line_name,
            origin=train.origin.name,
            destination=train.destination.name,
            departure=train.origin.departure,
            arrival=train.destination.arrival,
            delay_at_origin=format_delay(train.origin),
            delay_at_destination=format_delay(train.destination),
            distance_km=train.distance / 1000,
            duration_minutes=train.duration,
            speed_kmh=average_speed_kmh(train.distance, train.duration),
            event=status.event.name if status.event is not None else None,
            note=status.body or None,
            operator=self._classifier.classify_entry(entry),
        )
