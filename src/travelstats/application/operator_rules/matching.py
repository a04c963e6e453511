"""Shared primitives for operator rules."""

from collections.abc import Iterable

from travelstats.domain.models.directional_pair import DirectionalPair
from travelstats.domain.models.trip_identity import TripIdentity


def matches_types(line: str, *types: str) -> bool:
    """Check whether the line's leading token is one of the given category prefixes.

    "RE 30" has the leading token "RE"; a label without a space is compared as a whole.
    """
    return line.split(" ", 1)[0] in types


def matches_any(candidate: DirectionalPair, table: Iterable[DirectionalPair]) -> bool:
    """Check whether the candidate appears in a curated table, in either direction.

    An entry matches when the line is equal and at least one endpoint is equal.
    """
    table = tuple(table)
    for pair in (candidate, candidate.reversed()):
        for entry in table:
            if entry.line == pair.line and (
                entry.origin == pair.origin or entry.destination == pair.destination
            ):
                return True
    return False


def any_contains(trip: TripIdentity, *needles: str) -> bool:
    """Check whether origin or destination contains any of the needles."""
    return any(n in trip.origin or n in trip.destination for n in needles)


def both_contain(trip: TripIdentity, needle: str) -> bool:
    """Check whether origin and destination both contain the needle."""
    return needle in trip.origin and needle in trip.destination


def line_number(line: str, default: int) -> int:
    """Parse the last space-separated token of a line label as a number.

    Returns default when the token is not a number (e.g., "Bus N1").
    """
    try:
        return int(line.split(" ")[-1])
    except ValueError:
        return default


def strict_line_number(line: str) -> int | None:
    """Parse "<category> <digits>" labels, returning None for anything else."""
    parts = line.split(" ")
    if len(parts) != 2 or not parts[1].isdecimal():
        return None
    try:
        return int(parts[1])
    except ValueError:
        # Beyond the interpreter's integer string conversion limit
        return None
