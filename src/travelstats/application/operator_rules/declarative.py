"""Declarative operator rules loaded from the operators JSON file."""

import logging
import re

from travelstats.domain.models.operator_definition import DefinedLine, OperatorDefinition
from travelstats.domain.models.trip_identity import TripIdentity

logger = logging.getLogger(__name__)


class DeclarativeRuleSet:
    """Classifies trips using operator definitions in declaration order.

    A definition is a candidate when one of its types accepts the line. The
    first candidate whose refinement criteria are satisfied wins.
    """

    def __init__(self, definitions: list[OperatorDefinition]) -> None:
        """Initialize with definitions in file order."""
        self._definitions = tuple(definitions)
        self._patterns: dict[str, re.Pattern[str]] = {
            d.regex: re.compile(d.regex) for d in self._definitions if d.regex is not None
        }
        logger.debug(f"Declarative rule set with {len(self._definitions)} operator definition(s)")

    def __len__(self) -> int:
        return len(self._definitions)

    def classify(self, trip: TripIdentity) -> str | None:
        """Return the name of the first definition matching the trip, or None."""
        for definition in self._definitions:
            if not self._accepts_line(definition, trip.line_name):
                continue

            if definition.station_matches:
                if any(
                    s in trip.origin or s in trip.destination for s in definition.station_matches
                ):
                    return definition.name
            elif definition.lines:
                if any(self._matches_line(entry, trip) for entry in definition.lines):
                    return definition.name
            else:
                return definition.name

        return None

    def _accepts_line(self, definition: OperatorDefinition, line: str) -> bool:
        """Check the first-stage type filter.

        With a regex the whole line must match it; otherwise the leading token
        must equal a type, or for labels without a space, start with one.
        """
        for line_type in definition.types:
            if definition.regex is not None:
                if self._patterns[definition.regex].fullmatch(line):
                    return True
            elif " " in line:
                if line.split(" ", 1)[0] == line_type:
                    return True
            elif line.startswith(line_type):
                return True
        return False

    @staticmethod
    def _matches_line(entry: DefinedLine, trip: TripIdentity) -> bool:
        """Check a specific line entry, in either direction of travel."""
        if entry.line != trip.line_name:
            return False
        for start, end in ((trip.origin, trip.destination), (trip.destination, trip.origin)):
            if (entry.from_station is None or entry.from_station == start) and (
                entry.to_station is None or entry.to_station == end
            ):
                return True
        return False
