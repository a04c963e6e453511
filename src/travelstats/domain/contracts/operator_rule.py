"""Protocol for operator matching rules."""

from typing import Protocol

from travelstats.domain.models.trip_identity import TripIdentity


class OperatorRule(Protocol):
    """A rule that recognises the lines run by one operator."""

    def matches(self, trip: TripIdentity) -> bool:
        """Check whether this operator most likely ran the trip.

        Args:
            trip: Line name and endpoints of the trip.

        Returns:
            True if the trip belongs to this operator.
        """
        ...

    def name(self) -> str:
        """Display name of the operator."""
        ...
