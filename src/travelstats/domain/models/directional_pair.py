"""Directional pair domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DirectionalPair:
    """A line with its endpoints, as listed in curated operator tables.

    Origin and destination are interchangeable when looking a trip up in a
    table. A missing endpoint (None) never equals a real station name, so only
    the other endpoint can make the entry match.
    """

    line: str
    origin: str | None
    destination: str | None

    def reversed(self) -> "DirectionalPair":
        """Return the same pair travelling the other way."""
        return DirectionalPair(self.line, self.destination, self.origin)
