"""Trip identity domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TripIdentity:
    """The line and endpoints that identify a trip for operator classification."""

    line_name: str  # Public line label (e.g., "RE 30", "Bus 50", "S 7")
    origin: str  # Origin station name (e.g., "Magdeburg Hbf")
    destination: str  # Destination station name
