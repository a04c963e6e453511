"""Merged dataset domain model."""

from dataclasses import dataclass
from datetime import datetime

from travelstats.domain.models.export import CheckInEntry, ExportUser


@dataclass(frozen=True)
class Dataset:
    """Check-ins merged from one or more exports."""

    entries: tuple[CheckInEntry, ...]
    date_from: datetime  # Earliest export start
    date_to: datetime  # Latest export end
    user: ExportUser  # User summary of the most recent export
