"""Export repository port."""

from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

from travelstats.domain.models.dataset import Dataset


class ExportRepository(Protocol):
    """Port for loading check-in exports."""

    def load(self, paths: Sequence[Path]) -> Dataset:
        """Load and merge the given export files into one dataset."""
        ...
