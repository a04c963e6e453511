"""Repository reading Träwelling JSON exports from disk."""

import logging
from collections.abc import Sequence
from pathlib import Path

from pydantic import ValidationError

from travelstats.domain.models.dataset import Dataset
from travelstats.domain.models.errors import EmptyDatasetError, ExportLoadError
from travelstats.domain.models.export import CheckInEntry, TraewellingExport
from travelstats.domain.ports.export_repository import ExportRepository

logger = logging.getLogger(__name__)


class JsonExportRepository(ExportRepository):
    """Loads and merges Träwelling export files.

    Exports covering overlapping date ranges share check-ins; entries are
    deduplicated by status id, keeping the first occurrence in file order.
    """

    def load(self, paths: Sequence[Path]) -> Dataset:
        """Load the given export files into one dataset.

        Raises:
            ExportLoadError: If a file cannot be read or is not a valid export.
            EmptyDatasetError: If the exports contain no check-ins.
        """
        exports = [self._read_export(path) for path in paths]
        if not exports:
            raise EmptyDatasetError("No export files given")

        entries: list[CheckInEntry] = []
        seen_ids: set[int] = set()
        duplicates = 0
        for export in exports:
            for entry in export.entries:
                if entry.status.id in seen_ids:
                    duplicates += 1
                    continue
                seen_ids.add(entry.status.id)
                entries.append(entry)

        if duplicates:
            logger.info(f"Dropped {duplicates} duplicate check-in(s) from overlapping exports")

        if not entries:
            raise EmptyDatasetError(f"No check-ins found in {len(exports)} export file(s)")

        latest = max(exports, key=lambda e: e.meta.exported_at)
        dataset = Dataset(
            entries=tuple(entries),
            date_from=min(e.meta.from_ for e in exports),
            date_to=max(e.meta.to for e in exports),
            user=latest.meta.user,
        )
        logger.info(
            f"Loaded {len(entries)} check-in(s) from {len(exports)} export(s), "
            f"{dataset.date_from:%Y-%m-%d} to {dataset.date_to:%Y-%m-%d}"
        )
        return dataset

    @staticmethod
    def _read_export(path: Path) -> TraewellingExport:
        try:
            content = path.read_bytes()
        except OSError as e:
            raise ExportLoadError(f"Cannot read export {path}: {e}") from e

        try:
            export = TraewellingExport.model_validate_json(content)
        except ValidationError as e:
            raise ExportLoadError(f"Invalid export {path}: {e}") from e

        logger.debug(f"Read {len(export.entries)} check-in(s) from {path}")
        return export
