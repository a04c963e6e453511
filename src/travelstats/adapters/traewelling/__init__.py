"""Träwelling export adapters."""

from travelstats.adapters.traewelling.export_repository import JsonExportRepository

__all__ = ["JsonExportRepository"]
