"""Ports (interfaces) for the ports-and-adapters architecture."""

from travelstats.domain.ports.export_repository import ExportRepository
from travelstats.domain.ports.operator_definition_repository import (
    OperatorDefinitionRepository,
)

__all__ = ["ExportRepository", "OperatorDefinitionRepository"]
