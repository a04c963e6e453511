"""Operator definition repository port."""

from typing import Protocol

from travelstats.domain.models.operator_definition import OperatorDefinition


class OperatorDefinitionRepository(Protocol):
    """Port for retrieving declarative operator definitions."""

    def get_definitions(self) -> list[OperatorDefinition]:
        """Get operator definitions in declaration order."""
        ...
