"""Operator definitions loader for the declarative rule tier."""

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from travelstats.domain.models.errors import OperatorDefinitionsError
from travelstats.domain.models.operator_definition import OperatorDefinition
from travelstats.domain.ports.operator_definition_repository import (
    OperatorDefinitionRepository,
)

logger = logging.getLogger(__name__)

_DEFINITIONS_ADAPTER = TypeAdapter(list[OperatorDefinition])


@lru_cache(maxsize=8)
def load_operator_definitions(path: Path) -> tuple[OperatorDefinition, ...]:
    """Load operator definitions from a JSON file, once per path.

    A missing file is not an error; the declarative tier is simply empty.

    Raises:
        OperatorDefinitionsError: If the file cannot be read or is not a
            valid list of operator definitions.
    """
    if not path.exists():
        logger.warning(
            f"Operator definitions file not found: {path}, declarative rules disabled"
        )
        return ()

    try:
        content = path.read_bytes()
    except OSError as e:
        raise OperatorDefinitionsError(f"Cannot read operator definitions {path}: {e}") from e

    try:
        definitions = _DEFINITIONS_ADAPTER.validate_json(content)
    except ValidationError as e:
        raise OperatorDefinitionsError(f"Invalid operator definitions in {path}: {e}") from e

    logger.info(f"Loaded {len(definitions)} operator definition(s) from {path}")
    return tuple(definitions)


class JsonOperatorDefinitionRepository(OperatorDefinitionRepository):
    """Operator definitions read from a JSON file."""

    def __init__(self, path: Path | str) -> None:
        """Initialize with the path of the operators JSON file."""
        self._path = Path(path)

    def get_definitions(self) -> list[OperatorDefinition]:
        """Get operator definitions in file order."""
        return list(load_operator_definitions(self._path))
