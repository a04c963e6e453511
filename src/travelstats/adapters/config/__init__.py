"""Configuration adapters."""

from travelstats.adapters.config.app_config import AppConfig
from travelstats.adapters.config.operator_definitions_loader import (
    JsonOperatorDefinitionRepository,
    load_operator_definitions,
)

__all__ = ["AppConfig", "JsonOperatorDefinitionRepository", "load_operator_definitions"]
