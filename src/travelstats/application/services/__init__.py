"""Application services."""

from travelstats.application.services.operator_classification_service import (
    UNKNOWN_OPERATOR,
    OperatorClassificationService,
)
from travelstats.application.services.statistics_service import StatisticsService

__all__ = ["UNKNOWN_OPERATOR", "OperatorClassificationService", "StatisticsService"]
