"""Domain models for travelstats."""

from travelstats.domain.models.dataset import Dataset
from travelstats.domain.models.directional_pair import DirectionalPair
from travelstats.domain.models.errors import (
    EmptyDatasetError,
    ExportLoadError,
    OperatorDefinitionsError,
    RuleContractViolation,
    TravelstatsError,
)
from travelstats.domain.models.export import (
    CheckInEntry,
    Event,
    ExportMeta,
    ExportUser,
    Status,
    TraewellingExport,
    Train,
    TrainOperator,
    TrainStop,
    Trip,
    TripStation,
)
from travelstats.domain.models.operator_definition import DefinedLine, OperatorDefinition
from travelstats.domain.models.report import (
    CheckInSummary,
    CountRow,
    CountTable,
    LineOperatorRow,
    MetadataSummary,
    ModeStatistics,
    StationCount,
)
from travelstats.domain.models.trip_identity import TripIdentity

__all__ = [
    "CheckInEntry",
    "CheckInSummary",
    "CountRow",
    "CountTable",
    "Dataset",
    "DefinedLine",
    "DirectionalPair",
    "EmptyDatasetError",
    "Event",
    "ExportLoadError",
    "ExportMeta",
    "ExportUser",
    "LineOperatorRow",
    "MetadataSummary",
    "ModeStatistics",
    "OperatorDefinition",
    "OperatorDefinitionsError",
    "RuleContractViolation",
    "StationCount",
    "Status",
    "TraewellingExport",
    "Train",
    "TrainOperator",
    "TrainStop",
    "TravelstatsError",
    "Trip",
    "TripIdentity",
    "TripStation",
]
