"""Errors raised by travelstats."""


class TravelstatsError(Exception):
    """Base class for all travelstats errors."""


class OperatorDefinitionsError(TravelstatsError, ValueError):
    """The operator definitions file exists but cannot be used."""


class ExportLoadError(TravelstatsError):
    """An export file could not be read or parsed."""


class EmptyDatasetError(TravelstatsError):
    """The merged exports contain no check-ins."""


class RuleContractViolation(TravelstatsError):
    """A hardcoded operator rule received input it was not written for."""

    def __init__(self, rule_name: str, message: str) -> None:
        super().__init__(f"{rule_name}: {message}")
        self.rule_name = rule_name
