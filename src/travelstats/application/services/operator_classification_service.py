"""Operator classification service."""

import logging
from collections.abc import Sequence

from travelstats.application.operator_rules.declarative import DeclarativeRuleSet
from travelstats.application.operator_rules.hardcoded import HARDCODED_RULES
from travelstats.domain.contracts.operator_rule import OperatorRule
from travelstats.domain.models.errors import RuleContractViolation
from travelstats.domain.models.export import CheckInEntry
from travelstats.domain.models.trip_identity import TripIdentity

logger = logging.getLogger(__name__)

UNKNOWN_OPERATOR = "<unknown operator>"


class OperatorClassificationService:
    """Determines which operator most likely ran a trip.

    Precedence: the operator reported upstream by Träwelling, then the first
    matching hardcoded rule, then the declarative definitions, else
    UNKNOWN_OPERATOR.
    """

    def __init__(
        self,
        declarative_rules: DeclarativeRuleSet | None = None,
        rules: Sequence[OperatorRule] = HARDCODED_RULES,
    ) -> None:
        """Initialize the service.

        Args:
            declarative_rules: Fallback definitions; None disables the fallback.
            rules: Hardcoded rules in priority order.
        """
        self._declarative_rules = (
            declarative_rules if declarative_rules is not None else DeclarativeRuleSet([])
        )
        self._rules = tuple(rules)
        self._cache: dict[TripIdentity, str] = {}

    def classify(self, trip: TripIdentity, upstream_operator: str | None = None) -> str:
        """Classify a trip. Never raises; guesses are never empty."""
        if upstream_operator is not None:
            return upstream_operator

        if trip not in self._cache:
            self._cache[trip] = self._guess(trip)
        return self._cache[trip]

    def classify_entry(self, entry: CheckInEntry) -> str:
        """Classify a check-in, honouring the operator reported in the export."""
        return self.classify(entry.trip_identity, entry.upstream_operator)

    def match_hardcoded(self, trip: TripIdentity) -> str | None:
        """Return the name of the first hardcoded rule matching the trip."""
        for rule in self._rules:
            try:
                if rule.matches(trip):
                    return rule.name()
            except RuleContractViolation as e:
                logger.warning(f"Skipping operator rule for {trip.line_name}: {e}")
            except Exception as e:
                logger.error(
                    f"Operator rule '{rule.name()}' failed, skipping it: {e}", exc_info=True
                )
        return None

    def _guess(self, trip: TripIdentity) -> str:
        operator = self.match_hardcoded(trip)
        if operator is not None:
            return operator

        operator = self._declarative_rules.classify(trip)
        if operator is not None:
            return operator

        logger.debug(
            f"No operator found for {trip.line_name} ({trip.origin} -> {trip.destination})"
        )
        return UNKNOWN_OPERATOR
