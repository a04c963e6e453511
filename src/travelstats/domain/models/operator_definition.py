"""Declarative operator definition domain models."""

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator


class DefinedLine(BaseModel):
    """A specific line, optionally pinned to its endpoints."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    line: str
    from_station: str | None = Field(default=None, alias="from")
    to_station: str | None = Field(default=None, alias="to")


class OperatorDefinition(BaseModel):
    """An operator described in the operators JSON file rather than in code.

    `types` is always consulted first; `regex`, when present, replaces the
    plain prefix comparison. The remaining criteria refine the match in this
    order: station substrings, then specific lines, else the definition
    accepts every line of its types.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    name: str
    types: list[str]
    lines: list[DefinedLine] = Field(default_factory=list)
    station_matches: list[str] = Field(
        default_factory=list, alias="match-all-stations-containing"
    )
    regex: str | None = None

    @field_validator("regex")
    @classmethod
    def validate_regex(cls, v: str | None) -> str | None:
        """Validate that regex compiles."""
        if v is None:
            return v
        try:
            re.compile(v)
        except re.error as e:
            raise ValueError(f"regex {v!r} is not a valid regular expression: {e}") from e
        return v
