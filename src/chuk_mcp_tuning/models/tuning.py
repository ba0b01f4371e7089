"""
Tuning definition model - tunings as data.

A tuning definition names two reference intervals and the ratios they
should have. The octave reference defaults to a pure P8 = 2, so most
definitions only spell out the second reference:

    name: sixth-comma-meantone
    family: meantone
    references:
      - interval: A4
        ratio: 1.40625
"""

from __future__ import annotations

import re

from pydantic import BaseModel, Field, field_validator

from chuk_mcp_tuning.constants import TuningFamily
from chuk_mcp_tuning.core.intonation import Tuning
from chuk_mcp_tuning.core.pitch import Interval

NAME_PATTERN = re.compile(r"^[a-z0-9]+(-[a-z0-9]+)*$")


class TuningReference(BaseModel):
    """An interval paired with the frequency ratio it should have."""

    interval: str = Field(..., description="Interval notation (e.g., 'P8', 'M3', '-P5')")
    ratio: float = Field(..., gt=0, description="Frequency ratio for the interval")

    model_config = {"frozen": True}

    @field_validator("interval")
    @classmethod
    def validate_interval(cls, v: str) -> str:
        Interval.parse(v)
        return v.strip()

    def to_interval(self) -> Interval:
        return Interval.parse(self.interval)


def _pure_octave() -> TuningReference:
    return TuningReference(interval="P8", ratio=2.0)


class TuningDefinition(BaseModel):
    """
    A complete tuning definition.

    Exactly two references are used; when only one is given, a pure
    octave is added as the first.
    """

    schema_version: str = Field("tuning/v1", alias="schema", description="Schema version")
    name: str = Field(..., description="Tuning name (kebab-case)")
    description: str = Field("", description="Human-readable description")
    family: TuningFamily = Field(TuningFamily.OTHER, description="Tuning family")
    references: list[TuningReference] = Field(
        ..., min_length=1, max_length=2, description="Reference intervals and ratios"
    )

    model_config = {"populate_by_name": True, "frozen": True}

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not NAME_PATTERN.match(v):
            raise ValueError(f"Invalid tuning name: {v}")
        return v

    @field_validator("references")
    @classmethod
    def add_pure_octave(cls, v: list[TuningReference]) -> list[TuningReference]:
        if len(v) == 1:
            return [_pure_octave(), v[0]]
        return v

    @classmethod
    def from_tuning(
        cls,
        tuning: Tuning,
        family: TuningFamily = TuningFamily.OTHER,
        description: str = "",
    ) -> TuningDefinition:
        """Describe an existing tuning as data."""
        return cls(
            name=tuning.name,
            description=description,
            family=family,
            references=[
                TuningReference(interval=str(interval), ratio=ratio)
                for interval, ratio in tuning.references
            ],
        )

    def to_tuning(self) -> Tuning:
        """
        Build the tuning.

        Raises:
            DegenerateBasisError: if the references are collinear
        """
        first, second = self.references
        return Tuning(
            (first.to_interval(), first.ratio),
            (second.to_interval(), second.ratio),
            self.name,
        )


class TuningMetadata(BaseModel):
    """Lightweight metadata for listing tunings."""

    name: str
    description: str
    family: TuningFamily
    references: list[str]

    model_config = {"frozen": True}

    @classmethod
    def from_definition(cls, definition: TuningDefinition) -> TuningMetadata:
        """Create metadata from a definition."""
        return cls(
            name=definition.name,
            description=definition.description,
            family=definition.family,
            references=[f"{r.interval}={r.ratio:g}" for r in definition.references],
        )
