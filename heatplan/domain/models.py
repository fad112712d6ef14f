"""
Domain models for heating plan monitoring.

These models represent the core business concepts and are framework-agnostic.
They use Pydantic for validation and are frozen so a plan or a room snapshot
cannot change after it has been checked.
"""

from __future__ import annotations

from typing import Protocol

from pydantic import BaseModel, ConfigDict, Field, model_validator


class RangeLike(Protocol):
    """Anything exposing numeric ``low`` and ``high`` bounds."""

    @property
    def low(self) -> float: ...

    @property
    def high(self) -> float: ...


class TemperatureRange(BaseModel):
    """Inclusive temperature interval with ``low <= high``."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    low: float
    high: float

    @model_validator(mode="after")
    def validate_order(self) -> TemperatureRange:
        if self.low > self.high:
            raise ValueError(f"low ({self.low}) must not be greater than high ({self.high})")
        return self


def contained_within(allowed: RangeLike, observed: RangeLike) -> bool:
    """
    Check whether ``observed`` lies entirely within ``allowed``.

    Both bounds are inclusive: a range touching the allowed bounds is within
    them. Inputs are not validated, so a malformed range (low > high) is
    evaluated with the same two comparisons.
    """
    return observed.low >= allowed.low and observed.high <= allowed.high


class HeatingPlan(BaseModel):
    """A heating plan holding the one temperature range rooms must stay in."""

    model_config = ConfigDict(frozen=True)

    temperature_range: TemperatureRange

    @classmethod
    def from_bounds(cls, low: float, high: float) -> HeatingPlan:
        return cls(temperature_range=TemperatureRange(low=low, high=high))

    def within_range(self, observed: RangeLike) -> bool:
        """Check an observed range against this plan's allowed range."""
        return contained_within(self.temperature_range, observed)


class Room(BaseModel):
    """Snapshot of a room and the temperature range it saw over the day."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(min_length=1, description="Room or zone name")
    days_temp_range: TemperatureRange = Field(alias="daysTempRange")
