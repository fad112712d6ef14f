"""
Room snapshot loading.

Raw readings arrive as plain mappings (``{"name": ..., "daysTempRange":
{"low": ..., "high": ...}}``). This module turns them into validated ``Room``
models and reports malformed readings as explicit ``Result`` errors.
"""

from collections.abc import Iterable, Mapping
from typing import Any, Generic, TypeVar

import structlog
from pydantic import ValidationError

from heatplan.domain.models import Room

logger = structlog.get_logger(__name__)

ValueT = TypeVar("ValueT")
ErrorT = TypeVar("ErrorT", bound=BaseException)


class Result(Generic[ValueT, ErrorT]):
    """Outcome of loading a reading: either the loaded value or the error that stopped it."""

    def __init__(self, value: ValueT | None = None, error: ErrorT | None = None) -> None:
        if (value is None) == (error is None):
            raise ValueError("Result needs exactly one of value and error")
        self._value = value
        self._error = error

    @classmethod
    def ok(cls, value: ValueT) -> "Result[ValueT, ErrorT]":
        return cls(value=value)

    @classmethod
    def err(cls, error: ErrorT) -> "Result[ValueT, ErrorT]":
        return cls(error=error)

    def is_ok(self) -> bool:
        return self._error is None

    def unwrap(self) -> ValueT:
        """Return the value, re-raising the stored error for a failed load."""
        if self._error is not None:
            raise self._error
        return self._value  # type: ignore

    def unwrap_err(self) -> ErrorT:
        if self._error is None:
            raise ValueError("Called unwrap_err() on a successful result")
        return self._error


def load_room(data: Mapping[str, Any]) -> Result[Room, ValidationError]:
    """Validate one raw room reading."""
    try:
        return Result.ok(Room.model_validate(data))
    except ValidationError as e:
        return Result.err(e)


def load_rooms(snapshots: Iterable[Mapping[str, Any]]) -> list[Room]:
    """Load every valid snapshot, logging and skipping the malformed ones."""
    log = logger.bind(component="snapshot_loader")
    rooms: list[Room] = []

    for index, data in enumerate(snapshots):
        result = load_room(data)
        if result.is_ok():
            rooms.append(result.unwrap())
        else:
            log.warning(
                "room_snapshot_invalid",
                index=index,
                room=data.get("name"),
                error_count=result.unwrap_err().error_count(),
            )

    return rooms
