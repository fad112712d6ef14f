"""Alert generation for rooms that leave their heating plan's range."""

from collections.abc import Iterable, Mapping
from typing import Any, Protocol

import structlog

from heatplan.domain.models import HeatingPlan, RangeLike
from heatplan.services.snapshots import load_rooms

logger = structlog.get_logger(__name__)

OUTSIDE_RANGE_ALERT = "room temperature went outside range"


class RoomLike(Protocol):
    """Anything exposing the range a room observed over the day."""

    @property
    def days_temp_range(self) -> RangeLike: ...


def alert_if_outside_range(room: RoomLike, plan: HeatingPlan) -> list[str]:
    """Return a one-message list if the room escaped the plan's range, else empty."""
    alerts: list[str] = []

    observed = room.days_temp_range
    if not plan.within_range(observed):
        alerts.append(OUTSIDE_RANGE_ALERT)
        logger.warning(
            "room_temperature_outside_range",
            component="alerts",
            observed_low=observed.low,
            observed_high=observed.high,
            allowed_low=plan.temperature_range.low,
            allowed_high=plan.temperature_range.high,
        )

    return alerts


def check_rooms(snapshots: Iterable[Mapping[str, Any]], plan: HeatingPlan) -> dict[str, list[str]]:
    """
    Check raw room readings against a plan.

    Malformed readings are skipped. The result maps each room name to its
    alerts, in input order; a repeated name keeps the last reading.
    """
    results = {room.name: alert_if_outside_range(room, plan) for room in load_rooms(snapshots)}

    logger.info(
        "rooms_checked",
        component="alerts",
        rooms=len(results),
        alerting=sum(1 for alerts in results.values() if alerts),
    )
    return results
