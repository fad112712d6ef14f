"""
Console report of room temperatures against the configured heating plan.

Run with: python -m heatplan
"""

from collections.abc import Iterable

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from heatplan.config import get_config
from heatplan.domain.models import HeatingPlan, Room
from heatplan.log import configure_logging
from heatplan.services.alerts import alert_if_outside_range
from heatplan.services.snapshots import load_rooms

SAMPLE_SNAPSHOTS = [
    {"name": "living-room", "daysTempRange": {"low": 15, "high": 18}},
    {"name": "kitchen", "daysTempRange": {"low": 10, "high": 20}},
    {"name": "bedroom", "daysTempRange": {"low": 10, "high": 25}},
    {"name": "cellar", "daysTempRange": {"low": 8, "high": 18}},
    {"name": "attic", "daysTempRange": {"low": 22, "high": 12}},
]


def build_report_table(rooms: Iterable[Room], plan: HeatingPlan) -> Table:
    """One row per room with its observed range and whether it stayed in plan."""
    allowed = plan.temperature_range
    table = Table(title=f"Heating plan {allowed.low:g} to {allowed.high:g}")
    table.add_column("Room", style="cyan")
    table.add_column("Low", justify="right")
    table.add_column("High", justify="right")
    table.add_column("Status")

    for room in rooms:
        status = "[red]outside range" if alert_if_outside_range(room, plan) else "[green]ok"
        table.add_row(
            room.name,
            f"{room.days_temp_range.low:g}",
            f"{room.days_temp_range.high:g}",
            status,
        )

    return table


def main(console: Console | None = None) -> None:
    console = console or Console()
    config = get_config()
    configure_logging(config.logging)

    plan = HeatingPlan.from_bounds(config.plan.low, config.plan.high)
    rooms = load_rooms(SAMPLE_SNAPSHOTS)

    console.print(build_report_table(rooms, plan))
    console.print(
        Panel(
            f"{len(rooms)} of {len(SAMPLE_SNAPSHOTS)} snapshots valid",
            title="Summary",
            style="bold",
        )
    )


if __name__ == "__main__":
    main()
