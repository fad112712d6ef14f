"""
Tests for the console report.
"""

from collections.abc import Iterator

import pytest
from rich.console import Console

from heatplan.config import get_config
from heatplan.domain.models import HeatingPlan, Room, TemperatureRange
from heatplan.report import SAMPLE_SNAPSHOTS, build_report_table, main


@pytest.fixture
def console() -> Console:
    return Console(record=True, width=100, color_system=None)


@pytest.fixture(autouse=True)
def clear_config_cache() -> Iterator[None]:
    get_config.cache_clear()
    yield
    get_config.cache_clear()


def _row(output: str, name: str) -> str:
    return next(line for line in output.splitlines() if name in line)


def test_build_report_table_marks_each_room(console: Console) -> None:
    plan = HeatingPlan.from_bounds(10, 20)
    rooms = [
        Room(name="kitchen", days_temp_range=TemperatureRange(low=12, high=18)),
        Room(name="bedroom", days_temp_range=TemperatureRange(low=10, high=25)),
    ]

    table = build_report_table(rooms, plan)
    console.print(table)
    output = console.export_text()

    assert table.row_count == 2
    assert "Heating plan 10 to 20" in output
    assert "ok" in _row(output, "kitchen")
    assert "outside range" in _row(output, "bedroom")


def test_main_renders_configured_plan(
    console: Console, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("HEATING_PLAN_LOW", "12")
    monkeypatch.setenv("HEATING_PLAN_HIGH", "22")
    monkeypatch.setattr("heatplan.report.configure_logging", lambda config: None)

    main(console)
    output = console.export_text()

    assert "Heating plan 12 to 22" in output
    assert "attic" not in output
    assert f"4 of {len(SAMPLE_SNAPSHOTS)} snapshots valid" in output
    assert "outside range" in _row(output, "cellar")
