from __future__ import annotations

import pytest

from mc_spawn_overlay.config import Settings
from mc_spawn_overlay.models import RED, DisplayMode
from mc_spawn_overlay.render import RecordingRenderSink
from mc_spawn_overlay.scanner import VolumeScanner
from mc_spawn_overlay.session import SessionRegistry, UpdateOutcome
from mc_spawn_overlay.world import GridWorld, StaticObserverLocator


@pytest.fixture
def setup():
    world = GridWorld()
    world.set_block((0, 63, 0), "minecraft:stone")
    world.set_block((3, 63, 0), "minecraft:stone_slab[type=bottom]")
    sink = RecordingRenderSink()
    locator = StaticObserverLocator({"steve": (0.4, 64.0, 0.9)})
    registry = SessionRegistry(
        scanner=VolumeScanner(world),
        sink=sink,
        locator=locator,
        settings=Settings(radius=4, default_mode=DisplayMode.ALL, marker_nudge=0.2),
    )
    return registry, sink, locator


def test_new_session_is_disabled_with_default_mode(setup) -> None:
    registry, sink, _ = setup
    session = registry.session_for("steve")

    assert session.is_enabled() is False
    assert session.mode == DisplayMode.ALL
    assert session.update().outcome == UpdateOutcome.SKIPPED
    assert sink.points == []


def test_registry_keeps_one_session_per_observer(setup) -> None:
    registry, _, _ = setup
    assert registry.session_for("steve") is registry.session_for("steve")
    assert len(registry) == 1


def test_show_renders_world_space_markers(setup) -> None:
    registry, sink, _ = setup
    report = registry.session_for("steve").show()

    assert report.outcome == UpdateOutcome.RENDERED
    assert report.points == 2
    by_x = {point.x: point for point in sink.points}
    assert by_x[0.5].y == pytest.approx(64.2)
    assert by_x[0.5].z == 0.5
    assert by_x[0.5].color == RED
    assert by_x[0.5].addressee == "steve"
    assert by_x[3.5].y == pytest.approx(63.7)


def test_toggle_returns_previous_state(setup) -> None:
    registry, _, _ = setup
    session = registry.session_for("steve")

    assert session.toggle() is False
    assert session.is_enabled() is True
    assert session.toggle() is True
    assert session.is_enabled() is False


@pytest.mark.parametrize("times", [0, 2, 4, 6])
def test_even_toggles_restore_state(setup, times: int) -> None:
    registry, _, _ = setup
    session = registry.session_for("steve")
    for _ in range(times):
        session.toggle()
    assert session.is_enabled() is False


def test_hide_stops_rendering(setup) -> None:
    registry, sink, _ = setup
    session = registry.session_for("steve")
    session.show()
    sink.clear()

    session.hide()
    session.hide()
    assert session.update().outcome == UpdateOutcome.SKIPPED
    assert sink.points == []


def test_mode_changes_apply_on_next_update(setup) -> None:
    registry, sink, _ = setup
    session = registry.session_for("steve")
    session.set_mode(DisplayMode.SPAWNABLE)
    assert sink.points == []

    assert session.cycle_mode() == DisplayMode.ALL
    assert session.cycle_mode() == DisplayMode.LIGHTLEVEL
    assert session.cycle_mode() == DisplayMode.SPAWNABLE
    session.show()
    assert len(sink.points) == 2


def test_missing_observer_removes_session(setup) -> None:
    registry, sink, locator = setup
    session = registry.session_for("steve")
    session.show()
    sink.clear()
    locator.forget("steve")

    report = session.update()
    assert report.outcome == UpdateOutcome.SESSION_REMOVED
    assert "steve" not in registry
    assert sink.points == []


def test_tick_updates_every_session(setup) -> None:
    registry, _, locator = setup
    registry.session_for("steve").show()
    registry.session_for("alex")

    reports = registry.tick()
    assert reports["steve"].outcome == UpdateOutcome.RENDERED
    assert reports["alex"].outcome == UpdateOutcome.SKIPPED

    registry.clear()
    assert len(registry) == 0
    registry.remove("steve")
