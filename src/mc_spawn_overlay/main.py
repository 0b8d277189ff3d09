"""CLI entrypoint for the spawn overlay."""

from __future__ import annotations

import time

import typer
from rich import print
from rich.table import Table

from mc_spawn_overlay.adapters import (
    EchoGameCommandAdapter,
    MinescriptGameCommandAdapter,
    MinescriptObserverLocator,
    MinescriptUnavailableError,
)
from mc_spawn_overlay.config import settings
from mc_spawn_overlay.models import DisplayMode
from mc_spawn_overlay.render import ParticleCommandSink, RecordingRenderSink
from mc_spawn_overlay.scanner import VolumeScanner, block_origin
from mc_spawn_overlay.session import SessionRegistry, UpdateOutcome, marker_position
from mc_spawn_overlay.telemetry import configure_logging
from mc_spawn_overlay.world import GridWorld, SnapshotError, StaticObserverLocator, load_snapshot

app = typer.Typer(help="Spawn-light overlay service entrypoint")


@app.callback()
def _setup() -> None:
    configure_logging(settings.log_level)


def _load_world(snapshot: str | None) -> GridWorld:
    path = snapshot or settings.snapshot_path
    if not path:
        raise typer.BadParameter("Provide --snapshot or set MC_SPAWN_OVERLAY_SNAPSHOT_PATH")
    try:
        return load_snapshot(path)
    except SnapshotError as exc:
        print({"error": str(exc)})
        raise typer.Exit(code=1)


def _build_game_adapter():
    if settings.minecraft_adapter.lower() == "minescript":
        try:
            return MinescriptGameCommandAdapter(command_prefix=settings.minescript_command_prefix)
        except MinescriptUnavailableError:
            return EchoGameCommandAdapter()
    return EchoGameCommandAdapter()


def _build_locator(observer: str, position: tuple[float, float, float]):
    if settings.minecraft_adapter.lower() == "minescript":
        try:
            return MinescriptObserverLocator()
        except MinescriptUnavailableError:
            pass
    return StaticObserverLocator({observer: position})


def _build_registry(world: GridWorld, locator) -> SessionRegistry:
    sink = ParticleCommandSink(_build_game_adapter(), particle_size=settings.particle_size)
    return SessionRegistry(scanner=VolumeScanner(world), sink=sink, locator=locator, settings=settings)


@app.command()
def start() -> None:
    """Show runtime configuration."""
    print(
        {
            "app_name": settings.app_name,
            "radius": settings.radius,
            "default_mode": settings.default_mode.value,
            "update_interval_seconds": settings.update_interval_seconds,
            "minecraft_adapter": settings.minecraft_adapter,
            "snapshot_path": settings.snapshot_path,
        }
    )


@app.command()
def scan(
    snapshot: str = typer.Option(None, help="Path to a JSON world snapshot"),
    x: float = typer.Option(..., help="Observer X"),
    y: float = typer.Option(..., help="Observer Y"),
    z: float = typer.Option(..., help="Observer Z"),
    radius: int = typer.Option(None, help="Scan radius (defaults to configured radius)"),
    mode: DisplayMode = typer.Option(None, help="Display mode (defaults to configured mode)"),
) -> None:
    """Scan a snapshot around a position and list the marked blocks."""
    world = _load_world(snapshot)
    effective_mode = mode or settings.default_mode
    effective_radius = settings.radius if radius is None else radius
    origin = block_origin((x, y, z))

    sink = RecordingRenderSink()
    for point in VolumeScanner(world).scan(origin, effective_radius, effective_mode):
        px, py, pz = marker_position(origin, point, nudge=settings.marker_nudge)
        sink.emit("console", px, py, pz, point.color)

    table = Table(title=f"{len(sink.points)} marker(s), mode={effective_mode.value}, radius={effective_radius}")
    for column in ("x", "y", "z", "color"):
        table.add_column(column)
    for rendered in sink.points:
        hex_color = rendered.color.as_hex()
        table.add_row(
            f"{rendered.x:.2f}",
            f"{rendered.y:.2f}",
            f"{rendered.z:.2f}",
            f"[{hex_color}]{hex_color}[/]",
        )
    print(table)


@app.command()
def render(
    observer: str = typer.Option(..., help="Player name receiving the particles"),
    x: float = typer.Option(..., help="Observer X"),
    y: float = typer.Option(..., help="Observer Y"),
    z: float = typer.Option(..., help="Observer Z"),
    snapshot: str = typer.Option(None, help="Path to a JSON world snapshot"),
    mode: DisplayMode = typer.Option(None, help="Display mode (defaults to configured mode)"),
) -> None:
    """Run one overlay update and send it as particle commands."""
    world = _load_world(snapshot)
    registry = _build_registry(world, StaticObserverLocator({observer: (x, y, z)}))
    session = registry.session_for(observer)
    if mode is not None:
        session.set_mode(mode)

    report = session.show()
    print({"observer": observer, "mode": session.mode.value, "outcome": report.outcome.value, "points": report.points})


@app.command()
def watch(
    observer: str = typer.Option(..., help="Player name receiving the particles"),
    snapshot: str = typer.Option(None, help="Path to a JSON world snapshot"),
    x: float = typer.Option(0.0, help="Observer X when no live locator is available"),
    y: float = typer.Option(64.0, help="Observer Y when no live locator is available"),
    z: float = typer.Option(0.0, help="Observer Z when no live locator is available"),
    ticks: int = typer.Option(0, help="Number of updates to run; 0 runs until interrupted"),
) -> None:
    """Refresh the overlay periodically until the observer disappears."""
    world = _load_world(snapshot)
    registry = _build_registry(world, _build_locator(observer, (x, y, z)))
    session = registry.session_for(observer)
    report = session.show()

    count = 1
    try:
        while report.outcome is not UpdateOutcome.SESSION_REMOVED and (ticks <= 0 or count < ticks):
            time.sleep(settings.update_interval_seconds)
            report = session.update()
            count += 1
    except KeyboardInterrupt:
        pass
    finally:
        registry.clear()

    print({"observer": observer, "updates": count, "last_outcome": report.outcome.value})


if __name__ == "__main__":
    app()
