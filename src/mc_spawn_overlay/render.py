"""Render sinks that receive coloured overlay markers."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol

from mc_spawn_overlay.adapters.game_command import GameCommandAdapter, MinescriptCommand
from mc_spawn_overlay.models import Color


class RenderSink(Protocol):
    """Fire-and-forget destination for overlay markers."""

    def emit(self, addressee: str, x: float, y: float, z: float, color: Color) -> None:
        """Draw one coloured point at world coordinates for ``addressee``."""


@dataclass(frozen=True, slots=True)
class RenderedPoint:
    addressee: str
    x: float
    y: float
    z: float
    color: Color


class RecordingRenderSink:
    """Keeps every emitted point in memory."""

    def __init__(self) -> None:
        self.points: list[RenderedPoint] = []

    def emit(self, addressee: str, x: float, y: float, z: float, color: Color) -> None:
        self.points.append(RenderedPoint(addressee=addressee, x=x, y=y, z=z, color=color))

    def clear(self) -> None:
        self.points.clear()


def dust_particle_command(addressee: str, x: float, y: float, z: float, color: Color, *, size: float = 1.0) -> str:
    red, green, blue = (channel / 255 for channel in (color.red, color.green, color.blue))
    return (
        f"particle minecraft:dust {red:.3f} {green:.3f} {blue:.3f} {size:g} "
        f"{x:.2f} {y:.2f} {z:.2f} 0 0 0 0 1 force {addressee}"
    )


class ParticleCommandSink:
    """Draws markers as dust particles via in-game commands."""

    def __init__(
        self,
        adapter: GameCommandAdapter,
        *,
        particle_size: float = 1.0,
        logger: logging.Logger | None = None,
    ) -> None:
        self._adapter = adapter
        self._particle_size = particle_size
        self._logger = logger or logging.getLogger("mc_spawn_overlay.render")
        self.failures = 0

    def emit(self, addressee: str, x: float, y: float, z: float, color: Color) -> None:
        command = dust_particle_command(addressee, x, y, z, color, size=self._particle_size)
        try:
            self._adapter.send(MinescriptCommand(command=command))
        except Exception:  # noqa: BLE001 - one lost marker must not abort the scan.
            self.failures += 1
            self._logger.warning("particle_send_failed", extra={"addressee": addressee, "command": command}, exc_info=True)
