"""Spherical scan of the blocks around an observer for mob spawn positions."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterator

from mc_spawn_overlay.classifier import classify, is_clear_for_headroom, is_spawn_surface
from mc_spawn_overlay.colors import marker_color
from mc_spawn_overlay.height import height_offset
from mc_spawn_overlay.models import BlockPos, DisplayMode, ScanPoint
from mc_spawn_overlay.world.reader import WorldReader

HEADROOM_BLOCKS = 2


def iter_offsets(radius: int) -> Iterator[BlockPos]:
    """Yield every integer offset within ``radius`` of the origin, boundary included."""
    if radius <= 0:
        return
    for z in range(-radius, radius + 1):
        for x in range(-radius, radius + 1):
            for y in range(-radius, radius + 1):
                if math.sqrt(x * x + y * y + z * z) > radius:
                    continue
                yield x, y, z


def block_origin(position: tuple[float, float, float]) -> BlockPos:
    x, y, z = position
    return math.floor(x), math.floor(y), math.floor(z)


class VolumeScanner:
    """Finds spawnable surfaces around a block origin and colours them per display mode."""

    def __init__(self, world: WorldReader, *, logger: logging.Logger | None = None) -> None:
        self._world = world
        self._logger = logger or logging.getLogger("mc_spawn_overlay.scanner")

    def scan(self, origin: BlockPos, radius: int, mode: DisplayMode) -> Iterator[ScanPoint]:
        ox, oy, oz = origin
        candidates = emitted = 0
        for offset in iter_offsets(radius):
            candidates += 1
            x, y, z = offset
            point = self._evaluate((ox + x, oy + y, oz + z), offset, mode)
            if point is not None:
                emitted += 1
                yield point

        self._logger.debug(
            "scan_completed",
            extra={"origin": origin, "radius": radius, "mode": mode.value, "candidates": candidates, "emitted": emitted},
        )

    def _evaluate(self, pos: BlockPos, offset: BlockPos, mode: DisplayMode) -> ScanPoint | None:
        world = self._world
        if world.is_passable(pos):
            return None

        shape = world.shape_at(pos)
        if not is_spawn_surface(shape, passable=False, spawn_value=world.spawn_value(pos)):
            return None
        if not self._has_headroom(pos):
            return None

        x, y, z = pos
        above = world.light_at((x, y + 1, z))
        color = marker_color(mode, classify(above), above.block_light)
        if color is None:
            return None
        return ScanPoint(offset=offset, color=color, height=height_offset(shape))

    def _has_headroom(self, pos: BlockPos) -> bool:
        x, y, z = pos
        for dy in range(1, HEADROOM_BLOCKS + 1):
            above = (x, y + dy, z)
            if not is_clear_for_headroom(self._world.light_at(above)):
                return False
        return True
