"""In-memory world backed by a JSON block snapshot."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError, field_validator

from mc_spawn_overlay.models import BlockPos, BlockShape, Cube, LightSample, Snow, SpawnValue
from mc_spawn_overlay.world import materials
from mc_spawn_overlay.world.block_state import BlockState, parse_block_state

logger = logging.getLogger("mc_spawn_overlay.world.snapshot")


class SnapshotError(RuntimeError):
    """Raised when a world snapshot cannot be read or fails validation."""


class BlockEntry(BaseModel):
    pos: tuple[int, int, int]
    block: str = "minecraft:air"
    sky_light: int | None = Field(default=None, ge=0, le=15)
    block_light: int | None = Field(default=None, ge=0, le=15)

    @field_validator("block")
    @classmethod
    def _check_block_state(cls, value: str) -> str:
        parse_block_state(value)
        return value


class WorldSnapshot(BaseModel):
    default_sky_light: int = Field(default=0, ge=0, le=15)
    default_block_light: int = Field(default=0, ge=0, le=15)
    blocks: list[BlockEntry] = Field(default_factory=list)


@dataclass(frozen=True, slots=True)
class _Cell:
    state: BlockState
    shape: BlockShape
    light: LightSample
    spawn_value: SpawnValue


class GridWorld:
    """``WorldReader`` over a sparse block grid; unlisted positions are air."""

    def __init__(self, *, default_sky_light: int = 0, default_block_light: int = 0) -> None:
        self._default_sky_light = default_sky_light
        self._default_block_light = default_block_light
        self._cells: dict[BlockPos, _Cell] = {}

    def __len__(self) -> int:
        return len(self._cells)

    def set_block(
        self,
        pos: BlockPos,
        block: str,
        *,
        sky_light: int | None = None,
        block_light: int | None = None,
    ) -> None:
        state = parse_block_state(block)
        shape = state.shape()
        layers = shape.layers if isinstance(shape, Snow) else None
        passable = materials.is_passable(state.block_id, snow_layers=layers)
        spawn_value = materials.spawn_value_of(state.block_id)
        light = LightSample(
            sky_light=self._default_sky_light if sky_light is None else sky_light,
            block_light=self._default_block_light if block_light is None else block_light,
            passable=passable,
            transparent=spawn_value is SpawnValue.TRANSPARENT,
        )
        self._cells[tuple(pos)] = _Cell(state=state, shape=shape, light=light, spawn_value=spawn_value)

    def block_id_at(self, pos: BlockPos) -> str:
        cell = self._cells.get(tuple(pos))
        return cell.state.block_id if cell else "minecraft:air"

    def shape_at(self, pos: BlockPos) -> BlockShape:
        cell = self._cells.get(tuple(pos))
        return cell.shape if cell else Cube()

    def light_at(self, pos: BlockPos) -> LightSample:
        cell = self._cells.get(tuple(pos))
        if cell:
            return cell.light
        return LightSample(
            sky_light=self._default_sky_light,
            block_light=self._default_block_light,
            passable=True,
            transparent=True,
        )

    def is_passable(self, pos: BlockPos) -> bool:
        return self.light_at(pos).passable

    def spawn_value(self, pos: BlockPos) -> SpawnValue:
        cell = self._cells.get(tuple(pos))
        return cell.spawn_value if cell else SpawnValue.TRANSPARENT

    @classmethod
    def from_snapshot(cls, snapshot: WorldSnapshot) -> GridWorld:
        world = cls(
            default_sky_light=snapshot.default_sky_light,
            default_block_light=snapshot.default_block_light,
        )
        for entry in snapshot.blocks:
            world.set_block(entry.pos, entry.block, sky_light=entry.sky_light, block_light=entry.block_light)
        return world


def load_snapshot(path: str | Path) -> GridWorld:
    """Read and validate a snapshot file into a ``GridWorld``."""
    snapshot_path = Path(path).expanduser()
    try:
        raw = snapshot_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SnapshotError(f"Unable to read world snapshot: {snapshot_path}") from exc

    try:
        snapshot = WorldSnapshot.model_validate_json(raw)
    except ValidationError as exc:
        raise SnapshotError(f"Invalid world snapshot {snapshot_path}: {exc}") from exc

    world = GridWorld.from_snapshot(snapshot)
    logger.info("snapshot_loaded", extra={"path": str(snapshot_path), "blocks": len(world)})
    return world
