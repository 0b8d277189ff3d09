"""Read-only world and observer collaborators consumed by the scanner."""

from __future__ import annotations

from typing import Protocol

from mc_spawn_overlay.models import BlockPos, BlockShape, LightSample, SpawnValue

Position = tuple[float, float, float]


class WorldReader(Protocol):
    """Answers per-block queries; every call returns a fresh snapshot."""

    def shape_at(self, pos: BlockPos) -> BlockShape:
        """Return the shape descriptor of the block at ``pos``."""

    def light_at(self, pos: BlockPos) -> LightSample:
        """Return light and obstruction values at ``pos``."""

    def is_passable(self, pos: BlockPos) -> bool:
        """Return whether entities can move through the block at ``pos``."""

    def spawn_value(self, pos: BlockPos) -> SpawnValue:
        """Return the material surface rule for the block at ``pos``."""


class ObserverLocator(Protocol):
    def position_of(self, observer_id: str) -> Position | None:
        """Return the observer's live position, or ``None`` when it cannot be found."""


class StaticObserverLocator:
    """Locator backed by a plain mapping, for offline runs and tests."""

    def __init__(self, positions: dict[str, Position] | None = None) -> None:
        self._positions: dict[str, Position] = dict(positions or {})

    def place(self, observer_id: str, position: Position) -> None:
        self._positions[observer_id] = position

    def forget(self, observer_id: str) -> None:
        self._positions.pop(observer_id, None)

    def position_of(self, observer_id: str) -> Position | None:
        return self._positions.get(observer_id)
