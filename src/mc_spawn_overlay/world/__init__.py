"""World-data collaborators: readers, observer locators and snapshots."""

from .block_state import BlockState, parse_block_state
from .reader import ObserverLocator, Position, StaticObserverLocator, WorldReader
from .snapshot import GridWorld, SnapshotError, WorldSnapshot, load_snapshot

__all__ = [
    "BlockState",
    "GridWorld",
    "ObserverLocator",
    "Position",
    "SnapshotError",
    "StaticObserverLocator",
    "WorldReader",
    "WorldSnapshot",
    "load_snapshot",
    "parse_block_state",
]
