from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

BlockPos = tuple[int, int, int]


class DisplayMode(str, Enum):
    """How scan results are coloured for the observer."""

    SPAWNABLE = "spawnable"
    ALL = "all"
    LIGHTLEVEL = "lightlevel"

    def next(self) -> DisplayMode:
        members = list(type(self))
        return members[(members.index(self) + 1) % len(members)]


class SpawnRiskCategory(str, Enum):
    NEVER = "never"
    NIGHT_ONLY = "night_only"
    ALWAYS = "always"


class SpawnValue(str, Enum):
    """Material-level surface rule used before any light check."""

    ALWAYS = "always"
    TRANSPARENT = "transparent"
    NEVER = "never"


class Half(str, Enum):
    TOP = "top"
    BOTTOM = "bottom"


class SlabPart(str, Enum):
    TOP = "top"
    BOTTOM = "bottom"
    DOUBLE = "double"


@dataclass(frozen=True, slots=True)
class Cube:
    pass


@dataclass(frozen=True, slots=True)
class Stair:
    half: Half = Half.BOTTOM
    facing: str = "north"


@dataclass(frozen=True, slots=True)
class Slab:
    part: SlabPart = SlabPart.BOTTOM


@dataclass(frozen=True, slots=True)
class Snow:
    layers: int = 1
    max_layers: int = 8


BlockShape = Union[Cube, Stair, Slab, Snow]


@dataclass(frozen=True, slots=True)
class LightSample:
    """Light and obstruction snapshot of a single block position."""

    sky_light: int = 0
    block_light: int = 0
    passable: bool = True
    transparent: bool = True


@dataclass(frozen=True, slots=True)
class Color:
    red: int
    green: int
    blue: int

    def as_hex(self) -> str:
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"


RED = Color(255, 0, 0)
YELLOW = Color(255, 255, 0)
GREEN = Color(0, 255, 0)


@dataclass(frozen=True, slots=True)
class ScanPoint:
    """One accepted spawn position, relative to the observer's block."""

    offset: BlockPos
    color: Color
    height: float
