"""Parsing for ``namespace:id[key=value,...]`` block-state strings."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from mc_spawn_overlay.models import BlockShape, Cube, Half, Slab, SlabPart, Snow, Stair

_STATE_RE = re.compile(r"^\s*(?P<id>[a-z0-9_.\-]+(?::[a-z0-9_./\-]+)?)\s*(?:\[(?P<props>[^\]]*)\])?\s*$")


@dataclass(slots=True)
class BlockState:
    block_id: str
    properties: dict[str, str] = field(default_factory=dict)

    def shape(self) -> BlockShape:
        return shape_of(self)


def parse_block_state(text: str) -> BlockState:
    """Split a block-state string into its namespaced id and property map.

    A bare id gets the ``minecraft:`` namespace. Unparseable text raises ``ValueError``.
    """
    match = _STATE_RE.match(text.lower())
    if not match:
        raise ValueError(f"Invalid block state: {text!r}")

    block_id = match.group("id")
    if ":" not in block_id:
        block_id = f"minecraft:{block_id}"

    properties: dict[str, str] = {}
    for item in (match.group("props") or "").split(","):
        key, sep, value = item.partition("=")
        if sep and key.strip():
            properties[key.strip()] = value.strip()
    return BlockState(block_id=block_id, properties=properties)


def shape_of(state: BlockState) -> BlockShape:
    props = state.properties
    if state.block_id.endswith("_stairs"):
        half = Half.TOP if props.get("half") == "top" else Half.BOTTOM
        return Stair(half=half, facing=props.get("facing", "north"))
    if state.block_id.endswith("_slab"):
        try:
            part = SlabPart(props.get("type", "bottom"))
        except ValueError:
            part = SlabPart.BOTTOM
        return Slab(part=part)
    if state.block_id == "minecraft:snow":
        return Snow(layers=_int_or(props.get("layers"), 1))
    return Cube()


def _int_or(value: str | None, default: int) -> int:
    try:
        return int(value) if value is not None else default
    except ValueError:
        return default
