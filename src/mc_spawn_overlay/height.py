from __future__ import annotations

from mc_spawn_overlay.models import BlockShape, Slab, SlabPart, Snow

FULL_HEIGHT = 1.0


def height_offset(shape: BlockShape) -> float:
    """Return where the top face of ``shape`` sits inside its cell, from 0 to 1."""
    match shape:
        case Slab(part=SlabPart.BOTTOM):
            return 0.5
        case Snow(layers=layers, max_layers=max_layers) if max_layers > 0:
            return min(max(layers / max_layers, 0.0), FULL_HEIGHT)
        case _:
            return FULL_HEIGHT
