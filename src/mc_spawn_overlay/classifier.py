"""Spawn rules for a single candidate surface and the space above it."""

from __future__ import annotations

from mc_spawn_overlay.models import BlockShape, Half, LightSample, SpawnRiskCategory, SpawnValue, Stair

LIGHT_THRESHOLD = 7


def classify(light: LightSample) -> SpawnRiskCategory:
    """Classify the position a mob would occupy (the block above the surface).

    Only the two light values matter; block light takes precedence over sky light.
    """
    if light.block_light > LIGHT_THRESHOLD:
        return SpawnRiskCategory.NEVER
    if light.sky_light > LIGHT_THRESHOLD:
        return SpawnRiskCategory.NIGHT_ONLY
    return SpawnRiskCategory.ALWAYS


def is_stair_in_spawn_rotation(shape: BlockShape) -> bool:
    return isinstance(shape, Stair) and shape.half is Half.TOP


def is_spawn_surface(shape: BlockShape, passable: bool, spawn_value: SpawnValue) -> bool:
    """Whether a mob could stand on top of this block, ignoring light and headroom."""
    if passable:
        return False
    match shape:
        case Stair():
            return is_stair_in_spawn_rotation(shape)
        case _:
            return spawn_value is SpawnValue.ALWAYS


def is_clear_for_headroom(light: LightSample) -> bool:
    return light.passable or light.transparent
