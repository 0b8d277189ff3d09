"""Block id heuristics for passability and spawn surfaces."""

from __future__ import annotations

from mc_spawn_overlay.models import SpawnValue

AIR_IDS = {"minecraft:air", "minecraft:cave_air", "minecraft:void_air"}

PASSABLE_IDS = {
    "minecraft:water",
    "minecraft:lava",
    "minecraft:short_grass",
    "minecraft:grass",
    "minecraft:tall_grass",
    "minecraft:fern",
    "minecraft:large_fern",
    "minecraft:dead_bush",
    "minecraft:vine",
    "minecraft:ladder",
    "minecraft:torch",
    "minecraft:rail",
    "minecraft:lever",
    "minecraft:redstone_wire",
    "minecraft:cobweb",
    "minecraft:sugar_cane",
}

PASSABLE_FLORA_IDS = {
    "minecraft:dandelion",
    "minecraft:poppy",
    "minecraft:blue_orchid",
    "minecraft:allium",
    "minecraft:azure_bluet",
    "minecraft:oxeye_daisy",
    "minecraft:cornflower",
    "minecraft:lily_of_the_valley",
    "minecraft:wither_rose",
    "minecraft:torchflower",
    "minecraft:sunflower",
    "minecraft:lilac",
    "minecraft:rose_bush",
    "minecraft:peony",
    "minecraft:pink_petals",
    "minecraft:seagrass",
    "minecraft:tall_seagrass",
    "minecraft:kelp",
    "minecraft:kelp_plant",
    "minecraft:bamboo_sapling",
    "minecraft:sweet_berry_bush",
    "minecraft:nether_sprouts",
    "minecraft:crimson_roots",
    "minecraft:warped_roots",
    "minecraft:hanging_roots",
    "minecraft:glow_lichen",
    "minecraft:spore_blossom",
    "minecraft:crimson_fungus",
    "minecraft:warped_fungus",
}

PASSABLE_SUFFIXES = (
    "_door",
    "_trapdoor",
    "_carpet",
    "_pressure_plate",
    "_sign",
    "_torch",
    "_button",
    "_rail",
    "_fence_gate",
    "_sapling",
    "_tulip",
    "_mushroom",
    "_coral",
    "_coral_fan",
    "_coral_wall_fan",
)

TRANSPARENT_CONTAINS = ("glass", "leaves")

NEVER_SURFACE_IDS = {"minecraft:barrier", "minecraft:farmland", "minecraft:dirt_path"}
NEVER_SURFACE_SUFFIXES = ("_fence", "_wall")


def is_air(block_id: str) -> bool:
    return block_id in AIR_IDS


def is_passable(block_id: str, *, snow_layers: int | None = None) -> bool:
    if is_air(block_id) or block_id in PASSABLE_IDS or block_id in PASSABLE_FLORA_IDS:
        return True
    if block_id == "minecraft:snow":
        return (snow_layers or 1) <= 1
    return block_id.endswith(PASSABLE_SUFFIXES)


def spawn_value_of(block_id: str) -> SpawnValue:
    if is_air(block_id) or any(token in block_id for token in TRANSPARENT_CONTAINS):
        return SpawnValue.TRANSPARENT
    if block_id in NEVER_SURFACE_IDS or block_id.endswith(NEVER_SURFACE_SUFFIXES):
        return SpawnValue.NEVER
    return SpawnValue.ALWAYS
