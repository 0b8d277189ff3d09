"""Colour selection for overlay markers."""

from __future__ import annotations

import colorsys

from mc_spawn_overlay.models import GREEN, RED, YELLOW, Color, DisplayMode, SpawnRiskCategory

CATEGORY_COLORS: dict[SpawnRiskCategory, Color] = {
    SpawnRiskCategory.NEVER: GREEN,
    SpawnRiskCategory.NIGHT_ONLY: YELLOW,
    SpawnRiskCategory.ALWAYS: RED,
}

LIGHT_BASE_COLOR = Color(255, 0, 6)
MAX_LIGHT = 14
HUE_SPAN = 0.25


def category_color(category: SpawnRiskCategory) -> Color:
    return CATEGORY_COLORS[category]


def light_level_color(block_light: int) -> Color:
    """Shift the base colour's hue by up to a quarter turn across the light range."""
    fraction = block_light / MAX_LIGHT
    _, saturation, value = colorsys.rgb_to_hsv(
        LIGHT_BASE_COLOR.red / 255, LIGHT_BASE_COLOR.green / 255, LIGHT_BASE_COLOR.blue / 255
    )
    red, green, blue = colorsys.hsv_to_rgb((HUE_SPAN * fraction) % 1.0, saturation, value)
    return Color(_channel(red), _channel(green), _channel(blue))


def marker_color(mode: DisplayMode, category: SpawnRiskCategory, block_light: int) -> Color | None:
    """Pick the marker colour for ``mode``; ``None`` means the point is not drawn."""
    if mode is DisplayMode.SPAWNABLE:
        if category is SpawnRiskCategory.NEVER:
            return None
        return category_color(category)
    if mode is DisplayMode.ALL:
        return category_color(category)
    return light_level_color(block_light)


def _channel(value: float) -> int:
    return int(value * 255 + 0.5)
