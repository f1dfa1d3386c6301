"""
Preset gradient tables, built once at import time.

All presets use DEFAULT_STEPS entries. GRADIENT_HEAT is the default table
used when a caller does not pick one.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from ..errors import InvalidArgument
from ..samples.colors import (
    BLACK_INT_RGB,
    WHITE_INT_RGB,
    RED_INT_RGB,
    GREEN_INT_RGB,
    BLUE_INT_RGB,
    YELLOW_INT_RGB,
    ORANGE_INT_RGB,
    MAROON_INT_RGB,
    GOLD_INT_RGB,
    VIOLET_INT_RGB,
    DARK_RED_INT_RGB,
    HEAT_EMBER_INT_RGB,
    HEAT_FLAME_INT_RGB,
    HEAT_GLOW_INT_RGB,
)
from .builders import build_linear_gradient, build_multi_stop_gradient
from .table import GradientTable

DEFAULT_STEPS = 500

GRADIENT_MAROON_TO_GOLD = build_linear_gradient(
    MAROON_INT_RGB, GOLD_INT_RGB, DEFAULT_STEPS, name="maroon_to_gold")
GRADIENT_BLUE_TO_RED = build_linear_gradient(
    BLUE_INT_RGB, RED_INT_RGB, DEFAULT_STEPS, name="blue_to_red")
GRADIENT_BLACK_TO_WHITE = build_linear_gradient(
    BLACK_INT_RGB, WHITE_INT_RGB, DEFAULT_STEPS, name="black_to_white")
GRADIENT_RED_TO_GREEN = build_linear_gradient(
    RED_INT_RGB, GREEN_INT_RGB, DEFAULT_STEPS, name="red_to_green")
GRADIENT_GREEN_YELLOW_ORANGE_RED = build_multi_stop_gradient(
    [GREEN_INT_RGB, YELLOW_INT_RGB, ORANGE_INT_RGB, RED_INT_RGB],
    DEFAULT_STEPS, name="green_yellow_orange_red")
GRADIENT_RAINBOW = build_multi_stop_gradient(
    [VIOLET_INT_RGB, BLUE_INT_RGB, GREEN_INT_RGB, YELLOW_INT_RGB, ORANGE_INT_RGB, RED_INT_RGB],
    DEFAULT_STEPS, name="rainbow")
GRADIENT_HOT = build_multi_stop_gradient(
    [BLACK_INT_RGB, DARK_RED_INT_RGB, RED_INT_RGB, ORANGE_INT_RGB, YELLOW_INT_RGB, WHITE_INT_RGB],
    DEFAULT_STEPS, name="hot")
GRADIENT_HEAT = build_multi_stop_gradient(
    [BLACK_INT_RGB, HEAT_EMBER_INT_RGB, HEAT_FLAME_INT_RGB, HEAT_GLOW_INT_RGB, WHITE_INT_RGB],
    DEFAULT_STEPS, name="heat")
GRADIENT_ROY = build_multi_stop_gradient(
    [RED_INT_RGB, ORANGE_INT_RGB, YELLOW_INT_RGB],
    DEFAULT_STEPS, name="roy")

DEFAULT_GRADIENT = GRADIENT_HEAT

PRESETS: Mapping[str, GradientTable] = MappingProxyType({
    table.name: table
    for table in (
        GRADIENT_MAROON_TO_GOLD,
        GRADIENT_BLUE_TO_RED,
        GRADIENT_BLACK_TO_WHITE,
        GRADIENT_RED_TO_GREEN,
        GRADIENT_GREEN_YELLOW_ORANGE_RED,
        GRADIENT_RAINBOW,
        GRADIENT_HOT,
        GRADIENT_HEAT,
        GRADIENT_ROY,
    )
})


def get_preset(name: str) -> GradientTable:
    """Look up a preset table by name, e.g. ``"heat"`` or ``"GRADIENT_HEAT"``."""
    key = name.strip().lower()
    if key.startswith("gradient_"):
        key = key[len("gradient_"):]
    try:
        return PRESETS[key]
    except KeyError:
        raise InvalidArgument(
            f"Unknown gradient preset {name!r}, expected one of {sorted(PRESETS)}"
        ) from None


__all__ = [
    "DEFAULT_STEPS",
    "DEFAULT_GRADIENT",
    "GRADIENT_MAROON_TO_GOLD",
    "GRADIENT_BLUE_TO_RED",
    "GRADIENT_BLACK_TO_WHITE",
    "GRADIENT_RED_TO_GREEN",
    "GRADIENT_GREEN_YELLOW_ORANGE_RED",
    "GRADIENT_RAINBOW",
    "GRADIENT_HOT",
    "GRADIENT_HEAT",
    "GRADIENT_ROY",
    "PRESETS",
    "get_preset",
]
