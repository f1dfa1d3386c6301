from .table import GradientTable
from .builders import build_linear_gradient, build_multi_stop_gradient
from .presets import (
    DEFAULT_STEPS,
    DEFAULT_GRADIENT,
    GRADIENT_MAROON_TO_GOLD,
    GRADIENT_BLUE_TO_RED,
    GRADIENT_BLACK_TO_WHITE,
    GRADIENT_RED_TO_GREEN,
    GRADIENT_GREEN_YELLOW_ORANGE_RED,
    GRADIENT_RAINBOW,
    GRADIENT_HOT,
    GRADIENT_HEAT,
    GRADIENT_ROY,
    PRESETS,
    get_preset,
)

__all__ = [
    "GradientTable",
    "build_linear_gradient",
    "build_multi_stop_gradient",
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
