import numpy as np
# Stop colors used by the preset gradients, all in 0-255 RGB

# BLACK / WHITE
BLACK_INT_RGB = np.array([0, 0, 0], dtype=np.uint8)
WHITE_INT_RGB = np.array([255, 255, 255], dtype=np.uint8)

# PRIMARIES
RED_INT_RGB = np.array([255, 0, 0], dtype=np.uint8)
GREEN_INT_RGB = np.array([0, 255, 0], dtype=np.uint8)
BLUE_INT_RGB = np.array([0, 0, 255], dtype=np.uint8)

# WARM
YELLOW_INT_RGB = np.array([255, 255, 0], dtype=np.uint8)
ORANGE_INT_RGB = np.array([255, 165, 0], dtype=np.uint8)
MAROON_INT_RGB = np.array([160, 0, 0], dtype=np.uint8)
GOLD_INT_RGB = YELLOW_INT_RGB

# RAINBOW
VIOLET_INT_RGB = np.array([181, 32, 255], dtype=np.uint8)

# HOT
DARK_RED_INT_RGB = np.array([87, 0, 0], dtype=np.uint8)

# HEAT
HEAT_EMBER_INT_RGB = np.array([105, 0, 0], dtype=np.uint8)
HEAT_FLAME_INT_RGB = np.array([192, 23, 0], dtype=np.uint8)
HEAT_GLOW_INT_RGB = np.array([255, 150, 38], dtype=np.uint8)

__all__ = [
    "BLACK_INT_RGB",
    "WHITE_INT_RGB",
    "RED_INT_RGB",
    "GREEN_INT_RGB",
    "BLUE_INT_RGB",
    "YELLOW_INT_RGB",
    "ORANGE_INT_RGB",
    "MAROON_INT_RGB",
    "GOLD_INT_RGB",
    "VIOLET_INT_RGB",
    "DARK_RED_INT_RGB",
    "HEAT_EMBER_INT_RGB",
    "HEAT_FLAME_INT_RGB",
    "HEAT_GLOW_INT_RGB",
]
