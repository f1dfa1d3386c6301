# No dependencies
from enum import Enum


class OutOfRangePolicy(str, Enum):
    CLAMP = "clamp"
    RAISE = "raise"
