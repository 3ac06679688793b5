# core/utils.py
import math
from typing import Tuple

from spherecast.core.vector import Vector3

MAX_CHANNEL = 255.0

def clamp_channel(value: float) -> float:
    """
    Clamps a single channel to [0, 255]. NaN clamps to 0.
    """
    if math.isnan(value):
        return 0.0
    if value > MAX_CHANNEL:
        return MAX_CHANNEL
    if value < 0.0:
        return 0.0
    return value

def clamp_color(color: Vector3) -> Vector3:
    """
    Clamps each channel independently, never the vector as a whole.
    """
    return Vector3(clamp_channel(color.x), clamp_channel(color.y), clamp_channel(color.z))

def to_pixel(color: Vector3) -> Tuple[int, int, int]:
    """
    Truncates a clamped color toward zero into integer channel values.
    """
    return int(color.x), int(color.y), int(color.z)
