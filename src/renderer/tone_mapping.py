# renderer/tone_mapping.py
import math
from typing import Tuple

from core.vector import Vector3

# Clamp below 1.0 so that a channel of exactly 1.0 maps to 255, not 256
MAX_INTENSITY = 0.999

def gamma_correct(color: Vector3) -> Vector3:
    """Gamma 2 correction: component-wise square root of linear colour."""
    return Vector3(math.sqrt(max(color.x, 0.0)),
                   math.sqrt(max(color.y, 0.0)),
                   math.sqrt(max(color.z, 0.0)))

def float_to_u8(x: float) -> int:
    # NaN fails both comparisons and falls through to 0
    if not x > 0.0:
        return 0
    return int(min(x, MAX_INTENSITY) * 256)

def to_rgb8(color: Vector3, samples_per_pixel: int = 1) -> Tuple[int, int, int]:
    """
    Average an accumulated linear colour over its samples, gamma correct it and
    quantize each channel to 0..255.
    """
    corrected = gamma_correct(color / samples_per_pixel)
    return (float_to_u8(corrected.x),
            float_to_u8(corrected.y),
            float_to_u8(corrected.z))

