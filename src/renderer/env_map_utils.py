# renderer/env_map_utils.py

from core.vector import Vector3

NADIR_COLOR = Vector3(1.0, 1.0, 1.0)
ZENITH_COLOR = Vector3(0.5, 0.7, 1.0)

def sky_color(direction: Vector3) -> Vector3:
    """
    Background radiance for a ray leaving the scene. This gradient is the only
    light source: white looking straight down, sky blue looking straight up.
    """
    unit_direction = direction.normalize()
    t = 0.5 * (unit_direction.y + 1.0)
    return NADIR_COLOR * (1.0 - t) + ZENITH_COLOR * t

