# core/utils.py
import math
from typing import Optional
from core.vector import Vector3

def random_in_unit_sphere(rng) -> Vector3:
    """
    Returns a random point strictly inside the unit sphere, away from the origin.

    Samples with a squared length below 1e-12 are rejected as well so that
    normalizing the result never blows up rounding error.
    """
    while True:
        p = Vector3(rng.uniform(-1, 1),
                    rng.uniform(-1, 1),
                    rng.uniform(-1, 1))
        length_squared = p.length_squared()
        if 1e-12 < length_squared < 1.0:
            return p

def random_unit_vector(rng) -> Vector3:
    """
    Returns a random unit vector (uniformly distributed over the sphere).
    """
    return random_in_unit_sphere(rng).normalize()

def random_in_unit_disk(rng) -> Vector3:
    """Random point in the unit disk on the z=0 plane, used for lens sampling."""
    while True:
        p = Vector3(rng.uniform(-1, 1), rng.uniform(-1, 1), 0)
        if p.length_squared() < 1.0:
            return p

def random_color(rng, lo: float = 0.0, hi: float = 1.0) -> Vector3:
    return Vector3(rng.uniform(lo, hi), rng.uniform(lo, hi), rng.uniform(lo, hi))

def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)

def refract(v: Vector3, n: Vector3, eta_ratio: float) -> Optional[Vector3]:
    """
    Refracts v through a surface with unit normal n (pointing against v) using
    Snell's law, where eta_ratio is the ratio of refractive indices eta/eta'.

    Returns None on total internal reflection.
    """
    unit_v = v.normalize()
    cos_theta = min(-unit_v.dot(n), 1.0)
    r_out_perp = (unit_v + n * cos_theta) * eta_ratio
    k = 1.0 - r_out_perp.length_squared()
    if k < 0:
        return None
    return r_out_perp - n * math.sqrt(k)
