# materials/metal.py
from typing import Optional, Tuple
from core.ray import Ray
from core.vector import Vector3
from core.utils import reflect, random_unit_vector
from geometry.hittable import HitRecord
from materials.material import Material

class Metal(Material):
    """
    Metal material with reflective properties. fuzz is clamped to [0, 1];
    zero gives a perfect mirror.
    """
    def __init__(self, albedo: Vector3, fuzz: float = 0.0):
        self.albedo = albedo
        self.fuzz = max(0.0, min(fuzz, 1.0))

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Optional[Tuple[Ray, Vector3]]:
        direction = reflect(ray_in.direction.normalize(), rec.normal)
        if self.fuzz > 0:
            direction = direction + random_unit_vector(rng) * self.fuzz

        if direction.dot(rec.normal) < 0:
            return None  # Fuzz pushed the reflection below the surface
        return Ray(rec.p, direction), self.albedo

    def __repr__(self) -> str:
        return f"Metal({self.albedo!r}, fuzz={self.fuzz})"
