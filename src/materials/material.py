# materials/material.py
from typing import Optional, Tuple
from core.ray import Ray
from core.vector import Vector3
from geometry.hittable import HitRecord

class Material:
    """
    Abstract material class. Subclasses must implement scatter().

    Materials hold only immutable parameters, so one instance can be shared by
    any number of spheres and render threads.
    """
    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Optional[Tuple[Ray, Vector3]]:
        """
        Computes the scattered ray and attenuation.
        Returns a tuple (scattered_ray, attenuation) or None if the ray is absorbed.

        Args:
            ray_in: The incident ray.
            rec: The hit record; rec.normal faces against ray_in.
            rng: A numpy Generator owned by the calling thread.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")
