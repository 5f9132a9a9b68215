# materials/presets.py
from core.vector import Vector3
from materials.metal import Metal
from materials.lambertian import Lambertian
from materials.dielectric import Dielectric

class ColorPresets:
    """Albedo colours used by the built-in scenes."""

    GROUND = Vector3(0.5, 0.5, 0.5)
    GRASS = Vector3(0.8, 0.8, 0.0)
    BROWN = Vector3(0.4, 0.2, 0.1)
    SKY_BLUE = Vector3(0.1, 0.2, 0.5)
    WARM_GREY = Vector3(0.7, 0.6, 0.5)
    GOLD = Vector3(0.8, 0.6, 0.2)

    @staticmethod
    def matte(color: Vector3) -> Lambertian:
        """Create a matte material with the given color."""
        return Lambertian(color)

class MetalPresets:
    """Metals with a given amount of fuzz."""

    @staticmethod
    def mirror() -> Metal:
        return Metal(ColorPresets.WARM_GREY, fuzz=0.0)

    @staticmethod
    def gold(fuzz: float = 0.0) -> Metal:
        return Metal(ColorPresets.GOLD, fuzz=fuzz)

class DielectricPresets:
    """Predefined dielectric materials with realistic refractive indices."""

    @staticmethod
    def glass() -> Dielectric:
        return Dielectric(1.5)

    @staticmethod
    def water() -> Dielectric:
        return Dielectric(1.33)

    @staticmethod
    def diamond() -> Dielectric:
        return Dielectric(2.42)
