"""Tests for material scattering."""

import numpy as np
import pytest

from core.ray import Ray
from core.utils import reflect
from core.vector import Vector3
from geometry.hittable import HitRecord
from materials import Dielectric, Lambertian, Material, Metal
from materials.dielectric import schlick
from materials.presets import ColorPresets, DielectricPresets, MetalPresets


UP = Vector3(0, 1, 0)


def hit_at_origin(front_face: bool = True) -> HitRecord:
    return HitRecord(p=Vector3(0, 0, 0), normal=UP, t=1.0, front_face=front_face)


class FixedUniform:
    """Stands in for a Generator, replaying fixed uniform draws."""

    def __init__(self, values):
        self.values = list(values)

    def uniform(self, low, high):
        return self.values.pop(0)


class TestMaterialBase:
    def test_scatter_is_abstract(self):
        with pytest.raises(NotImplementedError):
            Material().scatter(Ray(UP, -UP), hit_at_origin(), np.random.default_rng())


class TestLambertian:
    """Tests for diffuse scattering."""

    def test_always_scatters(self):
        albedo = Vector3(0.2, 0.4, 0.6)
        material = Lambertian(albedo)
        rng = np.random.default_rng(0)
        ray_in = Ray(Vector3(1, 1, 0), Vector3(-1, -1, 0))
        for _ in range(1000):
            scattered, attenuation = material.scatter(ray_in, hit_at_origin(), rng)
            assert attenuation == albedo
            assert scattered.origin == Vector3(0, 0, 0)
            assert scattered.direction.dot(UP) >= 0

    def test_degenerate_direction_falls_back_to_normal(self):
        """A random vector exactly opposite the normal would give a zero direction."""
        material = Lambertian(Vector3(0.5, 0.5, 0.5))
        rng = FixedUniform([0.0, -0.5, 0.0])
        scattered, _ = material.scatter(Ray(UP, -UP), hit_at_origin(), rng)
        assert scattered.direction == UP


class TestMetal:
    """Tests for reflective scattering."""

    def test_mirror_without_fuzz(self):
        material = Metal(Vector3(0.9, 0.9, 0.9), fuzz=0.0)
        ray_in = Ray(Vector3(-1, 1, 0), Vector3(1, -1, 0))
        # No randomness is needed for a perfect mirror
        scattered, attenuation = material.scatter(ray_in, hit_at_origin(), None)
        expected = reflect(Vector3(1, -1, 0).normalize(), UP)
        assert tuple(scattered.direction) == pytest.approx(tuple(expected))
        assert tuple(scattered.direction) == pytest.approx((2 ** -0.5, 2 ** -0.5, 0))
        assert attenuation == Vector3(0.9, 0.9, 0.9)

    def test_fuzz_is_clamped(self):
        assert Metal(Vector3(1, 1, 1), 5.0).fuzz == 1.0
        assert Metal(Vector3(1, 1, 1), -0.5).fuzz == 0.0
        assert Metal(Vector3(1, 1, 1), 0.3).fuzz == 0.3

    def test_grazing_fuzzy_reflection_can_be_absorbed(self):
        material = Metal(Vector3(0.8, 0.8, 0.8), fuzz=1.0)
        ray_in = Ray(Vector3(-1, 0.01, 0), Vector3(1, -0.01, 0))
        rng = np.random.default_rng(4)
        results = [material.scatter(ray_in, hit_at_origin(), rng) for _ in range(200)]
        assert any(result is None for result in results)
        for result in results:
            if result is not None:
                assert result[0].direction.dot(UP) >= 0


class TestDielectric:
    """Tests for refractive scattering."""

    def test_always_scatters_with_full_transmittance(self):
        material = Dielectric(1.5)
        rng = np.random.default_rng(5)
        for i in range(1000):
            direction = Vector3(rng.uniform(-1, 1), -1.0, rng.uniform(-1, 1))
            front_face = i % 2 == 0
            result = material.scatter(Ray(-direction, direction), hit_at_origin(front_face), rng)
            assert result is not None
            scattered, attenuation = result
            assert attenuation == Vector3(1.0, 1.0, 1.0)
            assert scattered.direction.length() == pytest.approx(1.0)

    def test_total_internal_reflection_always_reflects(self):
        material = Dielectric(1.5)
        direction = Vector3(1.0, -0.1, 0.0)
        ray_in = Ray(Vector3(0, 0, 0) - direction, direction)
        expected = reflect(direction.normalize(), UP)
        rng = np.random.default_rng(6)
        for _ in range(100):
            scattered, _ = material.scatter(ray_in, hit_at_origin(front_face=False), rng)
            assert tuple(scattered.direction) == pytest.approx(tuple(expected))

    def test_normal_incidence_mostly_refracts(self):
        material = Dielectric(1.5)
        ray_in = Ray(UP, -UP)
        rng = np.random.default_rng(7)
        reflected = 0
        for _ in range(1000):
            scattered, _ = material.scatter(ray_in, hit_at_origin(), rng)
            if scattered.direction.y > 0:
                reflected += 1
        # Schlick reflectance at normal incidence into glass is 0.04
        assert 10 < reflected < 100

    def test_schlick(self):
        ratio = 1 / 1.5
        r0 = ((1 - ratio) / (1 + ratio)) ** 2
        assert schlick(1.0, ratio) == pytest.approx(r0)
        assert schlick(0.0, ratio) == pytest.approx(1.0)


class TestPresets:
    def test_presets_build_materials(self):
        assert isinstance(ColorPresets.matte(ColorPresets.GROUND), Lambertian)
        assert MetalPresets.mirror().fuzz == 0.0
        assert MetalPresets.gold(0.3).fuzz == 0.3
        assert DielectricPresets.glass().ref_idx == 1.5
        assert DielectricPresets.water().ref_idx == 1.33
