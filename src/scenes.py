"""Built-in scenes and their default camera framing."""

import numpy as np

from core.vector import Vector3
from core.utils import random_color
from geometry.world import HittableList
from geometry.sphere import Sphere
from materials.lambertian import Lambertian
from materials.metal import Metal
from materials.dielectric import Dielectric
from materials.presets import ColorPresets, DielectricPresets, MetalPresets


def random_scene(rng=None) -> HittableList:
    """
    Large ground sphere, a grid of small random spheres and three big ones:
    glass in the middle, diffuse brown behind and a mirror in front.
    """
    if rng is None:
        rng = np.random.default_rng()

    world = HittableList()
    world.add(Sphere(Vector3(0, -1000, 0), 1000, ColorPresets.matte(ColorPresets.GROUND)))

    radius = 0.2
    clearance = Vector3(4, radius, 0)
    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_material = rng.random()
            center = Vector3(a + 0.9 * rng.random(), radius, b + 0.9 * rng.random())
            if (center - clearance).length() < 0.9:
                continue

            if choose_material < 0.8:
                albedo = random_color(rng) * random_color(rng)
                material = Lambertian(albedo)
            elif choose_material < 0.95:
                albedo = random_color(rng, 0.5, 1.0)
                fuzz = rng.uniform(0, 0.5)
                material = Metal(albedo, fuzz)
            else:
                material = DielectricPresets.glass()
            world.add(Sphere(center, radius, material))

    world.add(Sphere(Vector3(0, 1, 0), 1.0, DielectricPresets.glass()))
    world.add(Sphere(Vector3(-4, 1, 0), 1.0, ColorPresets.matte(ColorPresets.BROWN)))
    world.add(Sphere(Vector3(4, 1, 0), 1.0, MetalPresets.mirror()))
    return world


def three_spheres_scene(rng=None) -> HittableList:
    """
    Diffuse sphere between a hollow glass bubble and a gold mirror, on a
    yellow-green ground.
    """
    glass = DielectricPresets.glass()
    world = HittableList()
    world.add(Sphere(Vector3(0, -100.5, -1), 100, ColorPresets.matte(ColorPresets.GRASS)))
    world.add(Sphere(Vector3(0, 0, -1), 0.5, ColorPresets.matte(ColorPresets.SKY_BLUE)))
    # Negative radius flips the normals inward, leaving a thin glass shell
    world.add(Sphere(Vector3(-1, 0, -1), 0.5, glass))
    world.add(Sphere(Vector3(-1, 0, -1), -0.4, glass))
    world.add(Sphere(Vector3(1, 0, -1), 0.5, MetalPresets.gold()))
    return world


def single_sphere_scene(rng=None) -> HittableList:
    """One grey diffuse sphere in front of the camera."""
    return HittableList([Sphere(Vector3(0, 0, -1), 0.5, Lambertian(Vector3(0.5, 0.5, 0.5)))])


SCENES = {
    "cover": random_scene,
    "three-spheres": three_spheres_scene,
    "single-sphere": single_sphere_scene,
}

# Default framing per scene; any field may be overridden from the command line
SCENE_CAMERAS = {
    "cover": {"lookfrom": (13.0, 2.0, 3.0), "lookat": (0.0, 0.0, 0.0),
              "vfov": 20.0, "aperture": 0.1, "focus_dist": 10.0},
    "three-spheres": {"lookfrom": (-2.0, 2.0, 1.0), "lookat": (0.0, 0.0, -1.0),
                      "vfov": 20.0, "aperture": 0.0, "focus_dist": 3.4},
    "single-sphere": {"lookfrom": (0.0, 0.0, 0.0), "lookat": (0.0, 0.0, -1.0),
                      "vfov": 90.0, "aperture": 0.0, "focus_dist": 1.0},
}


def build_scene(name: str, rng=None) -> HittableList:
    """
    Raises:
        ValueError: For an unknown scene name.
    """
    try:
        factory = SCENES[name]
    except KeyError:
        raise ValueError(f"Unknown scene {name!r}; choose from {', '.join(sorted(SCENES))}") from None
    return factory(rng)
