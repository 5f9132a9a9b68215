# renderer/raytracer.py
import logging
import os
from typing import Optional, Tuple

import numpy as np
from tqdm import tqdm

from core.ray import Ray
from core.vector import Vector3
from camera.camera import Camera
from geometry.hittable import Hittable
from .env_map_utils import sky_color
from .scheduler import parallel_map
from .tone_mapping import to_rgb8

logger = logging.getLogger(__name__)

# Minimum hit distance; keeps scattered rays from re-hitting their own origin
T_MIN = 0.001
BLACK = Vector3(0.0, 0.0, 0.0)


def ray_color(ray: Ray, world: Hittable, depth: int, rng) -> Vector3:
    """
    Returns the radiance seen along the ray. If the ray hits an object, the
    material scatter is followed recursively for at most `depth` bounces.
    """
    if depth <= 0:
        return BLACK  # Exceeded the bounce limit; no more light is gathered

    rec = world.hit(ray, T_MIN, float('inf'))
    if rec is None:
        return sky_color(ray.direction)

    scatter_result = rec.material.scatter(ray, rec, rng)
    if scatter_result is None:
        return BLACK
    scattered, attenuation = scatter_result
    return attenuation * ray_color(scattered, world, depth - 1, rng)


class Renderer:
    """
    Renders a scene on a pool of CPU threads.

    Every pixel draws its random numbers from its own generator, derived from
    the root seed and the pixel coordinates. A fixed seed therefore gives the
    same image whatever the number of workers or the order pixels finish in.
    """
    def __init__(self, width: int, height: int, samples_per_pixel: int = 100,
                 max_depth: int = 50, num_workers: Optional[int] = None,
                 seed: Optional[int] = None):
        self.width = width
        self.height = height
        self.samples_per_pixel = samples_per_pixel
        self.max_depth = max_depth
        self.num_workers = num_workers or os.cpu_count() or 1
        self.seed_sequence = np.random.SeedSequence(seed)

    def pixel_rng(self, x: int, y: int) -> np.random.Generator:
        """Independent generator for one pixel task."""
        seq = np.random.SeedSequence(self.seed_sequence.entropy, spawn_key=(y, x))
        return np.random.default_rng(seq)

    def render_pixel(self, x: int, y: int, camera: Camera, world: Hittable) -> Tuple[int, int, int]:
        """
        Trace samples_per_pixel jittered rays through pixel (x, y), with y = 0
        the top row, and return its quantized colour.
        """
        rng = self.pixel_rng(x, y)
        # Viewport (s, t) is measured from the bottom-left corner
        s_scale = max(self.width - 1, 1)
        t_scale = max(self.height - 1, 1)
        row = self.height - 1 - y

        color = Vector3(0.0, 0.0, 0.0)
        for _ in range(self.samples_per_pixel):
            s = (x + rng.random()) / s_scale
            t = (row + rng.random()) / t_scale
            ray = camera.get_ray(s, t, rng)
            color = color + ray_color(ray, world, self.max_depth, rng)
        return to_rgb8(color, self.samples_per_pixel)

    def render(self, camera: Camera, world: Hittable, show_progress: bool = False) -> np.ndarray:
        """
        Render every pixel and assemble the frame buffer.

        Returns:
            np.ndarray: (height, width, 3) uint8 RGB, top row first.

        Raises:
            RenderError: If any pixel task fails. No partial image is returned.
        """
        frame = np.zeros((self.height, self.width, 3), dtype=np.uint8)
        pixels = [(x, y) for y in range(self.height) for x in range(self.width)]

        def task(pixel):
            return self.render_pixel(pixel[0], pixel[1], camera, world)

        logger.info("Rendering %dx%d, %d spp, depth %d on %d workers",
                    self.width, self.height, self.samples_per_pixel,
                    self.max_depth, self.num_workers)
        results = parallel_map(pixels, task, self.num_workers)
        if show_progress:
            results = tqdm(results, total=len(pixels), desc="Rendering", unit="px")

        # Only this thread writes to the frame buffer
        for (x, y), rgb in results:
            frame[y, x] = rgb
        return frame
