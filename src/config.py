"""Render configuration: image size, sampling, camera placement and workers."""

import os
from dataclasses import dataclass, field
from typing import Optional, Tuple

from core.vector import Vector3

Triple = Tuple[float, float, float]

# Samples per pixel and bounce limit for each named quality level
QUALITY_PRESETS = {
    "preview": {"samples": 10, "bounces": 8},
    "balanced": {"samples": 50, "bounces": 25},
    "final": {"samples": 500, "bounces": 50},
}


@dataclass(frozen=True)
class Ratio:
    """An aspect ratio a:b, e.g. 16:9 for width:height."""

    a: int
    b: int

    def a_to_b(self, x: int) -> int:
        """Scale a length on the `a` side to the `b` side (width to height)."""
        return x * self.b // self.a

    def __float__(self) -> float:
        return self.a / self.b

    def __str__(self) -> str:
        return f"{self.a}:{self.b}"


def parse_ratio(text: str) -> Ratio:
    """Parse an aspect ratio of the form 'W:H'.

    Raises:
        ValueError: If the string is not two positive integers separated by ':'.
    """
    parts = text.split(":")
    if len(parts) != 2:
        raise ValueError(f"Aspect ratio must look like 'W:H', got {text!r}")
    try:
        a, b = int(parts[0]), int(parts[1])
    except ValueError:
        raise ValueError(f"Aspect ratio must be two integers, got {text!r}") from None
    if a <= 0 or b <= 0:
        raise ValueError(f"Aspect ratio parts must be positive, got {text!r}")
    return Ratio(a, b)


def parse_triple(text: str) -> Triple:
    """Parse 'x,y,z' into a tuple of floats."""
    parts = text.split(",")
    if len(parts) != 3:
        raise ValueError(f"Expected three comma separated numbers, got {text!r}")
    try:
        return tuple(float(p) for p in parts)
    except ValueError:
        raise ValueError(f"Expected three comma separated numbers, got {text!r}") from None


@dataclass
class RenderConfig:
    """Configuration for one render.

    Attributes:
        output: Path of the image to write
        width: Image width in pixels
        height: Image height in pixels; derived from aspect_ratio when None
        aspect_ratio: Width to height ratio
        samples_per_pixel: Jittered samples averaged per pixel (>= 1)
        max_depth: Maximum number of bounces per path (>= 0)
        lookfrom: Camera position
        lookat: Point the camera aims at
        vup: Camera up direction hint
        vfov: Vertical field of view in degrees
        aperture: Lens diameter; 0 for a pinhole camera
        focus_dist: Distance to the focal plane
        num_workers: Render threads (default: CPU count)
        seed: Root seed for all sampling; None draws fresh entropy
        scene: Name of the built-in scene to render
        preview: Show the finished image in a window
    """

    output: str = "image.png"
    width: int = 400
    height: Optional[int] = None
    aspect_ratio: Ratio = field(default_factory=lambda: Ratio(16, 9))
    samples_per_pixel: int = 100
    max_depth: int = 50
    lookfrom: Triple = (13.0, 2.0, 3.0)
    lookat: Triple = (0.0, 0.0, 0.0)
    vup: Triple = (0.0, 1.0, 0.0)
    vfov: float = 20.0
    aperture: float = 0.1
    focus_dist: float = 10.0
    num_workers: int = field(default_factory=lambda: os.cpu_count() or 1)
    seed: Optional[int] = None
    scene: str = "cover"
    preview: bool = False

    def __post_init__(self):
        """Validate configuration and compute derived values."""
        if isinstance(self.aspect_ratio, str):
            self.aspect_ratio = parse_ratio(self.aspect_ratio)

        if self.width < 1:
            raise ValueError(f"width must be positive, got {self.width}")
        if self.height is None:
            self.height = self.aspect_ratio.a_to_b(self.width)
            if self.height < 1:
                raise ValueError(
                    f"width {self.width} with aspect ratio {self.aspect_ratio} gives an empty image"
                )
        elif self.height < 1:
            raise ValueError(f"height must be positive, got {self.height}")

        if self.samples_per_pixel < 1:
            raise ValueError(f"samples_per_pixel must be at least 1, got {self.samples_per_pixel}")
        if self.max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {self.max_depth}")
        if not 0 < self.vfov < 180:
            raise ValueError(f"vfov must be between 0 and 180 degrees, got {self.vfov}")
        if self.aperture < 0:
            raise ValueError(f"aperture must be non-negative, got {self.aperture}")
        if self.focus_dist <= 0:
            raise ValueError(f"focus_dist must be positive, got {self.focus_dist}")
        if self.num_workers < 1:
            raise ValueError(f"num_workers must be at least 1, got {self.num_workers}")

        if self.lookfrom == self.lookat:
            raise ValueError("lookfrom and lookat must differ")
        # The camera's horizontal axis is vup x (lookfrom - lookat)
        view = Vector3(*self.lookfrom) - Vector3(*self.lookat)
        if Vector3(*self.vup).cross(view).length_squared() < 1e-12 * view.length_squared():
            raise ValueError(f"vup {self.vup} must not be parallel to the view direction")

    @property
    def image_aspect(self) -> float:
        """Aspect ratio of the actual image, used for the camera viewport."""
        return self.width / self.height
