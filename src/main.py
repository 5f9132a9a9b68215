# main.py
import argparse
import logging
import sys
import time

import numpy as np

from core.vector import Vector3
from camera.camera import Camera
from config import QUALITY_PRESETS, RenderConfig, parse_ratio, parse_triple
from renderer.image_io import save_image
from renderer.raytracer import Renderer
from renderer.scheduler import RenderError
from scenes import SCENE_CAMERAS, SCENES, build_scene


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Render a scene of spheres with a CPU Monte Carlo path tracer."
    )
    parser.add_argument("-o", "--output", default="image.png",
                        help="Output image path (default: image.png)")
    parser.add_argument("-a", "--aspect-ratio", type=parse_ratio, default=parse_ratio("16:9"),
                        help="Width:height ratio used to derive the height (default: 16:9)")
    parser.add_argument("--width", type=int, default=400, help="Image width in pixels (default: 400)")
    parser.add_argument("--height", type=int, default=None,
                        help="Image height in pixels; overrides --aspect-ratio")
    parser.add_argument("-s", "--samples-per-pixel", type=int, default=None,
                        help="Samples per pixel (default: 100)")
    parser.add_argument("--max-depth", type=int, default=None,
                        help="Maximum bounces per path (default: 50)")
    parser.add_argument("--quality", choices=sorted(QUALITY_PRESETS),
                        help="Named samples/bounces preset; explicit flags win")
    parser.add_argument("-j", "--workers", type=int, default=None,
                        help="Render threads (default: CPU count)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for reproducible renders")
    parser.add_argument("--scene", choices=sorted(SCENES), default="cover",
                        help="Built-in scene to render (default: cover)")
    parser.add_argument("--lookfrom", type=parse_triple, help="Camera position as x,y,z")
    parser.add_argument("--lookat", type=parse_triple, help="Camera target as x,y,z")
    parser.add_argument("--vfov", type=float, help="Vertical field of view in degrees")
    parser.add_argument("--aperture", type=float, help="Lens diameter (0 for a pinhole)")
    parser.add_argument("--focus-dist", type=float, help="Distance to the focal plane")
    parser.add_argument("--preview", action="store_true",
                        help="Show the finished image in a window")
    parser.add_argument("--no-progress", action="store_true", help="Hide the progress bar")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def config_from_args(args: argparse.Namespace) -> RenderConfig:
    """
    Merge command line flags over the scene's camera framing and the chosen
    quality preset.

    Raises:
        ValueError: If the resulting configuration is invalid.
    """
    camera = dict(SCENE_CAMERAS[args.scene])
    for key in ("lookfrom", "lookat", "vfov", "aperture", "focus_dist"):
        value = getattr(args, key)
        if value is not None:
            camera[key] = value

    samples, depth = 100, 50
    if args.quality:
        samples = QUALITY_PRESETS[args.quality]["samples"]
        depth = QUALITY_PRESETS[args.quality]["bounces"]
    if args.samples_per_pixel is not None:
        samples = args.samples_per_pixel
    if args.max_depth is not None:
        depth = args.max_depth

    kwargs = {}
    if args.workers is not None:
        kwargs["num_workers"] = args.workers

    return RenderConfig(
        output=args.output,
        width=args.width,
        height=args.height,
        aspect_ratio=args.aspect_ratio,
        samples_per_pixel=samples,
        max_depth=depth,
        seed=args.seed,
        scene=args.scene,
        preview=args.preview,
        **camera,
        **kwargs,
    )


def render(config: RenderConfig, show_progress: bool = False) -> np.ndarray:
    """Build the configured scene and camera and render them."""
    world = build_scene(config.scene, np.random.default_rng(config.seed))
    camera = Camera(
        lookfrom=Vector3(*config.lookfrom),
        lookat=Vector3(*config.lookat),
        vup=Vector3(*config.vup),
        vfov=config.vfov,
        aspect_ratio=config.image_aspect,
        aperture=config.aperture,
        focus_dist=config.focus_dist,
    )
    renderer = Renderer(
        config.width,
        config.height,
        samples_per_pixel=config.samples_per_pixel,
        max_depth=config.max_depth,
        num_workers=config.num_workers,
        seed=config.seed,
    )
    return renderer.render(camera, world, show_progress=show_progress)


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    try:
        config = config_from_args(args)
    except ValueError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1

    print(f"Image dimensions: {config.width} x {config.height}")
    print(f"Scene: {config.scene}, {config.samples_per_pixel} samples per pixel, "
          f"max depth {config.max_depth}, {config.num_workers} workers")

    print("Rendering...")
    start = time.perf_counter()
    try:
        frame = render(config, show_progress=not args.no_progress)
    except RenderError as e:
        print(f"Render failed: {e} ({e.__cause__!r})", file=sys.stderr)
        return 1
    print(f"Rendered in {time.perf_counter() - start:.1f}s")

    print(f"Saving image to '{config.output}'")
    try:
        save_image(frame, config.output)
    except (OSError, ValueError) as e:
        print(f"Could not save image: {e}", file=sys.stderr)
        return 1

    if config.preview:
        from renderer.display import show_frame
        show_frame(frame, title=f"{config.scene} - {config.width}x{config.height}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
