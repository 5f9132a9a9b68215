"""Tests for the command line entry point."""

import numpy as np
import pytest

from main import build_parser, config_from_args, main, render
from config import RenderConfig
from renderer.image_io import load_image


class TestConfigFromArgs:
    """Tests for merging flags, scene framing and quality presets."""

    def test_scene_camera_defaults(self):
        args = build_parser().parse_args(["--scene", "three-spheres"])
        config = config_from_args(args)
        assert config.lookfrom == (-2.0, 2.0, 1.0)
        assert config.focus_dist == 3.4
        assert config.samples_per_pixel == 100
        assert config.max_depth == 50

    def test_flags_override_scene(self):
        args = build_parser().parse_args(
            ["--scene", "three-spheres", "--vfov", "30", "--lookfrom", "1,2,3", "--aperture", "0.5"]
        )
        config = config_from_args(args)
        assert config.vfov == 30.0
        assert config.lookfrom == (1.0, 2.0, 3.0)
        assert config.aperture == 0.5

    def test_quality_preset(self):
        config = config_from_args(build_parser().parse_args(["--quality", "preview"]))
        assert (config.samples_per_pixel, config.max_depth) == (10, 8)
        config = config_from_args(build_parser().parse_args(["--quality", "preview", "-s", "3"]))
        assert (config.samples_per_pixel, config.max_depth) == (3, 8)

    def test_aspect_ratio_and_workers(self):
        config = config_from_args(build_parser().parse_args(["-a", "3:2", "--width", "30", "-j", "2"]))
        assert config.height == 20
        assert config.num_workers == 2


class TestMain:
    def test_renders_and_saves(self, tmp_path, capsys):
        output = tmp_path / "render.png"
        status = main([
            "--scene", "single-sphere", "--width", "4", "--height", "3",
            "-s", "1", "--max-depth", "2", "--seed", "1", "-j", "2",
            "--no-progress", "-o", str(output),
        ])
        assert status == 0
        assert load_image(str(output)).shape == (3, 4, 3)
        assert "Image dimensions: 4 x 3" in capsys.readouterr().out

    @pytest.mark.parametrize("flags", [
        ["--width", "0"],
        ["-s", "0"],
        ["--lookfrom", "1,1,1", "--lookat", "1,1,1"],
    ])
    def test_invalid_config_returns_one(self, tmp_path, capsys, flags):
        """Rejected configurations report on stderr and exit with status 1."""
        output = tmp_path / "x.png"
        assert main(flags + ["-o", str(output)]) == 1
        assert "Invalid configuration" in capsys.readouterr().err
        assert not output.exists()

    def test_bad_ratio_exits(self):
        with pytest.raises(SystemExit):
            main(["-a", "wide"])

    def test_render_is_seeded(self):
        config = RenderConfig(width=4, height=3, samples_per_pixel=1, max_depth=3,
                              seed=11, num_workers=2, scene="three-spheres",
                              lookfrom=(-2.0, 2.0, 1.0), lookat=(0.0, 0.0, -1.0),
                              aperture=0.0, focus_dist=3.4)
        np.testing.assert_array_equal(render(config), render(config))
