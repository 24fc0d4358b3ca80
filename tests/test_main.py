"""Tests for the scenes, the render driver and the command line."""

import math
import pytest
from PIL import Image
from raycaster.core.color import BLACK
from raycaster.main import QUALITY_LEVELS, main, parse_args
from raycaster.renderer.raytracer import Renderer
from raycaster.scenes import SCENES, default_scene


class TestScenes:

    @pytest.mark.parametrize("name", sorted(SCENES))
    def test_scene_renders(self, name):
        world, camera = SCENES[name](8, 6, math.pi / 3)
        assert len(world) > 0
        image = camera.render(world)
        assert (image.width, image.height) == (8, 6)
        # Every built-in scene puts something in the middle of the frame.
        assert image.get_pixel(4, 3) != BLACK


class TestRenderer:

    def test_render_records_time(self):
        world, camera = default_scene(5, 5)
        renderer = Renderer(camera, workers=2)
        image = renderer.render(world)
        assert image.width == 5
        assert renderer.last_render_time is not None

    def test_debug_mode_prints_progress(self, capsys):
        world, camera = default_scene(4, 4)
        Renderer(camera, debug_mode=True).render(world)
        out = capsys.readouterr().out
        assert "=== Rendering ===" in out
        assert "Resolution: 4x4" in out

    def test_quiet_by_default(self, capsys):
        world, camera = default_scene(4, 4)
        Renderer(camera).render(world)
        assert capsys.readouterr().out == ""


class TestCommandLine:

    def test_defaults(self):
        args = parse_args([])
        assert args.scene == "demo"
        assert args.quality == "high"
        assert args.tone_map == "clamp"
        assert not args.show

    @pytest.mark.parametrize("operator", ["clamp", "reinhard"])
    def test_tone_map_choices(self, operator):
        assert parse_args(["--tone-map", operator]).tone_map == operator

    def test_unknown_tone_map_rejected(self):
        with pytest.raises(SystemExit):
            parse_args(["--tone-map", "auto"])

    def test_writes_ppm(self, tmp_path):
        out = tmp_path / "render.ppm"
        code = main(["--scene", "default", "--width", "8", "--height", "6",
                     "--output", str(out)])
        assert code == 0
        assert out.read_text().startswith("P3\n8 6\n255\n")

    def test_quality_scales_resolution(self, tmp_path):
        out = tmp_path / "render.png"
        main(["--scene", "patterns", "--width", "16", "--height", "8",
              "--quality", "preview", "--output", str(out)])
        scale = QUALITY_LEVELS["preview"]["scale"]
        with Image.open(out) as img:
            assert img.size == (round(16 * scale), round(8 * scale))

    def test_verbose_output(self, tmp_path, capsys):
        out = tmp_path / "render.ppm"
        main(["--scene", "default", "--width", "4", "--height", "4",
              "--workers", "2", "--output", str(out), "--verbose"])
        printed = capsys.readouterr().out
        assert "Workers: 2" in printed
        assert f"Saved {out}" in printed

    def test_bad_field_of_view_fails(self, tmp_path, capsys):
        code = main(["--scene", "default", "--width", "4", "--height", "4",
                     "--fov", "180", "--output", str(tmp_path / "x.ppm")])
        assert code == 1
        assert "Error during rendering" in capsys.readouterr().out
