# main.py
import argparse
import math
import sys
import traceback
from raycaster.core.matrix import SingularMatrixError
from raycaster.materials.pattern import PatternError
from raycaster.renderer.raytracer import Renderer
from raycaster.renderer.tone_mapping import TONE_MAPPERS
from raycaster.scenes import SCENES

# Resolution scale and worker threads per quality level.
QUALITY_LEVELS = {
    "preview": {"scale": 0.25, "workers": 1},
    "balanced": {"scale": 0.5, "workers": 4},
    "high": {"scale": 1.0, "workers": 8},
}

def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Render a scene with a Phong ray caster.")
    parser.add_argument("--scene", choices=sorted(SCENES), default="demo", help="Built-in scene to render")
    parser.add_argument("--width", type=int, default=400, help="Full-quality image width in pixels")
    parser.add_argument("--height", type=int, default=200, help="Full-quality image height in pixels")
    parser.add_argument("--fov", type=float, default=60.0, help="Vertical field of view in degrees")
    parser.add_argument("--quality", choices=list(QUALITY_LEVELS), default="high",
                        help="Resolution scale and thread count preset")
    parser.add_argument("--workers", type=int, default=None, help="Override the preset's worker threads")
    parser.add_argument("--output", default="render.ppm", help="Output image (.ppm, or any format Pillow writes)")
    parser.add_argument("--tone-map", choices=sorted(TONE_MAPPERS), default="clamp",
                        help="Operator used when encoding the image")
    parser.add_argument("--show", action="store_true", help="Open a preview window after rendering")
    parser.add_argument("--verbose", action="store_true", help="Print render progress")
    return parser.parse_args(argv)

def main(argv=None) -> int:
    args = parse_args(argv)
    quality = QUALITY_LEVELS[args.quality]
    width = max(1, round(args.width * quality["scale"]))
    height = max(1, round(args.height * quality["scale"]))
    workers = args.workers if args.workers is not None else quality["workers"]

    try:
        world, camera = SCENES[args.scene](width, height, math.radians(args.fov))
        renderer = Renderer(camera, workers=workers, debug_mode=args.verbose)
        image = renderer.render(world)
        image.save(args.output, args.tone_map)
    except (SingularMatrixError, PatternError, ValueError) as e:
        print(f"Error during rendering: {e}")
        if args.verbose:
            traceback.print_exc()
        return 1

    if args.verbose:
        print(f"Saved {args.output}")

    if args.show:
        from raycaster.renderer.preview import show
        show(image, operator=args.tone_map)
    return 0

if __name__ == "__main__":
    sys.exit(main())
