# renderer/raytracer.py
import time
from raycaster.camera.camera import Camera
from raycaster.geometry.world import World
from raycaster.renderer.canvas import Canvas

class Renderer:
    """
    Drives a camera over a world and reports progress when debug_mode is on.
    """
    def __init__(self, camera: Camera, workers: int = 1, debug_mode: bool = False):
        self.camera = camera
        self.workers = workers
        self.debug_mode = debug_mode
        self.last_render_time = None

    def render(self, world: World) -> Canvas:
        if self.debug_mode:
            print("\n=== Rendering ===")
            print(f"Resolution: {self.camera.h_size}x{self.camera.v_size}")
            print(f"Objects: {len(world.objects)}")
            print(f"Workers: {self.workers}")

        start = time.perf_counter()
        image = self.camera.render(world, workers=self.workers)
        self.last_render_time = time.perf_counter() - start

        if self.debug_mode:
            pixels = self.camera.h_size * self.camera.v_size
            print(f"Rendered {pixels} pixels in {self.last_render_time:.2f}s "
                  f"({pixels / max(self.last_render_time, 1e-9):.0f} px/s)")
        return image
