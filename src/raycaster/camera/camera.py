# camera/camera.py
import math
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import List, Optional
from raycaster.core.color import Color
from raycaster.core.matrix import IDENTITY, Matrix
from raycaster.core.ray import Ray
from raycaster.core.transformations import view_transform
from raycaster.core.vector import ORIGIN, Y_AXIS, Point3, Vector3
from raycaster.geometry.world import World
from raycaster.renderer.canvas import Canvas

class Camera:
    """
    Pinhole camera looking down -z in its own space, with the image plane at
    z = -1. The transform maps world space into camera space.
    """
    def __init__(self, h_size: int, v_size: int, field_of_view: float, transform: Matrix = None):
        self._h_size = h_size
        self._v_size = v_size
        self._field_of_view = field_of_view
        self.transform = transform if transform is not None else IDENTITY
        self.update_camera()

    @staticmethod
    def _validate(h_size: int, v_size: int, field_of_view: float):
        if h_size <= 0 or v_size <= 0:
            raise ValueError(f"Camera resolution must be positive, got {h_size}x{v_size}")
        if not 0 < field_of_view < math.pi:
            raise ValueError(f"Field of view must be in (0, pi) radians, got {field_of_view}")

    def update_camera(self):
        """Recomputes the image-plane extents and pixel size."""
        self._validate(self._h_size, self._v_size, self._field_of_view)

        half_view = math.tan(self._field_of_view / 2)
        aspect = self._h_size / self._v_size
        if aspect >= 1:
            self.half_width = half_view
            self.half_height = half_view / aspect
        else:
            self.half_width = half_view * aspect
            self.half_height = half_view
        self.pixel_size = self.half_width * 2 / self._h_size

    @property
    def h_size(self) -> int:
        return self._h_size

    @h_size.setter
    def h_size(self, value: int):
        self._validate(value, self._v_size, self._field_of_view)
        self._h_size = value
        self.update_camera()

    @property
    def v_size(self) -> int:
        return self._v_size

    @v_size.setter
    def v_size(self, value: int):
        self._validate(self._h_size, value, self._field_of_view)
        self._v_size = value
        self.update_camera()

    @property
    def field_of_view(self) -> float:
        return self._field_of_view

    @field_of_view.setter
    def field_of_view(self, value: float):
        self._validate(self._h_size, self._v_size, value)
        self._field_of_view = value
        self.update_camera()

    @property
    def transform(self) -> Matrix:
        return self._transform

    @transform.setter
    def transform(self, transform: Matrix):
        transform.inverse()
        self._transform = transform

    def look_at(self, from_point: Point3, to: Point3, up: Vector3 = Y_AXIS):
        self.transform = view_transform(from_point, to, up)

    def ray_for_pixel(self, x: int, y: int) -> Ray:
        """
        Ray from the camera through the centre of pixel (x, y).
        """
        x_offset = (x + 0.5) * self.pixel_size
        y_offset = (y + 0.5) * self.pixel_size

        # Camera looks toward -z, so +x is to the left.
        world_x = self.half_width - x_offset
        world_y = self.half_height - y_offset

        inverse = self._transform.inverse()
        pixel = inverse * Point3(world_x, world_y, -1)
        origin = inverse * ORIGIN
        direction = (pixel - origin).normalize()
        return Ray(origin, direction)

    def render_row(self, world: World, y: int) -> List[Color]:
        return [pixel_color(self, world, x, y) for x in range(self._h_size)]

    def render(self, world: World, workers: Optional[int] = None) -> Canvas:
        """
        Renders every pixel of the view into a new canvas.

        With more than one worker, rows are shared out over a thread pool.
        Each row is written by exactly one worker, and any exception raised
        while shading aborts the render.
        """
        image = Canvas(self._h_size, self._v_size)
        if workers is None or workers <= 1:
            for y in range(self._v_size):
                image.write_row(y, self.render_row(world, y))
            return image

        with ThreadPoolExecutor(max_workers=workers) as ex:
            futs = {ex.submit(self.render_row, world, y): y for y in range(self._v_size)}
            try:
                for f in as_completed(futs):
                    image.write_row(futs[f], f.result())
            except BaseException:
                # Drop rows that have not started yet.
                ex.shutdown(wait=True, cancel_futures=True)
                raise
        return image

    def __repr__(self) -> str:
        return f"Camera({self._h_size}x{self._v_size}, fov={self._field_of_view})"


def pixel_color(camera: Camera, world: World, x: int, y: int) -> Color:
    """
    Color seen through pixel (x, y). Pure in (camera, world, x, y).
    """
    return world.color_at(camera.ray_for_pixel(x, y))
