# renderer/canvas.py
import os
from typing import Sequence
import numpy as np
from PIL import Image
from raycaster.core.color import Color
from raycaster.renderer.tone_mapping import tone_map

# Plain-text PPM lines may not exceed this many characters.
PPM_LINE_WIDTH = 70

class Canvas:
    """
    A width x height buffer of linear RGB values, indexed [x, y].
    Values are stored unclamped; tone mapping happens when encoding.
    """
    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.pixels = np.zeros((width, height, 3), dtype=np.float64)

    def _check_bounds(self, x: int, y: int):
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Pixel ({x}, {y}) is outside a {self.width}x{self.height} canvas")

    def write_pixel(self, x: int, y: int, color: Color):
        self._check_bounds(x, y)
        self.pixels[x, y] = (color.r, color.g, color.b)

    def write_row(self, y: int, colors: Sequence[Color]):
        """
        Writes a full row of pixels at once.
        """
        if len(colors) != self.width:
            raise ValueError(f"Row has {len(colors)} pixels, canvas is {self.width} wide")
        self._check_bounds(0, y)
        self.pixels[:, y] = [(c.r, c.g, c.b) for c in colors]

    def get_pixel(self, x: int, y: int) -> Color:
        self._check_bounds(x, y)
        r, g, b = self.pixels[x, y]
        return Color(float(r), float(g), float(b))

    def to_bytes(self, operator: str = "clamp") -> np.ndarray:
        """
        8-bit image in (height, width, 3) row order, ready for encoders.
        """
        return tone_map(self.pixels, operator).transpose(1, 0, 2)

    def to_ppm(self, operator: str = "clamp") -> str:
        """
        Encodes the canvas as a plain-text (P3) PPM image.
        """
        lines = ["P3", f"{self.width} {self.height}", "255"]
        for row in self.to_bytes(operator):
            line = ""
            for value in row.reshape(-1):
                token = str(int(value))
                if len(line) + len(token) + 1 > PPM_LINE_WIDTH:
                    lines.append(line)
                    line = ""
                line = f"{line} {token}" if line else token
            lines.append(line)
        lines.append("")
        return "\n".join(lines)

    def save(self, path: str, operator: str = "clamp"):
        """
        Writes a .ppm as plain text; any other extension goes through Pillow.
        """
        if os.path.splitext(path)[1].lower() == ".ppm":
            with open(path, "w") as f:
                f.write(self.to_ppm(operator))
            return
        Image.fromarray(np.ascontiguousarray(self.to_bytes(operator))).save(path)
