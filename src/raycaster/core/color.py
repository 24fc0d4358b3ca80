# core/color.py
from raycaster.core.utils import equal

class Color:
    """
    An RGB triple. Channels are not clamped; values above 1.0 are legal until
    the image is encoded.
    """
    __slots__ = ("r", "g", "b")

    def __init__(self, r: float, g: float, b: float):
        self.r = r
        self.g = g
        self.b = b

    def __add__(self, other: "Color") -> "Color":
        return Color(self.r + other.r, self.g + other.g, self.b + other.b)

    def __sub__(self, other: "Color") -> "Color":
        return Color(self.r - other.r, self.g - other.g, self.b - other.b)

    def __mul__(self, other):
        # Scalar scaling or componentwise (Hadamard) product.
        if isinstance(other, (int, float)):
            return Color(self.r * other, self.g * other, self.b * other)
        return Color(self.r * other.r, self.g * other.g, self.b * other.b)

    def __rmul__(self, other: float) -> "Color":
        return self.__mul__(other)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return equal(self.r, other.r) and equal(self.g, other.g) and equal(self.b, other.b)

    __hash__ = None

    def __iter__(self):
        yield self.r
        yield self.g
        yield self.b

    def __repr__(self) -> str:
        return f"Color({self.r}, {self.g}, {self.b})"


BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)
