# core/vector.py
import math
from raycaster.core.utils import equal

class Vector3:
    """
    A 3D direction (homogeneous w = 0). Translations leave it unchanged.
    Supports arithmetic, dot and cross products, normalization and reflection.
    """
    __slots__ = ("x", "y", "z")
    w = 0.0

    def __init__(self, x: float, y: float, z: float):
        self.x = x
        self.y = y
        self.z = z

    def __add__(self, other: "Vector3") -> "Vector3":
        # Vector + Point is a Point; let Point3 handle it.
        if isinstance(other, Point3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        # Vector - Point is undefined.
        if isinstance(other, Point3):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, t: float) -> "Vector3":
        return Vector3(self.x * t, self.y * t, self.z * t)

    def __rmul__(self, t: float) -> "Vector3":
        return self.__mul__(t)

    def __truediv__(self, t: float) -> "Vector3":
        return Vector3(self.x / t, self.y / t, self.z / t)

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def __eq__(self, other) -> bool:
        if type(other) is not Vector3:
            return NotImplemented
        return equal(self.x, other.x) and equal(self.y, other.y) and equal(self.z, other.z)

    __hash__ = None

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def dot(self, other: "Vector3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3") -> "Vector3":
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def magnitude(self) -> float:
        return math.sqrt(self.dot(self))

    def normalize(self) -> "Vector3":
        # A zero vector has no direction; callers never pass one.
        return self / self.magnitude()

    def reflect(self, normal: "Vector3") -> "Vector3":
        """
        Reflects this vector about the given normal.
        """
        return self - normal * 2 * self.dot(normal)

    def __repr__(self) -> str:
        return f"Vector3({self.x}, {self.y}, {self.z})"


class Point3:
    """
    A 3D position (homogeneous w = 1). Translations move it.
    Point - Point gives a Vector3, Point +/- Vector3 gives a Point3.
    """
    __slots__ = ("x", "y", "z")
    w = 1.0

    def __init__(self, x: float, y: float, z: float):
        self.x = x
        self.y = y
        self.z = z

    def __add__(self, other: Vector3) -> "Point3":
        if not isinstance(other, Vector3):
            return NotImplemented
        return Point3(self.x + other.x, self.y + other.y, self.z + other.z)

    __radd__ = __add__

    def __sub__(self, other):
        if isinstance(other, Point3):
            return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)
        if isinstance(other, Vector3):
            return Point3(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented

    def __neg__(self) -> Vector3:
        # Used to move a point back to the origin, e.g. translation(-from).
        return Vector3(-self.x, -self.y, -self.z)

    def __eq__(self, other) -> bool:
        if type(other) is not Point3:
            return NotImplemented
        return equal(self.x, other.x) and equal(self.y, other.y) and equal(self.z, other.z)

    __hash__ = None

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __repr__(self) -> str:
        return f"Point3({self.x}, {self.y}, {self.z})"


ORIGIN = Point3(0.0, 0.0, 0.0)
X_AXIS = Vector3(1.0, 0.0, 0.0)
Y_AXIS = Vector3(0.0, 1.0, 0.0)
Z_AXIS = Vector3(0.0, 0.0, 1.0)
