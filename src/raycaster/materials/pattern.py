# materials/pattern.py
import math
from enum import Enum
from raycaster.core.color import BLACK, WHITE, Color
from raycaster.core.matrix import IDENTITY, Matrix
from raycaster.core.utils import fract
from raycaster.core.vector import Point3

class PatternError(RuntimeError):
    """
    Raised when a pattern is sampled without being configured.
    """


class PatternKind(Enum):
    NONE = "none"
    STRIPE = "stripe"
    GRADIENT = "gradient"
    RING = "ring"
    CHECKER = "checker"


class Pattern:
    """
    Procedural two-color texture evaluated in its own pattern space.
    The transform places the pattern relative to the shape it is applied to.
    """
    def __init__(self, kind: PatternKind = PatternKind.NONE, color1: Color = WHITE,
                 color2: Color = BLACK, transform: Matrix = None):
        self.kind = kind
        self.color1 = color1
        self.color2 = color2
        self.transform = transform if transform is not None else IDENTITY

    @classmethod
    def none(cls) -> "Pattern":
        return cls(PatternKind.NONE)

    @classmethod
    def stripe(cls, color1: Color = WHITE, color2: Color = BLACK, transform: Matrix = None) -> "Pattern":
        return cls(PatternKind.STRIPE, color1, color2, transform)

    @classmethod
    def gradient(cls, color1: Color = WHITE, color2: Color = BLACK, transform: Matrix = None) -> "Pattern":
        return cls(PatternKind.GRADIENT, color1, color2, transform)

    @classmethod
    def ring(cls, color1: Color = WHITE, color2: Color = BLACK, transform: Matrix = None) -> "Pattern":
        return cls(PatternKind.RING, color1, color2, transform)

    @classmethod
    def checker(cls, color1: Color = WHITE, color2: Color = BLACK, transform: Matrix = None) -> "Pattern":
        return cls(PatternKind.CHECKER, color1, color2, transform)

    @property
    def transform(self) -> Matrix:
        return self._transform

    @transform.setter
    def transform(self, transform: Matrix):
        transform.inverse()
        self._transform = transform

    @property
    def is_set(self) -> bool:
        return self.kind is not PatternKind.NONE

    def color_at(self, point: Point3) -> Color:
        """
        Samples the pattern at a point already in pattern space.
        """
        kind = self.kind
        if kind is PatternKind.STRIPE:
            return self.color1 if math.floor(point.x) % 2 == 0 else self.color2
        if kind is PatternKind.GRADIENT:
            return self.color1 + (self.color2 - self.color1) * fract(point.x)
        if kind is PatternKind.RING:
            ring = math.floor(math.sqrt(point.x * point.x + point.z * point.z))
            return self.color1 if ring % 2 == 0 else self.color2
        if kind is PatternKind.CHECKER:
            cell = math.floor(point.x) + math.floor(point.y) + math.floor(point.z)
            return self.color1 if cell % 2 == 0 else self.color2
        if kind is PatternKind.NONE:
            raise PatternError("Cannot sample an unset pattern; assign a concrete pattern first")
        raise ValueError(f"Unknown pattern kind: {kind!r}")

    def color_at_object(self, shape, point: Point3) -> Color:
        """
        Samples the pattern at a world-space point on the given shape.
        """
        object_point = shape.transform.inverse() * point
        pattern_point = self._transform.inverse() * object_point
        return self.color_at(pattern_point)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Pattern):
            return NotImplemented
        return (self.kind is other.kind and self.color1 == other.color1
                and self.color2 == other.color2 and self._transform == other._transform)

    __hash__ = None

    def __repr__(self) -> str:
        return f"Pattern({self.kind.value}, {self.color1!r}, {self.color2!r})"
