# materials/light.py
from raycaster.core.color import WHITE, Color
from raycaster.core.vector import ORIGIN, Point3

class PointLight:
    """
    A point light with no size: a position and an RGB intensity.
    """
    def __init__(self, position: Point3 = ORIGIN, intensity: Color = WHITE):
        self.position = position
        self.intensity = intensity

    def __eq__(self, other) -> bool:
        if not isinstance(other, PointLight):
            return NotImplemented
        return self.position == other.position and self.intensity == other.intensity

    __hash__ = None

    def __repr__(self) -> str:
        return f"PointLight({self.position!r}, {self.intensity!r})"
