# core/ray.py
from raycaster.core.matrix import Matrix
from raycaster.core.vector import Point3, Vector3

class Ray:
    """
    Represents a ray in 3D space with an origin point and a direction.
    """
    __slots__ = ("origin", "direction")

    def __init__(self, origin: Point3, direction: Vector3):
        self.origin = origin
        self.direction = direction

    def position(self, t: float) -> Point3:
        """
        Returns the point along the ray at parameter t.
        """
        return self.origin + self.direction * t

    def transform(self, matrix: Matrix) -> "Ray":
        """
        Returns a new ray with the matrix applied to origin and direction.
        The direction is not renormalized, so t values keep their meaning.
        """
        return Ray(matrix * self.origin, matrix * self.direction)

    def intersect(self, shape) -> list:
        """
        Intersections of this ray with a shape, computed in the shape's local space.
        """
        return shape.intersect(self)

    def __repr__(self) -> str:
        return f"Ray({self.origin!r}, {self.direction!r})"
