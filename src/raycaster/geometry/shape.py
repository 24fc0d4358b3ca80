# geometry/shape.py
from enum import Enum
from typing import List
from raycaster.core.matrix import IDENTITY, Matrix
from raycaster.core.ray import Ray
from raycaster.core.utils import EPSILON
from raycaster.core.vector import ORIGIN, Y_AXIS, Point3, Vector3
from raycaster.geometry.intersection import Intersection
from raycaster.geometry.kernels import unit_sphere_roots, xz_plane_root
from raycaster.materials.material import Material

class ShapeKind(Enum):
    SPHERE = "sphere"
    PLANE = "plane"


class Shape:
    """
    A primitive placed in the world by its transform (object -> world).

    The set of primitives is closed: a unit sphere centred on the local origin
    and the local xz-plane (normal +Y). Local-space intersection and normals
    are selected by matching on ``kind``; everything in world space is shared.
    """
    def __init__(self, kind: ShapeKind, transform: Matrix = None, material: Material = None):
        self.kind = kind
        self.transform = transform if transform is not None else IDENTITY
        self.material = material if material is not None else Material()

    @classmethod
    def sphere(cls, transform: Matrix = None, material: Material = None) -> "Shape":
        return cls(ShapeKind.SPHERE, transform, material)

    @classmethod
    def plane(cls, transform: Matrix = None, material: Material = None) -> "Shape":
        return cls(ShapeKind.PLANE, transform, material)

    @property
    def transform(self) -> Matrix:
        return self._transform

    @transform.setter
    def transform(self, transform: Matrix):
        # Fails fast with SingularMatrixError for transforms like a zero scale.
        transform.inverse()
        self._transform = transform

    def local_intersect(self, ray: Ray) -> List[Intersection]:
        o, d = ray.origin, ray.direction
        if self.kind is ShapeKind.SPHERE:
            count, t0, t1 = unit_sphere_roots(
                float(o.x), float(o.y), float(o.z),
                float(d.x), float(d.y), float(d.z)
            )
            if count == 0:
                return []
            return [Intersection(t0, self), Intersection(t1, self)]
        if self.kind is ShapeKind.PLANE:
            count, t = xz_plane_root(float(o.y), float(d.y), EPSILON)
            if count == 0:
                return []
            return [Intersection(t, self)]
        raise ValueError(f"Unknown shape kind: {self.kind!r}")

    def local_normal_at(self, point: Point3) -> Vector3:
        if self.kind is ShapeKind.SPHERE:
            return (point - ORIGIN).normalize()
        if self.kind is ShapeKind.PLANE:
            return Y_AXIS
        raise ValueError(f"Unknown shape kind: {self.kind!r}")

    def intersect(self, ray: Ray) -> List[Intersection]:
        return self.local_intersect(ray.transform(self._transform.inverse()))

    def normal_at(self, point: Point3) -> Vector3:
        """
        World-space surface normal. Normals go back through the transposed
        inverse so non-uniform scaling keeps them perpendicular to the surface.
        """
        inverse = self._transform.inverse()
        local_normal = self.local_normal_at(inverse * point)
        return (inverse.transpose() * local_normal).normalize()

    def __repr__(self) -> str:
        return f"Shape({self.kind.value}, transform={self._transform!r})"
