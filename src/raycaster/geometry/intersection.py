# geometry/intersection.py
from operator import attrgetter
from typing import Iterable, List, Optional
from raycaster.core.ray import Ray
from raycaster.core.utils import EPSILON

class Computations:
    """
    Shading data derived from a hit: the world-space point, the eye vector,
    the eye-facing normal, and a point nudged off the surface for shadow rays.
    """
    __slots__ = ("t", "shape", "point", "eye", "normal", "inside", "over_point")

    def __init__(self, t, shape, point, eye, normal, inside, over_point):
        self.t = t
        self.shape = shape
        self.point = point
        self.eye = eye
        self.normal = normal        # Always points toward the eye
        self.inside = inside        # Ray started inside the shape
        self.over_point = over_point


class Intersection:
    """
    A ray parameter t at which a ray meets a shape.
    """
    __slots__ = ("t", "shape")

    def __init__(self, t: float, shape):
        self.t = t
        self.shape = shape

    def prepare_computations(self, ray: Ray) -> Computations:
        point = ray.position(self.t)
        eye = -ray.direction
        normal = self.shape.normal_at(point)
        inside = normal.dot(eye) < 0
        if inside:
            normal = -normal
        return Computations(
            t=self.t,
            shape=self.shape,
            point=point,
            eye=eye,
            normal=normal,
            inside=inside,
            over_point=point + normal * EPSILON,
        )

    def __repr__(self) -> str:
        return f"Intersection({self.t}, {self.shape!r})"


def intersections(*xs: Intersection) -> List[Intersection]:
    """
    Collects intersections into a list sorted by t.
    """
    return sorted(xs, key=attrgetter("t"))

def hit(xs: Iterable[Intersection]) -> Optional[Intersection]:
    """
    The visible intersection: smallest t strictly in front of the ray origin,
    or None. When several share the smallest t, any one of them may be returned.
    """
    return min((i for i in xs if i.t > 0), key=attrgetter("t"), default=None)
