# geometry/world.py
from operator import attrgetter
from typing import Iterable, List
from raycaster.core.color import BLACK, WHITE, Color
from raycaster.core.ray import Ray
from raycaster.core.transformations import scaling
from raycaster.core.vector import Point3
from raycaster.geometry.intersection import Computations, Intersection, hit
from raycaster.geometry.shape import Shape
from raycaster.materials.light import PointLight
from raycaster.materials.material import Material

class World:
    """
    The scene: an ordered list of shapes lit by a single point light.
    Treated as read-only while a render is in progress.
    """
    def __init__(self, objects: Iterable[Shape] = (), light: PointLight = None):
        self.objects: List[Shape] = list(objects)
        self.light = light if light is not None else PointLight()

    @classmethod
    def default(cls) -> "World":
        """
        Two concentric spheres lit from the upper left, used as the reference scene.
        """
        light = PointLight(Point3(-10, 10, -10), WHITE)
        outer = Shape.sphere(material=Material(Color(0.8, 1.0, 0.6), diffuse=0.7, specular=0.2))
        inner = Shape.sphere(scaling(0.5, 0.5, 0.5))
        return cls([outer, inner], light)

    def add(self, obj: Shape):
        self.objects.append(obj)

    def __len__(self) -> int:
        return len(self.objects)

    def intersect(self, ray: Ray) -> List[Intersection]:
        xs = []
        for obj in self.objects:
            xs.extend(ray.intersect(obj))
        xs.sort(key=attrgetter("t"))
        return xs

    def shade_hit(self, comps: Computations) -> Color:
        return comps.shape.material.lighting(
            comps.point,
            self.light,
            comps.eye,
            comps.normal,
            self.is_shadowed(comps.over_point),
            shape=comps.shape,
        )

    def color_at(self, ray: Ray) -> Color:
        closest = hit(self.intersect(ray))
        if closest is None:
            return BLACK
        return self.shade_hit(closest.prepare_computations(ray))

    def is_shadowed(self, point: Point3) -> bool:
        """
        True when something sits between the point and the light.
        """
        to_light = self.light.position - point
        distance = to_light.magnitude()
        shadow_ray = Ray(point, to_light.normalize())
        blocker = hit(self.intersect(shadow_ray))
        return blocker is not None and blocker.t <= distance
