from raycaster.geometry.intersection import Computations, Intersection, hit, intersections
from raycaster.geometry.shape import Shape, ShapeKind
from raycaster.geometry.world import World
