"""
Phong ray caster: spheres and planes under a single point light.
"""
from raycaster.camera.camera import Camera, pixel_color
from raycaster.core.color import BLACK, WHITE, Color
from raycaster.core.matrix import Matrix, SingularMatrixError
from raycaster.core.ray import Ray
from raycaster.core.vector import Point3, Vector3
from raycaster.geometry.shape import Shape, ShapeKind
from raycaster.geometry.world import World
from raycaster.materials.light import PointLight
from raycaster.materials.material import Material
from raycaster.materials.pattern import Pattern, PatternError, PatternKind
from raycaster.renderer.canvas import Canvas

__version__ = "0.1.0"
