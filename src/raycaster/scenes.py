# scenes.py
"""
Built-in scenes. Each builder returns a (world, camera) pair for the given
resolution and vertical field of view (radians).
"""
import math
from raycaster.camera.camera import Camera
from raycaster.core.color import WHITE, Color
from raycaster.core.transformations import chain, rotation_x, rotation_y, scaling, translation
from raycaster.core.vector import Point3, Vector3
from raycaster.geometry.shape import Shape
from raycaster.geometry.world import World
from raycaster.materials.light import PointLight
from raycaster.materials.presets import MaterialPresets, PatternPresets

def default_scene(width: int, height: int, fov: float = math.pi / 2):
    world = World.default()
    camera = Camera(width, height, fov)
    camera.look_at(Point3(0, 0, -5), Point3(0, 0, 0), Vector3(0, 1, 0))
    return world, camera

def demo_scene(width: int, height: int, fov: float = math.pi / 3):
    world = World(light=PointLight(Point3(-10, 10, -10), WHITE))

    world.add(Shape.plane(material=PatternPresets.checkered_floor()))
    # Back wall, tilted up from the floor.
    world.add(Shape.plane(
        chain(rotation_x(math.pi / 2), translation(0, 0, 10)),
        MaterialPresets.matte(Color(0.9, 0.85, 0.8)),
    ))

    world.add(Shape.sphere(
        translation(-0.5, 1, 0.5),
        MaterialPresets.plastic(Color(0.1, 1.0, 0.5)),
    ))
    world.add(Shape.sphere(
        translation(1.5, 0.5, -0.5) * scaling(0.5, 0.5, 0.5),
        MaterialPresets.glossy(Color(0.5, 1.0, 0.1)),
    ))
    world.add(Shape.sphere(
        translation(-1.5, 0.33, -0.75) * scaling(0.33, 0.33, 0.33),
        MaterialPresets.chalk(Color(1.0, 0.8, 0.1)),
    ))

    camera = Camera(width, height, fov)
    camera.look_at(Point3(0, 1.5, -5), Point3(0, 1, 0), Vector3(0, 1, 0))
    return world, camera

def patterns_scene(width: int, height: int, fov: float = math.pi / 3):
    world = World(light=PointLight(Point3(-8, 12, -10), Color(1.0, 1.0, 0.95)))

    world.add(Shape.plane(material=PatternPresets.rings(Color(0.85, 0.85, 0.85), Color(0.35, 0.35, 0.4))))
    world.add(Shape.sphere(
        translation(-1.6, 1, 0.5) * rotation_y(math.pi / 4),
        PatternPresets.striped(Color(0.9, 0.2, 0.2), Color(0.95, 0.95, 0.95)),
    ))
    world.add(Shape.sphere(
        translation(0.6, 1, 0.8),
        PatternPresets.gradient(Color(0.1, 0.3, 0.9), Color(0.9, 0.9, 0.1)),
    ))
    world.add(Shape.sphere(
        translation(1.9, 0.5, -0.6) * scaling(0.5, 0.5, 0.5),
        MaterialPresets.glossy(Color(0.6, 0.2, 0.8)),
    ))

    camera = Camera(width, height, fov)
    camera.look_at(Point3(0, 2, -5.5), Point3(0, 0.8, 0), Vector3(0, 1, 0))
    return world, camera

SCENES = {
    "default": default_scene,
    "demo": demo_scene,
    "patterns": patterns_scene,
}
