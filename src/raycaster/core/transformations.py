# core/transformations.py
"""
Factory functions for the affine transforms used to place shapes, patterns
and the camera.

Transforms compose like matrices: in ``A * B * C`` the rightmost transform
(``C``) is applied to an object-space point first. ``chain`` takes them in
application order instead.
"""
import math
from functools import reduce
from typing import Union
from raycaster.core.matrix import IDENTITY, Matrix
from raycaster.core.vector import Point3, Vector3

def _components(x, y, z):
    if isinstance(x, (Vector3, Point3)):
        return x.x, x.y, x.z
    return x, y, z

def translation(x: Union[float, Vector3], y: float = None, z: float = None) -> Matrix:
    x, y, z = _components(x, y, z)
    return Matrix([
        [1.0, 0.0, 0.0, x],
        [0.0, 1.0, 0.0, y],
        [0.0, 0.0, 1.0, z],
        [0.0, 0.0, 0.0, 1.0],
    ])

def scaling(x: Union[float, Vector3], y: float = None, z: float = None) -> Matrix:
    x, y, z = _components(x, y, z)
    return Matrix([
        [x, 0.0, 0.0, 0.0],
        [0.0, y, 0.0, 0.0],
        [0.0, 0.0, z, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ])

def rotation_x(radians: float) -> Matrix:
    c, s = math.cos(radians), math.sin(radians)
    return Matrix([
        [1.0, 0.0, 0.0, 0.0],
        [0.0, c, -s, 0.0],
        [0.0, s, c, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ])

def rotation_y(radians: float) -> Matrix:
    c, s = math.cos(radians), math.sin(radians)
    return Matrix([
        [c, 0.0, s, 0.0],
        [0.0, 1.0, 0.0, 0.0],
        [-s, 0.0, c, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ])

def rotation_z(radians: float) -> Matrix:
    c, s = math.cos(radians), math.sin(radians)
    return Matrix([
        [c, -s, 0.0, 0.0],
        [s, c, 0.0, 0.0],
        [0.0, 0.0, 1.0, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ])

def shearing(xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> Matrix:
    """
    Moves each coordinate in proportion to the other two, e.g. ``xy`` moves x
    in proportion to y.
    """
    return Matrix([
        [1.0, xy, xz, 0.0],
        [yx, 1.0, yz, 0.0],
        [zx, zy, 1.0, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ])

def view_transform(from_point: Point3, to: Point3, up: Vector3) -> Matrix:
    """
    World-to-camera transform for an eye at ``from_point`` looking at ``to``.
    ``up`` only needs to be roughly perpendicular to the view direction.
    """
    forward = (to - from_point).normalize()
    left = forward.cross(up.normalize())
    true_up = left.cross(forward)
    orientation = Matrix([
        [left.x, left.y, left.z, 0.0],
        [true_up.x, true_up.y, true_up.z, 0.0],
        [-forward.x, -forward.y, -forward.z, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ])
    return orientation * translation(-from_point)

def chain(*transforms: Matrix) -> Matrix:
    """
    Composes transforms given in the order they should be applied:
    ``chain(rotation_x(a), scaling(5, 5, 5))`` rotates first, then scales.
    """
    return reduce(lambda acc, m: m * acc, transforms, IDENTITY)
