"""Tests for Ray."""

from raycaster.core.ray import Ray
from raycaster.core.transformations import scaling, translation
from raycaster.core.vector import Point3, Vector3
from raycaster.geometry.shape import Shape


class TestRayPosition:

    def test_stores_origin_and_direction(self):
        ray = Ray(Point3(1, 2, 3), Vector3(4, 5, 6))
        assert ray.origin == Point3(1, 2, 3)
        assert ray.direction == Vector3(4, 5, 6)

    def test_position(self):
        ray = Ray(Point3(2, 3, 4), Vector3(1, 0, 0))
        assert ray.position(0) == Point3(2, 3, 4)
        assert ray.position(1) == Point3(3, 3, 4)
        assert ray.position(-1) == Point3(1, 3, 4)
        assert ray.position(2.5) == Point3(4.5, 3, 4)


class TestRayTransform:

    def test_translate(self):
        ray = Ray(Point3(1, 2, 3), Vector3(0, 1, 0))
        moved = ray.transform(translation(3, 4, 5))
        assert moved.origin == Point3(4, 6, 8)
        assert moved.direction == Vector3(0, 1, 0)

    def test_scale_keeps_direction_unnormalized(self):
        ray = Ray(Point3(1, 2, 3), Vector3(0, 1, 0))
        scaled = ray.transform(scaling(2, 3, 4))
        assert scaled.origin == Point3(2, 6, 12)
        assert scaled.direction == Vector3(0, 3, 0)

    def test_transform_returns_new_ray(self):
        ray = Ray(Point3(1, 2, 3), Vector3(0, 1, 0))
        ray.transform(translation(3, 4, 5))
        assert ray.origin == Point3(1, 2, 3)


class TestRayIntersect:

    def test_delegates_to_shape(self):
        ray = Ray(Point3(0, 0, -5), Vector3(0, 0, 1))
        xs = ray.intersect(Shape.sphere())
        assert [i.t for i in xs] == [4.0, 6.0]
