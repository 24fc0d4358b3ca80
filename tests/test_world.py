"""Tests for World: scene intersection, shading and shadows."""

import pytest
from raycaster.core.color import BLACK, WHITE, Color
from raycaster.core.ray import Ray
from raycaster.core.transformations import scaling, translation
from raycaster.core.vector import Point3, Vector3
from raycaster.geometry.intersection import Intersection
from raycaster.geometry.shape import Shape
from raycaster.geometry.world import World
from raycaster.materials.light import PointLight
from raycaster.materials.material import Material
from raycaster.materials.pattern import Pattern


class TestWorldConstruction:

    def test_empty_world(self):
        world = World()
        assert world.objects == []
        assert len(world) == 0
        assert world.light == PointLight()

    def test_default_world(self, default_world):
        assert len(default_world) == 2
        assert default_world.light == PointLight(Point3(-10, 10, -10), WHITE)
        outer, inner = default_world.objects
        assert outer.material == Material(Color(0.8, 1.0, 0.6), diffuse=0.7, specular=0.2)
        assert inner.transform == scaling(0.5, 0.5, 0.5)
        assert inner.material == Material()

    def test_add(self):
        world = World()
        s = Shape.plane()
        world.add(s)
        assert world.objects == [s]


class TestWorldIntersect:

    def test_sorted_union_of_all_shapes(self, default_world):
        xs = default_world.intersect(Ray(Point3(0, 0, -5), Vector3(0, 0, 1)))
        assert [i.t for i in xs] == pytest.approx([4.0, 4.5, 5.5, 6.0])

    def test_miss(self, default_world):
        assert default_world.intersect(Ray(Point3(0, 0, -5), Vector3(0, 1, 0))) == []


class TestShading:

    def test_shade_from_outside(self, default_world):
        ray = Ray(Point3(0, 0, -5), Vector3(0, 0, 1))
        shape = default_world.objects[0]
        comps = Intersection(4, shape).prepare_computations(ray)
        assert default_world.shade_hit(comps) == Color(0.38066, 0.47583, 0.2855)

    def test_shade_from_inside(self, default_world):
        default_world.light = PointLight(Point3(0, 0.25, 0), WHITE)
        ray = Ray(Point3(0, 0, 0), Vector3(0, 0, 1))
        shape = default_world.objects[1]
        comps = Intersection(0.5, shape).prepare_computations(ray)
        assert default_world.shade_hit(comps) == Color(0.90498, 0.90498, 0.90498)

    def test_shade_point_in_shadow(self):
        s1 = Shape.sphere()
        s2 = Shape.sphere(translation(0, 0, 10))
        world = World([s1, s2], PointLight(Point3(0, 0, -10), WHITE))
        ray = Ray(Point3(0, 0, 5), Vector3(0, 0, 1))
        comps = Intersection(4, s2).prepare_computations(ray)
        assert world.shade_hit(comps) == Color(0.1, 0.1, 0.1)

    def test_shade_patterned_shape(self):
        floor = Shape.plane(material=Material(ambient=1, diffuse=0, specular=0,
                                              pattern=Pattern.checker(WHITE, BLACK)))
        world = World([floor], PointLight(Point3(0, 10, 0), WHITE))
        assert world.color_at(Ray(Point3(0.5, 1, 0.5), Vector3(0, -1, 0))) == WHITE
        assert world.color_at(Ray(Point3(1.5, 1, 0.5), Vector3(0, -1, 0))) == BLACK


class TestColorAt:

    def test_ray_misses(self, default_world):
        assert default_world.color_at(Ray(Point3(0, 0, -5), Vector3(0, 1, 0))) == BLACK

    def test_ray_hits(self, default_world):
        color = default_world.color_at(Ray(Point3(0, 0, -5), Vector3(0, 0, 1)))
        assert color == Color(0.38066, 0.47583, 0.2855)

    def test_hit_behind_ray(self, default_world):
        outer, inner = default_world.objects
        outer.material = Material(ambient=1.0)
        inner.material = Material(ambient=1.0)
        color = default_world.color_at(Ray(Point3(0, 0, 0.75), Vector3(0, 0, -1)))
        assert color == inner.material.color


class TestShadows:

    @pytest.mark.parametrize("point, shadowed", [
        (Point3(0, 10, 0), False),
        (Point3(10, -10, 10), True),
        (Point3(-20, 20, -20), False),
        (Point3(-2, 2, -2), False),
    ])
    def test_is_shadowed(self, default_world, point, shadowed):
        assert default_world.is_shadowed(point) is shadowed

    def test_over_point_avoids_self_shadowing(self):
        sphere = Shape.sphere()
        world = World([sphere], PointLight(Point3(0, 0, -10), WHITE))
        ray = Ray(Point3(0, 0, -5), Vector3(0, 0, 1))
        comps = Intersection(4, sphere).prepare_computations(ray)
        assert not world.is_shadowed(comps.over_point)
