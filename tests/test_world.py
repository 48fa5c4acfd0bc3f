"""Tests for World construction, intersection and shading."""

from core.color import Color
from core.point import Point
from core.ray import Ray
from core.transforms import scale, translate
from core.vector import Vector
from geometry.intersection import Intersection
from geometry.object import Object
from geometry.world import World
from materials.light import PointLight
from materials.material import Material


class TestWorld:
    def test_empty_world(self):
        w = World()
        assert w.objects == []
        assert w.light_sources == []

    def test_worlds_are_independent(self):
        w1 = World()
        w2 = World()
        w1.push_object(Object.sphere())
        assert len(w2.objects) == 0

    def test_default_world(self, default_world):
        s1 = Object.sphere(material=Material(color=Color(0.8, 1.0, 0.6), diffuse=0.7, specular=0.2))
        s2 = Object.sphere(scale(0.5, 0.5, 0.5))
        assert default_world.light_sources == [PointLight(Point(-10, 10, -10), Color(1, 1, 1))]
        assert default_world.objects[0] == s1
        assert default_world.objects[1] == s2

    def test_intersect_world_sorts_all_hits(self, default_world):
        xs = default_world.intersect_world(Ray(Point(0, 0, -5), Vector(0, 0, 1)))
        assert [i.t for i in xs] == [4, 4.5, 5.5, 6]

    def test_shade_hit_from_outside(self, default_world):
        r = Ray(Point(0, 0, -5), Vector(0, 0, 1))
        shape = default_world.objects[0]
        state = Intersection(4, shape).prepare(r)
        assert default_world.shade_hit(state) == Color(0.38066, 0.47583, 0.2855)

    def test_shade_hit_from_inside(self, default_world):
        default_world.light_sources = [PointLight(Point(0, 0.25, 0), Color(1, 1, 1))]
        r = Ray(Point(0, 0, 0), Vector(0, 0, 1))
        shape = default_world.objects[1]
        state = Intersection(0.5, shape).prepare(r)
        assert default_world.shade_hit(state) == Color(0.90498, 0.90498, 0.90498)

    def test_shade_hit_sums_lights(self, default_world):
        r = Ray(Point(0, 0, -5), Vector(0, 0, 1))
        state = Intersection(4, default_world.objects[0]).prepare(r)
        single = default_world.shade_hit(state)
        default_world.push_light_source(PointLight(Point(-10, 10, -10), Color(1, 1, 1)))
        assert default_world.shade_hit(state) == single * 2

    def test_shade_hit_without_lights_is_black(self, default_world):
        default_world.light_sources = []
        r = Ray(Point(0, 0, -5), Vector(0, 0, 1))
        state = Intersection(4, default_world.objects[0]).prepare(r)
        assert default_world.shade_hit(state) == Color.black()

    def test_color_when_ray_misses(self, default_world):
        assert default_world.color_at(Ray(Point(0, 0, -5), Vector(0, 1, 0))) == Color(0, 0, 0)

    def test_color_when_ray_hits(self, default_world):
        c = default_world.color_at(Ray(Point(0, 0, -5), Vector(0, 0, 1)))
        assert c == Color(0.38066, 0.47583, 0.2855)

    def test_color_with_intersection_behind_ray(self, default_world):
        outer, inner = default_world.objects
        outer.material = outer.material.replace(ambient=1.0)
        inner.material = inner.material.replace(ambient=1.0)
        c = default_world.color_at(Ray(Point(0, 0, 0.75), Vector(0, 0, -1)))
        assert c == inner.material.color

    def test_color_in_empty_world_is_black(self):
        assert World().color_at(Ray(Point(0, 0, -5), Vector(0, 0, 1))) == Color.black()

    def test_object_behind_ray_is_not_seen(self):
        w = World()
        w.push_object(Object.sphere(translate(0, 0, -10)))
        w.push_light_source(PointLight(Point(-10, 10, -10), Color(1, 1, 1)))
        assert w.color_at(Ray(Point(0, 0, 0), Vector(0, 0, 1))) == Color.black()

    def test_light_on_the_hit_point_still_shades(self):
        w = World()
        w.push_object(Object.sphere())
        w.push_light_source(PointLight(Point(0, 0, -1), Color(1, 1, 1)))
        assert w.color_at(Ray(Point(0, 0, -5), Vector(0, 0, 1))) == Color(0.1, 0.1, 0.1)
