# geometry/world.py
from typing import List
from core.color import Color
from core.point import Point
from core.ray import Ray
from core.transforms import scale
from geometry.intersection import Intersections, IntersectionState
from geometry.object import Object
from materials.light import PointLight, lighting
from materials.material import Material


class World:
    """
    The objects and lights of a scene. Populate it before rendering and do
    not mutate it while a render is running.
    """

    def __init__(self):
        self.objects: List[Object] = []
        self.light_sources: List[PointLight] = []

    @classmethod
    def default(cls) -> "World":
        """
        Two concentric spheres lit by one white light.
        """
        world = cls()
        world.push_light_source(PointLight(Point(-10, 10, -10), Color.white()))
        world.push_object(Object.sphere(material=Material(
            color=Color(0.8, 1.0, 0.6), diffuse=0.7, specular=0.2)))
        world.push_object(Object.sphere(transform=scale(0.5, 0.5, 0.5)))
        return world

    def push_object(self, obj: Object):
        self.objects.append(obj)

    def push_light_source(self, light: PointLight):
        self.light_sources.append(light)

    def intersect_world(self, ray: Ray) -> Intersections:
        intersections = Intersections()
        for obj in self.objects:
            intersections.extend(obj.intersect(ray))
        intersections.sort()
        return intersections

    def shade_hit(self, state: IntersectionState) -> Color:
        color = Color.black()
        for light in self.light_sources:
            color = color + lighting(state.object.material, light,
                                     state.point, state.eyev, state.normalv)
        return color

    def color_at(self, ray: Ray) -> Color:
        """
        Returns the color seen along the ray, black when it escapes the scene.
        """
        hit = self.intersect_world(ray).hit()
        if hit is None:
            return Color.black()
        return self.shade_hit(hit.prepare(ray))
