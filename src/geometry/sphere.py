# geometry/sphere.py
import math
from typing import List
from core.point import Point
from core.ray import Ray
from core.vector import Vector
from geometry.shape import Shape


class Sphere(Shape):
    """
    Unit sphere centered at the local origin.
    """

    def __init__(self):
        self.center = Point(0.0, 0.0, 0.0)
        self.radius = 1.0

    def local_intersect(self, ray: Ray) -> List[float]:
        oc = ray.origin - self.center
        a = ray.direction.dot(ray.direction)
        if a == 0:
            return []
        b = 2.0 * ray.direction.dot(oc)
        c = oc.dot(oc) - self.radius * self.radius
        discriminant = b * b - 4.0 * a * c

        if discriminant < 0:
            return []

        sqrt_disc = math.sqrt(discriminant)
        # Both roots are kept, including negative ones behind the origin.
        t1 = (-b - sqrt_disc) / (2.0 * a)
        t2 = (-b + sqrt_disc) / (2.0 * a)
        return [t1, t2]

    def local_normal_at(self, point: Point) -> Vector:
        return point - self.center

    def __repr__(self) -> str:
        return "Sphere()"
