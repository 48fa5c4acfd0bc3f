# core/ray.py
from core.point import Point
from core.transforms import Transformable
from core.vector import Vector


class Ray(Transformable):
    """
    Represents a ray in 3D space with an origin and direction.
    """

    def __init__(self, origin: Point, direction: Vector):
        self.origin = origin
        self.direction = direction

    def position(self, t: float) -> Point:
        """
        Returns the point along the ray at parameter t.
        """
        return self.origin + self.direction * t

    def transform(self, matrix) -> "Ray":
        # Point and Vector carry their own w, so the translation only moves the origin.
        return Ray(matrix * self.origin, matrix * self.direction)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Ray):
            return NotImplemented
        return self.origin == other.origin and self.direction == other.direction

    __hash__ = None

    def __repr__(self) -> str:
        return f"Ray({self.origin!r}, {self.direction!r})"
