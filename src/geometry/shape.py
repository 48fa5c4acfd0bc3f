# geometry/shape.py
from typing import List
from core.point import Point
from core.ray import Ray
from core.vector import Vector


class Shape:
    """
    Abstract geometry expressed in its own local space. An Object owns the
    transform that places a shape in the world, so shapes carry no position
    or size of their own.
    """

    def local_intersect(self, ray: Ray) -> List[float]:
        """
        Returns the ray parameters t of every intersection with the local ray.
        """
        raise NotImplementedError("local_intersect() must be implemented by subclasses.")

    def local_normal_at(self, point: Point) -> Vector:
        """
        Returns the (possibly unnormalized) surface normal at a local point.
        """
        raise NotImplementedError("local_normal_at() must be implemented by subclasses.")

    def __eq__(self, other) -> bool:
        return type(self) is type(other)

    __hash__ = None
