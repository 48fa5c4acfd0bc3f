# geometry/intersection.py
import math
from typing import Iterable, Iterator, List, Optional
from core.point import Point
from core.ray import Ray
from core.vector import Vector


def _sort_key(t: float):
    # NaN sorts before every number.
    return (0, 0.0) if math.isnan(t) else (1, t)


class Intersection:
    """
    A ray parameter t at which a ray meets an object. The object is only
    referenced; the World that owns it must outlive the intersection.
    """

    def __init__(self, t: float, obj):
        self.t = t
        self.object = obj

    def prepare(self, ray: Ray) -> "IntersectionState":
        return IntersectionState.from_hit(self, ray)

    def __lt__(self, other: "Intersection") -> bool:
        return _sort_key(self.t) < _sort_key(other.t)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Intersection):
            return NotImplemented
        # Identity check first: objects compare by value, which is costly.
        same_object = self.object is other.object or self.object == other.object
        return _sort_key(self.t) == _sort_key(other.t) and same_object

    __hash__ = None

    def __repr__(self) -> str:
        return f"Intersection(t={self.t}, object={self.object!r})"


class Intersections:
    """
    Every intersection of one ray with a scene. Collect first, then sort()
    and ask for the hit().
    """

    def __init__(self, intersections: Optional[Iterable[Intersection]] = None):
        self.intersections: List[Intersection] = list(intersections) if intersections else []

    @classmethod
    def from_list(cls, intersections: Iterable[Intersection]) -> "Intersections":
        return cls(intersections)

    def push(self, intersection: Intersection):
        self.intersections.append(intersection)

    def extend(self, intersections: Iterable[Intersection]):
        self.intersections.extend(intersections)

    def sort(self):
        self.intersections.sort(key=lambda i: _sort_key(i.t))

    def hit(self) -> Optional[Intersection]:
        """
        Returns the first intersection with t >= 0 in the current order, which
        is the closest visible one once the collection is sorted.
        """
        for i in self.intersections:
            if i.t >= 0:
                return i
        return None

    def __len__(self) -> int:
        return len(self.intersections)

    def __getitem__(self, index: int) -> Intersection:
        return self.intersections[index]

    def __iter__(self) -> Iterator[Intersection]:
        return iter(self.intersections)

    def __repr__(self) -> str:
        return f"Intersections({self.intersections!r})"


class IntersectionState:
    """
    Precomputed shading inputs for a hit: the world-space point, the eye
    vector and the normal, flipped when the ray starts inside the object.
    """

    def __init__(self, t: float, obj, point: Point, eyev: Vector, normalv: Vector, inside: bool = False):
        self.t = t
        self.object = obj
        self.point = point
        self.eyev = eyev
        self.normalv = normalv
        self.inside = inside

    @classmethod
    def from_hit(cls, intersection: Intersection, ray: Ray) -> "IntersectionState":
        point = ray.position(intersection.t)
        eyev = -ray.direction
        normalv = intersection.object.normal_at(point)
        inside = normalv.dot(eyev) < 0
        if inside:
            normalv = -normalv
        return cls(intersection.t, intersection.object, point, eyev, normalv, inside)
