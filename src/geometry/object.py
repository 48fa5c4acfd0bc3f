# geometry/object.py
import logging
from typing import Optional
from core.matrix import MATRIX_SIZE, Matrix
from core.point import Point
from core.ray import Ray
from core.vector import Vector
from geometry.intersection import Intersection, Intersections
from geometry.shape import Shape
from geometry.sphere import Sphere
from materials.material import Material

logger = logging.getLogger(__name__)


class Object:
    """
    A shape placed in the world by a transform, with a material.

    The inverse of the transform and its transpose are cached whenever the
    transform is assigned, so intersecting and shading never invert a matrix.
    """

    def __init__(self, shape: Shape, transform: Optional[Matrix] = None,
                 material: Optional[Material] = None):
        self.shape = shape
        self.material = material if material is not None else Material()
        self.transform = transform if transform is not None else Matrix.identity()

    @classmethod
    def sphere(cls, transform: Optional[Matrix] = None,
               material: Optional[Material] = None) -> "Object":
        return cls(Sphere(), transform, material)

    @property
    def transform(self) -> Matrix:
        return self._transform

    @transform.setter
    def transform(self, matrix: Matrix):
        if matrix.size != MATRIX_SIZE:
            raise ValueError(f"object transform must be {MATRIX_SIZE}x{MATRIX_SIZE}, got {matrix.size}x{matrix.size}")
        inverse = matrix.invert()
        if inverse is None:
            logger.warning("Transform %r is not invertible; using identity for %r", matrix, self.shape)
            inverse = Matrix.identity()
        self._transform = matrix
        self._inverse = inverse
        self._inverse_transpose = inverse.transpose()

    @property
    def inverse(self) -> Matrix:
        return self._inverse

    @property
    def inverse_transpose(self) -> Matrix:
        return self._inverse_transpose

    def with_transform(self, matrix: Matrix) -> "Object":
        self.transform = matrix
        return self

    def with_material(self, material: Material) -> "Object":
        self.material = material
        return self

    def intersect(self, ray: Ray) -> Intersections:
        local_ray = ray.transform(self._inverse)
        return Intersections(Intersection(t, self) for t in self.shape.local_intersect(local_ray))

    def normal_at(self, point: Point) -> Vector:
        local_point = self._inverse * point
        local_normal = self.shape.local_normal_at(local_point)
        world_normal = self._inverse_transpose * local_normal
        # Rebuilding as a Vector drops any w the transpose picked up.
        return Vector(world_normal.x, world_normal.y, world_normal.z).normalize()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Object):
            return NotImplemented
        return (self.shape == other.shape
                and self.transform == other.transform
                and self.material == other.material)

    __hash__ = None

    def __repr__(self) -> str:
        return f"Object({self.shape!r}, transform={self.transform!r}, material={self.material!r})"
