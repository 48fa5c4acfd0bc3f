# core/vector.py
import math
from core.tuple import Tuple


class DegenerateVectorError(ValueError):
    """Raised when normalizing a vector of zero magnitude."""


class Vector(Tuple):
    """
    A free direction / displacement (w = 0). Supports arithmetic, dot and
    cross products, and normalization.
    """
    W = 0.0

    def __add__(self, other):
        if isinstance(other, Vector):
            return Vector(self.x + other.x, self.y + other.y, self.z + other.z)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Vector):
            return Vector(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented

    def __mul__(self, t):
        if isinstance(t, (int, float)):
            return Vector(self.x * t, self.y * t, self.z * t)
        return NotImplemented

    def __rmul__(self, t):
        return self.__mul__(t)

    def __truediv__(self, t):
        if isinstance(t, (int, float)):
            return Vector(self.x / t, self.y / t, self.z / t)
        return NotImplemented

    def __neg__(self) -> "Vector":
        return Vector(-self.x, -self.y, -self.z)

    def dot(self, other: "Vector") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector") -> "Vector":
        return Vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def magnitude(self) -> float:
        return math.sqrt(self.dot(self))

    def normalize(self) -> "Vector":
        m = self.magnitude()
        if m == 0:
            raise DegenerateVectorError(f"cannot normalize zero-length {self!r}")
        return Vector(self.x / m, self.y / m, self.z / m)
