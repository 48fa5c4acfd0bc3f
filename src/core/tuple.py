# core/tuple.py
from core.transforms import Transformable
from core.utils import approx_eq


class Tuple(Transformable):
    """
    Homogeneous 3D value: x, y, z plus a w that is fixed by the concrete type
    (1.0 for points, 0.0 for vectors). Subclasses only override W.
    """
    W = 0.0

    def __init__(self, x: float, y: float, z: float):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    @property
    def w(self) -> float:
        return self.W

    @classmethod
    def zero(cls):
        return cls(0.0, 0.0, 0.0)

    def transform(self, matrix):
        return matrix * self

    def to_list(self) -> list:
        return [self.x, self.y, self.z, self.w]

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __eq__(self, other) -> bool:
        if not isinstance(other, Tuple) or self.W != other.W:
            return NotImplemented
        return (approx_eq(self.x, other.x)
                and approx_eq(self.y, other.y)
                and approx_eq(self.z, other.z))

    __hash__ = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.x}, {self.y}, {self.z})"
