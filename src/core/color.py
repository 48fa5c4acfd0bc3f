# core/color.py
from core.utils import approx_eq


class Color:
    """
    An RGB triple. Colors add, subtract, scale by a scalar and blend with
    each other through the Hadamard (component-wise) product.
    """

    def __init__(self, r: float, g: float, b: float):
        self.r = float(r)
        self.g = float(g)
        self.b = float(b)

    @classmethod
    def black(cls) -> "Color":
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def white(cls) -> "Color":
        return cls(1.0, 1.0, 1.0)

    @classmethod
    def red(cls) -> "Color":
        return cls(1.0, 0.0, 0.0)

    @classmethod
    def green(cls) -> "Color":
        return cls(0.0, 1.0, 0.0)

    @classmethod
    def blue(cls) -> "Color":
        return cls(0.0, 0.0, 1.0)

    def __add__(self, other: "Color") -> "Color":
        return Color(self.r + other.r, self.g + other.g, self.b + other.b)

    def __sub__(self, other: "Color") -> "Color":
        return Color(self.r - other.r, self.g - other.g, self.b - other.b)

    def __mul__(self, other):
        if isinstance(other, (int, float)):
            return Color(self.r * other, self.g * other, self.b * other)
        if isinstance(other, Color):
            return Color(self.r * other.r, self.g * other.g, self.b * other.b)
        return NotImplemented

    def __rmul__(self, other: float) -> "Color":
        return self.__mul__(other)

    def __iter__(self):
        yield self.r
        yield self.g
        yield self.b

    def __eq__(self, other) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return (approx_eq(self.r, other.r)
                and approx_eq(self.g, other.g)
                and approx_eq(self.b, other.b))

    __hash__ = None

    def __repr__(self) -> str:
        return f"Color({self.r}, {self.g}, {self.b})"
