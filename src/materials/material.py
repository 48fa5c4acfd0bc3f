# materials/material.py
from typing import Optional
from core.color import Color
from core.utils import approx_eq


class Material:
    """
    Phong surface parameters. ambient, diffuse and specular are reflectance
    factors, shininess is the specular exponent.
    """

    def __init__(self, color: Optional[Color] = None, ambient: float = 0.1,
                 diffuse: float = 0.9, specular: float = 0.9, shininess: float = 200.0):
        for name, value in (("ambient", ambient), ("diffuse", diffuse),
                            ("specular", specular), ("shininess", shininess)):
            if value < 0:
                raise ValueError(f"material {name} must be non-negative, got {value}")
        self.color = color if color is not None else Color.white()
        self.ambient = float(ambient)
        self.diffuse = float(diffuse)
        self.specular = float(specular)
        self.shininess = float(shininess)

    def replace(self, **changes) -> "Material":
        """
        Returns a copy with the given fields changed.
        """
        params = dict(color=self.color, ambient=self.ambient, diffuse=self.diffuse,
                      specular=self.specular, shininess=self.shininess)
        params.update(changes)
        return Material(**params)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Material):
            return NotImplemented
        return (self.color == other.color
                and approx_eq(self.ambient, other.ambient)
                and approx_eq(self.diffuse, other.diffuse)
                and approx_eq(self.specular, other.specular)
                and approx_eq(self.shininess, other.shininess))

    __hash__ = None

    def __repr__(self) -> str:
        return (f"Material(color={self.color!r}, ambient={self.ambient}, diffuse={self.diffuse}, "
                f"specular={self.specular}, shininess={self.shininess})")
