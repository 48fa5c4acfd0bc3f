# materials/presets.py
from core.color import Color
from materials.material import Material


class ColorPresets:
    """Common color presets for materials."""

    # Warm colors
    RED = Color(0.9, 0.2, 0.2)
    ORANGE = Color(0.9, 0.6, 0.1)
    YELLOW = Color(0.9, 0.9, 0.1)

    # Cool colors
    BLUE = Color(0.2, 0.3, 0.9)
    GREEN = Color(0.2, 0.8, 0.2)
    PURPLE = Color(0.6, 0.2, 0.8)

    # Neutral colors
    WHITE = Color(0.9, 0.9, 0.9)
    GRAY = Color(0.5, 0.5, 0.5)


class MaterialPresets:
    """Phong parameter sets for typical surfaces."""

    @staticmethod
    def matte(color: Color) -> Material:
        """Mostly diffuse, with a dull highlight."""
        return Material(color, ambient=0.1, diffuse=0.9, specular=0.1, shininess=10.0)

    @staticmethod
    def plastic(color: Color) -> Material:
        return Material(color, ambient=0.1, diffuse=0.7, specular=0.3, shininess=200.0)

    @staticmethod
    def glossy(color: Color) -> Material:
        return Material(color, ambient=0.1, diffuse=0.6, specular=0.9, shininess=300.0)

    @staticmethod
    def metal(color: Color) -> Material:
        return Material(color, ambient=0.05, diffuse=0.4, specular=1.0, shininess=50.0)
