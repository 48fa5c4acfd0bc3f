# materials/light.py
from core.color import Color
from core.point import Point
from core.utils import reflect
from core.vector import Vector
from materials.material import Material


class PointLight:
    """
    A point source with no size and no attenuation.
    """

    def __init__(self, position: Point, intensity: Color):
        self.position = position
        self.intensity = intensity

    def __eq__(self, other) -> bool:
        if not isinstance(other, PointLight):
            return NotImplemented
        return self.position == other.position and self.intensity == other.intensity

    __hash__ = None

    def __repr__(self) -> str:
        return f"PointLight({self.position!r}, {self.intensity!r})"


def lighting(material: Material, light: PointLight, point: Point,
             eyev: Vector, normalv: Vector) -> Color:
    """
    Phong reflection of a single light at a surface point.

    Parameters:
        material: surface material at the point
        light: the light source
        point: world-space point being shaded
        eyev: unit vector from the point towards the eye
        normalv: unit surface normal at the point

    Returns the sum of the ambient, diffuse and specular contributions. A
    light placed exactly on the point contributes only its ambient term.
    """
    effective_color = material.color * light.intensity
    ambient = effective_color * material.ambient

    to_light = light.position - point
    if to_light.magnitude() == 0:
        # Light sits on the point; no direction to light it from.
        return ambient

    lightv = to_light.normalize()
    light_dot_normal = lightv.dot(normalv)

    if light_dot_normal < 0:
        # Light is on the other side of the surface.
        diffuse = Color.black()
        specular = Color.black()
    else:
        diffuse = effective_color * material.diffuse * light_dot_normal
        reflectv = reflect(-lightv, normalv)
        reflect_dot_eye = reflectv.dot(eyev)
        if reflect_dot_eye <= 0:
            specular = Color.black()
        else:
            factor = reflect_dot_eye ** material.shininess
            specular = light.intensity * material.specular * factor

    return ambient + diffuse + specular
