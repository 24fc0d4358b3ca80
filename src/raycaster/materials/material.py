# materials/material.py
from raycaster.core.color import BLACK, WHITE, Color
from raycaster.core.utils import equal
from raycaster.core.vector import Point3, Vector3
from raycaster.materials.light import PointLight
from raycaster.materials.pattern import Pattern, PatternError

class Material:
    """
    Phong surface description: a base color (or a pattern that replaces it)
    and the ambient, diffuse and specular reflectance terms.
    """
    def __init__(self, color: Color = WHITE, ambient: float = 0.1, diffuse: float = 0.9,
                 specular: float = 0.9, shininess: float = 200.0, pattern: Pattern = None):
        self.color = color
        self.ambient = ambient
        self.diffuse = diffuse
        self.specular = specular
        self.shininess = shininess
        self.pattern = pattern if pattern is not None else Pattern.none()

    def color_at(self, point: Point3, shape=None) -> Color:
        """
        Surface color at a world-space point. Patterns need the shape to map
        the point into pattern space.
        """
        if not self.pattern.is_set:
            return self.color
        if shape is None:
            raise PatternError("A patterned material needs the shape being shaded")
        return self.pattern.color_at_object(shape, point)

    def lighting(self, point: Point3, light: PointLight, eye: Vector3, normal: Vector3,
                 in_shadow: bool = False, shape=None) -> Color:
        """
        Evaluates the Phong model at a point. The result is not clamped.
        """
        effective_color = self.color_at(point, shape) * light.intensity
        ambient = effective_color * self.ambient
        if in_shadow:
            return ambient

        light_dir = (light.position - point).normalize()
        light_dot_normal = light_dir.dot(normal)
        if light_dot_normal < 0:
            # Light is behind the surface: no diffuse or specular term
            return ambient

        diffuse = effective_color * (self.diffuse * light_dot_normal)
        reflect_dir = (-light_dir).reflect(normal)
        reflect_dot_eye = reflect_dir.dot(eye)
        if reflect_dot_eye <= 0:
            specular = BLACK
        else:
            specular = light.intensity * (self.specular * reflect_dot_eye ** self.shininess)
        return ambient + diffuse + specular

    def __eq__(self, other) -> bool:
        if not isinstance(other, Material):
            return NotImplemented
        return (self.color == other.color
                and equal(self.ambient, other.ambient)
                and equal(self.diffuse, other.diffuse)
                and equal(self.specular, other.specular)
                and equal(self.shininess, other.shininess)
                and self.pattern == other.pattern)

    __hash__ = None

    def __repr__(self) -> str:
        return (f"Material(color={self.color!r}, ambient={self.ambient}, diffuse={self.diffuse}, "
                f"specular={self.specular}, shininess={self.shininess}, pattern={self.pattern!r})")
