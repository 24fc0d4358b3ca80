# materials/presets.py
from raycaster.core.color import Color
from raycaster.core.transformations import scaling, translation
from raycaster.materials.material import Material
from raycaster.materials.pattern import Pattern

class MaterialPresets:
    """Predefined Phong materials."""

    @staticmethod
    def matte(color: Color) -> Material:
        return Material(color, diffuse=0.7, specular=0.0)

    @staticmethod
    def plastic(color: Color) -> Material:
        return Material(color, diffuse=0.7, specular=0.3, shininess=50.0)

    @staticmethod
    def glossy(color: Color) -> Material:
        return Material(color, diffuse=0.6, specular=0.9, shininess=300.0)

    @staticmethod
    def chalk(color: Color) -> Material:
        return Material(color, ambient=0.2, diffuse=0.8, specular=0.05, shininess=10.0)

class PatternPresets:
    """Predefined patterned materials."""

    @staticmethod
    def checkered_floor() -> Material:
        floor = Pattern.checker(Color(0.9, 0.9, 0.9), Color(0.25, 0.25, 0.3))
        return Material(specular=0.0, pattern=floor)

    @staticmethod
    def striped(color1: Color, color2: Color, width: float = 0.25) -> Material:
        stripes = Pattern.stripe(color1, color2, scaling(width, width, width))
        return Material(diffuse=0.7, specular=0.3, shininess=50.0, pattern=stripes)

    @staticmethod
    def rings(color1: Color, color2: Color) -> Material:
        rings = Pattern.ring(color1, color2, scaling(0.2, 0.2, 0.2))
        return Material(diffuse=0.8, specular=0.2, pattern=rings)

    @staticmethod
    def gradient(color1: Color, color2: Color) -> Material:
        # Map the unit sphere's local x range [-1, 1] onto one gradient run.
        blend = Pattern.gradient(color1, color2, translation(-1.0, 0.0, 0.0) * scaling(2.0, 2.0, 2.0))
        return Material(diffuse=0.8, specular=0.4, pattern=blend)
