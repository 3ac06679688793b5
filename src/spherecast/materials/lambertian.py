# materials/lambertian.py
from spherecast.core.utils import clamp_color
from spherecast.core.vector import Vector3
from spherecast.geometry.hittable import Hittable
from spherecast.geometry.sphere import Sphere

class Lambertian:
    """
    Diffuse shading from a single point-light proxy.

    The cosine term is the raw dot product of the light direction and the
    surface normal. It is not clamped to be non-negative, so surfaces facing
    away from the light darken the base color instead of going black.
    """

    def __init__(self, base_color: Vector3, highlight_color: Vector3):
        self.base_color = base_color
        self.highlight_color = highlight_color

    def intensity(self, point: Vector3, light: Sphere, surface: Hittable) -> float:
        light_dir = light.center - point
        n = surface.normal(point)
        return light_dir.normalize().dot(n.normalize())

    def shade(self, point: Vector3, light: Sphere, surface: Hittable) -> Vector3:
        """
        Returns the clamped color at a surface point.
        """
        dt = self.intensity(point, light, surface)
        color = (self.base_color + self.highlight_color * dt) * 0.5
        return clamp_color(color)
