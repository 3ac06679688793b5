# geometry/sphere.py
import math
from typing import Tuple

from spherecast.core.ray import Ray
from spherecast.core.vector import Vector3
from spherecast.geometry.hittable import MISS, Hittable

class Sphere(Hittable):
    """
    Represents a sphere defined by its center and radius.
    The radius is not validated; zero or negative radii give degenerate results.
    """
    def __init__(self, center: Vector3, radius: float):
        self.center = center
        self.radius = radius

    def intersect(self, ray: Ray) -> Tuple[bool, float]:
        # Quadratic with a == 1, so the ray direction must be unit length.
        oc = ray.origin - self.center
        b = oc.dot(ray.direction) * 2.0
        c = oc.dot(oc) - self.radius * self.radius
        discriminant = b * b - c * 4.0

        if discriminant < 0:
            return MISS

        sqrt_disc = math.sqrt(discriminant)
        t1 = -b - sqrt_disc
        t2 = -b + sqrt_disc
        # Hits behind the origin (t < 0) are still reported.
        return True, min(t1, t2)

    def normal(self, point: Vector3) -> Vector3:
        """
        Outward normal at a point assumed to lie on the surface.
        """
        return (point - self.center) / self.radius

    def __repr__(self) -> str:
        return f"Sphere({self.center!r}, {self.radius})"
