# geometry/hittable.py
from typing import Tuple

from spherecast.core.ray import Ray
from spherecast.core.vector import Vector3

MISS = (False, -1.0)

class Hittable:
    """
    Abstract class for objects that can be hit by a ray.
    """
    def intersect(self, ray: Ray) -> Tuple[bool, float]:
        """
        Returns (hit, t). A miss is reported as (False, -1.0).
        """
        raise NotImplementedError("intersect() must be implemented by subclasses.")

    def normal(self, point: Vector3) -> Vector3:
        raise NotImplementedError("normal() must be implemented by subclasses.")
