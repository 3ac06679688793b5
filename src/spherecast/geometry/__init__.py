from spherecast.geometry.hittable import Hittable
from spherecast.geometry.sphere import Sphere

__all__ = ["Hittable", "Sphere"]
