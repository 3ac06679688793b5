# materials/presets.py
from spherecast.core.vector import Vector3
from spherecast.materials.lambertian import Lambertian

class ColorPresets:
    """Fixed colors on the 0-255 channel scale."""

    @staticmethod
    def red() -> Vector3:
        return Vector3(255.0, 0.0, 0.0)

    @staticmethod
    def white() -> Vector3:
        return Vector3(255.0, 255.0, 255.0)

    @staticmethod
    def black() -> Vector3:
        return Vector3(0.0, 0.0, 0.0)

    @staticmethod
    def red_matte() -> Lambertian:
        return Lambertian(ColorPresets.red(), ColorPresets.white())
