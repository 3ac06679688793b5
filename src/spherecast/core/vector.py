# core/vector.py
import math

import numpy as np

class Vector3:
    """
    A simple 3D vector value type. Every operation returns a new vector.
    Division follows IEEE 754, so dividing by zero yields inf/nan instead of raising.
    """
    def __init__(self, x: float, y: float, z: float):
        self.x = x
        self.y = y
        self.z = z

    def add(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def sub(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def scale(self, k: float) -> "Vector3":
        return Vector3(self.x * k, self.y * k, self.z * k)

    def divide(self, k: float) -> "Vector3":
        if k != 0:
            return Vector3(self.x / k, self.y / k, self.z / k)
        # Python floats raise on zero division; numpy gives the IEEE result.
        with np.errstate(divide="ignore", invalid="ignore"):
            q = np.array([self.x, self.y, self.z], dtype=np.float64) / np.float64(k)
        return Vector3(float(q[0]), float(q[1]), float(q[2]))

    def __add__(self, other: "Vector3") -> "Vector3":
        return self.add(other)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return self.sub(other)

    def __mul__(self, k: float) -> "Vector3":
        return self.scale(k)

    def __rmul__(self, k: float) -> "Vector3":
        return self.scale(k)

    def __truediv__(self, k: float) -> "Vector3":
        return self.divide(k)

    def dot(self, other: "Vector3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize(self) -> "Vector3":
        # No zero guard: a zero vector normalizes to (nan, nan, nan).
        return self.divide(self.length())

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y) and math.isfinite(self.z)

    def to_tuple(self):
        return (self.x, self.y, self.z)

    def __repr__(self) -> str:
        return f"Vector3({self.x}, {self.y}, {self.z})"
