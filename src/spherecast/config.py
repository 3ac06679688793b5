"""Scene configuration, built once at start-up and passed to the renderer."""

from __future__ import annotations

from dataclasses import dataclass, field

from spherecast.core.vector import Vector3
from spherecast.geometry.sphere import Sphere
from spherecast.materials.presets import ColorPresets

REFERENCE_WIDTH = 600
REFERENCE_HEIGHT = 600
DEFAULT_OUTPUT = "image.ppm"


@dataclass(frozen=True)
class SceneConfig:
    """Immutable description of the one-sphere, one-light scene."""

    width: int
    height: int
    sphere: Sphere
    light: Sphere = field(default_factory=lambda: Sphere(Vector3(0.0, 0.0, 50.0), 1.0))
    base_color: Vector3 = field(default_factory=ColorPresets.red)
    highlight_color: Vector3 = field(default_factory=ColorPresets.white)
    reset_background: bool = False

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Image size must be positive, got {self.width}x{self.height}")

    @classmethod
    def centered(
        cls,
        width: int,
        height: int,
        radius: float = 50.0,
        depth: float = 50.0,
        reset_background: bool = False,
    ) -> "SceneConfig":
        """Scene with the sphere centred on the image plane at the given depth."""
        sphere = Sphere(Vector3(width * 0.5, height * 0.5, depth), radius)
        return cls(width, height, sphere, reset_background=reset_background)

    @classmethod
    def reference(cls, reset_background: bool = False) -> "SceneConfig":
        return cls.centered(REFERENCE_WIDTH, REFERENCE_HEIGHT, reset_background=reset_background)

    def describe(self) -> str:
        carry = "reset to black" if self.reset_background else "carry previous color"
        return (
            f"{self.width}x{self.height}, sphere at {self.sphere.center} r={self.sphere.radius}, "
            f"light at {self.light.center}, on miss: {carry}"
        )
