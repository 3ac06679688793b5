# renderer/raytracer.py
from typing import Iterator, TextIO, Tuple

import numpy as np

from spherecast.config import SceneConfig
from spherecast.core.ray import Ray
from spherecast.core.utils import to_pixel
from spherecast.core.vector import Vector3
from spherecast.materials.lambertian import Lambertian
from spherecast.materials.presets import ColorPresets
from spherecast.renderer.ppm import format_header, format_pixel

BACKENDS = ("python", "numba")

# Orthographic projection: every primary ray looks straight down +z.
VIEW_DIRECTION = Vector3(0.0, 0.0, 1.0)

PROGRESS_INTERVAL = 100

class Renderer:
    """
    Casts one ray per pixel against the scene's sphere and shades hits from
    the light proxy. There is no camera; pixel (row i, column j) casts from (j, i, 0).
    """

    def __init__(self, config: SceneConfig, backend: str = "python", verbose: bool = False):
        if backend not in BACKENDS:
            raise ValueError(f"Unknown backend '{backend}', expected one of {BACKENDS}")
        self.config = config
        self.backend = backend
        self.verbose = verbose
        self.material = Lambertian(config.base_color, config.highlight_color)

    def primary_ray(self, i: int, j: int) -> Ray:
        return Ray(Vector3(float(j), float(i), 0.0), VIEW_DIRECTION)

    def pixels(self) -> Iterator[Tuple[int, int, int]]:
        """
        Yields integer (r, g, b) triples row by row, left to right.
        On a miss the previous pixel color is repeated unless the config resets
        the background to black.
        """
        config = self.config
        sphere = config.sphere
        pixel_color = ColorPresets.black()

        for i in range(config.height):
            if self.verbose and i % PROGRESS_INTERVAL == 0:
                print(f"Row {i}/{config.height}")
            for j in range(config.width):
                ray = self.primary_ray(i, j)
                if config.reset_background:
                    pixel_color = ColorPresets.black()

                hit, t = sphere.intersect(ray)
                if hit:
                    pixel_color = self.material.shade(ray.at(t), config.light, sphere)

                yield to_pixel(pixel_color)

    def render_array(self) -> np.ndarray:
        """Renders into a (height, width, 3) uint8 array with the selected backend."""
        config = self.config
        image = np.zeros((config.height, config.width, 3), dtype=np.uint8)

        if self.backend == "numba":
            # Imported lazily so the pure Python backend does not pay the JIT start-up.
            from spherecast.renderer.kernels import render_kernel
            render_kernel(
                image,
                np.array(config.sphere.center.to_tuple(), dtype=np.float64),
                float(config.sphere.radius),
                np.array(config.light.center.to_tuple(), dtype=np.float64),
                np.array(config.base_color.to_tuple(), dtype=np.float64),
                np.array(config.highlight_color.to_tuple(), dtype=np.float64),
                config.reset_background,
            )
            return image

        flat = image.reshape(-1, 3)
        for index, pixel in enumerate(self.pixels()):
            flat[index] = pixel
        return image

    def render(self, stream: TextIO):
        """
        Writes the PPM header followed by one pixel per line to an open text stream.
        """
        config = self.config
        stream.write(format_header(config.width, config.height))
        if self.backend == "python":
            for r, g, b in self.pixels():
                stream.write(format_pixel(r, g, b))
            return

        for row in self.render_array():
            stream.write("".join(format_pixel(int(r), int(g), int(b)) for r, g, b in row))

    def render_to_file(self, path: str):
        """
        Renders the whole image into path, replacing any existing file.
        The file stays open for the full render; I/O errors propagate.
        """
        with open(path, "w", newline="\n") as f:
            self.render(f)
