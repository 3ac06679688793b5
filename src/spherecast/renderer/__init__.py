from spherecast.renderer.raytracer import BACKENDS, Renderer

__all__ = ["BACKENDS", "Renderer"]
