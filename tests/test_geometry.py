import math
import unittest

from spherecast.core.ray import Ray
from spherecast.core.vector import Vector3
from spherecast.geometry import Hittable, Sphere

FORWARD = Vector3(0.0, 0.0, 1.0)


class SphereIntersectionTests(unittest.TestCase):
    def setUp(self) -> None:
        self.sphere = Sphere(Vector3(300.0, 300.0, 50.0), 50.0)

    def test_ray_through_center_hits_near_root(self) -> None:
        hit, t = self.sphere.intersect(Ray(Vector3(300.0, 300.0, 0.0), FORWARD))
        self.assertTrue(hit)
        self.assertEqual(t, 0.0)

    def test_ray_outside_radius_misses(self) -> None:
        hit, t = self.sphere.intersect(Ray(Vector3(0.0, 0.0, 0.0), FORWARD))
        self.assertFalse(hit)
        self.assertEqual(t, -1.0)

    def test_grazing_ray_hits_once(self) -> None:
        # Roots are not halved, so t is twice the distance along the ray.
        hit, t = self.sphere.intersect(Ray(Vector3(350.0, 300.0, 0.0), FORWARD))
        self.assertTrue(hit)
        self.assertEqual(t, 100.0)

    def test_hit_behind_origin_is_reported(self) -> None:
        hit, t = self.sphere.intersect(Ray(Vector3(300.0, 300.0, 200.0), FORWARD))
        self.assertTrue(hit)
        self.assertEqual(t, -400.0)

    def test_ray_at(self) -> None:
        ray = Ray(Vector3(1.0, 2.0, 0.0), FORWARD)
        self.assertEqual(ray.at(7.5).to_tuple(), (1.0, 2.0, 7.5))

    def test_normal_points_outward(self) -> None:
        n = self.sphere.normal(Vector3(300.0, 300.0, 0.0))
        self.assertEqual(n.to_tuple(), (0.0, 0.0, -1.0))
        n = self.sphere.normal(Vector3(350.0, 300.0, 50.0))
        self.assertEqual(n.to_tuple(), (1.0, 0.0, 0.0))

    def test_zero_radius_normal_is_not_finite(self) -> None:
        point = Sphere(Vector3(0.0, 0.0, 0.0), 0.0)
        n = point.normal(Vector3(1.0, 0.0, 0.0))
        self.assertEqual(n.x, math.inf)
        self.assertTrue(math.isnan(n.y))

    def test_hittable_is_abstract(self) -> None:
        with self.assertRaises(NotImplementedError):
            Hittable().intersect(Ray(Vector3(0.0, 0.0, 0.0), FORWARD))


if __name__ == "__main__":
    unittest.main()
