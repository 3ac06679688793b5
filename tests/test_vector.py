import math
import unittest

from spherecast.core.vector import Vector3


class VectorTests(unittest.TestCase):
    def assertVecEqual(self, vec: Vector3, expected) -> None:
        self.assertEqual(vec.to_tuple(), tuple(float(c) for c in expected))

    def test_arithmetic_named_methods(self) -> None:
        a = Vector3(1.0, 2.0, 3.0)
        b = Vector3(4.0, -5.0, 0.5)
        self.assertVecEqual(a.add(b), (5.0, -3.0, 3.5))
        self.assertVecEqual(a.sub(b), (-3.0, 7.0, 2.5))
        self.assertVecEqual(a.scale(2.0), (2.0, 4.0, 6.0))
        self.assertVecEqual(a.divide(2.0), (0.5, 1.0, 1.5))
        self.assertEqual(a.dot(b), 4.0 - 10.0 + 1.5)

    def test_operators_match_named_methods(self) -> None:
        a = Vector3(1.0, 2.0, 3.0)
        b = Vector3(4.0, -5.0, 0.5)
        self.assertVecEqual(a + b, a.add(b).to_tuple())
        self.assertVecEqual(a - b, a.sub(b).to_tuple())
        self.assertVecEqual(a * 3.0, a.scale(3.0).to_tuple())
        self.assertVecEqual(3.0 * a, a.scale(3.0).to_tuple())
        self.assertVecEqual(a / 4.0, a.divide(4.0).to_tuple())

    def test_operations_do_not_mutate(self) -> None:
        a = Vector3(1.0, 2.0, 3.0)
        a.add(Vector3(1.0, 1.0, 1.0))
        a.normalize()
        self.assertVecEqual(a, (1.0, 2.0, 3.0))

    def test_normalize_axis_vector(self) -> None:
        self.assertVecEqual(Vector3(0.0, 0.0, 5.0).normalize(), (0.0, 0.0, 1.0))

    def test_normalize_has_unit_length(self) -> None:
        self.assertAlmostEqual(Vector3(3.0, -4.0, 12.0).normalize().length(), 1.0)

    def test_normalize_zero_vector_is_nan(self) -> None:
        n = Vector3(0.0, 0.0, 0.0).normalize()
        self.assertFalse(n.is_finite())
        self.assertTrue(all(math.isnan(c) for c in n.to_tuple()))

    def test_divide_by_zero_follows_ieee(self) -> None:
        q = Vector3(1.0, -2.0, 0.0).divide(0.0)
        self.assertEqual(q.x, math.inf)
        self.assertEqual(q.y, -math.inf)
        self.assertTrue(math.isnan(q.z))


if __name__ == "__main__":
    unittest.main()
