import unittest
import numpy as np
from numpy.linalg import LinAlgError
from vector import Vector
from transformation import Transformation


class TestVector(unittest.TestCase):

    def test_construction(self):
        v = Vector(1.0, 2.2, 3.0)
        self.assertEqual(v, Vector(1.0, 2.2, 3.0))
        self.assertNotEqual(v, Vector(2.0, 0.0, 3.2))
        self.assertEqual(v.w, 1.0)
        # directions only compare equal to directions
        self.assertEqual(Vector.direction(4.0, -4.0, 3.0).w, 0.0)
        self.assertNotEqual(Vector.direction(4.0, -4.0, 3.0), Vector(4.0, -4.0, 3.0))
        self.assertEqual(Vector(4.0, -4.0, 3.0).as_direction(), Vector.direction(4.0, -4.0, 3.0))

    def test_operators(self):
        v = Vector(1.0, 2.0, 3.0)
        u = Vector(3.0, 2.0, 1.0)
        self.assertEqual(v + u, Vector(4.0, 4.0, 4.0))
        self.assertEqual(v - u, Vector(-2.0, 0.0, 2.0))
        self.assertEqual(v * 2.0, Vector(2.0, 4.0, 6.0))
        self.assertEqual(2.0 * v, Vector(2.0, 4.0, 6.0))
        self.assertEqual(np.float64(2.0) * v, Vector(2.0, 4.0, 6.0))
        self.assertEqual(Vector(4.0, -2.0, 6.0) / 2.0, Vector(2.0, -1.0, 3.0))
        self.assertEqual(-v, Vector(-1.0, -2.0, -3.0))

    def test_arithmetic_keeps_point_w(self):
        d = Vector.direction(1.0, 0.0, 0.0)
        self.assertEqual((d + d).w, 1.0)
        self.assertEqual((-d).w, 1.0)

    def test_norm(self):
        self.assertAlmostEqual(Vector(1.0, 0.0, 0.0).norm(), 1.0)
        self.assertAlmostEqual(Vector(0.0, 1.0, 0.0).norm(), 1.0)
        self.assertAlmostEqual(Vector(0.0, 0.0, 1.0).norm(), 1.0)
        self.assertAlmostEqual(Vector(1.0, 2.0, 3.0).norm(), np.sqrt(14.0))
        self.assertAlmostEqual(Vector(-1.0, -2.0, -3.0).norm(), np.sqrt(14.0))

    def test_normalize(self):
        self.assertEqual(Vector(4.0, 0.0, 0.0).normalize(), Vector(1.0, 0.0, 0.0))
        s = np.sqrt(14.0)
        self.assertEqual(Vector(1.0, 2.0, 3.0).normalize(), Vector(1.0 / s, 2.0 / s, 3.0 / s))
        for v in [Vector(1.0, 2.0, 3.0), Vector(-0.001, 5.0, 0.2), Vector(1e6, -3e5, 7.0)]:
            self.assertAlmostEqual(v.normalize().norm(), 1.0)

    def test_normalize_zero(self):
        with np.errstate(invalid='ignore', divide='ignore'):
            n = Vector(0.0, 0.0, 0.0).normalize()
        self.assertTrue(np.all(np.isnan(n.xyz)))

    def test_dot(self):
        self.assertAlmostEqual(Vector(1.0, 2.0, 3.0).dot(Vector(2.0, 3.0, 4.0)), 20.0)
        # w takes no part in the dot product
        self.assertAlmostEqual(Vector.direction(1.0, 2.0, 3.0).dot(Vector(2.0, 3.0, 4.0)), 20.0)

    def test_reflection(self):
        v = Vector(1.0, -1.0, 0.0)
        self.assertEqual(v.reflect(Vector(0.0, 1.0, 0.0)), Vector(1.0, 1.0, 0.0))
        h = np.sqrt(2.0) / 2.0
        self.assertEqual(Vector(0.0, -1.0, 0.0).reflect(Vector(h, h, 0.0)), Vector(1.0, 0.0, 0.0))


class TestTransformation(unittest.TestCase):

    def test_construction(self):
        m = Transformation()
        np.testing.assert_allclose(m.matrix, np.identity(4))
        np.testing.assert_allclose(m.inverse, np.identity(4))

    def test_scale(self):
        m = Transformation().scale(1.0, 2.0, 3.0)
        np.testing.assert_allclose(m.matrix, np.diag([1.0, 2.0, 3.0, 1.0]))
        np.testing.assert_allclose(m.inverse, np.diag([1.0, 0.5, 1.0 / 3.0, 1.0]))

    def test_scale_does_not_mutate(self):
        m = Transformation()
        m.scale(2.0, 2.0, 2.0)
        m.translate(1.0, 1.0, 1.0)
        np.testing.assert_allclose(m.matrix, np.identity(4))

    def test_translate(self):
        m = Transformation().translate(5.0, -3.0, 2.0)
        self.assertEqual(m.apply(Vector(-3.0, 4.0, 5.0)), Vector(2.0, 1.0, 7.0))
        self.assertEqual(m.apply_inverse(Vector(-3.0, 4.0, 5.0)), Vector(-8.0, 7.0, 3.0))
        # directions are not moved by a translation
        d = Vector.direction(-3.0, 4.0, 5.0)
        self.assertEqual(m.apply(d), d)

    def test_composition_order(self):
        # the most recently appended transform acts on the point first
        m = Transformation().translate(10.0, 0.0, 0.0).scale(2.0, 2.0, 2.0)
        self.assertEqual(m.apply(Vector(1.0, 1.0, 1.0)), Vector(12.0, 2.0, 2.0))
        self.assertEqual(m * Vector(1.0, 1.0, 1.0), Vector(12.0, 2.0, 2.0))

    def test_multiplication(self):
        m = Transformation()
        n = Transformation()
        np.testing.assert_allclose((m * n).matrix, np.identity(4))
        a = Transformation().scale(2.0, 3.0, 4.0)
        b = Transformation().translate(1.0, 2.0, 3.0)
        ab = a * b
        np.testing.assert_allclose(ab.matrix, a.matrix @ b.matrix)
        np.testing.assert_allclose(ab.inverse @ ab.matrix, np.identity(4), atol=1e-12)

    def test_shear_and_rotate_are_identity(self):
        m = Transformation().scale(2.0, 1.0, 1.0)
        np.testing.assert_allclose(m.shear(1.0, 2.0, 3.0).matrix, m.matrix)
        np.testing.assert_allclose(m.rotate(1.0, 2.0, 3.0).matrix, m.matrix)

    def test_singular(self):
        with self.assertRaises(LinAlgError):
            Transformation().scale(0.0, 1.0, 1.0)

    def test_normal_under_scale(self):
        # normals use the inverse transpose, so squashing y stretches the normal's y
        m = Transformation().scale(1.0, 0.5, 1.0)
        n = m.apply_normal(Vector(0.0, 1.0, -1.0))
        self.assertEqual(n, Vector.direction(0.0, 2.0, -1.0))
        # translation never reaches a normal
        m = Transformation().translate(3.0, 4.0, 5.0)
        self.assertEqual(m.apply_normal(Vector(0.0, 1.0, 0.0)), Vector.direction(0.0, 1.0, 0.0))


if __name__ == '__main__':
    unittest.main()
