import io
import os
import shutil
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
import numpy as np
from ray import *
from canvas import Canvas, Colour
from geometry import Intersection, SceneObject, Sphere, hit
from materials import Material
from transformation import Transformation
from vector import Vector
from utils import load_image
import cli
from ExampleSceneDef import SingleSphereExample, SquashedSphereExample


class TestRay(unittest.TestCase):

    def test_construction(self):
        o = Vector(1.0, 2.0, 3.0)
        d = Vector(4.0, 5.0, 6.0)
        r = Ray(o, d)
        self.assertEqual(r.origin, o)
        self.assertEqual(r.direction, d)

    def test_position(self):
        r = Ray(Vector(2.0, 3.0, 4.0), Vector(1.0, 0.0, 0.0))
        self.assertEqual(r.position(0.0), Vector(2.0, 3.0, 4.0))
        self.assertEqual(r.position(1.0), Vector(3.0, 3.0, 4.0))
        self.assertEqual(r.position(-1.0), Vector(1.0, 3.0, 4.0))
        self.assertEqual(r.position(2.5), Vector(4.5, 3.0, 4.0))


class TestSphereIntersect(unittest.TestCase):

    def intersect(self, origin, direction=Vector(0.0, 0.0, 1.0), sphere=None):
        sphere = sphere if sphere is not None else Sphere()
        return sphere.intersect(Ray(origin, direction))

    def test_two_points(self):
        xs = self.intersect(Vector(0.0, 0.0, -5.0))
        self.assertEqual([i.t for i in xs], [4.0, 6.0])
        self.assertEqual(hit(xs).t, 4.0)

    def test_tangent(self):
        xs = self.intersect(Vector(0.0, 1.0, -5.0))
        self.assertEqual([i.t for i in xs], [5.0, 5.0])
        self.assertEqual(hit(xs).t, 5.0)

    def test_miss(self):
        xs = self.intersect(Vector(0.0, 2.0, -5.0))
        self.assertEqual(len(xs), 0)
        self.assertIsNone(hit(xs))

    def test_inside(self):
        xs = self.intersect(Vector(0.0, 0.0, 0.0))
        self.assertEqual([i.t for i in xs], [-1.0, 1.0])
        self.assertEqual(hit(xs).t, 1.0)

    def test_behind(self):
        xs = self.intersect(Vector(0.0, 0.0, 5.0))
        self.assertEqual([i.t for i in xs], [-6.0, -4.0])
        self.assertIsNone(hit(xs))

    def test_non_unit_direction(self):
        xs = self.intersect(Vector(0.0, 0.0, -5.0), Vector(0.0, 0.0, 2.0))
        self.assertEqual([i.t for i in xs], [2.0, 3.0])

    def test_intersections_reference_sphere(self):
        s = Sphere()
        xs = self.intersect(Vector(0.0, 0.0, -5.0), sphere=s)
        self.assertIs(xs[0].object, s)
        self.assertIs(xs[1].object, s)

    def test_scaled(self):
        s = Sphere(transform=Transformation().scale(2.0, 2.0, 2.0))
        xs = self.intersect(Vector(0.0, 0.0, -5.0), sphere=s)
        np.testing.assert_allclose([i.t for i in xs], [3.0, 7.0])

    def test_translated(self):
        s = Sphere(transform=Transformation().translate(5.0, 0.0, 0.0))
        xs = self.intersect(Vector(0.0, 0.0, -5.0), sphere=s)
        self.assertEqual(len(xs), 0)
        xs = self.intersect(Vector(5.0, 0.0, -5.0), sphere=s)
        np.testing.assert_allclose([i.t for i in xs], [4.0, 6.0])

    def test_base_object(self):
        with self.assertRaises(NotImplementedError):
            SceneObject().intersect(Ray(Vector(0.0, 0.0, 0.0), Vector(0.0, 0.0, 1.0)))
        with self.assertRaises(NotImplementedError):
            SceneObject().normal(Vector(0.0, 0.0, 0.0))


class TestHit(unittest.TestCase):

    def test_all_positive(self):
        s = Sphere()
        i1, i2 = Intersection(1.0, s), Intersection(2.0, s)
        self.assertIs(hit([i2, i1]), i1)

    def test_some_negative(self):
        s = Sphere()
        i1, i2 = Intersection(-1.0, s), Intersection(1.0, s)
        self.assertIs(hit([i2, i1]), i2)

    def test_all_negative(self):
        s = Sphere()
        self.assertIsNone(hit([Intersection(-2.0, s), Intersection(-1.0, s)]))
        self.assertIsNone(hit([]))

    def test_unsorted(self):
        s = Sphere()
        xs = [Intersection(t, s) for t in [5.0, 7.0, -3.0, 2.0]]
        self.assertIs(hit(xs), xs[3])

    def test_zero_counts(self):
        s = Sphere()
        xs = [Intersection(-1.0, s), Intersection(0.0, s)]
        self.assertIs(hit(xs), xs[1])


class TestSphereNormal(unittest.TestCase):

    def test_axes(self):
        s = Sphere()
        self.assertEqual(s.normal(Vector(1.0, 0.0, 0.0)), Vector(1.0, 0.0, 0.0))
        self.assertEqual(s.normal(Vector(0.0, 1.0, 0.0)), Vector(0.0, 1.0, 0.0))
        self.assertEqual(s.normal(Vector(0.0, 0.0, 1.0)), Vector(0.0, 0.0, 1.0))

    def test_nonaxial(self):
        s = Sphere()
        k = np.sqrt(3.0) / 3.0
        n = s.normal(Vector(k, k, k))
        self.assertEqual(n, Vector(k, k, k))
        self.assertEqual(n, n.normalize())

    def test_translated(self):
        s = Sphere(transform=Transformation().translate(0.0, 1.0, 0.0))
        n = s.normal(Vector(0.0, 1.70711, -0.70711))
        np.testing.assert_allclose(n.xyz, [0.0, 0.70711, -0.70711], atol=1e-5)

    def test_scaled(self):
        s = Sphere(transform=Transformation().scale(1.0, 0.5, 1.0))
        h = np.sqrt(2.0) / 2.0
        n = s.normal(Vector(0.0, h, -h))
        np.testing.assert_allclose(n.xyz, [0.0, 0.97014, -0.24254], atol=1e-5)


class TestMaterial(unittest.TestCase):

    def test_defaults(self):
        m = Material()
        self.assertEqual(m.colour, Colour(1.0, 1.0, 1.0))
        self.assertEqual((m.ambient, m.diffuse, m.specular, m.shininess), (0.1, 0.9, 0.9, 200.0))

    def test_sphere_default_material(self):
        s = Sphere()
        self.assertEqual(s.material.shininess, 200.0)
        np.testing.assert_allclose(s.transform.matrix, np.identity(4))


class TestLighting(unittest.TestCase):

    def setUp(self):
        self.m = Material()
        self.p = Vector(0.0, 0.0, 0.0)

    def test_eye_between_light_and_surface(self):
        eye = Vector(0.0, 0.0, -1.0)
        normal = Vector(0.0, 0.0, -1.0)
        light = Light(Vector(0.0, 0.0, -10.0), 1.0)
        self.assertEqual(lighting(self.m, self.p, light, eye, normal), Colour(1.9, 1.9, 1.9))

    def test_eye_offset_45(self):
        h = np.sqrt(2.0) / 2.0
        eye = Vector(0.0, h, -h)
        normal = Vector(0.0, 0.0, -1.0)
        light = Light(Vector(0.0, 0.0, -10.0), 1.0)
        # specular falls off to nothing at shininess 200
        self.assertEqual(lighting(self.m, self.p, light, eye, normal), Colour(1.0, 1.0, 1.0))

    def test_light_offset_45(self):
        eye = Vector(0.0, 0.0, -1.0)
        normal = Vector(0.0, 0.0, -1.0)
        light = Light(Vector(0.0, 10.0, -10.0), 1.0)
        result = lighting(self.m, self.p, light, eye, normal)
        np.testing.assert_allclose(result.rgb, [0.7364] * 3, atol=1e-4)

    def test_eye_in_reflection_path(self):
        h = np.sqrt(2.0) / 2.0
        eye = Vector(0.0, -h, -h)
        normal = Vector(0.0, 0.0, -1.0)
        light = Light(Vector(0.0, 10.0, -10.0), 1.0)
        result = lighting(self.m, self.p, light, eye, normal)
        np.testing.assert_allclose(result.rgb, [1.6364] * 3, atol=1e-4)

    def test_light_behind_surface(self):
        eye = Vector(0.0, 0.0, -1.0)
        normal = Vector(0.0, 0.0, -1.0)
        light = Light(Vector(0.0, 0.0, 10.0), 1.0)
        self.assertEqual(lighting(self.m, self.p, light, eye, normal), Colour(0.1, 0.1, 0.1))

    def test_intensity_and_colour(self):
        m = Material(Colour(1.0, 0.5, 0.0))
        eye = Vector(0.0, 0.0, -1.0)
        normal = Vector(0.0, 0.0, -1.0)
        light = Light(Vector(0.0, 0.0, -10.0), 0.5)
        # ambient + diffuse follow the colour, specular is grey
        expected = Colour(1.0, 0.5, 0.0) * 0.5 * 1.0 + Colour(0.45, 0.45, 0.45)
        self.assertEqual(lighting(m, self.p, light, eye, normal), expected)


class TestRender(unittest.TestCase):

    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.tmpdir)

    def test_wall_positions(self):
        wall = Wall()
        self.assertEqual(wall.pixel_position(0, 0, 100), Vector(3.5, 3.5, 10.0))
        self.assertEqual(wall.pixel_position(50, 50, 100), Vector(0.0, 0.0, 10.0))
        self.assertEqual(wall.pixel_position(100, 0, 100), Vector(-3.5, 3.5, 10.0))
        with self.assertRaises(ValueError):
            Wall(size=0.0)

    def test_raytrace_center(self):
        scene = Scene()
        colour = raytrace(scene, Vector(0.0, 0.0, 10.0))
        # ray from (0,0,-5) hits at (0,0,-1) with normal (0,0,-1)
        expected = lighting(scene.surface.material, Vector(0.0, 0.0, -1.0), scene.light,
                            Vector(0.0, 0.0, -1.0), Vector(0.0, 0.0, -1.0))
        self.assertEqual(colour, expected)
        self.assertGreater(colour.r, 0.1)

    def test_raytrace_miss(self):
        scene = Scene(bg_color=Colour(0.2, 0.3, 0.5))
        self.assertEqual(raytrace(scene, Vector(3.5, 3.5, 10.0)), Colour(0.2, 0.3, 0.5))

    def test_render_image(self):
        scene = Scene()
        canvas = render_image(scene, Canvas(20, 20), verbose=False)
        self.assertEqual(canvas.pixel_at(0, 0), Colour.black())
        self.assertEqual(canvas.pixel_at(19, 19), Colour.black())
        center = canvas.pixel_at(10, 10)
        self.assertGreater(center.r, 0.1)
        self.assertEqual(center, raytrace(scene, scene.wall.pixel_position(10, 10, 20)))
        # the sphere is lit from the upper left, and x runs right to left on the wall
        self.assertGreater(canvas.pixel_at(13, 7).r, canvas.pixel_at(7, 13).r)

    def test_render_progress(self):
        out = io.StringIO()
        with redirect_stdout(out):
            render_image(Scene(), Canvas(3, 2))
        self.assertEqual(out.getvalue().splitlines(), ["rendering row 1/2...", "rendering row 2/2..."])

    def test_squashed_sphere(self):
        flat = SquashedSphereExample().render(canvas_size=20)
        round_ = SingleSphereExample().render(canvas_size=20)
        # squashed vertically: the top middle pixel of the round sphere is lost
        self.assertNotEqual(round_.pixel_at(10, 5), Colour.black())
        self.assertEqual(flat.pixel_at(10, 5), Colour.black())
        # while the center stays lit in both
        self.assertGreater(round_.pixel_at(10, 10).r, 0.0)
        self.assertGreater(flat.pixel_at(10, 10).r, 0.0)

    def test_lit_render_is_not_loadable(self):
        # the specular highlight overflows 255 and the file is written unclamped
        path = os.path.join(self.tmpdir, "bright.ppm")
        cli.render(40, path, verbose=False)
        with open(path) as f:
            values = [int(s) for s in f.read().split()[4:]]
        self.assertGreater(max(values), 255)
        with self.assertRaises(ValueError):
            load_image(path)

    def test_cli_render(self):
        path = os.path.join(self.tmpdir, "sphere.ppm")
        cli.render(10, path, verbose=False)
        with open(path) as f:
            text = f.read()
        lines = text.splitlines()
        self.assertEqual(lines[:3], ["P3", "10 10", "255"])
        self.assertEqual(len(lines), 3 + 100)
        body = lines[3:]
        self.assertEqual(body[0], "0 0 0")
        r, g, b = [int(s) for s in body[5 * 10 + 5].split()]
        self.assertGreater(r, 0)
        self.assertEqual(r, g)
        self.assertEqual(g, b)

    def test_cli_main(self):
        path = os.path.join(self.tmpdir, "main.ppm")
        cli.main(["-f", path, "--size", "4", "--quiet"])
        self.assertTrue(os.path.exists(path))
        with open(path) as f:
            self.assertEqual(f.readline(), "P3\n")

    def test_cli_rejects_bad_size(self):
        with redirect_stderr(io.StringIO()), self.assertRaises(SystemExit):
            cli.build_parser().parse_args(["-f", "x.ppm", "-s", "0"])


if __name__ == '__main__':
    unittest.main()
