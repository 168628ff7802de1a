import os
import shutil
import tempfile
import unittest
import numpy as np
from canvas import Canvas, Colour
from utils import load_image


class TestColour(unittest.TestCase):

    def test_operators(self):
        self.assertEqual(Colour(0.9, 0.6, 0.75) + Colour(0.7, 0.1, 0.25), Colour(1.6, 0.7, 1.0))
        self.assertEqual(Colour(0.9, 0.6, 0.75) - Colour(0.7, 0.1, 0.25), Colour(0.2, 0.5, 0.5))
        self.assertEqual(Colour(0.2, 0.3, 0.4) * 2.0, Colour(0.4, 0.6, 0.8))
        self.assertEqual(2.0 * Colour(0.2, 0.3, 0.4), Colour(0.4, 0.6, 0.8))
        self.assertEqual(Colour(1.0, 0.2, 0.4) * Colour(0.9, 1.0, 0.1), Colour(0.9, 0.2, 0.04))
        self.assertNotEqual(Colour(1.0, 0.2, 0.4), Colour(1.0, 0.2, 0.41))

    def test_components(self):
        c = Colour(-0.5, 0.4, 1.7)
        self.assertEqual((c.r, c.g, c.b), (-0.5, 0.4, 1.7))

    def test_rgb_string(self):
        self.assertEqual(Colour(1.0, 0.0, 0.5).rgb_string(), "255 0 127")
        self.assertEqual(Colour(0.0, 0.0, 0.0).rgb_string(), "0 0 0")

    def test_rgb_string_unclamped(self):
        # out of range channels are written as-is, truncated toward zero
        self.assertEqual(Colour(1.5, -0.5, 2.0).rgb_string(), "382 -127 510")


class TestCanvas(unittest.TestCase):

    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.tmpdir)

    def test_construction(self):
        canvas = Canvas(5, 5)
        np.testing.assert_array_equal(canvas.data, np.zeros((5, 5, 3)))
        canvas.write(2, 2, Colour(1.0, 0.0, 0.0))
        self.assertEqual(canvas.pixel_at(2, 2), Colour(1.0, 0.0, 0.0))

    def test_write_addresses_column_then_row(self):
        canvas = Canvas(4, 2)
        canvas.write(3, 1, Colour(0.2, 0.4, 0.6))
        self.assertEqual(canvas.pixel_at(3, 1), Colour(0.2, 0.4, 0.6))
        self.assertEqual(canvas.pixel_at(1, 1), Colour.black())
        np.testing.assert_allclose(canvas.data[1, 3], [0.2, 0.4, 0.6])

    def test_overwrite(self):
        canvas = Canvas(3, 3)
        canvas.write(0, 0, Colour(1.0, 1.0, 1.0))
        canvas.write(0, 0, Colour(0.0, 0.5, 0.0))
        self.assertEqual(canvas.pixel_at(0, 0), Colour(0.0, 0.5, 0.0))

    def test_out_of_range(self):
        canvas = Canvas(5, 3)
        for x, y in [(5, 0), (0, 3), (-1, 0), (0, -1)]:
            with self.assertRaises(IndexError):
                canvas.write(x, y, Colour(1.0, 1.0, 1.0))
        with self.assertRaises(IndexError):
            canvas.pixel_at(5, 3)

    def test_bad_dimensions(self):
        with self.assertRaises(ValueError):
            Canvas(0, 3)

    def test_output_ppm(self):
        canvas = Canvas(5, 3)
        canvas.write(2, 2, Colour(1.0, 0.0, 0.0))
        expected = "0 0 0\n" * 12 + "255 0 0\n" + "0 0 0\n" * 2
        self.assertEqual(canvas.ppm_header(), "P3\n5 3\n255\n")
        self.assertEqual(canvas.ppm_data(), expected)
        self.assertEqual(canvas.to_ppm(), canvas.ppm_header() + expected)

    def test_fresh_canvas_is_black(self):
        lines = Canvas(4, 2).ppm_data().splitlines()
        self.assertEqual(lines, ["0 0 0"] * 8)

    def test_single_pixel_offset(self):
        canvas = Canvas(7, 4)
        canvas.write(5, 2, Colour(0.5, 1.0, 0.25))
        lines = canvas.ppm_data().splitlines()
        self.assertEqual(len(lines), 28)
        offsets = [i for i, line in enumerate(lines) if line != "0 0 0"]
        self.assertEqual(offsets, [2 * 7 + 5])
        self.assertEqual(lines[19], Colour(0.5, 1.0, 0.25).rgb_string())

    def test_serialization_is_repeatable(self):
        canvas = Canvas(3, 3)
        canvas.write(1, 2, Colour(0.3, 0.6, 0.9))
        self.assertEqual(canvas.to_ppm(), canvas.to_ppm())

    def test_save_ppm(self):
        canvas = Canvas(3, 2)
        canvas.write(0, 0, Colour(1.0, 0.0, 0.0))
        canvas.write(2, 1, Colour(0.0, 0.0, 1.0))
        path = os.path.join(self.tmpdir, "out.ppm")
        canvas.save_ppm(path)
        with open(path) as f:
            self.assertEqual(f.read(), canvas.to_ppm())

        img = load_image(path)
        self.assertEqual(img.shape, (2, 3, 3))
        np.testing.assert_allclose(img[0, 0], [1.0, 0.0, 0.0])
        np.testing.assert_allclose(img[1, 2], [0.0, 0.0, 1.0])
        np.testing.assert_allclose(img[1, 0], [0.0, 0.0, 0.0])

    def test_load_over_bright_ppm(self):
        canvas = Canvas(2, 1)
        canvas.write(0, 0, Colour(1.5, 0.5, 0.5))
        path = os.path.join(self.tmpdir, "bright.ppm")
        canvas.save_ppm(path)
        with open(path) as f:
            self.assertEqual(f.read().splitlines()[3], "382 127 127")
        with self.assertRaises(ValueError):
            load_image(path)

    def test_save_ppm_bad_path(self):
        path = os.path.join(self.tmpdir, "missing", "out.ppm")
        with self.assertRaises(OSError):
            Canvas(2, 2).save_ppm(path)


if __name__ == '__main__':
    unittest.main()
