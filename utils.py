import numpy as np
from PIL import Image

# tolerances used for approximate equality of vectors and colours
REL_TOLERANCE = 1e-9
ABS_TOLERANCE = 1e-12


def vec(list):
    """Handy shorthand to make a double-precision float array."""
    return np.array(list, dtype=np.float64)

def normalize(v):
    """Return a unit vector in the direction of the vector v."""
    return v / np.linalg.norm(v)

def approx_equal(a, b):
    """True if every component of a and b agrees within a relative tolerance."""
    return bool(np.allclose(a, b, rtol=REL_TOLERANCE, atol=ABS_TOLERANCE))


def load_image(filename):
    """Read an image file (PNG, PPM, ...) into a float array.

    Returns an array of shape (height, width, 3) with channels scaled to [0, 1].
    Channels must lie within the file's max value: a PPM written from an
    over-bright (unclamped) canvas is rejected by Pillow with a ValueError.
    """
    with Image.open(filename) as pil_img:
        img = np.array(pil_img.convert('RGB'), dtype=np.float32) / 255.0
    return img
