import numpy as np
from utils import approx_equal, vec

PPM_MAGIC = 'P3'
PPM_MAX_VALUE = 255


def to_channel_ints(rgb):
    """Scale channels by 255 and truncate toward zero.  No clamping is applied."""
    return np.trunc(np.asarray(rgb, np.float64) * 255.0).astype(np.int64)


class Colour:

    def __init__(self, r, g, b):
        self.rgb = vec([r, g, b])

    @classmethod
    def black(cls):
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def _from_array(cls, rgb):
        return cls(rgb[0], rgb[1], rgb[2])

    @property
    def r(self):
        return self.rgb[0]

    @property
    def g(self):
        return self.rgb[1]

    @property
    def b(self):
        return self.rgb[2]

    def rgb_string(self):
        """Encode as the "<r> <g> <b>" line used in a PPM body."""
        return '%d %d %d' % tuple(to_channel_ints(self.rgb))

    def __add__(self, other):
        return Colour._from_array(self.rgb + other.rgb)

    def __sub__(self, other):
        return Colour._from_array(self.rgb - other.rgb)

    def __mul__(self, other):
        # hadamard product for colours, scaling for numbers
        if isinstance(other, Colour):
            return Colour._from_array(self.rgb * other.rgb)
        return Colour._from_array(self.rgb * other)

    __rmul__ = __mul__

    def __eq__(self, other):
        if not isinstance(other, Colour):
            return NotImplemented
        return approx_equal(self.rgb, other.rgb)

    __hash__ = None

    __array_ufunc__ = None

    def __repr__(self):
        return 'Colour(%r, %r, %r)' % (float(self.r), float(self.g), float(self.b))


class Canvas:

    def __init__(self, width, height):
        """Create a black canvas.

        Parameters:
          width, height : int -- the size of the image in pixels
        """
        if width <= 0 or height <= 0:
            raise ValueError('Canvas dimensions must be positive, got %dx%d' % (width, height))
        self.width = width
        self.height = height
        self.data = np.zeros((height, width, 3), np.float64)

    def _check_bounds(self, x, y):
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError('Pixel (%d, %d) outside %dx%d canvas' % (x, y, self.width, self.height))

    def write(self, x, y, colour):
        """Set the pixel in column x, row y."""
        self._check_bounds(x, y)
        self.data[y, x] = colour.rgb

    def pixel_at(self, x, y):
        self._check_bounds(x, y)
        return Colour._from_array(self.data[y, x])

    def ppm_header(self):
        return '%s\n%d %d\n%d\n' % (PPM_MAGIC, self.width, self.height, PPM_MAX_VALUE)

    def ppm_data(self):
        """One "<r> <g> <b>" line per pixel, rows top to bottom, columns left to right."""
        ints = to_channel_ints(self.data).reshape(-1, 3)
        return ''.join('%d %d %d\n' % (r, g, b) for r, g, b in ints)

    def to_ppm(self):
        return self.ppm_header() + self.ppm_data()

    def save_ppm(self, filename):
        with open(filename, 'w') as f:
            f.write(self.to_ppm())
