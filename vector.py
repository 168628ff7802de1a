import numpy as np
from utils import approx_equal, normalize, vec

"""
Homogeneous 3D vectors.  A Vector stores (x, y, z, w) where w is 1 for a point
and 0 for a direction.  Constructing a Vector from coordinates always gives
w = 1, and so does every arithmetic operation; only `direction`/`as_direction`
produce w = 0, which matters when a Vector goes through a Transformation.
"""


class Vector:

    def __init__(self, x, y, z, w=1.0):
        """Create a vector from its components.

        Parameters:
          x, y, z : float -- the cartesian components
          w : float -- the homogeneous coordinate (1 for points, 0 for directions)
        """
        self.v = vec([x, y, z, w])

    @classmethod
    def direction(cls, x, y, z):
        return cls(x, y, z, 0.0)

    @classmethod
    def _from_xyz(cls, xyz):
        return cls(xyz[0], xyz[1], xyz[2])

    @property
    def x(self):
        return self.v[0]

    @property
    def y(self):
        return self.v[1]

    @property
    def z(self):
        return self.v[2]

    @property
    def w(self):
        return self.v[3]

    @property
    def xyz(self):
        return self.v[:3]

    def as_direction(self):
        """Return a copy of this vector with w = 0."""
        return Vector.direction(self.x, self.y, self.z)

    def norm(self):
        """Euclidean length of the (x, y, z) part."""
        return np.linalg.norm(self.xyz)

    def dot(self, other):
        return np.dot(self.xyz, other.xyz)

    def normalize(self):
        """Return a unit-length copy.  A zero vector gives NaN components."""
        return Vector._from_xyz(normalize(self.xyz))

    def reflect(self, normal):
        """Reflect this vector about the given (unit) normal."""
        return self - normal * 2.0 * self.dot(normal)

    def __add__(self, other):
        return Vector._from_xyz(self.xyz + other.xyz)

    def __sub__(self, other):
        return Vector._from_xyz(self.xyz - other.xyz)

    def __mul__(self, s):
        return Vector._from_xyz(self.xyz * s)

    __rmul__ = __mul__

    def __truediv__(self, s):
        return Vector._from_xyz(self.xyz / s)

    def __neg__(self):
        return Vector._from_xyz(-self.xyz)

    def __eq__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return approx_equal(self.v, other.v)

    __hash__ = None

    # numpy scalars on the left defer to __rmul__ instead of broadcasting
    __array_ufunc__ = None

    def __repr__(self):
        return 'Vector(%r, %r, %r, w=%r)' % (float(self.x), float(self.y), float(self.z), float(self.w))
