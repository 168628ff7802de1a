import numpy as np
from vector import Vector


def scaling_matrix(x, y, z):
    return np.diag([x, y, z, 1.0]).astype(np.float64)

def translation_matrix(x, y, z):
    m = np.identity(4, np.float64)
    m[:3, 3] = [x, y, z]
    return m


class Transformation:

    def __init__(self, matrix=None):
        """Create an affine transformation.

        Parameters:
          matrix : (4,4) -- the homogeneous matrix (defaults to the identity)

        The inverse is computed eagerly; a singular matrix raises
        numpy.linalg.LinAlgError.
        """
        if matrix is None:
            matrix = np.identity(4)
        self.matrix = np.array(matrix, np.float64)
        self.inverse = np.linalg.inv(self.matrix)

    def scale(self, x, y, z):
        """Return a new transformation with a non-uniform scale appended."""
        return Transformation(self.matrix @ scaling_matrix(x, y, z))

    def translate(self, x, y, z):
        """Return a new transformation with a translation appended."""
        return Transformation(self.matrix @ translation_matrix(x, y, z))

    def shear(self, x, y, z):
        # not implemented: leaves the transformation unchanged
        return Transformation(self.matrix)

    def rotate(self, x, y, z):
        # not implemented: leaves the transformation unchanged
        return Transformation(self.matrix)

    def apply(self, vector):
        """Transform a homogeneous vector.  Points are translated, directions are not."""
        return Vector(*(self.matrix @ vector.v))

    def apply_inverse(self, vector):
        return Vector(*(self.inverse @ vector.v))

    def apply_normal(self, normal):
        """Map an object-space normal to world space (not renormalized)."""
        n = self.inverse.T @ normal.as_direction().v
        return Vector.direction(n[0], n[1], n[2])

    def __mul__(self, other):
        if isinstance(other, Transformation):
            return Transformation(self.matrix @ other.matrix)
        if isinstance(other, Vector):
            return self.apply(other)
        return NotImplemented

    def __repr__(self):
        return 'Transformation(%r)' % (self.matrix.tolist(),)
