import numpy as np
from materials import Material
from transformation import Transformation
from vector import Vector

class Intersection:
    def __init__(self, t, object):
        """Create an Intersection with the given data.

        Parameters:
          t : float -- the t value of the intersection along the ray
          object : SceneObject -- the surface the ray intersected
        """
        self.t = t
        self.object = object

    def __repr__(self):
        return 'Intersection(t=%r, object=%r)' % (float(self.t), self.object)


def hit(intersections):
    """Return the intersection with the smallest non-negative t, or None.

    The list does not need to be sorted; ties go to the earliest entry.
    """
    nearest = None
    for i in intersections:
        if i.t >= 0 and (nearest is None or i.t < nearest.t):
            nearest = i
    return nearest


class SceneObject:
    """Common base for surfaces that can be hit by a ray."""

    def intersect(self, ray):
        """Return every Intersection of the ray with this surface, ascending by t."""
        raise NotImplementedError

    def normal(self, point):
        """Return the outward unit normal at a point on the surface."""
        raise NotImplementedError


class Sphere(SceneObject):

    def __init__(self, material=None, transform=None):
        """Create a unit sphere centered at the origin of its object space.

        Parameters:
          material : Material -- the material of the surface (defaults to Material())
          transform : Transformation -- object to world transform (defaults to identity)
        """
        self.material = material if material is not None else Material()
        self.transform = transform if transform is not None else Transformation()
        self.center = Vector(0.0, 0.0, 0.0)

    def intersect(self, ray):
        """Computes both intersections between a ray and this sphere.

        Parameters:
          ray : Ray -- the ray to intersect with the sphere
        Return:
          list of Intersection -- empty on a miss, otherwise two entries ascending by t
        """
        origin = self.transform.apply_inverse(ray.origin)
        direction = self.transform.apply_inverse(ray.direction.as_direction())

        sphere_vec = origin - self.center
        a = direction.dot(direction)
        b = 2 * direction.dot(sphere_vec)
        c = sphere_vec.dot(sphere_vec) - 1.0
        discriminant = b * b - 4 * a * c
        if discriminant < 0:
            return []
        disc_sqrt = np.sqrt(discriminant)
        t1 = (-b - disc_sqrt) / (2 * a)
        t2 = (-b + disc_sqrt) / (2 * a)
        if t2 < t1:
            t1, t2 = t2, t1
        return [Intersection(t1, self), Intersection(t2, self)]

    def normal(self, point):
        object_point = self.transform.apply_inverse(point)
        object_normal = object_point - self.center
        world_normal = self.transform.apply_normal(object_normal)
        return world_normal.normalize()

    def __repr__(self):
        return 'Sphere(transform=%r)' % (self.transform,)
