from canvas import Colour
from geometry import Sphere, hit
from vector import Vector

"""
Core implementation of the ray tracer.  Rays are cast from a fixed source point
through every pixel of a "wall" plane, shaded with the Phong model against a
single point light, and written into a Canvas.
"""

DEFAULT_SOURCE = Vector(0.0, 0.0, -5.0)
DEFAULT_LIGHT_POSITION = Vector(-10.0, 10.0, -10.0)
DEFAULT_WALL_Z = 10.0
DEFAULT_WALL_SIZE = 7.0


class Ray:

    def __init__(self, origin, direction):
        """Create a ray with the given origin and direction.

        Parameters:
          origin : Vector -- the start point of the ray
          direction : Vector -- the direction of the ray (not necessarily normalized)
        """
        self.origin = origin
        self.direction = direction

    def position(self, t):
        """The point at parameter t along the ray."""
        return self.origin + self.direction * t

    def __repr__(self):
        return 'Ray(%r, %r)' % (self.origin, self.direction)


class Light:

    def __init__(self, position, intensity=1.0):
        """Create a white point light at given position and with given scalar intensity"""
        self.position = position
        self.intensity = intensity


def lighting(material, point, light, eye, normal):
    """Compute the Phong shading of a surface point.

    Parameters:
      material : Material -- surface material at the point
      point : Vector -- the surface point being shaded
      light : Light -- the light source
      eye : Vector -- unit vector from the point toward the viewer
      normal : Vector -- unit surface normal at the point
    Return:
      Colour -- ambient + diffuse + specular, not clamped
    """
    effective = material.colour * light.intensity
    light_vec = (light.position - point).normalize()
    ambient = effective * material.ambient
    light_dot_normal = light_vec.dot(normal)

    diffuse = Colour.black()
    specular = Colour.black()
    if light_dot_normal >= 0:
        diffuse = effective * material.diffuse * light_dot_normal
        reflect_vec = (-light_vec).reflect(normal)
        reflect_dot_eye = reflect_vec.dot(eye) ** int(material.shininess)
        if reflect_dot_eye > 0:
            s = light.intensity * material.specular * reflect_dot_eye
            specular = Colour(s, s, s)

    return ambient + diffuse + specular


class Wall:

    def __init__(self, z=DEFAULT_WALL_Z, size=DEFAULT_WALL_SIZE):
        """Create the square image plane rays are cast through.

        Parameters:
          z : float -- the wall lies in the plane z = const
          size : float -- edge length of the wall in world units
        """
        if size <= 0:
            raise ValueError('Wall size must be positive, got %r' % (size,))
        self.z = z
        self.size = size

    def pixel_position(self, x, y, canvas_width):
        """World-space point on the wall for pixel column x, row y."""
        pixel_size = self.size / canvas_width
        half = self.size / 2.0
        return Vector(half - pixel_size * x, half - pixel_size * y, self.z)


class Scene:

    def __init__(self, surface=None, light=None, source=DEFAULT_SOURCE, wall=None,
                 bg_color=None):
        """Create a scene holding one surface lit by one point light.

        The scene is read-only while rendering; every pixel shares it.
        """
        self.surface = surface if surface is not None else Sphere()
        self.light = light if light is not None else Light(DEFAULT_LIGHT_POSITION, 1.0)
        self.source = source
        self.wall = wall if wall is not None else Wall()
        self.bg_color = bg_color if bg_color is not None else Colour.black()


def raytrace(scene, position):
    """Colour seen along the ray from the scene source through a wall position."""
    ray = Ray(scene.source, (position - scene.source).normalize())
    nearest = hit(scene.surface.intersect(ray))
    if nearest is None:
        return scene.bg_color

    surface = nearest.object
    point = ray.position(nearest.t)
    normal = surface.normal(point)
    eye = -ray.direction
    return lighting(surface.material, point, scene.light, eye, normal)


def render_image(scene, canvas, verbose=True):
    """
    Ray trace every pixel of the canvas in place.
    """
    for y in range(canvas.height):
        if verbose:
            print(f"rendering row {y+1}/{canvas.height}...")
        for x in range(canvas.width):
            position = scene.wall.pixel_position(x, y, canvas.width)
            canvas.write(x, y, raytrace(scene, position))
    return canvas
