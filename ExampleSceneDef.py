import ray
from canvas import Canvas, Colour
from geometry import Sphere
from materials import Material
from transformation import Transformation
from vector import Vector

DEFAULT_CANVAS_SIZE = 100


class ExampleSceneDef(object):
    def __init__(self, scene):
        self.scene = scene

    def render(self, output_path=None, canvas_size=None, verbose=False):
        """Render onto a square canvas.

        Returns the Canvas, or writes it as a PPM file when output_path is given.
        """
        if canvas_size is None:
            canvas_size = DEFAULT_CANVAS_SIZE
        canvas = ray.render_image(self.scene, Canvas(canvas_size, canvas_size), verbose=verbose)
        if output_path is None:
            return canvas
        canvas.save_ppm(output_path)


def SingleSphereExample():
    # white unit sphere, light up and to the left behind the viewer
    scene = ray.Scene(
        Sphere(Material()),
        ray.Light(Vector(-10.0, 10.0, -10.0), 1.0),
    )
    return ExampleSceneDef(scene=scene)


def SquashedSphereExample():
    orange = Material(Colour(1.0, 0.6, 0.2), diffuse=0.7, specular=0.3, shininess=50)
    transform = Transformation().translate(0.5, 0.0, 0.0).scale(1.0, 0.5, 1.0)
    scene = ray.Scene(
        Sphere(orange, transform),
        ray.Light(Vector(-10.0, 10.0, -10.0), 1.0),
    )
    return ExampleSceneDef(scene=scene)
