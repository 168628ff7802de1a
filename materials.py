from canvas import Colour

class Material:

    def __init__(self, colour=None, ambient=0.1, diffuse=0.9, specular=0.9, shininess=200.):
        """
        Create a new material with the given parameters.

        Parameters:
          colour : Colour -- base surface colour (defaults to white)
          ambient : float -- ambient coefficient
          diffuse : float -- diffuse coefficient
          specular : float -- specular coefficient
          shininess : float -- specular exponent, used as an integer power
        """
        self.colour = colour if colour is not None else Colour(1.0, 1.0, 1.0)
        self.ambient = ambient
        self.diffuse = diffuse
        self.specular = specular
        self.shininess = shininess
