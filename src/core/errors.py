# core/errors.py
class RaytracerError(Exception):
    """Base class for errors raised by a malformed scene graph."""


class SingularMatrixError(RaytracerError, ValueError):
    """A matrix that has to be inverted has a determinant of zero."""


class HomogeneousTagError(RaytracerError, AssertionError):
    """
    A point or vector came out of a matrix product with the wrong w component.
    Points must keep w == 1 and vectors w == 0; anything else means the
    transform was not affine.
    """


class SceneAccessError(RaytracerError, TypeError):
    """Normal or material lookup on a Scene, which is never a renderable surface."""
