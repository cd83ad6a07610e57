"""Exception types raised by the geometry core."""


class RaytracerError(Exception):
    """Base class for all errors raised by the ray tracer."""


class SingularMatrix(RaytracerError, ValueError):
    """Raised when inverting a matrix whose determinant is (numerically) zero."""


class DegenerateGeometry(RaytracerError, ValueError):
    """Raised for geometry the core cannot work with.

    Examples are normalizing a zero-length vector or an intersection routine
    producing a non-finite ray parameter.
    """
