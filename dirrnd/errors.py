"""Exceptions raised when drawing Dirichlet samples."""

__all__ = ["DirrndError", "InvalidArgument", "UpstreamGeneratorFailure"]


class DirrndError(Exception):
    """Base class for the errors raised by dirrnd."""


class InvalidArgument(DirrndError, ValueError):
    """The caller passed a value outside of the function's domain."""


class UpstreamGeneratorFailure(DirrndError, RuntimeError):
    """The Gamma variate generator returned values that cannot be normalized.

    This is raised when the generator's output has the wrong shape, contains
    non-finite values (overflow) or has a row that sums to zero (underflow).
    Exceptions raised by the generator itself are not wrapped.
    """
