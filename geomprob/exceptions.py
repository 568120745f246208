"""Exceptions raised by geomprob."""

__all__ = ["InvalidArgumentError"]


class InvalidArgumentError(ValueError):
    """Raised when an argument is outside the domain of the function."""

    pass
