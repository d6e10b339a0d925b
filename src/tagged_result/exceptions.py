from __future__ import annotations


class TaggedResultException(Exception):
    """Base class for exceptions raised by this package."""


class ResultError[E](TaggedResultException):
    """Raised when unwrap() is called on an error Result.

    ``message`` is the string form of the wrapped error and matches ``str()``.
    The original payload stays available as ``error`` so catch sites can
    inspect it.
    """

    name = "ResultError"

    def __init__(self, error: E) -> None:
        self.error = error
        self.message = str(error)
        super().__init__(self.message)


class ConfigError(TaggedResultException):
    """Raised when configuration is invalid."""
