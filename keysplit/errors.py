"""
Sharing Errors
Exceptions raised by the field, polynomial and reconstruction layers.

Every error is a ValueError: they all mean the caller passed something
that cannot produce a meaningful sharing. Nothing in the package retries
or falls back to defaults. Fix the input and call again.
"""


class SharingError(ValueError):
    """Base class for every error raised by keysplit."""


class InvalidParameterError(SharingError):
    """A size, count or range parameter is out of bounds."""


class DegenerateInputError(SharingError):
    """Two identifiers coincide modulo the prime, so no inverse exists."""

    def __init__(self, message: str, identifiers: tuple[int, int] = None):
        super().__init__(message)
        self.identifiers = identifiers
