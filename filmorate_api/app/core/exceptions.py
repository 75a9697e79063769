"""
Error kinds raised by the domain layer.

Every storage and service operation either returns a result or raises
exactly one of ``NotFoundError``, ``ConflictError`` or
``ValidationError`` and leaves all stores unchanged.  Translating the
kind into an HTTP status is the job of ``api.errors``.
"""


class FilmorateError(Exception):
    """Base class for all domain errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(FilmorateError):
    """A referenced user, film or like does not exist."""


class ConflictError(FilmorateError):
    """A friendship or like is recorded already."""


class ValidationError(FilmorateError):
    """An argument or entity field is malformed."""
