"""Catalog errors.

Services raise these; the application's exception handler turns every
``CatalogError`` into a ``{"state": false, "message": ...}`` response with
the error's ``status_code``.
"""


class CatalogError(Exception):
    """Base class for all catalog errors."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(CatalogError):
    """A required field is missing or a value is not acceptable."""

    status_code = 400


class DuplicateError(CatalogError):
    """A unique identifier is already taken."""

    status_code = 409


class NotFound(CatalogError):
    """No record exists for the requested identifier."""

    status_code = 404


class Unauthorized(CatalogError):
    """The bearer credential is missing, expired or invalid."""

    status_code = 401


class BelowFloor(CatalogError):
    """Selling would bring stock under the floor."""

    status_code = 400


class StorageError(CatalogError):
    """The persistence layer failed or timed out."""

    status_code = 500


class UserNotFound(CatalogError):
    status_code = 403


class WrongPassword(CatalogError):
    status_code = 404
