"""Error taxonomy for the catalog data-access layer.

Every error carries the HTTP status the API boundary should answer with, so
routers never need to inspect messages to pick a response code.
"""


class CatalogError(Exception):
    """Base class for all catalog failures."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationFailure(CatalogError):
    """A required field is missing or an update carries no new data."""

    status_code = 400


class NotFoundError(CatalogError):
    """The addressed row does not exist."""

    status_code = 404


class ConflictError(CatalogError):
    """A uniqueness constraint rejected the write."""

    status_code = 409


class StorageError(CatalogError):
    """The backing store failed, or a row could not be scanned."""

    status_code = 500
