"""Exceptions raised by the URL Shortener services and record store.

Classes:
    URLShortenerError:
        Generic base class for all service errors.

    InvalidURLError:
        Raised when a submitted URL is missing or malformed.

    NotFoundError:
        Raised when no record matches a short identifier.

    StorageError:
        Raised when the record store is unreachable or an operation fails.

    DuplicateKeyError:
        Raised by the store when inserting a record whose short identifier
        already exists.

    StorageConflictError:
        Raised when no free short identifier could be allocated within the
        configured number of attempts.
"""


class URLShortenerError(Exception):
    """Generic base class for URL Shortener exceptions."""

    message = "Internal server error"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class InvalidURLError(URLShortenerError):
    """Exception raised when a submitted URL is missing or malformed."""

    message = "Invalid URL format"


class NotFoundError(URLShortenerError):
    """Exception raised when a short identifier is not in the store."""

    message = "URL not found"


class StorageError(URLShortenerError):
    """Exception raised when there is an error in the record store.

    e.g. connection issues, locked database, failed writes, etc.
    """

    message = "Storage operation failed"


class DuplicateKeyError(StorageError):
    """Exception raised when a short identifier is already taken."""

    message = "Short ID already exists"


class StorageConflictError(StorageError):
    """Exception raised when short identifier allocation keeps colliding."""

    message = "Failed to generate unique short ID"
