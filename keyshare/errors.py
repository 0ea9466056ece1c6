class KeyshareError(Exception):
    """Base error for the record store."""

class InvalidInput(KeyshareError):
    """Raised when a required field is missing or empty."""

class Conflict(KeyshareError):
    """Raised when a record with the same id already exists."""

class NotFound(KeyshareError):
    pass

class Expired(KeyshareError):
    """Raised on a read past expiry; the record is already gone."""

class Forbidden(KeyshareError):
    """Raised when the delete token does not match."""
