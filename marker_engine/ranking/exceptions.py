class MarkerInstanceError(Exception):
    """Base exception for marker instance snapshot errors."""


class MarkerInstanceValidationError(MarkerInstanceError):
    """Raised when a record store row cannot be turned into a MarkerInstance."""
