class RegistryError(Exception):
    """Base exception for marker type catalog errors."""


class DuplicateMarkerTypeError(RegistryError):
    """Raised when two catalog entries share a type identifier."""


class InvalidPositionError(RegistryError):
    """Raised when a catalog coordinate lies outside the 0-100 diagram box."""


class InvalidKeywordError(RegistryError):
    """Raised when a catalog entry has no keywords or a non-normalized one."""


class InvalidMarkerTypeError(RegistryError):
    """Raised when a catalog entry has an unknown category, view or badge style."""
