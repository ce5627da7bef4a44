"""Errors raised by the plane data store and its interactive layer."""

class PlaneDataError(Exception):
    """Base error for this package."""


class StoreOpenError(PlaneDataError):
    """Raised when the data file cannot be opened, read or written."""

    def __init__(self, path: str, mode: str, cause: Exception):
        verb = "reading" if mode == "r" else "writing"
        super().__init__(f"could not open {path!r} for {verb}: {cause}")
        self.path = path
        self.mode = mode
        self.cause = cause


class FieldError(PlaneDataError):
    """Raised when a field selector does not name a record field."""


class InputError(PlaneDataError):
    """Raised when interactive input cannot be parsed."""
