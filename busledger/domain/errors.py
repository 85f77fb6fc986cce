"""Domain errors raised by the aggregation engine."""


class LedgerError(Exception):
    """Base class for report generation failures."""


class DataAccessError(LedgerError):
    """Raised when a repository read fails."""


class MalformedRecordError(LedgerError, ValueError):
    """Raised when a stored value cannot be parsed into its field type.

    Attributes:
        field: Name of the offending record field.
        value: Raw value read from storage.
    """

    def __init__(self, field: str, value, reason: str | None = None) -> None:
        self.field = field
        self.value = value
        message = f"Malformed value for {field}: {value!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class InvalidRangeError(LedgerError, ValueError):
    """Raised when a report request carries an unusable period."""


__all__ = [
    "LedgerError",
    "DataAccessError",
    "MalformedRecordError",
    "InvalidRangeError",
]
