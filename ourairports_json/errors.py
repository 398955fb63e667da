"""
Exceptions raised while converting OurAirports tables.

Every failure in the conversion pipeline aborts the whole run, so the
exceptions carry enough structured detail to produce a useful message at
the top level.
"""

from typing import Any, Optional


class ConversionError(Exception):
    """Base class for all conversion failures."""


class AcquisitionError(ConversionError):
    """Raised when a source table cannot be read or downloaded."""

    def __init__(self, source: str, reason: Any = None):
        """
        Initialize acquisition error.

        Args:
            source: Path or URL that failed
            reason: Optional underlying error
        """
        message = f"Could not read {source}"
        if reason is not None:
            message += f": {reason}"
        super().__init__(message)
        self.source = source
        self.reason = reason


class SchemaError(ConversionError):
    """Raised when a row does not have the column count of its record kind."""

    def __init__(self, kind: str, expected: int, actual: int, row_number: Optional[int] = None,
                 detail: Optional[str] = None):
        self.kind = kind
        self.expected = expected
        self.actual = actual
        self.row_number = row_number
        location = f" on row {row_number}" if row_number is not None else ""
        message = f"{kind} record{location} has {actual} columns, expected {expected}"
        if detail:
            message += f" ({detail})"
        super().__init__(message)


class CoercionError(ConversionError):
    """Raised when a mandatory field cannot be interpreted."""

    def __init__(self, field: str, value: Any, row_number: Optional[int] = None, reason: Any = None):
        self.field = field
        self.value = value
        self.row_number = row_number
        self.reason = reason
        location = f" on row {row_number}" if row_number is not None else ""
        message = f"Invalid value {value!r} for field '{field}'{location}"
        if reason is not None:
            message += f" ({reason})"
        super().__init__(message)


class SerializationError(ConversionError):
    """Raised when records cannot be encoded as JSON."""
