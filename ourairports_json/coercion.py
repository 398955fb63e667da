"""
Field coercion functions.

Every column of an OurAirports table arrives as text. Each record field
declares one of the coercions below, and the mapper looks the function up
in COERCERS when decoding a row. Mandatory coercions raise ValueError on
bad input; optional ones return None instead.
"""

import math
import re
from enum import Enum
from typing import Callable, Dict, Optional, Tuple
import logging

logger = logging.getLogger(__name__)

# Accepted boolean tokens, compared lower-cased
BOOLEAN_TOKENS = {
    'yes': True,
    'no': False,
    '1': True,
    '0': False,
}

LIST_SEPARATOR = re.compile(r',\s*')

# Plain decimal notation only: no surrounding whitespace, no digit separators
INTEGER_PATTERN = re.compile(r'[+-]?[0-9]+')
FLOAT_PATTERN = re.compile(r'[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?')


class Coercion(Enum):
    """The closed set of conversions a record field can declare."""

    TEXT = "text"
    FLOAT = "float"
    OPTIONAL_INT = "optional_int"
    OPTIONAL_UNSIGNED = "optional_unsigned"
    OPTIONAL_FLOAT = "optional_float"
    BOOLEAN = "boolean"
    LIST = "list"

    @property
    def mandatory(self) -> bool:
        """Whether a failure of this coercion aborts the conversion."""
        return self in (Coercion.FLOAT, Coercion.BOOLEAN)

    def __call__(self, value: str):
        return COERCERS[self](value)


def to_text(value: str) -> str:
    """Return the column unchanged."""
    return value


def to_float(value: str) -> float:
    """
    Parse a mandatory decimal number.

    Raises:
        ValueError: If the value is not a finite decimal number
    """
    if not FLOAT_PATTERN.fullmatch(value):
        raise ValueError(f"not a decimal number: {value!r}")
    number = float(value)
    if not math.isfinite(number):
        raise ValueError(f"not a finite number: {value!r}")
    return number


def to_optional_int(value: str) -> Optional[int]:
    """
    Parse an integer, returning None for empty or malformed values.

    Args:
        value: Column text

    Returns:
        Integer value or None if conversion fails
    """
    if not INTEGER_PATTERN.fullmatch(value):
        return None
    return int(value)


def to_optional_unsigned(value: str) -> Optional[int]:
    """Like to_optional_int, but negative values are treated as missing."""
    number = to_optional_int(value)
    if number is None or number < 0:
        return None
    return number


def to_optional_float(value: str) -> Optional[float]:
    if not FLOAT_PATTERN.fullmatch(value):
        return None
    number = float(value)
    # NaN and infinity have no JSON representation
    if not math.isfinite(number):
        return None
    return number


def to_boolean(value: str) -> bool:
    """
    Interpret a yes/no (or 1/0) flag, case-insensitively.

    Raises:
        ValueError: If the token is not one of BOOLEAN_TOKENS
    """
    try:
        return BOOLEAN_TOKENS[value.lower()]
    except KeyError:
        raise ValueError(f"expected one of {', '.join(BOOLEAN_TOKENS)}") from None


def to_list(value: str) -> Tuple[str, ...]:
    """
    Split a comma separated keyword column.

    Elements are trimmed and empty elements dropped, so an empty column
    gives an empty tuple.
    """
    if value == '':
        return ()
    elements = (element.strip() for element in LIST_SEPARATOR.split(value))
    return tuple(element for element in elements if element)


COERCERS: Dict[Coercion, Callable[[str], object]] = {
    Coercion.TEXT: to_text,
    Coercion.FLOAT: to_float,
    Coercion.OPTIONAL_INT: to_optional_int,
    Coercion.OPTIONAL_UNSIGNED: to_optional_unsigned,
    Coercion.OPTIONAL_FLOAT: to_optional_float,
    Coercion.BOOLEAN: to_boolean,
    Coercion.LIST: to_list,
}
