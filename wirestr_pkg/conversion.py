"""Text rendering of scalar values and parse-on-demand typed reads.

Symbol values are always stored as text. This module handles:
- Canonical text for bools, ints, floats and strings (``to_text``)
- Lenient typed reads back from text (``as_type``)
- Fixed-precision and exact hexadecimal float encodings
"""

from __future__ import annotations

import math
from typing import Any

from . import config
from .config import (
    FALSY_WORDS,
    FLOAT_PREFIX_REGEX,
    INT_PREFIX_REGEX,
    PRECISE_DIGITS,
)

CHAR = "char"


def to_text(value: Any) -> str:
    """Render a value the way it is stored in a symbol table.

    Args:
        value: bool, int, float, str or any object with a ``str()`` form

    Returns:
        Canonical text ("true"/"false" for bools, shortest round-trip repr for floats)
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, float):
        return repr(value)
    return str(value)


def is_truthy(text: str) -> bool:
    """Fallback truth test used when no number can be read from the text."""
    return bool(text) and text not in FALSY_WORDS


def _read_prefix(text: str, pattern) -> str | None:
    match = pattern.match(text.lstrip())
    return match.group(0) if match else None


def read_int(text: str) -> int | None:
    """Read the leading integer of ``text`` (e.g. "-456.123" -> -456), or None."""
    prefix = _read_prefix(text, INT_PREFIX_REGEX)
    return int(prefix) if prefix is not None else None


def read_float(text: str) -> float | None:
    """Read the leading decimal number of ``text``, or None."""
    prefix = _read_prefix(text, FLOAT_PREFIX_REGEX)
    return float(prefix) if prefix is not None else None


def as_type(text: str, target: Any) -> Any:
    """Convert stored text to ``target``.

    Reads never fail: when nothing numeric can be read, text that is non-empty
    and not "0"/"false" becomes the target's one/true value, anything else its
    zero/false value.

    Args:
        text: Stored symbol text
        target: ``bool``, ``int``, ``float``, ``str`` or ``"char"``

    Returns:
        Converted value

    Raises:
        TypeError: If ``target`` is not a supported conversion target

    Example:
        >>> as_type("-456.123", int)
        -456
        >>> as_type("true", float)
        1.0
        >>> as_type("100", bool)
        True
    """
    if target is str:
        return text
    if target is bool:
        number = read_int(text)
        if number in (0, 1):
            return bool(number)
        return is_truthy(text)
    if target is int:
        number = read_int(text)
        return number if number is not None else int(is_truthy(text))
    if target is float:
        number = read_float(text)
        return number if number is not None else float(is_truthy(text))
    if target == CHAR:
        return as_char(text)
    raise TypeError(f"Unsupported conversion target: {target!r}")


def as_char(text: str) -> str:
    """Read a single character: the text itself when it is one character long,
    otherwise the character whose code is the leading integer."""
    if len(text) == 1:
        return text
    number = read_int(text)
    if number is None:
        number = int(is_truthy(text))
    return chr(number % 256)


def precise(value: float) -> str:
    """Format a float in fixed notation with 16 fractional digits.

    Non-finite values are spelled "INF", "-INF" and "NaN".
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "INF" if value > 0 else "-INF"
    return f"{value:.{PRECISE_DIGITS}f}"


def to_hex(value: float) -> str:
    """Exact hexadecimal encoding of a float (e.g. 3.0 -> '0x1.8000000000000p+1')."""
    return float(value).hex()


def from_hex(text: str) -> float:
    """Decode text produced by ``to_hex``.

    Raises:
        ValueError: If the text is not a hexadecimal float
    """
    return float.fromhex(text.strip())


def format_number(val: Any, precision: int | None = None) -> str:
    """Format a numeric value with specified precision.

    Args:
        val: Numeric value to format
        precision: Number of significant digits (default: OUTPUT_PRECISION)

    Returns:
        Formatted string representation of the number
    """
    if precision is None:
        precision = config.OUTPUT_PRECISION
    try:
        fmt = "{:." + str(int(precision)) + "g}"
        return fmt.format(float(val))
    except (ValueError, TypeError, OverflowError):
        # Fallback for non-numeric or invalid values
        return str(val)
