"""Shared helpers for recovering numeric literals from cleaned text."""

import numbers
import re

from numcodec.constants import GROUPING_WHITESPACE
from numcodec.runtime.locale_context import to_decimal

__all__ = [
    "canonical_number_text",
    "keep_numeric_characters",
    "leading_float",
    "strip_grouping_whitespace",
]

# Everything that cannot be part of a plain decimal literal.
_NON_NUMERIC_RE = re.compile(r"[^0-9.+\-]")

# Longest leading float literal, no exponent (letters are stripped before).
_LEADING_FLOAT_RE = re.compile(r"[+\-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")


def strip_grouping_whitespace(text: str) -> str:
    """Remove spaces used as grouping separators (incl. U+00A0, U+202F)."""
    return "".join(ch for ch in text if not ch.isspace() and ch not in GROUPING_WHITESPACE)


def keep_numeric_characters(text: str) -> str:
    """Drop everything except ASCII digits, '.', '+' and '-'."""
    return _NON_NUMERIC_RE.sub("", text)


def leading_float(text: str) -> float | None:
    """Parse the longest leading float literal, or None if there is none.

    Lenient like a float-prefix parser: trailing garbage is ignored.

    Example:
        >>> leading_float("12.5.3")
        12.5
        >>> leading_float("+-1") is None
        True
    """
    match = _LEADING_FLOAT_RE.match(text)
    if match is None:
        return None
    return float(match.group())


def canonical_number_text(value: numbers.Real) -> str:
    """Canonical positional string for a number (never exponent notation).

    Examples:
        >>> canonical_number_text(1234.50)
        '1234.5'
        >>> canonical_number_text(1e21)
        '1000000000000000000000'
        >>> canonical_number_text(float("-inf"))
        '-Infinity'
    """
    number = to_decimal(value)
    if number.is_nan():
        return "NaN"
    if number.is_infinite():
        return "-Infinity" if number < 0 else "Infinity"
    text = format(number, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text == "-0" else text
