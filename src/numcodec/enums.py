"""Enumerations for numcodec type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.
"""

from enum import StrEnum


class FormatStyle(StrEnum):
    """Rendering style requested through FormatOptions.

    StrEnum provides automatic string conversion: str(FormatStyle.CURRENCY) == "currency"
    """

    DECIMAL = "decimal"
    """Plain locale-aware number: 1,234.56"""

    CURRENCY = "currency"
    """Number with a currency symbol placed by the registry: $1,234.56"""


class SymbolPosition(StrEnum):
    """Where a currency symbol sits relative to the numeric body.

    The sign always precedes both the symbol and the number.
    """

    LEADING = "leading"
    """Symbol before the number: -$10.00"""

    TRAILING = "trailing"
    """Symbol after the number, separated by a space: -10,00 €"""


class FormatTier(StrEnum):
    """Fallback tier that produced a formatted string.

    Tiers are tried in declaration order; the first that succeeds wins.
    """

    REQUESTED_LOCALE = "requested_locale"
    """Formatted with the caller's locale."""

    DEFAULT_LOCALE = "default_locale"
    """Caller's locale failed; formatted with the runtime default locale."""

    FIXED_POINT = "fixed_point"
    """No locale could format; plain fixed-point rendering."""

    NO_VALUE = "no_value"
    """Input was absent or not a finite number; empty output."""


__all__ = [
    "FormatStyle",
    "FormatTier",
    "SymbolPosition",
]
