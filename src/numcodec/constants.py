"""Shared constants for numcodec.

Centralized configuration constants used across the runtime and parsing
packages. Placing constants here avoids circular imports and provides a
single source of truth.

Constants are grouped by domain:
- Locale defaults: Fallback locale and currency when nothing else is known
- Probing: Fixed value used to discover locale separators
- Formatting limits: Fraction digit bounds accepted by FormatOptions
- Masking: Privacy mode filler glyph
- Cache limits: Memory bounds for locale caches
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Locale defaults
    "DEFAULT_LOCALE",
    "DEFAULT_CURRENCY",
    # Probing
    "SEPARATOR_PROBE_VALUE",
    "GROUPING_WHITESPACE",
    "BIDI_MARKS",
    # Formatting limits
    "DEFAULT_FRACTION_DIGITS",
    "MAX_FRACTION_DIGITS",
    # Masking
    "MASK_GLYPH",
    "UNKNOWN_CURRENCY_SYMBOL",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
]

# ============================================================================
# LOCALE DEFAULTS
# ============================================================================

# Last-resort locale when neither the caller nor the OS provides one.
DEFAULT_LOCALE: str = "en_US"

# Currency assumed by DisplaySettings when none is configured.
DEFAULT_CURRENCY: str = "USD"

# ============================================================================
# PROBING
# ============================================================================

# Negative probe with a five-digit integer part and one fraction digit.
# Formatting it exposes the minus sign, the grouping separator (between
# "12" and "345") and the decimal separator (between "345" and "6").
SEPARATOR_PROBE_VALUE: float = -12345.6

# Whitespace used as grouping separators: regular space, no-break space,
# narrow no-break space (French and several CLDR locales).
GROUPING_WHITESPACE: frozenset[str] = frozenset({" ", "\u00a0", "\u202f"})

# Directional marks that CLDR places around signs in RTL locales.
BIDI_MARKS: str = "\u200e\u200f\u061c"

# ============================================================================
# FORMATTING LIMITS
# ============================================================================

# Fraction digits used when the caller supplies no FormatOptions.
DEFAULT_FRACTION_DIGITS: int = 2

# Upper bound for maximum_fraction_digits (matches Intl.NumberFormat).
MAX_FRACTION_DIGITS: int = 20

# ============================================================================
# MASKING
# ============================================================================

# Opaque filler glyph used by privacy mode (U+2022 BULLET).
MASK_GLYPH: str = "\u2022"

# Generic currency sign shown when a currency code is empty.
UNKNOWN_CURRENCY_SYMBOL: str = "\u00a4"

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached LocaleContext instances.
# 128 covers typical multi-region applications (major locales + variants).
MAX_LOCALE_CACHE_SIZE: int = 128
