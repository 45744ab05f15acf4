"""Locale context for thread-safe, locale-scoped number formatting.

This module provides locale-aware formatting without global state mutation.
Uses Babel for CLDR-compliant number formatting.

Architecture:
    - LocaleContext: Immutable locale configuration container
    - Formatters use Babel (thread-safe, CLDR-based)
    - No dependency on Python's locale module (avoids global state)
    - Separators are discovered by formatting a probe value, never from
      hand-written per-locale tables

Design Principles:
    - Explicit over implicit (locale always visible)
    - Immutable by default (frozen dataclass)
    - Thread-safe (no shared mutable state besides the guarded cache)
    - Explicit error handling (InvalidLocaleError / FormattingError)
"""

import logging
import math
import numbers
import re
from collections import OrderedDict
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Context, Decimal, InvalidOperation, localcontext
from threading import RLock
from typing import ClassVar

from babel import Locale, UnknownLocaleError
from babel import numbers as babel_numbers

from numcodec.constants import BIDI_MARKS, MAX_LOCALE_CACHE_SIZE, SEPARATOR_PROBE_VALUE
from numcodec.diagnostics import ErrorTemplate, FormattingError, InvalidLocaleError
from numcodec.locale_utils import normalize_locale

__all__ = ["LocaleContext", "LocaleSymbols", "to_decimal", "to_float"]

logger = logging.getLogger(__name__)

# Integer part of a CLDR decimal pattern, e.g. "#,##0" or "#,##,##0" (en_IN).
_INTEGER_PATTERN_RE = re.compile(r"[#0,]+")

# Rendering of SEPARATOR_PROBE_VALUE: <minus>12<group>345<decimal>6
_PROBE_RE = re.compile(r"^(?P<minus>\D*)12(?P<group>\D*)345(?P<decimal>\D+)6\D*$")


@dataclass(frozen=True, slots=True)
class LocaleSymbols:
    """Separators and minus sign used by a locale.

    Attributes:
        group: Grouping separator (e.g. "," for en_US, "." for de_DE)
        decimal: Decimal separator (e.g. "." for en_US, "," for de_DE)
        minus: Minus sign prefix without directional marks (e.g. "-", "−")
    """

    group: str
    decimal: str
    minus: str = "-"


def to_decimal(value: numbers.Real) -> Decimal:
    """Convert a real number to Decimal without binary noise.

    Floats go through their shortest repr and integers stay exact. Fractions
    keep their whole integer part plus at least 28 more digits.
    Arbitrarily large integers and fractions never pass through float.

    Examples:
        >>> to_decimal(0.1)
        Decimal('0.1')
        >>> to_decimal(Fraction(1, 4))
        Decimal('0.25')
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(repr(value))
    if isinstance(value, numbers.Integral):
        return Decimal(int(value))
    if isinstance(value, numbers.Rational):
        numerator = Decimal(int(value.numerator))
        with localcontext(Context(prec=_working_precision(numerator, 28))):
            return numerator / Decimal(int(value.denominator))
    return Decimal(repr(to_float(value)))


def to_float(value: numbers.Real) -> float:
    """Convert a real number to float, saturating to +/-inf instead of raising.

    Example:
        >>> to_float(-10**400)
        -inf
    """
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def _working_precision(value: Decimal, digits: int) -> int:
    # Integer part plus the kept fraction digits, never below the default 28.
    return max(value.adjusted() + digits + 2, 28)


def _round_half_up(value: Decimal, digits: int) -> Decimal:
    """Round half away from zero at the given number of fraction digits."""
    if not value.is_finite():
        return value
    quantum = Decimal(1).scaleb(-digits)
    context = Context(prec=_working_precision(value, digits))
    return value.quantize(quantum, rounding=ROUND_HALF_UP, context=context)


@dataclass(frozen=True, slots=True)
class LocaleContext:
    """Immutable locale configuration for formatting operations.

    Provides thread-safe, locale-specific number formatting without mutating
    global state.

    Use LocaleContext.create_or_raise() to construct instances with proper
    validation and caching. Direct construction via __init__ bypasses both.

    Cache Management:
        LocaleContext uses an internal LRU cache for instance reuse:
        - LocaleContext.clear_cache(): Clear all cached instances
        - LocaleContext.cache_size(): Get current cache size
        - LocaleContext.cache_info(): Get detailed cache statistics

    Examples:
        >>> ctx = LocaleContext.create_or_raise('en-US')
        >>> ctx.format_number(1234.5, minimum_fraction_digits=0)
        '1,234.5'

        >>> ctx = LocaleContext.create_or_raise('de-DE')
        >>> ctx.symbols()
        LocaleSymbols(group='.', decimal=',', minus='-')

    Thread Safety:
        LocaleContext is immutable and thread-safe. Cache operations are
        protected by RLock.
    """

    _cache: ClassVar[OrderedDict[str, "LocaleContext"]] = OrderedDict()
    _cache_lock: ClassVar[RLock] = RLock()

    locale_code: str
    _babel_locale: Locale

    @classmethod
    def clear_cache(cls) -> None:
        """Clear the locale context cache (frees memory, resets tests)."""
        with cls._cache_lock:
            cls._cache.clear()

    @classmethod
    def cache_size(cls) -> int:
        """Get current number of cached LocaleContext instances."""
        with cls._cache_lock:
            return len(cls._cache)

    @classmethod
    def cache_info(cls) -> dict[str, int | tuple[str, ...]]:
        """Get detailed cache statistics.

        Returns:
            Dictionary with cache statistics:
            - size: Current number of cached instances
            - max_size: Maximum cache size
            - locales: Tuple of cached locale codes (LRU order)

        Example:
            >>> LocaleContext.clear_cache()
            >>> LocaleContext.create_or_raise('en-US')
            >>> LocaleContext.cache_info()
            {'size': 1, 'max_size': 128, 'locales': ('en_US',)}
        """
        with cls._cache_lock:
            return {
                "size": len(cls._cache),
                "max_size": MAX_LOCALE_CACHE_SIZE,
                "locales": tuple(cls._cache.keys()),
            }

    @classmethod
    def create_or_raise(cls, locale_code: str) -> "LocaleContext":
        """Create (or reuse) a LocaleContext, raising on invalid locales.

        Only successfully parsed locales are cached, so an invalid tag is
        re-validated (and re-reported) on every call.

        Args:
            locale_code: BCP 47 locale identifier (e.g., 'en-US', 'lv-LV', 'de-DE')

        Returns:
            LocaleContext instance with a valid Babel locale

        Raises:
            InvalidLocaleError: If locale code is unknown, malformed, or not a string
        """
        if not isinstance(locale_code, str) or not locale_code.strip():
            raise InvalidLocaleError(
                ErrorTemplate.locale_unknown(str(locale_code)), locale_code=str(locale_code)
            )

        cache_key = normalize_locale(locale_code)

        with cls._cache_lock:
            if cache_key in cls._cache:
                cls._cache.move_to_end(cache_key)
                return cls._cache[cache_key]

        # Locale.parse is thread-safe; no lock held while loading CLDR data
        try:
            babel_locale = Locale.parse(cache_key)
        except (UnknownLocaleError, ValueError, TypeError) as e:
            logger.debug("Rejected locale '%s': %s", locale_code, e)
            raise InvalidLocaleError(
                ErrorTemplate.locale_unknown(locale_code), locale_code=locale_code
            ) from None

        ctx = cls(locale_code=locale_code, _babel_locale=babel_locale)

        # Double-check pattern: another thread may have inserted meanwhile
        with cls._cache_lock:
            if cache_key in cls._cache:
                return cls._cache[cache_key]
            if len(cls._cache) >= MAX_LOCALE_CACHE_SIZE:
                cls._cache.popitem(last=False)
            cls._cache[cache_key] = ctx
            return ctx

    @property
    def babel_locale(self) -> Locale:
        """Pre-validated Babel Locale object for this context."""
        return self._babel_locale

    def _integer_pattern(self, use_grouping: bool) -> str:
        if not use_grouping:
            return "0"
        standard = self._babel_locale.decimal_formats.get(None)
        source = getattr(standard, "pattern", "") or "#,##0.###"
        match = _INTEGER_PATTERN_RE.search(source.split(";")[0])
        if match is None or "0" not in match.group():
            return "#,##0"
        return match.group()

    def format_number(
        self,
        value: int | float | Decimal,
        *,
        minimum_fraction_digits: int = 0,
        maximum_fraction_digits: int = 3,
        use_grouping: bool = True,
    ) -> str:
        """Format number with locale-specific separators.

        The locale's own grouping sizes are kept (e.g. "12,34,567" for en-IN).
        Values are rounded half away from zero at maximum_fraction_digits.

        Args:
            value: Number to format (int, float, or Decimal)
            minimum_fraction_digits: Minimum decimal places (default: 0)
            maximum_fraction_digits: Maximum decimal places (default: 3)
            use_grouping: Use thousands separator (default: True)

        Returns:
            Formatted number string according to locale rules

        Raises:
            FormattingError: If Babel cannot format the value

        Examples:
            >>> ctx = LocaleContext.create_or_raise('de-DE')
            >>> ctx.format_number(1234.5, minimum_fraction_digits=2)
            '1.234,50'

            >>> ctx = LocaleContext.create_or_raise('fr-FR')
            >>> ctx.format_number(1234.5, use_grouping=False)
            '1234,5'
        """
        integer_part = self._integer_pattern(use_grouping)

        if maximum_fraction_digits == 0:
            format_pattern = integer_part
        else:
            # '#,##0.00' fixed, '#,##0.0##' variable (1-3)
            required = "0" * minimum_fraction_digits
            optional = "#" * (maximum_fraction_digits - minimum_fraction_digits)
            format_pattern = f"{integer_part}.{required}{optional}"

        try:
            rounded = _round_half_up(to_decimal(value), maximum_fraction_digits)
            # Babel quantizes in the active context; widen it for huge integers.
            precision = _working_precision(rounded, maximum_fraction_digits)
            with localcontext(Context(prec=precision)):
                return str(
                    babel_numbers.format_decimal(
                        rounded,
                        format=format_pattern,
                        locale=self._babel_locale,
                        decimal_quantization=False,
                    )
                )
        except (ValueError, TypeError, InvalidOperation, AttributeError, KeyError) as e:
            fallback = str(value)
            diagnostic = ErrorTemplate.formatting_failed(fallback, self.locale_code, str(e))
            raise FormattingError(diagnostic, fallback_value=fallback) from e

    def symbols(self) -> LocaleSymbols:
        """Discover separators by formatting the probe value.

        The negative probe (-12345.6) is rendered with this locale's grouped
        pattern and its structural parts are read back.

        Returns:
            LocaleSymbols for this locale

        Raises:
            InvalidLocaleError: If the rendering does not have the expected
                shape (e.g. non-Latin digits)
        """
        rendering = self.format_number(
            SEPARATOR_PROBE_VALUE, minimum_fraction_digits=1, maximum_fraction_digits=1
        )
        match = _PROBE_RE.match(rendering)
        if match is None:
            raise InvalidLocaleError(
                ErrorTemplate.locale_probe_failed(self.locale_code, rendering),
                locale_code=self.locale_code,
            )

        group = match.group("group")
        if not group:
            # Locales with a minimum grouping of two digits leave 12345 ungrouped
            group = babel_numbers.get_group_symbol(self._babel_locale)
        minus = match.group("minus").strip(BIDI_MARKS) or "-"
        return LocaleSymbols(group=group, decimal=match.group("decimal"), minus=minus)
