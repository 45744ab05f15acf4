"""Formatter: canonical number -> locale display string.

format_number() never raises. Every degradation is an explicit tier:

    REQUESTED_LOCALE -> DEFAULT_LOCALE -> FIXED_POINT

and format_number_result() exposes which tier produced the text together
with the recovered errors.

Currency amounts bypass locale currency patterns: the absolute value is
formatted as a plain locale decimal and the registry definition alone
decides where sign and symbol go.
"""

from __future__ import annotations

import logging
import math
import numbers
from dataclasses import dataclass
from decimal import Decimal

from numcodec.currency import CurrencyDefinition, CurrencyRegistry, default_registry
from numcodec.diagnostics import (
    ErrorTemplate,
    FormattingError,
    InvalidLocaleError,
    NumcodecError,
    UnresolvedCurrencyError,
)
from numcodec.enums import FormatTier
from numcodec.locale_utils import normalize_locale

from .locale_context import to_decimal, to_float
from .options import FormatOptions
from .provider import LocaleCapabilityProvider, default_locale, default_provider

__all__ = [
    "FormatResult",
    "format_number",
    "format_number_result",
    "is_displayable",
]

logger = logging.getLogger(__name__)

Number = int | float | Decimal


@dataclass(frozen=True, slots=True)
class FormatResult:
    """Formatted text plus the fallback tier that produced it.

    Attributes:
        text: Display string ("" when tier is NO_VALUE)
        tier: Fallback tier that succeeded
        errors: Errors recovered on the way (empty on the happy path)
    """

    text: str
    tier: FormatTier
    errors: tuple[NumcodecError, ...] = ()

    @property
    def ok(self) -> bool:
        """True when the requested locale formatted the value cleanly."""
        return self.tier is FormatTier.REQUESTED_LOCALE and not self.errors


def is_displayable(value: object) -> bool:
    """True for finite real numbers (bool excluded)."""
    if isinstance(value, bool):
        return False
    if isinstance(value, Decimal):
        return value.is_finite()
    if isinstance(value, numbers.Rational):
        # Integers and fractions of any size are finite; never convert to float.
        return True
    if isinstance(value, numbers.Real):
        return math.isfinite(to_float(value))
    return False


def _coerce(value: object) -> Number:
    if isinstance(value, (int, float, Decimal)):
        return value
    # Other numbers.Real implementations (Fraction, numpy scalars)
    return to_decimal(value)  # type: ignore[arg-type]


def _fixed_point(value: Number, digits: int) -> str:
    return f"{to_decimal(value):.{digits}f}"


def _locale_tiers(locale_code: str | None) -> list[tuple[FormatTier, str]]:
    fallback = default_locale()
    requested = locale_code or fallback
    tiers = [(FormatTier.REQUESTED_LOCALE, requested)]
    if normalize_locale(fallback) != normalize_locale(requested):
        tiers.append((FormatTier.DEFAULT_LOCALE, fallback))
    return tiers


def format_number_result(
    value: object,
    locale_code: str | None,
    options: FormatOptions | None = None,
    *,
    registry: CurrencyRegistry | None = None,
    provider: LocaleCapabilityProvider | None = None,
) -> FormatResult:
    """Format a number and report the fallback tier used.

    Args:
        value: Number to format; None, NaN, infinities and non-numbers
            produce an empty NO_VALUE result
        locale_code: Locale tag supplied by the settings collaborator
            (None means the runtime default locale)
        options: Rendering options (default: 2 fraction digits, grouped)
        registry: Currency registry (default: process-wide registry)
        provider: Locale capability provider (default: Babel)

    Returns:
        FormatResult with text, tier and recovered errors

    Examples:
        >>> format_number_result(-10, "en-US", FormatOptions.currency("USD")).text
        '-$10.00'
        >>> format_number_result(10, "not-a-real-locale").tier
        <FormatTier.DEFAULT_LOCALE: 'default_locale'>
    """
    if not is_displayable(value):
        return FormatResult("", FormatTier.NO_VALUE)

    number = _coerce(value)
    options = options if options is not None else FormatOptions()
    registry = registry if registry is not None else default_registry()
    provider = provider if provider is not None else default_provider()
    errors: list[NumcodecError] = []

    currency: CurrencyDefinition | None = None
    if options.is_currency:
        currency = registry.get(options.currency_code)
        if currency is None:
            code = options.currency_code or ""
            logger.debug("Currency %r unresolved; formatting as plain decimal", code)
            errors.append(
                UnresolvedCurrencyError(
                    ErrorTemplate.currency_unresolved(code), currency_code=code
                )
            )

    negative = number < 0
    body = abs(number) if currency is not None else number
    decimal_options = options.as_decimal()

    def assemble(text: str) -> str:
        if currency is None:
            return text
        return currency.attach(text, negative=negative)

    for tier, candidate in _locale_tiers(locale_code):
        try:
            text = provider.format_decimal(body, candidate, decimal_options)
        except (InvalidLocaleError, FormattingError) as e:
            logger.warning("Formatting in tier %s failed: %s", tier, e.summary)
            errors.append(e)
            continue
        return FormatResult(assemble(text), tier, tuple(errors))

    text = _fixed_point(body, options.max_fraction_digits)
    return FormatResult(assemble(text), FormatTier.FIXED_POINT, tuple(errors))


def format_number(
    value: object,
    locale_code: str | None,
    options: FormatOptions | None = None,
    *,
    registry: CurrencyRegistry | None = None,
    provider: LocaleCapabilityProvider | None = None,
) -> str:
    """Format a number for display; never raises.

    Examples:
        >>> format_number(-1234.5, "de-DE", FormatOptions.currency("EUR"))
        '-1.234,50 €'
        >>> format_number(float("nan"), "en-US")
        ''
    """
    return format_number_result(
        value, locale_code, options, registry=registry, provider=provider
    ).text
