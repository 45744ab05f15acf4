"""PrivacyMasker: hide digits while keeping layout.

The masked string keeps the sign, the currency symbol and its position,
and replaces the numeric run with as many filler glyphs as the unmasked
numeric run has characters. The numeric run is measured on the same
Formatter output the unmasked display would use, so grouping separators
and fraction digits count exactly as they would have been rendered.
"""

from __future__ import annotations

import re

from numcodec.constants import BIDI_MARKS, MASK_GLYPH
from numcodec.currency import CurrencyDefinition, CurrencyRegistry, default_registry
from numcodec.enums import SymbolPosition

from .formatter import format_number, is_displayable
from .options import FormatOptions
from .provider import LocaleCapabilityProvider

__all__ = ["mask_number", "mask_numeric_text"]

# Leading sign (ASCII or Unicode minus), optionally wrapped in directional marks.
_LEADING_SIGN_RE = re.compile("^[" + BIDI_MARKS + "]*[+\\-\u2212][" + BIDI_MARKS + "]*")


def mask_numeric_text(
    numeric_text: str,
    *,
    negative: bool,
    currency: CurrencyDefinition | None = None,
) -> str:
    """Replace a formatted numeric run with filler glyphs.

    Args:
        numeric_text: Formatted number without currency symbol (a leading
            sign, if present, is not counted)
        negative: Whether to show the "-" sign
        currency: Definition whose symbol and position are kept, or None

    Returns:
        Masked string of the same visible numeric length (at least one glyph)

    Example:
        >>> mask_numeric_text("-1,234.56", negative=True)
        '-••••••••'
    """
    body = _LEADING_SIGN_RE.sub("", numeric_text)
    filler = MASK_GLYPH * max(len(body), 1)
    sign = "-" if negative else ""
    if currency is None:
        return f"{sign}{filler}"
    if currency.position is SymbolPosition.LEADING:
        return f"{sign}{currency.symbol}{filler}"
    return f"{sign}{filler} {currency.symbol}"


def mask_number(
    value: object,
    locale_code: str | None,
    options: FormatOptions | None = None,
    *,
    is_currency: bool | None = None,
    registry: CurrencyRegistry | None = None,
    provider: LocaleCapabilityProvider | None = None,
) -> str:
    """Format then mask a number for privacy mode; never raises.

    Currency masking always shows a symbol: unknown codes fall back to the
    registry's code-as-symbol definition.

    Args:
        value: Number to mask
        locale_code: Locale tag from the settings collaborator
        options: Same options the unmasked display would use
        is_currency: Force (or suppress) currency masking; defaults to
            options.style is CURRENCY
        registry: Currency registry (default: process-wide registry)
        provider: Locale capability provider (default: Babel)

    Returns:
        Masked display string

    Examples:
        >>> mask_number(-1234.56, "en-US", FormatOptions.currency("USD"))
        '-$••••••••'
        >>> mask_number(1234.5, "de-DE", FormatOptions.currency("EUR"))
        '•••••••• €'
    """
    options = options if options is not None else FormatOptions()
    registry = registry if registry is not None else default_registry()
    if is_currency is None:
        is_currency = options.is_currency

    numeric_text = format_number(
        value, locale_code, options.as_decimal(), registry=registry, provider=provider
    )
    negative = is_displayable(value) and value < 0  # type: ignore[operator]
    currency = registry.resolve(options.currency_code) if is_currency else None
    return mask_numeric_text(numeric_text, negative=negative, currency=currency)
