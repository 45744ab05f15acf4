"""Number parsing with locale awareness.

- parse_number() returns a float, math.nan on failure
- parse_number_result() returns ParseResult(value, errors)
- Functions NEVER raise exceptions - errors are returned in the result

Separators come from the locale capability provider's probe; when the
provider cannot serve the locale, commas are dropped and parsing carries on.

Thread-safe. Uses Babel (through the provider) for CLDR separators.
"""

from __future__ import annotations

import logging
import math
import numbers
from dataclasses import dataclass

from numcodec.currency import CurrencyRegistry, default_registry
from numcodec.diagnostics import (
    ErrorTemplate,
    InvalidLocaleError,
    NumcodecError,
    UnparsableInputError,
)
from numcodec.runtime.locale_context import to_float
from numcodec.runtime.provider import (
    LocaleCapabilityProvider,
    default_locale,
    default_provider,
)

from .literals import keep_numeric_characters, leading_float, strip_grouping_whitespace

__all__ = ["ParseResult", "parse_number", "parse_number_result"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ParseResult:
    """Parsed value plus the errors recovered while parsing.

    Attributes:
        value: Parsed number, or math.nan when nothing could be recovered
        errors: Recovered errors (empty tuple on a clean parse)
    """

    value: float
    errors: tuple[NumcodecError, ...] = ()

    @property
    def ok(self) -> bool:
        """True when a number was recovered without any fallback."""
        return not self.errors and not math.isnan(self.value)


def _strip_currency(text: str, currency_code: str, registry: CurrencyRegistry) -> str:
    definition = registry.get(currency_code)
    stripped = text.replace(currency_code.strip().upper(), "")
    if definition is not None:
        stripped = stripped.replace(definition.symbol, "")
    return stripped


def parse_number_result(
    value: object,
    locale_code: str | None,
    *,
    currency_code: str | None = None,
    registry: CurrencyRegistry | None = None,
    provider: LocaleCapabilityProvider | None = None,
) -> ParseResult:
    """Parse a locale display string back to a number.

    Args:
        value: Display string (e.g. "1.234,5" for de-DE); numbers pass through
        locale_code: Locale the string was produced for (None: runtime default)
        currency_code: Remove this currency's code and symbol before parsing
        registry: Currency registry used for symbol lookup
        provider: Locale capability provider (default: Babel)

    Returns:
        ParseResult; value is math.nan when parsing failed

    Examples:
        >>> parse_number_result("1.234,5", "de-DE").value
        1234.5
        >>> parse_number_result("", "en-US").ok
        False
    """
    locale_code = locale_code or default_locale()

    if isinstance(value, numbers.Real) and not isinstance(value, bool):
        # Integers beyond float range saturate to +/-inf, like an over-long digit string.
        return ParseResult(to_float(value))

    text = "" if value is None else str(value).strip()
    if not text:
        error = UnparsableInputError(
            ErrorTemplate.parse_input_empty(locale_code), locale_code=locale_code
        )
        return ParseResult(math.nan, (error,))

    errors: list[NumcodecError] = []
    normalized = text
    if currency_code:
        registry = registry if registry is not None else default_registry()
        normalized = _strip_currency(normalized, currency_code, registry)
    normalized = strip_grouping_whitespace(normalized)

    provider = provider if provider is not None else default_provider()
    try:
        symbols = provider.symbols(locale_code)
    except InvalidLocaleError as e:
        logger.debug("No separators (%s); dropping commas", e.summary)
        errors.append(e)
        normalized = normalized.replace(",", "")
    else:
        if symbols.group:
            normalized = normalized.replace(symbols.group, "")
        if symbols.minus != "-":
            normalized = normalized.replace(symbols.minus, "-")
        if symbols.decimal != ".":
            normalized = normalized.replace(symbols.decimal, ".")

    number = leading_float(keep_numeric_characters(normalized))
    if number is None:
        diagnostic = ErrorTemplate.parse_number_failed(text, locale_code, "no numeric literal")
        errors.append(
            UnparsableInputError(diagnostic, input_value=text, locale_code=locale_code)
        )
        return ParseResult(math.nan, tuple(errors))

    return ParseResult(number, tuple(errors))


def parse_number(
    value: object,
    locale_code: str | None,
    *,
    currency_code: str | None = None,
    registry: CurrencyRegistry | None = None,
    provider: LocaleCapabilityProvider | None = None,
) -> float:
    """Parse a locale display string; math.nan on failure, never raises.

    Examples:
        >>> parse_number("-1.234,50 €", "de-DE")
        -1234.5
        >>> parse_number("1 234,5", "fr-FR")
        1234.5
    """
    return parse_number_result(
        value,
        locale_code,
        currency_code=currency_code,
        registry=registry,
        provider=provider,
    ).value
