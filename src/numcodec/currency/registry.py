"""Currency registry: code to display-definition lookup.

The registry is immutable. It is built once from the static dataset and
shared process-wide; derived registries are new objects.

Two lookup flavours:
    get(code)     -> CurrencyDefinition | None  (strict)
    resolve(code) -> CurrencyDefinition         (never fails, code-as-symbol fallback)

CLDR-derived definitions (definition_from_cldr) let callers extend the
registry with currencies the static dataset does not carry.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Iterable, Iterator
from types import MappingProxyType

from babel import UnknownLocaleError
from babel.numbers import get_currency_name, get_currency_symbol, is_currency

from numcodec.constants import UNKNOWN_CURRENCY_SYMBOL
from numcodec.diagnostics import ErrorTemplate, InvalidLocaleError, UnresolvedCurrencyError
from numcodec.enums import SymbolPosition
from numcodec.locale_utils import get_babel_locale

from .definitions import CURRENCY_DEFINITIONS, CurrencyDefinition

__all__ = [
    "CurrencyRegistry",
    "default_registry",
    "definition_from_cldr",
]

logger = logging.getLogger(__name__)

# CLDR placeholder for the currency sign in number patterns.
_CLDR_CURRENCY_SIGN = "\xa4"


class CurrencyRegistry:
    """Immutable, case-insensitive mapping of currency code to definition.

    Example:
        >>> registry = default_registry()
        >>> registry.resolve("eur").symbol
        '€'
        >>> registry.resolve("XYZ").symbol  # Unknown: code used as symbol
        'XYZ'
    """

    __slots__ = ("_definitions",)

    def __init__(self, definitions: Iterable[CurrencyDefinition]) -> None:
        """Build registry from definitions.

        Raises:
            ValueError: If two definitions share a code.
        """
        table: dict[str, CurrencyDefinition] = {}
        for definition in definitions:
            key = definition.code.upper()
            if key in table:
                msg = f"Duplicate currency code {definition.code!r}"
                raise ValueError(msg)
            table[key] = definition
        self._definitions = MappingProxyType(table)

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and code.strip().upper() in self._definitions

    def __len__(self) -> int:
        return len(self._definitions)

    def __iter__(self) -> Iterator[CurrencyDefinition]:
        return iter(self._definitions.values())

    def __repr__(self) -> str:
        return f"CurrencyRegistry({len(self)} currencies)"

    def codes(self) -> tuple[str, ...]:
        """Registered codes in dataset order."""
        return tuple(definition.code for definition in self)

    def get(self, code: str | None) -> CurrencyDefinition | None:
        """Strict lookup; None when the code is not registered."""
        if not code:
            return None
        return self._definitions.get(code.strip().upper())

    def resolve(self, code: str | None) -> CurrencyDefinition:
        """Lookup that never fails.

        Unknown codes yield a LEADING definition whose symbol is the code
        itself; an empty code yields the generic currency sign.
        """
        definition = self.get(code)
        if definition is not None:
            return definition
        fallback_code = (code or "").strip().upper()
        logger.debug("Currency %r not registered; using code as symbol", code)
        return CurrencyDefinition(
            code=fallback_code or UNKNOWN_CURRENCY_SYMBOL,
            symbol=fallback_code or UNKNOWN_CURRENCY_SYMBOL,
            display_name=fallback_code or UNKNOWN_CURRENCY_SYMBOL,
            position=SymbolPosition.LEADING,
        )

    def with_definitions(self, *definitions: CurrencyDefinition) -> CurrencyRegistry:
        """Return a new registry with extra or overriding definitions."""
        overrides = {definition.code.upper(): definition for definition in definitions}
        merged = [overrides.pop(key, existing) for key, existing in self._definitions.items()]
        merged.extend(overrides.values())
        return CurrencyRegistry(merged)


@functools.cache
def default_registry() -> CurrencyRegistry:
    """Process-wide registry built from the static dataset (loaded once)."""
    return CurrencyRegistry(CURRENCY_DEFINITIONS)


def _symbol_position(locale_code: str) -> SymbolPosition:
    pattern = get_babel_locale(locale_code).currency_formats["standard"].pattern
    positive = pattern.split(";")[0]
    sign_index = positive.find(_CLDR_CURRENCY_SIGN)
    digit_index = min(
        (index for index in (positive.find("#"), positive.find("0")) if index >= 0),
        default=len(positive),
    )
    if 0 <= sign_index < digit_index:
        return SymbolPosition.LEADING
    return SymbolPosition.TRAILING


def definition_from_cldr(code: str, locale_code: str = "en_US") -> CurrencyDefinition:
    """Derive a currency definition from Unicode CLDR data via Babel.

    Symbol and name come from the given locale; the position follows the
    locale's standard currency pattern (e.g. "¤#,##0.00" is LEADING,
    "#,##0.00 ¤" is TRAILING).

    Args:
        code: ISO 4217 currency code
        locale_code: Locale whose CLDR data supplies symbol, name and position

    Returns:
        CurrencyDefinition for the code

    Raises:
        InvalidLocaleError: If locale_code is unknown or malformed
        UnresolvedCurrencyError: If CLDR does not know the currency code

    Example:
        >>> definition_from_cldr("EUR", "de_DE").position
        <SymbolPosition.TRAILING: 'trailing'>
    """
    normalized_code = code.strip().upper()
    try:
        locale = get_babel_locale(locale_code)
    except (UnknownLocaleError, ValueError, TypeError) as e:
        raise InvalidLocaleError(
            ErrorTemplate.locale_unknown(locale_code), locale_code=locale_code
        ) from e

    if not normalized_code or not is_currency(normalized_code):
        raise UnresolvedCurrencyError(
            ErrorTemplate.currency_unresolved(code), currency_code=code
        )

    return CurrencyDefinition(
        code=normalized_code,
        symbol=get_currency_symbol(normalized_code, locale=locale),
        display_name=get_currency_name(normalized_code, locale=locale),
        position=_symbol_position(locale_code),
    )
