"""Locale capability provider: the narrow seam to native locale data.

Formatter and Parser only talk to a LocaleCapabilityProvider, never to
Babel directly. Tests can inject synthetic locales by implementing the
two-method protocol.
"""

from __future__ import annotations

import functools
from decimal import Decimal
from typing import TYPE_CHECKING, Protocol

from numcodec.locale_utils import get_system_locale

from .locale_context import LocaleContext, LocaleSymbols

if TYPE_CHECKING:
    from .options import FormatOptions

__all__ = [
    "BabelLocaleProvider",
    "LocaleCapabilityProvider",
    "LocaleSymbols",
    "default_locale",
    "default_provider",
]


# pylint: disable=unnecessary-ellipsis
# Ellipsis (...) is the standard Protocol method body per PEP 544
class LocaleCapabilityProvider(Protocol):
    """Locale operations required by the formatter and the parser.

    Implementations raise InvalidLocaleError for locales they cannot serve
    and FormattingError for values they cannot render.
    """

    def symbols(self, locale_code: str) -> LocaleSymbols:
        """Grouping separator, decimal separator and minus sign of a locale."""
        ...

    def format_decimal(
        self,
        value: int | float | Decimal,
        locale_code: str,
        options: FormatOptions,
    ) -> str:
        """Render value as a locale decimal honouring digit and grouping options."""
        ...
# pylint: enable=unnecessary-ellipsis


class BabelLocaleProvider:
    """LocaleCapabilityProvider backed by Babel/CLDR through LocaleContext.

    Example:
        >>> provider = BabelLocaleProvider()
        >>> provider.symbols("de-CH").group
        '’'
    """

    __slots__ = ()

    def symbols(self, locale_code: str) -> LocaleSymbols:
        return LocaleContext.create_or_raise(locale_code).symbols()

    def format_decimal(
        self,
        value: int | float | Decimal,
        locale_code: str,
        options: FormatOptions,
    ) -> str:
        return LocaleContext.create_or_raise(locale_code).format_number(
            value,
            minimum_fraction_digits=options.min_fraction_digits,
            maximum_fraction_digits=options.max_fraction_digits,
            use_grouping=options.use_grouping,
        )


@functools.cache
def default_provider() -> BabelLocaleProvider:
    """Shared Babel-backed provider."""
    return BabelLocaleProvider()


def default_locale() -> str:
    """Runtime default locale, re-detected on every call."""
    return get_system_locale()
