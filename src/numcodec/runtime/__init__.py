"""Runtime formatting: options, locale context, provider, formatter, masker.

Thread-safe. Uses Babel for CLDR locale data behind LocaleCapabilityProvider.
"""

from .formatter import FormatResult, format_number, format_number_result, is_displayable
from .locale_context import LocaleContext, LocaleSymbols
from .masking import mask_number, mask_numeric_text
from .options import FormatOptions
from .provider import (
    BabelLocaleProvider,
    LocaleCapabilityProvider,
    default_locale,
    default_provider,
)

__all__ = [
    "BabelLocaleProvider",
    "FormatOptions",
    "FormatResult",
    "LocaleCapabilityProvider",
    "LocaleContext",
    "LocaleSymbols",
    "default_locale",
    "default_provider",
    "format_number",
    "format_number_result",
    "is_displayable",
    "mask_number",
    "mask_numeric_text",
]
