"""Settings-driven display composition.

The settings collaborator owns the user's locale, currency and privacy-mode
preferences; it hands them over as DisplaySettings on every call. Nothing
here caches a preference, so a change takes effect on the very next call.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from numcodec.constants import DEFAULT_CURRENCY
from numcodec.currency import CurrencyRegistry
from numcodec.locale_utils import get_system_locale
from numcodec.parsing import parse_number
from numcodec.runtime import (
    FormatOptions,
    LocaleCapabilityProvider,
    format_number,
    mask_number,
)

__all__ = [
    "DisplaySettings",
    "format_for_display",
    "parse_for_display",
]

# Environment variables read by DisplaySettings.from_environ().
ENV_LOCALE = "NUMCODEC_LOCALE"
ENV_CURRENCY = "NUMCODEC_CURRENCY"
ENV_PRIVACY = "NUMCODEC_PRIVACY"

_TRUTHY = frozenset({"1", "true", "yes", "on"})


@dataclass(frozen=True, slots=True)
class DisplaySettings:
    """User display preferences supplied by the settings collaborator.

    Attributes:
        locale: Locale tag for separators and grouping
        currency_code: Currency used when CURRENCY options carry no code
        privacy_mode: Mask numbers instead of showing them
    """

    locale: str = "en-US"
    currency_code: str = DEFAULT_CURRENCY
    privacy_mode: bool = False

    @classmethod
    def from_environ(cls, environ: Mapping[str, str] | None = None) -> DisplaySettings:
        """Read settings from NUMCODEC_* variables.

        The locale defaults to the OS locale, the currency to USD and
        privacy mode to off.

        Example:
            >>> DisplaySettings.from_environ({"NUMCODEC_LOCALE": "de-DE",
            ...                               "NUMCODEC_PRIVACY": "yes"})
            DisplaySettings(locale='de-DE', currency_code='USD', privacy_mode=True)
        """
        env = os.environ if environ is None else environ
        locale = env.get(ENV_LOCALE, "").strip() or get_system_locale()
        currency_code = env.get(ENV_CURRENCY, "").strip().upper() or DEFAULT_CURRENCY
        privacy_mode = env.get(ENV_PRIVACY, "").strip().lower() in _TRUTHY
        return cls(locale=locale, currency_code=currency_code, privacy_mode=privacy_mode)


def format_for_display(
    value: object,
    settings: DisplaySettings,
    options: FormatOptions | None = None,
    *,
    ignore_privacy: bool = False,
    registry: CurrencyRegistry | None = None,
    provider: LocaleCapabilityProvider | None = None,
) -> str:
    """Format (or mask, in privacy mode) a value using the user's settings.

    CURRENCY options without a code use settings.currency_code.

    Examples:
        >>> settings = DisplaySettings(locale="de-DE", currency_code="EUR")
        >>> format_for_display(-1234.5, settings, FormatOptions.currency())
        '-1.234,50 €'
        >>> format_for_display(-1234.5, DisplaySettings(privacy_mode=True),
        ...                    FormatOptions.currency())
        '-$••••••••'
    """
    options = options if options is not None else FormatOptions()
    if options.is_currency and not options.currency_code:
        options = options.with_currency(settings.currency_code or DEFAULT_CURRENCY)

    if settings.privacy_mode and not ignore_privacy:
        return mask_number(
            value, settings.locale, options, registry=registry, provider=provider
        )
    return format_number(value, settings.locale, options, registry=registry, provider=provider)


def parse_for_display(
    text: object,
    settings: DisplaySettings,
    *,
    provider: LocaleCapabilityProvider | None = None,
) -> float:
    """Parse user input with the settings' locale; math.nan on failure."""
    return parse_number(text, settings.locale, provider=provider)
