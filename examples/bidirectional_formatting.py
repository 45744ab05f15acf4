"""Bi-Directional Numeric Transcoding Examples.

numcodec converts numbers in both directions:
- Format: number -> display (format_number, format_for_display)
- Parse: display -> number (parse_number)
- Export: text of unknown locale -> canonical numeric string (normalize_for_export)

API Notes:
- Functions never raise exceptions
- format_number() returns "" for absent values, parse_number() returns math.nan
- *_result() variants expose fallback tiers and recovered errors
"""

import math

from numcodec import (
    DisplaySettings,
    FormatOptions,
    format_for_display,
    format_number,
    format_number_result,
    normalize_for_export,
    parse_number,
)


def example_locale_display() -> None:
    """The same amount rendered for several locales."""
    print("[Example 1] Locale Display")
    print("-" * 60)

    amount = 1234567.891
    for locale in ("en-US", "de-DE", "fr-FR", "de-CH", "en-IN"):
        print(f"{locale:>6}: {format_number(amount, locale)}")


def example_currency_placement() -> None:
    """Symbol position follows the currency, not the locale."""
    print("\n[Example 2] Currency Placement")
    print("-" * 60)

    for code in ("USD", "EUR", "GBP", "CHF"):
        text = format_number(-1234.5, "en-US", FormatOptions.currency(code))
        print(f"{code}: {text}")


def example_roundtrip() -> None:
    """Format, then parse back with the same locale."""
    print("\n[Example 3] Round Trip")
    print("-" * 60)

    options = FormatOptions.currency("EUR")
    for locale in ("de-DE", "fr-FR", "de-CH"):
        text = format_number(-1234.5, locale, options)
        parsed = parse_number(text, locale, currency_code="EUR")
        print(f"{locale}: {text!r} -> {parsed}  preserved: {parsed == -1234.5}")


def example_fallback_tiers() -> None:
    """Degraded results are visible, never raised."""
    print("\n[Example 4] Fallback Tiers")
    print("-" * 60)

    for locale in ("de-DE", "xx-NOWHERE"):
        result = format_number_result(42, locale)
        print(f"{locale}: {result.text!r} tier={result.tier} errors={len(result.errors)}")

    parsed = parse_number("n/a", "en-US")
    print(f"parse('n/a'): {parsed} (is NaN: {math.isnan(parsed)})")


def example_privacy_mode() -> None:
    """Privacy mode keeps layout but hides digits."""
    print("\n[Example 5] Privacy Mode")
    print("-" * 60)

    settings = DisplaySettings(locale="de-DE", currency_code="EUR", privacy_mode=True)
    options = FormatOptions.currency()
    print(f"Masked:   {format_for_display(-1234.5, settings, options)}")
    print(f"Revealed: {format_for_display(-1234.5, settings, options, ignore_privacy=True)}")


def example_csv_export() -> None:
    """Normalize pasted values of unknown origin for export."""
    print("\n[Example 6] CSV Export")
    print("-" * 60)

    pasted = ["1,234.56", "1234,56", " 99 ", "1.234,56", "n/a"]
    for value in pasted:
        default = normalize_for_export(value)
        positional = normalize_for_export(value, resolve_by_position=True)
        print(f"{value!r:>12} -> {default!r:<12} (by position: {positional!r})")


if __name__ == "__main__":
    print("=" * 60)
    print("Bi-Directional Numeric Transcoding Examples")
    print("=" * 60)

    example_locale_display()
    example_currency_placement()
    example_roundtrip()
    example_fallback_tiers()
    example_privacy_mode()
    example_csv_export()

    print("\n" + "=" * 60)
    print("All examples completed!")
    print("=" * 60)
