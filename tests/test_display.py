"""Tests for settings-driven display composition."""

import math

import pytest

from numcodec import (
    DisplaySettings,
    FormatOptions,
    format_for_display,
    parse_for_display,
)
from numcodec.constants import MASK_GLYPH


class TestDisplaySettings:
    """Settings value object and environment loading."""

    def test_defaults(self) -> None:
        """en-US, USD, privacy off."""
        settings = DisplaySettings()
        assert (settings.locale, settings.currency_code, settings.privacy_mode) == (
            "en-US",
            "USD",
            False,
        )

    def test_from_mapping(self) -> None:
        """Explicit mapping overrides everything."""
        settings = DisplaySettings.from_environ(
            {
                "NUMCODEC_LOCALE": "de-CH",
                "NUMCODEC_CURRENCY": "chf",
                "NUMCODEC_PRIVACY": "On",
            }
        )
        assert settings == DisplaySettings("de-CH", "CHF", True)

    @pytest.mark.parametrize("flag", ["0", "false", "no", "", "maybe"])
    def test_privacy_falsy(self, flag: str) -> None:
        """Only 1/true/yes/on enable privacy mode."""
        settings = DisplaySettings.from_environ(
            {"NUMCODEC_LOCALE": "en-US", "NUMCODEC_PRIVACY": flag}
        )
        assert settings.privacy_mode is False

    def test_from_process_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Without a mapping, os.environ is read."""
        monkeypatch.setenv("NUMCODEC_LOCALE", "fr-FR")
        monkeypatch.setenv("NUMCODEC_PRIVACY", "1")
        monkeypatch.delenv("NUMCODEC_CURRENCY", raising=False)
        settings = DisplaySettings.from_environ()
        assert settings == DisplaySettings("fr-FR", "USD", True)

    def test_locale_falls_back_to_system(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Missing NUMCODEC_LOCALE uses the OS locale."""
        monkeypatch.setattr("numcodec.display.get_system_locale", lambda: "de_DE")
        settings = DisplaySettings.from_environ({})
        assert settings.locale == "de_DE"
        assert settings.currency_code == "USD"


class TestFormatForDisplay:
    """format_for_display() composes formatter and masker."""

    def test_currency_filled_from_settings(self) -> None:
        """CURRENCY options without a code use the settings currency."""
        settings = DisplaySettings(locale="de-DE", currency_code="EUR")
        assert format_for_display(-1234.5, settings, FormatOptions.currency()) == "-1.234,50 €"

    def test_explicit_code_wins(self) -> None:
        """A code in the options is kept."""
        settings = DisplaySettings(locale="en-US", currency_code="EUR")
        assert format_for_display(10, settings, FormatOptions.currency("GBP")) == "£10.00"

    def test_decimal_default(self) -> None:
        """No options: plain two-digit decimal."""
        assert format_for_display(1234.5, DisplaySettings(locale="de-CH")) == "1’234.50"

    def test_privacy_masks(self) -> None:
        """Privacy mode masks."""
        settings = DisplaySettings(privacy_mode=True)
        result = format_for_display(-1234.5, settings, FormatOptions.currency())
        assert result == "-$" + MASK_GLYPH * 8

    def test_ignore_privacy(self) -> None:
        """ignore_privacy shows the real value even in privacy mode."""
        settings = DisplaySettings(privacy_mode=True)
        result = format_for_display(
            -1234.5, settings, FormatOptions.currency(), ignore_privacy=True
        )
        assert result == "-$1,234.50"

    def test_settings_change_applies_immediately(self) -> None:
        """No preference is cached between calls."""
        options = FormatOptions.currency()
        first = format_for_display(1, DisplaySettings(currency_code="USD"), options)
        second = format_for_display(1, DisplaySettings(currency_code="GBP"), options)
        assert (first, second) == ("$1.00", "£1.00")

    def test_no_value(self) -> None:
        """None displays as empty text."""
        assert format_for_display(None, DisplaySettings()) == ""


class TestParseForDisplay:
    """parse_for_display() uses the settings locale."""

    def test_parse(self) -> None:
        """Locale separators from the settings."""
        assert parse_for_display("1.234,5", DisplaySettings(locale="de-DE")) == 1234.5

    def test_failure_is_nan(self) -> None:
        """Failures are NaN."""
        assert math.isnan(parse_for_display("", DisplaySettings()))
