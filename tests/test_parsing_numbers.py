"""Tests for parse_number() / parse_number_result().

Validates locale-aware parsing across the supported display locales and
the round trip with format_number().
"""

import math
from decimal import Decimal
from fractions import Fraction

import pytest
from hypothesis import example, given
from hypothesis import strategies as st

from numcodec import FormatOptions, format_number, parse_number, parse_number_result
from numcodec.diagnostics import (
    DiagnosticCode,
    ErrorTemplate,
    InvalidLocaleError,
    UnparsableInputError,
)
from numcodec.runtime import LocaleSymbols

DISPLAY_LOCALES = ("en-US", "de-DE", "fr-FR", "de-CH", "en-IN")


class SymbollessProvider:
    """Provider that cannot report separators for any locale."""

    def symbols(self, locale_code: str) -> LocaleSymbols:
        raise InvalidLocaleError(
            ErrorTemplate.locale_probe_failed(locale_code, "?"), locale_code=locale_code
        )

    def format_decimal(self, value: object, locale_code: str, options: FormatOptions) -> str:
        return str(value)


class SyntheticProvider:
    """Synthetic locale: "_" groups, "/" is the decimal mark, "~" is minus."""

    def symbols(self, locale_code: str) -> LocaleSymbols:
        return LocaleSymbols(group="_", decimal="/", minus="~")

    def format_decimal(self, value: object, locale_code: str, options: FormatOptions) -> str:
        return str(value)


class TestParseNumber:
    """Test parse_number() across locales."""

    def test_parse_number_en_us(self) -> None:
        """Parse US English number format."""
        assert parse_number("1,234.5", "en-US") == 1234.5
        assert parse_number("1234.5", "en-US") == 1234.5
        assert parse_number("-0.5", "en-US") == -0.5

    def test_parse_number_de_de(self) -> None:
        """Parse German number format."""
        assert parse_number("1.234,5", "de-DE") == 1234.5
        assert parse_number("1234,5", "de-DE") == 1234.5
        assert parse_number("0,5", "de-DE") == 0.5

    def test_parse_number_fr_fr(self) -> None:
        """Parse French format with any space-like grouping."""
        assert parse_number("1 234,5", "fr-FR") == 1234.5
        assert parse_number("1\u00a0234,5", "fr-FR") == 1234.5
        assert parse_number("1\u202f234,5", "fr-FR") == 1234.5

    def test_parse_number_de_ch(self) -> None:
        """Parse Swiss German apostrophe grouping."""
        assert parse_number("1’234.5", "de-CH") == 1234.5

    def test_parse_number_en_in(self) -> None:
        """Parse Indian grouping."""
        assert parse_number("12,34,567.89", "en-IN") == 1234567.89

    def test_end_to_end_currency(self) -> None:
        """Formatted EUR amount parses back in de-DE."""
        assert parse_number("-1.234,50 €", "de-DE") == -1234.5

    def test_currency_code_removed(self) -> None:
        """currency_code strips both the code and the symbol."""
        assert parse_number("CHF 1’234.50", "de-CH", currency_code="CHF") == 1234.5
        assert parse_number("R$ 12,50", "de-DE", currency_code="BRL") == 12.5

    def test_lenient_trailing_garbage(self) -> None:
        """Like a float-prefix parser, trailing garbage is ignored."""
        assert parse_number("12.5.3", "en-US") == 12.5
        assert parse_number("42abc", "en-US") == 42.0

    @pytest.mark.parametrize("value", [12, 12.5, Decimal("12.5")])
    def test_numbers_pass_through(self, value: object) -> None:
        """Numeric input is returned as a float."""
        result = parse_number_result(value, "de-DE")
        assert result.value == float(value)  # type: ignore[arg-type]
        assert result.ok

    def test_fraction_is_not_read_as_text(self) -> None:
        """A Fraction is a number, not the string "1/2"."""
        assert parse_number(Fraction(1, 2), "en-US") == 0.5
        assert parse_number(Fraction(-5, 4), "de-DE") == -1.25

    def test_huge_numbers_saturate(self) -> None:
        """Values beyond float range become infinities instead of raising."""
        assert parse_number(10**400, "en-US") == math.inf
        assert parse_number(-(10**400), "en-US") == -math.inf
        assert parse_number(Fraction(10**400, 7), "en-US") == math.inf
        assert parse_number_result(10**400, "en-US").ok

    def test_none_locale_uses_default(self, default_locale_en_us: str) -> None:
        """None locale means the runtime default."""
        assert parse_number("1,234.5", None) == 1234.5


class TestParseFailures:
    """Failures produce the NaN sentinel, never an exception."""

    @pytest.mark.parametrize("text", ["", "   ", None])
    def test_empty_input(self, text: str | None) -> None:
        """Empty input is NaN with PARSE_INPUT_EMPTY."""
        result = parse_number_result(text, "en-US")
        assert math.isnan(result.value)
        assert not result.ok
        error = result.errors[0]
        assert isinstance(error, UnparsableInputError)
        assert error.diagnostic is not None
        assert error.diagnostic.code is DiagnosticCode.PARSE_INPUT_EMPTY

    @pytest.mark.parametrize("text", ["abc", "--", "€", ".", "+-1"])
    def test_no_numeric_literal(self, text: str) -> None:
        """Strings without a numeric literal are NaN."""
        result = parse_number_result(text, "en-US")
        assert math.isnan(result.value)
        error = result.errors[-1]
        assert isinstance(error, UnparsableInputError)
        assert error.input_value == text
        assert error.locale_code == "en-US"

    def test_parse_number_returns_nan(self) -> None:
        """parse_number() returns math.nan, not None."""
        assert math.isnan(parse_number("n/a", "de-DE"))


class TestProviderFallback:
    """Provider injection and separator-lookup fallback."""

    def test_symbol_failure_drops_commas(self) -> None:
        """Unknown separators: commas are dropped and parsing continues."""
        result = parse_number_result("1,234.5", "xx-NOWHERE", provider=SymbollessProvider())
        assert result.value == 1234.5
        assert isinstance(result.errors[0], InvalidLocaleError)
        assert not result.ok

    def test_invalid_locale_with_babel(self) -> None:
        """Babel-backed parsing of an unknown locale behaves the same way."""
        result = parse_number_result("1,234.5", "xx-NOWHERE")
        assert result.value == 1234.5
        assert isinstance(result.errors[0], InvalidLocaleError)

    def test_synthetic_locale(self) -> None:
        """Separators come only from the provider."""
        result = parse_number_result("~1_234/5", "x-synthetic", provider=SyntheticProvider())
        assert result.value == -1234.5
        assert result.ok


class TestParseRoundTrip:
    """format_number() and parse_number() are inverses at display precision."""

    @given(
        cents=st.integers(min_value=-(10**12), max_value=10**12),
        locale=st.sampled_from(DISPLAY_LOCALES),
    )
    @example(cents=-123450, locale="de-DE")
    @example(cents=0, locale="fr-FR")
    def test_round_trip(self, cents: int, locale: str) -> None:
        """parse(format(x)) == x for two-digit amounts."""
        value = cents / 100
        text = format_number(value, locale)
        assert parse_number(text, locale) == value

    @given(
        cents=st.integers(min_value=-(10**10), max_value=10**10),
        locale=st.sampled_from(DISPLAY_LOCALES),
        code=st.sampled_from(("USD", "EUR", "CHF", "GBP", "INR")),
    )
    def test_currency_round_trip(self, cents: int, locale: str, code: str) -> None:
        """Currency text parses back once the symbol is stripped."""
        value = cents / 100
        text = format_number(value, locale, FormatOptions.currency(code))
        assert parse_number(text, locale, currency_code=code) == value
