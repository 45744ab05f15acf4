"""Tests for normalize_for_export() separator heuristics and idempotence."""

import logging
import math
from decimal import Decimal
from fractions import Fraction

import pytest
from hypothesis import example, given, settings
from hypothesis import strategies as st

from numcodec import normalize_for_export
from numcodec.parsing.literals import canonical_number_text, leading_float


class TestSeparatorHeuristic:
    """Locale-agnostic separator resolution."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("1,234.56", "1234.56"),
            ("1234,56", "1234.56"),
            ("1234.56", "1234.56"),
            ("1234", "1234"),
            ("  12.50 ", "12.5"),
            ("$1,234.50", "1234.5"),
            ("-1234,50 €", "-1234.5"),
            ("1\u00a0234,5", "1234.5"),
            ("1 234,5", "1234.5"),
            ("+7", "7"),
            ("-0", "0"),
            ("0.000", "0"),
        ],
    )
    def test_literal_cases(self, text: str, expected: str) -> None:
        """Comma-only is decimal; comma with period is grouping."""
        assert normalize_for_export(text) == expected

    def test_european_order_default_drops_commas(self) -> None:
        """Both separators present: commas are removed, the period stays decimal."""
        assert normalize_for_export("1.234,56") == "1.23456"

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("1.234,56", "1234.56"),
            ("1,234.56", "1234.56"),
            ("1.234.567,8", "1234567.8"),
            ("1234,56", "1234.56"),
        ],
    )
    def test_resolve_by_position(self, text: str, expected: str) -> None:
        """With resolve_by_position the last separator is the decimal one."""
        assert normalize_for_export(text, resolve_by_position=True) == expected


class TestUnparsableAndEmpty:
    """Unparsable input keeps the original text."""

    @pytest.mark.parametrize("text", ["abc", "  n/a  ", "--", "€"])
    def test_returns_trimmed_original(
        self, text: str, caplog: pytest.LogCaptureFixture
    ) -> None:
        """No sentinel: the trimmed input comes back unchanged."""
        with caplog.at_level(logging.DEBUG, logger="numcodec.parsing.export"):
            assert normalize_for_export(text) == text.strip()
        assert "unparsable" in caplog.text

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_empty(self, value: object) -> None:
        """None and blank strings normalize to ""."""
        assert normalize_for_export(value) == ""


class TestNumericInput:
    """Numbers are rendered canonically without parsing."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (1234.5, "1234.5"),
            (10, "10"),
            (-0.0, "0"),
            (Decimal("1.50"), "1.5"),
            (1e21, "1000000000000000000000"),
            (1e-7, "0.0000001"),
            (math.inf, "Infinity"),
            (-math.inf, "-Infinity"),
        ],
    )
    def test_canonical(self, value: object, expected: str) -> None:
        """Positional notation, no trailing zeros."""
        assert normalize_for_export(value) == expected

    def test_nan(self) -> None:
        """NaN renders as "NaN"."""
        assert normalize_for_export(math.nan) == "NaN"

    def test_huge_int_stays_exact(self) -> None:
        """Ints beyond float range and str() digit limits are written out."""
        assert normalize_for_export(10**400) == "1" + "0" * 400
        assert normalize_for_export(-(10**5000)) == "-1" + "0" * 5000

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(Fraction(1, 2), "0.5"), (Fraction(-3, 4), "-0.75"), (Fraction(10**400, 3), "Infinity")],
    )
    def test_other_reals(self, value: Fraction, expected: str) -> None:
        """Non-float reals go through float, saturating instead of overflowing."""
        assert normalize_for_export(value) == expected


class TestLiteralHelpers:
    """Helpers shared by the parser and the export normalizer."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [("12.5.3", 12.5), ("-.5", -0.5), ("5.", 5.0), ("1-2", 1.0), ("", None), ("+-1", None)],
    )
    def test_leading_float(self, text: str, expected: float | None) -> None:
        """Longest leading float literal."""
        assert leading_float(text) == expected

    def test_canonical_number_text_int(self) -> None:
        """Large ints stay exact."""
        assert canonical_number_text(10**25) == "10000000000000000000000000"


class TestExportProperties:
    """Property-based invariants."""

    @given(st.text())
    @example("1.234,56")
    @example("1,2,3.4.5")
    @example("9" * 400)
    def test_idempotent(self, text: str) -> None:
        """normalize(normalize(s)) == normalize(s)."""
        once = normalize_for_export(text)
        assert normalize_for_export(once) == once

    @given(st.text(alphabet="0123456789,.-  abc€$"))
    def test_idempotent_by_position(self, text: str) -> None:
        """The positional mode is idempotent too."""
        once = normalize_for_export(text, resolve_by_position=True)
        assert normalize_for_export(once, resolve_by_position=True) == once

    @given(st.floats(allow_nan=False, allow_infinity=False))
    def test_float_text_recovers_value(self, value: float) -> None:
        """Canonical text of a float parses back to the same float."""
        assert float(normalize_for_export(value)) == value

    @pytest.mark.fuzz
    @settings(max_examples=5000)
    @given(st.text(alphabet=st.characters(codec="utf-8")))
    def test_idempotent_fuzz(self, text: str) -> None:
        """Wide-alphabet idempotence run."""
        once = normalize_for_export(text)
        assert normalize_for_export(once) == once
