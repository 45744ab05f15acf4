"""FormatOptions value object.

Replaces free-form option dictionaries with a typed, validated struct.
Instances are constructed per call and carry no identity beyond their fields.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass

from numcodec.constants import DEFAULT_FRACTION_DIGITS, MAX_FRACTION_DIGITS
from numcodec.enums import FormatStyle

__all__ = ["FormatOptions"]


def _check_digits(name: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"FormatOptions.{name} must be an int, got {type(value).__name__}"
        raise TypeError(msg)
    if not 0 <= value <= MAX_FRACTION_DIGITS:
        msg = f"FormatOptions.{name} must be in 0..{MAX_FRACTION_DIGITS}, got {value}"
        raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class FormatOptions:
    """Options governing how a number is rendered.

    Attributes:
        style: DECIMAL for plain numbers, CURRENCY for symbol placement
        currency_code: Registry code used when style is CURRENCY
        min_fraction_digits: Fraction digits always shown (zero padded)
        max_fraction_digits: Fraction digits kept after rounding
        use_grouping: Render the locale's grouping separator

    Example:
        >>> FormatOptions.currency("EUR").is_currency
        True

        >>> FormatOptions(min_fraction_digits=3, max_fraction_digits=1)
        Traceback (most recent call last):
            ...
        ValueError: FormatOptions.max_fraction_digits (1) must be >= min_fraction_digits (3)
    """

    style: FormatStyle = FormatStyle.DECIMAL
    currency_code: str | None = None
    min_fraction_digits: int = DEFAULT_FRACTION_DIGITS
    max_fraction_digits: int = DEFAULT_FRACTION_DIGITS
    use_grouping: bool = True

    def __post_init__(self) -> None:
        """Validate option invariants.

        Raises:
            TypeError: If fraction digits are not integers.
            ValueError: If style is unknown, fraction digits are out of range,
                or max_fraction_digits < min_fraction_digits.
        """
        if not isinstance(self.style, FormatStyle):
            # Plain strings ("currency") are accepted and coerced.
            object.__setattr__(self, "style", FormatStyle(self.style))
        _check_digits("min_fraction_digits", self.min_fraction_digits)
        _check_digits("max_fraction_digits", self.max_fraction_digits)
        if self.max_fraction_digits < self.min_fraction_digits:
            msg = (
                f"FormatOptions.max_fraction_digits ({self.max_fraction_digits}) "
                f"must be >= min_fraction_digits ({self.min_fraction_digits})"
            )
            raise ValueError(msg)

    @classmethod
    def decimal(
        cls,
        *,
        min_fraction_digits: int = DEFAULT_FRACTION_DIGITS,
        max_fraction_digits: int = DEFAULT_FRACTION_DIGITS,
        use_grouping: bool = True,
    ) -> FormatOptions:
        """Options for a plain locale-aware decimal."""
        return cls(
            style=FormatStyle.DECIMAL,
            min_fraction_digits=min_fraction_digits,
            max_fraction_digits=max_fraction_digits,
            use_grouping=use_grouping,
        )

    @classmethod
    def currency(
        cls,
        currency_code: str | None = None,
        *,
        min_fraction_digits: int = DEFAULT_FRACTION_DIGITS,
        max_fraction_digits: int = DEFAULT_FRACTION_DIGITS,
        use_grouping: bool = True,
    ) -> FormatOptions:
        """Options for a currency amount (code may be filled in later)."""
        return cls(
            style=FormatStyle.CURRENCY,
            currency_code=currency_code,
            min_fraction_digits=min_fraction_digits,
            max_fraction_digits=max_fraction_digits,
            use_grouping=use_grouping,
        )

    @property
    def is_currency(self) -> bool:
        """True when the CURRENCY style is requested."""
        return self.style is FormatStyle.CURRENCY

    def as_decimal(self) -> FormatOptions:
        """Same digit and grouping options, DECIMAL style, no currency."""
        return dataclasses.replace(self, style=FormatStyle.DECIMAL, currency_code=None)

    def with_currency(self, currency_code: str) -> FormatOptions:
        """Copy with the currency code replaced."""
        return dataclasses.replace(self, currency_code=currency_code)
