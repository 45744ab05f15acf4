"""ExportNormalizer: locale-agnostic recovery of numeric strings for export.

Input comes from unknown sources (pasted text, third-party imports), so no
locale is consulted. Separator ambiguity is settled by a fixed heuristic:

    comma, no period   -> comma is the decimal separator   ("1234,56"  -> 1234.56)
    comma and period   -> commas are grouping, removed      ("1,234.56" -> 1234.56)
    otherwise          -> unchanged

With resolve_by_position=True the last separator in the string is the
decimal one whenever both occur ("1.234,56" -> 1234.56).

Unparsable input is returned trimmed but otherwise untouched, so an export
file never receives a sentinel in place of the original text.
"""

import logging
import numbers
from decimal import Decimal

from numcodec.runtime.locale_context import to_float

from .literals import (
    canonical_number_text,
    keep_numeric_characters,
    leading_float,
    strip_grouping_whitespace,
)

__all__ = ["normalize_for_export"]

logger = logging.getLogger(__name__)


def _resolve_separators(text: str, *, resolve_by_position: bool) -> str:
    has_comma = "," in text
    has_period = "." in text
    if has_comma and not has_period:
        return text.replace(",", ".")
    if has_comma and has_period:
        if resolve_by_position and text.rfind(",") > text.rfind("."):
            return text.replace(".", "").replace(",", ".")
        return text.replace(",", "")
    return text


def normalize_for_export(value: object, *, resolve_by_position: bool = False) -> str:
    """Canonical numeric string for export, or the trimmed original.

    Idempotent: normalizing an already normalized string returns it unchanged.

    Args:
        value: String of unknown locale, a number, or None
        resolve_by_position: When both ',' and '.' occur, treat the last one
            as the decimal separator instead of dropping commas

    Returns:
        Canonical string ("1234.56"), "" for None/blank, or the trimmed
        original when no number can be recovered

    Examples:
        >>> normalize_for_export("1,234.56")
        '1234.56'
        >>> normalize_for_export("1234,56")
        '1234.56'
        >>> normalize_for_export("1.234,56", resolve_by_position=True)
        '1234.56'
        >>> normalize_for_export("  n/a ")
        'n/a'
    """
    if value is None:
        return ""
    if isinstance(value, numbers.Real) and not isinstance(value, bool):
        if not isinstance(value, (numbers.Integral, Decimal)):
            value = to_float(value)
        return canonical_number_text(value)

    text = str(value).strip()
    if not text:
        return ""

    normalized = _resolve_separators(
        strip_grouping_whitespace(text), resolve_by_position=resolve_by_position
    )
    number = leading_float(keep_numeric_characters(normalized))
    if number is None:
        logger.debug("Keeping unparsable export value %r", text)
        return text
    return canonical_number_text(number)
