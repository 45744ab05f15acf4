"""Diagnostic codes and data structures.

Defines error codes, categories, and diagnostic messages for recovered
transcoding failures.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
]


class ErrorCategory(StrEnum):
    """Error categorization for numcodec errors.

    Inherits from ``StrEnum`` so that log aggregation receives plain strings
    (``"locale"``, ``"parse"``, etc.) rather than ``"ErrorCategory.X"``.

    Categories:
        LOCALE: Unknown or malformed locale tag
        CURRENCY: Currency code absent from the registry or CLDR
        PARSE: String does not reduce to a numeric literal
        FORMATTING: Locale-aware formatting failure
    """

    LOCALE = "locale"
    CURRENCY = "currency"
    PARSE = "parse"
    FORMATTING = "formatting"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Locale errors
        2000-2999: Currency errors
        3000-3999: Parsing errors
        4000-4999: Formatting errors
    """

    # Locale errors (1000-1999)
    LOCALE_UNKNOWN = 1001
    LOCALE_PROBE_FAILED = 1002

    # Currency errors (2000-2999)
    CURRENCY_UNRESOLVED = 2001

    # Parsing errors (3000-3999)
    PARSE_INPUT_EMPTY = 3001
    PARSE_NUMBER_FAILED = 3002

    # Formatting errors (4000-4999)
    FORMATTING_FAILED = 4001

    @property
    def category(self) -> ErrorCategory:
        """Category derived from the code's numeric range."""
        match self.value // 1000:
            case 1:
                return ErrorCategory.LOCALE
            case 2:
                return ErrorCategory.CURRENCY
            case 3:
                return ErrorCategory.PARSE
            case _:
                return ErrorCategory.FORMATTING


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        locale_code: Locale involved in the failure (if any)
        input_value: Offending input, already stringified (if any)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    locale_code: str | None = None
    input_value: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    @property
    def category(self) -> ErrorCategory:
        """Category of the underlying code."""
        return self.code.category

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[LOCALE_UNKNOWN]: Unknown locale 'xx-INVALID'
              = locale: xx-INVALID
              = help: Use BCP 47 locale codes (e.g., 'en-US', 'de-DE')

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
