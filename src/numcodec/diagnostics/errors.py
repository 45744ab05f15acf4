"""numcodec exception hierarchy with structured diagnostics.

Public transcoding operations never raise these. Lower layers (locale
context, provider, CLDR currency lookup) raise them and the public
operations recover, recording the instances in their result objects.
"""

from .codes import Diagnostic, ErrorCategory
from .formatter import DiagnosticFormatter, OutputFormat

__all__ = [
    "FormattingError",
    "InvalidLocaleError",
    "NumcodecError",
    "UnparsableInputError",
    "UnresolvedCurrencyError",
]

# One line, control characters escaped, long input cut short.
_LOG_FORMATTER = DiagnosticFormatter(
    output_format=OutputFormat.SIMPLE, sanitize=True, max_content_length=80
)


class NumcodecError(Exception):
    """Base exception for all numcodec errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    category: ErrorCategory = ErrorCategory.FORMATTING

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize NumcodecError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)

    @property
    def summary(self) -> str:
        """Single-line rendering for log records.

        Example:
            >>> InvalidLocaleError(ErrorTemplate.locale_unknown("xx")).summary
            "LOCALE_UNKNOWN: Unknown locale 'xx'"
        """
        if self.diagnostic is None:
            return _LOG_FORMATTER.format_text(str(self))
        return _LOG_FORMATTER.format(self.diagnostic)


class InvalidLocaleError(NumcodecError):
    """Locale tag is unknown to CLDR or malformed.

    Recovery: the formatter retries with the runtime default locale, the
    parser falls back to comma stripping.

    Attributes:
        locale_code: The locale tag as supplied by the caller
    """

    category = ErrorCategory.LOCALE

    def __init__(self, message: str | Diagnostic, *, locale_code: str = "") -> None:
        super().__init__(message)
        self.locale_code = locale_code


class UnresolvedCurrencyError(NumcodecError):
    """Currency code is absent from the registry (or from CLDR).

    Recovery: the formatter renders a plain decimal without a symbol.

    Attributes:
        currency_code: The code that could not be resolved
    """

    category = ErrorCategory.CURRENCY

    def __init__(self, message: str | Diagnostic, *, currency_code: str = "") -> None:
        super().__init__(message)
        self.currency_code = currency_code


class UnparsableInputError(NumcodecError):
    """Input does not reduce to a numeric literal.

    Recovery: the parser returns the NaN sentinel, the export normalizer
    returns the trimmed original.

    Attributes:
        input_value: The string that failed to parse
        locale_code: The locale used for parsing
    """

    category = ErrorCategory.PARSE

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        input_value: str = "",
        locale_code: str = "",
    ) -> None:
        super().__init__(message)
        self.input_value = input_value
        self.locale_code = locale_code


class FormattingError(NumcodecError):
    """Raised when locale-aware formatting fails for a valid locale.

    The error carries a fallback_value for callers that catch it from
    LocaleContext.format_number directly. The public formatter never reads
    it: it moves on to its next tier and renders the fixed-point text itself.

    Attributes:
        fallback_value: Plain str() of the value that failed (informational)
    """

    category = ErrorCategory.FORMATTING

    def __init__(self, message: str | Diagnostic, fallback_value: str) -> None:
        super().__init__(message)
        self.fallback_value = fallback_value
