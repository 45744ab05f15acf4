"""Error message templates.

Centralized error message templates for testable, consistent error messages.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages testable and documents every recoverable error case.
    """

    # =========================================================================
    # LOCALE ERRORS (1000-1999)
    # =========================================================================

    @staticmethod
    def locale_unknown(locale_code: str) -> Diagnostic:
        """Unknown or malformed locale tag.

        Args:
            locale_code: The locale tag as supplied by the caller

        Returns:
            Diagnostic for LOCALE_UNKNOWN
        """
        msg = f"Unknown locale '{locale_code}'"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_UNKNOWN,
            message=msg,
            hint="Use BCP 47 locale codes (e.g., 'en-US', 'de-DE', 'fr-FR')",
            locale_code=locale_code,
        )

    @staticmethod
    def locale_probe_failed(locale_code: str, rendering: str) -> Diagnostic:
        """Separator probe produced an unrecognizable rendering.

        Args:
            locale_code: The locale whose probe failed
            rendering: The string the locale produced for the probe value

        Returns:
            Diagnostic for LOCALE_PROBE_FAILED
        """
        msg = f"Cannot read separators for locale '{locale_code}' from '{rendering}'"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_PROBE_FAILED,
            message=msg,
            hint="Locales with non-Latin digits are not supported for parsing",
            locale_code=locale_code,
            input_value=rendering,
        )

    # =========================================================================
    # CURRENCY ERRORS (2000-2999)
    # =========================================================================

    @staticmethod
    def currency_unresolved(currency_code: str) -> Diagnostic:
        """Currency code absent from the registry.

        Args:
            currency_code: The code that could not be resolved

        Returns:
            Diagnostic for CURRENCY_UNRESOLVED
        """
        msg = f"Currency '{currency_code}' is not defined"
        return Diagnostic(
            code=DiagnosticCode.CURRENCY_UNRESOLVED,
            message=msg,
            hint="Register a CurrencyDefinition for this code or use an ISO 4217 code",
            input_value=currency_code,
            severity="warning",
        )

    # =========================================================================
    # PARSING ERRORS (3000-3999)
    # =========================================================================

    @staticmethod
    def parse_input_empty(locale_code: str) -> Diagnostic:
        """Nothing to parse.

        Args:
            locale_code: The locale used for parsing

        Returns:
            Diagnostic for PARSE_INPUT_EMPTY
        """
        return Diagnostic(
            code=DiagnosticCode.PARSE_INPUT_EMPTY,
            message="Cannot parse an empty value",
            locale_code=locale_code,
            input_value="",
        )

    @staticmethod
    def parse_number_failed(value: str, locale_code: str, reason: str) -> Diagnostic:
        """Number parsing failed.

        Args:
            value: The input string that failed to parse
            locale_code: The locale used for parsing
            reason: The reason parsing failed

        Returns:
            Diagnostic for PARSE_NUMBER_FAILED
        """
        msg = f"Failed to parse number '{value}' for locale '{locale_code}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_NUMBER_FAILED,
            message=msg,
            hint="Check that the number format matches the locale's conventions",
            locale_code=locale_code,
            input_value=value,
        )

    # =========================================================================
    # FORMATTING ERRORS (4000-4999)
    # =========================================================================

    @staticmethod
    def formatting_failed(value: str, locale_code: str, reason: str) -> Diagnostic:
        """Locale formatting failed for a valid locale.

        Args:
            value: The value that failed to format
            locale_code: The locale used for formatting
            reason: The underlying Babel error

        Returns:
            Diagnostic for FORMATTING_FAILED
        """
        msg = f"Number formatting failed for '{value}' in locale '{locale_code}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.FORMATTING_FAILED,
            message=msg,
            locale_code=locale_code,
            input_value=value,
        )
