"""Diagnostic formatting service.

Rust-style multi-line text backs exception messages; the single-line
simple style, truncated, backs warning log records.
"""

from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]

# Control characters are escaped so that hostile input cannot forge log lines.
_CONTROL_ESCAPES = {ord(ch): repr(ch)[1:-1] for ch in map(chr, range(32))}


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    RUST = "rust"  # Rust compiler-style output (default)
    SIMPLE = "simple"  # Single-line format


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Diagnostic formatting service.

    Attributes:
        output_format: Output style (rust for exception text, simple for log lines)
        sanitize: Truncate content to prevent information leakage
        max_content_length: Maximum content length when sanitizing

    Example:
        >>> formatter = DiagnosticFormatter()
        >>> diagnostic = ErrorTemplate.locale_unknown("xx")
        >>> print(formatter.format(diagnostic))
        error[LOCALE_UNKNOWN]: Unknown locale 'xx'
          = locale: xx
          = help: Use BCP 47 locale codes (e.g., 'en-US', 'de-DE', 'fr-FR')

        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(diagnostic))
        LOCALE_UNKNOWN: Unknown locale 'xx'
    """

    output_format: OutputFormat = OutputFormat.RUST
    sanitize: bool = False
    max_content_length: int = 100

    def format(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic.

        Args:
            diagnostic: Diagnostic to format

        Returns:
            Formatted diagnostic string
        """
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(diagnostic)
            case OutputFormat.SIMPLE:
                return self._format_simple(diagnostic)

    def format_text(self, text: str) -> str:
        """Escape and truncate a plain message the way diagnostics are."""
        return self._clean(text)

    def _format_rust(self, diagnostic: Diagnostic) -> str:
        parts = [
            f"{diagnostic.severity}[{diagnostic.code.name}]: "
            f"{self._clean(diagnostic.message)}"
        ]

        if diagnostic.locale_code:
            parts.append(f"  = locale: {self._clean(diagnostic.locale_code)}")

        if diagnostic.input_value is not None:
            parts.append(f"  = input: {self._maybe_sanitize(diagnostic.input_value)!r}")

        if diagnostic.hint:
            parts.append(f"  = help: {self._clean(diagnostic.hint)}")

        return "\n".join(parts)

    def _format_simple(self, diagnostic: Diagnostic) -> str:
        return f"{diagnostic.code.name}: {self._clean(diagnostic.message)}"

    def _clean(self, text: str) -> str:
        return self._maybe_sanitize(text).translate(_CONTROL_ESCAPES)

    def _maybe_sanitize(self, text: str) -> str:
        if self.sanitize and len(text) > self.max_content_length:
            return text[: self.max_content_length] + "..."
        return text
