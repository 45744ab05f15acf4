"""Diagnostic system for numcodec errors.

Provides structured error diagnostics with codes, categories and hints.
Inspired by Rust compiler diagnostics and Elm error messages.
"""

from .codes import Diagnostic, DiagnosticCode, ErrorCategory
from .errors import (
    FormattingError,
    InvalidLocaleError,
    NumcodecError,
    UnparsableInputError,
    UnresolvedCurrencyError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorCategory",
    "ErrorTemplate",
    "FormattingError",
    "InvalidLocaleError",
    "NumcodecError",
    "OutputFormat",
    "UnparsableInputError",
    "UnresolvedCurrencyError",
]
