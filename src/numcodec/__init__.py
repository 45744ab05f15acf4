"""numcodec - Locale-aware bidirectional numeric text transcoding.

Converts numbers into locale- and currency-specific display strings and
back, normalizes numeric strings of unknown origin for export, and masks
amounts for privacy mode without changing their visible length.

Public API:
    format_number - Number -> display string ("" for no value)
    parse_number - Display string -> float (math.nan on failure)
    normalize_for_export - Unknown-locale string -> canonical numeric string
    mask_number - Number -> privacy-masked display string
    FormatOptions - Typed, validated rendering options
    DisplaySettings - Per-call user preferences (locale, currency, privacy)

No public function raises; degraded results are visible through
format_number_result() / parse_number_result().

Submodules:
    numcodec.currency - Currency definitions and registry
    numcodec.runtime - Formatter, masker, locale context and provider
    numcodec.parsing - Parser and export normalizer
    numcodec.diagnostics - Error types and diagnostics
"""

from .currency import CurrencyDefinition, CurrencyRegistry, default_registry
from .diagnostics import (
    InvalidLocaleError,
    NumcodecError,
    UnparsableInputError,
    UnresolvedCurrencyError,
)
from .display import DisplaySettings, format_for_display, parse_for_display
from .enums import FormatStyle, FormatTier, SymbolPosition
from .parsing import ParseResult, normalize_for_export, parse_number, parse_number_result
from .runtime import (
    FormatOptions,
    FormatResult,
    format_number,
    format_number_result,
    mask_number,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("numcodec")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CurrencyDefinition",
    "CurrencyRegistry",
    "DisplaySettings",
    "FormatOptions",
    "FormatResult",
    "FormatStyle",
    "FormatTier",
    "InvalidLocaleError",
    "NumcodecError",
    "ParseResult",
    "SymbolPosition",
    "UnparsableInputError",
    "UnresolvedCurrencyError",
    "__version__",
    "default_registry",
    "format_for_display",
    "format_number",
    "format_number_result",
    "mask_number",
    "normalize_for_export",
    "parse_for_display",
    "parse_number",
    "parse_number_result",
]
