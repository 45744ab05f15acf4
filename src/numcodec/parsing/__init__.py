"""Bi-directional transcoding: display strings back to numbers.

- Functions NEVER raise exceptions
- parse_number() returns math.nan on failure
- normalize_for_export() returns the trimmed original on failure

This module provides the inverse operations to numcodec.runtime.formatter:
- Formatting: number -> locale-aware display string
- Parsing: locale-aware display string -> number
- Export: string of unknown locale -> canonical numeric string

Public API:
    parse_number - Returns float (math.nan on failure)
    parse_number_result - Returns ParseResult(value, errors)
    normalize_for_export - Returns canonical numeric string or the original
"""

from .export import normalize_for_export
from .numbers import ParseResult, parse_number, parse_number_result

__all__ = [
    "ParseResult",
    "normalize_for_export",
    "parse_number",
    "parse_number_result",
]
