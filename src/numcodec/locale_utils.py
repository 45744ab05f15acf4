"""Locale utilities for BCP-47 to POSIX conversion.

Centralizes locale format normalization used throughout the codebase.
Locale tags stay opaque to the rest of the package; they are only
normalized here, at the Babel boundary.
"""

from __future__ import annotations

import functools
import logging
import os
from collections.abc import Iterator
from typing import TYPE_CHECKING

from numcodec.constants import DEFAULT_LOCALE

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "clear_locale_cache",
    "get_babel_locale",
    "get_system_locale",
    "normalize_locale",
]

logger = logging.getLogger(__name__)


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).
    Surrounding whitespace is dropped so values read from settings files
    behave like their trimmed form.

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "pt-BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale(" de-CH ")
        'de_CH'
        >>> normalize_locale("en")  # Already normalized
        'en'
    """
    return locale_code.strip().replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Parses the locale code once and caches the result.
    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid

    Example:
        >>> locale = get_babel_locale("de-DE")
        >>> locale.language
        'de'
        >>> locale.territory
        'DE'
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def clear_locale_cache() -> None:
    """Clear the cached Babel Locale objects (useful in tests)."""
    get_babel_locale.cache_clear()


def _system_locale_candidates() -> Iterator[str]:
    """Raw locale tags from the OS, then LC_ALL, LC_MESSAGES and LANG."""
    import locale as locale_module  # noqa: PLC0415

    try:
        os_locale, _ = locale_module.getlocale()
    except ValueError:
        os_locale = None
    if os_locale:
        yield os_locale
    for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
        value = os.environ.get(var)
        if value:
            yield value


def get_system_locale() -> str:
    """Detect the runtime default locale as a tag Babel can load.

    Candidates are tried in order: ``locale.getlocale()``, then the
    ``LC_ALL``, ``LC_MESSAGES`` and ``LANG`` environment variables. Encoding
    suffixes (``.UTF-8``) and modifiers (``@euro``) are stripped, and the
    ``C``/``POSIX`` pseudo-locales are skipped. A candidate Babel cannot
    load (for instance a Windows name like ``English_United States``) is
    skipped as well, so the result is always usable by the formatter.

    Returns:
        Babel's POSIX identifier for the first usable candidate, or
        DEFAULT_LOCALE when none is usable.

    Example:
        >>> import os
        >>> os.environ['LANG'] = 'de_DE.UTF-8'
        >>> get_system_locale()
        'de_DE'
    """
    from babel import UnknownLocaleError  # noqa: PLC0415

    for raw in _system_locale_candidates():
        tag = raw.split(".")[0].split("@")[0].strip()
        if not tag or tag in ("C", "POSIX"):
            continue
        try:
            return str(get_babel_locale(tag))
        except (UnknownLocaleError, ValueError):
            logger.debug("Ignoring system locale '%s': not a known locale", raw)
    return DEFAULT_LOCALE
