"""Host language detection and language code helpers.

Resource files are named with hyphenated codes (en-US) while the host
environment reports POSIX identifiers (en_US.UTF-8). These helpers bridge
the two using Babel's locale parsing.

Python 3.13+. Depends on Babel.
"""

from __future__ import annotations

import functools
import logging
from typing import TYPE_CHECKING

from babel.core import UnknownLocaleError, default_locale, get_locale_identifier, parse_locale

from ordbok.constants import PSEUDO_LOCALES

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "clear_locale_cache",
    "describe_language",
    "get_babel_locale",
    "get_host_language",
    "normalize_language_code",
]

logger = logging.getLogger(__name__)

# Babel maps the C/POSIX pseudo-locales to this identifier.
_BABEL_POSIX_LOCALE = "en_US_POSIX"


def normalize_language_code(identifier: str) -> str | None:
    """Convert a POSIX or BCP-47 identifier to the hyphenated resource form.

    Encoding suffixes and modifiers are dropped.

    Args:
        identifier: Locale identifier (e.g., "de_DE.UTF-8", "sv-SE", "sr_Latn_RS")

    Returns:
        Hyphenated code (e.g., "de-DE"), or None for pseudo-locales and
        identifiers Babel cannot parse

    Example:
        >>> normalize_language_code("de_DE.UTF-8")
        'de-DE'
        >>> normalize_language_code("C") is None
        True
    """
    stripped = identifier.strip().split(".", 1)[0].split("@", 1)[0]
    if not stripped or stripped in PSEUDO_LOCALES or stripped == _BABEL_POSIX_LOCALE:
        return None
    sep = "-" if "-" in stripped else "_"
    try:
        parts = parse_locale(stripped, sep=sep)
    except ValueError:
        logger.debug("Unparseable locale identifier: %r", identifier)
        return None
    return get_locale_identifier(parts, sep="-")


def get_host_language() -> str | None:
    """Detect the language of the surrounding environment.

    Reads LANGUAGE, LC_ALL, LC_CTYPE and LANG (in that order) via Babel.

    Returns:
        Hyphenated language code, or None if undetermined
    """
    detected = default_locale()
    if detected is None:
        return None
    return normalize_language_code(detected)


@functools.lru_cache(maxsize=128)
def get_babel_locale(language: str) -> Locale:
    """Get a Babel Locale for a hyphenated or POSIX code, with caching.

    Raises:
        babel.core.UnknownLocaleError: If Babel has no data for the locale
        ValueError: If the code is malformed
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(language, sep="-" if "-" in language else "_")


def clear_locale_cache() -> None:
    """Clear the cached Babel Locale objects."""
    get_babel_locale.cache_clear()


def describe_language(language: str, display_language: str | None = None) -> str | None:
    """Return a display name for language, for use in language pickers.

    Args:
        language: Language code to describe
        display_language: Language to write the name in (default: language itself)

    Returns:
        Display name (e.g., "svenska (Sverige)"), or None if Babel does not
        know either code

    Example:
        >>> describe_language("en-US")
        'English (United States)'
        >>> describe_language("sv-SE", "en-US")
        'Swedish (Sweden)'
    """
    try:
        locale = get_babel_locale(language)
        target = get_babel_locale(display_language) if display_language else locale
    except (UnknownLocaleError, ValueError):
        return None
    return locale.get_display_name(target)
