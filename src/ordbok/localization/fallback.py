"""Language selection from a fallback queue.

Queue precedence: explicitly requested language, host locale hint, fixed
default, then the first available language as a last resort. Which language
is "first available" follows the provider's enumeration order and is not
otherwise guaranteed.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Collection, Iterable, Sequence

from ordbok.constants import DEFAULT_LANGUAGE
from ordbok.localization.types import LanguageCode

__all__ = [
    "build_fallback_queue",
    "resolve_language",
]


def resolve_language(
    candidates: Iterable[LanguageCode],
    available: Collection[LanguageCode],
) -> LanguageCode | None:
    """Return the first candidate present in available.

    Duplicates in candidates are harmless. Absence is a valid outcome.

    Example:
        >>> resolve_language(["fr-FR", "en-US"], {"en-US", "sv-SE"})
        'en-US'
        >>> resolve_language(["fr-FR"], {"en-US"}) is None
        True
    """
    for candidate in candidates:
        if candidate in available:
            return candidate
    return None


def build_fallback_queue(
    available: Sequence[LanguageCode],
    *,
    requested: LanguageCode | None = None,
    host_hint: LanguageCode | None = None,
    default: LanguageCode = DEFAULT_LANGUAGE,
) -> tuple[LanguageCode, ...]:
    """Build the ordered candidate queue for language resolution.

    Args:
        available: Available codes in enumeration order
        requested: Language explicitly asked for by the caller
        host_hint: Language of the surrounding environment
        default: Fixed default language

    Returns:
        Candidate codes in priority order, duplicates removed
    """
    queue: list[LanguageCode] = []
    if requested:
        queue.append(requested)
    if host_hint:
        queue.append(host_hint)
    queue.append(default)
    if available:
        queue.append(available[0])
    # dict.fromkeys() removes duplicates while maintaining insertion order
    return tuple(dict.fromkeys(queue))
