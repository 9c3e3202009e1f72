"""Enumerations for Ordbok type-safe constants.

Uses StrEnum so members compare equal to (and serialize as) plain strings.

Python 3.13+.
"""

from enum import StrEnum


class PluralCategory(StrEnum):
    """Selectable children of a pluralization node.

    Only the English-like zero/one/other pattern is modeled. Languages with
    additional grammatical categories (two, few, many) are not supported.
    """

    ZERO = "zero"
    """Used for a count of exactly zero, when present."""

    ONE = "one"
    """Used for a count of exactly one, when present."""

    OTHER = "other"
    """Required. Used for every other count."""


class LoadStatus(StrEnum):
    """Outcome of a single language load attempt."""

    LOADED = "loaded"
    """Resource read, parsed, and activated."""

    UNAVAILABLE = "unavailable"
    """No resource exists for the language."""

    FAILED = "failed"
    """Resource exists but could not be read or parsed."""


__all__ = [
    "LoadStatus",
    "PluralCategory",
]
