"""Lookup keys.

A key is either atomic (one segment, taken verbatim even if it contains a
dot) or a path of segments. Plain strings are split on "." into a path.
Every key is normalized to a KeyPath once, before the dictionary is walked.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from ordbok.constants import KEY_SEPARATOR

__all__ = [
    "AtomicKey",
    "Key",
    "KeyPath",
    "normalize_key",
]


@dataclass(frozen=True, slots=True)
class AtomicKey:
    """Single-segment key, never split.

    Example:
        >>> l10n.lookup(AtomicKey("version.label"))  # top-level "version.label"
    """

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class KeyPath:
    """Ordered path of segments from the dictionary root.

    Attributes:
        segments: Non-empty tuple of key segments
    """

    segments: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.segments:
            msg = "KeyPath requires at least one segment"
            raise ValueError(msg)

    @classmethod
    def parse(cls, dotted: str) -> KeyPath:
        """Split a dotted string key into a path.

        Example:
            >>> KeyPath.parse("inbox.unread").segments
            ('inbox', 'unread')
        """
        return cls(tuple(dotted.split(KEY_SEPARATOR)))

    def __str__(self) -> str:
        return KEY_SEPARATOR.join(self.segments)


type Key = str | AtomicKey | KeyPath | Sequence[str]


def normalize_key(key: Key) -> KeyPath:
    """Normalize any accepted key shape to a KeyPath.

    Args:
        key: Dotted string, AtomicKey, KeyPath, or a sequence of segments

    Returns:
        KeyPath to walk from the dictionary root

    Raises:
        TypeError: If key is none of the accepted shapes
        ValueError: If a sequence key is empty
    """
    match key:
        case KeyPath():
            return key
        case AtomicKey(name=name):
            return KeyPath((name,))
        case str():
            return KeyPath.parse(key)
        case Sequence() if all(isinstance(segment, str) for segment in key):
            return KeyPath(tuple(key))
        case _:
            msg = f"Unsupported key type: {type(key).__name__}"
            raise TypeError(msg)
