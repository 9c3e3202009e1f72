"""Ordbok exception hierarchy with structured diagnostics.

Loading failures are fatal to the operation that triggered them. Lookup
failures split in two: a key pointing at a group of entries is a defect and
raises KeyShapeError, while an absent key is an authoring gap that degrades to
a visible placeholder and only emits MissingKeyWarning.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "FormatError",
    "KeyShapeError",
    "LanguageUnavailableError",
    "LoadError",
    "MissingKeyError",
    "MissingKeyWarning",
    "OrdbokError",
]


class OrdbokError(Exception):
    """Base exception for all Ordbok errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize OrdbokError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class LoadError(OrdbokError):
    """No language resource could be found, read, or parsed.

    Fatal to construction. During set_language() it aborts the call and
    leaves the active language untouched.

    Attributes:
        language: Language code whose resource failed (None if not specific)
    """

    def __init__(self, message: str | Diagnostic, *, language: str | None = None) -> None:
        super().__init__(message)
        self.language = language


class LanguageUnavailableError(OrdbokError, ValueError):
    """Requested language has no resource at the resource location."""

    def __init__(self, message: str | Diagnostic, *, language: str) -> None:
        super().__init__(message)
        self.language = language


class KeyShapeError(OrdbokError, LookupError):
    """Key resolves to a group of entries, not a final value.

    Raised when the resolved node is a mapping that cannot be narrowed to a
    template: a plural node looked up without a numeric count, or any other
    nested group.
    """

    def __init__(self, message: str | Diagnostic, *, key: str) -> None:
        super().__init__(message)
        self.key = key


class MissingKeyError(OrdbokError, LookupError):
    """Key is absent from the active dictionary (strict mode only)."""

    def __init__(self, message: str | Diagnostic, *, key: str) -> None:
        super().__init__(message)
        self.key = key


class FormatError(OrdbokError, ValueError):
    """Template interpolation failed.

    The underlying KeyError/ValueError/TypeError is chained as __cause__.
    """


class MissingKeyWarning(UserWarning):
    """Lookup key is absent; the stringified key was returned instead."""
