"""Diagnostic system for Ordbok errors.

Provides the exception hierarchy and structured diagnostics with codes and hints.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    FormatError,
    KeyShapeError,
    LanguageUnavailableError,
    LoadError,
    MissingKeyError,
    MissingKeyWarning,
    OrdbokError,
)

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "FormatError",
    "KeyShapeError",
    "LanguageUnavailableError",
    "LoadError",
    "MissingKeyError",
    "MissingKeyWarning",
    "OrdbokError",
]
