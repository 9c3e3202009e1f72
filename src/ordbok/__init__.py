"""Ordbok - runtime string localization from per-language dictionary files.

Selects an active language from a fallback queue, loads that language's
JSON dictionary, and answers lookups by flat or dot-nested key with
zero/one/other pluralization and ``%{name}`` interpolation.

Public API:
    Localizer - Active language, lookup, and language switching
    LocalizerConfig - Resolution and lookup options
    AtomicKey - Single-segment key that is never split on "."
    DirectoryResourceProvider - One ``<code>.lang`` file per language
    MappingResourceProvider - In-memory resources

Exceptions:
    OrdbokError - Base exception class
    LoadError - No resources, or a resource could not be read or parsed
    LanguageUnavailableError - set_language() with an unknown code
    KeyShapeError - Key points to a group of entries, not a final value
    FormatError - Template interpolation failed
    MissingKeyError - Absent key in strict mode
    MissingKeyWarning - Absent key, placeholder returned

Submodules:
    ordbok.localization - Providers, dictionaries, fallback, orchestrator
    ordbok.runtime - Plural selection, interpolation, locking
    ordbok.diagnostics - Error types and diagnostic codes
    ordbok.locale_utils - Host language detection (Babel)
"""

from .diagnostics import (
    FormatError,
    KeyShapeError,
    LanguageUnavailableError,
    LoadError,
    MissingKeyError,
    MissingKeyWarning,
    OrdbokError,
)
from .localization import (
    AtomicKey,
    DirectoryResourceProvider,
    Localizer,
    LocalizerConfig,
    MappingResourceProvider,
)

# Version information - Auto-populated from package metadata
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("ordbok")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "AtomicKey",
    "DirectoryResourceProvider",
    "FormatError",
    "KeyShapeError",
    "LanguageUnavailableError",
    "LoadError",
    "Localizer",
    "LocalizerConfig",
    "MappingResourceProvider",
    "MissingKeyError",
    "MissingKeyWarning",
    "OrdbokError",
    "__version__",
]
