"""Localization package for Localizer.

Provides the full lookup stack: type aliases and keys, resource providers,
dictionary parsing, language fallback, configuration, and the orchestrator.

Submodules:
    types        - PEP 695 type aliases (LanguageCode, Template, FormatParams)
    keys         - AtomicKey, KeyPath, normalize_key
    loading      - ResourceProvider protocol, DirectoryResourceProvider,
                   MappingResourceProvider, LoadAttempt
    dictionary   - Dictionary, DictionaryStore, parse_dictionary
    fallback     - resolve_language, build_fallback_queue
    config       - LocalizerConfig
    orchestrator - Localizer

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from ordbok.enums import LoadStatus
from ordbok.localization.config import LocalizerConfig
from ordbok.localization.dictionary import Dictionary, DictionaryStore, parse_dictionary
from ordbok.localization.fallback import build_fallback_queue, resolve_language
from ordbok.localization.keys import AtomicKey, Key, KeyPath, normalize_key
from ordbok.localization.loading import (
    DirectoryResourceProvider,
    LoadAttempt,
    MappingResourceProvider,
    ResourceProvider,
)
from ordbok.localization.orchestrator import Localizer
from ordbok.localization.types import DictionaryNode, FormatParams, LanguageCode, Template

__all__ = [
    # Main orchestrator
    "Localizer",
    "LocalizerConfig",
    # Provider protocol and implementations
    "ResourceProvider",
    "DirectoryResourceProvider",
    "MappingResourceProvider",
    # Load tracking
    "LoadStatus",
    "LoadAttempt",
    # Dictionaries
    "Dictionary",
    "DictionaryStore",
    "parse_dictionary",
    # Language fallback
    "build_fallback_queue",
    "resolve_language",
    # Keys
    "AtomicKey",
    "Key",
    "KeyPath",
    "normalize_key",
    # Type aliases for user code type annotations
    "DictionaryNode",
    "FormatParams",
    "LanguageCode",
    "Template",
]
