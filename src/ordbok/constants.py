"""Shared constants for Ordbok.

Placing constants here avoids circular imports between the localization and
runtime packages.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Language selection
    "DEFAULT_LANGUAGE",
    # Resource files
    "RESOURCE_EXTENSION",
    "RESOURCE_ENCODING",
    "MAX_RESOURCE_SIZE",
    "MAX_RESOURCE_DEPTH",
    # Keys
    "KEY_SEPARATOR",
    # Host locale
    "PSEUDO_LOCALES",
]

# Queue position (3): tried after the explicit request and the host hint.
DEFAULT_LANGUAGE = "en-US"

# One file per language; the file stem is the language code.
RESOURCE_EXTENSION = ".lang"
RESOURCE_ENCODING = "utf-8"

# 10 MiB. Dictionaries are read whole into memory on every activation.
MAX_RESOURCE_SIZE = 10 * 1024 * 1024

# Nesting limit for objects and arrays in a resource. Real dictionaries stay
# within a handful of levels; deeper input is malformed or adversarial.
MAX_RESOURCE_DEPTH = 100

KEY_SEPARATOR = "."

# POSIX locale names that carry no language information.
PSEUDO_LOCALES = frozenset({"C", "POSIX"})
