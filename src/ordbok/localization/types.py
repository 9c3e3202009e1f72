"""Type aliases for the localization domain.

Provides semantic type aliases used throughout the localization package
and by user code when annotating Localizer call sites.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping

__all__ = [
    "DictionaryNode",
    "FormatParams",
    "LanguageCode",
    "Template",
]

type LanguageCode = str
"""Resource identifier for one language (e.g., 'en-US', 'sv-SE'). Exact match."""

type Template = str
"""Format template stored at a dictionary leaf (e.g., 'Hello %{name}!')."""

type DictionaryNode = Template | Mapping[str, DictionaryNode]
"""A dictionary leaf or a mapping from key segment to sub-node."""

type FormatParams = Mapping[str, object]
"""Interpolation values by name. A numeric 'count' also drives plural selection."""
