"""Dictionary parsing and nested key access.

A language resource is a UTF-8 JSON document whose root is an object.
Objects become read-only mappings, strings are templates. Parsing does not
validate the schema beyond that; shape problems surface at lookup time.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING

from ordbok.constants import MAX_RESOURCE_DEPTH, MAX_RESOURCE_SIZE
from ordbok.diagnostics import Diagnostic, DiagnosticCode, LoadError

if TYPE_CHECKING:
    from ordbok.localization.keys import KeyPath
    from ordbok.localization.loading import ResourceProvider
    from ordbok.localization.types import LanguageCode

__all__ = [
    "Dictionary",
    "DictionaryStore",
    "parse_dictionary",
]

logger = logging.getLogger(__name__)


def _freeze(node: object, depth: int = 0) -> object:
    """Recursively convert parsed JSON objects into read-only mappings.

    Raises:
        ValueError: If objects or arrays nest deeper than MAX_RESOURCE_DEPTH
    """
    if isinstance(node, (dict, list)) and depth >= MAX_RESOURCE_DEPTH:
        msg = f"Resource nesting exceeds {MAX_RESOURCE_DEPTH} levels"
        raise ValueError(msg)
    if isinstance(node, dict):
        return MappingProxyType({str(k): _freeze(v, depth + 1) for k, v in node.items()})
    if isinstance(node, list):
        return tuple(_freeze(item, depth + 1) for item in node)
    return node


class Dictionary:
    """Parsed, immutable tree of templates for one language.

    Attributes:
        language: Language code the tree was loaded for
        root: Read-only top-level mapping
    """

    __slots__ = ("_root", "language")

    def __init__(self, language: LanguageCode, root: Mapping[str, object]) -> None:
        self.language = language
        self._root = root

    @property
    def root(self) -> Mapping[str, object]:
        return self._root

    def resolve(self, path: KeyPath) -> object | None:
        """Walk the tree along path.

        Returns:
            The node at path, or None when any segment is absent, when an
            intermediate segment lands on a non-mapping value, or when the
            stored value is JSON null.
        """
        node: object = self._root
        for segment in path.segments:
            if not isinstance(node, Mapping):
                return None
            node = node.get(segment)
            if node is None:
                return None
        return node

    def __repr__(self) -> str:
        return f"Dictionary(language={self.language!r}, entries={len(self._root)})"


def _too_deep(language: LanguageCode, source: str | None) -> LoadError:
    diagnostic = Diagnostic(
        code=DiagnosticCode.RESOURCE_INVALID,
        message=f"Resource nesting exceeds {MAX_RESOURCE_DEPTH} levels",
        hint="Flatten the dictionary; keys rarely need more than a few levels",
        language=language,
        source=source,
    )
    return LoadError(diagnostic, language=language)


def parse_dictionary(
    raw: bytes | str,
    language: LanguageCode,
    *,
    source: str | None = None,
) -> Dictionary:
    """Parse raw resource content into a Dictionary.

    Args:
        raw: Resource content, bytes are decoded as UTF-8 (BOM tolerated)
        language: Language code the content belongs to
        source: Human-readable location for diagnostics

    Returns:
        Dictionary for language

    Raises:
        LoadError: If content is too large, not UTF-8, not JSON, nested too
            deeply, or its root is not an object
    """
    if len(raw) > MAX_RESOURCE_SIZE:
        diagnostic = Diagnostic(
            code=DiagnosticCode.RESOURCE_INVALID,
            message=f"Resource exceeds {MAX_RESOURCE_SIZE} bytes",
            language=language,
            source=source,
        )
        raise LoadError(diagnostic, language=language)

    try:
        text = raw.decode("utf-8-sig") if isinstance(raw, bytes) else raw
        parsed = json.loads(text)
    except UnicodeDecodeError as e:
        diagnostic = Diagnostic(
            code=DiagnosticCode.RESOURCE_INVALID,
            message=f"Resource is not valid UTF-8: {e.reason}",
            language=language,
            source=source,
        )
        raise LoadError(diagnostic, language=language) from e
    except json.JSONDecodeError as e:
        diagnostic = Diagnostic(
            code=DiagnosticCode.RESOURCE_INVALID,
            message=f"Resource is not valid JSON: {e.msg} (line {e.lineno}, column {e.colno})",
            hint="Check for trailing commas and unquoted keys",
            language=language,
            source=source,
        )
        raise LoadError(diagnostic, language=language) from e
    except RecursionError as e:
        raise _too_deep(language, source) from e

    if not isinstance(parsed, dict):
        diagnostic = Diagnostic(
            code=DiagnosticCode.RESOURCE_INVALID,
            message=f"Resource root must be an object, got {type(parsed).__name__}",
            language=language,
            source=source,
        )
        raise LoadError(diagnostic, language=language)

    try:
        root = _freeze(parsed)
    except ValueError as e:
        raise _too_deep(language, source) from e
    assert isinstance(root, Mapping)  # noqa: S101 - _freeze maps dict to mapping
    logger.debug("Parsed dictionary for %s: %d top-level entries", language, len(root))
    return Dictionary(language, root)


class DictionaryStore:
    """Loads dictionaries from a resource provider.

    No caching: each call reads and parses the resource again, so a language
    activation always sees the current file content.
    """

    __slots__ = ("_provider",)

    def __init__(self, provider: ResourceProvider) -> None:
        self._provider = provider

    def load(self, language: LanguageCode) -> Dictionary:
        """Read and parse the resource for language.

        Raises:
            LoadError: If the resource cannot be located, read, or parsed
        """
        source = self._provider.describe(language)
        try:
            raw = self._provider.read(language)
        except FileNotFoundError as e:
            diagnostic = Diagnostic(
                code=DiagnosticCode.LANGUAGE_UNAVAILABLE,
                message=f"No resource for language '{language}'",
                language=language,
                source=source,
            )
            raise LoadError(diagnostic, language=language) from e
        except (OSError, ValueError) as e:
            diagnostic = Diagnostic(
                code=DiagnosticCode.RESOURCE_UNREADABLE,
                message=f"Cannot read resource: {e}",
                language=language,
                source=source,
            )
            raise LoadError(diagnostic, language=language) from e

        return parse_dictionary(raw, language, source=source)
