"""Resource discovery and loading infrastructure for Localizer.

Provides the protocol for language resource providers, a filesystem
implementation following the one-file-per-language convention, an
in-memory implementation, and the record type used to track load attempts.

Components:
    ResourceProvider - Protocol for enumerating and reading language resources
    DirectoryResourceProvider - Disk-based provider (<dir>/<language>.lang)
    MappingResourceProvider - In-memory provider keyed by language code
    LoadAttempt - Immutable result of a single language load attempt

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path
from typing import Protocol

from ordbok.constants import MAX_RESOURCE_SIZE, RESOURCE_ENCODING, RESOURCE_EXTENSION
from ordbok.enums import LoadStatus
from ordbok.localization.types import LanguageCode

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Protocol
    "ResourceProvider",
    # Concrete providers
    "DirectoryResourceProvider",
    "MappingResourceProvider",
    # Load tracking
    "LoadAttempt",
]


class ResourceProvider(Protocol):
    """Protocol for enumerating and reading per-language resources.

    This is a Protocol (structural typing) rather than ABC so hosts can
    serve resources from archives, package data, or network caches.

    Example:
        >>> class ZipProvider:
        ...     def list_languages(self) -> tuple[str, ...]: ...
        ...     def has_language(self, language: str) -> bool: ...
        ...     def read(self, language: str) -> bytes: ...
        ...     def describe(self, language: str) -> str: ...
    """

    def list_languages(self) -> tuple[LanguageCode, ...]:
        """Return the available language codes in enumeration order."""
        ...

    def has_language(self, language: LanguageCode) -> bool:
        """Check whether a resource exists for language. Never raises."""
        ...

    def read(self, language: LanguageCode) -> bytes:
        """Return the raw resource content for language.

        Raises:
            FileNotFoundError: If no resource exists for language
            OSError: If the resource cannot be read
            ValueError: If language is not a valid resource identifier
        """
        ...

    def describe(self, language: LanguageCode) -> str:
        """Return a human-readable resource location for diagnostics."""
        ...


@dataclass(frozen=True, slots=True)
class DirectoryResourceProvider:
    """File system provider: one ``<language><extension>`` file per language.

    Security:
        Language codes are file identifiers, not paths. Codes containing path
        separators or ".." are rejected, so reads never leave the directory.

    Example:
        >>> provider = DirectoryResourceProvider("resources")
        >>> provider.list_languages()
        ('en-US', 'sv-SE')
        >>> provider.read("en-US")  # reads resources/en-US.lang

    Attributes:
        directory: Directory holding the resource files
        extension: Resource file suffix, including the leading dot
    """

    directory: str | PathLike[str]
    extension: str = RESOURCE_EXTENSION
    _root: Path = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Resolve the directory once and validate the extension.

        Raises:
            ValueError: If extension is not a dot followed by a suffix
        """
        if not self.extension.startswith(".") or len(self.extension) < 2:
            msg = f"extension must be '.' followed by a suffix, got: {self.extension!r}"
            raise ValueError(msg)
        object.__setattr__(self, "_root", Path(self.directory).resolve())

    @staticmethod
    def _validate_language(language: LanguageCode) -> None:
        """Reject language codes that are not plain file identifiers.

        Raises:
            ValueError: If language is empty or contains path components
        """
        if not language:
            msg = "Language code cannot be empty"
            raise ValueError(msg)
        if ".." in language:
            msg = f"Path traversal sequences not allowed in language: '{language}'"
            raise ValueError(msg)
        if "/" in language or "\\" in language:
            msg = f"Path separators not allowed in language: '{language}'"
            raise ValueError(msg)

    def _path(self, language: LanguageCode) -> Path:
        self._validate_language(language)
        return self._root / f"{language}{self.extension}"

    def list_languages(self) -> tuple[LanguageCode, ...]:
        """Enumerate resource files, sorted by file name.

        Returns an empty tuple if the directory does not exist.
        """
        if not self._root.is_dir():
            return ()
        return tuple(
            path.name.removesuffix(self.extension)
            for path in sorted(self._root.glob(f"*{self.extension}"))
            if path.is_file()
        )

    def has_language(self, language: LanguageCode) -> bool:
        try:
            return self._path(language).is_file()
        except ValueError:
            return False

    def read(self, language: LanguageCode) -> bytes:
        """Read the resource file for language.

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If language is not a plain identifier, or the file is
                larger than MAX_RESOURCE_SIZE (checked before reading)
        """
        path = self._path(language)
        size = path.stat().st_size
        if size > MAX_RESOURCE_SIZE:
            msg = f"Resource exceeds {MAX_RESOURCE_SIZE} bytes ({size} bytes)"
            raise ValueError(msg)
        return path.read_bytes()

    def describe(self, language: LanguageCode) -> str:
        return str(self._root / f"{language}{self.extension}")


@dataclass(frozen=True, slots=True)
class MappingResourceProvider:
    """In-memory provider backed by a mapping of language code to content.

    Enumeration order is the mapping's insertion order. String content is
    encoded as UTF-8 on read.

    Example:
        >>> provider = MappingResourceProvider({"en-US": '{"greeting": "Hello"}'})
        >>> l10n = Localizer(provider)
    """

    resources: Mapping[LanguageCode, bytes | str]

    def list_languages(self) -> tuple[LanguageCode, ...]:
        return tuple(self.resources)

    def has_language(self, language: LanguageCode) -> bool:
        return language in self.resources

    def read(self, language: LanguageCode) -> bytes:
        try:
            content = self.resources[language]
        except KeyError:
            msg = f"No resource for language '{language}'"
            raise FileNotFoundError(msg) from None
        return content.encode(RESOURCE_ENCODING) if isinstance(content, str) else content

    def describe(self, language: LanguageCode) -> str:
        return f"<memory>/{language}"


@dataclass(frozen=True, slots=True)
class LoadAttempt:
    """Result of trying to activate one language.

    Attributes:
        language: Language code that was tried
        status: Load status (loaded, unavailable, failed)
        error: Exception if status is FAILED, None otherwise
        source: Human-readable resource location (if available)
    """

    language: LanguageCode
    status: LoadStatus
    error: Exception | None = None
    source: str | None = None

    @property
    def is_loaded(self) -> bool:
        return self.status == LoadStatus.LOADED

    @property
    def is_unavailable(self) -> bool:
        return self.status == LoadStatus.UNAVAILABLE

    @property
    def is_failed(self) -> bool:
        return self.status == LoadStatus.FAILED
