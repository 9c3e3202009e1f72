"""Active-language orchestration and lookup.

Localizer owns the current language and its dictionary as one immutable
snapshot. Construction resolves a language from the fallback queue and
loads it; set_language() loads first and swaps afterwards, so a failed
switch leaves the previous language active.

Lookup behavior:
    - Absent key: logged, MissingKeyWarning issued, key returned as text
      (MissingKeyError instead in strict mode)
    - Key naming a group of entries: KeyShapeError
    - Plural node with a numeric ``count``: zero/one/other selection
    - Template: ``%{name}`` interpolation, failures raise FormatError

Python 3.13+.
"""

from __future__ import annotations

import logging
import threading
import warnings
from collections.abc import Mapping
from dataclasses import dataclass
from os import PathLike
from typing import TYPE_CHECKING, NoReturn

from ordbok.diagnostics import (
    Diagnostic,
    DiagnosticCode,
    KeyShapeError,
    LanguageUnavailableError,
    LoadError,
    MissingKeyError,
    MissingKeyWarning,
)
from ordbok.enums import LoadStatus
from ordbok.locale_utils import describe_language, get_host_language
from ordbok.localization.config import LocalizerConfig
from ordbok.localization.dictionary import Dictionary, DictionaryStore
from ordbok.localization.fallback import build_fallback_queue
from ordbok.localization.keys import Key, KeyPath, normalize_key
from ordbok.localization.loading import DirectoryResourceProvider, LoadAttempt, ResourceProvider
from ordbok.runtime.interpolation import interpolate
from ordbok.runtime.plural_rules import is_count, is_plural_node, select_plural_variant
from ordbok.runtime.rwlock import RWLock

if TYPE_CHECKING:
    from ordbok.localization.types import FormatParams, LanguageCode

__all__ = ["Localizer"]

logger = logging.getLogger(__name__)

# Sentinel: detect the host language unless the caller passes one (or None).
_DETECT = object()


@dataclass(frozen=True, slots=True)
class _ActiveLanguage:
    """Language code and its dictionary, published together."""

    language: LanguageCode
    dictionary: Dictionary


class Localizer:
    """Localized string lookup for one active language.

    Example:
        >>> l10n = Localizer("resources")              # resources/<code>.lang
        >>> l10n["greeting"]
        'Hello World!'
        >>> l10n.lookup("interpolate", string="Hello World!")
        'Interpolate string here: Hello World!.'
        >>> l10n.lookup("message_notification", count=7)
        'You have 7 new messages.'
        >>> l10n.set_language("sv-SE")

    Thread Safety:
        Lookups run concurrently. set_language() calls are serialized with
        each other and swap the active language under an exclusive lock.

    Attributes:
        language: Code of the active language
    """

    __slots__ = (
        "_active",
        "_config",
        "_load_attempts",
        "_lock",
        "_provider",
        "_store",
        "_switch_lock",
    )

    def __init__(
        self,
        resources: ResourceProvider | str | PathLike[str],
        language: LanguageCode | None = None,
        *,
        host_language: LanguageCode | None | object = _DETECT,
        config: LocalizerConfig | None = None,
    ) -> None:
        """Resolve and load the initial language.

        Args:
            resources: Directory of ``<code>.lang`` files, or a ResourceProvider
            language: Preferred language, tried first
            host_language: Environment language hint, tried second. Detected
                from the environment when omitted (see
                LocalizerConfig.detect_host_language); pass None to skip.
            config: Resolution and lookup options

        Raises:
            LoadError: If no language resources exist, or no queued candidate
                could be loaded
        """
        self._config = config if config is not None else LocalizerConfig()
        if isinstance(resources, (str, PathLike)):
            resources = DirectoryResourceProvider(
                resources, extension=self._config.resource_extension
            )
        self._provider: ResourceProvider = resources
        self._store = DictionaryStore(resources)
        self._lock = RWLock()
        self._switch_lock = threading.Lock()
        self._load_attempts: tuple[LoadAttempt, ...] = ()

        available = self._provider.list_languages()
        if not available:
            diagnostic = Diagnostic(
                code=DiagnosticCode.NO_RESOURCES,
                message="No language resources found",
                source=self._describe_location(),
                hint=f"Add one '<language>{self._config.resource_extension}' file per language",
            )
            raise LoadError(diagnostic)

        queue = build_fallback_queue(
            available,
            requested=language,
            host_hint=self._host_hint(host_language),
            default=self._config.default_language,
        )
        logger.debug("Language fallback queue: %s", queue)
        self._active = self._activate_first(queue, available)

        if language is not None and self._active.language != language:
            logger.info(
                "Requested language %s unavailable, using %s", language, self._active.language
            )

    def _host_hint(self, host_language: LanguageCode | None | object) -> LanguageCode | None:
        if host_language is _DETECT:
            return get_host_language() if self._config.detect_host_language else None
        if host_language is None or isinstance(host_language, str):
            return host_language
        msg = f"host_language must be a str or None, got {type(host_language).__name__}"
        raise TypeError(msg)

    def _describe_location(self) -> str:
        if isinstance(self._provider, DirectoryResourceProvider):
            return str(self._provider.directory)
        return type(self._provider).__name__

    def _activate_first(
        self,
        queue: tuple[LanguageCode, ...],
        available: tuple[LanguageCode, ...],
    ) -> _ActiveLanguage:
        """Load the first queued candidate that is available and parses.

        Records every attempt in load_attempts.

        Raises:
            LoadError: If every candidate is unavailable or fails to load
        """
        attempts: list[LoadAttempt] = []
        failures: list[LoadError] = []
        active: _ActiveLanguage | None = None

        for candidate in queue:
            source = self._provider.describe(candidate)
            if candidate not in available:
                attempts.append(LoadAttempt(candidate, LoadStatus.UNAVAILABLE, source=source))
                continue
            try:
                dictionary = self._store.load(candidate)
            except LoadError as e:
                logger.warning("Failed to load language %s: %s", candidate, e)
                attempts.append(LoadAttempt(candidate, LoadStatus.FAILED, error=e, source=source))
                failures.append(e)
                continue
            attempts.append(LoadAttempt(candidate, LoadStatus.LOADED, source=source))
            active = _ActiveLanguage(candidate, dictionary)
            break

        self._load_attempts = tuple(attempts)

        if active is None:
            diagnostic = Diagnostic(
                code=DiagnosticCode.NO_LANGUAGE_LOADED,
                message=f"None of the candidate languages could be loaded: {', '.join(queue)}",
                source=self._describe_location(),
            )
            error = LoadError(diagnostic)
            if failures:
                raise error from failures[-1]
            raise error

        logger.info("Activated language %s", active.language)
        return active

    @property
    def language(self) -> LanguageCode:
        """Code of the active language."""
        with self._lock.read():
            return self._active.language

    @property
    def config(self) -> LocalizerConfig:
        return self._config

    @property
    def load_attempts(self) -> tuple[LoadAttempt, ...]:
        """Language load attempts made during construction, in queue order."""
        return self._load_attempts

    def available_languages(self) -> tuple[LanguageCode, ...]:
        """List language codes with a resource, in enumeration order."""
        return self._provider.list_languages()

    def is_language_available(self, language: LanguageCode) -> bool:
        """Check whether a resource exists for language. No side effects."""
        return self._provider.has_language(language)

    def language_names(self, display_language: LanguageCode | None = None) -> dict[str, str | None]:
        """Map each available language to its display name.

        Args:
            display_language: Language to write names in. Defaults to each
                language's own name for itself.

        Returns:
            Dict of code to display name (None where Babel has no data)
        """
        return {
            code: describe_language(code, display_language)
            for code in self._provider.list_languages()
        }

    def set_language(self, language: LanguageCode) -> None:
        """Switch the active language.

        The new dictionary is fully loaded before it replaces the current
        one; on any failure the current language stays active.

        Raises:
            LanguageUnavailableError: If no resource exists for language
            LoadError: If the resource exists but cannot be read or parsed
        """
        if not self.is_language_available(language):
            diagnostic = Diagnostic(
                code=DiagnosticCode.LANGUAGE_UNAVAILABLE,
                message=f"Language '{language}' is unavailable",
                language=language,
                source=self._provider.describe(language),
                hint="Check that the resource file exists",
            )
            raise LanguageUnavailableError(diagnostic, language=language)

        with self._switch_lock:
            dictionary = self._store.load(language)
            with self._lock.write():
                previous = self._active.language
                self._active = _ActiveLanguage(language, dictionary)
        logger.info("Switched language from %s to %s", previous, language)

    def _snapshot(self) -> _ActiveLanguage:
        with self._lock.read():
            return self._active

    def has_key(self, key: Key) -> bool:
        """Check whether key resolves to any entry. Issues no warning."""
        return self._snapshot().dictionary.resolve(normalize_key(key)) is not None

    def lookup(self, key: Key, params: FormatParams | None = None, /, **kwargs: object) -> str:
        """Return the localized, interpolated string for key.

        Args:
            key: Dotted string path, AtomicKey, KeyPath, or sequence of segments
            params: Interpolation values. Merged with keyword arguments;
                keyword arguments win on conflict.
            **kwargs: Interpolation values. A numeric ``count`` also selects
                the zero/one/other variant of a plural entry.

        Returns:
            Interpolated template, or the stringified key if the key is absent

        Raises:
            KeyShapeError: If key resolves to a group of entries
            FormatError: If interpolation fails
            MissingKeyError: If key is absent and strict mode is enabled

        Example:
            >>> l10n.lookup("inbox.unread", count=1)
            'You have 1 new message.'
            >>> l10n.lookup("nope")
            'nope'
        """
        values: Mapping[str, object]
        if kwargs:
            values = {**params, **kwargs} if params else kwargs
        else:
            values = params if params is not None else {}
        return self._lookup(key, values)

    __call__ = lookup

    def __getitem__(self, key: Key) -> str:
        return self._lookup(key, {})

    def _lookup(self, key: Key, values: Mapping[str, object]) -> str:
        """Shared body of lookup() and item access.

        Must be called directly from a public entry point so that missing-key
        warnings point at the caller.
        """
        path = normalize_key(key)
        active = self._snapshot()
        node = active.dictionary.resolve(path)

        count = values.get("count")
        if is_plural_node(node) and is_count(count):
            node = select_plural_variant(node, count)

        if node is None:
            return self._handle_missing_key(path, active.language)

        if not isinstance(node, str):
            self._raise_shape_error(path, node, active.language, count)

        logger.debug("Resolved %s in %s", path, active.language)
        return interpolate(node, values)

    def _handle_missing_key(self, path: KeyPath, language: LanguageCode) -> str:
        """Degrade to the stringified key, or raise in strict mode."""
        placeholder = str(path)
        diagnostic = Diagnostic(
            code=DiagnosticCode.KEY_NOT_FOUND,
            message=f"Key '{placeholder}' is missing",
            language=language,
            key=placeholder,
            severity="warning",
        )
        if self._config.strict:
            raise MissingKeyError(diagnostic, key=placeholder)

        logger.warning("Key %s is missing in %s", placeholder, language)
        # _handle_missing_key <- _lookup <- lookup / __getitem__ <- caller
        warnings.warn(str(diagnostic), MissingKeyWarning, stacklevel=4)
        return placeholder

    @staticmethod
    def _raise_shape_error(
        path: KeyPath, node: object, language: LanguageCode, count: object
    ) -> NoReturn:
        if is_plural_node(node):
            hint = f"Pass a numeric count (got {count!r}) to select a plural variant"
        elif isinstance(node, Mapping):
            hint = "Look up one of the nested keys instead"
        else:
            hint = "Entries must be strings or objects"
        diagnostic = Diagnostic(
            code=DiagnosticCode.KEY_SHAPE_MISMATCH,
            message=(
                f"Key '{path}' points to a group of entries, not a final value"
                if isinstance(node, Mapping)
                else f"Key '{path}' holds {type(node).__name__}, not a template"
            ),
            language=language,
            key=str(path),
            hint=hint,
        )
        raise KeyShapeError(diagnostic, key=str(path))

    def __repr__(self) -> str:
        return f"Localizer(language={self.language!r}, provider={self._provider!r})"
