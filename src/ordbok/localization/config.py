"""Localizer configuration.

Provides a single frozen dataclass holding the options that shape language
resolution and lookup behavior.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from ordbok.constants import DEFAULT_LANGUAGE, RESOURCE_EXTENSION

__all__ = ["LocalizerConfig"]


@dataclass(frozen=True, slots=True)
class LocalizerConfig:
    """Immutable configuration for Localizer.

    All fields have usable defaults; ``LocalizerConfig()`` matches the
    behavior of a Localizer constructed without a config.

    Attributes:
        default_language: Fallback tried after the requested language and the
            host hint (default: "en-US").
        resource_extension: Suffix of per-language resource files when the
            Localizer is given a directory (default: ".lang").
        detect_host_language: Ask the environment for the host language when
            no explicit host_language is passed (default: True).
        strict: Raise MissingKeyError for absent keys instead of returning the
            key as a placeholder (default: False). Useful in test suites that
            must catch untranslated strings.

    Example:
        >>> config = LocalizerConfig(default_language="en-GB", strict=True)
        >>> l10n = Localizer("resources", config=config)
    """

    default_language: str = DEFAULT_LANGUAGE
    resource_extension: str = RESOURCE_EXTENSION
    detect_host_language: bool = True
    strict: bool = False

    def __post_init__(self) -> None:
        """Validate configuration values.

        Raises:
            ValueError: If default_language is empty or resource_extension
                is not a dot followed by a suffix
        """
        if not self.default_language or self.default_language.strip() != self.default_language:
            msg = f"default_language must be a non-empty code, got: {self.default_language!r}"
            raise ValueError(msg)
        if not self.resource_extension.startswith(".") or len(self.resource_extension) < 2:
            msg = (
                "resource_extension must be '.' followed by a suffix, "
                f"got: {self.resource_extension!r}"
            )
            raise ValueError(msg)
