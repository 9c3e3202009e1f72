"""Pytest configuration for the Ordbok test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 500 examples (thorough property testing)
- ci: CI runs with 50 examples (fast feedback)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- HYPOTHESIS_PROFILE env var -> explicit override
- CI=true environment variable -> "ci" profile
- Otherwise -> "dev" profile

Shared fixtures build on-disk resource directories for Localizer tests.
"""

from __future__ import annotations

import json
import os
from collections.abc import Callable, Mapping
from pathlib import Path

import pytest
from hypothesis import Phase, Verbosity, settings

from ordbok.locale_utils import clear_locale_cache

# =============================================================================
# HYPOTHESIS PROFILES - SINGLE SOURCE OF TRUTH
# =============================================================================

settings.register_profile(
    "dev",
    max_examples=500,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
)

settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
)

settings.register_profile(
    "verbose",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    verbosity=Verbosity.verbose,
)


def _detect_profile() -> str:
    """Detect appropriate Hypothesis profile based on execution context."""
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit
    if os.environ.get("CI") == "true":
        return "ci"
    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# RESOURCE FIXTURES
# =============================================================================

ENGLISH = {
    "greeting": "Hello World!",
    "interpolate": "Interpolate string here: %{string}.",
    "hi": "Hi %{name}",
    "message_notification": {
        "zero": "You have no new messages.",
        "one": "You have %{count} new message.",
        "other": "You have %{count} new messages.",
    },
    "items": {"zero": "none", "one": "%{count} item", "other": "%{count} items"},
    "apples": {"one": "%{count} apple", "other": "%{count} apples"},
    "menu": {
        "file": {"open": "Open", "save": "Save"},
        "edit": "Edit",
    },
    "version.label": "Version",
}

SWEDISH = {
    "greeting": "Hej världen!",
    "hi": "Hej %{name}",
    "items": {"zero": "inga", "one": "%{count} sak", "other": "%{count} saker"},
    "menu": {"file": {"open": "Öppna", "save": "Spara"}, "edit": "Redigera"},
}

type ResourceWriter = Callable[[Mapping[str, object]], Path]


@pytest.fixture
def write_resources(tmp_path: Path) -> ResourceWriter:
    """Return a factory writing ``{code: content}`` as ``<code>.lang`` files.

    Mapping values are dumped as JSON; str values are written verbatim.
    """

    def write(resources: Mapping[str, object]) -> Path:
        directory = tmp_path / "resources"
        directory.mkdir(exist_ok=True)
        for code, content in resources.items():
            text = content if isinstance(content, str) else json.dumps(content, ensure_ascii=False)
            (directory / f"{code}.lang").write_text(text, encoding="utf-8")
        return directory

    return write


@pytest.fixture
def resource_dir(write_resources: ResourceWriter) -> Path:
    """Directory with en-US and sv-SE dictionaries."""
    return write_resources({"en-US": ENGLISH, "sv-SE": SWEDISH})


@pytest.fixture(autouse=True)
def _clear_babel_cache() -> None:
    clear_locale_cache()
