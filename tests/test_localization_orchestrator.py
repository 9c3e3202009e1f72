"""Tests for Localizer construction, language switching, and lookup.

Covers:
- Construction: fallback queue precedence, empty resource location, load failures
- set_language: success, unavailable language, broken resource (state unchanged)
- lookup: flat and nested keys, AtomicKey, pluralization, interpolation
- Missing keys: placeholder + MissingKeyWarning, strict mode
- Shape errors: groups and plural nodes without a count

Python 3.13+.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from pathlib import Path

import pytest

from ordbok import (
    AtomicKey,
    FormatError,
    KeyShapeError,
    LanguageUnavailableError,
    LoadError,
    Localizer,
    LocalizerConfig,
    MappingResourceProvider,
    MissingKeyError,
    MissingKeyWarning,
)
from ordbok.enums import LoadStatus
from ordbok.localization.keys import KeyPath


@pytest.fixture
def l10n(resource_dir: Path) -> Localizer:
    return Localizer(resource_dir, "en-US", host_language=None)


class TestConstruction:
    """Initial language resolution and loading."""

    def test_requested_language_wins(self, resource_dir: Path) -> None:
        """Explicitly requested language is activated when available."""
        l10n = Localizer(resource_dir, "sv-SE", host_language="en-US")
        assert l10n.language == "sv-SE"
        assert l10n["greeting"] == "Hej världen!"

    def test_host_hint_before_default(self, resource_dir: Path) -> None:
        """Host language is preferred over the default when nothing is requested."""
        l10n = Localizer(resource_dir, host_language="sv-SE")
        assert l10n.language == "sv-SE"

    def test_unavailable_request_falls_back_to_default(self, write_resources) -> None:
        """Unavailable preference selects en-US rather than another available language."""
        directory = write_resources(
            {"aa-AA": {"greeting": "first"}, "en-US": {"greeting": "Hello"}}
        )
        l10n = Localizer(directory, "fr-FR", host_language=None)
        assert l10n.language == "en-US"

    def test_unavailable_host_hint_falls_back_to_default(self, resource_dir: Path) -> None:
        l10n = Localizer(resource_dir, "fr-FR", host_language="de-DE")
        assert l10n.language == "en-US"

    def test_last_resort_selects_some_available_language(self, write_resources) -> None:
        """With no preference matching, some available language is activated."""
        directory = write_resources({"de-DE": {"a": "x"}, "nb-NO": {"a": "y"}})
        l10n = Localizer(directory, "fr-FR", host_language=None)
        assert l10n.language in {"de-DE", "nb-NO"}

    def test_configured_default_language(self, resource_dir: Path) -> None:
        config = LocalizerConfig(default_language="sv-SE")
        l10n = Localizer(resource_dir, "fr-FR", host_language=None, config=config)
        assert l10n.language == "sv-SE"

    def test_empty_directory_raises_load_error(self, tmp_path: Path) -> None:
        """Construction with zero available resources fails with LoadError."""
        with pytest.raises(LoadError, match="No language resources found"):
            Localizer(tmp_path, host_language=None)

    def test_missing_directory_raises_load_error(self, tmp_path: Path) -> None:
        with pytest.raises(LoadError):
            Localizer(tmp_path / "nowhere", host_language=None)

    def test_empty_provider_raises_load_error(self) -> None:
        with pytest.raises(LoadError):
            Localizer(MappingResourceProvider({}), host_language=None)

    def test_unparsable_candidate_is_skipped(self, write_resources) -> None:
        """A candidate that fails to parse is recorded and the next one is tried."""
        directory = write_resources({"en-US": {"greeting": "Hello"}, "sv-SE": "{not json"})
        l10n = Localizer(directory, "sv-SE", host_language=None)
        assert l10n.language == "en-US"
        statuses = [(a.language, a.status) for a in l10n.load_attempts]
        assert statuses == [("sv-SE", LoadStatus.FAILED), ("en-US", LoadStatus.LOADED)]
        assert isinstance(l10n.load_attempts[0].error, LoadError)

    def test_overly_nested_candidate_is_skipped(self, write_resources) -> None:
        depth = 100_000
        directory = write_resources(
            {"en-US": {"greeting": "Hello"}, "sv-SE": '{"a": ' + "[" * depth + "]" * depth + "}"}
        )
        l10n = Localizer(directory, "sv-SE", host_language=None)
        assert l10n.language == "en-US"
        assert l10n.load_attempts[0].is_failed
        assert "nesting" in str(l10n.load_attempts[0].error)

    def test_all_candidates_fail_raises_load_error(self, write_resources) -> None:
        directory = write_resources({"en-US": "[1, 2]"})
        with pytest.raises(LoadError, match="None of the candidate languages"):
            Localizer(directory, host_language=None)

    def test_load_attempts_record_unavailable(self, resource_dir: Path) -> None:
        l10n = Localizer(resource_dir, "fr-FR", host_language=None)
        assert l10n.load_attempts[0].language == "fr-FR"
        assert l10n.load_attempts[0].is_unavailable
        assert l10n.load_attempts[-1].is_loaded

    def test_in_memory_provider(self) -> None:
        provider = MappingResourceProvider({"en-US": '{"greeting": "Hello"}'})
        l10n = Localizer(provider, host_language=None)
        assert l10n["greeting"] == "Hello"

    def test_custom_extension(self, tmp_path: Path) -> None:
        (tmp_path / "en-US.json").write_text('{"a": "b"}', encoding="utf-8")
        config = LocalizerConfig(resource_extension=".json")
        l10n = Localizer(tmp_path, config=config, host_language=None)
        assert l10n["a"] == "b"

    def test_host_language_detected_from_environment(
        self, resource_dir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        for var in ("LANGUAGE", "LC_ALL", "LC_CTYPE", "LANG"):
            monkeypatch.delenv(var, raising=False)
        monkeypatch.setenv("LANG", "sv_SE.UTF-8")
        assert Localizer(resource_dir).language == "sv-SE"

    def test_host_detection_disabled(
        self, resource_dir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("LANGUAGE", "sv_SE")
        config = LocalizerConfig(detect_host_language=False)
        assert Localizer(resource_dir, config=config).language == "en-US"

    def test_invalid_host_language_type(self, resource_dir: Path) -> None:
        with pytest.raises(TypeError):
            Localizer(resource_dir, host_language=42)


class TestSetLanguage:
    """Atomic language switching."""

    def test_switch_changes_lookups(self, l10n: Localizer) -> None:
        l10n.set_language("sv-SE")
        assert l10n.language == "sv-SE"
        assert l10n["menu.file.open"] == "Öppna"

    @pytest.mark.parametrize("code", ["en-US", "sv-SE"])
    def test_every_available_language_can_be_activated(
        self, l10n: Localizer, code: str
    ) -> None:
        l10n.set_language(code)
        assert l10n.language == code

    def test_lookups_draw_only_from_active_dictionary(self, l10n: Localizer) -> None:
        """Keys only present in the previous language are missing after a switch."""
        assert l10n.lookup("interpolate", string="x") == "Interpolate string here: x."
        l10n.set_language("sv-SE")
        with pytest.warns(MissingKeyWarning):
            assert l10n.lookup("interpolate", string="x") == "interpolate"

    def test_unavailable_language_leaves_state_unchanged(self, l10n: Localizer) -> None:
        before = l10n["greeting"]
        with pytest.raises(LanguageUnavailableError) as exc_info:
            l10n.set_language("fr-FR")
        assert exc_info.value.language == "fr-FR"
        assert isinstance(exc_info.value, ValueError)
        assert l10n.language == "en-US"
        assert l10n["greeting"] == before

    def test_broken_resource_leaves_state_unchanged(self, write_resources) -> None:
        directory = write_resources({"en-US": {"greeting": "Hello"}, "sv-SE": "{oops"})
        l10n = Localizer(directory, "en-US", host_language=None)
        with pytest.raises(LoadError) as exc_info:
            l10n.set_language("sv-SE")
        assert exc_info.value.language == "sv-SE"
        assert l10n.language == "en-US"
        assert l10n["greeting"] == "Hello"

    def test_path_like_code_is_unavailable(self, l10n: Localizer) -> None:
        with pytest.raises(LanguageUnavailableError):
            l10n.set_language("../en-US")

    def test_switch_reloads_current_file_content(self, write_resources) -> None:
        directory = write_resources({"en-US": {"greeting": "Hello"}})
        l10n = Localizer(directory, host_language=None)
        (directory / "en-US.lang").write_text('{"greeting": "Howdy"}', encoding="utf-8")
        l10n.set_language("en-US")
        assert l10n["greeting"] == "Howdy"


class TestAvailability:
    """Language availability queries."""

    def test_is_language_available(self, l10n: Localizer) -> None:
        assert l10n.is_language_available("sv-SE")
        assert not l10n.is_language_available("fr-FR")
        assert not l10n.is_language_available("")

    def test_available_languages_sorted(self, l10n: Localizer) -> None:
        assert l10n.available_languages() == ("en-US", "sv-SE")

    def test_language_names(self, l10n: Localizer) -> None:
        names = l10n.language_names("en-US")
        assert names == {"en-US": "English (United States)", "sv-SE": "Swedish (Sweden)"}

    def test_language_names_unknown_code(self) -> None:
        provider = MappingResourceProvider({"pirate": "{}"})
        l10n = Localizer(provider, host_language=None)
        assert l10n.language_names() == {"pirate": None}


class TestLookup:
    """Key resolution and interpolation."""

    def test_flat_key(self, l10n: Localizer) -> None:
        assert l10n["greeting"] == "Hello World!"
        assert l10n.lookup("greeting") == "Hello World!"
        assert l10n("greeting") == "Hello World!"

    def test_interpolation(self, l10n: Localizer) -> None:
        assert l10n.lookup("hi", {"name": "Sam"}) == "Hi Sam"
        assert l10n.lookup("hi", name="Sam") == "Hi Sam"

    def test_keyword_params_override_mapping(self, l10n: Localizer) -> None:
        assert l10n.lookup("hi", {"name": "Sam"}, name="Alex") == "Hi Alex"

    def test_nested_key(self, l10n: Localizer) -> None:
        assert l10n["menu.file.save"] == "Save"
        assert l10n[KeyPath(("menu", "file", "save"))] == "Save"
        assert l10n[["menu", "file", "save"]] == "Save"

    def test_atomic_key_is_not_split(self, l10n: Localizer) -> None:
        assert l10n[AtomicKey("version.label")] == "Version"

    def test_nested_path_through_leaf_is_missing(self, l10n: Localizer) -> None:
        with pytest.warns(MissingKeyWarning):
            assert l10n["menu.edit.undo"] == "menu.edit.undo"

    def test_unknown_placeholder_raises_format_error(self, l10n: Localizer) -> None:
        with pytest.raises(FormatError, match="name"):
            l10n.lookup("hi")

    def test_count_is_available_for_interpolation(self, l10n: Localizer) -> None:
        assert l10n.lookup("hi", name="Sam", count=3) == "Hi Sam"


class TestPluralization:
    """zero/one/other selection."""

    @pytest.mark.parametrize(
        ("count", "expected"),
        [(0, "none"), (1, "1 item"), (7, "7 items"), (1.0, "1.0 item"), (2.5, "2.5 items")],
    )
    def test_selection(self, l10n: Localizer, count: float, expected: str) -> None:
        assert l10n.lookup("items", count=count) == expected

    @pytest.mark.parametrize(
        ("count", "expected"),
        [(Decimal("0"), "none"), (Decimal("1"), "1 item"), (Decimal("7"), "7 items")],
    )
    def test_decimal_count(self, l10n: Localizer, count: Decimal, expected: str) -> None:
        assert l10n.lookup("items", count=count) == expected

    def test_zero_falls_through_to_other(self, l10n: Localizer) -> None:
        assert l10n.lookup("apples", count=0) == "0 apples"

    def test_notification_message_example(self, l10n: Localizer) -> None:
        assert l10n.lookup("message_notification", count=0) == "You have no new messages."
        assert l10n.lookup("message_notification", count=1) == "You have 1 new message."
        assert l10n.lookup("message_notification", count=7) == "You have 7 new messages."

    def test_variant_reachable_by_nested_key(self, l10n: Localizer) -> None:
        assert l10n["message_notification.zero"] == "You have no new messages."

    def test_plural_node_without_count_raises(self, l10n: Localizer) -> None:
        with pytest.raises(KeyShapeError) as exc_info:
            l10n.lookup("items")
        assert exc_info.value.key == "items"
        assert "group of entries" in str(exc_info.value)

    @pytest.mark.parametrize("count", ["3", None, True])
    def test_non_numeric_count_raises(self, l10n: Localizer, count: object) -> None:
        with pytest.raises(KeyShapeError):
            l10n.lookup("items", count=count)


class TestShapeErrors:
    """Keys that resolve to something other than a template."""

    def test_group_raises_key_shape_error(self, l10n: Localizer) -> None:
        with pytest.raises(KeyShapeError):
            l10n["menu"]

    def test_group_with_count_raises(self, l10n: Localizer) -> None:
        """A count does not turn an ordinary group into a plural node."""
        with pytest.raises(KeyShapeError):
            l10n.lookup("menu.file", count=1)

    def test_non_string_leaf_raises(self) -> None:
        provider = MappingResourceProvider({"en-US": '{"answer": 42}'})
        l10n = Localizer(provider, host_language=None)
        with pytest.raises(KeyShapeError, match="int"):
            l10n["answer"]

    def test_key_shape_error_is_lookup_error(self, l10n: Localizer) -> None:
        with pytest.raises(LookupError):
            l10n["menu"]


class TestMissingKeys:
    """Graceful degradation for absent keys."""

    def test_missing_key_returns_key(self, l10n: Localizer) -> None:
        with pytest.warns(MissingKeyWarning, match="nope"):
            assert l10n["nope"] == "nope"

    def test_missing_atomic_key_returns_name(self, l10n: Localizer) -> None:
        with pytest.warns(MissingKeyWarning):
            assert l10n.lookup(AtomicKey("nope")) == "nope"

    def test_missing_key_warning_points_at_caller(self, l10n: Localizer) -> None:
        with pytest.warns(MissingKeyWarning) as record:
            l10n["nope"]
            l10n.lookup("nope")
            l10n("nope")
        assert [w.filename for w in record] == [__file__] * 3

    def test_missing_key_is_logged(
        self, l10n: Localizer, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="ordbok"), pytest.warns(MissingKeyWarning):
            l10n["nope"]
        assert "nope" in caplog.text

    def test_json_null_is_missing(self) -> None:
        provider = MappingResourceProvider({"en-US": '{"later": null}'})
        l10n = Localizer(provider, host_language=None)
        with pytest.warns(MissingKeyWarning):
            assert l10n["later"] == "later"

    def test_strict_mode_raises(self, resource_dir: Path) -> None:
        l10n = Localizer(resource_dir, host_language=None, config=LocalizerConfig(strict=True))
        with pytest.raises(MissingKeyError) as exc_info:
            l10n["nope"]
        assert exc_info.value.key == "nope"

    def test_has_key(self, l10n: Localizer) -> None:
        assert l10n.has_key("menu.file.open")
        assert l10n.has_key("menu")
        assert not l10n.has_key("menu.file.close")


class TestRepr:
    def test_repr_shows_language(self, l10n: Localizer) -> None:
        assert "en-US" in repr(l10n)
