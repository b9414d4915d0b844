"""Tests for installation records, version triples and display names."""

from __future__ import annotations

import dataclasses

import pytest

from zedbridge.discovery.models import (
    EditorVersion,
    ZedInstallation,
    describe_installation,
    display_name,
    installation_sort_key,
)


class TestEditorVersion:
    """Parsing and ordering of version triples."""

    def test_from_string(self) -> None:
        assert EditorVersion.from_string("0.165.5") == EditorVersion(0, 165, 5)

    def test_str_round_trip(self) -> None:
        assert str(EditorVersion(1, 2, 3)) == "1.2.3"

    @pytest.mark.parametrize("text", ["", "1.2", "1.2.3.4", "a.b.c", "1.-2.3"])
    def test_rejects_malformed(self, text: str) -> None:
        assert EditorVersion.from_string(text) is None

    def test_ordering_is_numeric(self) -> None:
        assert EditorVersion(0, 99, 0) < EditorVersion(0, 165, 5)
        assert EditorVersion(1, 0, 0) > EditorVersion(0, 999, 999)


class TestZedInstallation:
    """Record immutability and fixed capabilities."""

    def test_is_frozen(self) -> None:
        installation = ZedInstallation(name="Zed", path="/usr/bin/zed")
        with pytest.raises(dataclasses.FrozenInstanceError):
            installation.name = "Other"  # type: ignore[misc]

    def test_capabilities(self) -> None:
        installation = ZedInstallation(name="Zed", path="/usr/bin/zed")
        assert installation.supports_analyzers is True
        assert installation.latest_language_version == (13, 0)
        assert installation.analyzers() == ()

    def test_equal_records_for_same_path(self) -> None:
        a = ZedInstallation(name="Zed", path="/usr/bin/zed")
        b = ZedInstallation(name="Zed", path="/usr/bin/zed")
        assert a == b
        assert len({a, b}) == 1

    def test_version_text_unknown(self) -> None:
        assert ZedInstallation(name="Zed", path="/x/zed").version_text == "unknown"


class TestDisplayName:
    def test_stable_with_version(self) -> None:
        assert display_name(EditorVersion(0, 165, 5), False) == "Zed [0.165.5]"

    def test_preview_with_version(self) -> None:
        name = display_name(EditorVersion(0, 170, 0), True)
        assert name == "Zed - Preview [0.170.0]"

    def test_unknown_version(self) -> None:
        assert display_name(None, False) == "Zed"


class TestOrdering:
    """Stable releases come first regardless of version number."""

    def test_stable_before_newer_preview(self) -> None:
        preview = ZedInstallation(
            name="Zed - Preview [0.170.0]", path="/opt/preview/zed",
            version=EditorVersion(0, 170, 0), is_prerelease=True,
        )
        stable = ZedInstallation(
            name="Zed [0.165.5]", path="/usr/bin/zed",
            version=EditorVersion(0, 165, 5),
        )
        assert sorted([preview, stable], key=installation_sort_key) == [stable, preview]

    def test_newer_first_within_channel(self) -> None:
        old = ZedInstallation(name="a", path="/a/zed", version=EditorVersion(0, 150, 0))
        new = ZedInstallation(name="b", path="/b/zed", version=EditorVersion(0, 160, 0))
        assert sorted([old, new], key=installation_sort_key) == [new, old]

    def test_unknown_version_sorts_last(self) -> None:
        unknown = ZedInstallation(name="a", path="/a/zed")
        known = ZedInstallation(name="b", path="/b/zed", version=EditorVersion(0, 0, 1))
        assert sorted([unknown, known], key=installation_sort_key) == [known, unknown]


def test_describe_installation() -> None:
    installation = ZedInstallation(
        name="Zed [0.165.5]", path="/usr/bin/zed", version=EditorVersion(0, 165, 5),
    )
    text = describe_installation(installation)
    assert "Zed [0.165.5]" in text
    assert "Path:/usr/bin/zed" in text
    assert "LanguageVersionSupport:13.0" in text
    assert "AnalyzersSupport:True" in text
