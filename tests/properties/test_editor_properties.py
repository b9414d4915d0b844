"""Property-based tests for installation ordering, coverage and launch.

Checks the guarantees callers rely on:
- Ordering: stable releases precede pre-releases; newer versions come first
- Determinism: ordering does not depend on discovery order
- Coverage: the empty path is always covered; a file is covered exactly
  when its package origin is enabled
- Clamping: positions handed to the editor are always at least 1
"""
from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from zedbridge.discovery.models import (
    EditorVersion,
    ZedInstallation,
    display_name,
    installation_sort_key,
)
from zedbridge.editor.coverage import PrefixPackageIndex, is_covered
from zedbridge.editor.launch import clamp_position, file_location
from zedbridge.flags import ProjectGenerationFlag


# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------

versions = st.builds(
    EditorVersion,
    st.integers(min_value=0, max_value=3),
    st.integers(min_value=0, max_value=300),
    st.integers(min_value=0, max_value=20),
)


@st.composite
def installations(draw: st.DrawFn) -> ZedInstallation:
    version = draw(st.none() | versions)
    is_prerelease = draw(st.booleans())
    index = draw(st.integers(min_value=0, max_value=10_000))
    return ZedInstallation(
        name=display_name(version, is_prerelease),
        path=f"/opt/zed-{index}/zed",
        version=version,
        is_prerelease=is_prerelease,
    )


installation_lists = st.lists(installations(), max_size=12, unique_by=lambda i: i.path)
flag_sets = st.frozensets(st.sampled_from(list(ProjectGenerationFlag)))


# ---------------------------------------------------------------------------
# Ordering
# ---------------------------------------------------------------------------

@given(installation_lists)
def test_stable_releases_come_first(items: list[ZedInstallation]) -> None:
    ordered = sorted(items, key=installation_sort_key)
    channels = [i.is_prerelease for i in ordered]
    assert channels == sorted(channels)


@given(installation_lists)
def test_newer_versions_first_within_channel(items: list[ZedInstallation]) -> None:
    ordered = sorted(items, key=installation_sort_key)
    for channel in (False, True):
        known = [i.version for i in ordered if i.is_prerelease is channel and i.version]
        assert known == sorted(known, reverse=True)


@given(installation_lists, st.randoms())
def test_ordering_ignores_discovery_order(items, rnd) -> None:
    shuffled = list(items)
    rnd.shuffle(shuffled)
    assert sorted(shuffled, key=installation_sort_key) == sorted(items, key=installation_sort_key)


# ---------------------------------------------------------------------------
# Coverage
# ---------------------------------------------------------------------------

@given(flag_sets)
def test_empty_path_always_covered(flags) -> None:
    assert is_covered("", "/work/Game", flags, lambda _p: ProjectGenerationFlag.GIT).covered


@given(flag_sets, st.sampled_from(list(ProjectGenerationFlag)))
def test_covered_iff_origin_enabled(flags, origin) -> None:
    index = PrefixPackageIndex({"Packages/com.acme": origin})
    result = is_covered(
        "/work/Game/Packages/com.acme/Runtime/Thing.cs", "/work/Game", flags, index.category_of,
    )
    assert result.covered == (origin in flags)
    if not result.covered:
        assert result.missing_flag is origin


# ---------------------------------------------------------------------------
# Positions
# ---------------------------------------------------------------------------

@given(st.integers(), st.integers())
def test_clamped_positions_are_one_based(line: int, column: int) -> None:
    clamped_line, clamped_column = clamp_position(line, column)
    assert clamped_line >= 1 and clamped_column >= 1
    if line >= 1:
        assert clamped_line == line
    assert file_location("A.cs", line, column) == f"A.cs:{clamped_line}:{clamped_column}"
