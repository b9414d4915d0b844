"""Shared fixtures for CLI tests.

Commands receive a pre-built ``ZedEditor`` through Click's ``obj`` so no
real discovery scan or process launch happens.
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest
from click.testing import CliRunner, Result

from zedbridge.cli.main import cli
from zedbridge.config import EditorSettings
from zedbridge.discovery.cache import DiscoveryCache
from zedbridge.discovery.models import EditorVersion, ZedInstallation
from zedbridge.discovery.resolver import InstallationResolver
from zedbridge.editor.coverage import PrefixPackageIndex
from zedbridge.editor.zed_editor import ZedEditor
from zedbridge.flags import ProjectGenerationFlag as Flag

from tests.discovery.helpers import CountingProber, StaticPolicy
from tests.editor.fakes import RecordingLauncher

STABLE = ZedInstallation(
    name="Zed [0.165.5]", path=os.path.abspath("/usr/bin/zed"),
    version=EditorVersion(0, 165, 5),
)
PREVIEW = ZedInstallation(
    name="Zed - Preview [0.170.0]", path=os.path.abspath("/opt/zed-preview/zed"),
    version=EditorVersion(0, 170, 0), is_prerelease=True,
)


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click CliRunner for invoking commands."""
    return CliRunner()


@pytest.fixture
def launcher() -> RecordingLauncher:
    return RecordingLauncher()


@pytest.fixture(autouse=True)
def no_cli_on_path(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("zedbridge.editor.launch.shutil.which", lambda _name: None)


def make_editor(
    tmp_path: Path,
    launcher: RecordingLauncher,
    records: dict[str, ZedInstallation],
    editor_path: str = "",
) -> ZedEditor:
    settings = EditorSettings(
        editor_path=editor_path,
        project_directory=str(tmp_path),
        generation_flags=frozenset({Flag.LOCAL}),
        packages={"Packages/com.acme": Flag.GIT},
    )
    return ZedEditor(
        settings=settings,
        package_metadata=PrefixPackageIndex(settings.packages),
        resolver=InstallationResolver(StaticPolicy([], home=tmp_path), CountingProber()),
        launcher=launcher,
        cache=DiscoveryCache(lambda: records).start(),
        platform="linux",
    )


@pytest.fixture
def editor(tmp_path: Path, launcher: RecordingLauncher) -> ZedEditor:
    """Editor with a stable and a preview installation discovered."""
    return make_editor(
        tmp_path, launcher, {STABLE.path: STABLE, PREVIEW.path: PREVIEW},
        editor_path=STABLE.path,
    )


@pytest.fixture
def empty_editor(tmp_path: Path, launcher: RecordingLauncher) -> ZedEditor:
    """Editor that discovered nothing and has no editor configured."""
    return make_editor(tmp_path, launcher, {})


@pytest.fixture
def invoke(runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Run ``zedbridge`` against a given editor instead of a real one."""

    def _invoke(editor: ZedEditor, args: list[str]) -> Result:
        monkeypatch.setattr(
            "zedbridge.cli.main.build_editor", lambda _settings, _platform: editor,
        )
        return runner.invoke(cli, ["--config", str(tmp_path / "absent.yaml"), *args])

    return _invoke
