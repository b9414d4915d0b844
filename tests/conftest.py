"""Shared fixtures for zedbridge tests."""

from pathlib import Path

import pytest


@pytest.fixture
def settings_file(tmp_path: Path) -> Path:
    """Write a complete editor settings file."""
    path = tmp_path / "zedbridge.yaml"
    path.write_text(
        f"editor_path: {tmp_path / 'bin' / 'zed'}\n"
        f"project_directory: {tmp_path / 'Game'}\n"
        "generation_flags: [Embedded, registry, BUILT_IN]\n"
        "probe_timeout: 1.5\n"
        "packages:\n"
        "  Packages/com.acme.tools: Git\n"
        "  Assets/MyPkg: Embedded\n"
    )
    return path
