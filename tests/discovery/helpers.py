"""Shared test helpers for fake Zed installations.

Each helper creates a minimal on-disk layout or a stand-in collaborator
so discovery can be exercised without a real Zed on the machine.
"""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path

from zedbridge.discovery.models import EditorVersion
from zedbridge.discovery.platform_paths import LinuxPathPolicy
from zedbridge.discovery.version_probe import VersionProber


def make_executable(path: Path, output: str = "Zed 0.165.5") -> Path:
    """Create a shell script that prints *output* like ``zed --version``."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(f"#!/bin/sh\necho '{output}'\n")
    path.chmod(0o755)
    return path


def make_app_bundle(path: Path) -> Path:
    """Create an empty macOS-style ``.app`` bundle directory."""
    (path / "Contents" / "MacOS").mkdir(parents=True, exist_ok=True)
    return path


class CountingProber(VersionProber):
    """Prober that never spawns; records every path it was asked about."""

    def __init__(
        self,
        versions: dict[str, EditorVersion | None] | None = None,
        default: EditorVersion | None = EditorVersion(0, 165, 5),
    ) -> None:
        super().__init__(timeout=0.1)
        self.versions = versions or {}
        self.default = default
        self.calls: list[str] = []

    def probe(self, path: str | os.PathLike[str]) -> EditorVersion | None:
        text = os.fspath(path)
        self.calls.append(text)
        return self.versions.get(text, self.default)


class StaticPolicy(LinuxPathPolicy):
    """Linux policy with a fixed candidate list and no globbing."""

    def __init__(self, candidates: Iterable[Path], home: Path) -> None:
        super().__init__(home=home, environ={})
        self._candidates = list(candidates)
        self.enumerations = 0

    def _fixed_candidates(self) -> list[Path]:
        return list(self._candidates)

    def _bundle_roots(self) -> list[Path]:
        return []

    def candidate_paths(self) -> list[Path]:
        self.enumerations += 1
        return super().candidate_paths()
