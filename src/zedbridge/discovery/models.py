"""Data models for the discovery module.

Contains the immutable record produced for every recognized Zed binary
and the version triple parsed from ``zed --version``.
"""

from __future__ import annotations

from dataclasses import dataclass

PRODUCT_NAME = "Zed"

# Zed relies on an external C# language server; nothing is bundled.
LATEST_LANGUAGE_VERSION: tuple[int, int] = (13, 0)


@dataclass(frozen=True, order=True)
class EditorVersion:
    """A ``major.minor.patch`` editor version.

    Instances compare component-wise, so ``sorted()`` and ``max()`` work
    directly on them.
    """

    major: int
    minor: int
    patch: int

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"

    @classmethod
    def from_string(cls, text: str) -> EditorVersion | None:
        """Parse ``"0.165.5"``; anything else yields ``None``."""
        parts = text.strip().split(".")
        if len(parts) != 3 or not all(p.isdigit() for p in parts):
            return None
        return cls(int(parts[0]), int(parts[1]), int(parts[2]))


@dataclass(frozen=True)
class ZedInstallation:
    """A single Zed installation discovered on this machine.

    Attributes:
        name: Display name, e.g. ``"Zed - Preview [0.170.0]"``.
        path: Canonical absolute path; the identity of the installation.
        version: Parsed version, or ``None`` when the probe failed.
        is_prerelease: True for preview and nightly builds.
        supports_analyzers: Whether Roslyn analyzers are honoured.
        latest_language_version: Newest C# language version supported.
    """

    name: str
    path: str
    version: EditorVersion | None = None
    is_prerelease: bool = False
    supports_analyzers: bool = True
    latest_language_version: tuple[int, int] = LATEST_LANGUAGE_VERSION

    def analyzers(self) -> tuple[str, ...]:
        """Analyzer assemblies to reference from generated projects."""
        return ()

    @property
    def version_text(self) -> str:
        return str(self.version) if self.version is not None else "unknown"


def display_name(version: EditorVersion | None, is_prerelease: bool) -> str:
    """Compose the display name shown in the host's editor picker."""
    name = PRODUCT_NAME
    if is_prerelease:
        name += " - Preview"
    if version is not None:
        name += f" [{version}]"
    return name


def installation_sort_key(installation: ZedInstallation) -> tuple:
    """Sort key placing stable releases first, then newest version first.

    Use with ``sorted(..., key=installation_sort_key)``. Unknown versions
    sort after every known version of the same release channel.
    """
    version = installation.version
    known = version is not None
    components = (version.major, version.minor, version.patch) if known else (0, 0, 0)
    return (
        installation.is_prerelease,
        not known,
        tuple(-c for c in components),
        installation.path,
    )


def describe_installation(installation: ZedInstallation) -> str:
    """One-line summary used in batch-mode log output."""
    language = ".".join(str(p) for p in installation.latest_language_version)
    return (
        f"{installation.name} Path:{installation.path}, "
        f"LanguageVersionSupport:{language} "
        f"AnalyzersSupport:{installation.supports_analyzers}"
    )
