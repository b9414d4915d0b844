"""Per-platform knowledge of where Zed gets installed.

Each ``PlatformPathPolicy`` answers two questions for one operating
system: which paths are worth probing during discovery, and whether an
arbitrary user-supplied path plausibly names a Zed installation. The
second check is purely syntactic plus an existence test, so it is cheap
enough to run before spawning ``zed --version``.

The three policies share one algorithm and differ only in data:

    macOS    ``.app`` bundles under ``/Applications`` and ``~/Applications``
             plus the Homebrew CLI shims.
    Windows  ``zed.exe`` under ``%LOCALAPPDATA%``, ``%ProgramFiles%`` and
             ``~/.local/bin``, including Preview and Nightly channels.
    Linux    distro, flatpak and snap binaries, ``~/.local/bin``, and
             ``Zed*.AppImage`` bundles dropped in a few usual folders.
"""

from __future__ import annotations

import logging
import os
import platform
import re
from abc import ABC, abstractmethod
from collections.abc import Iterator, Mapping
from pathlib import Path

logger = logging.getLogger(__name__)


class PlatformPathPolicy(ABC):
    """Candidate enumeration and recognition for one operating system.

    Subclasses fill in the class attributes and ``_fixed_candidates``;
    everything else is shared.

    Attributes:
        platform: Identifier returned by ``current_platform()``.
        executable_pattern: Regex for executable file names.
        bundle_pattern: Regex for application bundle directory names.
        bundle_glob: Glob for loosely-versioned bundle file names.
    """

    platform: str = ""
    executable_pattern: re.Pattern[str] | None = None
    bundle_pattern: re.Pattern[str] | None = None
    bundle_glob: str | None = None

    def __init__(
        self,
        home: Path | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self._home = home if home is not None else Path.home()
        self._environ = environ if environ is not None else os.environ

    @abstractmethod
    def _fixed_candidates(self) -> list[Path]:
        """Well-known install locations, most common first."""

    def _bundle_roots(self) -> list[Path]:
        return []

    def _globbed_candidates(self) -> list[Path]:
        """Expand ``bundle_glob`` in each bundle root (top level only)."""
        if self.bundle_glob is None:
            return []
        found: list[Path] = []
        for root in self._bundle_roots():
            try:
                if not root.is_dir():
                    continue
                found.extend(sorted(root.glob(self.bundle_glob)))
            except (PermissionError, OSError):
                logger.debug("Cannot list %s", root)
                continue
        return found

    def candidate_paths(self) -> list[Path]:
        """Return every path worth probing on this platform, in order."""
        candidates = self._fixed_candidates() + self._globbed_candidates()
        return list(dict.fromkeys(candidates))

    def is_candidate(self, path: str | os.PathLike[str]) -> bool:
        """Cheap pre-filter: does *path* look like a Zed installation?

        Checks the file-name pattern first and only then touches the
        filesystem. Never raises.
        """
        text = os.fspath(path)
        if not text:
            return False
        name = Path(text).name
        try:
            if self.bundle_pattern is not None and self.bundle_pattern.match(name):
                return Path(text).is_dir()
            if self.executable_pattern is not None and self.executable_pattern.match(name):
                return Path(text).is_file()
        except (PermissionError, OSError, ValueError):
            return False
        return False


class MacOSPathPolicy(PlatformPathPolicy):
    """Zed on macOS: application bundles and Homebrew shims."""

    platform = "macos"
    bundle_pattern = re.compile(r".*zed.*\.app$", re.IGNORECASE)
    executable_pattern = re.compile(r"^zed$", re.IGNORECASE)

    def _fixed_candidates(self) -> list[Path]:
        candidates = [
            Path("/Applications/Zed.app"),
            Path("/Applications/Zed Preview.app"),
        ]
        user_apps = self._home / "Applications"
        try:
            if user_apps.is_dir():
                candidates.append(user_apps / "Zed.app")
                candidates.append(user_apps / "Zed Preview.app")
        except (PermissionError, OSError):
            pass
        candidates.append(Path("/opt/homebrew/bin/zed"))
        candidates.append(Path("/usr/local/bin/zed"))
        return candidates


class WindowsPathPolicy(PlatformPathPolicy):
    """Zed on Windows: per-user and machine-wide ``zed.exe`` installs."""

    platform = "windows"
    executable_pattern = re.compile(r".*zed.*\.exe$", re.IGNORECASE)

    def _folder(self, variable: str, fallback: Path) -> Path:
        value = self._environ.get(variable)
        return Path(value) if value else fallback

    def _fixed_candidates(self) -> list[Path]:
        local_app = self._folder("LOCALAPPDATA", self._home / "AppData" / "Local")
        program_files = self._folder("PROGRAMFILES", Path("C:/Program Files"))
        profile = self._folder("USERPROFILE", self._home)
        return [
            local_app / "Programs" / "Zed" / "zed.exe",
            local_app / "Zed" / "zed.exe",
            program_files / "Zed" / "zed.exe",
            profile / ".local" / "bin" / "zed.exe",
            local_app / "Programs" / "Zed Preview" / "zed.exe",
            local_app / "Programs" / "Zed Nightly" / "zed.exe",
        ]


class LinuxPathPolicy(PlatformPathPolicy):
    """Zed on Linux and other Unix-likes."""

    platform = "linux"
    executable_pattern = re.compile(
        r"^(?:.*(?:zed|zedit|zeditor)|zed.*\.appimage)$", re.IGNORECASE,
    )
    bundle_glob = "Zed*.AppImage"

    def _fixed_candidates(self) -> list[Path]:
        home = self._home
        return [
            Path("/usr/bin/zed"),
            Path("/usr/local/bin/zed"),
            Path("/bin/zed"),
            home / ".local" / "bin" / "zed",
            Path("/var/lib/flatpak/exports/bin/dev.zed.Zed"),
            home / ".local" / "share" / "flatpak" / "exports" / "bin" / "dev.zed.Zed",
            Path("/snap/bin/zed"),
        ]

    def _bundle_roots(self) -> list[Path]:
        return [self._home, self._home / "Applications", Path("/opt")]


_POLICIES: dict[str, type[PlatformPathPolicy]] = {
    "macos": MacOSPathPolicy,
    "windows": WindowsPathPolicy,
    "linux": LinuxPathPolicy,
}


def current_platform() -> str:
    """Return the current platform identifier."""
    system = platform.system().lower()
    if system == "darwin":
        return "macos"
    return "windows" if system == "windows" else "linux"


def policy_for_platform(
    name: str | None = None,
    home: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> PlatformPathPolicy:
    """Build the policy for *name* (defaults to the running platform).

    Raises:
        ValueError: If *name* is not one of ``macos``, ``windows``, ``linux``.
    """
    key = name or current_platform()
    try:
        policy_cls = _POLICIES[key]
    except KeyError:
        raise ValueError(f"Unknown platform: {key}") from None
    return policy_cls(home=home, environ=environ)


def iter_platforms() -> Iterator[str]:
    """Yield every platform identifier that has a policy."""
    yield from _POLICIES
