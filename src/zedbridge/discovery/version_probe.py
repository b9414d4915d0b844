"""Version probing via ``zed --version``.

The probe is best-effort: a binary that cannot be started, hangs past
the timeout, or prints something unexpected is still a Zed installation,
just one whose version is unknown. ``probe`` therefore returns ``None``
for every failure mode instead of raising.
"""

from __future__ import annotations

import logging
import os
import re
import subprocess
from pathlib import Path

from zedbridge.discovery.models import EditorVersion

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 3.0
VERSION_FLAG = "--version"

# "Zed 0.165.5", optionally followed by a build suffix.
_VERSION_RE = re.compile(r"[Zz]ed\s+(\d+\.\d+\.\d+)")


def parse_version_output(output: str) -> EditorVersion | None:
    """Extract the version triple from ``zed --version`` output."""
    match = _VERSION_RE.search(output)
    if match is None:
        return None
    return EditorVersion.from_string(match.group(1))


def probe_target(path: str | os.PathLike[str]) -> str:
    """Return the executable to run for *path*.

    macOS bundles are directories; their bundled command-line helper
    answers ``--version`` on their behalf.
    """
    text = os.fspath(path)
    if text.lower().endswith(".app"):
        return str(Path(text) / "Contents" / "MacOS" / "cli")
    return text


class VersionProber:
    """Runs ``<path> --version`` with a bounded wait.

    Args:
        timeout: Seconds to wait for the process before giving up.
    """

    def __init__(self, timeout: float = DEFAULT_TIMEOUT) -> None:
        self.timeout = timeout

    def probe(self, path: str | os.PathLike[str]) -> EditorVersion | None:
        """Return the installation's version, or ``None`` when unknown."""
        target = probe_target(path)
        try:
            completed = subprocess.run(
                [target, VERSION_FLAG],
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.DEVNULL,
                timeout=self.timeout,
                text=True,
                errors="replace",
                check=False,
            )
        except subprocess.TimeoutExpired:
            logger.debug("Version probe timed out after %.1fs: %s", self.timeout, target)
            return None
        except (OSError, subprocess.SubprocessError, ValueError) as exc:
            logger.debug("Version probe failed for %s: %s", target, exc)
            return None

        version = parse_version_output(completed.stdout or "")
        if version is None:
            logger.debug("Unrecognized version output from %s", target)
        return version
