"""Command lines for opening files in Zed.

macOS launches the application bundle through ``open -a``. Elsewhere
the ``zed`` command-line helper is invoked directly; it understands the
``path:line:column`` syntax and reuses a running window. Arguments are
passed as a list, never through a shell.
"""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
from collections.abc import Sequence

from zedbridge.discovery.models import ZedInstallation
from zedbridge.discovery.platform_paths import current_platform
from zedbridge.editor.host import ProcessLauncher

logger = logging.getLogger(__name__)

CLI_COMMAND = "zed"


def clamp_position(line: int, column: int) -> tuple[int, int]:
    """Editors count from 1; hosts pass -1 or 0 for "no position"."""
    return max(1, line), max(1, column)


def file_location(path: str, line: int, column: int) -> str:
    line, column = clamp_position(line, column)
    return f"{path}:{line}:{column}"


def cli_command_for(installation: ZedInstallation) -> str:
    """The CLI helper on ``PATH``, else the installation binary itself."""
    return shutil.which(CLI_COMMAND) or installation.path


def build_open_command(
    application: str,
    path: str,
    line: int,
    column: int,
    solution: str,
    platform: str | None = None,
) -> list[str]:
    """Arguments that open *path* (or the solution folder) in Zed.

    Args:
        application: Bundle path on macOS, CLI command elsewhere.
        path: File to open; empty opens the solution directory only.
        line: 1-based line; smaller values are clamped to 1.
        column: 1-based column; smaller values are clamped to 1.
        solution: Solution file whose directory is the project root;
            empty leaves the folder argument out.
        platform: Override for ``current_platform()``.
    """
    directory = os.path.dirname(solution)
    target = platform or current_platform()

    if target == "macos" and application.lower().endswith(".app"):
        command = ["open", "-a", application]
        if path:
            command.append(file_location(path, line, column))
        elif directory:
            command.append(directory)
        return command

    command = [application]
    if directory:
        command.append(directory)
    if path:
        command.append(file_location(path, line, column))
    return command


class SubprocessLauncher:
    """``ProcessLauncher`` that spawns a detached child process."""

    def start(self, command: Sequence[str]) -> bool:
        logger.info("Running command: %s", " ".join(command))
        try:
            subprocess.Popen(
                list(command),
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=os.name != "nt",
            )
        except OSError as exc:
            logger.warning("Could not start %s: %s", command[0], exc)
            return False
        return True


def open_in_installation(
    installation: ZedInstallation,
    launcher: ProcessLauncher,
    path: str,
    line: int,
    column: int,
    solution: str,
    platform: str | None = None,
) -> bool:
    """Open *path* with *installation*; True when the launch was dispatched."""
    target = platform or current_platform()
    if target == "macos":
        application = installation.path
    else:
        application = cli_command_for(installation)
    command = build_open_command(application, path, line, column, solution, platform=target)
    return launcher.start(command)
