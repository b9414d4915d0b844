"""Read-only editor settings.

The host owns persistence; this module only reads a YAML snapshot of
what the user configured under *External Tools*::

    editor_path: /usr/bin/zed
    project_directory: ~/Projects/MyGame
    generation_flags: [Embedded, Local, Registry]
    probe_timeout: 3
    packages:
      Packages/com.acme.tools: Git
      Packages/com.acme.local: Local
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from zedbridge.discovery.version_probe import DEFAULT_TIMEOUT
from zedbridge.flags import (
    DEFAULT_GENERATION_FLAGS,
    ProjectGenerationFlag,
    parse_flag,
)
from zedbridge.exceptions import ConfigError


@dataclass(frozen=True)
class EditorSettings:
    """External-tool settings relevant to the Zed integration.

    Attributes:
        editor_path: Installation the user selected; empty if none.
        project_directory: Root of the game project.
        generation_flags: Package origins that get project files.
        packages: Package root (project-relative) to origin.
        probe_timeout: Seconds allowed for ``zed --version``.
    """

    editor_path: str = ""
    project_directory: str = field(default_factory=os.getcwd)
    generation_flags: frozenset[ProjectGenerationFlag] = DEFAULT_GENERATION_FLAGS
    packages: dict[str, ProjectGenerationFlag] = field(default_factory=dict)
    probe_timeout: float = DEFAULT_TIMEOUT


def _flag(name: Any, where: str) -> ProjectGenerationFlag:
    flag = parse_flag(str(name))
    if flag is None:
        raise ConfigError(f"Unknown project generation flag in {where}: {name!r}")
    return flag


def settings_from_dict(data: dict[str, Any]) -> EditorSettings:
    """Build settings from an already-parsed mapping.

    Raises:
        ConfigError: On unknown flags or values of the wrong type.
    """
    defaults = EditorSettings()

    raw_flags = data.get("generation_flags")
    if raw_flags is None:
        flags = defaults.generation_flags
    elif isinstance(raw_flags, list):
        flags = frozenset(_flag(name, "generation_flags") for name in raw_flags)
    else:
        raise ConfigError("generation_flags must be a list of flag names")

    raw_packages = data.get("packages") or {}
    if not isinstance(raw_packages, dict):
        raise ConfigError("packages must map package roots to flag names")
    packages = {
        str(root): _flag(name, f"packages[{root!r}]")
        for root, name in raw_packages.items()
    }

    try:
        timeout = float(data.get("probe_timeout", defaults.probe_timeout))
    except (TypeError, ValueError):
        raise ConfigError("probe_timeout must be a number of seconds") from None

    project_directory = data.get("project_directory") or defaults.project_directory
    return EditorSettings(
        editor_path=os.path.expanduser(str(data.get("editor_path") or "")),
        project_directory=os.path.expanduser(str(project_directory)),
        generation_flags=flags,
        packages=packages,
        probe_timeout=timeout,
    )


def load_settings(path: str | Path | None) -> EditorSettings:
    """Load settings from a YAML file; a missing file yields defaults.

    Raises:
        ConfigError: If the file cannot be read or parsed.
    """
    if path is None:
        return EditorSettings()
    settings_path = Path(path)
    if not settings_path.exists():
        return EditorSettings()
    try:
        raw = settings_path.read_text(encoding="utf-8")
        data = yaml.safe_load(raw)
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"Cannot load settings from {settings_path}: {exc}") from exc

    if data is None:
        return EditorSettings()
    if not isinstance(data, dict):
        raise ConfigError(f"Settings file {settings_path} must contain a mapping")
    return settings_from_dict(data)
