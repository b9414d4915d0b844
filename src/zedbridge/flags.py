"""Project-generation categories.

A package's origin (embedded in the project, pulled from a registry,
cloned from git, ...) decides whether project files are generated for
its scripts. The configured selection is an ordinary ``frozenset`` of
``ProjectGenerationFlag`` members.
"""

from __future__ import annotations

from enum import Enum


class ProjectGenerationFlag(Enum):
    """Origins a package can come from, plus player-assembly projects."""

    EMBEDDED = "Embedded"
    LOCAL = "Local"
    REGISTRY = "Registry"
    GIT = "Git"
    BUILT_IN = "BuiltIn"
    LOCAL_TARBALL = "LocalTarBall"
    UNKNOWN = "Unknown"
    PLAYER_ASSEMBLIES = "PlayerAssemblies"


_DESCRIPTIONS: dict[ProjectGenerationFlag, str] = {
    ProjectGenerationFlag.EMBEDDED: "Embedded packages",
    ProjectGenerationFlag.LOCAL: "Local packages",
    ProjectGenerationFlag.REGISTRY: "Registry packages",
    ProjectGenerationFlag.GIT: "Git packages",
    ProjectGenerationFlag.BUILT_IN: "Built-in packages",
    ProjectGenerationFlag.LOCAL_TARBALL: "Local tarball",
    ProjectGenerationFlag.UNKNOWN: "Packages from unknown sources",
    ProjectGenerationFlag.PLAYER_ASSEMBLIES: "Player projects",
}

DEFAULT_GENERATION_FLAGS: frozenset[ProjectGenerationFlag] = frozenset({
    ProjectGenerationFlag.EMBEDDED,
    ProjectGenerationFlag.LOCAL,
})


def flag_description(flag: ProjectGenerationFlag) -> str:
    """Human-readable label, as shown in the external tools settings."""
    return _DESCRIPTIONS.get(flag, "")


def parse_flag(name: str) -> ProjectGenerationFlag | None:
    """Look up a flag by value or member name, ignoring case and ``_``.

    ``"BuiltIn"``, ``"built_in"`` and ``"BUILT_IN"`` all name the same
    flag. Returns ``None`` for anything else.
    """
    key = name.replace("_", "").replace("-", "").strip().lower()
    for flag in ProjectGenerationFlag:
        if flag.value.lower() == key:
            return flag
    return None


def toggled(
    flags: frozenset[ProjectGenerationFlag], flag: ProjectGenerationFlag,
) -> frozenset[ProjectGenerationFlag]:
    """Return *flags* with *flag* switched on or off."""
    return flags - {flag} if flag in flags else flags | {flag}
