"""Contracts between the Zed integration and its host.

The host (the game editor) talks to any external code editor through
``ExternalCodeEditor``; ``ZedEditor`` is one implementation among many
the host may hold. In the other direction the integration depends on
three collaborators it does not own:

- ``ProjectGenerator`` writes the ``.sln``/``.csproj`` files and keeps
  the configured generation flags.
- ``PackageMetadata`` maps an asset path to its package's origin.
- ``ProcessLauncher`` starts the editor process.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence
from typing import Protocol, runtime_checkable

from zedbridge.discovery.models import ZedInstallation
from zedbridge.flags import ProjectGenerationFlag


@runtime_checkable
class ProjectGenerator(Protocol):
    """Owner of the generated solution and project files."""

    @property
    def project_directory(self) -> str: ...

    @property
    def generation_flags(self) -> frozenset[ProjectGenerationFlag]: ...

    def toggle_project_generation(self, flag: ProjectGenerationFlag) -> None: ...

    def sync(self) -> None: ...

    def sync_if_needed(
        self, changed_files: Iterable[str], imported_files: Iterable[str],
    ) -> bool: ...

    def has_solution_been_generated(self) -> bool: ...

    def solution_file(self) -> str: ...

    def is_supported_file(self, path: str) -> bool: ...


@runtime_checkable
class PackageMetadata(Protocol):
    """Looks up the origin of the package owning an asset."""

    def category_of(self, relative_asset_path: str) -> ProjectGenerationFlag | None: ...


@runtime_checkable
class ProcessLauncher(Protocol):
    """Starts a detached process; returns whether it was dispatched."""

    def start(self, command: Sequence[str]) -> bool: ...


class ExternalCodeEditor(ABC):
    """Capability surface the host expects from a pluggable code editor."""

    @abstractmethod
    def list_installations(self) -> list[ZedInstallation]:
        """Installations to offer in the host's editor picker."""

    @abstractmethod
    def try_get_installation_for_path(
        self, editor_path: str, use_discovered_cache: bool = False,
    ) -> ZedInstallation | None:
        """Resolve a path the user picked by hand."""

    @abstractmethod
    def open_project(self, path: str = "", line: int = -1, column: int = -1) -> bool:
        """Open *path* (or the whole solution when empty) in the editor."""

    @abstractmethod
    def on_files_changed(
        self,
        added_files: Sequence[str],
        deleted_files: Sequence[str],
        moved_files: Sequence[str],
        moved_from_files: Sequence[str],
        imported_files: Sequence[str],
    ) -> None:
        """React to an asset database refresh."""

    @abstractmethod
    def sync_all(self) -> None:
        """Regenerate all project files."""

    @abstractmethod
    def create_if_doesnt_exist(self) -> None:
        """Generate project files unless a solution already exists."""
