"""``ZedEditor``: the host-facing entry point of the integration.

One ``ZedEditor`` is created when the host boots. It owns the discovery
cache (started immediately, read lazily), resolves the user's configured
editor path, and routes project generation and file opening to the
host-provided collaborators.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Sequence
from pathlib import Path

from zedbridge.config import EditorSettings
from zedbridge.discovery.cache import DiscoveryCache, scan_installations
from zedbridge.discovery.models import (
    ZedInstallation,
    describe_installation,
    installation_sort_key,
)
from zedbridge.discovery.platform_paths import policy_for_platform
from zedbridge.discovery.resolver import InstallationResolver, canonicalize_path
from zedbridge.discovery.version_probe import VersionProber
from zedbridge.editor.coverage import COVERED, CoverageResult, coverage_warning, is_covered
from zedbridge.editor.host import (
    ExternalCodeEditor,
    PackageMetadata,
    ProcessLauncher,
    ProjectGenerator,
)
from zedbridge.editor.launch import SubprocessLauncher, open_in_installation
from zedbridge.editor.sync import SyncTrigger
from zedbridge.flags import ProjectGenerationFlag, toggled

logger = logging.getLogger(__name__)


def discover_installations(resolver: InstallationResolver) -> dict[str, ZedInstallation]:
    """Full discovery scan; an unexpected failure yields no installations."""
    try:
        return scan_installations(resolver.policy, resolver)
    except Exception:
        logger.error("Error detecting Zed installations", exc_info=True)
        return {}


def start_discovery(resolver: InstallationResolver) -> DiscoveryCache:
    """Create the discovery cache and start its background scan."""
    return DiscoveryCache(lambda: discover_installations(resolver)).start()


class ZedEditor(ExternalCodeEditor):
    """Zed implementation of the host's external code editor surface.

    Args:
        settings: Snapshot of the user's external-tool settings.
        generator: Project generator; ``None`` disables generation.
        package_metadata: Package origin lookup for coverage checks.
        resolver: Installation resolver; built for this platform if omitted.
        launcher: Process launcher used by ``open``.
        cache: Discovery cache; started from *resolver* if omitted.
        platform: Platform override (``macos``, ``windows``, ``linux``).
    """

    def __init__(
        self,
        settings: EditorSettings | None = None,
        generator: ProjectGenerator | None = None,
        package_metadata: PackageMetadata | None = None,
        resolver: InstallationResolver | None = None,
        launcher: ProcessLauncher | None = None,
        cache: DiscoveryCache | None = None,
        platform: str | None = None,
    ) -> None:
        self.settings = settings if settings is not None else EditorSettings()
        self.platform = platform
        self.generator = generator
        self.package_metadata = package_metadata
        self.resolver = resolver if resolver is not None else InstallationResolver(
            policy_for_platform(platform),
            VersionProber(self.settings.probe_timeout),
        )
        self.launcher = launcher if launcher is not None else SubprocessLauncher()
        self._cache = cache if cache is not None else start_discovery(self.resolver)
        self.editor_path = self.settings.editor_path
        self._generation_flags = self.settings.generation_flags

    # -- discovery -----------------------------------------------------

    @property
    def cache(self) -> DiscoveryCache:
        return self._cache

    def rediscover(self) -> DiscoveryCache:
        """Start a fresh scan; later reads wait for its result.

        Readers holding the previous mapping keep a consistent snapshot.
        """
        self._cache = start_discovery(self.resolver)
        return self._cache

    def list_installations(self) -> list[ZedInstallation]:
        """Discovered installations, stable releases first, newest first."""
        return sorted(self._cache.result().values(), key=installation_sort_key)

    def default_installation(self) -> ZedInstallation | None:
        installations = self.list_installations()
        return installations[0] if installations else None

    def try_get_installation_for_path(
        self, editor_path: str, use_discovered_cache: bool = False,
    ) -> ZedInstallation | None:
        """Resolve *editor_path*, preferring the discovery cache if asked.

        A path missing from the cache is resolved from scratch, which
        spawns ``zed --version``; avoid calling this on a UI thread with
        ``use_discovered_cache=False``.
        """
        if not editor_path:
            return None
        canonical = canonicalize_path(editor_path)
        if use_discovered_cache:
            installation = self._cache.result().get(canonical)
            if installation is not None:
                return installation
        return self.resolver.try_resolve(canonical)

    def initialize(self, editor_installation_path: str) -> None:
        """Called by the host when the user selects this installation."""
        self.editor_path = editor_installation_path

    # -- project generation ----------------------------------------------

    @property
    def project_directory(self) -> str:
        if self.generator is not None:
            return self.generator.project_directory
        return self.settings.project_directory

    @property
    def generation_flags(self) -> frozenset[ProjectGenerationFlag]:
        if self.generator is not None:
            return frozenset(self.generator.generation_flags)
        return self._generation_flags

    def toggle_generation_flag(self, flag: ProjectGenerationFlag) -> None:
        if self.generator is not None:
            self.generator.toggle_project_generation(flag)
        else:
            self._generation_flags = toggled(self._generation_flags, flag)

    def _current_generator(self) -> ProjectGenerator | None:
        if self.generator is None:
            return None
        if self.try_get_installation_for_path(self.editor_path, use_discovered_cache=True) is None:
            return None
        return self.generator

    def sync_all(self) -> None:
        generator = self._current_generator()
        if generator is not None:
            generator.sync()

    def create_if_doesnt_exist(self) -> None:
        generator = self._current_generator()
        if generator is not None and not generator.has_solution_been_generated():
            generator.sync()

    def on_files_changed(
        self,
        added_files: Sequence[str],
        deleted_files: Sequence[str],
        moved_files: Sequence[str],
        moved_from_files: Sequence[str],
        imported_files: Sequence[str],
    ) -> None:
        trigger = SyncTrigger(self.project_directory)
        trigger.on_files_changed(
            self._current_generator(),
            added_files, deleted_files, moved_files, moved_from_files, imported_files,
        )

    def solution_file(self) -> str:
        """Sync and return the solution path handed to the editor."""
        if self.generator is not None:
            self.generator.sync()
            return self.generator.solution_file()
        directory = self.project_directory
        return os.path.join(directory, f"{Path(directory).name}.sln")

    # -- opening files ---------------------------------------------------

    def check_coverage(self, path: str) -> CoverageResult:
        """Is *path* part of a generated project? See ``coverage.is_covered``."""
        if self.package_metadata is None:
            return COVERED
        return is_covered(
            path,
            self.project_directory,
            self.generation_flags,
            self.package_metadata.category_of,
        )

    def is_supported_path(self, path: str) -> bool:
        # An empty path means "open the solution", always allowed.
        if not path:
            return True
        if self.generator is None:
            return True
        return self.generator.is_supported_file(path)

    def open(
        self,
        installation: ZedInstallation | str,
        path: str,
        line: int,
        column: int,
        solution: str,
    ) -> bool:
        """Open *path* at *line*/*column* with the given installation.

        *installation* may be a record or an editor path to resolve.
        Returns whether the launch was dispatched.
        """
        if isinstance(installation, str):
            resolved = self.try_get_installation_for_path(
                installation, use_discovered_cache=True,
            )
            if resolved is None:
                logger.warning(
                    "Zed executable %s is not found. Please change your settings "
                    "in Edit > Preferences > External Tools.", installation,
                )
                return False
            installation = resolved
        return open_in_installation(
            installation, self.launcher, path, line, column, solution,
            platform=self.platform,
        )

    def open_project(self, path: str = "", line: int = -1, column: int = -1) -> bool:
        installation = self.try_get_installation_for_path(self.editor_path)
        if installation is None:
            logger.warning(
                "Zed executable %s is not found. Please change your settings "
                "in Edit > Preferences > External Tools.", self.editor_path,
            )
            return False

        if not self.is_supported_path(path):
            return False

        coverage = self.check_coverage(path)
        if not coverage.covered and coverage.missing_flag is not None:
            logger.warning(coverage_warning(path, coverage.missing_flag))

        return self.open(installation, path, line, column, self.solution_file())


def generate_solution(editor: ZedEditor) -> ZedInstallation | None:
    """Batch-mode project generation.

    Uses the configured installation when it resolves; otherwise picks
    the preferred discovered installation for the duration of the sync.
    Returns the installation used, or ``None``.
    """
    configured = editor.try_get_installation_for_path(
        editor.editor_path, use_discovered_cache=True,
    )
    if configured is not None:
        logger.info("Using %s", describe_installation(configured))
        editor.sync_all()
        return configured

    logger.info("No usable configured Zed installation, looking for installations")
    installations = editor.list_installations()
    for installation in installations:
        logger.info("Detected %s", describe_installation(installation))
    if not installations:
        logger.info("No Zed installation found!")
        return None

    selected = installations[0]
    previous = editor.editor_path
    editor.editor_path = selected.path
    try:
        logger.info("Using %s", describe_installation(selected))
        editor.sync_all()
    finally:
        editor.editor_path = previous
    return selected
