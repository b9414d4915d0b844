"""Turn a filesystem path into a ``ZedInstallation`` record.

Resolution is a two-stage filter: the platform policy rejects paths
that obviously are not Zed (wrong name, missing file) without spawning
anything, and only survivors are handed to the version prober.
"""

from __future__ import annotations

import os

from zedbridge.discovery.models import ZedInstallation, display_name
from zedbridge.discovery.platform_paths import PlatformPathPolicy, policy_for_platform
from zedbridge.discovery.version_probe import VersionProber

_PRERELEASE_MARKERS = ("preview", "nightly")


def canonicalize_path(path: str | os.PathLike[str]) -> str:
    """Return the absolute, OS-native form of *path*.

    ``~`` is expanded and ``.``/``..`` segments are collapsed, so every
    spelling of the same location yields the same cache key.
    """
    text = os.path.expanduser(os.fspath(path))
    return os.path.normpath(os.path.abspath(text))


def is_prerelease_path(path: str) -> bool:
    lowered = path.lower()
    return any(marker in lowered for marker in _PRERELEASE_MARKERS)


class InstallationResolver:
    """Resolve candidate paths into installation records.

    Args:
        policy: Platform policy used for the cheap pre-filter.
        prober: Version prober; one subprocess per accepted candidate.
    """

    def __init__(
        self,
        policy: PlatformPathPolicy | None = None,
        prober: VersionProber | None = None,
    ) -> None:
        self.policy = policy if policy is not None else policy_for_platform()
        self.prober = prober if prober is not None else VersionProber()

    def try_resolve(self, path: str | os.PathLike[str] | None) -> ZedInstallation | None:
        """Return a record for *path*, or ``None`` if it is not Zed.

        Never raises. An unknown version does not reject the path.
        """
        if not path:
            return None
        canonical = canonicalize_path(path)
        if not self.policy.is_candidate(canonical):
            return None

        version = self.prober.probe(canonical)
        prerelease = is_prerelease_path(canonical)
        return ZedInstallation(
            name=display_name(version, prerelease),
            path=canonical,
            version=version,
            is_prerelease=prerelease,
        )
