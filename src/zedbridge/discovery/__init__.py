"""Discovery of Zed installations on the local machine.

Public API::

    from zedbridge.discovery import DiscoveryCache, InstallationResolver

    resolver = InstallationResolver()
    cache = DiscoveryCache(
        lambda: scan_installations(resolver.policy, resolver)
    ).start()
    for path, installation in cache.result().items():
        print(installation.name, path)
"""

from __future__ import annotations

from zedbridge.discovery.cache import DiscoveryCache, scan_installations
from zedbridge.discovery.models import (
    EditorVersion,
    ZedInstallation,
    describe_installation,
    installation_sort_key,
)
from zedbridge.discovery.platform_paths import (
    LinuxPathPolicy,
    MacOSPathPolicy,
    PlatformPathPolicy,
    WindowsPathPolicy,
    current_platform,
    policy_for_platform,
)
from zedbridge.discovery.resolver import InstallationResolver, canonicalize_path
from zedbridge.discovery.version_probe import VersionProber, parse_version_output

__all__ = [
    "DiscoveryCache",
    "EditorVersion",
    "InstallationResolver",
    "LinuxPathPolicy",
    "MacOSPathPolicy",
    "PlatformPathPolicy",
    "VersionProber",
    "WindowsPathPolicy",
    "ZedInstallation",
    "canonicalize_path",
    "current_platform",
    "describe_installation",
    "installation_sort_key",
    "parse_version_output",
    "policy_for_platform",
    "scan_installations",
]
