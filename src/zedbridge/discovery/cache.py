"""One-shot, background-computed cache of discovered installations.

The scan is slow (one ``zed --version`` per installed copy), so it is
started once when the integration boots and runs on a daemon thread.
Readers call ``result()``, which blocks until the scan has published
its mapping and then returns that same read-only mapping to every
caller. Nothing is ever written to the mapping after publication.

Usage::

    cache = DiscoveryCache(lambda: scan_installations(policy, resolver))
    cache.start()
    ...
    installations = cache.result()
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Mapping
from concurrent.futures import Future
from types import MappingProxyType

from zedbridge.discovery.models import ZedInstallation
from zedbridge.discovery.platform_paths import PlatformPathPolicy
from zedbridge.discovery.resolver import InstallationResolver, canonicalize_path

logger = logging.getLogger(__name__)

InstallationMap = Mapping[str, ZedInstallation]

_EMPTY: InstallationMap = MappingProxyType({})


def scan_installations(
    policy: PlatformPathPolicy, resolver: InstallationResolver,
) -> dict[str, ZedInstallation]:
    """Probe every platform candidate and key the hits by canonical path."""
    found: dict[str, ZedInstallation] = {}
    seen: set[str] = set()
    for candidate in policy.candidate_paths():
        canonical = canonicalize_path(candidate)
        if canonical in seen:
            continue
        seen.add(canonical)
        installation = resolver.try_resolve(canonical)
        if installation is not None:
            found[installation.path] = installation
    return found


class DiscoveryCache:
    """Write-once installation mapping computed off the calling thread.

    Args:
        producer: Callable returning the path-to-installation mapping.
            Called at most once. If it raises, the published mapping is
            empty; reporting the failure is the producer's job.
    """

    def __init__(self, producer: Callable[[], Mapping[str, ZedInstallation]]) -> None:
        self._producer = producer
        self._future: Future[InstallationMap] = Future()
        self._start_lock = threading.Lock()
        self._thread: threading.Thread | None = None

    @property
    def started(self) -> bool:
        return self._thread is not None

    def done(self) -> bool:
        """True once the mapping has been published."""
        return self._future.done()

    def start(self) -> DiscoveryCache:
        """Launch the scan on a background thread. Later calls are no-ops."""
        with self._start_lock:
            if self._thread is None:
                self._thread = threading.Thread(
                    target=self._run, name="zed-discovery", daemon=True,
                )
                self._thread.start()
        return self

    def _run(self) -> None:
        published = _EMPTY
        try:
            published = MappingProxyType(dict(self._producer()))
        except Exception:
            logger.debug("Discovery producer failed; publishing empty result")
        finally:
            self._future.set_result(published)

    def result(self, timeout: float | None = None) -> InstallationMap:
        """Block until the scan has published, then return its mapping.

        Starts the scan first if it is not running yet.

        Raises:
            TimeoutError: If *timeout* elapses before publication.
        """
        self.start()
        return self._future.result(timeout=timeout)
