"""Forward asset database changes to the project generator.

Also audits freshly imported ``.pdb`` files: the engine can only load
portable PDBs, so a Windows-format PDB shipped next to a managed DLL is
worth a warning. The audit never influences syncing.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Sequence
from itertools import chain

from zedbridge.editor.host import ProjectGenerator
from zedbridge.editor.symbols import is_assembly, is_portable_symbol_file

logger = logging.getLogger(__name__)

SYMBOL_EXTENSION = ".pdb"
ASSEMBLY_EXTENSION = ".dll"

# Engine-owned packages, skipped by the symbol audit.
VENDOR_PACKAGE_MARKER = "com.unity."


def changed_files(*groups: Iterable[str]) -> list[str]:
    """Union of the given path groups, first occurrence order kept."""
    return list(dict.fromkeys(chain.from_iterable(groups)))


class SyncTrigger:
    """Routes change batches to a ``ProjectGenerator``.

    Args:
        project_directory: Root used to resolve project-relative paths.
    """

    def __init__(self, project_directory: str) -> None:
        self.project_directory = project_directory

    def on_files_changed(
        self,
        generator: ProjectGenerator | None,
        added: Sequence[str],
        deleted: Sequence[str],
        moved: Sequence[str],
        moved_from: Sequence[str],
        imported: Sequence[str],
    ) -> bool:
        """Forward a change batch; returns whether the generator re-synced.

        With no generator (no usable installation) only the symbol audit
        runs.
        """
        synced = False
        if generator is not None:
            changes = changed_files(added, deleted, moved, moved_from)
            synced = bool(generator.sync_if_needed(changes, list(imported)))
        self.audit_symbol_files(imported)
        return synced

    def asset_full_path(self, asset_path: str) -> str:
        path = os.path.join(self.project_directory, asset_path)
        return os.path.normpath(os.path.abspath(path))

    def audit_symbol_files(self, imported: Iterable[str]) -> list[str]:
        """Warn about legacy PDBs; returns the offending asset paths."""
        legacy: list[str] = []
        for asset in imported:
            if os.path.splitext(asset)[1].lower() != SYMBOL_EXTENSION:
                continue
            pdb_file = self.asset_full_path(asset)
            if (os.sep + VENDOR_PACKAGE_MARKER) in pdb_file.lower():
                continue

            assembly = os.path.splitext(pdb_file)[0] + ASSEMBLY_EXTENSION
            if not os.path.isfile(assembly) or not is_assembly(assembly):
                continue
            if is_portable_symbol_file(pdb_file):
                continue

            logger.warning(
                "Unity is only able to load mdb or portable-pdb symbols. "
                "%s is using a legacy pdb format.", asset,
            )
            legacy.append(asset)
        return legacy
