"""Host integration: opening files, coverage checks, and project sync."""

from __future__ import annotations

from zedbridge.editor.coverage import CoverageResult, PrefixPackageIndex, is_covered
from zedbridge.editor.host import (
    ExternalCodeEditor,
    PackageMetadata,
    ProcessLauncher,
    ProjectGenerator,
)
from zedbridge.editor.sync import SyncTrigger
from zedbridge.editor.zed_editor import ZedEditor, generate_solution
from zedbridge.flags import ProjectGenerationFlag, flag_description

__all__ = [
    "CoverageResult",
    "ExternalCodeEditor",
    "PackageMetadata",
    "PrefixPackageIndex",
    "ProcessLauncher",
    "ProjectGenerationFlag",
    "ProjectGenerator",
    "SyncTrigger",
    "ZedEditor",
    "flag_description",
    "generate_solution",
    "is_covered",
]
