"""Is a script covered by the currently generated projects?

Project files are only generated for packages whose origin is enabled
in the generation flags. Opening a script from any other package works,
but the language server will not know about it, so the caller warns.
The check never blocks the open.
"""

from __future__ import annotations

import os
import posixpath
from collections.abc import Callable, Collection, Mapping
from dataclasses import dataclass

from zedbridge.flags import ProjectGenerationFlag, flag_description

SCRIPT_EXTENSIONS: frozenset[str] = frozenset({".cs"})

CategoryLookup = Callable[[str], ProjectGenerationFlag | None]


@dataclass(frozen=True)
class CoverageResult:
    """Outcome of a coverage check.

    Attributes:
        covered: True when the file is part of a generated project, or
            when coverage does not apply to it.
        missing_flag: Origin that would have to be enabled, if uncovered.
    """

    covered: bool
    missing_flag: ProjectGenerationFlag | None = None


COVERED = CoverageResult(covered=True)


def is_script_file(path: str) -> bool:
    return os.path.splitext(path)[1].lower() in SCRIPT_EXTENSIONS


def relative_asset_path(file_path: str, project_root: str) -> str:
    """Project-relative, forward-slash form of *file_path*.

    The package database wants ``Packages/com.foo/Runtime/Bar.cs`` even
    on Windows. ``.`` and ``..`` segments are collapsed first.
    """
    if not file_path:
        return ""
    path = posixpath.normpath(file_path.replace("\\", "/"))
    root = project_root.replace("\\", "/")
    if root:
        root = posixpath.normpath(root).rstrip("/")
    if root and path.lower().startswith(root.lower() + "/"):
        path = path[len(root):]
    return path.strip("/")


def is_covered(
    file_path: str,
    project_root: str,
    generation_flags: Collection[ProjectGenerationFlag],
    category_of: CategoryLookup,
) -> CoverageResult:
    """Decide whether *file_path* belongs to a generated project."""
    if not file_path:
        return COVERED
    if not is_script_file(file_path):
        return COVERED

    category = category_of(relative_asset_path(file_path, project_root))
    if category is None or category in generation_flags:
        return COVERED
    return CoverageResult(covered=False, missing_flag=category)


def coverage_warning(file_path: str, missing_flag: ProjectGenerationFlag) -> str:
    """Warning shown when opening a script outside the generated projects."""
    return (
        f"You are trying to open {file_path} outside a generated project. "
        "This might cause problems with IntelliSense and debugging. To avoid "
        "this, you can change your .csproj preferences in Edit > Preferences > "
        f"External Tools and enable {flag_description(missing_flag)} generation."
    )


class PrefixPackageIndex:
    """``PackageMetadata`` backed by a static prefix table.

    Keys are project-relative package roots such as
    ``"Packages/com.acme.tools"``; the longest root containing the asset
    decides its category.
    """

    def __init__(self, packages: Mapping[str, ProjectGenerationFlag]) -> None:
        self._roots = sorted(
            ((root.replace("\\", "/").strip("/"), flag) for root, flag in packages.items()),
            key=lambda item: len(item[0]),
            reverse=True,
        )

    def category_of(self, relative_asset_path: str) -> ProjectGenerationFlag | None:
        path = relative_asset_path.replace("\\", "/").strip("/")
        for root, flag in self._roots:
            if root and (path == root or path.startswith(root + "/")):
                return flag
        return None
