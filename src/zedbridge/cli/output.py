"""Rich output formatting helpers for the zedbridge CLI."""

from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.table import Table
from rich.text import Text

from zedbridge.discovery.models import ZedInstallation
from zedbridge.editor.coverage import CoverageResult
from zedbridge.flags import flag_description

console = Console()


def installation_to_dict(installation: ZedInstallation) -> dict[str, Any]:
    """JSON-serializable view of an installation record."""
    return {
        "name": installation.name,
        "path": installation.path,
        "version": str(installation.version) if installation.version else None,
        "is_prerelease": installation.is_prerelease,
        "supports_analyzers": installation.supports_analyzers,
        "latest_language_version": ".".join(
            str(p) for p in installation.latest_language_version
        ),
    }


def print_installations(installations: list[ZedInstallation]) -> None:
    """Print discovered installations, preferred first.

    Args:
        installations: Already ordered installation records.
    """
    if not installations:
        console.print("[dim]No Zed installation found.[/dim]")
        return

    table = Table(title="Zed Installations", show_header=True, header_style="bold")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Name", style="bold")
    table.add_column("Version")
    table.add_column("Channel", justify="center")
    table.add_column("Path", style="dim")

    for idx, installation in enumerate(installations, start=1):
        if installation.is_prerelease:
            channel = Text("preview", style="yellow")
        else:
            channel = Text("stable", style="green")
        table.add_row(
            str(idx), installation.name, installation.version_text,
            channel, installation.path,
        )

    console.print(table)


def print_coverage(path: str, result: CoverageResult) -> None:
    if result.covered:
        console.print(f"[green]covered[/green] {path}")
        return
    label = flag_description(result.missing_flag) if result.missing_flag else "?"
    console.print(f"[red]not covered[/red] {path} (enable {label})")
