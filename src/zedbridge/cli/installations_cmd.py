"""``zedbridge installations`` and ``zedbridge resolve``.

Exit Codes:
    0 -- At least one installation found / the path is an installation.
    1 -- Nothing found.
"""

from __future__ import annotations

import json
import sys

import click

from zedbridge.cli.output import installation_to_dict, print_installations
from zedbridge.editor.zed_editor import ZedEditor


@click.command("installations")
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format: text (default) or json.",
)
@click.pass_obj
def installations_command(editor: ZedEditor, output_format: str) -> None:
    """List Zed installations found on this machine, preferred first."""
    installations = editor.list_installations()
    if output_format == "json":
        click.echo(json.dumps([installation_to_dict(i) for i in installations], indent=2))
    else:
        print_installations(installations)
    sys.exit(0 if installations else 1)


@click.command("resolve")
@click.argument("path")
@click.option(
    "--no-cache",
    is_flag=True,
    default=False,
    help="Probe PATH directly instead of consulting the discovery scan.",
)
@click.pass_obj
def resolve_command(editor: ZedEditor, path: str, no_cache: bool) -> None:
    """Check whether PATH is a Zed installation and print its details."""
    installation = editor.try_get_installation_for_path(
        path, use_discovered_cache=not no_cache,
    )
    if installation is None:
        click.echo(f"No Zed installation found at {path}")
        sys.exit(1)
    click.echo(json.dumps(installation_to_dict(installation), indent=2))
