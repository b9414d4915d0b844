"""zedbridge CLI -- inspect and drive the Zed editor integration.

Commands:
    installations -- List discovered Zed installations.
    resolve       -- Check a single path.
    open          -- Open a file in the configured installation.
    coverage      -- Check whether a script is part of a generated project.

Usage::

    zedbridge installations
    zedbridge resolve ~/.local/bin/zed --no-cache
    zedbridge --config zedbridge.yaml open Assets/Player.cs --line 12
    zedbridge --config zedbridge.yaml coverage Packages/com.acme/Foo.cs
"""

from __future__ import annotations

import logging

import click
from rich.logging import RichHandler

from zedbridge import __version__
from zedbridge.cli.installations_cmd import installations_command, resolve_command
from zedbridge.cli.open_cmd import coverage_command, open_command
from zedbridge.config import EditorSettings, load_settings
from zedbridge.discovery.platform_paths import iter_platforms
from zedbridge.editor.coverage import PrefixPackageIndex
from zedbridge.editor.zed_editor import ZedEditor
from zedbridge.exceptions import ConfigError

DEFAULT_CONFIG = "zedbridge.yaml"


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
    )


def build_editor(settings: EditorSettings, platform_name: str | None) -> ZedEditor:
    """Create the editor facade the subcommands operate on."""
    return ZedEditor(
        settings=settings,
        package_metadata=PrefixPackageIndex(settings.packages),
        platform=platform_name,
    )


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--config", "config_path",
    type=click.Path(dir_okay=False),
    default=DEFAULT_CONFIG,
    show_default=True,
    help="Editor settings file (YAML).",
)
@click.option(
    "--platform", "platform_name",
    type=click.Choice(list(iter_platforms())),
    default=None,
    help="Pretend to run on another platform.",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Debug logging.")
@click.pass_context
def cli(
    ctx: click.Context,
    config_path: str,
    platform_name: str | None,
    verbose: bool,
) -> None:
    """zedbridge: Zed editor integration for game-engine projects.

    Discovers installed copies of Zed, checks whether scripts are covered
    by the generated C# projects, and opens files at a line and column.
    """
    _configure_logging(verbose)
    try:
        settings = load_settings(config_path)
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc

    ctx.obj = build_editor(settings, platform_name)


cli.add_command(installations_command)
cli.add_command(resolve_command)
cli.add_command(open_command)
cli.add_command(coverage_command)
