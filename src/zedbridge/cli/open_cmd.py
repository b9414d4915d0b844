"""``zedbridge open`` and ``zedbridge coverage``.

``open`` launches the configured Zed installation on a file (or on the
project folder when FILE is omitted). ``coverage`` reports whether a
script belongs to a generated project.

Exit Codes:
    0 -- Launch dispatched / file covered.
    1 -- No installation configured / file not covered.
"""

from __future__ import annotations

import sys

import click

from zedbridge.cli.output import print_coverage
from zedbridge.editor.zed_editor import ZedEditor


@click.command("open")
@click.argument("file", required=False, default="")
@click.option("--line", type=int, default=-1, help="1-based line to jump to.")
@click.option("--column", type=int, default=-1, help="1-based column to jump to.")
@click.option(
    "--solution",
    type=click.Path(dir_okay=False),
    default=None,
    help="Solution file; its folder is opened as the project.",
)
@click.pass_obj
def open_command(
    editor: ZedEditor,
    file: str,
    line: int,
    column: int,
    solution: str | None,
) -> None:
    """Open FILE in the configured Zed installation."""
    if solution is None:
        dispatched = editor.open_project(file, line, column)
    else:
        dispatched = editor.open(editor.editor_path, file, line, column, solution)
    if not dispatched:
        click.echo("Zed was not launched. Check editor_path in your settings.", err=True)
    sys.exit(0 if dispatched else 1)


@click.command("coverage")
@click.argument("file")
@click.pass_obj
def coverage_command(editor: ZedEditor, file: str) -> None:
    """Report whether FILE is covered by the generated projects."""
    result = editor.check_coverage(file)
    print_coverage(file, result)
    sys.exit(0 if result.covered else 1)
