"""Shared CLI helpers."""

import sys
from dataclasses import replace
from pathlib import Path
from typing import Callable, List, Tuple

import typer
from rich.console import Console
from rich.markup import escape

from ..config import FormatOptions
from ..formatters.formats import Format
from ..output import OutputTarget, parse_output, write_file, write_github_output

console = Console()
err_console = Console(stderr=True)

Renderer = Callable[[Format, FormatOptions], str]


def print_error(message: str) -> None:
    err_console.print(f"[red]Error:[/red] {escape(message)}")


def parse_targets(
    output_file: List[str],
    output_github: List[str],
    fmt: Format,
) -> Tuple[List[OutputTarget], List[OutputTarget]]:
    """Parse ``--output-file`` and ``--output-github`` values.

    Output files without an explicit format inherit ``--format``.
    """
    file_targets = [
        parse_output(value, "--output-file", require_format=False).with_default(fmt)
        for value in output_file
    ]
    github_targets = [
        parse_output(value, "--output-github", require_format=True) for value in output_github
    ]
    return file_targets, github_targets


def emit_report(
    render: Renderer,
    fmt: Format,
    options: FormatOptions,
    file_targets: List[OutputTarget],
    github_targets: List[OutputTarget],
    cwd: Path,
) -> None:
    """Write the report to every requested destination.

    Stdout is only used when no output file was requested. Colour only ever
    reaches stdout; files and GitHub outputs are always plain text.
    """
    plain_options = replace(options, color=False)

    if file_targets:
        for target in file_targets:
            write_file(render(target.format, plain_options), target.key, cwd)
    else:
        stdout_options = replace(options, color=options.color or sys.stdout.isatty())
        typer.echo(render(fmt, stdout_options))

    for target in github_targets:
        write_github_output(render(target.format, plain_options), target.key)
