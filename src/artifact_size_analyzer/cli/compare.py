"""Compare CLI command — diff two saved analysis results.

Reads the JSON written by ``analyze --format=json`` for a base and a
current build and reports per-artifact size changes.
"""

from pathlib import Path
from typing import List, Optional

import typer

from ..config import load_format_options
from ..diff import UnchangedMode, compare_artifacts
from ..exceptions import ArtifactSizeError
from ..formatters import format_diff
from ..formatters.formats import Format
from ..logging_config import setup_logging
from ..output import read_snapshot_file
from . import app
from ._common import emit_report, parse_targets, print_error


@app.command(name="compare")
def compare(
    base: Path = typer.Option(
        ...,
        "--base",
        "-b",
        help="Path to baseline JSON file",
        dir_okay=False,
    ),
    current: Path = typer.Option(
        ...,
        "--current",
        "-c",
        help="Path to current JSON file",
        dir_okay=False,
    ),
    fmt: Format = typer.Option(
        Format.TEXT,
        "--format",
        "-f",
        help="Output format",
        case_sensitive=False,
    ),
    unchanged: Optional[UnchangedMode] = typer.Option(
        None,
        "--unchanged",
        "-u",
        help="Show, hide or collapse artifacts whose size did not change [default: show]",
        case_sensitive=False,
    ),
    no_header: bool = typer.Option(
        False,
        "--no-header",
        help="Disable header in output for formats with headers",
    ),
    output_file: List[str] = typer.Option(
        [],
        "--output-file",
        "-o",
        help="Write output to file instead of stdout (format:filename or filename)",
    ),
    output_github: List[str] = typer.Option(
        [],
        "--output-github",
        help="Write output to a GitHub Actions output (format:key)",
        hidden=True,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
) -> None:
    """Compare two previously saved analysis results.

    [bold cyan]Examples:[/bold cyan]

      artifact-size-analyzer compare -b base.json -c current.json

      artifact-size-analyzer compare -b base.json -c current.json --format markdown --unchanged collapse

      artifact-size-analyzer compare -b base.json -c current.json -o json:diff.json -o markdown:diff.md
    """
    logger = setup_logging(verbose=verbose)
    cwd = Path.cwd()

    try:
        file_targets, github_targets = parse_targets(output_file, output_github, fmt)
        options = load_format_options(
            header=False if no_header else None,
            unchanged=unchanged,
        )

        base_snapshot = read_snapshot_file(cwd / base)
        current_snapshot = read_snapshot_file(cwd / current)
        records = compare_artifacts(base_snapshot, current_snapshot)
        logger.debug("Compared %d artifact(s)", len(records))

        emit_report(
            lambda f, o: format_diff(records, f, o),
            fmt,
            options,
            file_targets,
            github_targets,
            cwd,
        )

    except typer.Exit:
        raise
    except ArtifactSizeError as e:
        print_error(str(e))
        raise typer.Exit(1)
    except Exception as e:
        logger.exception("Unexpected error in compare")
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(1)
