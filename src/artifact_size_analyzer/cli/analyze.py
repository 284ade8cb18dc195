"""Analyze CLI command — measure the artifacts declared in a config file."""

from pathlib import Path
from typing import List, Optional

import typer

from ..config import load_config, load_format_options
from ..exceptions import ArtifactSizeError
from ..formatters import format_artifacts
from ..formatters.formats import Format
from ..logging_config import setup_logging
from ..snapshot.capture import analyze_artifacts
from . import app
from ._common import emit_report, parse_targets, print_error


@app.command(name="analyze")
def analyze(
    config_file: Path = typer.Option(
        ...,
        "--config-file",
        "-c",
        help="Configuration file (JSON or TOML)",
        dir_okay=False,
    ),
    fmt: Format = typer.Option(
        Format.TEXT,
        "--format",
        "-f",
        help="Output format",
        case_sensitive=False,
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
    no_header: bool = typer.Option(
        False,
        "--no-header",
        help="Disable header in output for formats with headers",
    ),
    workers: Optional[int] = typer.Option(
        None,
        "--workers",
        "-w",
        help="Parallel workers",
        min=1,
        max=32,
        hidden=True,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
) -> None:
    """Analyze artifacts from a config file.

    Measures the raw, gzip and brotli size of every file matched by each
    artifact's include/exclude globs and reports the totals.

    [bold cyan]Examples:[/bold cyan]

      artifact-size-analyzer analyze -c artifacts.json

      artifact-size-analyzer analyze -c artifacts.json -o json:base.json

      artifact-size-analyzer analyze -c artifacts.json --format markdown --no-header
    """
    logger = setup_logging(verbose=verbose)
    cwd = Path.cwd()
    config_path = cwd / config_file

    if not config_path.is_file():
        print_error(
            f'Configuration file not found: "{config_file}". '
            "Please check the `--config-file` path."
        )
        raise typer.Exit(1)

    try:
        file_targets, github_targets = parse_targets(output_file, output_github, fmt)
        options = load_format_options(header=False if no_header else None)

        config = load_config(config_path)
        logger.debug("Loaded %d artifact(s) from %s", len(config.artifacts), config_path)
        snapshots = analyze_artifacts(config, cwd, workers=workers)

        emit_report(
            lambda f, o: format_artifacts(snapshots, f, o),
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
        logger.exception("Unexpected error in analyze")
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(1)
