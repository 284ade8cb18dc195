"""CLI entry point — registers all subcommands."""

from typing import Optional

import typer

from .. import __version__
from ._common import console

app = typer.Typer(
    name="artifact-size-analyzer",
    help="Artifact Size Analyzer - measure and compare build output sizes",
    add_completion=False,
    rich_markup_mode="rich",
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"artifact-size-analyzer {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        help="Show version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """Measure artifact sizes and compare them between builds."""


# Import subcommands to register them
from .analyze import analyze as _analyze  # noqa: F401, E402
from .compare import compare as _compare  # noqa: F401, E402


def main() -> None:
    app()
