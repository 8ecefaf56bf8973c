"""Command line interface for broom."""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich import print
from rich.console import Console
from rich.logging import RichHandler

from broom import __version__
from broom.broom import RunConfiguration, run_broom
from broom.errors import BroomError
from broom.i18n import Messages
from broom.ui import Interface

app = typer.Typer(help="Delete local branches already merged into a reference branch")


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr, debug records only when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def version_callback(value: bool) -> None:
    if value:
        print(f"git-broom {__version__}")
        raise typer.Exit()


@app.command()
def broom(
    repository: Annotated[
        Optional[Path], typer.Argument(help="Path of Git repository. Current path if not specified.")
    ] = None,
    branch: Annotated[
        Optional[str], typer.Option("--branch", "-b", help="Branch to check if local branches are merged on.")
    ] = None,
    dry_run: Annotated[
        bool, typer.Option("--dry-run", "-d", help="Only list merged branches, never prompt or delete.")
    ] = False,
    include_protected: Annotated[
        bool, typer.Option("--include-protected", help="Allow deleting protected branches too.")
    ] = False,
    quiet: Annotated[bool, typer.Option("--quiet", "-q", help="Only show prompts, results and errors.")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log git calls and dropped patterns.")] = False,
    version: Annotated[
        Optional[bool], typer.Option("--version", callback=version_callback, is_eager=True, help="Show version.")
    ] = None,
) -> None:
    """Find local branches merged into a branch and delete them."""
    configure_logging(verbose)
    ui = Interface(Messages(), quiet=quiet)
    config = RunConfiguration(
        repository_path=repository,
        explicit_branch=branch,
        dry_run=dry_run,
        include_protected=include_protected,
    )

    try:
        run_broom(config, ui)
    except BroomError as err:
        ui.error(err.key, **err.details)
        raise typer.Exit(code=1) from err


if __name__ == "__main__":
    app()
