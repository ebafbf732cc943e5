"""Command-line entry point (Typer).

Chooses the execution backend from ``--dry-run`` and turns ClonerError into a
single stderr line plus exit code 1. Everything else lives in the library.
"""

import logging
from pathlib import Path

import typer
from rich.console import Console

from . import __version__
from .backends import DryRunBackend
from .backends import LiveBackend
from .cloner import clone_repository
from .config import ClonerSettings
from .exceptions import ClonerError
from .exceptions import UrlParseError

logger = logging.getLogger(__name__)

app = typer.Typer(add_completion=False, help="Clone git repositories into a host/owner/project directory tree.")

_console = Console(highlight=False, soft_wrap=True)
_err_console = Console(stderr=True, highlight=False, soft_wrap=True)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"repo-cloner {__version__}")
        raise typer.Exit()


@app.command()
def main(
    git_url: str = typer.Argument(..., help="The URL of the git repository to clone"),
    base_path: Path | None = typer.Option(
        None,
        "--base-path",
        "-b",
        help="Base path where the repository should be cloned (defaults to the current directory)",
    ),
    dry_run: bool = typer.Option(False, "--dry-run", help="Print the commands without executing them"),
    git_executable: str | None = typer.Option(None, "--git", help="git executable to run"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show the version and exit"
    ),
) -> None:
    """Clone GIT_URL into BASE_PATH/host/owner/project."""
    _configure_logging(verbose)

    settings = ClonerSettings()
    root = settings.resolve_base_path(base_path)

    if dry_run:
        backend = DryRunBackend(console=_console)
    else:
        backend = LiveBackend(git_executable=git_executable or settings.git_executable, console=_console)

    try:
        clone_repository(git_url, root, backend)
    except UrlParseError as e:
        _err_console.print(f"Failed to parse the git URL: {e.message}", markup=False, emoji=False)
        raise typer.Exit(code=1) from e
    except ClonerError as e:
        logger.debug(f"Clone failed: {e.context}")
        _err_console.print(f"Error: {e.message}", markup=False, emoji=False)
        raise typer.Exit(code=1) from e


def run() -> None:
    app()


if __name__ == "__main__":
    run()
