"""Execution backends: live git/filesystem side effects, or a dry run.

Both backends print user-facing lines through a ``rich`` console; diagnostics go
through ``logging``.
"""

import logging
import subprocess
from pathlib import Path

from rich.console import Console

from .exceptions import CloneProcessError
from .exceptions import DirectoryCreationError

logger = logging.getLogger(__name__)

DRY_RUN_PREFIX = "DRY RUN: "
SUCCESS_MESSAGE = "Repository cloned successfully."


def _default_console() -> Console:
    return Console(highlight=False, soft_wrap=True)


class LiveBackend:
    """Creates real directories and runs the real ``git clone``."""

    def __init__(self, git_executable: str = "git", console: Console | None = None):
        """Initialize with the git executable to spawn.

        Args:
            git_executable: Name or path of the git binary (looked up on PATH)
            console: Console for user-facing output (defaults to stdout)
        """
        self.git_executable = git_executable
        self.console = console or _default_console()

    def _emit(self, line: str) -> None:
        self.console.print(line, markup=False, highlight=False, emoji=False, soft_wrap=True)

    def ensure_directory(self, path: Path) -> None:
        logger.debug(f"Creating directory {path}")
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise DirectoryCreationError(
                f"Failed to create directory {path}: {e}",
                context={"path": str(path)},
            ) from e

    def clone(self, source_url: str, destination: Path) -> None:
        command = [self.git_executable, "clone", "--", source_url, str(destination)]
        self._emit(f"{self.git_executable} clone {source_url} {destination}")
        logger.debug(f"Running {command}")

        try:
            completed = subprocess.run(command, check=False)
        except OSError as e:
            raise CloneProcessError(
                f"Failed to run {self.git_executable}: {e}",
                context={"command": command},
            ) from e

        if completed.returncode != 0:
            raise CloneProcessError(
                f"git clone exited with status {completed.returncode}",
                context={"command": command, "returncode": completed.returncode},
            )

        logger.info(f"Cloned {source_url} into {destination}")

    def announce_navigation(self, destination: Path) -> None:
        self._emit(f"cd {destination}")

    def report_outcome(self) -> None:
        self._emit(SUCCESS_MESSAGE)


class DryRunBackend:
    """Prints the commands a live run would execute, without executing them."""

    def __init__(self, console: Console | None = None):
        self.console = console or _default_console()

    def _emit(self, line: str) -> None:
        self.console.print(f"{DRY_RUN_PREFIX}{line}", markup=False, highlight=False, emoji=False, soft_wrap=True)

    def ensure_directory(self, path: Path) -> None:
        self._emit(f"mkdir -p {path}")

    def clone(self, source_url: str, destination: Path) -> None:
        self._emit(f"git clone {source_url} {destination}")

    def announce_navigation(self, destination: Path) -> None:
        self._emit(f"cd {destination}")

    def report_outcome(self) -> None:
        self._emit(SUCCESS_MESSAGE)
