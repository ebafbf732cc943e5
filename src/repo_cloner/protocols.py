"""Protocols for clone execution backends.

The orchestrator only talks to this interface. Live and dry-run execution are two
implementations; recording or capturing backends can be added without touching
the orchestration logic.
"""

from pathlib import Path
from typing import Protocol
from typing import runtime_checkable


@runtime_checkable
class ExecutionBackend(Protocol):
    """Protocol for the side effects of a clone run.

    Example implementations:
    - LiveBackend: creates directories and runs ``git clone``
    - DryRunBackend: prints what would happen, touches nothing
    """

    def ensure_directory(self, path: Path) -> None:
        """Make sure ``path`` exists as a directory, creating parents as needed.

        Raises:
            DirectoryCreationError: If the directory cannot be created
        """
        ...

    def clone(self, source_url: str, destination: Path) -> None:
        """Clone ``source_url`` into ``destination``.

        Raises:
            CloneProcessError: If the clone could not be performed
        """
        ...

    def announce_navigation(self, destination: Path) -> None:
        """Tell the user where to ``cd``. Never changes the working directory."""
        ...

    def report_outcome(self) -> None:
        """Tell the user the run succeeded."""
        ...
