"""Clone orchestration (protocol-based).

The orchestrator decides WHERE a repository goes and in WHAT order things happen.
HOW directories are created and git is run is up to the injected ExecutionBackend,
so a dry run or a test double needs no change here.
"""

import logging
from pathlib import Path

from .exceptions import ClonerError
from .protocols import ExecutionBackend
from .resolver import resolve_repository_url
from .schema import ClonePlan

logger = logging.getLogger(__name__)


def plan_clone(raw_url: str, base_path: Path | str) -> ClonePlan:
    """Compute where ``raw_url`` should be cloned under ``base_path``.

    Args:
        raw_url: Repository URL
        base_path: Root of the clone hierarchy

    Returns:
        ClonePlan with ``base_path/host/owner`` as directory and
        ``base_path/host/owner/project`` as project path

    Raises:
        UrlParseError: If the URL cannot be resolved
    """
    location = resolve_repository_url(raw_url)
    base = Path(base_path)
    return ClonePlan(
        source_url=raw_url,
        location=location,
        directory=location.parent_directory(base),
        project_path=location.destination(base),
    )


def clone_repository(raw_url: str, base_path: Path | str, backend: ExecutionBackend) -> ClonePlan:
    """
    Clone a repository into its host/owner/project directory.

    Process:
    1. Resolve the URL and compute the destination (no backend call on failure)
    2. Ensure ``base_path/host/owner`` exists
    3. Clone the original URL into ``base_path/host/owner/project``
    4. Suggest the ``cd`` into the clone
    5. Report success

    Single pass, no retries: the first failing step ends the run. Directories
    created before a failed clone are left in place.

    Args:
        raw_url: Repository URL, passed to git unmodified
        base_path: Root of the clone hierarchy
        backend: Performs (or simulates) the side effects

    Returns:
        The ClonePlan that was executed

    Raises:
        UrlParseError: If the URL cannot be resolved
        DirectoryCreationError: If the destination directory cannot be created
        CloneProcessError: If git could not be run or failed
        ClonerError: If the backend fails in any other way

    Example:
        >>> plan = clone_repository(
        ...     "https://github.com/author/project.git",
        ...     base_path=Path("/base/path"),
        ...     backend=DryRunBackend(),
        ... )
        >>> print(plan.project_path)
        /base/path/github.com/author/project
    """
    plan = plan_clone(raw_url, base_path)
    logger.debug(f"Clone plan for {raw_url}: {plan.project_path}")

    try:
        backend.ensure_directory(plan.directory)

        logger.info(f"Cloning {raw_url} into {plan.project_path}")
        backend.clone(raw_url, plan.project_path)

        backend.announce_navigation(plan.project_path)
        backend.report_outcome()
        return plan

    except Exception as e:
        if isinstance(e, ClonerError):
            raise
        raise ClonerError(
            f"Failed to clone {raw_url}: {e}",
            context={"url": raw_url, "destination": str(plan.project_path)},
        ) from e
