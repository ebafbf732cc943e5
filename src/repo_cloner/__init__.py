"""repo-cloner - Clone git repositories into a host/owner/project directory tree.

Public API: URL resolution, clone orchestration and the execution backends.
Backends are injected, so the same orchestration runs live, as a dry run, or
against a test double.
"""

from .backends import DryRunBackend
from .backends import LiveBackend
from .cloner import clone_repository
from .cloner import plan_clone
from .config import ClonerSettings
from .exceptions import ClonerError
from .exceptions import CloneProcessError
from .exceptions import DirectoryCreationError
from .exceptions import MalformedUrlError
from .exceptions import MissingHostError
from .exceptions import MissingPathSegmentError
from .exceptions import UrlParseError
from .protocols import ExecutionBackend
from .resolver import resolve_repository_url
from .resolver import strip_git_suffix
from .schema import ClonePlan
from .schema import RepositoryLocation

__all__ = [
    # Models
    "RepositoryLocation",
    "ClonePlan",
    # Resolution
    "resolve_repository_url",
    "strip_git_suffix",
    # Orchestration
    "clone_repository",
    "plan_clone",
    # Backends
    "ExecutionBackend",
    "LiveBackend",
    "DryRunBackend",
    # Configuration
    "ClonerSettings",
    # Exceptions
    "ClonerError",
    "UrlParseError",
    "MalformedUrlError",
    "MissingHostError",
    "MissingPathSegmentError",
    "DirectoryCreationError",
    "CloneProcessError",
]

__version__ = "0.1.0"
