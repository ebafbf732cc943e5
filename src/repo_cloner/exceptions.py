"""Clone-specific exceptions.

Every failure carries one human-readable message, so the CLI can report it on a
single line without knowing which step failed.
"""


class ClonerError(Exception):
    """Base exception for clone operations."""

    def __init__(self, message: str, context: dict | None = None):
        """Initialize with message and optional context.

        Args:
            message: Human-readable error message
            context: Optional dict with additional context (URL, paths, return code, etc.)
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}


class UrlParseError(ClonerError):
    """Repository URL could not be turned into host/owner/project."""


class MalformedUrlError(UrlParseError):
    """Input is not a valid URL."""


class MissingHostError(UrlParseError):
    """URL has no authority component."""


class MissingPathSegmentError(UrlParseError):
    """URL path does not contain both an owner and a project segment."""


class DirectoryCreationError(ClonerError):
    """Destination directory could not be created."""


class CloneProcessError(ClonerError):
    """The git clone process could not be spawned or exited with a non-zero status."""
