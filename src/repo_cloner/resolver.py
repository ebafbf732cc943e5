"""Repository URL resolver - Turn a clone URL into host/owner/project.

The scheme (https, ssh, git, ...) is accepted but not kept: only the authority and
the first two path segments decide where a clone lands on disk.

Pure functions, no filesystem or network access.
"""

import logging
from urllib.parse import unquote
from urllib.parse import urlsplit

from .exceptions import MalformedUrlError
from .exceptions import MissingHostError
from .exceptions import MissingPathSegmentError
from .schema import RepositoryLocation

logger = logging.getLogger(__name__)

GIT_SUFFIX = ".git"
DOT_SEGMENTS = (".", "..")


def _has_invalid_characters(raw_url: str) -> bool:
    return any(ch.isspace() or ord(ch) < 0x20 or ord(ch) == 0x7F for ch in raw_url)


def _path_segments(path: str) -> list[str]:
    """Split a URL path into non-empty segments with ``.`` and ``..`` resolved.

    Percent-encoded dots count as dots, so ``%2e%2e`` climbs like ``..``.
    """
    segments: list[str] = []
    for segment in path.split("/"):
        if not segment:
            continue
        decoded = unquote(segment)
        if decoded == ".":
            continue
        if decoded == "..":
            if segments:
                segments.pop()
            continue
        segments.append(segment)
    return segments


def strip_git_suffix(project: str) -> str:
    """Remove the first ``.git`` from a project segment.

    This is a substring removal, not a suffix check, so ``libjpeg-turbo.gitx``
    becomes ``libjpeg-turbox``. Existing directory layouts depend on it.

    Args:
        project: Second path segment of the repository URL

    Returns:
        Project name with the first ``.git`` occurrence removed
    """
    return project.replace(GIT_SUFFIX, "", 1)


def resolve_repository_url(raw_url: str) -> RepositoryLocation:
    """
    Resolve a repository URL to its host, owner and project.

    Process:
    1. Parse the string as an absolute URL
    2. Take the host from the authority (no userinfo, no port)
    3. Split the path into non-empty segments, resolving ``.`` and ``..``
    4. First segment is the owner, second is the project, the rest is ignored
    5. Strip ``.git`` from the project

    Args:
        raw_url: Repository URL (e.g., "https://github.com/org/project.git")

    Returns:
        RepositoryLocation for the URL

    Raises:
        MalformedUrlError: If the string is not a valid URL
        MissingHostError: If the URL has no host (scheme-relative or path-only input)
        MissingPathSegmentError: If the path lacks an owner or a project segment

    Example:
        >>> resolve_repository_url("https://gitlab.com/emeraldjayde/gitlab-vscode-extension.git")
        RepositoryLocation(host='gitlab.com', owner='emeraldjayde', project='gitlab-vscode-extension')
    """
    context = {"url": raw_url}

    if not raw_url or not raw_url.strip():
        raise MalformedUrlError("URL is empty", context=context)

    if _has_invalid_characters(raw_url):
        raise MalformedUrlError(f"URL contains whitespace or control characters: {raw_url!r}", context=context)

    try:
        parts = urlsplit(raw_url)
        # Accessing the port validates it
        parts.port
    except ValueError as e:
        raise MalformedUrlError(f"Invalid URL {raw_url!r}: {e}", context=context) from e

    if not parts.scheme or not parts.hostname:
        raise MissingHostError(f"URL has no host: {raw_url!r}", context=context)

    segments = _path_segments(parts.path)
    if len(segments) < 2:
        raise MissingPathSegmentError(
            f"URL path must contain an owner and a project: {raw_url!r}",
            context={**context, "segments": segments},
        )

    owner, project = segments[0], strip_git_suffix(segments[1])
    if not project or unquote(project) in DOT_SEGMENTS:
        raise MissingPathSegmentError(f"URL has an empty or relative project name: {raw_url!r}", context=context)

    location = RepositoryLocation(host=parts.hostname, owner=owner, project=project)
    logger.debug(f"Resolved {raw_url} to {location.slug}")
    return location
