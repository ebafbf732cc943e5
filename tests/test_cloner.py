"""Tests for clone orchestration (protocol-based)."""

import io
import tempfile
from pathlib import Path

import pytest
from repo_cloner import ClonerError
from repo_cloner import CloneProcessError
from repo_cloner import DirectoryCreationError
from repo_cloner import DryRunBackend
from repo_cloner import ExecutionBackend
from repo_cloner import LiveBackend
from repo_cloner import MissingPathSegmentError
from repo_cloner import clone_repository
from repo_cloner import plan_clone
from rich.console import Console


class MockBackend:
    """Mock backend that records every call instead of performing it."""

    def __init__(self, fail_on: str | None = None, error: Exception | None = None):
        self.calls: list[tuple] = []
        self.fail_on = fail_on
        self.error = error

    def _record(self, name: str, *args) -> None:
        self.calls.append((name, *args))
        if name == self.fail_on and self.error is not None:
            raise self.error

    def ensure_directory(self, path: Path) -> None:
        self._record("ensure_directory", path)

    def clone(self, source_url: str, destination: Path) -> None:
        self._record("clone", source_url, destination)

    def announce_navigation(self, destination: Path) -> None:
        self._record("announce_navigation", destination)

    def report_outcome(self) -> None:
        self._record("report_outcome")


def test_backends_satisfy_protocol():
    """Test built-in backends and test doubles all match ExecutionBackend."""
    assert isinstance(MockBackend(), ExecutionBackend)
    assert isinstance(LiveBackend(), ExecutionBackend)
    assert isinstance(DryRunBackend(), ExecutionBackend)


def test_clone_repo():
    """Test the four backend steps run in order with the computed paths."""
    backend = MockBackend()

    clone_repository("https://github.com/author/project.git", "/base/path", backend)

    project_path = Path("/base/path/github.com/author/project")
    assert backend.calls == [
        ("ensure_directory", Path("/base/path/github.com/author")),
        ("clone", "https://github.com/author/project.git", project_path),
        ("announce_navigation", project_path),
        ("report_outcome",),
    ]


def test_clone_libjpeg_turbo():
    """Test owner and project sharing a name."""
    backend = MockBackend()

    plan = clone_repository("https://github.com/libjpeg-turbo/libjpeg-turbo.git", Path("/base/path"), backend)

    assert plan.project_path == Path("/base/path/github.com/libjpeg-turbo/libjpeg-turbo")
    assert backend.calls[1] == (
        "clone",
        "https://github.com/libjpeg-turbo/libjpeg-turbo.git",
        Path("/base/path/github.com/libjpeg-turbo/libjpeg-turbo"),
    )


def test_clone_gitlab():
    """Test the directory to ensure stops at the owner and the clone target adds the project."""
    backend = MockBackend()

    plan = clone_repository("https://gitlab.com/emeraldjayde/gitlab-vscode-extension.git", "/base/path", backend)

    assert plan.directory == Path("/base/path/gitlab.com/emeraldjayde")
    assert plan.project_path == Path("/base/path/gitlab.com/emeraldjayde/gitlab-vscode-extension")
    assert backend.calls[0] == ("ensure_directory", Path("/base/path/gitlab.com/emeraldjayde"))
    assert backend.calls[2] == (
        "announce_navigation",
        Path("/base/path/gitlab.com/emeraldjayde/gitlab-vscode-extension"),
    )


def test_clone_passes_original_url_to_backend():
    """Test git receives the URL as given, not a rebuilt one."""
    backend = MockBackend()
    url = "ssh://git@GitHub.com:22/author/project.git"

    clone_repository(url, "/base/path", backend)

    assert backend.calls[1] == ("clone", url, Path("/base/path/github.com/author/project"))


def test_unparseable_url_makes_no_backend_calls():
    """Test resolution failure stops the run before any side effect."""
    backend = MockBackend()

    with pytest.raises(MissingPathSegmentError):
        clone_repository("https://github.com/author", "/base/path", backend)

    assert backend.calls == []


@pytest.mark.parametrize("url", ["https://github.com/../..", "https://github.com/author/..", "https://github.com/author/."])
def test_dot_segment_url_makes_no_backend_calls(url):
    """Test URLs that would climb out of the host directory never reach the backend."""
    backend = MockBackend()

    with pytest.raises(MissingPathSegmentError):
        clone_repository(url, "/base/path", backend)

    assert backend.calls == []


def test_directory_failure_skips_clone():
    """Test a failed directory creation is fatal and git is never run."""
    error = DirectoryCreationError("Failed to create directory /base/path/github.com/author: denied")
    backend = MockBackend(fail_on="ensure_directory", error=error)

    with pytest.raises(DirectoryCreationError, match="denied"):
        clone_repository("https://github.com/author/project.git", "/base/path", backend)

    assert [call[0] for call in backend.calls] == ["ensure_directory"]


def test_clone_failure_skips_navigation_and_success():
    """Test a failed clone ends the run without reporting success."""
    backend = MockBackend(fail_on="clone", error=CloneProcessError("git clone exited with status 128"))

    with pytest.raises(CloneProcessError, match="128"):
        clone_repository("https://github.com/author/project.git", "/base/path", backend)

    assert [call[0] for call in backend.calls] == ["ensure_directory", "clone"]


def test_unexpected_backend_error_is_wrapped():
    """Test non-ClonerError failures are wrapped with the URL and destination."""
    backend = MockBackend(fail_on="announce_navigation", error=RuntimeError("boom"))

    with pytest.raises(ClonerError, match="Failed to clone") as exc_info:
        clone_repository("https://github.com/author/project.git", "/base/path", backend)

    assert isinstance(exc_info.value.__cause__, RuntimeError)
    assert exc_info.value.context["destination"] == str(Path("/base/path/github.com/author/project"))


def test_plan_clone_is_pure():
    """Test planning computes paths without touching the filesystem."""
    with tempfile.TemporaryDirectory() as tmpdir:
        plan = plan_clone("https://github.com/author/project.git", tmpdir)

        assert plan.project_path == Path(tmpdir) / "github.com" / "author" / "project"
        assert list(Path(tmpdir).iterdir()) == []


def test_dry_run_has_no_side_effects():
    """Test a dry run completes every step without creating anything."""
    with tempfile.TemporaryDirectory() as tmpdir:
        output = io.StringIO()
        backend = DryRunBackend(console=Console(file=output))

        plan = clone_repository("https://github.com/author/project.git", tmpdir, backend)

        assert list(Path(tmpdir).iterdir()) == []
        lines = output.getvalue().splitlines()
        assert lines == [
            f"DRY RUN: mkdir -p {plan.directory}",
            f"DRY RUN: git clone https://github.com/author/project.git {plan.project_path}",
            f"DRY RUN: cd {plan.project_path}",
            "DRY RUN: Repository cloned successfully.",
        ]
