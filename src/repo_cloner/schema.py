"""Value types produced by URL resolution and clone planning."""

from pathlib import Path

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field


class RepositoryLocation(BaseModel):
    """
    Where a repository lives on its hosting service.

    Derived from the repository URL: the authority becomes ``host`` and the first
    two path segments become ``owner`` and ``project``.
    """

    model_config = ConfigDict(frozen=True)

    host: str = Field(min_length=1)
    owner: str = Field(min_length=1)
    project: str = Field(min_length=1)

    @property
    def slug(self) -> str:
        return f"{self.host}/{self.owner}/{self.project}"

    def parent_directory(self, base_path: Path) -> Path:
        """Directory that holds the clone: ``base_path/host/owner``."""
        return Path(base_path) / self.host / self.owner

    def destination(self, base_path: Path) -> Path:
        """Clone target: ``base_path/host/owner/project``."""
        return self.parent_directory(base_path) / self.project


class ClonePlan(BaseModel):
    """Everything a backend needs to perform one clone."""

    model_config = ConfigDict(frozen=True)

    source_url: str
    location: RepositoryLocation

    # Directory to ensure before cloning
    directory: Path

    # Clone target inside ``directory``
    project_path: Path
