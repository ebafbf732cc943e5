"""Settings for the repo-cloner CLI.

Values come from ``REPO_CLONER_*`` environment variables; CLI options win over them.
"""

from pathlib import Path

from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict


class ClonerSettings(BaseSettings):
    """Environment-backed defaults.

    - ``REPO_CLONER_BASE_PATH``: root of the clone hierarchy (default: current directory)
    - ``REPO_CLONER_GIT_EXECUTABLE``: git binary to run (default: ``git``)
    """

    model_config = SettingsConfigDict(env_prefix="REPO_CLONER_", extra="ignore")

    base_path: Path | None = None
    git_executable: str = "git"

    def resolve_base_path(self, override: Path | str | None = None) -> Path:
        """Pick the base path: explicit override, then setting, then the working directory."""
        if override is not None:
            return Path(override).expanduser()
        if self.base_path is not None:
            return self.base_path.expanduser()
        return Path.cwd()
