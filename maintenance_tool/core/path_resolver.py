"""Project root discovery for maintenance-tool"""

import os
from pathlib import Path
from typing import Optional, Union

from ..api.exceptions import ProjectNotFoundError
from ..constants import ENV_CONFIG_PATH, ENV_PROJECT_ROOT, PROJECT_CONFIG_FILE


class PathResolver:
    """Locates the project root and its configuration file"""

    def __init__(self, project_root: Optional[Union[str, Path]] = None):
        """Initialize path resolver

        Args:
            project_root: Explicit project root; discovered when omitted
        """
        self._project_root = Path(project_root).resolve() if project_root else None

    def find_project_root(self, start_path: Optional[Path] = None) -> Path:
        """Find the directory holding the project config file

        Search order: explicit root, ``MAINTENANCE_TOOL_PROJECT_ROOT``,
        then each directory from ``start_path`` upwards.

        Raises:
            ProjectNotFoundError: No config file found
        """
        if self._project_root:
            return self._project_root

        env_root = os.environ.get(ENV_PROJECT_ROOT)
        if env_root:
            return Path(env_root).resolve()

        current = Path(start_path or Path.cwd()).resolve()
        for directory in (current, *current.parents):
            if (directory / PROJECT_CONFIG_FILE).is_file():
                return directory

        raise ProjectNotFoundError()

    def project_root_or_cwd(self, start_path: Optional[Path] = None) -> Path:
        """Project root when one exists, otherwise the working directory"""
        try:
            return self.find_project_root(start_path)
        except ProjectNotFoundError:
            return Path(start_path or Path.cwd()).resolve()

    def config_path(self, project_root: Path) -> Path:
        """Config file location, honouring ``MAINTENANCE_TOOL_CONFIG``"""
        env_config = os.environ.get(ENV_CONFIG_PATH)
        if env_config:
            return Path(env_config).resolve()
        return project_root / PROJECT_CONFIG_FILE
