"""Configuration management service"""

import logging
import os
import shutil
from pathlib import Path
from typing import Optional

import yaml

from ..api.exceptions import ConfigError
from ..constants import CONFIG_VERSION, PROJECT_CONFIG_FILE
from ..models.config import ToggleConfig

logger = logging.getLogger(__name__)


class ConfigService:
    """Service for loading and saving the project configuration"""

    def __init__(self, project_root: Path, config_path: Optional[Path] = None):
        """Initialize config service

        Args:
            project_root: Project root directory
            config_path: Config file location (defaults to the project root file)
        """
        self.project_root = Path(project_root)
        self.config_path = Path(config_path) if config_path else self.project_root / PROJECT_CONFIG_FILE
        self._config: Optional[ToggleConfig] = None

    @property
    def config(self) -> ToggleConfig:
        """Get current configuration (lazy load)"""
        if self._config is None:
            self.load_config()
        return self._config

    def load_config(self) -> ToggleConfig:
        """Load configuration from file

        A missing file yields the default configuration.

        Returns:
            Loaded configuration

        Raises:
            ConfigError: The file is not valid YAML or has invalid values
        """
        if not self.config_path.exists():
            logger.debug(f"No config file at {self.config_path}, using defaults")
            self._config = ToggleConfig(project_root=self.project_root)
            return self._config

        with open(self.config_path, 'r', encoding='utf-8') as f:
            content = f.read()

        # Simple environment variable expansion
        content = os.path.expandvars(content)

        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {self.config_path}: {e}") from e

        try:
            self._config = ToggleConfig.from_dict(data, project_root=self.project_root)
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid configuration in {self.config_path}: {e}") from e

        logger.debug(f"Loaded configuration from {self.config_path}")
        return self._config

    def save_config(self, config: Optional[ToggleConfig] = None) -> Path:
        """Save configuration to file

        Args:
            config: Configuration to save (uses current if not provided)

        Returns:
            Path of the written file
        """
        if config:
            self._config = config

        if not self._config:
            raise ValueError("No configuration to save")

        # Create backup
        if self.config_path.exists():
            backup_path = self.config_path.with_suffix('.yaml.bak')
            shutil.copy2(self.config_path, backup_path)

        data = {"version": CONFIG_VERSION}
        data.update(self._config.to_dict())

        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.config_path, 'w', encoding='utf-8') as f:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False)

        logger.info(f"Configuration saved to {self.config_path}")
        return self.config_path
