"""Enabler API for switching the publish directory to the maintenance page"""

import logging
from typing import Optional

from ..constants import STAGING_DIR_PREFIX
from ..core.command_runner import CommandRunner, SubprocessRunner
from ..models import EnableResult, OperationStatus, ToggleConfig
from ..utils.file_utils import calculate_file_checksum, ensure_directory, install_files
from .exceptions import AssetNotFoundError, EnableError

logger = logging.getLogger(__name__)


class MaintenanceEnabler:
    """Installs the maintenance bundle into the publish directory"""

    def __init__(self, config: ToggleConfig, runner: Optional[CommandRunner] = None):
        """
        Initialize enabler

        Args:
            config: Paths and commands to operate on
            runner: Command runner, only needed to deploy after enabling
        """
        self.config = config
        self.runner = runner

    def enable(self, clean: bool = False, deploy: bool = False) -> EnableResult:
        """
        Copy the maintenance document and icon into the publish directory

        Both bundle files are checked before anything is written, and both
        are staged before either replaces a published file. The document is
        installed first, then the icon.

        Args:
            clean: Remove everything else from the publish directory
            deploy: Run the deploy command afterwards

        Returns:
            EnableResult: Installed files and their checksums

        Raises:
            AssetNotFoundError: A bundle file is missing
            EnableError: The publish directory could not be written
            ExternalProcessError: The deploy command failed
        """
        result = EnableResult(status=OperationStatus.IN_PROGRESS)
        config = self.config

        sources = {
            config.default_document_name: config.maintenance_document_path,
            config.icon_name: config.icon_path,
        }
        for source in sources.values():
            if not source.is_file():
                raise AssetNotFoundError(source)

        publish_dir = config.publish_path
        result.publish_dir = publish_dir

        try:
            logger.info(f"Creating {publish_dir} if needed")
            ensure_directory(publish_dir)

            logger.info(
                f"Installing {config.maintenance_document} as {config.default_document_name} "
                f"and {config.icon} as {config.icon_name}"
            )
            installed, removed = install_files(
                sources,
                publish_dir,
                prefix=STAGING_DIR_PREFIX,
                clean=clean
            )
        except OSError as e:
            raise EnableError(f"Failed to prepare {publish_dir}: {e}") from e

        result.installed = installed
        result.removed = removed
        result.checksums = {
            name: calculate_file_checksum(path) for name, path in installed.items()
        }
        if removed:
            logger.info(f"Removed {len(removed)} other entries from {publish_dir}")

        if deploy:
            if self.runner is None:
                raise ValueError("A command runner is required to deploy")
            logger.info(f"Deploying maintenance page: {config.deploy_command}")
            result.deploy = self.runner.run(config.deploy_command, cwd=config.project_root)

        result.message = f"Maintenance mode files prepared in {publish_dir}"
        result.complete(OperationStatus.SUCCESS)
        return result


def enable(config: ToggleConfig,
           clean: bool = False,
           deploy: bool = False,
           runner: Optional[CommandRunner] = None) -> EnableResult:
    """
    Convenience function to enable maintenance mode

    Args:
        config: Paths and commands to operate on
        clean: Remove everything else from the publish directory
        deploy: Run the deploy command afterwards
        runner: Command runner used for the deploy

    Returns:
        EnableResult: Enable result
    """
    if deploy and runner is None:
        runner = SubprocessRunner()

    return MaintenanceEnabler(config, runner=runner).enable(clean=clean, deploy=deploy)
