"""Restorer API for rebuilding and redeploying the live application"""

import logging
from typing import Callable, Optional

from ..core.command_runner import CommandRunner, SubprocessRunner
from ..models import RestoreResult, RestoreStatus, ToggleConfig
from .exceptions import ExternalProcessError

logger = logging.getLogger(__name__)


class ApplicationRestorer:
    """Runs the build command, then the deploy command"""

    def __init__(self,
                 config: ToggleConfig,
                 runner: Optional[CommandRunner] = None,
                 on_step: Optional[Callable[[str], None]] = None):
        """
        Initialize restorer

        Args:
            config: Commands and working directory
            runner: Command runner (inherits the terminal by default)
            on_step: Called with a message before and between the commands
        """
        self.config = config
        self.runner = runner or SubprocessRunner()
        self.on_step = on_step

    def restore(self) -> RestoreResult:
        """
        Rebuild the application and deploy it

        Command failures are reported in the result rather than raised.
        The deploy command is not run when the build fails. Nothing is
        retried or rolled back.

        Returns:
            RestoreResult: SUCCESS, BUILD_FAILED or DEPLOY_FAILED
        """
        config = self.config
        result = RestoreResult(status=RestoreStatus.SUCCESS)

        self._announce(f"Building application: {config.build_command}")
        try:
            result.build = self.runner.run(config.build_command, cwd=config.project_root)
        except ExternalProcessError as e:
            logger.error(f"Build failed: {e}")
            return self._fail(result, RestoreStatus.BUILD_FAILED, e)

        self._announce("Build completed successfully.")
        self._announce(f"Deploying application: {config.deploy_command}")
        try:
            result.deploy = self.runner.run(config.deploy_command, cwd=config.project_root)
        except ExternalProcessError as e:
            logger.error(f"Deploy failed: {e}")
            return self._fail(result, RestoreStatus.DEPLOY_FAILED, e)

        result.complete()
        return result

    def _announce(self, message: str) -> None:
        logger.info(message)
        if self.on_step:
            self.on_step(message)

    @staticmethod
    def _fail(result: RestoreResult, status: RestoreStatus, error: ExternalProcessError) -> RestoreResult:
        result.error = str(error)
        result.complete(status)
        return result


def restore(config: ToggleConfig,
            runner: Optional[CommandRunner] = None,
            on_step: Optional[Callable[[str], None]] = None) -> RestoreResult:
    """
    Convenience function to restore the live application

    Args:
        config: Commands and working directory
        runner: Command runner
        on_step: Progress callback

    Returns:
        RestoreResult: Restore result
    """
    return ApplicationRestorer(config, runner=runner, on_step=on_step).restore()
