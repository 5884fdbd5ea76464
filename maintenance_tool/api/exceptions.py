"""Exception definitions for maintenance-tool API"""

from typing import Optional, Sequence, Union

from ..constants import ErrorCode


class MaintenanceToolError(Exception):
    """Base exception for maintenance-tool"""

    def __init__(self, message: str, error_code: str = None):
        super().__init__(message)
        self.error_code = error_code


class ConfigError(MaintenanceToolError):
    """Configuration error"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.CONFIG_FORMAT_ERROR)


class ProjectNotFoundError(MaintenanceToolError):
    """Project root not found error"""

    def __init__(self, message: str = None):
        if message is None:
            message = (
                "No project root found. Please ensure:\n"
                "1. You are in a project directory\n"
                "2. The project root contains .maintenance-tool.yaml\n"
                "3. Or use --project-root parameter to specify project location\n"
                "\n"
                "Initialize a new project: maintenance-tool init"
            )
        super().__init__(message, ErrorCode.PROJECT_NOT_FOUND)


class EnableError(MaintenanceToolError, OSError):
    """Failure while installing the maintenance bundle"""

    def __init__(self, message: str, error_code: str = ErrorCode.COPY_FAILED):
        super().__init__(message, error_code)


class AssetNotFoundError(EnableError):
    """A maintenance bundle file is missing"""

    def __init__(self, path):
        super().__init__(f"Maintenance asset not found: {path}", ErrorCode.ASSET_NOT_FOUND)
        self.path = path


class ExternalProcessError(MaintenanceToolError):
    """External command exited non-zero or could not be started"""

    def __init__(self,
                 command: Union[str, Sequence[str]],
                 returncode: Optional[int],
                 stderr: Optional[str] = None,
                 reason: Optional[str] = None):
        if not isinstance(command, str):
            command = " ".join(command)
        if reason is None:
            reason = f"exited with status {returncode}"
        message = f"Command failed: {command} ({reason})"
        if stderr:
            message = f"{message}\n{stderr.strip()}"
        super().__init__(message, ErrorCode.COMMAND_FAILED)
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
