"""Maintenance Tool - toggle a static maintenance page in a hosting deployment.

Enable copies a maintenance page and icon into the publish directory;
restore rebuilds the application and redeploys it.
"""

from .__version__ import __version__, __version_info__, __license__

# Exceptions
from .api.exceptions import (
    MaintenanceToolError,
    ConfigError,
    ProjectNotFoundError,
    EnableError,
    AssetNotFoundError,
    ExternalProcessError,
)

# Core API
from .api.enabler import MaintenanceEnabler, enable
from .api.restorer import ApplicationRestorer, restore
from .api.query import site_status

# Collaborators
from .core.command_runner import CommandRunner, SubprocessRunner

# Data models
from .models import (
    ToggleConfig,
    NotificationDefaults,
    Notification,
    CommandResult,
    EnableResult,
    RestoreResult,
    RestoreStatus,
    SiteStatus,
)

__all__ = [
    # Version information
    "__version__",
    "__version_info__",
    "__license__",

    # Main classes
    "MaintenanceEnabler",
    "ApplicationRestorer",
    "CommandRunner",
    "SubprocessRunner",

    # Core API functions
    "enable",
    "restore",
    "site_status",

    # Data models
    "ToggleConfig",
    "NotificationDefaults",
    "Notification",
    "CommandResult",
    "EnableResult",
    "RestoreResult",
    "RestoreStatus",
    "SiteStatus",

    # Exceptions
    "MaintenanceToolError",
    "ConfigError",
    "ProjectNotFoundError",
    "EnableError",
    "AssetNotFoundError",
    "ExternalProcessError",
]
