# maintenance_tool/api/__init__.py
"""API layer for maintenance-tool"""

from .exceptions import (
    MaintenanceToolError,
    ConfigError,
    ProjectNotFoundError,
    EnableError,
    AssetNotFoundError,
    ExternalProcessError,
)
from .enabler import MaintenanceEnabler, enable
from .restorer import ApplicationRestorer, restore
from .query import site_status

__all__ = [
    # Main classes
    "MaintenanceEnabler",
    "ApplicationRestorer",

    # Convenience functions
    "enable",
    "restore",
    "site_status",

    # Exceptions
    "MaintenanceToolError",
    "ConfigError",
    "ProjectNotFoundError",
    "EnableError",
    "AssetNotFoundError",
    "ExternalProcessError",
]
