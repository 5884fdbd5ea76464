# maintenance_tool/models/__init__.py
"""Data models for maintenance-tool"""

from .config import ToggleConfig, NotificationDefaults
from .notification import Notification
from .result import (
    OperationStatus,
    RestoreStatus,
    Result,
    CommandResult,
    EnableResult,
    RestoreResult,
    SiteStatus,
)

__all__ = [
    # Config models
    "ToggleConfig",
    "NotificationDefaults",

    # Notification models
    "Notification",

    # Result models
    "OperationStatus",
    "RestoreStatus",
    "Result",
    "CommandResult",
    "EnableResult",
    "RestoreResult",
    "SiteStatus",
]
