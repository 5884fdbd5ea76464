# maintenance_tool/services/__init__.py
"""Service layer for maintenance-tool"""

from .config_service import ConfigService

__all__ = [
    "ConfigService",
]
