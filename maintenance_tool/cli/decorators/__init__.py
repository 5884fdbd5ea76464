# maintenance_tool/cli/decorators/__init__.py
"""CLI decorators"""

from .project import with_config

__all__ = [
    "with_config",
]
