# maintenance_tool/core/__init__.py
"""Core modules for maintenance-tool"""

from .command_runner import CommandRunner, SubprocessRunner, split_command
from .path_resolver import PathResolver

__all__ = [
    "CommandRunner",
    "SubprocessRunner",
    "split_command",
    "PathResolver",
]
