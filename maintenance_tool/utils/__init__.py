# maintenance_tool/utils/__init__.py
"""Utility functions for maintenance-tool"""

from .file_utils import (
    calculate_file_checksum,
    clear_directory,
    ensure_directory,
    install_files,
    is_writable_directory,
    staging_directory,
)

__all__ = [
    "calculate_file_checksum",
    "clear_directory",
    "ensure_directory",
    "install_files",
    "is_writable_directory",
    "staging_directory",
]
