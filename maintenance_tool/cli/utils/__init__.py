# maintenance_tool/cli/utils/__init__.py
"""CLI utilities"""

from .output import (
    console,
    err_console,
    format_enable_result,
    format_restore_result,
    format_site_status,
    print_error,
)

__all__ = [
    "console",
    "err_console",
    "format_enable_result",
    "format_restore_result",
    "format_site_status",
    "print_error",
]
