# maintenance_tool/cli/commands/__init__.py
"""CLI commands"""

from . import init
from . import enable
from . import restore
from . import status
from . import doctor

__all__ = [
    "init",
    "enable",
    "restore",
    "status",
    "doctor",
]
