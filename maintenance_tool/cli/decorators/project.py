# maintenance_tool/cli/decorators/project.py
"""Configuration context decorator for CLI commands"""

from functools import wraps
from typing import Callable

import click

from ..utils.output import print_error
from ...api.exceptions import ConfigError


def with_config(func: Callable) -> Callable:
    """Decorator that loads the project configuration before the command runs

    The loaded ``ToggleConfig`` is passed as the ``config`` keyword argument.
    Configuration errors are reported and end the command with status 1.

    Args:
        func: Command function to decorate

    Returns:
        Decorated function
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        ctx = click.get_current_context()

        try:
            config = ctx.obj.config
        except ConfigError as e:
            print_error("Failed to load configuration", e)
            ctx.exit(1)

        kwargs['config'] = config
        return func(*args, **kwargs)

    return wrapper
