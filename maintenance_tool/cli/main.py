# maintenance_tool/cli/main.py
"""Main CLI entry point for maintenance-tool"""

import logging
import os
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler

from ..__version__ import __version__
from ..constants import APP_NAME, ENV_LOG_LEVEL, LOG_FORMAT
from ..core import PathResolver
from ..models import ToggleConfig
from ..services import ConfigService

# Import all commands
from .commands import (
    init,
    enable,
    restore,
    status,
    doctor,
)

console = Console(stderr=True)


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """Setup logging configuration

    Args:
        verbose: Enable verbose output (INFO level)
        debug: Enable debug output (DEBUG level)
    """
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = getattr(logging, os.environ.get(ENV_LOG_LEVEL, "WARNING").upper(), logging.WARNING)

    # Configure rich handler
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[
            RichHandler(
                console=console,
                show_time=debug,
                show_path=debug,
                rich_tracebacks=True,
                tracebacks_suppress=[click]
            )
        ],
        force=True
    )


class Context:
    """CLI context object with lazy configuration loading

    The project root and configuration are resolved on first access, so
    commands such as ``init`` run without an existing config file.
    """

    def __init__(self, project_root: Optional[Path] = None):
        """Initialize CLI context"""
        self.path_resolver = PathResolver(project_root)
        self.verbose: bool = False
        self.debug: bool = False
        self._project_root: Optional[Path] = None
        self._config: Optional[ToggleConfig] = None

    @property
    def project_root(self) -> Path:
        """Project root, or the working directory when no config exists"""
        if self._project_root is None:
            self._project_root = self.path_resolver.project_root_or_cwd()
        return self._project_root

    @property
    def config_service(self) -> ConfigService:
        return ConfigService(
            self.project_root,
            self.path_resolver.config_path(self.project_root)
        )

    @property
    def config(self) -> ToggleConfig:
        """Loaded configuration (lazy loading)

        Raises:
            ConfigError: The config file is invalid
        """
        if self._config is None:
            self._config = self.config_service.load_config()
            if self.debug:
                console.print(f"[dim]Project root: {self.project_root}[/dim]")
        return self._config


@click.group(name=APP_NAME)
@click.version_option(__version__, prog_name=APP_NAME)
@click.option('-v', '--verbose', is_flag=True, help='Enable verbose output')
@click.option('-d', '--debug', is_flag=True, help='Enable debug output')
@click.option('-q', '--quiet', is_flag=True, help='Suppress all output except errors')
@click.option('--project-root', type=click.Path(file_okay=False, path_type=Path),
              help='Project root directory (default: search upwards for .maintenance-tool.yaml)')
@click.pass_context
def cli(ctx, verbose, debug, quiet, project_root):
    """Maintenance Tool - toggle a static maintenance page

    Enable copies the maintenance page and icon into the publish
    directory. Restore rebuilds the application and redeploys it.
    """
    # Setup logging
    if quiet:
        logging.disable(logging.CRITICAL)
    else:
        setup_logging(verbose=verbose, debug=debug)

    ctx.obj = Context(project_root)
    ctx.obj.verbose = verbose
    ctx.obj.debug = debug


# Register commands
cli.add_command(init.init)
cli.add_command(enable.enable)
cli.add_command(restore.restore)
cli.add_command(status.status)
cli.add_command(doctor.doctor)


def main():
    """Main entry point for the CLI application

    This function handles:
    - Keyboard interrupts
    - Unexpected exceptions with proper error display
    """
    try:
        cli(prog_name=APP_NAME)

    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(130)

    except Exception as e:
        console.print(f"[red]Unexpected error: {e}[/red]")
        if '--debug' in sys.argv or '-d' in sys.argv:
            console.print_exception()
        sys.exit(1)


if __name__ == "__main__":
    main()
