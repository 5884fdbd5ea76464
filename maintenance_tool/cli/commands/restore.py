"""Restore command implementation"""

import json
import sys

import click
from rich.markup import escape

from ..decorators import with_config
from ..utils.output import console, format_restore_result
from ...api import ApplicationRestorer
from ...core import SubprocessRunner


@click.command()
@click.option('--soft-fail', is_flag=True,
              help='Exit with status 0 even when the build or deploy fails')
@click.option('--timeout', type=click.FloatRange(min=0, min_open=True),
              help='Seconds to wait for each command before giving up')
@click.option('--json', 'as_json', is_flag=True,
              help='Capture command output and print the result as JSON')
@click.pass_context
@with_config
def restore(ctx, soft_fail, timeout, as_json, config):
    """Rebuild the application and redeploy it

    Runs the build command, then the deploy command, with their output
    passed straight through to the terminal. The deploy is skipped when
    the build fails.

    Exits with status 1 when either step fails, unless --soft-fail is given.

    Examples:

        # Restore the live application
        maintenance-tool restore

        # Report failures but always exit 0
        maintenance-tool restore --soft-fail
    """
    runner = SubprocessRunner(capture_output=as_json, timeout=timeout)

    if as_json:
        result = ApplicationRestorer(config, runner=runner).restore()
        click.echo(json.dumps(result.to_dict(), indent=2, default=str))
    else:
        console.print("[cyan]Starting restoration of normal application operation...[/cyan]")
        restorer = ApplicationRestorer(
            config,
            runner=runner,
            on_step=lambda message: console.print(f"[cyan]{escape(message)}[/cyan]"),
        )
        result = restorer.restore()
        format_restore_result(result, config)

    if not result.is_success and not soft_fail:
        sys.exit(result.exit_code)
