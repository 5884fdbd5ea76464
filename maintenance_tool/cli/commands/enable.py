"""Enable command implementation"""

import json

import click

from ..decorators import with_config
from ..utils.output import console, format_enable_result, print_error
from ...api import MaintenanceEnabler
from ...api.exceptions import AssetNotFoundError, EnableError, ExternalProcessError
from ...core import SubprocessRunner


@click.command()
@click.option('--clean', is_flag=True,
              help='Remove everything else from the publish directory')
@click.option('--deploy', is_flag=True,
              help='Run the deploy command after preparing the files')
@click.option('--json', 'as_json', is_flag=True, help='Print the result as JSON')
@click.pass_context
@with_config
def enable(ctx, clean, deploy, as_json, config):
    """Switch the publish directory to the maintenance page

    Copies the maintenance document into the publish directory as the
    default document, along with the icon. Existing files with those names
    are overwritten.

    Examples:

        # Prepare the maintenance page
        maintenance-tool enable

        # Prepare and deploy in one step
        maintenance-tool enable --deploy

        # Leave nothing but the maintenance page behind
        maintenance-tool enable --clean
    """
    if not as_json:
        console.print("[cyan]Preparing maintenance mode files...[/cyan]")

    enabler = MaintenanceEnabler(config, runner=SubprocessRunner(capture_output=as_json) if deploy else None)

    try:
        result = enabler.enable(clean=clean, deploy=deploy)
    except AssetNotFoundError as e:
        print_error(str(e))
        ctx.exit(1)
    except EnableError as e:
        print_error("Failed to enable maintenance mode", e)
        ctx.exit(1)
    except ExternalProcessError as e:
        print_error("Maintenance files are in place but the deploy failed", e)
        console.print("\nPlease try again or manually run:")
        console.print(f"  {config.deploy_command}")
        ctx.exit(1)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2, default=str))
    else:
        format_enable_result(result, config, deployed=deploy)