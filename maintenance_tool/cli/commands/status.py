"""Status command implementation"""

import json

import click

from ..decorators import with_config
from ..utils.output import format_site_status
from ...api import site_status


@click.command()
@click.option('--json', 'as_json', is_flag=True, help='Print the status as JSON')
@with_config
def status(as_json, config):
    """Show whether the publish directory holds the maintenance page

    The state is observed by comparing checksums of the published default
    document and the maintenance document: maintenance, live or empty.
    """
    result = site_status(config)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
    else:
        format_site_status(result)
