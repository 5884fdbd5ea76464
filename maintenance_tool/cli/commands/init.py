"""Initialize command for creating maintenance-tool projects"""

from pathlib import Path

import click

from ..utils.output import console, print_error
from ...constants import EMOJI_ROCKET, EMOJI_SUCCESS, EMOJI_WARNING, PROJECT_CONFIG_FILE
from ...models import ToggleConfig
from ...services import ConfigService
from ...templates import MAINTENANCE_PAGE_TEMPLATE, load_template


@click.command()
@click.argument('path', required=False, default='.',
                type=click.Path(file_okay=False, path_type=Path))
@click.option('--publish-dir', help='Directory the hosting provider serves')
@click.option('--build-command', help='Command that builds the application')
@click.option('--deploy-command', help='Command that deploys the publish directory')
@click.option('--force', '-f', is_flag=True, help='Overwrite an existing configuration')
@click.pass_context
def init(ctx, path, publish_dir, build_command, deploy_command, force):
    """Initialize a maintenance-tool project

    Writes .maintenance-tool.yaml with the default settings and, when it
    does not exist yet, a template maintenance page.

    Examples:
        maintenance-tool init
        maintenance-tool init ./my-app --publish-dir public
    """
    project_path = path.resolve()
    config_path = project_path / PROJECT_CONFIG_FILE

    if config_path.exists() and not force:
        console.print(f"{EMOJI_WARNING} Project already initialized in {project_path}")
        console.print("Use --force to overwrite the configuration")
        ctx.exit(1)

    console.print(f"\n{EMOJI_ROCKET} Initializing maintenance-tool project...")

    overrides = {
        'publish_dir': publish_dir,
        'build_command': build_command,
        'deploy_command': deploy_command,
    }

    try:
        config = ToggleConfig(
            project_root=project_path,
            **{k: v for k, v in overrides.items() if v}
        )
    except ValueError as e:
        print_error("Invalid option", e)
        ctx.exit(1)

    try:
        project_path.mkdir(parents=True, exist_ok=True)
        ConfigService(project_path, config_path).save_config(config)

        page = config.maintenance_document_path
        if not page.exists():
            page.parent.mkdir(parents=True, exist_ok=True)
            page.write_text(load_template(*MAINTENANCE_PAGE_TEMPLATE), encoding='utf-8')
            console.print(f"Created template page: {config.maintenance_document}")
    except OSError as e:
        print_error("Failed to initialize project", e)
        ctx.exit(1)

    console.print(f"\n{EMOJI_SUCCESS} Project initialized successfully!")

    console.print(f"\n{EMOJI_SUCCESS} Next steps:")
    if not config.icon_path.exists():
        console.print(f"1. Add an icon at {config.icon}")
    else:
        console.print(f"1. Review {config.maintenance_document}")
    console.print("2. maintenance-tool doctor")
    console.print("3. maintenance-tool enable --deploy")
    console.print("4. maintenance-tool restore")
