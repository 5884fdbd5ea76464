# maintenance_tool/cli/utils/output.py
"""Output formatting utilities"""

from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from ...constants import (
    EMOJI_ERROR,
    EMOJI_SUCCESS,
    MSG_RECOVERY_STEPS,
    MSG_RESTORE_SUCCESS,
    SiteState,
)
from ...models import EnableResult, RestoreResult, RestoreStatus, SiteStatus, ToggleConfig

console = Console()
err_console = Console(stderr=True)


def format_enable_result(result: EnableResult, config: ToggleConfig, deployed: bool = False) -> None:
    """Format and display enable operation result"""
    lines = [
        f"[green]{EMOJI_SUCCESS}[/green] Maintenance mode files prepared.",
        "",
        f"[bold]Publish dir:[/bold] {result.publish_dir}",
    ]

    for name, path in result.installed.items():
        checksum = result.checksums.get(name, "")
        lines.append(f"  • {path.name} [dim]{checksum[:12]}[/dim]")

    if result.removed:
        lines.append(f"[bold]Removed:[/bold] {len(result.removed)} other entries")

    panel = Panel(
        "\n".join(lines),
        title="Enable Result",
        border_style="green"
    )
    console.print(panel)

    if deployed:
        console.print("\nAfter deployment, your site will show the maintenance page.")
    else:
        console.print("\nTo deploy maintenance mode, run:")
        console.print(f"  [cyan]{escape(config.deploy_command)}[/cyan]")
        console.print("\nOr simply use: [cyan]maintenance-tool enable --deploy[/cyan]")


def format_restore_result(result: RestoreResult, config: ToggleConfig) -> None:
    """Format and display restore operation result"""
    if result.is_success:
        console.print()
        console.print(f"[green]{MSG_RESTORE_SUCCESS}[/green]")
        console.print("The maintenance mode has been disabled.")
        return

    step = "build" if result.status == RestoreStatus.BUILD_FAILED else "deploy"
    panel = Panel(
        f"[red]{EMOJI_ERROR} Error during restoration ({step} step):[/red]\n{escape(result.error or '')}",
        title="Restore Error",
        border_style="red"
    )
    err_console.print(panel)

    console.print()
    console.print(MSG_RECOVERY_STEPS.format(
        build_command=escape(config.build_command),
        deploy_command=escape(config.deploy_command)
    ))


def format_site_status(status: SiteStatus) -> None:
    """Format and display the observed site state"""
    styles = {
        SiteState.MAINTENANCE: "yellow",
        SiteState.LIVE: "green",
        SiteState.EMPTY: "dim",
    }
    style = styles[status.state]

    lines = [
        f"[bold]State:[/bold] [{style}]{status.state.value}[/{style}]",
        f"[bold]Publish dir:[/bold] {status.publish_dir}",
    ]
    if status.document_checksum:
        lines.append(f"[bold]Document:[/bold] {status.document_checksum[:12]}")

    panel = Panel(
        "\n".join(lines),
        title="Site Status",
        border_style="blue"
    )
    console.print(panel)


def print_error(message: str, error: Optional[Exception] = None) -> None:
    """Print error message"""
    if error:
        err_console.print(f"[red]Error:[/red] {escape(message)}: {escape(str(error))}")
    else:
        err_console.print(f"[red]Error:[/red] {escape(message)}")
