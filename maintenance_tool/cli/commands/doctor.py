"""System diagnostic command"""

import shutil
import sys

import click
from rich import box
from rich.table import Table

from ..decorators import with_config
from ..utils.output import console
from ...core import split_command
from ...models import ToggleConfig
from ...utils.file_utils import ensure_directory, is_writable_directory


class DiagnosticCheck:
    """Base class for diagnostic checks"""

    def __init__(self, name: str, description: str):
        self.name = name
        self.description = description
        self.passed = False
        self.message = ""
        self.fixes = []

    def run(self, config: ToggleConfig) -> 'DiagnosticCheck':
        """Run the diagnostic check"""
        raise NotImplementedError

    def fix(self, config: ToggleConfig) -> bool:
        """Attempt to fix the issue"""
        return False


class BundleCheck(DiagnosticCheck):
    """Check the maintenance bundle files exist"""

    def __init__(self):
        super().__init__(
            "Maintenance Bundle",
            "Verify the maintenance page and icon exist"
        )

    def run(self, config):
        missing = [
            str(path) for path in (config.maintenance_document_path, config.icon_path)
            if not path.is_file()
        ]

        if missing:
            self.passed = False
            self.message = f"Missing: {', '.join(missing)}"
        else:
            self.passed = True
            self.message = "Maintenance page and icon found"

        return self


class ToolCheck(DiagnosticCheck):
    """Check the build and deploy executables are on PATH"""

    def __init__(self):
        super().__init__(
            "External Tools",
            "Verify build and deploy commands are installed"
        )

    def run(self, config):
        missing = []
        for command in (config.build_command, config.deploy_command):
            argv = split_command(command)
            if not argv or shutil.which(argv[0]) is None:
                missing.append(argv[0] if argv else command)

        if missing:
            self.passed = False
            self.message = f"Not found on PATH: {', '.join(missing)}"
        else:
            self.passed = True
            self.message = "Build and deploy commands available"

        return self


class PublishDirCheck(DiagnosticCheck):
    """Check the publish directory is writable"""

    def __init__(self):
        super().__init__(
            "Publish Directory",
            "Verify the publish directory exists and is writable"
        )

    def run(self, config):
        publish_dir = config.publish_path

        if not publish_dir.exists():
            self.passed = False
            self.message = f"Does not exist: {publish_dir}"
            self.fixes = [f"Create {publish_dir}"]
        elif not is_writable_directory(publish_dir):
            self.passed = False
            self.message = f"No write permission: {publish_dir}"
        else:
            self.passed = True
            self.message = "Publish directory is writable"

        return self

    def fix(self, config):
        ensure_directory(config.publish_path)
        return True


@click.command()
@click.option('--fix', is_flag=True, help='Attempt to fix issues automatically')
@click.option('--check', multiple=True,
              type=click.Choice(['all', 'bundle', 'tools', 'publish']),
              default=['all'],
              help='Specific checks to run')
@with_config
def doctor(fix, check, config):
    """Run system diagnostics

    Checks that the maintenance bundle exists, that the build and deploy
    tools are installed, and that the publish directory is writable.

    Examples:

        # Run all checks
        maintenance-tool doctor

        # Run specific checks
        maintenance-tool doctor --check bundle --check tools

        # Attempt automatic fixes
        maintenance-tool doctor --fix
    """
    console.print("[bold]Maintenance Tool Diagnostics[/bold]\n")

    all_checks = {
        'bundle': BundleCheck(),
        'tools': ToolCheck(),
        'publish': PublishDirCheck(),
    }

    if 'all' in check:
        checks_to_run = list(all_checks.values())
    else:
        checks_to_run = [all_checks[c] for c in check if c in all_checks]

    # Run checks
    failed_checks = []
    for diagnostic_check in checks_to_run:
        diagnostic_check.run(config)
        if not diagnostic_check.passed:
            failed_checks.append(diagnostic_check)

    # Display results
    table = Table(title="Diagnostic Results", box=box.ROUNDED)
    table.add_column("Check", style="cyan")
    table.add_column("Status", justify="center")
    table.add_column("Details")

    for diagnostic_check in checks_to_run:
        status = "[green]✓ PASS[/green]" if diagnostic_check.passed else "[red]✗ FAIL[/red]"
        table.add_row(
            diagnostic_check.name,
            status,
            diagnostic_check.message
        )

    console.print(table)

    # Attempt fixes if requested
    unfixed = list(failed_checks)
    if fix and failed_checks:
        console.print("\n[yellow]Attempting automatic fixes...[/yellow]\n")

        for diagnostic_check in failed_checks:
            if diagnostic_check.fixes:
                console.print(f"Fixing: {diagnostic_check.name}")
                if diagnostic_check.fix(config):
                    console.print(f"[green]✓[/green] Fixed: {diagnostic_check.name}")
                    unfixed.remove(diagnostic_check)
                else:
                    console.print(f"[red]✗[/red] Could not fix: {diagnostic_check.name}")

    if unfixed:
        console.print(f"\n[red]{len(unfixed)} check(s) failed[/red]")
        if not fix:
            console.print("Run with --fix to attempt automatic fixes")
        sys.exit(1)
    else:
        console.print("\n[green]All checks passed![/green]")
