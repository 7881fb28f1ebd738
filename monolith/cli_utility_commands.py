"""Utility CLI commands - stacks, templates, version."""
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from monolith import __version__
from monolith.core.config import get_settings
from monolith.core.preset_loader import PresetLoader
from monolith.core.template_loader import TemplateLoader

# Module-level console instance (will be set by register function)
console: Console = Console()


def stacks():
    """List supported stacks and their default commands."""
    presets = PresetLoader(get_settings().presets_dir).list_presets()

    if not presets:
        console.print("[yellow]No stack presets found[/yellow]")
        raise typer.Exit(1)

    table = Table(title="Available Stacks")
    table.add_column("Stack", style="cyan")
    table.add_column("Name")
    table.add_column("Port", justify="right")
    table.add_column("Runtime")
    table.add_column("Health path", style="dim")

    for preset in presets:
        table.add_row(
            preset.slug,
            preset.name,
            str(preset.default_port),
            preset.runtime_version,
            preset.health_path,
        )

    console.print(table)
    console.print("\n[dim]Use 'monolith init --stack <stack>' to scaffold a pipeline[/dim]")


def templates(
    prefix: Optional[str] = typer.Argument(None, help="Only list templates under this folder (workflows, scripts, docker)")
):
    """List bundled templates by logical key."""
    keys = TemplateLoader(get_settings().templates_dir).list_templates(prefix or "")

    if not keys:
        console.print("[yellow]No templates found[/yellow]")
        raise typer.Exit(1)

    console.print(f"[bold cyan]Templates ({len(keys)}):[/bold cyan]\n")
    for key in keys:
        console.print(f"  {key}")


def version():
    """Show Monolith version."""
    console.print(f"Monolith v{__version__}")


def register_utility_commands(app: typer.Typer, shared_console: Console):
    """Register utility commands with the main Typer app.

    Args:
        app: Main Typer application
        shared_console: Shared Rich console instance
    """
    global console
    console = shared_console

    app.command()(stacks)
    app.command()(templates)
    app.command()(version)
