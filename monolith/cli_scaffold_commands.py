"""Scaffold CLI command - init."""
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from monolith.cli_prompts import collect_config
from monolith.cli_support import (
    handle_cli_error,
    print_info,
    print_warning,
    resolve_project_root,
    setup_logging,
)
from monolith.core.config import get_settings
from monolith.core.preset_loader import PresetLoader
from monolith.core.template_loader import TemplateLoader
from monolith.models.scaffold import PipelineMode, Stack
from monolith.scaffold.core import ScaffoldError, ScaffoldManager
from monolith.scaffold.summary import print_outcomes, print_summary
from monolith.scaffold.writer import FileWriter

# Module-level console instance (will be set by register function)
console: Console = Console()


def init(
    path: Optional[Path] = typer.Option(None, "--path", "-C", help="Project root (default: current directory)"),
    name: Optional[str] = typer.Option(None, "--name", "-n", help="Project name (default: folder name)"),
    stack: Optional[Stack] = typer.Option(None, "--stack", "-s", help="Technology stack"),
    mode: Optional[PipelineMode] = typer.Option(None, "--mode", "-m", help="Pipeline mode"),
    prod_branch: Optional[str] = typer.Option(None, "--prod-branch", help="Production branch"),
    staging_branch: Optional[str] = typer.Option(None, "--staging-branch", help="Staging branch"),
    install_command: Optional[str] = typer.Option(None, "--install-command", help="Install command"),
    lint_command: Optional[str] = typer.Option(None, "--lint-command", help="Lint command"),
    test_command: Optional[str] = typer.Option(None, "--test-command", help="Test command"),
    docker: Optional[bool] = typer.Option(None, "--docker/--no-docker", help="Use Docker for build & deploy"),
    migration_command: Optional[str] = typer.Option(
        None, "--migration-command", help="Migration command (production mode, empty to skip)"
    ),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing files"),
    non_interactive: bool = typer.Option(False, "--non-interactive", "-y", help="Skip prompts, use defaults"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    log_file: Optional[str] = typer.Option(None, "--log-file", help="Also log to this file"),
):
    """Scaffold CI/CD workflows, deploy scripts and Docker files.

    Existing files are left untouched unless --force is given.

    Examples:
        monolith init                                   # Answer the prompts
        monolith init -y --stack python                 # Defaults for a Python service
        monolith init -y --mode simple --no-docker      # Single workflow, no Dockerfile
        monolith init --force                           # Regenerate everything
    """
    setup_logging(log_file=log_file, verbose=verbose)

    settings = get_settings()
    project_root = resolve_project_root(path)
    preset_loader = PresetLoader(settings.presets_dir)

    console.print("\n[bold]🧱  Monolith[/bold] - Production-Ready CI/CD Scaffolder\n")
    print_info(console, f"Project root: {escape(str(project_root))}")

    try:
        config = collect_config(
            console,
            settings,
            preset_loader,
            default_name=project_root.name,
            interactive=not non_interactive,
            name=name,
            stack=stack,
            mode=mode,
            prod_branch=prod_branch,
            staging_branch=staging_branch,
            install_command=install_command,
            lint_command=lint_command,
            test_command=test_command,
            use_docker=docker,
            migration_command=migration_command,
        )
    except (FileNotFoundError, ValueError) as e:
        handle_cli_error(e, console, verbose)

    if force:
        print_warning(console, "--force enabled - existing files will be overwritten.\n")

    manager = ScaffoldManager(
        project_root,
        template_loader=TemplateLoader(settings.templates_dir),
        preset_loader=preset_loader,
        writer=FileWriter(overwrite=force),
        settings=settings,
    )

    try:
        report = manager.scaffold(config)
    except ScaffoldError as e:
        console.print()
        print_outcomes(console, e.report)
        handle_cli_error(e, console, verbose)
    except (OSError, ValueError) as e:
        handle_cli_error(e, console, verbose)

    print_summary(console, report, config)


def register_scaffold_commands(app: typer.Typer, shared_console: Console):
    """Register scaffold commands with the main Typer app.

    Args:
        app: Main Typer application
        shared_console: Shared Rich console instance
    """
    global console
    console = shared_console

    app.command()(init)
