"""Interactive question flow for 'monolith init'.

Every answer can be supplied up front as a CLI option; only the missing
ones are asked. In non-interactive mode the defaults are taken silently.
"""
from typing import Optional

import typer
from rich.console import Console
from rich.prompt import Prompt

from monolith.core.config import Settings
from monolith.core.preset_loader import PresetLoader
from monolith.models.scaffold import PipelineMode, ScaffoldConfig, Stack


def _ask_text(
    value: Optional[str],
    message: str,
    default: str,
    interactive: bool,
    show_default: bool = True,
) -> str:
    if value is not None:
        return value
    if not interactive:
        return default
    return typer.prompt(message, default=default, show_default=show_default)


def _ask_choice(value, enum_cls, message: str, default, interactive: bool, console: Console):
    if value is not None:
        return value
    if not interactive:
        return default

    for member in enum_cls:
        console.print(f"  [cyan]{member.value:<11}[/cyan] {member.label}")
    answer = Prompt.ask(
        message,
        choices=[member.value for member in enum_cls],
        default=default.value,
        console=console,
    )
    return enum_cls(answer)


def collect_config(
    console: Console,
    settings: Settings,
    preset_loader: PresetLoader,
    default_name: str,
    interactive: bool = True,
    name: Optional[str] = None,
    stack: Optional[Stack] = None,
    mode: Optional[PipelineMode] = None,
    prod_branch: Optional[str] = None,
    staging_branch: Optional[str] = None,
    install_command: Optional[str] = None,
    lint_command: Optional[str] = None,
    test_command: Optional[str] = None,
    use_docker: Optional[bool] = None,
    migration_command: Optional[str] = None,
) -> ScaffoldConfig:
    """Build a ScaffoldConfig from options, prompts and stack presets.

    Raises:
        FileNotFoundError: The chosen stack has no preset
        ValueError: The answers do not form a valid configuration
    """
    project_name = _ask_text(name, "Project name", default_name, interactive)
    chosen_stack = _ask_choice(stack, Stack, "Choose stack", Stack.NODE, interactive, console)
    preset = preset_loader.load_preset(chosen_stack.value)

    prod = _ask_text(prod_branch, "Production branch", settings.prod_branch, interactive)
    staging = _ask_text(staging_branch, "Staging branch", settings.staging_branch, interactive)
    install = _ask_text(install_command, "Install command", preset.install_command, interactive)
    lint = _ask_text(lint_command, "Lint command", preset.lint_command, interactive)
    test = _ask_text(test_command, "Test command", preset.test_command, interactive)

    if use_docker is None:
        use_docker = True
        if interactive:
            use_docker = typer.confirm(
                "Use Docker for build & deploy? (recommended for production)", default=True
            )

    chosen_mode = _ask_choice(
        mode, PipelineMode, "Pipeline mode", PipelineMode.PRODUCTION, interactive, console
    )

    migration = ""
    if chosen_mode is PipelineMode.PRODUCTION:
        migration = _ask_text(
            migration_command,
            "Migration command (leave empty to skip migration step)",
            "",
            interactive,
            show_default=False,
        )

    return ScaffoldConfig(
        project_name=project_name,
        stack=chosen_stack,
        prod_branch=prod,
        staging_branch=staging,
        install_command=install,
        lint_command=lint,
        test_command=test,
        migration_command=migration,
        use_docker=use_docker,
        mode=chosen_mode,
    )
