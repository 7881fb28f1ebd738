"""Helpers shared by the Monolith command modules."""
from __future__ import annotations

from pathlib import Path
from typing import NoReturn, Optional

import typer
from rich.console import Console
from rich.markup import escape


def resolve_project_root(path: Optional[Path] = None) -> Path:
    """Directory to scaffold into: ``--path`` if given, else the cwd."""
    root = Path(path) if path else Path.cwd()
    return root.expanduser().resolve()


def setup_logging(log_file: Optional[str] = None, verbose: bool = False) -> None:
    """Apply ``--verbose`` and ``--log-file`` for one command invocation."""
    from monolith.core.logger import set_verbose, setup_file_logging

    if verbose:
        set_verbose(True)
    if log_file:
        setup_file_logging(log_file=log_file, verbose=verbose)


def handle_cli_error(
    e: Exception,
    console: Console,
    verbose: bool = False,
    exit_code: int = 1,
) -> NoReturn:
    """Print a one-line error and leave the command.

    Args:
        e: The failure to report
        console: Rich console for output
        verbose: Add the traceback below the error line
        exit_code: Process exit status

    Raises:
        typer.Exit: Always
    """
    console.print(f"[red]Error:[/red] {escape(str(e))}")
    if verbose:
        console.print_exception()
    raise typer.Exit(exit_code)


def print_warning(console: Console, message: str, prefix: str = "⚠") -> None:
    console.print(f"[yellow]{prefix}[/yellow] {message}")


def print_info(console: Console, message: str, prefix: str = "ℹ") -> None:
    console.print(f"[cyan]{prefix}[/cyan] {message}")
