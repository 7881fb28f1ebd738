#!/usr/bin/env python3
"""Monolith CLI - Production-ready CI/CD scaffolding for GitHub Actions."""

import typer
from rich.console import Console

from monolith.cli_scaffold_commands import register_scaffold_commands
from monolith.cli_utility_commands import register_utility_commands

app = typer.Typer(
    name="monolith",
    help="""Monolith - Production-ready CI/CD scaffolding

Workflows, deploy scripts and a Dockerfile in one command.

Quick start:
  monolith stacks                 # See supported stacks
  monolith init                   # Answer a few questions
  monolith init -y --stack java   # Use defaults, no prompts
  monolith init --force           # Regenerate existing files
""",
    add_completion=False,
)

console = Console()

# Attach modular subcommands
register_scaffold_commands(app, console)
register_utility_commands(app, console)

if __name__ == "__main__":
    app()
