"""Human-readable summary of a scaffolding run."""
from rich.console import Console
from rich.markup import escape

from monolith.models.artifact import ScaffoldReport, WriteStatus
from monolith.models.scaffold import PipelineMode, ScaffoldConfig

_STATUS_LINES = {
    WriteStatus.WRITTEN: "[green]✔[/green]  Written: ",
    WriteStatus.SKIPPED: "[yellow]⏭[/yellow]  Skipped (already exists): ",
    WriteStatus.FAILED: "[red]✖[/red]  Failed: ",
}

REQUIRED_SECRETS = [
    ("PROD_HOST", "Your production server IP / hostname"),
    ("STAGING_HOST", "Your staging server IP / hostname"),
    ("DEPLOY_USER", "SSH username on both servers"),
    ("DEPLOY_SSH_KEY", "Private SSH key (matching authorized_keys on servers)"),
]


def print_outcomes(console: Console, report: ScaffoldReport) -> None:
    """Print one line per artifact, in the order they were processed."""
    for outcome in report.outcomes:
        line = f"  {_STATUS_LINES[outcome.status]}{escape(outcome.artifact.target)}"
        if outcome.status is WriteStatus.WRITTEN and outcome.artifact.description:
            line += f"  [dim]← {outcome.artifact.description}[/dim]"
        if outcome.error:
            line += f"  [red]({escape(outcome.error)})[/red]"
        console.print(line)

    if report.skipped:
        console.print("     Use [bold]--force[/bold] to overwrite existing files.")


def print_summary(console: Console, report: ScaffoldReport, config: ScaffoldConfig) -> None:
    """Print outcomes plus the follow-up steps for the chosen pipeline mode."""
    if config.mode is PipelineMode.SIMPLE:
        console.print("\n[bold green]✅  Monolith scaffolded your simple CI/CD pipeline![/bold green]\n")
    else:
        console.print("\n[bold green]✅  Monolith scaffolded your production CI/CD pipeline![/bold green]\n")

    console.print("📁 Generated files:")
    print_outcomes(console, report)

    if config.mode is PipelineMode.SIMPLE:
        _print_simple_next_steps(console, config)
    else:
        _print_production_next_steps(console, config)


def _print_simple_next_steps(console: Console, config: ScaffoldConfig) -> None:
    console.print("\nℹ️  Working directory: set the WORK_DIR repository variable in")
    console.print("   GitHub Settings → Variables if your project is in a sub-folder.")
    console.print("\n[cyan]➡️  Next steps:[/cyan]")
    console.print("  1. git add .")
    console.print('  2. git commit -m "chore: add Monolith CI/CD"')
    console.print(
        f"  3. git push  -  workflow runs on every push to "
        f"{config.prod_branch} / {config.staging_branch} and PRs"
    )


def _print_production_next_steps(console: Console, config: ScaffoldConfig) -> None:
    image_name = config.image_name

    console.print("\n🔐  GitHub Secrets required (Settings → Secrets → Actions):")
    for name, description in REQUIRED_SECRETS:
        console.print(f"  [bold]{name:<18}[/bold] {description}")

    console.print("\n🏗️  GitHub Environments required (Settings → Environments):")
    console.print("  staging     - no approval needed (auto-deployed)")
    console.print("  production  - add required reviewers for manual approval gate")

    console.print("\n📋  Server setup (run once per server):")
    console.print(f"  mkdir -p /opt/scripts/{image_name}")
    console.print(f"  mkdir -p /etc/{image_name}")
    console.print(f"  # Place staging.env / production.env in /etc/{image_name}/")
    console.print(f"  # Copy deploy.sh, rollback.sh & health-check.sh to /opt/scripts/{image_name}/")

    console.print("\n[cyan]➡️  Next steps:[/cyan]")
    console.print("  1. git add .")
    console.print('  2. git commit -m "chore: add Monolith production CI/CD"')
    console.print("  3. git push  -  CI runs immediately on every branch")
    console.print(f"  4. Merge to {config.staging_branch} → auto-deploys to staging")
    console.print(f"  5. Merge to {config.prod_branch} → requests production approval → deploys")
