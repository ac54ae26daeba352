"""Command-line interface for profilegen."""

import asyncio
import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from profilegen import GeneratorConfig, ReadmeUpdater, __version__, render_stored
from profilegen.config import LogFormat
from profilegen.core.exporter import to_dict, write_document
from profilegen.exceptions import ProfileGenError
from profilegen.logging import configure_logging
from profilegen.models.result import UpdateResult

app = typer.Typer(
    name="profilegen",
    help="Live-stats profile README generator",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)


def version_callback(value: bool):
    if value:
        console.print(f"profilegen version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
):
    """profilegen - live-stats profile README generator."""
    pass


def _build_config(
    profile: Optional[Path],
    readme: Optional[Path],
    json_logs: bool,
) -> GeneratorConfig:
    overrides = {}
    if profile is not None:
        overrides["profile_path"] = str(profile)
    if readme is not None:
        overrides["readme_path"] = str(readme)
    if json_logs:
        overrides["log_format"] = LogFormat.JSON
    return GeneratorConfig(**overrides)


@app.command()
def update(
    profile: Optional[Path] = typer.Option(
        None, "--profile", "-p", help="Profile YAML file (default: data/profile.yaml)"
    ),
    readme: Optional[Path] = typer.Option(
        None, "--readme", "-r", help="README destination (default: README.md)"
    ),
    dry_run: bool = typer.Option(
        False, "--dry-run", "-n", help="Print the README instead of writing files"
    ),
    json_logs: bool = typer.Option(
        False, "--json-logs", help="Emit logs as JSON lines"
    ),
    json_output: bool = typer.Option(
        False, "--json", help="Print the run result as JSON instead of the summary table"
    ),
):
    """Fetch live stats, update the profile and regenerate the README."""
    config = _build_config(profile, readme, json_logs)

    async def run() -> UpdateResult:
        async with ReadmeUpdater(config) as updater:
            return await updater.run(dry_run=dry_run)

    try:
        result = asyncio.run(run())
    except ProfileGenError as e:
        err_console.print(f"[red]✗ Error:[/red] {e}")
        raise typer.Exit(1)

    if json_output:
        typer.echo(json.dumps(to_dict(result), indent=2))
        return

    if dry_run:
        typer.echo(result.document)
        return

    _print_summary(result)


@app.command()
def render(
    profile: Optional[Path] = typer.Option(
        None, "--profile", "-p", help="Profile YAML file (default: data/profile.yaml)"
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Write the README here instead of stdout"
    ),
):
    """Render the README from stored data without fetching."""
    config = _build_config(profile, None, False)
    configure_logging(config)

    try:
        document = render_stored(config)
        if output:
            write_document(document, output)
    except ProfileGenError as e:
        err_console.print(f"[red]✗ Error:[/red] {e}")
        raise typer.Exit(1)

    if output:
        console.print(f"[dim]Saved to {output}[/dim]")
    else:
        typer.echo(document)


def _print_summary(result: UpdateResult):
    """Print the stats summary table."""
    gh = result.github_stats
    lc = result.leetcode_stats

    table = Table(title="Stats Summary", show_header=False)
    table.add_column("Metric", style="dim")
    table.add_column("Value")

    table.add_row("GitHub Followers", f"{gh.followers:,}")
    table.add_row("Public Repos", f"{gh.public_repos:,}")
    table.add_row("Total Contributions", f"{gh.total_contributions:,}")
    table.add_row("LeetCode Solved", f"{lc.total_solved:,}")
    table.add_row("Acceptance Rate", f"{lc.acceptance_rate:.2f}%")

    console.print(table)
    if result.degraded:
        console.print(f"[yellow]⚠[/yellow] Kept stored values for: {', '.join(result.degraded)}")
    console.print(f"[green]✓[/green] README written to {result.readme_path}")


if __name__ == "__main__":
    app()
