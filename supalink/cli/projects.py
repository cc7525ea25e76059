from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from supalink.api.client import ApiClient
from supalink.auth import load_access_token
from supalink.project import load_project_ref

console = Console()


@click.group(name="projects")
def projects() -> None:
    """Inspect hosted projects."""


@projects.command(name="list")
def list_projects() -> None:
    """List all hosted projects the token can access."""
    try:
        items = ApiClient(load_access_token()).list_projects()
    except (ValueError, RuntimeError) as exc:
        raise click.ClickException(str(exc))
    table = Table(title="Projects")
    table.add_column("Ref", style="cyan")
    table.add_column("Name")
    table.add_column("Region")
    table.add_column("Created")
    for p in items:
        table.add_row(p.id, p.name, p.region, p.created_at)
    console.print(table)


@projects.command(name="current")
@click.option("--workdir", default=".", type=click.Path(file_okay=False), show_default=True)
def current(workdir: str) -> None:
    """Show the project ref this workspace is linked to."""
    try:
        ref = load_project_ref(Path(workdir).resolve())
    except (ValueError, RuntimeError) as exc:
        raise click.ClickException(str(exc))
    click.echo(ref)
