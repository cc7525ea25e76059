from pathlib import Path

import click
from rich.console import Console

from supalink.project import link_project, unlink_project

console = Console()


@click.command()
@click.option("--project-ref", required=True, help="Project ref of the hosted project.")
@click.option("--workdir", default=".", type=click.Path(file_okay=False), show_default=True)
def link(project_ref: str, workdir: str) -> None:
    """Link the workspace to a hosted project."""
    try:
        link_project(project_ref, Path(workdir).resolve())
    except (ValueError, RuntimeError, OSError) as exc:
        raise click.ClickException(str(exc))
    console.print(f"[green]✅ Finished linking project {project_ref}[/green]")


@click.command()
@click.option("--workdir", default=".", type=click.Path(file_okay=False), show_default=True)
def unlink(workdir: str) -> None:
    """Remove the local link to a hosted project."""
    try:
        removed = unlink_project(Path(workdir).resolve())
    except OSError as exc:
        raise click.ClickException(str(exc))
    if not removed:
        console.print("[yellow]Workspace is not linked, nothing to do[/yellow]")
        return
    console.print("[green]✅ Project unlinked[/green]")
