import click
from rich.console import Console

from supalink.auth import delete_access_token, save_access_token

console = Console()


@click.command()
@click.option("--token", default=None, help="Access token to store (prompted for when omitted).")
def login(token: str | None) -> None:
    """Store an access token for later commands."""
    if token is None:
        token = click.prompt("Enter your access token", hide_input=True)
    try:
        save_access_token(token.strip())
    except (ValueError, OSError) as exc:
        raise click.ClickException(str(exc))
    console.print("[green]✅ Access token saved[/green]")


@click.command()
def logout() -> None:
    """Delete the stored access token."""
    if delete_access_token():
        console.print("[green]✅ Access token deleted[/green]")
    else:
        console.print("[yellow]No stored access token found[/yellow]")
