import logging

import click

from supalink import __version__
from .link import link, unlink
from .login import login, logout
from .projects import projects


def _configure_logging(debug: bool) -> None:
    logger = logging.getLogger("supalink")
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(name)s %(levelname)s: %(message)s"))
        logger.addHandler(handler)


@click.group()
@click.version_option(version=__version__, prog_name="supalink")
@click.option("--debug", is_flag=True, help="Log API requests and file writes to stderr")
def main(debug: bool) -> None:
    """supalink: link local workspaces to hosted projects."""
    _configure_logging(debug)


main.add_command(link)
main.add_command(unlink)
main.add_command(login)
main.add_command(logout)
main.add_command(projects)
