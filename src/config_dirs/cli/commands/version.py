"""Version command - show config-dirs version."""

import click
from ... import __version__


@click.command()
def version():
    """Show config-dirs version."""
    click.echo(f"config-dirs version {__version__}")
