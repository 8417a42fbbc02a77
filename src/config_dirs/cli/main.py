"""Main CLI entry point for config-dirs."""

import logging
import click
from .. import __version__
from ..utils.logging import setup_logging
from .commands.paths import paths
from .commands.show import show
from .commands.version import version as version_command


@click.group()
@click.version_option(version=__version__, prog_name="config-dirs", message="%(prog)s version %(version)s")
@click.option('--verbose', '-v', is_flag=True, help='Log every probed path to stderr')
def cli(verbose):
    """config-dirs - Locate and load application config files."""
    setup_logging(level=logging.DEBUG if verbose else logging.WARNING)


cli.add_command(paths)
cli.add_command(show)
cli.add_command(version_command)
