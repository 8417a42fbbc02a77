"""Show command - load a config file and print it."""

import click
import sys
from ...loader.file_loader import ContentMode
from ...loader.resolver import load
from ...parsers import PARSERS, get_parser
from ...utils.errors import ConfigDirsError, NoConfigPathError
from ...utils.logging import get_logger
from ..utils import format_error, to_json

logger = get_logger("cli.show")


@click.command()
@click.argument('name')
@click.option('--format', 'fmt', type=click.Choice(sorted(PARSERS)), default='toml', show_default=True, help='Config file format')
def show(name, fmt):
    """Load the config for NAME and print it as JSON."""
    try:
        config = load(name, get_parser(fmt), mode=ContentMode.TEXT)
    except NoConfigPathError as e:
        click.echo(format_error(str(e), f"Run: config-dirs paths {name}"), err=True)
        sys.exit(1)
    except (ConfigDirsError, ValueError) as e:
        click.echo(format_error(str(e)), err=True)
        sys.exit(1)
    
    logger.debug(f"Loaded config for {name} with the {fmt} parser")    
    click.echo(to_json(config))
