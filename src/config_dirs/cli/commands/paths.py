"""Paths command - list candidate config locations."""

import click
import sys
from ...config.environment import override_env_var
from ...loader.resolver import probe_candidates
from ...utils.logging import get_logger
from ..utils import format_error, to_json

logger = get_logger("cli.paths")


@click.command()
@click.argument('name')
@click.option('--json', 'json_output', is_flag=True, help='Output structured JSON')
def paths(name, json_output):
    """List the config paths probed for NAME, in order."""
    try:
        probes = probe_candidates(name)
    except ValueError as e:
        click.echo(format_error(str(e)), err=True)
        sys.exit(1)
    
    logger.debug(f"Probed {len(probes)} candidate paths for {name}")
    
    if json_output:
        click.echo(to_json([probe.model_dump() for probe in probes]))
        return
    
    click.echo(f"Config paths for {name} (override: ${override_env_var(name)})")
    click.echo("-" * 60)
    for probe in probes:
        marker = "*" if probe.exists else " "
        location = probe.path if probe.path is not None else f"{probe.template} (home directory unknown)"
        click.echo(f" {marker} {probe.source:<20} {location}")
