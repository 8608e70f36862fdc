"""
Configuration Commands

Show and validate the application configuration.
"""

import json
from dataclasses import asdict
from pathlib import Path

import click
import yaml
from rich.console import Console

from ..cli.formatting import format_table
from ..core.config_validator import ConfigValidator
from ..core.exceptions import ConfigurationError
from ..utils.logging import get_logger

console = Console()
logger = get_logger(__name__)


@click.command()
@click.option('--format', 'output_format', type=click.Choice(['table', 'json', 'yaml']), default='table',
              help='Output format')
@click.pass_context
def show(ctx, output_format):
    """Show current configuration.

    \b
    📋 EXAMPLES:

    ielts config show
    ielts config show --format yaml
    """
    config = ctx.obj.get('config') if ctx.obj else None
    if not config:
        console.print("[red]Configuration not available[/red]")
        ctx.exit(2)

    config_data = asdict(config)

    if output_format == 'json':
        click.echo(json.dumps(config_data, indent=2))
        return
    if output_format == 'yaml':
        click.echo(yaml.safe_dump(config_data, sort_keys=False))
        return

    rows = []
    for key, value in config_data.items():
        if isinstance(value, dict):
            for setting, setting_value in value.items():
                rows.append({"Section": key, "Setting": setting, "Value": setting_value})
        else:
            rows.append({"Section": "app", "Setting": key, "Value": value})

    console.print(format_table(rows, title="Configuration"))


@click.command()
@click.argument('config_file', required=False, type=click.Path(exists=True, dir_okay=False))
def validate(config_file):
    """Validate a configuration file.

    \b
    ✅ EXAMPLES:

    ielts config validate
    ielts config validate config/custom.yaml
    """
    config_path = Path(config_file) if config_file else Path("config/default.yaml")
    if not config_path.exists():
        console.print(f"[yellow]No configuration file at {config_path}; defaults are in use[/yellow]")
        return

    try:
        ConfigValidator().validate_file(config_path)
    except ConfigurationError as e:
        logger.error(f"Invalid configuration {config_path}: {e}")
        console.print(f"[red]{e}[/red]")
        raise click.exceptions.Exit(2)

    console.print(f"[green]✓ Configuration {config_path} is valid[/green]")
