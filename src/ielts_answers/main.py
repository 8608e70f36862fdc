"""
CLI Entry Point

Main command-line interface for the IELTS answer checker using the Click
framework with rich output formatting.
"""

import sys
from dataclasses import asdict
from pathlib import Path

import click
from rich.console import Console
from rich.panel import Panel

from .core.config import get_config, reload_config
from .core.config_validator import ConfigValidator
from .core.exceptions import IeltsAnswersException
from .utils.logging import setup_logging, get_logger
from .utils.help_text import show_help_with_markdown
from .commands import check, grade, band, overall, config_show, config_validate

console = Console()
logger = get_logger(__name__)


@click.group(invoke_without_command=True)
@click.option('--config', '-c', type=click.Path(exists=True), help='Configuration file path')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
@click.option('--debug', is_flag=True, help='Enable debug mode')
@click.option('--help', '-h', is_flag=True, expose_value=False, is_eager=True,
              callback=show_help_with_markdown, help='Show this message and exit')
@click.pass_context
def cli(ctx, config, verbose, debug):
    """ielts - IELTS Answer Checker"""

    ctx.ensure_object(dict)

    try:
        # Load configuration
        if config:
            app_config = reload_config(Path(config))
        else:
            app_config = get_config()

        # Catch bad file values and environment overrides before they are used
        ConfigValidator().validate_config(asdict(app_config))

        # Override debug mode if specified
        if debug:
            app_config.debug = debug

        # Setup logging
        if verbose or debug:
            app_config.logging.level = 'DEBUG'
        setup_logging(app_config)

        # Store config in context
        ctx.obj['config'] = app_config

    except IeltsAnswersException as e:
        console.print(f"[red]Error initializing application: {str(e)}[/red]")
        sys.exit(2)
    except (OSError, TypeError, ValueError) as e:
        console.print(f"[red]Error initializing application: {str(e)}[/red]")
        sys.exit(1)

    # If no subcommand is provided, show the banner
    if ctx.invoked_subcommand is None:
        _display_banner()


def _display_banner():
    """Display application banner."""
    banner = Panel.fit(
        "[bold blue]ielts[/bold blue]\n"
        "[dim]IELTS Answer Checker[/dim]\n\n"
        "Use --help for available commands",
        title="📝 IELTS",
        border_style="blue"
    )
    console.print(banner)


cli.add_command(check)
cli.add_command(grade)
cli.add_command(band)
cli.add_command(overall)


@cli.group()
def config():
    """Configuration management commands."""
    pass


config.add_command(config_show)
config.add_command(config_validate)


def main():
    """Main entry point with comprehensive error handling."""
    try:
        cli()
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(1)
    except IeltsAnswersException as e:
        logger.error(f"Application error: {str(e)}")
        console.print(f"[red]Error: {str(e)}[/red]")
        sys.exit(2)


if __name__ == "__main__":
    main()
