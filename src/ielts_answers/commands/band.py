"""
Band Score Commands

Raw score to band conversion and overall band calculation.
"""

import click
from rich.console import Console

from ..core.exceptions import ScoringError
from ..evaluation.metrics import overall_band, raw_to_band

console = Console()


@click.command()
@click.argument('raw', type=int)
@click.option('--module', '-m',
              type=click.Choice(['listening', 'academic_reading', 'general_reading']),
              help='Module (default from config)')
@click.option('--total', type=int, help='Number of questions in the section (default from config)')
@click.pass_context
def band(ctx, raw, module, total):
    """Convert a raw score into a band score.

    \b
    🎯 EXAMPLES:

    ielts band 30
    ielts band 33 --module academic_reading
    ielts band 10 --module general_reading --total 13
    """
    config = ctx.obj.get('config') if ctx.obj else None
    if module is None:
        module = config.scoring.default_module if config else 'listening'
    if total is None:
        total = config.scoring.questions_per_section if config else 40

    try:
        score = raw_to_band(raw, module, total=total)
    except ScoringError as e:
        console.print(f"[red]Error: {e}[/red]")
        ctx.exit(2)

    console.print(f"{module.replace('_', ' ').title()} {raw}/{total}: band [bold cyan]{score:.1f}[/bold cyan]")


@click.command()
@click.argument('listening', type=float)
@click.argument('reading', type=float)
@click.argument('writing', type=float)
@click.argument('speaking', type=float)
@click.pass_context
def overall(ctx, listening, reading, writing, speaking):
    """Calculate the overall band from the four module bands.

    \b
    🎯 EXAMPLES:

    ielts overall 6.5 6.5 5.0 7.0
    """
    try:
        score = overall_band(listening, reading, writing, speaking)
    except ScoringError as e:
        console.print(f"[red]Error: {e}[/red]")
        ctx.exit(2)

    console.print(f"Overall band: [bold cyan]{score:.1f}[/bold cyan]")
