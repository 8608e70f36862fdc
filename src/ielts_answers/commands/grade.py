"""
Grade Command

Grades a listening or reading section from JSON answer files.
"""

import json
from pathlib import Path

import click
from rich.console import Console

from ..cli.formatting import format_section_result, format_section_summary
from ..core.exceptions import IeltsAnswersException, ValidationError
from ..evaluation.grader import AnswerGrader
from ..utils.logging import get_logger

console = Console()
logger = get_logger(__name__)


def _load_json(path: str, what: str):
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ValidationError(f"{what} file {path} is not valid JSON: {e}",
                              field_name=what, invalid_value=path)


@click.command()
@click.argument('answer_key', type=click.Path(exists=True, dir_okay=False))
@click.argument('answers', type=click.Path(exists=True, dir_okay=False))
@click.option('--module', '-m',
              type=click.Choice(['listening', 'academic_reading', 'general_reading']),
              help='Module used for the band conversion (default from config)')
@click.option('--format', 'output_format', type=click.Choice(['table', 'json']), default='table',
              help='Output format')
@click.pass_context
def grade(ctx, answer_key, answers, module, output_format):
    """Grade a section against its answer key.

    \b
    📊 EXAMPLES:

    ielts grade key.json answers.json
    ielts grade key.json answers.json --module academic_reading
    ielts grade key.json answers.json --format json

    \b
    💡 The answer key is a list of {"number", "type", "answer"} objects (or an
    object with a "questions" list); the answers file maps question numbers
    to what the learner wrote.
    """
    config = ctx.obj.get('config') if ctx.obj else None

    try:
        key_data = _load_json(answer_key, 'answer_key')
        answer_data = _load_json(answers, 'answers')

        grader = AnswerGrader(config=config)
        result = grader.grade_section(key_data, answer_data, module=module)
    except IeltsAnswersException as e:
        logger.error(f"Grading failed: {e}")
        console.print(f"[red]Error: {e}[/red]")
        ctx.exit(2)

    if output_format == 'json':
        click.echo(json.dumps(result.to_dict(), indent=2))
        return

    console.print(format_section_result(result))
    console.print(format_section_summary(result))
