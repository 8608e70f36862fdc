"""
Check Command

Checks a single learner answer against its canonical answer.
"""

import click
from rich.console import Console

from ..cli.formatting import format_verdict
from ..evaluation.matcher import IeltsAnswerMatcher, QuestionType
from ..utils.logging import get_logger

console = Console()
logger = get_logger(__name__)


@click.command()
@click.argument('user_answer')
@click.argument('correct_answer')
@click.option('--type', '-t', 'question_type', help='Question type, e.g. MULTIPLE_CHOICE_MULTIPLE or tfng')
@click.option('--explain', '-e', is_flag=True, help='Show which rule accepted the answer')
@click.pass_context
def check(ctx, user_answer, correct_answer, question_type, explain):
    """Check a learner answer against the correct answer.

    \b
    📝 EXAMPLES:

    ielts check "5km" "5 kilometres"
    ielts check "twelve" "12/twelve" --explain
    ielts check "B,A" "A,B" --type MULTIPLE_CHOICE_MULTIPLE

    \b
    💡 Separate acceptable alternatives with '/' and the options of a
    multi-select question with ','. Exits with status 1 when the answer
    is not accepted.
    """
    config = ctx.obj.get('config') if ctx.obj else None
    date_order = config.grading.date_order if config else 'day_first'

    resolved_type = QuestionType.from_tag(question_type)
    if question_type and resolved_type is None:
        console.print(f"[yellow]Unknown question type '{question_type}', using single-answer rules[/yellow]")

    matcher = IeltsAnswerMatcher(date_order=date_order)
    result = matcher.explain(user_answer, correct_answer, resolved_type)
    logger.debug(f"check {user_answer!r} against {correct_answer!r}: {result.rule.value}")

    console.print(format_verdict(result, explain))
    ctx.exit(0 if result.is_match else 1)
