"""
CLI Output Formatting

Rich text formatting utilities for CLI output: verdicts, section result
tables and configuration tables.
"""

from typing import Dict, List, Any, Optional
from rich.console import Console
from rich.table import Table
from rich.panel import Panel

from ..evaluation.grader import SectionResult
from ..evaluation.matcher import MatchResult

console = Console()


def format_table(data: List[Dict[str, Any]], title: str = "Results", headers: Optional[List[str]] = None) -> Table:
    """
    Format data as a Rich table.

    Args:
        data: List of dictionaries with row data
        title: Table title
        headers: Optional list of column headers (uses keys from first row if not provided)

    Returns:
        Rich Table object
    """
    if not data:
        table = Table(title=title)
        table.add_column("Message", style="dim")
        table.add_row("No data available")
        return table

    if headers is None:
        headers = list(data[0].keys())

    table = Table(title=title, show_header=True, header_style="bold blue")
    for header in headers:
        table.add_column(header, style="white", justify="left")

    for row in data:
        table.add_row(*[str(row.get(header, "N/A")) for header in headers])

    return table


def format_verdict(result: MatchResult, explain: bool = False) -> str:
    """Format a single answer verdict as Rich markup."""
    if result.is_match:
        verdict = "[bold green]✓ CORRECT[/bold green]"
    else:
        verdict = "[bold red]✗ INCORRECT[/bold red]"

    if explain:
        verdict += f"\n[dim]Rule:[/dim] {result.rule.value}"
        verdict += f"\n[dim]Normalized answer:[/dim] {result.normalized_answer!r}"
        if result.matched_alternative is not None:
            verdict += f"\n[dim]Matched alternative:[/dim] {result.matched_alternative!r}"
    return verdict


def format_section_result(result: SectionResult) -> Table:
    """Format per-question section results as a Rich table."""
    table = Table(
        title=f"{result.module.value.replace('_', ' ').title()} Results",
        show_header=True,
        header_style="bold blue"
    )
    table.add_column("#", justify="right", style="cyan")
    table.add_column("Type", style="magenta")
    table.add_column("Your Answer", style="white")
    table.add_column("Correct Answer", style="white")
    table.add_column("Result", justify="center")
    table.add_column("Rule", style="dim")

    for question in result.graded_questions:
        table.add_row(
            str(question.number),
            question.question_type.value if question.question_type else "-",
            question.user_answer or "[dim](blank)[/dim]",
            question.correct_answer,
            "[green]✓[/green]" if question.is_correct else "[red]✗[/red]",
            question.match_result.rule.value if question.is_correct else ""
        )

    return table


def format_section_summary(result: SectionResult) -> Panel:
    """Format the score and band of a graded section."""
    lines = [
        f"Raw score: [bold]{result.raw_score}/{result.total}[/bold] ({result.accuracy:.0%})",
        f"Band score: [bold cyan]{result.band_score:.1f}[/bold cyan]",
    ]
    if result.accuracy_by_type:
        lines.append("")
        for question_type, accuracy in sorted(result.accuracy_by_type.items()):
            lines.append(f"[dim]{question_type}:[/dim] {accuracy:.0%}")

    return Panel("\n".join(lines), title="Summary", border_style="blue")
