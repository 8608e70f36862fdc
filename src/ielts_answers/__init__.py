"""
IELTS Answer Checker

Decides whether free-text IELTS listening and reading answers should be
accepted, tolerating the number, date, time, currency, unit and spelling
variations IELTS graders accept, and turns section scores into band scores.
"""

__version__ = "1.0.0"

from .core.exceptions import IeltsAnswersException
from .evaluation.matcher import (
    check_answer,
    check_ielts_answer,
    check_multiple_choice_multiple,
    explain_answer,
)

__all__ = [
    "IeltsAnswersException",
    "check_answer",
    "check_ielts_answer",
    "check_multiple_choice_multiple",
    "explain_answer",
]
