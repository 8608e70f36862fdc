"""
Evaluation Module

IELTS answer matching, section grading and band score conversion.
"""

from .matcher import (
    IeltsAnswerMatcher,
    MatchResult,
    MatchRule,
    QuestionType,
    check_answer,
    check_ielts_answer,
    check_multiple_choice_multiple,
    explain_answer,
)
from .grader import AnswerGrader, AnswerKeyItem, GradedQuestion, SectionResult
from .metrics import IeltsModule, overall_band, raw_to_band

__all__ = [
    "IeltsAnswerMatcher",
    "MatchResult",
    "MatchRule",
    "QuestionType",
    "check_answer",
    "check_ielts_answer",
    "check_multiple_choice_multiple",
    "explain_answer",
    "AnswerGrader",
    "AnswerKeyItem",
    "GradedQuestion",
    "SectionResult",
    "IeltsModule",
    "overall_band",
    "raw_to_band",
]
