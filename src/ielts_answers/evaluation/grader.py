"""
Answer Grading System

Grades a learner's listening or reading section against its answer key,
question by question, and turns the raw score into a band score.
"""

from typing import Dict, List, Optional, Any, Union
from dataclasses import dataclass, field
from datetime import datetime

from .matcher import (
    ALTERNATIVE_DELIMITER,
    SELECTION_DELIMITER,
    IeltsAnswerMatcher,
    MatchResult,
    QuestionType,
)
from .matchers import DateOrder
from .metrics import (
    IeltsModule,
    question_type_accuracy,
    raw_to_band,
    resolve_module,
    rule_distribution,
)
from ..core.exceptions import ValidationError
from ..utils.logging import get_logger, PerformanceTimer

logger = get_logger(__name__)


@dataclass
class AnswerKeyItem:
    """One question of an answer key."""
    number: int
    answer: str
    question_type: Optional[QuestionType] = None
    text: Optional[str] = None


@dataclass
class GradedQuestion:
    """Result of grading one question."""
    number: int
    user_answer: str
    correct_answer: str
    question_type: Optional[QuestionType]
    is_correct: bool
    match_result: MatchResult


@dataclass
class SectionResult:
    """Result of grading a whole section."""
    module: IeltsModule
    graded_questions: List[GradedQuestion]
    raw_score: int
    total: int
    band_score: float
    accuracy_by_type: Dict[str, float] = field(default_factory=dict)
    rule_distribution: Dict[str, int] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def accuracy(self) -> float:
        return self.raw_score / self.total if self.total else 0.0

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the result for JSON output."""
        return {
            'module': self.module.value,
            'raw_score': self.raw_score,
            'total': self.total,
            'accuracy': self.accuracy,
            'band_score': self.band_score,
            'accuracy_by_type': self.accuracy_by_type,
            'rule_distribution': self.rule_distribution,
            'timestamp': self.timestamp.isoformat(),
            'questions': [
                {
                    'number': question.number,
                    'question_type': question.question_type.value if question.question_type else None,
                    'user_answer': question.user_answer,
                    'correct_answer': question.correct_answer,
                    'is_correct': question.is_correct,
                    'rule': question.match_result.rule.value,
                }
                for question in self.graded_questions
            ],
        }


def _join_answer(value: Any, question_type: Optional[QuestionType]) -> str:
    """Turn a list of answers into the delimited string form."""
    if isinstance(value, (list, tuple)):
        delimiter = (SELECTION_DELIMITER if question_type == QuestionType.MULTIPLE_CHOICE_MULTIPLE
                     else ALTERNATIVE_DELIMITER)
        return delimiter.join(str(part) for part in value)
    return str(value)


def _question_number(value: Any, field_name: str = 'number') -> int:
    if isinstance(value, bool):
        raise ValidationError(f"Invalid question number: {value!r}",
                              field_name=field_name, invalid_value=value)
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid question number: {value!r}",
                              field_name=field_name, invalid_value=value)


def load_answer_key(data: Union[List[Dict[str, Any]], Dict[str, Any]]) -> List[AnswerKeyItem]:
    """
    Parse an answer key.

    Accepts either a list of question objects or an object with a
    'questions' list, as produced by the test generator:
    {"number": 1, "type": "tfng", "text": "...", "answer": "TRUE"}.
    A list answer is joined with '/' (alternatives), or with ','
    for multi-select questions.

    Raises:
        ValidationError: If the key is malformed
    """
    if isinstance(data, dict):
        data = data.get('questions')
    if not isinstance(data, list):
        raise ValidationError("Answer key must be a list of questions",
                              field_name='questions', invalid_value=type(data).__name__)

    items = []
    seen = set()
    for index, raw in enumerate(data):
        if not isinstance(raw, dict):
            raise ValidationError(f"Question {index + 1} must be an object",
                                  field_name='questions', invalid_value=raw)
        if 'number' not in raw:
            raise ValidationError(f"Question {index + 1} has no number", field_name='number')

        number = _question_number(raw['number'])
        if number in seen:
            raise ValidationError(f"Duplicate question number: {number}",
                                  field_name='number', invalid_value=number)
        seen.add(number)

        tag = raw.get('question_type', raw.get('type'))
        question_type = QuestionType.from_tag(tag)
        if tag and question_type is None:
            logger.warning(f"Unknown question type {tag!r} for question {number}; using single-answer rules")

        answer = raw.get('answer')
        if answer is None or not _join_answer(answer, question_type).strip():
            raise ValidationError(f"Question {number} has no answer",
                                  field_name='answer', invalid_value=answer)

        items.append(AnswerKeyItem(
            number=number,
            answer=_join_answer(answer, question_type),
            question_type=question_type,
            text=raw.get('text')
        ))

    return sorted(items, key=lambda item: item.number)


def load_user_answers(data: Dict[Any, Any]) -> Dict[int, str]:
    """
    Parse a learner's answer sheet mapping question numbers to answers.

    Keys may be integers or numeric strings; list values (ticked options
    of a multi-select question) are joined with ','.
    """
    if not isinstance(data, dict):
        raise ValidationError("Answers must map question numbers to answers",
                              field_name='answers', invalid_value=type(data).__name__)

    answers = {}
    for key, value in data.items():
        number = _question_number(key, field_name='answers')
        if value is None:
            answers[number] = ""
        elif isinstance(value, (list, tuple)):
            answers[number] = SELECTION_DELIMITER.join(str(part) for part in value)
        else:
            answers[number] = str(value)
    return answers


class AnswerGrader:
    """Grades IELTS listening and reading sections."""

    def __init__(self, matcher: Optional[IeltsAnswerMatcher] = None, config=None):
        """
        Initialize the answer grader.

        Args:
            matcher: Answer matcher (built from config if None)
            config: Optional application configuration
        """
        self.config = config
        if matcher is None:
            date_order = config.grading.date_order if config else DateOrder.DAY_FIRST
            matcher = IeltsAnswerMatcher(date_order=date_order)
        self.matcher = matcher

    def grade_question(self, item: AnswerKeyItem, user_answer: Optional[str]) -> GradedQuestion:
        """Grade a single question."""
        user_answer = user_answer or ""
        match_result = self.matcher.explain(user_answer, item.answer, item.question_type)
        logger.debug(f"Question {item.number}: {match_result.rule.value}",
                     extra={'question_number': item.number})

        return GradedQuestion(
            number=item.number,
            user_answer=user_answer,
            correct_answer=item.answer,
            question_type=item.question_type,
            is_correct=match_result.is_match,
            match_result=match_result
        )

    def grade_section(self,
                      answer_key: Union[List[AnswerKeyItem], List[Dict[str, Any]], Dict[str, Any]],
                      user_answers: Dict[Any, Any],
                      module: Optional[Union[str, IeltsModule]] = None) -> SectionResult:
        """
        Grade a whole section.

        Args:
            answer_key: Parsed answer key, or raw data for load_answer_key
            user_answers: Question number to learner answer; missing answers are wrong
            module: Module used for the band conversion (config default if None)

        Returns:
            SectionResult with per-question results and the band score
        """
        if module is None:
            module = self.config.scoring.default_module if self.config else IeltsModule.LISTENING
        ielts_module = resolve_module(module)

        if not (isinstance(answer_key, list) and all(isinstance(item, AnswerKeyItem) for item in answer_key)):
            answer_key = load_answer_key(answer_key)
        if not answer_key:
            raise ValidationError("Answer key has no questions", field_name='questions')

        answers = load_user_answers(user_answers)
        unknown = sorted(set(answers) - {item.number for item in answer_key})
        if unknown:
            logger.warning(f"Ignoring answers for questions not in the key: {unknown}")

        with PerformanceTimer(f"grading {len(answer_key)} {ielts_module.value} questions", logger):
            graded = [self.grade_question(item, answers.get(item.number)) for item in answer_key]

        raw_score = sum(1 for question in graded if question.is_correct)
        band = raw_to_band(raw_score, ielts_module, total=len(graded))

        logger.info(f"Section graded: {raw_score}/{len(graded)} correct, band {band}",
                    extra={'section_module': ielts_module.value})

        return SectionResult(
            module=ielts_module,
            graded_questions=graded,
            raw_score=raw_score,
            total=len(graded),
            band_score=band,
            accuracy_by_type=question_type_accuracy(graded),
            rule_distribution=rule_distribution(graded)
        )
