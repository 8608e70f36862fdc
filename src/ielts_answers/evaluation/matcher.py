"""
Answer Matching System

Decides whether a learner's free-text answer should be accepted given the
canonical answer for an IELTS question, tolerating the surface variations
IELTS graders accept. Single-answer questions may list alternatives separated
by '/'; multi-select questions list the required options separated by ','.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Tuple

from .matchers import (
    DateOrder,
    match_currency,
    match_date,
    match_measurement,
    match_number,
    match_phone_number,
    match_time,
)
from .normalizer import normalize, strip_spaces
from ..core.exceptions import ConfigurationError
from ..utils.logging import get_logger

logger = get_logger(__name__)

ALTERNATIVE_DELIMITER = '/'
SELECTION_DELIMITER = ','

_LEADING_THE = re.compile(r'^the\s+')
_TRAILING_THE = re.compile(r'\s+the$')
_LEADING_ARTICLE = re.compile(r'^(a|an)\s+')


class QuestionType(str, Enum):
    """IELTS question types."""
    MULTIPLE_CHOICE = "MULTIPLE_CHOICE"
    MULTIPLE_CHOICE_MULTIPLE = "MULTIPLE_CHOICE_MULTIPLE"
    TRUE_FALSE_NOT_GIVEN = "TRUE_FALSE_NOT_GIVEN"
    YES_NO_NOT_GIVEN = "YES_NO_NOT_GIVEN"
    MATCHING = "MATCHING"
    MATCHING_HEADINGS = "MATCHING_HEADINGS"
    FILL_IN_BLANK = "FILL_IN_BLANK"
    SHORT_ANSWER = "SHORT_ANSWER"
    TABLE_COMPLETION = "TABLE_COMPLETION"
    FLOWCHART_COMPLETION = "FLOWCHART_COMPLETION"

    @classmethod
    def from_tag(cls, tag: Optional[str]) -> Optional["QuestionType"]:
        """Resolve a question-type tag, including the short tags used in generated tests."""
        if not tag:
            return None

        key = tag.strip().upper().replace('-', '_').replace(' ', '_')
        if key in cls.__members__:
            return cls[key]
        return _QUESTION_TYPE_ALIASES.get(key)


_QUESTION_TYPE_ALIASES = {
    'MCQ': QuestionType.MULTIPLE_CHOICE,
    'MULTI_SELECT': QuestionType.MULTIPLE_CHOICE_MULTIPLE,
    'MULTIPLE_SELECT': QuestionType.MULTIPLE_CHOICE_MULTIPLE,
    'TFNG': QuestionType.TRUE_FALSE_NOT_GIVEN,
    'YNNG': QuestionType.YES_NO_NOT_GIVEN,
    'HEADINGS': QuestionType.MATCHING_HEADINGS,
    'FILL_IN_THE_BLANK': QuestionType.FILL_IN_BLANK,
    'GAP_FILL': QuestionType.FILL_IN_BLANK,
    'SENTENCE_COMPLETION': QuestionType.FILL_IN_BLANK,
    'NOTE_COMPLETION': QuestionType.FILL_IN_BLANK,
    'FORM_COMPLETION': QuestionType.FILL_IN_BLANK,
    'TABLE': QuestionType.TABLE_COMPLETION,
    'FLOWCHART': QuestionType.FLOWCHART_COMPLETION,
}


class MatchRule(str, Enum):
    """Rule that accepted an answer."""
    EXACT = "exact"
    IGNORE_SPACES = "ignore_spaces"
    TIME = "time"
    NUMBER = "number"
    MEASUREMENT = "measurement"
    CURRENCY = "currency"
    PHONE_NUMBER = "phone_number"
    DATE = "date"
    ARTICLE_THE = "article_the"
    ARTICLE_A = "article_a"
    PLURAL = "plural"
    HYPHENATION = "hyphenation"
    MULTIPLE_SELECTION = "multiple_selection"
    NO_MATCH = "no_match"


@dataclass
class MatchResult:
    """Result of answer matching."""
    is_match: bool
    rule: MatchRule
    normalized_answer: str
    matched_alternative: Optional[str] = None


def _without_the(text: str) -> str:
    return _TRAILING_THE.sub('', _LEADING_THE.sub('', text))


def _without_article(text: str) -> str:
    return _LEADING_ARTICLE.sub('', text)


def _is_plural_of(user: str, correct: str) -> bool:
    return any(
        user + suffix == correct or user == correct + suffix
        for suffix in ('s', 'es')
    )


def _hyphenation_matches(user: str, correct: str) -> bool:
    if user.replace('-', ' ') == correct.replace('-', ' '):
        return True
    return user.replace(' ', '-') == correct


class IeltsAnswerMatcher:
    """Applies IELTS answer-equivalence rules to learner answers."""

    def __init__(self, date_order: DateOrder = DateOrder.DAY_FIRST):
        """
        Initialize the matcher.

        Args:
            date_order: How ambiguous numeric dates such as '03/05' are read

        Raises:
            ConfigurationError: If the date order is not recognised
        """
        try:
            self.date_order = DateOrder(date_order)
        except ValueError:
            raise ConfigurationError(f"Unknown date order: {date_order!r}",
                                     {'valid': [order.value for order in DateOrder]})

        # Tried in order for every alternative; the first rule to accept wins.
        self.rules: List[Tuple[MatchRule, Callable[[str, str], bool]]] = [
            (MatchRule.EXACT, lambda user, correct: user == correct),
            (MatchRule.IGNORE_SPACES,
             lambda user, correct: strip_spaces(user) == strip_spaces(correct)),
            (MatchRule.TIME, match_time),
            (MatchRule.NUMBER, match_number),
            (MatchRule.MEASUREMENT, match_measurement),
            (MatchRule.CURRENCY, match_currency),
            (MatchRule.PHONE_NUMBER, match_phone_number),
            (MatchRule.DATE, self._match_date),
            (MatchRule.ARTICLE_THE,
             lambda user, correct: _without_the(user) == _without_the(correct)),
            (MatchRule.ARTICLE_A,
             lambda user, correct: _without_article(user) == _without_article(correct)),
            (MatchRule.PLURAL, _is_plural_of),
            (MatchRule.HYPHENATION, _hyphenation_matches),
        ]

    def _match_date(self, user: str, correct: str) -> bool:
        return match_date(user, correct, self.date_order)

    @staticmethod
    def split_alternatives(correct_answers: Optional[str]) -> List[str]:
        """Split a canonical answer into its normalized, non-empty alternatives."""
        if not correct_answers:
            return []

        alternatives = (normalize(part) for part in correct_answers.split(ALTERNATIVE_DELIMITER))
        return [alternative for alternative in alternatives if alternative]

    @staticmethod
    def split_selection(answer: Optional[str]) -> set:
        """Split a multi-select answer into a set of normalized options."""
        if not answer:
            return set()

        options = (normalize(option) for option in answer.split(SELECTION_DELIMITER))
        return {option for option in options if option}

    def match_answer(self, user_answer: Optional[str], correct_answers: Optional[str]) -> MatchResult:
        """
        Match a single-answer response against its canonical answer.

        Args:
            user_answer: What the learner typed
            correct_answers: Canonical answer, alternatives separated by '/'

        Returns:
            MatchResult naming the rule that accepted the answer
        """
        user = normalize(user_answer)
        alternatives = self.split_alternatives(correct_answers)

        if not user or not alternatives:
            return MatchResult(is_match=False, rule=MatchRule.NO_MATCH, normalized_answer=user)

        for correct in alternatives:
            for rule, predicate in self.rules:
                if predicate(user, correct):
                    logger.debug(f"Accepted {user!r} for {correct!r} by {rule.value} rule")
                    return MatchResult(
                        is_match=True,
                        rule=rule,
                        normalized_answer=user,
                        matched_alternative=correct
                    )

        return MatchResult(is_match=False, rule=MatchRule.NO_MATCH, normalized_answer=user)

    def match_selection(self, user_answer: Optional[str], correct_answer: Optional[str]) -> MatchResult:
        """
        Match a multi-select response, ignoring order and repeated options.

        Args:
            user_answer: Comma-separated options chosen by the learner
            correct_answer: Comma-separated options that must all be chosen

        Returns:
            MatchResult with the MULTIPLE_SELECTION rule when the sets agree
        """
        user_options = self.split_selection(user_answer)
        correct_options = self.split_selection(correct_answer)
        normalized = SELECTION_DELIMITER.join(sorted(user_options))

        is_match = (
            bool(user_options)
            and len(user_options) == len(correct_options)
            and user_options <= correct_options
            and correct_options <= user_options
        )
        if not is_match:
            return MatchResult(is_match=False, rule=MatchRule.NO_MATCH, normalized_answer=normalized)

        return MatchResult(
            is_match=True,
            rule=MatchRule.MULTIPLE_SELECTION,
            normalized_answer=normalized,
            matched_alternative=SELECTION_DELIMITER.join(sorted(correct_options))
        )

    def explain(self, user_answer: Optional[str], correct_answer: Optional[str],
                question_type: Optional[str] = None) -> MatchResult:
        """Match an answer using the strategy for its question type."""
        if question_type == QuestionType.MULTIPLE_CHOICE_MULTIPLE:
            return self.match_selection(user_answer, correct_answer)
        return self.match_answer(user_answer, correct_answer)

    def check(self, user_answer: Optional[str], correct_answer: Optional[str],
              question_type: Optional[str] = None) -> bool:
        """Return True if the answer should be accepted."""
        return self.explain(user_answer, correct_answer, question_type).is_match


_default_matcher = IeltsAnswerMatcher()


def check_ielts_answer(user_answer: Optional[str], correct_answers: Optional[str]) -> bool:
    """Check a single-answer response; '/' separates acceptable alternatives."""
    return _default_matcher.match_answer(user_answer, correct_answers).is_match


def check_multiple_choice_multiple(user_answer: Optional[str], correct_answer: Optional[str]) -> bool:
    """Check a multi-select response; ',' separates the required options."""
    return _default_matcher.match_selection(user_answer, correct_answer).is_match


def check_answer(user_answer: Optional[str], correct_answer: Optional[str],
                 question_type: Optional[str] = None) -> bool:
    """
    Check an answer, choosing the strategy from the question type.

    MULTIPLE_CHOICE_MULTIPLE questions are compared as sets of options;
    every other question type uses the single-answer equivalence rules.
    """
    return _default_matcher.check(user_answer, correct_answer, question_type)


def explain_answer(user_answer: Optional[str], correct_answer: Optional[str],
                   question_type: Optional[str] = None) -> MatchResult:
    """Like check_answer, but report which rule accepted the answer."""
    return _default_matcher.explain(user_answer, correct_answer, question_type)
