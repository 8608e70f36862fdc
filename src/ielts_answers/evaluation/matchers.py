"""
Category Matchers

Format-aware predicates for the answer categories IELTS graders are lenient
about: times, numbers, measurements, currency amounts, dictated phone numbers
and dates. Each matcher takes a user answer and one correct answer and returns
True only when it recognises both as the same value. Matchers never raise;
input they cannot interpret is simply not a match.
"""

import calendar
import re
from enum import Enum
from typing import NamedTuple, Optional

from .normalizer import normalize, strip_spaces
from .tables import (
    EquivalenceCategory,
    NUMBER_WORDS,
    are_equivalent,
    day_number,
    month_number,
)

_NUMBER = r'([\d,.]*\d[\d,.]*)'

_OCLOCK = re.compile(r"o'?clock")
_TIME_PUNCTUATION = re.compile(r'[.:]')

_MEASUREMENT = re.compile(r'^' + _NUMBER + r'\s*(\w+)$')
_CURRENCY = re.compile(r'^([£$€¥]?)\s*' + _NUMBER + r'\s*([a-z]*)$')

_DOUBLE_DIGIT = re.compile(r'double\s*(\d)', re.IGNORECASE)
_TRIPLE_DIGIT = re.compile(r'triple\s*(\d)', re.IGNORECASE)
_DICTATED_ZERO = re.compile(r'(double|triple)\s*oh?(?![a-z])', re.IGNORECASE)

_DAY = r'(\d{1,2}(?:st|nd|rd|th)?|[a-z]+(?:-[a-z]+)?)'
_YEAR = r'(?:,?\s+(\d{4}))?'
_MONTH_NAME_DAY = re.compile(r'^([a-z]+)\.?\s+' + _DAY + _YEAR + r'$')
_DAY_MONTH_NAME = re.compile(r'^' + _DAY + r'\s+(?:of\s+)?([a-z]+)\.?' + _YEAR + r'$')
_NUMERIC_DAY_MONTH = re.compile(r'^(\d{1,2})[/\-](\d{1,2})$')
_NUMERIC_YEAR_MONTH_DAY = re.compile(r'^(\d{4})[/\-](\d{1,2})[/\-](\d{1,2})$')


class DateOrder(str, Enum):
    """How to read ambiguous numeric dates such as '03/05'."""
    DAY_FIRST = "day_first"
    MONTH_FIRST = "month_first"


class DateValue(NamedTuple):
    """Day, month and optional year extracted from a date answer."""
    day: int
    month: int
    year: Optional[int] = None


def _compact_time(text: str) -> str:
    # Dropping periods also turns 'a.m.'/'p.m.' into 'am'/'pm'.
    text = strip_spaces(normalize(text))
    text = _OCLOCK.sub('', text)
    return _TIME_PUNCTUATION.sub('', text)


def match_time(user_answer: str, correct_answer: str) -> bool:
    """
    Match times that differ only in spacing, punctuation or AM/PM style.

    '9am', '9 a.m.' and '9 AM' are all the same answer. Digits are compared
    literally, so '9:00am' and '9am' are different answers.
    """
    user = _compact_time(user_answer)
    return bool(user) and user == _compact_time(correct_answer)


def _compact_number(text: str) -> str:
    return strip_spaces(text.lower().replace(',', ''))


# Table spellings are compacted like the answers so 'one hundred' meets '100'.
_NUMBER_SPELLINGS = tuple(
    frozenset(_compact_number(spelling) for spelling in spellings)
    for spellings in NUMBER_WORDS.values()
)


def match_number(user_answer: str, correct_answer: str) -> bool:
    """Match numbers written with or without commas, or as a number word."""
    user = _compact_number(normalize(user_answer))
    correct = _compact_number(normalize(correct_answer))

    if not user or not correct:
        return False
    if user == correct:
        return True

    return any(user in spellings and correct in spellings for spellings in _NUMBER_SPELLINGS)


def match_measurement(user_answer: str, correct_answer: str) -> bool:
    """Match '<number> <unit>' answers whose units are spellings of the same unit."""
    user_match = _MEASUREMENT.match(normalize(user_answer))
    correct_match = _MEASUREMENT.match(normalize(correct_answer))

    if not user_match or not correct_match:
        return False

    user_amount, user_unit = user_match.groups()
    correct_amount, correct_unit = correct_match.groups()

    if user_amount.replace(',', '') != correct_amount.replace(',', ''):
        return False

    return are_equivalent(EquivalenceCategory.MEASUREMENT_UNIT, user_unit, correct_unit)


def _currency_tokens(symbol: str, word: str) -> tuple:
    return tuple(token for token in (symbol, word) if token)


def match_currency(user_answer: str, correct_answer: str) -> bool:
    """Match amounts such as '$50', '50 dollars' and '50 USD'."""
    user_match = _CURRENCY.match(normalize(user_answer))
    correct_match = _CURRENCY.match(normalize(correct_answer))

    if not user_match or not correct_match:
        return False

    user_symbol, user_amount, user_word = user_match.groups()
    correct_symbol, correct_amount, correct_word = correct_match.groups()

    if user_amount.replace(',', '') != correct_amount.replace(',', ''):
        return False

    return any(
        are_equivalent(EquivalenceCategory.CURRENCY, user_token, correct_token)
        for user_token in _currency_tokens(user_symbol, user_word)
        for correct_token in _currency_tokens(correct_symbol, correct_word)
    )


def _compact_phone(text: str) -> str:
    text = strip_spaces(normalize(text))
    # 'double o' and 'double oh' repeat a zero.
    text = _DICTATED_ZERO.sub(r'\g<1>0', text)
    # Expand before mapping 'o' to '0', which would otherwise break 'double'.
    text = _DOUBLE_DIGIT.sub(r'\1\1', text)
    text = _TRIPLE_DIGIT.sub(r'\1\1\1', text)
    return text.replace('o', '0')


def match_phone_number(user_answer: str, correct_answer: str) -> bool:
    """
    Match dictated phone numbers.

    Handles the letter 'o' said for zero, and 'double 5' / 'triple 5'
    for repeated digits. Spacing is ignored.
    """
    user = _compact_phone(user_answer)
    correct = _compact_phone(correct_answer)
    return bool(user) and user == correct


def _build_date(day: Optional[int], month: Optional[int],
                year: Optional[int] = None) -> Optional[DateValue]:
    if day is None or month is None:
        return None
    if not 1 <= month <= 12:
        return None
    # Without a year, 29 February is allowed.
    if not 1 <= day <= calendar.monthrange(year or 2000, month)[1]:
        return None
    return DateValue(day=day, month=month, year=year)


def _year(token: Optional[str]) -> Optional[int]:
    return int(token) if token else None


def parse_date(text: str, date_order: DateOrder = DateOrder.DAY_FIRST) -> Optional[DateValue]:
    """
    Extract a date from an answer.

    Recognised forms are month name + day ('March 5th', 'mar 5, 2024'),
    day + month name ('5th March', 'fifth of March'), numeric day/month
    ('5/3', '05-03') and numeric year-month-day ('2024-03-05').

    Args:
        text: Answer text
        date_order: Reading of numeric day/month dates

    Returns:
        DateValue, or None when the text is not a recognisable date
    """
    text = normalize(text)
    if not text:
        return None

    match = _NUMERIC_YEAR_MONTH_DAY.match(text)
    if match:
        year, month, day = match.groups()
        return _build_date(int(day), int(month), int(year))

    match = _NUMERIC_DAY_MONTH.match(text)
    if match:
        first, second = (int(part) for part in match.groups())
        if date_order == DateOrder.MONTH_FIRST:
            return _build_date(second, first)
        return _build_date(first, second)

    match = _MONTH_NAME_DAY.match(text)
    if match:
        month, day, year = match.groups()
        parsed = _build_date(day_number(day), _month_name_number(month), _year(year))
        if parsed:
            return parsed

    match = _DAY_MONTH_NAME.match(text)
    if match:
        day, month, year = match.groups()
        return _build_date(day_number(day), _month_name_number(month), _year(year))

    return None


def _month_name_number(token: str) -> Optional[int]:
    # Only words count as month names; numeric months need a numeric date form.
    if not token.isalpha():
        return None
    return month_number(token)


def match_date(user_answer: str, correct_answer: str,
               date_order: DateOrder = DateOrder.DAY_FIRST) -> bool:
    """Match answers that denote the same day, month and year."""
    user_date = parse_date(user_answer, date_order)
    if user_date is None:
        return False
    return user_date == parse_date(correct_answer, date_order)
