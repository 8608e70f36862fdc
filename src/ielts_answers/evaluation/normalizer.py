"""
Text Normalization

Lowercasing, whitespace collapsing and quote unification shared by every
answer matcher.
"""

import re
from typing import Optional

_WHITESPACE = re.compile(r'\s+')
_SINGLE_QUOTES = re.compile(r'[‘’‚‛′]')
_DOUBLE_QUOTES = re.compile(r'[“”„‟″]')


def normalize(text: Optional[str]) -> str:
    """
    Normalize text for comparison.

    Lowercases, trims, collapses runs of whitespace to a single space and
    replaces typographic quotes and apostrophes with their ASCII forms.

    Args:
        text: Raw text (None is treated as empty)

    Returns:
        Normalized text
    """
    if not text:
        return ""

    text = _WHITESPACE.sub(' ', text.lower().strip())
    text = _SINGLE_QUOTES.sub("'", text)
    return _DOUBLE_QUOTES.sub('"', text)


def strip_spaces(text: Optional[str]) -> str:
    """Remove all whitespace, e.g. so that '20 20' compares equal to '2020'."""
    if not text:
        return ""
    return _WHITESPACE.sub('', text)
