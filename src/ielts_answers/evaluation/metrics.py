"""
Band Score Metrics

Converts raw listening and reading scores into IELTS band scores, combines
module bands into an overall band, and summarises graded sections.
"""

import math
from collections import defaultdict
from enum import Enum
from typing import Dict, List, Sequence, Tuple

from ..core.exceptions import ScoringError
from ..utils.logging import get_logger

logger = get_logger(__name__)

QUESTIONS_PER_TEST = 40


class IeltsModule(str, Enum):
    """Automatically scored IELTS modules."""
    LISTENING = "listening"
    ACADEMIC_READING = "academic_reading"
    GENERAL_READING = "general_reading"


# (minimum raw score out of 40, band), highest band first
BAND_TABLES: Dict[IeltsModule, Tuple[Tuple[int, float], ...]] = {
    IeltsModule.LISTENING: (
        (39, 9.0), (37, 8.5), (35, 8.0), (32, 7.5), (30, 7.0), (26, 6.5),
        (23, 6.0), (18, 5.5), (16, 5.0), (13, 4.5), (10, 4.0), (8, 3.5),
        (6, 3.0), (4, 2.5), (2, 2.0), (1, 1.0),
    ),
    IeltsModule.ACADEMIC_READING: (
        (39, 9.0), (37, 8.5), (35, 8.0), (33, 7.5), (30, 7.0), (27, 6.5),
        (23, 6.0), (19, 5.5), (15, 5.0), (13, 4.5), (10, 4.0), (8, 3.5),
        (6, 3.0), (4, 2.5), (2, 2.0), (1, 1.0),
    ),
    IeltsModule.GENERAL_READING: (
        (40, 9.0), (39, 8.5), (37, 8.0), (36, 7.5), (34, 7.0), (32, 6.5),
        (30, 6.0), (27, 5.5), (23, 5.0), (19, 4.5), (15, 4.0), (12, 3.5),
        (9, 3.0), (6, 2.5), (3, 2.0), (1, 1.0),
    ),
}


def resolve_module(module) -> IeltsModule:
    """Resolve a module name such as 'listening' or 'academic-reading'."""
    if isinstance(module, IeltsModule):
        return module

    key = str(module).strip().lower().replace('-', '_').replace(' ', '_')
    if key == 'reading':
        key = IeltsModule.ACADEMIC_READING.value
    try:
        return IeltsModule(key)
    except ValueError:
        raise ScoringError(f"Unknown IELTS module: {module}", module=str(module))


def scale_raw_score(raw: int, total: int) -> int:
    """Scale a raw score to the 40-question scale, rounding half up."""
    if total == QUESTIONS_PER_TEST:
        return raw
    return int(math.floor(raw * QUESTIONS_PER_TEST / total + 0.5))


def raw_to_band(raw: int, module=IeltsModule.LISTENING, total: int = QUESTIONS_PER_TEST) -> float:
    """
    Convert a raw score into a band score.

    Sections with fewer (or more) than 40 questions are scaled to 40 first,
    so a 13-question reading practice passage can still be banded.

    Args:
        raw: Number of correct answers
        module: Listening, academic reading or general training reading
        total: Number of questions in the section

    Returns:
        Band score between 0.0 and 9.0

    Raises:
        ScoringError: If the scores are out of range or the module is unknown
    """
    ielts_module = resolve_module(module)

    if total <= 0:
        raise ScoringError(f"Total questions must be positive, got {total}",
                           module=ielts_module.value)
    if raw < 0 or raw > total:
        raise ScoringError(f"Raw score {raw} is outside 0-{total}",
                           module=ielts_module.value)

    scaled = scale_raw_score(raw, total)
    if total != QUESTIONS_PER_TEST:
        logger.debug(f"Scaled raw score {raw}/{total} to {scaled}/{QUESTIONS_PER_TEST}")

    for minimum, band in BAND_TABLES[ielts_module]:
        if scaled >= minimum:
            return band
    return 0.0


def round_band(score: float) -> float:
    """
    Round an averaged score to the nearest half band.

    IELTS rounds a quarter up: 6.25 becomes 6.5 and 6.75 becomes 7.0,
    while 6.125 becomes 6.0.
    """
    whole = math.floor(score)
    fraction = score - whole
    if fraction < 0.25:
        return float(whole)
    if fraction < 0.75:
        return whole + 0.5
    return float(whole + 1)


def _validate_band(name: str, band: float) -> float:
    band = float(band)
    if not 0.0 <= band <= 9.0 or (band * 2) != int(band * 2):
        raise ScoringError(f"{name} band must be 0-9 in half-band steps, got {band}",
                           module=name)
    return band


def overall_band(listening: float, reading: float, writing: float, speaking: float) -> float:
    """Combine the four module bands into the overall band score."""
    bands = [
        _validate_band('listening', listening),
        _validate_band('reading', reading),
        _validate_band('writing', writing),
        _validate_band('speaking', speaking),
    ]
    return round_band(sum(bands) / len(bands))


def question_type_accuracy(graded: Sequence) -> Dict[str, float]:
    """
    Accuracy per question type for a list of graded questions.

    Questions without a type are reported under 'UNSPECIFIED'.
    """
    totals: Dict[str, List[int]] = defaultdict(lambda: [0, 0])
    for question in graded:
        key = question.question_type.value if question.question_type else 'UNSPECIFIED'
        totals[key][1] += 1
        if question.is_correct:
            totals[key][0] += 1

    return {key: correct / count for key, (correct, count) in totals.items()}


def rule_distribution(graded: Sequence) -> Dict[str, int]:
    """Count how many accepted answers each matching rule accounted for."""
    distribution: Dict[str, int] = defaultdict(int)
    for question in graded:
        if question.is_correct:
            distribution[question.match_result.rule.value] += 1
    return dict(distribution)
