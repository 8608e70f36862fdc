"""
Tests for Band Score Metrics
"""

import pytest

from ielts_answers.core.exceptions import ScoringError
from ielts_answers.evaluation.matcher import MatchResult, MatchRule, QuestionType
from ielts_answers.evaluation.grader import GradedQuestion
from ielts_answers.evaluation.metrics import (
    BAND_TABLES,
    IeltsModule,
    overall_band,
    question_type_accuracy,
    raw_to_band,
    resolve_module,
    round_band,
    rule_distribution,
    scale_raw_score,
)


def _graded(number, question_type, is_correct, rule=MatchRule.EXACT):
    return GradedQuestion(
        number=number,
        user_answer="x",
        correct_answer="x",
        question_type=question_type,
        is_correct=is_correct,
        match_result=MatchResult(
            is_match=is_correct,
            rule=rule if is_correct else MatchRule.NO_MATCH,
            normalized_answer="x"
        )
    )


class TestRawToBand:
    """Test cases for raw score conversion."""

    @pytest.mark.parametrize("raw,band", [
        (40, 9.0), (39, 9.0), (38, 8.5), (30, 7.0), (29, 6.5), (23, 6.0),
        (16, 5.0), (1, 1.0), (0, 0.0),
    ])
    def test_listening_table(self, raw, band):
        """Test listening conversion thresholds."""
        assert raw_to_band(raw, IeltsModule.LISTENING) == band

    def test_reading_tables_differ(self):
        """Test academic and general training reading use their own tables."""
        assert raw_to_band(33, IeltsModule.ACADEMIC_READING) == 7.5
        assert raw_to_band(33, IeltsModule.GENERAL_READING) == 6.5
        assert raw_to_band(39, IeltsModule.GENERAL_READING) == 8.5

    def test_module_names(self):
        """Test modules may be named by string."""
        assert raw_to_band(30, "listening") == 7.0
        assert raw_to_band(33, "reading") == 7.5
        assert raw_to_band(34, "general-reading") == 7.0

    def test_tables_descend(self):
        """Test every table lists thresholds from the highest band down."""
        for table in BAND_TABLES.values():
            minimums = [minimum for minimum, _ in table]
            bands = [band for _, band in table]
            assert minimums == sorted(minimums, reverse=True)
            assert bands == sorted(bands, reverse=True)

    def test_scaled_section(self):
        """Test short sections are scaled to 40 questions."""
        assert scale_raw_score(10, 13) == 31
        assert scale_raw_score(6, 8) == 30
        assert raw_to_band(6, IeltsModule.LISTENING, total=8) == 7.0

    @pytest.mark.parametrize("raw,total", [(-1, 40), (41, 40), (5, 0), (0, -3)])
    def test_out_of_range(self, raw, total):
        """Test impossible scores are rejected."""
        with pytest.raises(ScoringError):
            raw_to_band(raw, IeltsModule.LISTENING, total=total)

    def test_unknown_module(self):
        """Test unknown modules are rejected."""
        with pytest.raises(ScoringError) as exc_info:
            resolve_module("speaking")
        assert exc_info.value.module == "speaking"


class TestOverallBand:
    """Test cases for overall band rounding."""

    @pytest.mark.parametrize("score,expected", [
        (6.0, 6.0), (6.125, 6.0), (6.25, 6.5), (6.625, 6.5), (6.75, 7.0), (6.875, 7.0),
    ])
    def test_round_band(self, score, expected):
        """Test averages round to the nearest half band, quarters up."""
        assert round_band(score) == expected

    @pytest.mark.parametrize("bands,expected", [
        ((6.5, 6.5, 5.0, 7.0), 6.5),
        ((6.0, 6.0, 6.0, 6.5), 6.0),
        ((6.5, 6.5, 6.5, 7.0), 6.5),
        ((7.0, 7.0, 6.5, 6.5), 7.0),
        ((9.0, 9.0, 9.0, 9.0), 9.0),
    ])
    def test_overall_band(self, bands, expected):
        """Test the overall band of four module bands."""
        assert overall_band(*bands) == expected

    @pytest.mark.parametrize("bad_band", [9.5, -1.0, 6.3])
    def test_invalid_band(self, bad_band):
        """Test module bands must be 0-9 in half steps."""
        with pytest.raises(ScoringError):
            overall_band(6.0, 6.0, 6.0, bad_band)


class TestSectionStatistics:
    """Test cases for per-type accuracy and rule counts."""

    def test_question_type_accuracy(self):
        """Test accuracy is grouped by question type."""
        graded = [
            _graded(1, QuestionType.FILL_IN_BLANK, True),
            _graded(2, QuestionType.FILL_IN_BLANK, False),
            _graded(3, QuestionType.MULTIPLE_CHOICE, True),
            _graded(4, None, False),
        ]

        accuracy = question_type_accuracy(graded)

        assert accuracy == {
            "FILL_IN_BLANK": 0.5,
            "MULTIPLE_CHOICE": 1.0,
            "UNSPECIFIED": 0.0,
        }

    def test_rule_distribution(self):
        """Test only accepted answers are counted."""
        graded = [
            _graded(1, None, True, MatchRule.NUMBER),
            _graded(2, None, True, MatchRule.NUMBER),
            _graded(3, None, True, MatchRule.DATE),
            _graded(4, None, False),
        ]

        assert rule_distribution(graded) == {"number": 2, "date": 1}

    def test_empty(self):
        """Test empty input gives empty statistics."""
        assert question_type_accuracy([]) == {}
        assert rule_distribution([]) == {}
