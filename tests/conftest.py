"""
Pytest Configuration

Global test configuration, fixtures, and utilities for the
IELTS answer checker test suite.
"""

import pytest
import tempfile
from pathlib import Path

# Add src to Python path for imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from ielts_answers.core import config as config_module
from ielts_answers.core.config import AppConfig, LoggingConfig


@pytest.fixture
def temp_dir():
    """Provide a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir)


@pytest.fixture
def test_config(temp_dir):
    """Provide test configuration."""
    return AppConfig(
        name="Test IELTS Answer Checker",
        version="test",
        debug=True,
        logging=LoggingConfig(
            level="DEBUG",
            file=str(temp_dir / "test.log")
        )
    )


@pytest.fixture(autouse=True)
def reset_global_config():
    """Make sure no test sees configuration cached by another."""
    config_module.set_config(None)
    yield
    config_module.set_config(None)


@pytest.fixture
def listening_answer_key():
    """Answer key in the shape produced by the test generator."""
    return {
        "title": "Booking a holiday cottage",
        "questions": [
            {"number": 1, "type": "fill_in_blank", "text": "Surname", "answer": "Harrington"},
            {"number": 2, "type": "fill_in_blank", "text": "Phone", "answer": "0161 555 2090"},
            {"number": 3, "type": "fill_in_blank", "text": "Arrival date", "answer": "5th March"},
            {"number": 4, "type": "fill_in_blank", "text": "Cost per night", "answer": "£85"},
            {"number": 5, "type": "fill_in_blank", "text": "Distance to beach", "answer": "2 km"},
            {"number": 6, "type": "multiple_choice", "text": "Heating", "answer": "B"},
            {"number": 7, "type": "MULTIPLE_CHOICE_MULTIPLE", "text": "Two facilities", "answer": "A,D"},
            {"number": 8, "type": "fill_in_blank", "text": "Check-in time", "answer": "3 pm/15:00"},
        ],
    }
