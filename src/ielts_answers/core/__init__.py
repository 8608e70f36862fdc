"""
Core Module

Foundational components used across the application: configuration
management and custom exceptions.
"""

from .config import get_config, AppConfig
from .exceptions import (
    IeltsAnswersException,
    ConfigurationError,
    ValidationError,
    ScoringError,
)

__all__ = [
    "get_config",
    "AppConfig",
    "IeltsAnswersException",
    "ConfigurationError",
    "ValidationError",
    "ScoringError",
]
