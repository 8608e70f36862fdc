"""
Custom Exception Classes

Application-specific exception classes for configuration, answer-key
validation and band scoring. Answer matching itself never raises.
"""

from typing import Optional, Any, Dict


class IeltsAnswersException(Exception):
    """Base exception class for all ielts-answers errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


class ConfigurationError(IeltsAnswersException):
    """Raised when there's an issue with configuration setup or validation."""
    pass


class ValidationError(IeltsAnswersException):
    """Raised when an answer key or answer sheet is malformed."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 invalid_value: Optional[Any] = None, **kwargs):
        super().__init__(message, kwargs)
        self.field_name = field_name
        self.invalid_value = invalid_value


class ScoringError(IeltsAnswersException):
    """Raised when a raw score or band cannot be converted."""

    def __init__(self, message: str, module: Optional[str] = None, **kwargs):
        super().__init__(message, kwargs)
        self.module = module
