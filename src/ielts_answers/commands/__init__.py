"""
Commands Module

Command-line interface commands for ielts-answers.
"""

from .check import check
from .grade import grade
from .band import band, overall
from .config import show as config_show, validate as config_validate

__all__ = ['check', 'grade', 'band', 'overall', 'config_show', 'config_validate']
