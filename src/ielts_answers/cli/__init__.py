"""
CLI Module

Output formatting utilities for the command-line interface.
"""

from .formatting import format_table, format_verdict, format_section_result, format_section_summary

__all__ = [
    "format_table",
    "format_verdict",
    "format_section_result",
    "format_section_summary",
]
