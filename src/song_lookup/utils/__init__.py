"""
Cross-cutting utilities for Song Lookup.

Contains:
- parsers: Shell command parsing
"""

from .parsers import parse_command

__all__ = [
    "parse_command",
]
