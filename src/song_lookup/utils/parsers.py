"""
Command parsing utilities for the interactive shell.
"""

import shlex
from typing import List, Tuple


def parse_command(user_input: str) -> Tuple[str, List[str]]:
    """
    Parse user input into command and arguments.

    Arguments are split shell-style, so a quoted path containing spaces
    stays one argument. Input with an unbalanced quote falls back to a
    plain whitespace split. Song IDs are case-sensitive, so only the
    command word is lowercased.

    Args:
        user_input: Raw user input string

    Returns:
        Tuple of (command, args) where command is lowercase and args is a list

    Example:
        'load "My Songs.csv" --no-header' -> ('load', ['My Songs.csv', '--no-header'])
    """
    try:
        parts = shlex.split(user_input)
    except ValueError:
        parts = user_input.split()
    if not parts:
        return "", []

    command = parts[0].lower()
    args = parts[1:]
    return command, args
