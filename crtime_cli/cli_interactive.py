"""
cli_interactive.py - Interactive Confirmation

Reads the single line of input that gates rename execution
"""

from typing import Callable

CONFIRM_TOKEN = "Y"


def strip_line_ending(line: str) -> str:
    """Remove a trailing \\n or \\r\\n"""
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


def confirm_execution(read_line: Callable[[], str] = input) -> bool:
    """
    Block for one line of input and check it confirms execution

    Only the exact text "Y" confirms. End of input and read errors
    count as a refusal.

    Args:
        read_line: Line reader (defaults to input)

    Returns:
        Whether to execute
    """
    try:
        line = read_line()
    except (EOFError, OSError, UnicodeDecodeError):
        return False
    return strip_line_ending(line) == CONFIRM_TOKEN
