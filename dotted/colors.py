#!/usr/bin/env python3
"""ANSI colour helpers for terminal output."""

from enum import Enum

RESET = "\033[0m"


class Color(Enum):
    """Supported colours. NONE leaves text untouched."""

    NONE = ""
    RED = "31"
    GREEN = "32"


def colorize(
    text: str, color: Color = Color.NONE, bold: bool = False, enabled: bool = True
) -> str:
    """
    Wrap text in ANSI escape codes.

    Args:
        text: Text to wrap
        color: Colour to use
        bold: Use the bold variant
        enabled: If False, return text unchanged

    Returns:
        Wrapped text, e.g. "\\033[32;1mRunning ...\\033[0m"
    """
    if not enabled or color is Color.NONE:
        return text
    code = f"{color.value};1" if bold else color.value
    return f"\033[{code}m{text}{RESET}"
