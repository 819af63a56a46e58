"""
Parsers for inbound command text.
"""

import re
from typing import Optional, Tuple

from utils.constants import COMMAND_PREFIXES

# Optional sign followed by ASCII digits, nothing else
_INDEX_PATTERN = re.compile(r"[+-]?[0-9]+")


def match_command(text: str) -> Tuple[Optional[str], str]:
    """
    Match the leading command of a message.

    Commands are literal, case-sensitive prefixes checked in a fixed order
    (/start, /suggest, /pick); /showchoices only matches the whole text.

    Returns:
        Tuple of (command name, remaining text after the command token).
        The command name is None when nothing matches.
    """
    if not text:
        return None, ""

    for name in ("start", "suggest", "pick"):
        prefix = COMMAND_PREFIXES[name]
        if text.startswith(prefix):
            return name, text[len(prefix):]

    if text == COMMAND_PREFIXES["showchoices"]:
        return "showchoices", ""

    return None, ""


def parse_suggestion(argument: str) -> Optional[str]:
    """Trim a suggestion; empty or whitespace-only input gives None."""
    suggestion = argument.strip()
    return suggestion or None


def parse_choice_index(argument: str) -> Optional[int]:
    """
    Parse a 1-based choice index.

    Surrounding whitespace and a leading sign are accepted. Range checking
    is left to the caller since it depends on the current choice count.
    """
    token = argument.strip()
    if not _INDEX_PATTERN.fullmatch(token):
        return None
    try:
        return int(token)
    except ValueError:
        # Past the interpreter's int conversion digit limit
        return None
