"""
Message formatting utilities for Telegram output.
"""

from typing import List

from utils.constants import MESSAGES, PICK_BUTTON_TEMPLATE


def format_suggestion_added(suggestion: str) -> str:
    return MESSAGES["suggestion_added"].format(suggestion=suggestion)


def format_picked(choice: str) -> str:
    return MESSAGES["picked"].format(choice=choice)


def format_choice_list(choices: List[str]) -> str:
    """Format choices as a numbered, newline-terminated list under a header."""
    lines = [MESSAGES["choices_header"]]
    for index, choice in enumerate(choices, start=1):
        lines.append(MESSAGES["choice_line"].format(index=index, choice=choice))
    return "".join(lines)


def build_pick_keyboard(choices: List[str]) -> List[List[str]]:
    """One ready-to-send /pick button per choice, all on a single row."""
    return [[PICK_BUTTON_TEMPLATE.format(index=index) for index in range(1, len(choices) + 1)]]
