"""
MessageResponse dataclass: carries text + an optional reply keyboard
from the command engine to the Telegram layer without importing telegram.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class MessageResponse:
    text: str
    keyboard: Optional[list[list[str]]] = None  # [["/pick 1", "/pick 2"], ...] rows of button labels

    @staticmethod
    def plain(text: str) -> "MessageResponse":
        return MessageResponse(text=text)
