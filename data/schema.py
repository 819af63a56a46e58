"""
Data schema definitions for drink sessions.

Uses Pydantic for the per-conversation state held by the session store.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, Field


# Telegram ids are ints, but the store accepts any opaque key
ConversationId = Union[int, str]
ParticipantId = Union[int, str]


class CommandType(str, Enum):
    """Commands the bot understands."""
    START = "start"
    SUGGEST = "suggest"
    PICK = "pick"
    SHOW_CHOICES = "showchoices"


class PickStatus(str, Enum):
    """Outcome of a pick attempt."""
    PICKED = "picked"
    NO_CHOICES = "no_choices"
    INVALID_INDEX = "invalid_index"


@dataclass
class PickResult:
    """Result of resolving a 1-based index against a conversation's choices."""
    status: PickStatus
    choice: Optional[str] = None

    @property
    def picked(self) -> bool:
        return self.status == PickStatus.PICKED


class ConversationState(BaseModel):
    """
    Choices and picks of one conversation.

    Choices are append-only and keep insertion order; duplicates are allowed.
    Picks map a participant to the text of their latest pick.
    """
    conversation_id: ConversationId
    choices: List[str] = Field(default_factory=list)
    picks: Dict[ParticipantId, str] = Field(default_factory=dict)

    def add_choice(self, text: str) -> int:
        """Append a choice and return its 1-based position."""
        self.choices.append(text)
        return len(self.choices)

    def choice_at(self, index: int) -> Optional[str]:
        """Return the choice at a 1-based index, or None when out of range."""
        if 1 <= index <= len(self.choices):
            return self.choices[index - 1]
        return None

    def record_pick(self, participant_id: ParticipantId, choice: str):
        """Record or overwrite a participant's pick."""
        self.picks[participant_id] = choice
