"""
In-memory session store for drink sessions.

One SessionStore is created at startup and shared with the handlers through
``application.bot_data``. It owns every conversation's choices and picks;
all access goes through a single lock so concurrently handled updates
cannot interleave a read-modify-write.

Nothing is persisted: state lives as long as the process.
"""

import logging
import threading
from typing import Dict, List, Optional

from data.schema import (
    ConversationId, ConversationState, ParticipantId, PickResult, PickStatus,
)

logger = logging.getLogger('drink_session_bot')


class SessionStore:
    """Owns conversation -> choices and conversation -> (participant -> pick)."""

    def __init__(self):
        self._conversations: Dict[ConversationId, ConversationState] = {}
        self._lock = threading.Lock()

    def add_choice(self, conversation_id: ConversationId, text: str) -> int:
        """
        Append a choice to a conversation, creating its state on first use.

        Returns:
            The new number of choices in the conversation.
        """
        with self._lock:
            state = self._conversations.get(conversation_id)
            if state is None:
                state = ConversationState(conversation_id=conversation_id)
                self._conversations[conversation_id] = state
                logger.debug(f"Created session for conversation {conversation_id}")
            return state.add_choice(text)

    def pick(self, conversation_id: ConversationId, participant_id: ParticipantId,
             index: Optional[int]) -> PickResult:
        """
        Record a participant's pick by 1-based index into the current choices.

        ``index`` may be None when the caller could not parse one; it is
        reported as invalid unless the conversation has no choices at all.
        """
        with self._lock:
            state = self._conversations.get(conversation_id)
            if state is None or not state.choices:
                return PickResult(PickStatus.NO_CHOICES)

            choice = state.choice_at(index) if index is not None else None
            if choice is None:
                return PickResult(PickStatus.INVALID_INDEX)

            state.record_pick(participant_id, choice)
            return PickResult(PickStatus.PICKED, choice)

    def get_choices(self, conversation_id: ConversationId) -> List[str]:
        """Snapshot of a conversation's choices in display order."""
        with self._lock:
            state = self._conversations.get(conversation_id)
            return list(state.choices) if state else []

    def choice_count(self, conversation_id: ConversationId) -> int:
        with self._lock:
            state = self._conversations.get(conversation_id)
            return len(state.choices) if state else 0

    def get_pick(self, conversation_id: ConversationId,
                 participant_id: ParticipantId) -> Optional[str]:
        """A participant's current pick, if any."""
        with self._lock:
            state = self._conversations.get(conversation_id)
            return state.picks.get(participant_id) if state else None

    def get_picks(self, conversation_id: ConversationId) -> Dict[ParticipantId, str]:
        """Snapshot of every participant's pick in a conversation."""
        with self._lock:
            state = self._conversations.get(conversation_id)
            return dict(state.picks) if state else {}

    def has_conversation(self, conversation_id: ConversationId) -> bool:
        with self._lock:
            return conversation_id in self._conversations

    def __len__(self) -> int:
        with self._lock:
            return len(self._conversations)
