"""
Command engine for the Drink Session Bot.

Turns one inbound text message into at most one MessageResponse and applies
the matching change to the session store. Knows nothing about Telegram.

User mistakes (empty suggestion, bad index, nothing suggested yet) are
answered with text or ignored; nothing here raises for bad input.
"""

import logging
from typing import Optional

from data.schema import CommandType, ConversationId, ParticipantId, PickStatus
from services.message_response import MessageResponse
from services.session_store import SessionStore
from utils.constants import MESSAGES
from utils.formatters import (
    build_pick_keyboard, format_choice_list, format_picked, format_suggestion_added,
)
from utils.parsers import match_command, parse_choice_index, parse_suggestion

logger = logging.getLogger('drink_session_bot')


def handle_start() -> MessageResponse:
    return MessageResponse.plain(MESSAGES["welcome"])


def handle_suggest(store: SessionStore, conversation_id: ConversationId,
                   argument: str) -> Optional[MessageResponse]:
    """Add a trimmed suggestion. Empty suggestions are dropped without a reply."""
    suggestion = parse_suggestion(argument)
    if suggestion is None:
        logger.debug(f"Ignoring empty suggestion in conversation {conversation_id}")
        return None

    store.add_choice(conversation_id, suggestion)
    return MessageResponse.plain(format_suggestion_added(suggestion))


def handle_pick(store: SessionStore, conversation_id: ConversationId,
                participant_id: ParticipantId, argument: str) -> MessageResponse:
    """Record a pick by 1-based index into the conversation's current choices."""
    result = store.pick(conversation_id, participant_id, parse_choice_index(argument))

    if result.status == PickStatus.NO_CHOICES:
        return MessageResponse.plain(MESSAGES["no_choices"])
    if result.status == PickStatus.INVALID_INDEX:
        return MessageResponse.plain(MESSAGES["invalid_index"])
    return MessageResponse.plain(format_picked(result.choice))


def handle_show_choices(store: SessionStore, conversation_id: ConversationId) -> MessageResponse:
    """Numbered list of choices plus a keyboard of /pick buttons."""
    choices = store.get_choices(conversation_id)
    if not choices:
        return MessageResponse.plain(MESSAGES["no_choices"])

    return MessageResponse(
        text=format_choice_list(choices),
        keyboard=build_pick_keyboard(choices),
    )


def process_message(store: SessionStore, conversation_id: ConversationId,
                    participant_id: ParticipantId, text: Optional[str]) -> Optional[MessageResponse]:
    """
    Process a text message from a participant in a conversation.

    Args:
        store: Session store owning choices and picks.
        conversation_id: Chat the message came from.
        participant_id: User who sent it.
        text: Message text; None or unrecognised text is ignored.

    Returns:
        The reply to send, or None when the bot stays silent.
    """
    command, argument = match_command(text or "")
    return dispatch_command(store, conversation_id, participant_id, command, argument)


def dispatch_command(store: SessionStore, conversation_id: ConversationId,
                     participant_id: ParticipantId, command: Optional[str],
                     argument: str) -> Optional[MessageResponse]:
    """Run an already matched command; None means no reply."""
    if command == CommandType.START:
        return handle_start()
    if command == CommandType.SUGGEST:
        return handle_suggest(store, conversation_id, argument)
    if command == CommandType.PICK:
        return handle_pick(store, conversation_id, participant_id, argument)
    if command == CommandType.SHOW_CHOICES:
        return handle_show_choices(store, conversation_id)

    return None
