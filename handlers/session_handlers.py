"""
Telegram handlers for drink session commands.

A single text handler feeds every new message into the command engine,
since commands are matched as plain text prefixes rather than through
CommandHandler's bot-command entities.
"""

import logging
import time
from typing import Optional

from telegram import KeyboardButton, ReplyKeyboardMarkup, Update
from telegram.ext import ContextTypes, MessageHandler, filters

from app_logging.operation_logger import get_operation_logger
from handlers.command_engine import dispatch_command
from services.message_response import MessageResponse
from services.session_store import SessionStore
from utils.parsers import match_command

logger = logging.getLogger('drink_session_bot')

# bot_data key the SessionStore is registered under in main.py
SESSION_STORE_KEY = "session_store"


def get_session_store(context: ContextTypes.DEFAULT_TYPE) -> SessionStore:
    """Get the SessionStore owned by the running application."""
    return context.bot_data[SESSION_STORE_KEY]


def _build_keyboard(rows) -> Optional[ReplyKeyboardMarkup]:
    """Build a ReplyKeyboardMarkup from rows of button labels."""
    if not rows:
        return None
    keyboard = [[KeyboardButton(label) for label in row] for row in rows]
    return ReplyKeyboardMarkup(keyboard, resize_keyboard=True)


async def send_response(context: ContextTypes.DEFAULT_TYPE, chat_id, response: MessageResponse):
    """Send a MessageResponse to a chat as plain text."""
    await context.bot.send_message(
        chat_id=chat_id,
        text=response.text,
        reply_markup=_build_keyboard(response.keyboard),
    )


async def handle_text_message(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Route a text message through the command engine and send any reply."""
    message = update.message
    if message is None or message.text is None:
        return

    user = update.effective_user
    if user is None:
        logger.debug(f"Dropping message without sender in chat {message.chat_id}")
        return

    chat_id = message.chat_id
    text = message.text

    command, argument = match_command(text)
    if command is None:
        return

    operations = get_operation_logger()
    operations.log_operation_start(
        operation_type=command,
        conversation_id=chat_id,
        participant_id=user.id,
        command=text,
    )
    start = time.time()

    response = dispatch_command(get_session_store(context), chat_id, user.id, command, argument)
    if response is None:
        operations.log_operation_complete(
            command, int((time.time() - start) * 1000), {"replied": False}
        )
        return

    try:
        await send_response(context, chat_id, response)
    except Exception as e:
        operations.log_operation_failure(
            command, str(e), type(e).__name__, int((time.time() - start) * 1000)
        )
        raise

    operations.log_operation_complete(
        command, int((time.time() - start) * 1000), {"replied": True}
    )


def get_session_handlers():
    """Get all drink session handlers."""
    return [
        MessageHandler(filters.UpdateType.MESSAGE & filters.TEXT, handle_text_message),
    ]
