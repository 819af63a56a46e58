"""
Project-root fixtures for the Drink Session Bot test suite.
Provides a fresh session store and fake Telegram objects so tests run
without any network calls.
"""

import pytest
from unittest.mock import AsyncMock, MagicMock

from services.session_store import SessionStore
from handlers.session_handlers import SESSION_STORE_KEY


# ── Session store ────────────────────────────────────────────
@pytest.fixture
def store():
    """An empty SessionStore."""
    return SessionStore()


# ── Telegram mocks ───────────────────────────────────────────
@pytest.fixture
def make_update():
    """Factory for a fake Update carrying a new message."""
    def _make(text="/start", chat_id=100, user_id=1, has_user=True):
        update = MagicMock()
        update.message.text = text
        update.message.chat_id = chat_id
        if has_user:
            update.effective_user.id = user_id
        else:
            update.effective_user = None
        return update
    return _make


@pytest.fixture
def bot_context(store):
    """Fake handler context with the store registered and an async send_message."""
    context = MagicMock()
    context.bot_data = {SESSION_STORE_KEY: store}
    context.bot.send_message = AsyncMock()
    return context
