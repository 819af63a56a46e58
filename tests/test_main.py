"""Tests for main.py: application wiring, startup and error handling."""

import io
import logging
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from telegram import Update
from telegram.error import NetworkError

import main
from app_logging.logger import configure_console
from config import TelegramConfig, validate_all_configs, get_config_summary
from handlers.session_handlers import SESSION_STORE_KEY
from services.session_store import SessionStore

FAKE_TOKEN = "123456:TEST-token"


class TestConfig:
    def test_missing_token_raises(self, monkeypatch):
        monkeypatch.setattr(TelegramConfig, "BOT_TOKEN", "")
        with pytest.raises(ValueError, match="TELEGRAM_BOT_TOKEN"):
            validate_all_configs()

    def test_summary_hides_token(self, monkeypatch):
        monkeypatch.setattr(TelegramConfig, "BOT_TOKEN", FAKE_TOKEN)
        summary = get_config_summary()
        assert summary["telegram"]["token_configured"] is True
        assert FAKE_TOKEN not in str(summary)


class TestBuildApplication:
    def test_store_is_injected(self):
        store = SessionStore()
        application = main.build_application(FAKE_TOKEN, store)
        assert application.bot_data[SESSION_STORE_KEY] is store

    def test_default_store_created(self):
        application = main.build_application(FAKE_TOKEN)
        assert isinstance(application.bot_data[SESSION_STORE_KEY], SessionStore)

    def test_error_handler_registered(self):
        application = main.build_application(FAKE_TOKEN)
        assert main.error_handler in application.error_handlers


class TestStartup:
    @pytest.mark.asyncio
    async def test_post_init_logs_identity(self):
        application = MagicMock()
        application.bot.get_me = AsyncMock(return_value=MagicMock(username="drinkbot"))
        with patch.object(main, "get_main_logger") as get_logger:
            await main.post_init(application)
        messages = [c.args[0] for c in get_logger.return_value.info.call_args_list]
        assert "Bot @drinkbot is running..." in messages

    @pytest.mark.asyncio
    async def test_post_init_survives_get_me_failure(self):
        application = MagicMock()
        application.bot.get_me = AsyncMock(side_effect=NetworkError("offline"))
        await main.post_init(application)

    def test_main_without_token_does_not_poll(self, monkeypatch):
        monkeypatch.setattr(TelegramConfig, "BOT_TOKEN", "")
        with patch.object(main, "build_application") as build:
            main.main()
        build.assert_not_called()

    def test_main_runs_polling_for_all_updates(self, monkeypatch):
        monkeypatch.setattr(TelegramConfig, "BOT_TOKEN", FAKE_TOKEN)
        with patch.object(main, "build_application") as build:
            main.main()
        build.return_value.run_polling.assert_called_once_with(allowed_updates=Update.ALL_TYPES)


class TestErrorHandler:
    @pytest.mark.asyncio
    async def test_transport_error_is_logged_and_swallowed(self):
        context = MagicMock()
        context.error = NetworkError("timed out")
        with patch.object(main, "get_error_logger") as get_error_logger:
            await main.error_handler(None, context)
        get_error_logger.return_value.log_exception.assert_called_once()
        assert get_error_logger.return_value.log_exception.call_args.args[0] is context.error

    @pytest.mark.asyncio
    async def test_transport_error_printed_once(self):
        stream = io.StringIO()
        handler = configure_console(stream)
        context = MagicMock()
        context.error = NetworkError("connection reset by peer")
        try:
            await main.error_handler(None, context)
        finally:
            logging.getLogger().removeHandler(handler)

        assert stream.getvalue().count("connection reset by peer") == 1
