"""
Main entry point for the Drink Session Bot.
"""

from telegram import Update
from telegram.error import TelegramError
from telegram.ext import Application, ContextTypes

from config import (
    TelegramConfig,
    validate_all_configs,
    get_config_summary,
    LoggingConfig
)
from app_logging.logger import configure_all_loggers, get_main_logger
from app_logging.error_logger import get_error_logger
from handlers.session_handlers import SESSION_STORE_KEY, get_session_handlers
from services.session_store import SessionStore


def setup_logging():
    """Set up logging for the application."""
    configure_all_loggers()

    return get_main_logger()


async def error_handler(update: object, context: ContextTypes.DEFAULT_TYPE):
    """Log errors raised while polling or handling an update; polling keeps going."""
    context_data = None
    if isinstance(update, Update):
        context_data = {
            "update_id": update.update_id,
            "chat_id": update.effective_chat.id if update.effective_chat else None,
            "user_id": update.effective_user.id if update.effective_user else None,
        }

    get_error_logger().log_exception(
        context.error,
        source="telegram_bot",
        context=context_data
    )


async def post_init(application: Application):
    """Post-initialization callback."""
    logger = get_main_logger()

    try:
        me = await application.bot.get_me()
        logger.info(f"Bot @{me.username} is running...")
    except TelegramError as e:
        logger.warning(f"Could not fetch bot identity: {e}")

    logger.info("Press Ctrl+C to shut down.")


def build_application(token: str, store: SessionStore = None) -> Application:
    """Create the Application with the session store and handlers wired in."""
    application = (
        Application.builder()
        .token(token)
        .concurrent_updates(TelegramConfig.CONCURRENT_UPDATES)
        .post_init(post_init)
        .build()
    )

    application.bot_data[SESSION_STORE_KEY] = store if store is not None else SessionStore()

    for handler in get_session_handlers():
        application.add_handler(handler)

    application.add_error_handler(error_handler)
    return application


def main():
    """Main function to run the bot."""
    logger = setup_logging()
    logger.info("Bot is starting...")

    try:
        validate_all_configs()
        logger.info("Configuration validated successfully")
    except ValueError as e:
        logger.error(f"Configuration error: {e}")
        print(f"\nConfiguration Error: {e}")
        print("Set TELEGRAM_BOT_TOKEN in the environment or in a .env file.")
        return

    if LoggingConfig.DEBUG_MODE:
        logger.debug(f"Configuration: {get_config_summary()}")

    application = build_application(TelegramConfig.BOT_TOKEN)
    logger.info(f"Handlers registered (@{TelegramConfig.BOT_NAME})")

    # Blocks until SIGINT/SIGTERM, then stops polling and shuts down cleanly
    application.run_polling(allowed_updates=Update.ALL_TYPES)

    logger.info("Bot stopped")


if __name__ == "__main__":
    main()
