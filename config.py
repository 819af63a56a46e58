"""
Configuration module for the Drink Session Bot.
Loads environment variables and provides configuration constants.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Base Paths
BASE_DIR = Path(__file__).parent.absolute()
LOGS_DIR = BASE_DIR / "logs"


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


class TelegramConfig:
    """Telegram Bot configuration."""
    BOT_TOKEN: str = os.getenv("TELEGRAM_BOT_TOKEN", "")
    BOT_NAME: str = os.getenv("BOT_NAME", "DrinkSessionBot")

    # Handle updates concurrently so a slow send doesn't hold up the next update
    CONCURRENT_UPDATES: bool = _env_flag("CONCURRENT_UPDATES", "true")

    @classmethod
    def validate(cls) -> bool:
        """Validate Telegram configuration."""
        if not cls.BOT_TOKEN:
            raise ValueError("TELEGRAM_BOT_TOKEN is required")
        return True


class LoggingConfig:
    """Logging configuration."""
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
    DEBUG_MODE: bool = _env_flag("DEBUG_MODE", "false")

    # File logging is off unless asked for; the bot keeps nothing on disk by default
    LOG_TO_FILE: bool = _env_flag("LOG_TO_FILE", "false")

    # Log file paths
    APP_LOG: Path = LOGS_DIR / "app.log"
    OPERATIONS_LOG: Path = LOGS_DIR / "operations.log"
    ERRORS_LOG: Path = LOGS_DIR / "errors.log"

    # Log rotation settings
    MAX_LOG_SIZE: int = 10 * 1024 * 1024  # 10 MB
    BACKUP_COUNT: int = 5


def validate_all_configs() -> bool:
    """Validate all required configurations. Raises ValueError on the first problem."""
    TelegramConfig.validate()
    return True


def get_config_summary() -> dict:
    """Get a summary of current configuration (for debugging)."""
    return {
        "telegram": {
            "bot_name": TelegramConfig.BOT_NAME,
            "token_configured": bool(TelegramConfig.BOT_TOKEN),
            "concurrent_updates": TelegramConfig.CONCURRENT_UPDATES,
        },
        "logging": {
            "level": LoggingConfig.LOG_LEVEL,
            "debug_mode": LoggingConfig.DEBUG_MODE,
            "log_to_file": LoggingConfig.LOG_TO_FILE,
        },
    }
