"""Application configuration loaded from .env and the process environment."""

import os
from functools import lru_cache

from dotenv import load_dotenv

from frontdesk.errors import ConfigurationError

load_dotenv()


class Settings:
    # Slack bot credential (required)
    BOT_TOKEN: str = os.getenv("BOT_TOKEN", "")

    # Slack Web API
    SLACK_API_URL: str = os.getenv("SLACK_API_URL", "https://slack.com/api")
    SLACK_TIMEOUT: float = float(os.getenv("SLACK_TIMEOUT", "10"))

    # Notification appearance
    ATTACHMENT_COLOR: str = os.getenv("ATTACHMENT_COLOR", "#36a64f")

    # Server
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "3000"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Kiosk UI origins, comma separated
    CORS_ORIGINS: str = os.getenv("CORS_ORIGINS", "*")

    @property
    def cors_origins(self) -> list[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    def validate(self) -> None:
        """Raise ConfigurationError if a required setting is missing."""
        if not self.BOT_TOKEN:
            raise ConfigurationError("BOT_TOKEN is not set; add it to .env or the environment")


@lru_cache
def get_settings() -> Settings:
    return Settings()
