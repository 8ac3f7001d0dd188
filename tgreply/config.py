"""Configuration settings using Pydantic."""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Docs: https://docs.pydantic.dev/2.8/concepts/pydantic_settings/


class Settings(BaseSettings):
    # App name used in logs
    app_name: str = "tgreply"

    # Allows to detect type of deployment
    environment: Literal["dev", "prod"] = "dev"

    # Token got from https://t.me/BotFather, only needed to run the bot
    telegram_bot_token: str | None = None

    # Logfire token
    logfire_token: str | None = None

    # Deprecation warnings to silence, e.g. ["reply_with_chat_action"]
    ignore_deprecated: set[str] = Field(default_factory=set)

    model_config = SettingsConfigDict(
        # `.env.prod` takes priority over `.env`
        env_file=(".env", ".env.prod"),
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore extra fields from .env
    )


settings = Settings()
