"""Test configuration and reusable fixtures for the tgreply test suite.

Provides mock aiogram objects (users, chats, messages, updates, bots) and a
Context factory for testing reply capabilities and middlewares.
"""

from __future__ import annotations

import os
from datetime import UTC, datetime
from unittest.mock import AsyncMock, MagicMock

import pytest
from aiogram.types import Chat, Message, Update, User

# Set up test environment variables before any imports
os.environ.setdefault("LOGFIRE_IGNORE_NO_CONFIG", "1")
os.environ.setdefault("ENVIRONMENT", "dev")
os.environ.setdefault("TELEGRAM_BOT_TOKEN", "123456:TEST_TOKEN_FOR_TESTING")

from tgreply.common.context import Context  # noqa: E402

# Every Bot method a context capability may delegate to
BOT_SEND_METHODS = (
    "send_message",
    "send_animation",
    "send_audio",
    "send_chat_action",
    "send_contact",
    "send_dice",
    "send_document",
    "send_game",
    "send_invoice",
    "send_location",
    "send_media_group",
    "send_photo",
    "send_poll",
    "send_sticker",
    "send_venue",
    "send_video",
    "send_video_note",
    "send_voice",
)


# =============================================================================
# TELEGRAM OBJECT FACTORIES (Mocks for aiogram types)
# =============================================================================


@pytest.fixture
def make_user():
    """Factory fixture for creating mock Telegram User objects."""

    def _make_user(
        id: int = 12345,
        is_bot: bool = False,
        first_name: str = "Test",
        last_name: str | None = "User",
        username: str | None = "testuser",
        full_name: str | None = None,
        **kwargs,
    ) -> User:
        user = MagicMock(spec=User)
        user.id = id
        user.is_bot = is_bot
        user.first_name = first_name
        user.last_name = last_name
        user.username = username
        user.full_name = full_name or " ".join(
            part for part in (first_name, last_name) if part
        )

        for key, value in kwargs.items():
            setattr(user, key, value)

        return user

    return _make_user


@pytest.fixture
def make_chat():
    """Factory fixture for creating mock Telegram Chat objects."""

    def _make_chat(
        id: int = -1001234567890,
        type: str = "supergroup",
        title: str | None = "Test Chat",
        **kwargs,
    ) -> Chat:
        chat = MagicMock(spec=Chat)
        chat.id = id
        chat.type = type
        chat.title = title

        for key, value in kwargs.items():
            setattr(chat, key, value)

        return chat

    return _make_chat


@pytest.fixture
def make_message(make_user, make_chat):
    """Factory fixture for creating mock Telegram Message objects."""

    def _make_message(
        message_id: int = 1,
        text: str | None = None,
        user_id: int = 12345,
        chat_id: int = -1001234567890,
        chat_type: str = "supergroup",
        **kwargs,
    ) -> Message:
        message = MagicMock(spec=Message)
        message.message_id = message_id
        message.text = text
        message.from_user = make_user(id=user_id)
        message.chat = make_chat(id=chat_id, type=chat_type)
        message.date = datetime.now(UTC)
        message.message_thread_id = None

        for key, value in kwargs.items():
            setattr(message, key, value)

        return message

    return _make_message


@pytest.fixture
def make_update():
    """Factory fixture for creating mock Update objects of a given kind."""

    def _make_update(
        update_type: str = "message",
        event: object | None = None,
        update_id: int = 1,
    ) -> Update:
        update = MagicMock(spec=Update)
        update.update_id = update_id
        update.event_type = update_type
        setattr(update, update_type, event)
        return update

    return _make_update


@pytest.fixture
def make_bot():
    """Factory fixture for creating mock Bot objects.

    Every send_* method is an AsyncMock returning a sentinel "sent" message.
    """

    def _make_bot(**kwargs) -> MagicMock:
        bot = MagicMock()

        for name in BOT_SEND_METHODS:
            setattr(bot, name, AsyncMock(return_value=MagicMock(name=f"{name}_result")))

        for key, value in kwargs.items():
            setattr(bot, key, value)

        return bot

    return _make_bot


@pytest.fixture
def mock_bot(make_bot):
    return make_bot()


# =============================================================================
# CONTEXT FACTORY
# =============================================================================


@pytest.fixture
def make_context(mock_bot, make_chat, make_message):
    """Factory fixture for creating a Context with or without chat/message.

    Usage:
        ctx = make_context()  # chat.id=42, message.message_id=7
        ctx = make_context(message_id=None, update_type="callback_query")
        ctx = make_context(chat_id=None, message_id=None, update_type="inline_query")
    """

    def _make_context(
        update_type: str = "message",
        chat_id: int | None = 42,
        message_id: int | None = 7,
        bot: MagicMock | None = None,
    ) -> Context:
        chat = make_chat(id=chat_id) if chat_id is not None else None
        message = None
        if message_id is not None:
            message = make_message(message_id=message_id, chat_id=chat_id or 0)
        return Context(
            bot=bot or mock_bot,
            update_type=update_type,
            chat=chat,
            message=message,
        )

    return _make_context
