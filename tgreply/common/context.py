"""Per-update context threaded through the middleware chain.

The Context is built once per inbound update by ContextMiddleware, extended
with reply capabilities by RepliesMiddleware and handed to handlers as `ctx`.
"""

from __future__ import annotations

from collections.abc import Awaitable
from dataclasses import dataclass
from typing import Any

from aiogram import Bot
from aiogram.types import CallbackQuery, Chat, Message, TelegramObject, Update

from tgreply.common.deprecation import deprecate
from tgreply.common.errors import CapabilityUnavailableError


def _resolve_chat(event: TelegramObject | None) -> Chat | None:
    """Find the chat an update happened in, if any."""
    if isinstance(event, CallbackQuery):
        # Inline-mode callbacks carry no message and therefore no chat
        return event.message.chat if event.message else None
    return getattr(event, "chat", None)


@dataclass
class Context:
    """Mutable state for a single update.

    Usage in handlers:
        async def my_handler(message: Message, ctx: Context):
            await ctx.reply("Hello!")  # Replies to `message`
    """

    bot: Bot
    update_type: str
    chat: Chat | None = None
    message: Message | None = None
    update: Update | None = None

    @classmethod
    def from_update(cls, update: Update, bot: Bot) -> Context:
        """Create a Context from an incoming Update.

        Only plain "message" updates expose `message`; replies to edited
        messages, channel posts or callbacks fall back to plain sends.
        """
        update_type = update.event_type
        event = getattr(update, update_type, None)
        return cls(
            bot=bot,
            update_type=update_type,
            chat=_resolve_chat(event),
            message=event if update_type == "message" else None,
            update=update,
        )

    def respond_with_chat_action(self, action: str, **extra: Any) -> Awaitable[bool]:
        """Show a chat action (typing, upload_photo, ...) in the current chat."""
        assert_available(self, "chat", "respond_with_chat_action")
        return self.bot.send_chat_action(self.chat.id, action, **extra)

    def reply_with_chat_action(self, action: str, **extra: Any) -> Awaitable[bool]:
        deprecate(
            "ctx.reply_with_chat_action",
            "reply_with_chat_action",
            "ctx.respond_with_chat_action",
        )
        return self.respond_with_chat_action(action, **extra)


def assert_available(ctx: Context, attr: str, method: str) -> None:
    """Raise CapabilityUnavailableError if `ctx.<attr>` is missing.

    Args:
        ctx: Context the capability was called on.
        attr: Context attribute the capability needs (e.g. "chat").
        method: Capability name, used in the error message.
    """
    if getattr(ctx, attr, None) is None:
        raise CapabilityUnavailableError(method, ctx.update_type)
