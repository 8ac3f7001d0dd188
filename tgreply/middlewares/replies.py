"""Middleware that turns `ctx.reply*` into replies to the inbound message.

Binds the shared reply capabilities onto the Context created by
ContextMiddleware, then hands control to the rest of the chain. Capability
checks happen later, when a handler actually calls one of them.
"""

from collections.abc import Awaitable, Callable
from typing import Any

from aiogram import BaseMiddleware
from aiogram.types import TelegramObject

from tgreply.common.context import Context
from tgreply.common.replies import attach_replies
from tgreply.middlewares.context import CONTEXT_KEY


class RepliesMiddleware(BaseMiddleware):
    """Middleware that attaches reply capabilities to `ctx`.

    Usage in handlers:
        async def my_handler(message: Message, ctx: Context):
            await ctx.reply("Hello!")  # reply_to_message_id is set for you
            await ctx.reply_with_photo(photo, reply_to_message_id=None)  # opt out
    """

    async def __call__(
        self,
        handler: Callable[[TelegramObject, dict[str, Any]], Awaitable[Any]],
        event: TelegramObject,
        data: dict[str, Any],
    ) -> Any:
        ctx: Context | None = data.get(CONTEXT_KEY)
        if ctx is None:
            raise RuntimeError(
                "RepliesMiddleware needs a context, register ContextMiddleware first"
            )

        attach_replies(ctx)

        return await handler(event, data)
