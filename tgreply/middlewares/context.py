"""Middleware that builds the per-update Context.

Must be registered as an outer update middleware so that every later stage
(including RepliesMiddleware) finds `ctx` in handler data.
"""

from collections.abc import Awaitable, Callable
from typing import Any

from aiogram import BaseMiddleware
from aiogram.types import TelegramObject, Update

from tgreply.common.context import Context

CONTEXT_KEY = "ctx"


class ContextMiddleware(BaseMiddleware):
    """Middleware that injects a Context into handler data.

    Usage in handlers:
        async def my_handler(message: Message, ctx: Context):
            print(ctx.update_type, ctx.chat)
    """

    async def __call__(
        self,
        handler: Callable[[TelegramObject, dict[str, Any]], Awaitable[Any]],
        event: TelegramObject,
        data: dict[str, Any],
    ) -> Any:
        if not isinstance(event, Update):
            raise RuntimeError(
                f"ContextMiddleware got unexpected event type: {type(event).__name__}"
            )

        bot = data.get("bot") or event.bot
        data[CONTEXT_KEY] = Context.from_update(event, bot)

        return await handler(event, data)
