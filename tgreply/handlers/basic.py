from aiogram import F, Router, html
from aiogram.enums import ChatAction
from aiogram.filters import Command, CommandStart
from aiogram.types import Message

from tgreply.common.context import Context

router = Router()


@router.message(CommandStart())
async def cmd_start(message: Message, ctx: Context):
    welcome_text = (
        f"👋 Hello, {html.quote(message.from_user.full_name)}!\n\n"
        "Every answer I send is a reply to your message.\n"
        "Try /where or just say something."
    )
    return await ctx.reply_with_html(welcome_text)


@router.message(Command("where"))
async def cmd_where(message: Message, ctx: Context):
    # Null Island
    return await ctx.reply_with_location(0.0, 0.0)


@router.message(F.text)
async def echo(message: Message, ctx: Context):
    await ctx.respond_with_chat_action(ChatAction.TYPING)
    return await ctx.reply(message.text)
