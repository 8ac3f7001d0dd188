"""Reply capabilities: send to the current chat as a reply to the inbound message.

Every capability checks that the context has a chat, links the outgoing
message to `ctx.message` via `reply_to_message_id` and delegates to the
matching `Bot.send_*` method. Without an inbound message the reply link is
omitted and the call becomes a plain send.

The functions are stateless and shared by all contexts; `attach_replies`
binds them onto a single Context instance:

    attach_replies(ctx)
    await ctx.reply_with_photo(photo, caption="Look")
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping, Sequence
from types import MappingProxyType, MethodType
from typing import Any

from aiogram.enums import ParseMode, PollType
from aiogram.types import InputFile

from tgreply.common.context import Context, assert_available
from tgreply.common.errors import DeprecatedCapabilityError

REPLY_TO_KEY = "reply_to_message_id"

# str for file_id or URL
FileRef = InputFile | str


def make_reply(ctx: Context, extra: Mapping[str, Any]) -> dict[str, Any]:
    """Build send options replying to the inbound message.

    Caller-supplied options win, including an explicit `reply_to_message_id`.
    """
    if ctx.message is None:
        return dict(extra)
    return {REPLY_TO_KEY: ctx.message.message_id, **extra}


# -----------------------------------------------------------------------------
# Text
# -----------------------------------------------------------------------------


def reply(ctx: Context, text: str, **extra: Any) -> Awaitable[Any]:
    assert_available(ctx, "chat", "reply")
    return ctx.bot.send_message(ctx.chat.id, text, **make_reply(ctx, extra))


def _reply_formatted(
    ctx: Context, method: str, parse_mode: ParseMode, text: str, extra: dict[str, Any]
) -> Awaitable[Any]:
    assert_available(ctx, "chat", method)
    return ctx.bot.send_message(
        ctx.chat.id,
        text,
        **make_reply(ctx, {"parse_mode": parse_mode, **extra}),
    )


def reply_with_html(ctx: Context, html: str, **extra: Any) -> Awaitable[Any]:
    return _reply_formatted(ctx, "reply_with_html", ParseMode.HTML, html, extra)


def reply_with_markdown(ctx: Context, markdown: str, **extra: Any) -> Awaitable[Any]:
    return _reply_formatted(
        ctx, "reply_with_markdown", ParseMode.MARKDOWN, markdown, extra
    )


def reply_with_markdown_v2(
    ctx: Context, markdown: str, **extra: Any
) -> Awaitable[Any]:
    return _reply_formatted(
        ctx, "reply_with_markdown_v2", ParseMode.MARKDOWN_V2, markdown, extra
    )


# -----------------------------------------------------------------------------
# Media
# -----------------------------------------------------------------------------


def reply_with_animation(
    ctx: Context, animation: FileRef, **extra: Any
) -> Awaitable[Any]:
    assert_available(ctx, "chat", "reply_with_animation")
    return ctx.bot.send_animation(ctx.chat.id, animation, **make_reply(ctx, extra))


def reply_with_audio(ctx: Context, audio: FileRef, **extra: Any) -> Awaitable[Any]:
    assert_available(ctx, "chat", "reply_with_audio")
    return ctx.bot.send_audio(ctx.chat.id, audio, **make_reply(ctx, extra))


def reply_with_document(
    ctx: Context, document: FileRef, **extra: Any
) -> Awaitable[Any]:
    assert_available(ctx, "chat", "reply_with_document")
    return ctx.bot.send_document(ctx.chat.id, document, **make_reply(ctx, extra))


def reply_with_photo(ctx: Context, photo: FileRef, **extra: Any) -> Awaitable[Any]:
    assert_available(ctx, "chat", "reply_with_photo")
    return ctx.bot.send_photo(ctx.chat.id, photo, **make_reply(ctx, extra))


def reply_with_sticker(ctx: Context, sticker: FileRef, **extra: Any) -> Awaitable[Any]:
    assert_available(ctx, "chat", "reply_with_sticker")
    return ctx.bot.send_sticker(ctx.chat.id, sticker, **make_reply(ctx, extra))


def reply_with_video(ctx: Context, video: FileRef, **extra: Any) -> Awaitable[Any]:
    assert_available(ctx, "chat", "reply_with_video")
    return ctx.bot.send_video(ctx.chat.id, video, **make_reply(ctx, extra))


def reply_with_video_note(
    ctx: Context, video_note: FileRef, **extra: Any
) -> Awaitable[Any]:
    assert_available(ctx, "chat", "reply_with_video_note")
    return ctx.bot.send_video_note(ctx.chat.id, video_note, **make_reply(ctx, extra))


def reply_with_voice(ctx: Context, voice: FileRef, **extra: Any) -> Awaitable[Any]:
    assert_available(ctx, "chat", "reply_with_voice")
    return ctx.bot.send_voice(ctx.chat.id, voice, **make_reply(ctx, extra))


def reply_with_media_group(
    ctx: Context, media: Sequence[Any], **extra: Any
) -> Awaitable[Any]:
    """Reply with an album. Use MediaGroupBuilder().build() to make `media`."""
    assert_available(ctx, "chat", "reply_with_media_group")
    return ctx.bot.send_media_group(ctx.chat.id, media, **make_reply(ctx, extra))


# -----------------------------------------------------------------------------
# Structured messages
# -----------------------------------------------------------------------------


def reply_with_contact(
    ctx: Context, phone_number: str, first_name: str, **extra: Any
) -> Awaitable[Any]:
    assert_available(ctx, "chat", "reply_with_contact")
    return ctx.bot.send_contact(
        ctx.chat.id, phone_number, first_name, **make_reply(ctx, extra)
    )


def reply_with_location(
    ctx: Context, latitude: float, longitude: float, **extra: Any
) -> Awaitable[Any]:
    assert_available(ctx, "chat", "reply_with_location")
    return ctx.bot.send_location(
        ctx.chat.id, latitude, longitude, **make_reply(ctx, extra)
    )


def reply_with_venue(
    ctx: Context,
    latitude: float,
    longitude: float,
    title: str,
    address: str,
    **extra: Any,
) -> Awaitable[Any]:
    assert_available(ctx, "chat", "reply_with_venue")
    return ctx.bot.send_venue(
        ctx.chat.id, latitude, longitude, title, address, **make_reply(ctx, extra)
    )


def reply_with_poll(
    ctx: Context, question: str, options: Sequence[Any], **extra: Any
) -> Awaitable[Any]:
    assert_available(ctx, "chat", "reply_with_poll")
    return ctx.bot.send_poll(ctx.chat.id, question, options, **make_reply(ctx, extra))


def reply_with_quiz(
    ctx: Context, question: str, options: Sequence[Any], **extra: Any
) -> Awaitable[Any]:
    """Reply with a quiz poll. Pass `correct_option_id` in extra."""
    assert_available(ctx, "chat", "reply_with_quiz")
    return ctx.bot.send_poll(
        ctx.chat.id,
        question,
        options,
        **make_reply(ctx, {"type": PollType.QUIZ, **extra}),
    )


def reply_with_dice(ctx: Context, **extra: Any) -> Awaitable[Any]:
    assert_available(ctx, "chat", "reply_with_dice")
    return ctx.bot.send_dice(ctx.chat.id, **make_reply(ctx, extra))


def reply_with_game(ctx: Context, game_short_name: str, **extra: Any) -> Awaitable[Any]:
    assert_available(ctx, "chat", "reply_with_game")
    return ctx.bot.send_game(ctx.chat.id, game_short_name, **make_reply(ctx, extra))


def reply_with_invoice(
    ctx: Context, invoice: Mapping[str, Any], **extra: Any
) -> Awaitable[Any]:
    """Reply with an invoice.

    Args:
        ctx: Current context.
        invoice: Invoice fields as accepted by `Bot.send_invoice`
            (title, description, payload, currency, prices, ...).
        **extra: Send options; override invoice fields on conflict.
    """
    assert_available(ctx, "chat", "reply_with_invoice")
    return ctx.bot.send_invoice(ctx.chat.id, **make_reply(ctx, {**invoice, **extra}))


# -----------------------------------------------------------------------------
# Removed
# -----------------------------------------------------------------------------


def reply_with_chat_action(ctx: Context, *args: Any, **extra: Any) -> Any:
    # Chat actions are not replies; the name stays so old handlers fail loudly
    raise DeprecatedCapabilityError(
        "reply_with_chat_action", "respond_with_chat_action"
    )


REPLIES: Mapping[str, Callable[..., Any]] = MappingProxyType(
    {
        "reply": reply,
        "reply_with_animation": reply_with_animation,
        "reply_with_audio": reply_with_audio,
        "reply_with_chat_action": reply_with_chat_action,
        "reply_with_contact": reply_with_contact,
        "reply_with_dice": reply_with_dice,
        "reply_with_document": reply_with_document,
        "reply_with_game": reply_with_game,
        "reply_with_html": reply_with_html,
        "reply_with_invoice": reply_with_invoice,
        "reply_with_location": reply_with_location,
        "reply_with_markdown": reply_with_markdown,
        "reply_with_markdown_v2": reply_with_markdown_v2,
        "reply_with_media_group": reply_with_media_group,
        "reply_with_photo": reply_with_photo,
        "reply_with_poll": reply_with_poll,
        "reply_with_quiz": reply_with_quiz,
        "reply_with_sticker": reply_with_sticker,
        "reply_with_venue": reply_with_venue,
        "reply_with_video": reply_with_video,
        "reply_with_video_note": reply_with_video_note,
        "reply_with_voice": reply_with_voice,
    }
)


def attach_replies(ctx: Context) -> Context:
    """Bind every reply capability onto `ctx`, replacing same-named members.

    Safe to call repeatedly: each call rebinds the same shared functions.
    """
    for name, capability in REPLIES.items():
        setattr(ctx, name, MethodType(capability, ctx))
    return ctx
