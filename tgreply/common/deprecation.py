"""Deprecation warnings for context members that are on their way out."""

from __future__ import annotations

import logfire

from tgreply.config import settings


def deprecate(
    method: str,
    ignorable: str | None = None,
    use: str | None = None,
    see: str | None = None,
) -> None:
    """Log a warning that `method` is deprecated.

    Args:
        method: Deprecated member, e.g. "ctx.reply_with_chat_action".
        ignorable: Name that silences this warning when listed in
            `settings.ignore_deprecated`.
        use: Replacement to suggest.
        see: Optional URL with migration notes.
    """
    if ignorable and ignorable in settings.ignore_deprecated:
        return

    use_other = f"; use {use} instead" if use else ""
    logfire.warning(
        "{method} is deprecated{use_other}",
        method=method,
        use_other=use_other,
        use=use,
        see=see,
    )
