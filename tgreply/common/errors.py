"""Errors raised by context capabilities before any Bot API call is made."""


class CapabilityUnavailableError(TypeError):
    """A capability was called on an update that cannot support it.

    For example, replying from an inline query handler: there is no chat
    to send the reply to.
    """

    def __init__(self, method: str, update_type: str | None):
        self.method = method
        self.update_type = update_type
        super().__init__(f'"{method}" isn\'t available for "{update_type}"')


class DeprecatedCapabilityError(TypeError):
    """A removed capability was called. Points at the replacement."""

    def __init__(self, method: str, use: str):
        self.method = method
        self.use = use
        super().__init__(f"ctx.{method} is removed, use ctx.{use} instead")
