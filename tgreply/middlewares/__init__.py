"""Middlewares for the tgreply bot."""

from tgreply.middlewares.context import CONTEXT_KEY, ContextMiddleware
from tgreply.middlewares.replies import RepliesMiddleware

__all__ = [
    "CONTEXT_KEY",
    "ContextMiddleware",
    "RepliesMiddleware",
]
