"""Dispatcher wiring: middleware order and routers."""

from aiogram import Dispatcher, Router

from tgreply.middlewares import ContextMiddleware, RepliesMiddleware


def build_dispatcher(*routers: Router) -> Dispatcher:
    dp = Dispatcher()

    # Outer middleware builds ctx before filters run
    dp.update.outer_middleware(ContextMiddleware())
    # Inner middleware binds reply capabilities right before handlers
    dp.update.middleware(RepliesMiddleware())

    dp.include_routers(*routers)
    return dp
