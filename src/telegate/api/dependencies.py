"""Shared FastAPI dependencies."""

from fastapi import Request

from telegate.dispatch.dispatcher import UpdateDispatcher
from telegate.telegram.bot import BotApi


def get_bot(request: Request) -> BotApi:
    """Return the Bot API surface created during startup."""
    bot: BotApi | None = getattr(request.app.state, "bot", None)
    if bot is None:
        raise RuntimeError("Bot API client is not initialized")
    return bot


def get_dispatcher(request: Request) -> UpdateDispatcher:
    """Return the update dispatcher created during startup."""
    dispatcher: UpdateDispatcher | None = getattr(request.app.state, "dispatcher", None)
    if dispatcher is None:
        raise RuntimeError("Update dispatcher is not initialized")
    return dispatcher
