"""Route a classified update to the one handler registered for its kind."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Mapping
from typing import Any

from telegate.core.metrics import UPDATE_COUNTER
from telegate.core.observability import log_event
from telegate.telegram.bot import BotApi
from telegate.telegram.types.update import Update, UpdateKind

logger = logging.getLogger(__name__)

UpdateHandler = Callable[[Any, BotApi], Awaitable[None]]


class UpdateDispatcher:
    """Registry of per-kind handlers.

    At most one handler runs per update. A handler that raises is logged and
    does not propagate, so the webhook still acknowledges the update.
    """

    def __init__(self, handlers: Mapping[UpdateKind, UpdateHandler] | None = None) -> None:
        self._handlers: dict[UpdateKind, UpdateHandler] = dict(handlers or {})

    def register(self, kind: UpdateKind, handler: UpdateHandler) -> None:
        """Install ``handler`` for ``kind``, replacing any earlier one."""
        self._handlers[kind] = handler

    def handler_for(self, kind: UpdateKind) -> UpdateHandler | None:
        return self._handlers.get(kind)

    async def dispatch(self, update: Update, bot: BotApi) -> UpdateKind | None:
        """Run the handler for ``update`` and return the kind that was handled."""
        event = update.event
        if event is None:
            UPDATE_COUNTER.labels(kind="unknown", outcome="unhandled").inc()
            log_event(
                logger,
                event="telegram.update.unhandled",
                update_id=update.update_id,
                reason="no_known_variant",
            )
            return None

        handler = self._handlers.get(event.kind)
        if handler is None:
            UPDATE_COUNTER.labels(kind=event.kind.value, outcome="unhandled").inc()
            log_event(
                logger,
                event="telegram.update.unhandled",
                update_id=update.update_id,
                kind=event.kind,
                reason="no_handler",
            )
            return None

        try:
            await handler(event.payload, bot)
        except Exception:
            logger.exception(
                "Handler for %s failed on update %s",
                event.kind.value,
                update.update_id,
            )
            UPDATE_COUNTER.labels(kind=event.kind.value, outcome="failed").inc()
            log_event(
                logger,
                level=logging.ERROR,
                event="telegram.update.handler_failed",
                update_id=update.update_id,
                kind=event.kind,
            )
            return event.kind

        UPDATE_COUNTER.labels(kind=event.kind.value, outcome="handled").inc()
        log_event(
            logger,
            event="telegram.update.handled",
            update_id=update.update_id,
            kind=event.kind,
        )
        return event.kind
