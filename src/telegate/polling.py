"""Long-polling runner for local development without a public webhook URL.

Run with ``python -m telegate.polling``.
"""

from __future__ import annotations

import asyncio
import logging

import httpx
from pydantic import ValidationError

from telegate.core.config import Settings, get_settings
from telegate.core.logging import configure_logging
from telegate.core.observability import log_event
from telegate.dispatch.dispatcher import UpdateDispatcher
from telegate.dispatch.handlers import build_default_registry
from telegate.telegram.bot import BotApi
from telegate.telegram.client import TelegramApiClient
from telegate.telegram.exceptions import TelegramApiError
from telegate.telegram.methods.updates import GetUpdates
from telegate.telegram.serialization import serialize_params
from telegate.telegram.types.update import Update

logger = logging.getLogger(__name__)


async def poll_once(
    bot: BotApi,
    dispatcher: UpdateDispatcher,
    *,
    offset: int | None = None,
    timeout: int = 0,
) -> int | None:
    """Fetch one batch of updates, dispatch each and return the next offset.

    Updates that fail validation are skipped but still advance the offset so
    Telegram does not redeliver them.
    """
    method = GetUpdates(offset=offset, timeout=timeout)
    raw_updates = await bot.client.call_method(method.api_method, serialize_params(method))

    next_offset = offset
    for raw_update in raw_updates or []:
        update_id = raw_update.get("update_id") if isinstance(raw_update, dict) else None
        if isinstance(update_id, int):
            next_offset = update_id + 1
        try:
            update = Update.model_validate(raw_update)
        except ValidationError:
            log_event(
                logger,
                level=logging.WARNING,
                event="telegram.polling.invalid_update",
                update_id=update_id,
            )
            continue
        await dispatcher.dispatch(update, bot)
    return next_offset


async def run_polling(
    bot: BotApi,
    dispatcher: UpdateDispatcher,
    *,
    timeout: int = 25,
    error_sleep_seconds: float = 2.0,
    stop_event: asyncio.Event | None = None,
) -> None:
    """Poll ``getUpdates`` until ``stop_event`` is set.

    Any registered webhook is removed first, since Telegram refuses
    ``getUpdates`` while one is active.
    """
    await bot.delete_webhook()
    log_event(logger, event="telegram.polling.started", timeout=timeout)

    offset: int | None = None
    while stop_event is None or not stop_event.is_set():
        try:
            offset = await poll_once(bot, dispatcher, offset=offset, timeout=timeout)
        except (TelegramApiError, httpx.HTTPError):
            logger.exception("Telegram polling iteration failed")
            await asyncio.sleep(error_sleep_seconds)

    log_event(logger, event="telegram.polling.stopped", offset=offset)


async def run(settings: Settings | None = None) -> None:
    settings = settings or get_settings()
    if settings.telegram_bot_token is None:
        raise RuntimeError("TELEGRAM_BOT_TOKEN is required for polling")

    # The HTTP read timeout has to outlast the long-poll window.
    http_timeout = settings.telegram_api_timeout_seconds + settings.polling_timeout_seconds
    async with httpx.AsyncClient(timeout=http_timeout) as http_client:
        bot = BotApi(
            TelegramApiClient(
                http_client,
                base_url=settings.telegram_api_base_url,
                token=settings.telegram_bot_token.get_secret_value(),
            )
        )
        await run_polling(
            bot,
            UpdateDispatcher(build_default_registry()),
            timeout=settings.polling_timeout_seconds,
            error_sleep_seconds=settings.polling_error_sleep_seconds,
        )


def main() -> None:
    configure_logging(get_settings().log_level)
    asyncio.run(run())


if __name__ == "__main__":
    main()
