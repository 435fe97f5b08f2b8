import asyncio

import httpx
import pytest

from telegate.dispatch.dispatcher import UpdateDispatcher
from telegate.polling import poll_once, run_polling
from telegate.telegram.bot import BotApi
from telegate.telegram.client import TelegramApiClient
from telegate.telegram.types import UpdateKind


def _message_update(update_id: int, text: str = "hi") -> dict[str, object]:
    return {
        "update_id": update_id,
        "message": {
            "message_id": update_id,
            "date": 1700000000,
            "chat": {"id": 7, "type": "private"},
            "text": text,
        },
    }


@pytest.fixture
async def bot(fake_telegram):
    async with httpx.AsyncClient(transport=fake_telegram.transport) as http_client:
        yield BotApi(TelegramApiClient(http_client, token="T"))


async def test_poll_once_dispatches_and_advances_offset(bot, fake_telegram) -> None:
    seen: list[int] = []

    async def record(message, _bot) -> None:
        seen.append(message.message_id)

    fake_telegram.respond("getUpdates", result=[_message_update(10), _message_update(11)])
    dispatcher = UpdateDispatcher({UpdateKind.MESSAGE: record})

    next_offset = await poll_once(bot, dispatcher, offset=10, timeout=0)

    assert next_offset == 12
    assert seen == [10, 11]
    assert fake_telegram.calls_to("getUpdates") == [{"offset": "10", "timeout": "0"}]


async def test_poll_once_skips_invalid_update_but_advances_past_it(bot, fake_telegram) -> None:
    """An update with two variants is dropped without stalling the offset."""
    seen: list[int] = []

    async def record(message, _bot) -> None:
        seen.append(message.message_id)

    broken = _message_update(20)
    broken["edited_message"] = broken["message"]
    fake_telegram.respond("getUpdates", result=[broken, _message_update(21)])

    next_offset = await poll_once(bot, UpdateDispatcher({UpdateKind.MESSAGE: record}))

    assert next_offset == 22
    assert seen == [21]


async def test_poll_once_keeps_offset_when_nothing_arrives(bot, fake_telegram) -> None:
    fake_telegram.respond("getUpdates", result=[])

    assert await poll_once(bot, UpdateDispatcher(), offset=5) == 5


async def test_run_polling_removes_webhook_and_stops_on_event(bot, fake_telegram) -> None:
    stop_event = asyncio.Event()

    async def stop_after_first(message, _bot) -> None:
        stop_event.set()

    fake_telegram.respond("getUpdates", result=[_message_update(1)])

    await asyncio.wait_for(
        run_polling(
            bot,
            UpdateDispatcher({UpdateKind.MESSAGE: stop_after_first}),
            timeout=0,
            stop_event=stop_event,
        ),
        timeout=5,
    )

    assert [name for name, _ in fake_telegram.calls] == ["deleteWebhook", "getUpdates"]


async def test_run_polling_survives_api_errors(fake_telegram) -> None:
    stop_event = asyncio.Event()
    attempts: list[int] = []
    original_handle = fake_telegram.handle

    def flaky(request: httpx.Request) -> httpx.Response:
        if request.url.path.endswith("/getUpdates"):
            attempts.append(1)
            if len(attempts) >= 2:
                stop_event.set()
            return httpx.Response(500, json={"ok": False, "error_code": 500, "description": "oops"})
        return original_handle(request)

    async with httpx.AsyncClient(transport=httpx.MockTransport(flaky)) as http_client:
        flaky_bot = BotApi(TelegramApiClient(http_client, token="T"))
        await asyncio.wait_for(
            run_polling(
                flaky_bot,
                UpdateDispatcher(),
                timeout=0,
                error_sleep_seconds=0,
                stop_event=stop_event,
            ),
            timeout=5,
        )

    assert len(attempts) == 2
