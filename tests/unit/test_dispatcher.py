import logging

from telegate.dispatch.dispatcher import UpdateDispatcher
from telegate.dispatch.handlers import build_default_registry
from telegate.telegram.types import Update, UpdateKind

MESSAGE = {"message_id": 1, "date": 1700000000, "chat": {"id": 7, "type": "private"}}


class _Recorder:
    def __init__(self, name, calls):
        self.name = name
        self.calls = calls

    async def __call__(self, payload, bot):
        self.calls.append((self.name, payload))


def _dispatcher_recording_every_kind(calls):
    return UpdateDispatcher({kind: _Recorder(kind.value, calls) for kind in UpdateKind})


async def test_only_the_matching_handler_runs():
    calls = []
    dispatcher = _dispatcher_recording_every_kind(calls)
    update = Update.model_validate({"update_id": 1, "channel_post": MESSAGE})

    handled = await dispatcher.dispatch(update, bot=None)

    assert handled is UpdateKind.CHANNEL_POST
    assert [name for name, _ in calls] == ["channel_post"]
    assert calls[0][1] is update.channel_post


async def test_unknown_variant_runs_nothing():
    calls = []
    dispatcher = _dispatcher_recording_every_kind(calls)
    update = Update.model_validate({"update_id": 2, "some_future_update": {"id": 1}})

    assert await dispatcher.dispatch(update, bot=None) is None
    assert calls == []


async def test_kind_without_handler_is_ignored(caplog):
    caplog.set_level(logging.INFO, logger="telegate.dispatch.dispatcher")
    dispatcher = UpdateDispatcher()
    update = Update.model_validate({"update_id": 3, "message": MESSAGE})

    assert await dispatcher.dispatch(update, bot=None) is None
    assert any('"reason":"no_handler"' in record.getMessage() for record in caplog.records)


async def test_handler_failure_is_logged_not_raised(caplog):
    async def broken(payload, bot):
        raise RuntimeError("boom")

    dispatcher = UpdateDispatcher({UpdateKind.MESSAGE: broken})
    update = Update.model_validate({"update_id": 4, "message": MESSAGE})

    assert await dispatcher.dispatch(update, bot=None) is UpdateKind.MESSAGE
    assert any(
        "event=telegram.update.handler_failed" in record.getMessage() for record in caplog.records
    )


async def test_register_replaces_existing_handler():
    calls = []
    dispatcher = UpdateDispatcher({UpdateKind.MESSAGE: _Recorder("old", calls)})
    dispatcher.register(UpdateKind.MESSAGE, _Recorder("new", calls))

    await dispatcher.dispatch(Update.model_validate({"update_id": 5, "message": MESSAGE}), bot=None)

    assert [name for name, _ in calls] == ["new"]


def test_default_registry_covers_every_kind():
    registry = build_default_registry()

    assert set(registry) == set(UpdateKind)
    registry.pop(UpdateKind.MESSAGE)
    assert UpdateKind.MESSAGE in build_default_registry()
