from fastapi.testclient import TestClient

from telegate.core.config import get_settings
from telegate.main import create_app
from telegate.telegram.types.update import UpdateKind

WEBHOOK_PATH = "/endpoint"
WEBHOOK_SECRET_HEADER = {"X-Telegram-Bot-Api-Secret-Token": "S"}


def _message_update(*, update_id: int = 1, chat_id: int = 7, text: str = "hello") -> dict[str, object]:
    """Build a minimal Telegram message update payload."""
    return {
        "update_id": update_id,
        "message": {
            "message_id": 42,
            "chat": {"id": chat_id, "type": "private"},
            "date": 1700000000,
            "text": text,
        },
    }


def test_webhook_rejects_missing_secret(spy_client, spy_dispatcher) -> None:
    """Webhook rejects requests without the shared secret header."""
    calls: list[object] = []

    async def handler(payload, bot) -> None:
        calls.append(payload)

    spy_dispatcher.register(UpdateKind.MESSAGE, handler)
    response = spy_client.post(WEBHOOK_PATH, json=_message_update())

    assert response.status_code == 403
    assert response.json() == {
        "error": {
            "code": "TELEGRAM_WEBHOOK_UNAUTHORIZED",
            "message": "Unauthorized",
        }
    }
    assert spy_dispatcher.seen == []
    assert calls == []


def test_webhook_rejects_invalid_secret(spy_client, spy_dispatcher, fake_telegram) -> None:
    """A wrong secret never reaches the dispatcher or the Bot API."""
    response = spy_client.post(
        WEBHOOK_PATH,
        headers={"X-Telegram-Bot-Api-Secret-Token": "wrong-secret"},
        json=_message_update(text="type"),
    )

    assert response.status_code == 403
    assert spy_dispatcher.seen == []
    assert fake_telegram.calls == []


def test_webhook_type_keyword_sends_chat_action_and_echoes_update(client, fake_telegram) -> None:
    """The 'type' demo keyword triggers exactly one typing action for the chat."""
    payload = _message_update(update_id=1, chat_id=7, text="type")

    response = client.post(WEBHOOK_PATH, headers=WEBHOOK_SECRET_HEADER, json=payload)

    assert response.status_code == 200
    assert response.json() == payload
    assert [name for name, _ in fake_telegram.calls] == ["sendChatAction"]
    assert fake_telegram.calls_to("sendChatAction") == [{"chat_id": "7", "action": "typing"}]
    assert fake_telegram.tokens == ["123456:test-token"]


def test_webhook_echoes_unknown_fields_verbatim(client) -> None:
    """Fields the models do not declare are echoed back untouched."""
    payload = _message_update(text="just chatting")
    payload["message"]["brand_new_field"] = {"nested": [1, 2, 3]}

    response = client.post(WEBHOOK_PATH, headers=WEBHOOK_SECRET_HEADER, json=payload)

    assert response.status_code == 200
    assert response.json() == payload


def test_webhook_ignores_update_without_known_variant(spy_client, spy_dispatcher, fake_telegram) -> None:
    """An update with no recognised variant is acknowledged without invoking a handler."""
    calls: list[object] = []

    async def handler(payload, bot) -> None:
        calls.append(payload)

    for kind in UpdateKind:
        spy_dispatcher.register(kind, handler)
    payload = {"update_id": 5, "purchased_paid_media": {"from": {"id": 1}, "paid_media_payload": "x"}}

    response = spy_client.post(WEBHOOK_PATH, headers=WEBHOOK_SECRET_HEADER, json=payload)

    assert response.status_code == 200
    assert response.json() == payload
    assert len(spy_dispatcher.seen) == 1
    assert calls == []
    assert fake_telegram.calls == []


def test_webhook_rejects_update_with_two_variants(spy_client, spy_dispatcher) -> None:
    """More than one populated variant is a malformed update."""
    payload = _message_update()
    payload["edited_message"] = payload["message"]

    response = spy_client.post(WEBHOOK_PATH, headers=WEBHOOK_SECRET_HEADER, json=payload)

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "TELEGRAM_UPDATE_INVALID"
    assert spy_dispatcher.seen == []


def test_webhook_rejects_malformed_json(spy_client, spy_dispatcher) -> None:
    response = spy_client.post(
        WEBHOOK_PATH,
        headers={**WEBHOOK_SECRET_HEADER, "Content-Type": "application/json"},
        content=b"{not json",
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "TELEGRAM_UPDATE_INVALID"
    assert spy_dispatcher.seen == []


def test_webhook_acknowledges_even_when_handler_fails(spy_client, spy_dispatcher) -> None:
    """Handler exceptions are logged, not surfaced to Telegram."""

    async def broken_handler(payload, bot) -> None:
        raise RuntimeError("handler exploded")

    spy_dispatcher.register(UpdateKind.MESSAGE, broken_handler)
    payload = _message_update()

    response = spy_client.post(WEBHOOK_PATH, headers=WEBHOOK_SECRET_HEADER, json=payload)

    assert response.status_code == 200
    assert response.json() == payload


def test_webhook_acknowledges_when_bot_api_call_fails(client, fake_telegram) -> None:
    """A failing outbound call inside a handler still yields a 200 echo."""
    fake_telegram.respond(
        "sendMessage",
        ok=False,
        error_code=400,
        description="Bad Request: chat not found",
    )
    payload = _message_update(text="message")

    response = client.post(WEBHOOK_PATH, headers=WEBHOOK_SECRET_HEADER, json=payload)

    assert response.status_code == 200
    assert response.json() == payload
    assert len(fake_telegram.calls_to("sendMessage")) == 1


def test_webhook_returns_503_when_credentials_missing(monkeypatch, fake_telegram) -> None:
    """Without a configured secret the webhook fails closed."""
    monkeypatch.setenv("ENVIRONMENT", "test")
    monkeypatch.setenv("TELEGRAM_BOT_TOKEN", "123456:test-token")
    monkeypatch.setenv("TELEGRAM_WEBHOOK_SECRET", "")
    get_settings.cache_clear()
    try:
        with TestClient(create_app(http_transport=fake_telegram.transport)) as client:
            response = client.post(WEBHOOK_PATH, headers=WEBHOOK_SECRET_HEADER, json=_message_update())
    finally:
        get_settings.cache_clear()

    assert response.status_code == 503
    assert response.json() == {
        "error": {
            "code": "TELEGRAM_BOT_MISCONFIGURED",
            "message": "TELEGRAM_WEBHOOK_SECRET is not configured",
        }
    }
    assert fake_telegram.calls == []


def test_webhook_path_is_configurable(monkeypatch, fake_telegram) -> None:
    monkeypatch.setenv("ENVIRONMENT", "test")
    monkeypatch.setenv("TELEGRAM_BOT_TOKEN", "123456:test-token")
    monkeypatch.setenv("TELEGRAM_WEBHOOK_SECRET", "S")
    monkeypatch.setenv("TELEGRAM_WEBHOOK_PATH", "hooks/telegram")
    get_settings.cache_clear()
    try:
        with TestClient(create_app(http_transport=fake_telegram.transport)) as client:
            moved = client.post("/hooks/telegram", headers=WEBHOOK_SECRET_HEADER, json=_message_update())
            old = client.post(WEBHOOK_PATH, headers=WEBHOOK_SECRET_HEADER, json=_message_update())
    finally:
        get_settings.cache_clear()

    assert moved.status_code == 200
    assert old.status_code == 404


def test_webhook_acknowledges_single_variant_update_that_fails_validation(
    spy_client, spy_dispatcher, fake_telegram
) -> None:
    """A well-formed update whose nested data does not fit the models is echoed, not rejected."""
    payload = _message_update(update_id=9, text="x")
    payload["message"]["entities"] = [{"type": "bold", "offset": 0}]

    response = spy_client.post(WEBHOOK_PATH, headers=WEBHOOK_SECRET_HEADER, json=payload)

    assert response.status_code == 200
    assert response.json() == payload
    assert spy_dispatcher.seen == []
    assert fake_telegram.calls == []


def test_webhook_rejects_json_that_is_not_an_object(spy_client, spy_dispatcher) -> None:
    response = spy_client.post(WEBHOOK_PATH, headers=WEBHOOK_SECRET_HEADER, json=[1, 2])

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "TELEGRAM_UPDATE_INVALID"
    assert spy_dispatcher.seen == []


def test_webhook_rejects_other_methods_as_plain_text(client) -> None:
    response = client.get(WEBHOOK_PATH)

    assert response.status_code == 405
    assert response.text == "Method not allowed"
    assert response.headers["content-type"].startswith("text/plain")
    assert response.headers["allow"] == "POST"
