import json
import os
from collections.abc import Generator
from typing import Any

import httpx
import pytest
from fastapi.testclient import TestClient

# Ensure settings are resolved from test env before app modules import.
os.environ["ENVIRONMENT"] = "test"
os.environ["TELEGRAM_BOT_TOKEN"] = "123456:test-token"
os.environ["TELEGRAM_WEBHOOK_SECRET"] = "S"
os.environ["LOG_LEVEL"] = "INFO"

from telegate.core.config import get_settings  # noqa: E402
from telegate.dispatch.dispatcher import UpdateDispatcher  # noqa: E402
from telegate.main import create_app  # noqa: E402

TEST_TOKEN = "123456:test-token"
TEST_SECRET = "S"


class FakeTelegramApi:
    """In-process stand-in for the Bot API, mounted as an httpx transport.

    Records each call as ``(method, params)`` and answers from ``responses``,
    defaulting to ``{"ok": true, "result": true}``.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[str, dict[str, str]]] = []
        self.tokens: list[str] = []
        self.responses: dict[str, Any] = {}
        self.unreachable = False

    def respond(self, method: str, *, result: Any = True, **envelope: Any) -> None:
        if envelope.get("ok") is False:
            self.responses[method] = envelope
        else:
            self.responses[method] = {"ok": True, "result": result}

    def respond_raw(self, method: str, response: httpx.Response) -> None:
        self.responses[method] = response

    def calls_to(self, method: str) -> list[dict[str, str]]:
        return [params for name, params in self.calls if name == method]

    def handle(self, request: httpx.Request) -> httpx.Response:
        if self.unreachable:
            raise httpx.ConnectError("connection refused", request=request)
        _, bot_segment, method = request.url.path.split("/", 2)
        self.tokens.append(bot_segment.removeprefix("bot"))
        self.calls.append((method, dict(request.url.params)))
        answer = self.responses.get(method, {"ok": True, "result": True})
        if isinstance(answer, httpx.Response):
            return answer
        status_code = answer.get("error_code", 200) if answer.get("ok") is False else 200
        return httpx.Response(status_code, content=json.dumps(answer).encode("utf-8"))

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)


class RecordingDispatcher(UpdateDispatcher):
    """Dispatcher spy that remembers every update it was asked to route."""

    def __init__(self) -> None:
        super().__init__()
        self.seen: list[Any] = []

    async def dispatch(self, update, bot):
        self.seen.append(update)
        return await super().dispatch(update, bot)


@pytest.fixture
def fake_telegram() -> FakeTelegramApi:
    return FakeTelegramApi()


@pytest.fixture
def app_env(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Pin the settings every app fixture starts from."""
    monkeypatch.setenv("ENVIRONMENT", "test")
    monkeypatch.setenv("TELEGRAM_BOT_TOKEN", TEST_TOKEN)
    monkeypatch.setenv("TELEGRAM_WEBHOOK_SECRET", TEST_SECRET)
    monkeypatch.delenv("TELEGRAM_API_BASE_URL", raising=False)
    monkeypatch.delenv("TELEGRAM_WEBHOOK_PATH", raising=False)
    monkeypatch.delenv("TELEGRAM_WEBHOOK_BASE_URL", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def client(app_env, fake_telegram: FakeTelegramApi) -> Generator[TestClient, None, None]:
    with TestClient(create_app(http_transport=fake_telegram.transport)) as test_client:
        yield test_client


@pytest.fixture
def spy_dispatcher() -> RecordingDispatcher:
    return RecordingDispatcher()


@pytest.fixture
def spy_client(
    app_env,
    fake_telegram: FakeTelegramApi,
    spy_dispatcher: RecordingDispatcher,
) -> Generator[TestClient, None, None]:
    app = create_app(dispatcher=spy_dispatcher, http_transport=fake_telegram.transport)
    with TestClient(app) as test_client:
        yield test_client
