from urllib.parse import parse_qs, urlsplit

import httpx
import pytest

from telegate.core.context import (
    BotEnvironment,
    EnvironmentNotInitializedError,
    reset_environment,
    set_environment,
)
from telegate.telegram.client import TelegramApiClient, build_url
from telegate.telegram.exceptions import TelegramApiError


def test_build_url_without_params() -> None:
    assert build_url("T", "getMe") == "https://api.telegram.org/botT/getMe"


def test_build_url_drops_null_params_and_encodes_the_rest() -> None:
    url = build_url(
        "T",
        "sendMessage",
        {"chat_id": 7, "text": "hi there & bye", "parse_mode": None, "protect_content": True},
    )

    parts = urlsplit(url)
    assert f"{parts.scheme}://{parts.netloc}{parts.path}" == "https://api.telegram.org/botT/sendMessage"
    assert parse_qs(parts.query) == {
        "chat_id": ["7"],
        "text": ["hi there & bye"],
        "protect_content": ["true"],
    }


def test_build_url_honours_custom_base_url() -> None:
    url = build_url("T", "getMe", base_url="http://localhost:8081/")

    assert url == "http://localhost:8081/botT/getMe"


@pytest.mark.asyncio
async def test_call_method_returns_result_verbatim(fake_telegram) -> None:
    """A successful envelope yields exactly its result value."""
    result = {"id": 1, "is_bot": True, "first_name": "Bot", "unknown": [1, 2]}
    fake_telegram.respond("getMe", result=result)

    async with httpx.AsyncClient(transport=fake_telegram.transport) as http_client:
        client = TelegramApiClient(http_client, token="T")
        assert await client.call_method("getMe") == result

    assert fake_telegram.calls == [("getMe", {})]


@pytest.mark.asyncio
async def test_call_method_raises_on_failed_envelope(fake_telegram) -> None:
    fake_telegram.respond(
        "sendMessage",
        ok=False,
        error_code=429,
        description="Too Many Requests: retry after 5",
        parameters={"retry_after": 5},
    )

    async with httpx.AsyncClient(transport=fake_telegram.transport) as http_client:
        client = TelegramApiClient(http_client, token="T")
        with pytest.raises(TelegramApiError) as exc_info:
            await client.call_method("sendMessage", {"chat_id": 7, "text": "x"})

    error = exc_info.value
    assert error.method == "sendMessage"
    assert error.description == "Too Many Requests: retry after 5"
    assert error.error_code == 429
    assert error.retry_after == 5
    assert error.migrate_to_chat_id is None
    assert "Too Many Requests" in str(error)


@pytest.mark.asyncio
async def test_call_method_raises_on_unreadable_body(fake_telegram) -> None:
    fake_telegram.respond_raw("getMe", httpx.Response(502, text="<html>Bad Gateway</html>"))

    async with httpx.AsyncClient(transport=fake_telegram.transport) as http_client:
        client = TelegramApiClient(http_client, token="T")
        with pytest.raises(TelegramApiError) as exc_info:
            await client.call_method("getMe")

    assert exc_info.value.error_code == 502


@pytest.mark.asyncio
async def test_call_method_propagates_transport_errors(fake_telegram) -> None:
    fake_telegram.unreachable = True

    async with httpx.AsyncClient(transport=fake_telegram.transport) as http_client:
        client = TelegramApiClient(http_client, token="T")
        with pytest.raises(httpx.ConnectError):
            await client.call_method("getMe")


@pytest.mark.asyncio
async def test_call_method_reads_token_from_bound_environment(fake_telegram) -> None:
    async with httpx.AsyncClient(transport=fake_telegram.transport) as http_client:
        client = TelegramApiClient(http_client)
        token = set_environment(BotEnvironment(secret="S", token="bound-token"))
        try:
            await client.call_method("close")
        finally:
            reset_environment(token)

    assert fake_telegram.tokens == ["bound-token"]


@pytest.mark.asyncio
async def test_call_method_without_environment_fails_before_any_request(fake_telegram) -> None:
    async with httpx.AsyncClient(transport=fake_telegram.transport) as http_client:
        client = TelegramApiClient(http_client)
        with pytest.raises(EnvironmentNotInitializedError):
            await client.call_method("getMe")

    assert fake_telegram.calls == []


@pytest.mark.asyncio
async def test_call_method_logs_without_token(fake_telegram, caplog) -> None:
    caplog.set_level("INFO", logger="telegate.telegram.client")

    async with httpx.AsyncClient(transport=fake_telegram.transport) as http_client:
        client = TelegramApiClient(http_client, token="secret-token-value")
        await client.call_method("getMe")

    messages = [record.getMessage() for record in caplog.records]
    assert any("event=telegram.api.call" in message for message in messages)
    assert all("secret-token-value" not in message for message in messages)
