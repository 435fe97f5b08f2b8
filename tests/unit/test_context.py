import asyncio

import pytest

from telegate.core.config import Settings
from telegate.core.context import (
    BotEnvironment,
    EnvironmentNotInitializedError,
    get_environment,
    reset_environment,
    set_environment,
)


def test_environment_is_unset_outside_a_request():
    with pytest.raises(EnvironmentNotInitializedError):
        get_environment()


def test_reset_restores_previous_binding():
    outer = set_environment(BotEnvironment(secret="a", token="A"))
    inner = set_environment(BotEnvironment(secret="b", token="B"))
    assert get_environment().token == "B"

    reset_environment(inner)
    assert get_environment().token == "A"

    reset_environment(outer)
    with pytest.raises(EnvironmentNotInitializedError):
        get_environment()


async def test_concurrent_requests_see_their_own_environment():
    """Interleaved tasks never observe each other's credentials."""

    async def handle(token_value):
        token = set_environment(BotEnvironment(secret="s", token=token_value))
        try:
            await asyncio.sleep(0)
            first = get_environment().token
            await asyncio.sleep(0)
            return first, get_environment().token
        finally:
            reset_environment(token)

    results = await asyncio.gather(*(handle(f"token-{index}") for index in range(5)))

    assert results == [(f"token-{index}", f"token-{index}") for index in range(5)]


def test_repr_masks_credentials():
    text = repr(BotEnvironment(secret="very-secret", token="123:abc"))

    assert "very-secret" not in text
    assert "123:abc" not in text


def test_from_settings_requires_both_credentials():
    settings = Settings(ENVIRONMENT="test", TELEGRAM_BOT_TOKEN="T", TELEGRAM_WEBHOOK_SECRET="")

    with pytest.raises(EnvironmentNotInitializedError, match="TELEGRAM_WEBHOOK_SECRET"):
        BotEnvironment.from_settings(settings)


def test_from_settings_unwraps_secrets():
    settings = Settings(ENVIRONMENT="test", TELEGRAM_BOT_TOKEN="T", TELEGRAM_WEBHOOK_SECRET="S")

    assert BotEnvironment.from_settings(settings) == BotEnvironment(secret="S", token="T")
