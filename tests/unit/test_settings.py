import pytest
from pydantic import ValidationError

from telegate.core.config import Settings


def test_production_requires_bot_token():
    with pytest.raises(ValidationError, match="TELEGRAM_BOT_TOKEN"):
        Settings(ENVIRONMENT="production", TELEGRAM_BOT_TOKEN="", TELEGRAM_WEBHOOK_SECRET="S")


def test_production_requires_webhook_secret():
    with pytest.raises(ValidationError, match="TELEGRAM_WEBHOOK_SECRET"):
        Settings(ENVIRONMENT="production", TELEGRAM_BOT_TOKEN="T", TELEGRAM_WEBHOOK_SECRET=" ")


def test_local_environment_allows_missing_credentials():
    settings = Settings(ENVIRONMENT="local", TELEGRAM_BOT_TOKEN="", TELEGRAM_WEBHOOK_SECRET="")

    assert settings.is_local is True
    assert settings.telegram_bot_token is None
    assert settings.telegram_webhook_secret is None


def test_api_base_url_loses_trailing_slash():
    settings = Settings(ENVIRONMENT="test", TELEGRAM_API_BASE_URL="http://localhost:8081/")

    assert settings.telegram_api_base_url == "http://localhost:8081"


def test_webhook_path_is_made_absolute():
    settings = Settings(ENVIRONMENT="test", TELEGRAM_WEBHOOK_PATH="hooks/telegram")

    assert settings.telegram_webhook_path == "/hooks/telegram"


def test_api_timeout_must_be_positive():
    with pytest.raises(ValidationError):
        Settings(ENVIRONMENT="test", TELEGRAM_API_TIMEOUT_SECONDS=0)


def test_secrets_are_masked_in_repr():
    settings = Settings(ENVIRONMENT="test", TELEGRAM_BOT_TOKEN="123:abc", TELEGRAM_WEBHOOK_SECRET="S")

    assert "123:abc" not in repr(settings)
