"""Receiving updates: long polling and webhook management."""

from typing import Any, ClassVar

from telegate.telegram.methods.base import TelegramMethod
from telegate.telegram.types.update import Update
from telegate.telegram.types.webhook import WebhookInfo


class GetUpdates(TelegramMethod):
    api_method: ClassVar[str] = "getUpdates"
    returning: ClassVar[Any] = list[Update]

    offset: int | None = None
    limit: int | None = None
    timeout: int | None = None
    allowed_updates: list[str] | None = None


class SetWebhook(TelegramMethod):
    """Point Telegram at an HTTPS endpoint; an empty ``url`` removes the webhook."""

    api_method: ClassVar[str] = "setWebhook"
    returning: ClassVar[Any] = bool

    url: str
    certificate: str | None = None
    ip_address: str | None = None
    max_connections: int | None = None
    allowed_updates: list[str] | None = None
    drop_pending_updates: bool | None = None
    secret_token: str | None = None


class DeleteWebhook(TelegramMethod):
    api_method: ClassVar[str] = "deleteWebhook"
    returning: ClassVar[Any] = bool

    drop_pending_updates: bool | None = None


class GetWebhookInfo(TelegramMethod):
    api_method: ClassVar[str] = "getWebhookInfo"
    returning: ClassVar[Any] = WebhookInfo
