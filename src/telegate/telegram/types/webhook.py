from typing import Any

from telegate.telegram.types.base import TelegramObject


class WebhookInfo(TelegramObject):
    url: str
    has_custom_certificate: bool
    pending_update_count: int
    ip_address: str | None = None
    last_error_date: int | None = None
    last_error_message: str | None = None
    last_synchronization_error_date: int | None = None
    max_connections: int | None = None
    allowed_updates: list[str] | None = None


class ResponseParameters(TelegramObject):
    """Hints attached to a failed call on how it could be retried."""

    migrate_to_chat_id: int | None = None
    retry_after: int | None = None


class ApiResponse(TelegramObject):
    """The ``{ok, result, description}`` envelope every Bot API call returns."""

    ok: bool
    result: Any = None
    description: str | None = None
    error_code: int | None = None
    parameters: ResponseParameters | None = None
