from telegate.telegram.types.webhook import ResponseParameters


class TelegramApiError(Exception):
    """A Bot API call answered with ``ok: false`` or an unreadable body."""

    def __init__(
        self,
        method: str,
        description: str,
        *,
        error_code: int | None = None,
        parameters: ResponseParameters | None = None,
    ) -> None:
        super().__init__(f"Telegram {method} failed: {description}")
        self.method = method
        self.description = description
        self.error_code = error_code
        self.parameters = parameters

    @property
    def retry_after(self) -> int | None:
        return self.parameters.retry_after if self.parameters is not None else None

    @property
    def migrate_to_chat_id(self) -> int | None:
        return self.parameters.migrate_to_chat_id if self.parameters is not None else None
