from telegate.telegram.types.base import TelegramObject


class User(TelegramObject):
    """A Telegram user or bot."""

    id: int
    is_bot: bool
    first_name: str
    last_name: str | None = None
    username: str | None = None
    language_code: str | None = None
    is_premium: bool | None = None
    added_to_attachment_menu: bool | None = None
    can_join_groups: bool | None = None
    can_read_all_group_messages: bool | None = None
    supports_inline_queries: bool | None = None
    can_connect_to_business: bool | None = None
    has_main_web_app: bool | None = None

    @property
    def full_name(self) -> str:
        if self.last_name:
            return f"{self.first_name} {self.last_name}"
        return self.first_name


class WebAppInfo(TelegramObject):
    url: str


class LoginUrl(TelegramObject):
    url: str
    forward_text: str | None = None
    bot_username: str | None = None
    request_write_access: bool | None = None
