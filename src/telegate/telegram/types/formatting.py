from telegate.telegram.types.base import TelegramObject
from telegate.telegram.types.user import User


class MessageEntity(TelegramObject):
    """A special entity in text: hashtag, link, bold span and so on."""

    type: str
    offset: int
    length: int
    url: str | None = None
    user: User | None = None
    language: str | None = None
    custom_emoji_id: str | None = None


class TextQuote(TelegramObject):
    text: str
    position: int
    entities: list[MessageEntity] | None = None
    is_manual: bool | None = None


class LinkPreviewOptions(TelegramObject):
    is_disabled: bool | None = None
    url: str | None = None
    prefer_small_media: bool | None = None
    prefer_large_media: bool | None = None
    show_above_text: bool | None = None


class ReplyParameters(TelegramObject):
    """Describes the message being replied to."""

    message_id: int
    chat_id: int | str | None = None
    allow_sending_without_reply: bool | None = None
    quote: str | None = None
    quote_parse_mode: str | None = None
    quote_entities: list[MessageEntity] | None = None
    quote_position: int | None = None
