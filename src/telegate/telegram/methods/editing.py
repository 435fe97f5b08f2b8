"""Editing and deleting messages that were already sent."""

from typing import Any, ClassVar, Union

from telegate.telegram.methods.base import ChatId, TelegramMethod
from telegate.telegram.types.formatting import LinkPreviewOptions, MessageEntity
from telegate.telegram.types.input import InputMedia
from telegate.telegram.types.markup import InlineKeyboardMarkup
from telegate.telegram.types.message import Message
from telegate.telegram.types.poll import Poll


class _EditMethod(TelegramMethod):
    """Targets either ``chat_id`` + ``message_id`` or an ``inline_message_id``.

    Inline messages are edited in place and the call returns ``True``
    instead of the edited message.
    """

    returning: ClassVar[Any] = Union[Message, bool]

    business_connection_id: str | None = None
    chat_id: ChatId | None = None
    message_id: int | None = None
    inline_message_id: str | None = None
    reply_markup: InlineKeyboardMarkup | None = None


class EditMessageText(_EditMethod):
    api_method: ClassVar[str] = "editMessageText"

    text: str
    parse_mode: str | None = None
    entities: list[MessageEntity] | None = None
    link_preview_options: LinkPreviewOptions | None = None


class EditMessageCaption(_EditMethod):
    api_method: ClassVar[str] = "editMessageCaption"

    caption: str | None = None
    parse_mode: str | None = None
    caption_entities: list[MessageEntity] | None = None
    show_caption_above_media: bool | None = None


class EditMessageMedia(_EditMethod):
    api_method: ClassVar[str] = "editMessageMedia"

    media: InputMedia


class EditMessageLiveLocation(_EditMethod):
    api_method: ClassVar[str] = "editMessageLiveLocation"

    latitude: float
    longitude: float
    live_period: int | None = None
    horizontal_accuracy: float | None = None
    heading: int | None = None
    proximity_alert_radius: int | None = None


class StopMessageLiveLocation(_EditMethod):
    api_method: ClassVar[str] = "stopMessageLiveLocation"


class EditMessageReplyMarkup(_EditMethod):
    api_method: ClassVar[str] = "editMessageReplyMarkup"


class StopPoll(TelegramMethod):
    api_method: ClassVar[str] = "stopPoll"
    returning: ClassVar[Any] = Poll

    chat_id: ChatId
    message_id: int
    business_connection_id: str | None = None
    reply_markup: InlineKeyboardMarkup | None = None


class DeleteMessage(TelegramMethod):
    api_method: ClassVar[str] = "deleteMessage"
    returning: ClassVar[Any] = bool

    chat_id: ChatId
    message_id: int


class DeleteMessages(TelegramMethod):
    api_method: ClassVar[str] = "deleteMessages"
    returning: ClassVar[Any] = bool

    chat_id: ChatId
    message_ids: list[int]
