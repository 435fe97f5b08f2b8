"""Sending stickers and managing sticker sets."""

from typing import Any, ClassVar, Literal

from telegate.telegram.methods.base import ChatId, TelegramMethod
from telegate.telegram.types.formatting import ReplyParameters
from telegate.telegram.types.input import InputSticker
from telegate.telegram.types.markup import ReplyMarkup
from telegate.telegram.types.media import File, MaskPosition, Sticker, StickerSet
from telegate.telegram.types.message import Message

StickerFormat = Literal["static", "animated", "video"]


class SendSticker(TelegramMethod):
    api_method: ClassVar[str] = "sendSticker"
    returning: ClassVar[Any] = Message

    chat_id: ChatId
    sticker: str
    business_connection_id: str | None = None
    message_thread_id: int | None = None
    emoji: str | None = None
    disable_notification: bool | None = None
    protect_content: bool | None = None
    message_effect_id: str | None = None
    reply_parameters: ReplyParameters | None = None
    reply_markup: ReplyMarkup | None = None


class GetStickerSet(TelegramMethod):
    api_method: ClassVar[str] = "getStickerSet"
    returning: ClassVar[Any] = StickerSet

    name: str


class GetCustomEmojiStickers(TelegramMethod):
    api_method: ClassVar[str] = "getCustomEmojiStickers"
    returning: ClassVar[Any] = list[Sticker]

    custom_emoji_ids: list[str]


class UploadStickerFile(TelegramMethod):
    api_method: ClassVar[str] = "uploadStickerFile"
    returning: ClassVar[Any] = File

    user_id: int
    sticker: str
    sticker_format: StickerFormat


class CreateNewStickerSet(TelegramMethod):
    api_method: ClassVar[str] = "createNewStickerSet"
    returning: ClassVar[Any] = bool

    user_id: int
    name: str
    title: str
    stickers: list[InputSticker]
    sticker_type: Literal["regular", "mask", "custom_emoji"] | None = None
    needs_repainting: bool | None = None


class AddStickerToSet(TelegramMethod):
    api_method: ClassVar[str] = "addStickerToSet"
    returning: ClassVar[Any] = bool

    user_id: int
    name: str
    sticker: InputSticker


class SetStickerPositionInSet(TelegramMethod):
    api_method: ClassVar[str] = "setStickerPositionInSet"
    returning: ClassVar[Any] = bool

    sticker: str
    position: int


class DeleteStickerFromSet(TelegramMethod):
    api_method: ClassVar[str] = "deleteStickerFromSet"
    returning: ClassVar[Any] = bool

    sticker: str


class ReplaceStickerInSet(TelegramMethod):
    api_method: ClassVar[str] = "replaceStickerInSet"
    returning: ClassVar[Any] = bool

    user_id: int
    name: str
    old_sticker: str
    sticker: InputSticker


class SetStickerEmojiList(TelegramMethod):
    api_method: ClassVar[str] = "setStickerEmojiList"
    returning: ClassVar[Any] = bool

    sticker: str
    emoji_list: list[str]


class SetStickerKeywords(TelegramMethod):
    api_method: ClassVar[str] = "setStickerKeywords"
    returning: ClassVar[Any] = bool

    sticker: str
    keywords: list[str] | None = None


class SetStickerMaskPosition(TelegramMethod):
    api_method: ClassVar[str] = "setStickerMaskPosition"
    returning: ClassVar[Any] = bool

    sticker: str
    mask_position: MaskPosition | None = None


class SetStickerSetTitle(TelegramMethod):
    api_method: ClassVar[str] = "setStickerSetTitle"
    returning: ClassVar[Any] = bool

    name: str
    title: str


class SetStickerSetThumbnail(TelegramMethod):
    api_method: ClassVar[str] = "setStickerSetThumbnail"
    returning: ClassVar[Any] = bool

    name: str
    user_id: int
    format: StickerFormat
    thumbnail: str | None = None


class SetCustomEmojiStickerSetThumbnail(TelegramMethod):
    api_method: ClassVar[str] = "setCustomEmojiStickerSetThumbnail"
    returning: ClassVar[Any] = bool

    name: str
    custom_emoji_id: str | None = None


class DeleteStickerSet(TelegramMethod):
    api_method: ClassVar[str] = "deleteStickerSet"
    returning: ClassVar[Any] = bool

    name: str
