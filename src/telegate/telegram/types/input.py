"""Objects a bot sends: media descriptions and sticker definitions.

File fields take a ``file_id`` already on Telegram's servers or an HTTP URL;
multipart uploads are not supported by this client.
"""

from typing import Annotated, Literal, Union

from pydantic import Field

from telegate.telegram.types.base import TelegramObject
from telegate.telegram.types.formatting import MessageEntity
from telegate.telegram.types.media import MaskPosition


class _InputMedia(TelegramObject):
    media: str
    caption: str | None = None
    parse_mode: str | None = None
    caption_entities: list[MessageEntity] | None = None


class InputMediaPhoto(_InputMedia):
    type: Literal["photo"] = "photo"
    show_caption_above_media: bool | None = None
    has_spoiler: bool | None = None


class InputMediaVideo(_InputMedia):
    type: Literal["video"] = "video"
    thumbnail: str | None = None
    show_caption_above_media: bool | None = None
    width: int | None = None
    height: int | None = None
    duration: int | None = None
    supports_streaming: bool | None = None
    has_spoiler: bool | None = None


class InputMediaAnimation(_InputMedia):
    type: Literal["animation"] = "animation"
    thumbnail: str | None = None
    show_caption_above_media: bool | None = None
    width: int | None = None
    height: int | None = None
    duration: int | None = None
    has_spoiler: bool | None = None


class InputMediaAudio(_InputMedia):
    type: Literal["audio"] = "audio"
    thumbnail: str | None = None
    duration: int | None = None
    performer: str | None = None
    title: str | None = None


class InputMediaDocument(_InputMedia):
    type: Literal["document"] = "document"
    thumbnail: str | None = None
    disable_content_type_detection: bool | None = None


InputMedia = Annotated[
    Union[
        InputMediaPhoto,
        InputMediaVideo,
        InputMediaAnimation,
        InputMediaAudio,
        InputMediaDocument,
    ],
    Field(discriminator="type"),
]


class InputPaidMediaPhoto(TelegramObject):
    type: Literal["photo"] = "photo"
    media: str


class InputPaidMediaVideo(TelegramObject):
    type: Literal["video"] = "video"
    media: str
    thumbnail: str | None = None
    width: int | None = None
    height: int | None = None
    duration: int | None = None
    supports_streaming: bool | None = None


InputPaidMedia = Annotated[
    Union[InputPaidMediaPhoto, InputPaidMediaVideo],
    Field(discriminator="type"),
]


class InputSticker(TelegramObject):
    sticker: str
    format: Literal["static", "animated", "video"]
    emoji_list: list[str]
    mask_position: MaskPosition | None = None
    keywords: list[str] | None = None
