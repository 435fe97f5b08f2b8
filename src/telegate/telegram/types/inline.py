"""Inline mode: incoming queries and the results a bot answers with."""

from typing import Literal, Union

from pydantic import Field

from telegate.telegram.types.base import TelegramObject
from telegate.telegram.types.formatting import LinkPreviewOptions, MessageEntity
from telegate.telegram.types.markup import InlineKeyboardMarkup
from telegate.telegram.types.media import Location
from telegate.telegram.types.payments import LabeledPrice
from telegate.telegram.types.user import User, WebAppInfo


class InlineQuery(TelegramObject):
    id: str
    from_user: User = Field(alias="from")
    query: str
    offset: str
    chat_type: str | None = None
    location: Location | None = None


class ChosenInlineResult(TelegramObject):
    result_id: str
    from_user: User = Field(alias="from")
    query: str
    location: Location | None = None
    inline_message_id: str | None = None


class InlineQueryResultsButton(TelegramObject):
    text: str
    web_app: WebAppInfo | None = None
    start_parameter: str | None = None


class SentWebAppMessage(TelegramObject):
    inline_message_id: str | None = None


class InputTextMessageContent(TelegramObject):
    message_text: str
    parse_mode: str | None = None
    entities: list[MessageEntity] | None = None
    link_preview_options: LinkPreviewOptions | None = None


class InputLocationMessageContent(TelegramObject):
    latitude: float
    longitude: float
    horizontal_accuracy: float | None = None
    live_period: int | None = None
    heading: int | None = None
    proximity_alert_radius: int | None = None


class InputVenueMessageContent(TelegramObject):
    latitude: float
    longitude: float
    title: str
    address: str
    foursquare_id: str | None = None
    foursquare_type: str | None = None
    google_place_id: str | None = None
    google_place_type: str | None = None


class InputContactMessageContent(TelegramObject):
    phone_number: str
    first_name: str
    last_name: str | None = None
    vcard: str | None = None


class InputInvoiceMessageContent(TelegramObject):
    title: str
    description: str
    payload: str
    currency: str
    prices: list[LabeledPrice]
    provider_token: str | None = None
    max_tip_amount: int | None = None
    suggested_tip_amounts: list[int] | None = None
    provider_data: str | None = None
    photo_url: str | None = None
    need_name: bool | None = None
    need_phone_number: bool | None = None
    need_email: bool | None = None
    need_shipping_address: bool | None = None
    is_flexible: bool | None = None


InputMessageContent = Union[
    InputTextMessageContent,
    InputLocationMessageContent,
    InputVenueMessageContent,
    InputContactMessageContent,
    InputInvoiceMessageContent,
]


class _InlineQueryResult(TelegramObject):
    id: str
    reply_markup: InlineKeyboardMarkup | None = None


class _CaptionedResult(_InlineQueryResult):
    caption: str | None = None
    parse_mode: str | None = None
    caption_entities: list[MessageEntity] | None = None
    input_message_content: InputMessageContent | None = None


class InlineQueryResultArticle(_InlineQueryResult):
    type: Literal["article"] = "article"
    title: str
    input_message_content: InputMessageContent
    url: str | None = None
    description: str | None = None
    thumbnail_url: str | None = None
    thumbnail_width: int | None = None
    thumbnail_height: int | None = None


class InlineQueryResultPhoto(_CaptionedResult):
    type: Literal["photo"] = "photo"
    photo_url: str
    thumbnail_url: str
    photo_width: int | None = None
    photo_height: int | None = None
    title: str | None = None
    description: str | None = None
    show_caption_above_media: bool | None = None


class InlineQueryResultGif(_CaptionedResult):
    type: Literal["gif"] = "gif"
    gif_url: str
    thumbnail_url: str
    gif_width: int | None = None
    gif_height: int | None = None
    gif_duration: int | None = None
    thumbnail_mime_type: str | None = None
    title: str | None = None


class InlineQueryResultMpeg4Gif(_CaptionedResult):
    type: Literal["mpeg4_gif"] = "mpeg4_gif"
    mpeg4_url: str
    thumbnail_url: str
    mpeg4_width: int | None = None
    mpeg4_height: int | None = None
    mpeg4_duration: int | None = None
    title: str | None = None


class InlineQueryResultVideo(_CaptionedResult):
    type: Literal["video"] = "video"
    video_url: str
    mime_type: str
    thumbnail_url: str
    title: str
    video_width: int | None = None
    video_height: int | None = None
    video_duration: int | None = None
    description: str | None = None


class InlineQueryResultAudio(_CaptionedResult):
    type: Literal["audio"] = "audio"
    audio_url: str
    title: str
    performer: str | None = None
    audio_duration: int | None = None


class InlineQueryResultVoice(_CaptionedResult):
    type: Literal["voice"] = "voice"
    voice_url: str
    title: str
    voice_duration: int | None = None


class InlineQueryResultDocument(_CaptionedResult):
    type: Literal["document"] = "document"
    title: str
    document_url: str
    mime_type: str
    description: str | None = None
    thumbnail_url: str | None = None


class InlineQueryResultLocation(_InlineQueryResult):
    type: Literal["location"] = "location"
    latitude: float
    longitude: float
    title: str
    horizontal_accuracy: float | None = None
    live_period: int | None = None
    heading: int | None = None
    proximity_alert_radius: int | None = None
    input_message_content: InputMessageContent | None = None
    thumbnail_url: str | None = None


class InlineQueryResultVenue(_InlineQueryResult):
    type: Literal["venue"] = "venue"
    latitude: float
    longitude: float
    title: str
    address: str
    foursquare_id: str | None = None
    foursquare_type: str | None = None
    google_place_id: str | None = None
    google_place_type: str | None = None
    input_message_content: InputMessageContent | None = None
    thumbnail_url: str | None = None


class InlineQueryResultContact(_InlineQueryResult):
    type: Literal["contact"] = "contact"
    phone_number: str
    first_name: str
    last_name: str | None = None
    vcard: str | None = None
    input_message_content: InputMessageContent | None = None
    thumbnail_url: str | None = None


class InlineQueryResultGame(_InlineQueryResult):
    type: Literal["game"] = "game"
    game_short_name: str


class InlineQueryResultCachedPhoto(_CaptionedResult):
    type: Literal["photo"] = "photo"
    photo_file_id: str
    title: str | None = None
    description: str | None = None


class InlineQueryResultCachedSticker(_InlineQueryResult):
    type: Literal["sticker"] = "sticker"
    sticker_file_id: str
    input_message_content: InputMessageContent | None = None


class InlineQueryResultCachedDocument(_CaptionedResult):
    type: Literal["document"] = "document"
    title: str
    document_file_id: str
    description: str | None = None


class InlineQueryResultCachedVoice(_CaptionedResult):
    type: Literal["voice"] = "voice"
    voice_file_id: str
    title: str


class InlineQueryResultCachedAudio(_CaptionedResult):
    type: Literal["audio"] = "audio"
    audio_file_id: str


# Cached and URL variants share ``type`` values, so no discriminator applies.
InlineQueryResult = Union[
    InlineQueryResultArticle,
    InlineQueryResultPhoto,
    InlineQueryResultGif,
    InlineQueryResultMpeg4Gif,
    InlineQueryResultVideo,
    InlineQueryResultAudio,
    InlineQueryResultVoice,
    InlineQueryResultDocument,
    InlineQueryResultLocation,
    InlineQueryResultVenue,
    InlineQueryResultContact,
    InlineQueryResultGame,
    InlineQueryResultCachedPhoto,
    InlineQueryResultCachedSticker,
    InlineQueryResultCachedDocument,
    InlineQueryResultCachedVoice,
    InlineQueryResultCachedAudio,
]
