"""Sending, forwarding and copying messages."""

from typing import Any, ClassVar

from telegate.telegram.methods.base import ChatId, TelegramMethod
from telegate.telegram.types.chat import ReactionType
from telegate.telegram.types.formatting import LinkPreviewOptions, MessageEntity, ReplyParameters
from telegate.telegram.types.input import InputMedia, InputPaidMedia
from telegate.telegram.types.markup import ReplyMarkup
from telegate.telegram.types.media import File, UserProfilePhotos
from telegate.telegram.types.message import Message, MessageId
from telegate.telegram.types.poll import InputPollOption
from telegate.telegram.types.user import User


class GetMe(TelegramMethod):
    api_method: ClassVar[str] = "getMe"
    returning: ClassVar[Any] = User


class LogOut(TelegramMethod):
    api_method: ClassVar[str] = "logOut"
    returning: ClassVar[Any] = bool


class Close(TelegramMethod):
    api_method: ClassVar[str] = "close"
    returning: ClassVar[Any] = bool


class _SendMethod(TelegramMethod):
    """Options shared by every method that posts a new message."""

    returning: ClassVar[Any] = Message

    chat_id: ChatId
    business_connection_id: str | None = None
    message_thread_id: int | None = None
    disable_notification: bool | None = None
    protect_content: bool | None = None
    message_effect_id: str | None = None
    reply_parameters: ReplyParameters | None = None
    reply_markup: ReplyMarkup | None = None


class _CaptionedSendMethod(_SendMethod):
    caption: str | None = None
    parse_mode: str | None = None
    caption_entities: list[MessageEntity] | None = None


class SendMessage(_SendMethod):
    api_method: ClassVar[str] = "sendMessage"

    text: str
    parse_mode: str | None = None
    entities: list[MessageEntity] | None = None
    link_preview_options: LinkPreviewOptions | None = None


class ForwardMessage(TelegramMethod):
    api_method: ClassVar[str] = "forwardMessage"
    returning: ClassVar[Any] = Message

    chat_id: ChatId
    from_chat_id: ChatId
    message_id: int
    message_thread_id: int | None = None
    disable_notification: bool | None = None
    protect_content: bool | None = None


class ForwardMessages(TelegramMethod):
    api_method: ClassVar[str] = "forwardMessages"
    returning: ClassVar[Any] = list[MessageId]

    chat_id: ChatId
    from_chat_id: ChatId
    message_ids: list[int]
    message_thread_id: int | None = None
    disable_notification: bool | None = None
    protect_content: bool | None = None


class CopyMessage(TelegramMethod):
    api_method: ClassVar[str] = "copyMessage"
    returning: ClassVar[Any] = MessageId

    chat_id: ChatId
    from_chat_id: ChatId
    message_id: int
    message_thread_id: int | None = None
    caption: str | None = None
    parse_mode: str | None = None
    caption_entities: list[MessageEntity] | None = None
    show_caption_above_media: bool | None = None
    disable_notification: bool | None = None
    protect_content: bool | None = None
    reply_parameters: ReplyParameters | None = None
    reply_markup: ReplyMarkup | None = None


class CopyMessages(TelegramMethod):
    api_method: ClassVar[str] = "copyMessages"
    returning: ClassVar[Any] = list[MessageId]

    chat_id: ChatId
    from_chat_id: ChatId
    message_ids: list[int]
    message_thread_id: int | None = None
    disable_notification: bool | None = None
    protect_content: bool | None = None
    remove_caption: bool | None = None


class SendPhoto(_CaptionedSendMethod):
    api_method: ClassVar[str] = "sendPhoto"

    photo: str
    show_caption_above_media: bool | None = None
    has_spoiler: bool | None = None


class SendAudio(_CaptionedSendMethod):
    api_method: ClassVar[str] = "sendAudio"

    audio: str
    duration: int | None = None
    performer: str | None = None
    title: str | None = None
    thumbnail: str | None = None


class SendDocument(_CaptionedSendMethod):
    api_method: ClassVar[str] = "sendDocument"

    document: str
    thumbnail: str | None = None
    disable_content_type_detection: bool | None = None


class SendVideo(_CaptionedSendMethod):
    api_method: ClassVar[str] = "sendVideo"

    video: str
    duration: int | None = None
    width: int | None = None
    height: int | None = None
    thumbnail: str | None = None
    show_caption_above_media: bool | None = None
    has_spoiler: bool | None = None
    supports_streaming: bool | None = None


class SendAnimation(_CaptionedSendMethod):
    api_method: ClassVar[str] = "sendAnimation"

    animation: str
    duration: int | None = None
    width: int | None = None
    height: int | None = None
    thumbnail: str | None = None
    show_caption_above_media: bool | None = None
    has_spoiler: bool | None = None


class SendVoice(_CaptionedSendMethod):
    api_method: ClassVar[str] = "sendVoice"

    voice: str
    duration: int | None = None


class SendVideoNote(_SendMethod):
    api_method: ClassVar[str] = "sendVideoNote"

    video_note: str
    duration: int | None = None
    length: int | None = None
    thumbnail: str | None = None


class SendPaidMedia(_CaptionedSendMethod):
    api_method: ClassVar[str] = "sendPaidMedia"

    star_count: int
    media: list[InputPaidMedia]
    payload: str | None = None
    show_caption_above_media: bool | None = None


class SendMediaGroup(TelegramMethod):
    api_method: ClassVar[str] = "sendMediaGroup"
    returning: ClassVar[Any] = list[Message]

    chat_id: ChatId
    media: list[InputMedia]
    business_connection_id: str | None = None
    message_thread_id: int | None = None
    disable_notification: bool | None = None
    protect_content: bool | None = None
    message_effect_id: str | None = None
    reply_parameters: ReplyParameters | None = None


class SendLocation(_SendMethod):
    api_method: ClassVar[str] = "sendLocation"

    latitude: float
    longitude: float
    horizontal_accuracy: float | None = None
    live_period: int | None = None
    heading: int | None = None
    proximity_alert_radius: int | None = None


class SendVenue(_SendMethod):
    api_method: ClassVar[str] = "sendVenue"

    latitude: float
    longitude: float
    title: str
    address: str
    foursquare_id: str | None = None
    foursquare_type: str | None = None
    google_place_id: str | None = None
    google_place_type: str | None = None


class SendContact(_SendMethod):
    api_method: ClassVar[str] = "sendContact"

    phone_number: str
    first_name: str
    last_name: str | None = None
    vcard: str | None = None


class SendPoll(_SendMethod):
    api_method: ClassVar[str] = "sendPoll"

    question: str
    options: list[InputPollOption]
    question_parse_mode: str | None = None
    question_entities: list[MessageEntity] | None = None
    is_anonymous: bool | None = None
    type: str | None = None
    allows_multiple_answers: bool | None = None
    correct_option_id: int | None = None
    explanation: str | None = None
    explanation_parse_mode: str | None = None
    explanation_entities: list[MessageEntity] | None = None
    open_period: int | None = None
    close_date: int | None = None
    is_closed: bool | None = None


class SendDice(_SendMethod):
    api_method: ClassVar[str] = "sendDice"

    emoji: str | None = None


class SendChatAction(TelegramMethod):
    api_method: ClassVar[str] = "sendChatAction"
    returning: ClassVar[Any] = bool

    chat_id: ChatId
    action: str
    business_connection_id: str | None = None
    message_thread_id: int | None = None


class SetMessageReaction(TelegramMethod):
    api_method: ClassVar[str] = "setMessageReaction"
    returning: ClassVar[Any] = bool

    chat_id: ChatId
    message_id: int
    reaction: list[ReactionType] | None = None
    is_big: bool | None = None


class GetUserProfilePhotos(TelegramMethod):
    api_method: ClassVar[str] = "getUserProfilePhotos"
    returning: ClassVar[Any] = UserProfilePhotos

    user_id: int
    offset: int | None = None
    limit: int | None = None


class GetFile(TelegramMethod):
    api_method: ClassVar[str] = "getFile"
    returning: ClassVar[Any] = File

    file_id: str
