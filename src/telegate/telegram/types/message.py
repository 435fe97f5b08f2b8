"""Messages and the objects that only make sense attached to one."""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import Discriminator, Field, Tag

from telegate.telegram.types.base import TelegramObject
from telegate.telegram.types.chat import (
    Chat,
    ChatLocation,
    ChatPermissions,
    ReactionType,
)
from telegate.telegram.types.formatting import LinkPreviewOptions, MessageEntity, TextQuote
from telegate.telegram.types.games import Game
from telegate.telegram.types.markup import InlineKeyboardMarkup
from telegate.telegram.types.media import (
    Animation,
    Audio,
    ChatPhoto,
    Contact,
    Dice,
    Document,
    Location,
    PaidMediaInfo,
    PhotoSize,
    Sticker,
    Story,
    Venue,
    Video,
    VideoNote,
    Voice,
)
from telegate.telegram.types.payments import Invoice, RefundedPayment, SuccessfulPayment
from telegate.telegram.types.poll import Poll
from telegate.telegram.types.user import User


class MessageOriginUser(TelegramObject):
    type: Literal["user"]
    date: int
    sender_user: User


class MessageOriginHiddenUser(TelegramObject):
    type: Literal["hidden_user"]
    date: int
    sender_user_name: str


class MessageOriginChat(TelegramObject):
    type: Literal["chat"]
    date: int
    sender_chat: Chat
    author_signature: str | None = None


class MessageOriginChannel(TelegramObject):
    type: Literal["channel"]
    date: int
    chat: Chat
    message_id: int
    author_signature: str | None = None


MessageOrigin = Annotated[
    Union[MessageOriginUser, MessageOriginHiddenUser, MessageOriginChat, MessageOriginChannel],
    Field(discriminator="type"),
]


class MessageId(TelegramObject):
    message_id: int


class WebAppData(TelegramObject):
    data: str
    button_text: str


class ExternalReplyInfo(TelegramObject):
    origin: MessageOrigin
    chat: Chat | None = None
    message_id: int | None = None


class InaccessibleMessage(TelegramObject):
    """A message that was deleted or is otherwise unavailable to the bot."""

    chat: Chat
    message_id: int
    date: Literal[0] = 0


class Message(TelegramObject):
    """A message. Service payloads not modelled here are kept as extras."""

    message_id: int
    date: int
    chat: Chat
    message_thread_id: int | None = None
    from_user: User | None = Field(default=None, alias="from")
    sender_chat: Chat | None = None
    sender_boost_count: int | None = None
    sender_business_bot: User | None = None
    business_connection_id: str | None = None
    forward_origin: MessageOrigin | None = None
    is_topic_message: bool | None = None
    is_automatic_forward: bool | None = None
    reply_to_message: Message | None = None
    external_reply: ExternalReplyInfo | None = None
    quote: TextQuote | None = None
    reply_to_story: Story | None = None
    via_bot: User | None = None
    edit_date: int | None = None
    has_protected_content: bool | None = None
    is_from_offline: bool | None = None
    media_group_id: str | None = None
    author_signature: str | None = None
    text: str | None = None
    entities: list[MessageEntity] | None = None
    link_preview_options: LinkPreviewOptions | None = None
    effect_id: str | None = None
    animation: Animation | None = None
    audio: Audio | None = None
    document: Document | None = None
    paid_media: PaidMediaInfo | None = None
    photo: list[PhotoSize] | None = None
    sticker: Sticker | None = None
    story: Story | None = None
    video: Video | None = None
    video_note: VideoNote | None = None
    voice: Voice | None = None
    caption: str | None = None
    caption_entities: list[MessageEntity] | None = None
    show_caption_above_media: bool | None = None
    has_media_spoiler: bool | None = None
    contact: Contact | None = None
    dice: Dice | None = None
    game: Game | None = None
    poll: Poll | None = None
    venue: Venue | None = None
    location: Location | None = None
    new_chat_members: list[User] | None = None
    left_chat_member: User | None = None
    new_chat_title: str | None = None
    new_chat_photo: list[PhotoSize] | None = None
    delete_chat_photo: bool | None = None
    group_chat_created: bool | None = None
    supergroup_chat_created: bool | None = None
    channel_chat_created: bool | None = None
    migrate_to_chat_id: int | None = None
    migrate_from_chat_id: int | None = None
    pinned_message: MaybeInaccessibleMessage | None = None
    invoice: Invoice | None = None
    successful_payment: SuccessfulPayment | None = None
    refunded_payment: RefundedPayment | None = None
    connected_website: str | None = None
    web_app_data: WebAppData | None = None
    reply_markup: InlineKeyboardMarkup | None = None

    @property
    def content_type(self) -> str:
        """Name of the first populated content field, ``unknown`` if none is modelled."""
        for name in _CONTENT_FIELDS:
            if getattr(self, name) is not None:
                return name
        return "unknown"


_CONTENT_FIELDS = (
    "text",
    "animation",
    "audio",
    "document",
    "paid_media",
    "photo",
    "sticker",
    "story",
    "video",
    "video_note",
    "voice",
    "contact",
    "dice",
    "game",
    "poll",
    "venue",
    "location",
    "new_chat_members",
    "left_chat_member",
    "new_chat_title",
    "new_chat_photo",
    "pinned_message",
    "invoice",
    "successful_payment",
    "refunded_payment",
    "web_app_data",
)


def _maybe_inaccessible_tag(value: Any) -> str:
    date = value.get("date") if isinstance(value, dict) else getattr(value, "date", None)
    return "inaccessible" if date == 0 else "message"


MaybeInaccessibleMessage = Annotated[
    Union[
        Annotated[Message, Tag("message")],
        Annotated[InaccessibleMessage, Tag("inaccessible")],
    ],
    Discriminator(_maybe_inaccessible_tag),
]


class CallbackQuery(TelegramObject):
    id: str
    from_user: User = Field(alias="from")
    chat_instance: str
    message: MaybeInaccessibleMessage | None = None
    inline_message_id: str | None = None
    data: str | None = None
    game_short_name: str | None = None


class ChatFullInfo(Chat):
    """Full chat description returned by getChat."""

    accent_color_id: int
    max_reaction_count: int
    photo: ChatPhoto | None = None
    active_usernames: list[str] | None = None
    available_reactions: list[ReactionType] | None = None
    bio: str | None = None
    has_private_forwards: bool | None = None
    join_to_send_messages: bool | None = None
    join_by_request: bool | None = None
    description: str | None = None
    invite_link: str | None = None
    pinned_message: Message | None = None
    permissions: ChatPermissions | None = None
    can_send_paid_media: bool | None = None
    slow_mode_delay: int | None = None
    message_auto_delete_time: int | None = None
    has_protected_content: bool | None = None
    sticker_set_name: str | None = None
    can_set_sticker_set: bool | None = None
    linked_chat_id: int | None = None
    location: ChatLocation | None = None


Message.model_rebuild()
CallbackQuery.model_rebuild()
ChatFullInfo.model_rebuild()
