"""Chats, memberships, invite links, boosts, reactions and business connections."""

from typing import Annotated, Literal, Union

from pydantic import Field

from telegate.telegram.types.base import TelegramObject
from telegate.telegram.types.media import Location
from telegate.telegram.types.user import User


class Chat(TelegramObject):
    id: int
    type: Literal["private", "group", "supergroup", "channel"]
    title: str | None = None
    username: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    is_forum: bool | None = None


class ChatPermissions(TelegramObject):
    can_send_messages: bool | None = None
    can_send_audios: bool | None = None
    can_send_documents: bool | None = None
    can_send_photos: bool | None = None
    can_send_videos: bool | None = None
    can_send_video_notes: bool | None = None
    can_send_voice_notes: bool | None = None
    can_send_polls: bool | None = None
    can_send_other_messages: bool | None = None
    can_add_web_page_previews: bool | None = None
    can_change_info: bool | None = None
    can_invite_users: bool | None = None
    can_pin_messages: bool | None = None
    can_manage_topics: bool | None = None


class ChatAdministratorRights(TelegramObject):
    is_anonymous: bool
    can_manage_chat: bool
    can_delete_messages: bool
    can_manage_video_chats: bool
    can_restrict_members: bool
    can_promote_members: bool
    can_change_info: bool
    can_invite_users: bool
    can_post_stories: bool
    can_edit_stories: bool
    can_delete_stories: bool
    can_post_messages: bool | None = None
    can_edit_messages: bool | None = None
    can_pin_messages: bool | None = None
    can_manage_topics: bool | None = None


class ChatLocation(TelegramObject):
    location: Location
    address: str


class ChatInviteLink(TelegramObject):
    invite_link: str
    creator: User
    creates_join_request: bool
    is_primary: bool
    is_revoked: bool
    name: str | None = None
    expire_date: int | None = None
    member_limit: int | None = None
    pending_join_request_count: int | None = None
    subscription_period: int | None = None
    subscription_price: int | None = None


class ChatMemberOwner(TelegramObject):
    status: Literal["creator"]
    user: User
    is_anonymous: bool
    custom_title: str | None = None


class ChatMemberAdministrator(TelegramObject):
    status: Literal["administrator"]
    user: User
    can_be_edited: bool
    is_anonymous: bool
    can_manage_chat: bool
    can_delete_messages: bool
    can_manage_video_chats: bool
    can_restrict_members: bool
    can_promote_members: bool
    can_change_info: bool
    can_invite_users: bool
    can_post_stories: bool | None = None
    can_edit_stories: bool | None = None
    can_delete_stories: bool | None = None
    can_post_messages: bool | None = None
    can_edit_messages: bool | None = None
    can_pin_messages: bool | None = None
    can_manage_topics: bool | None = None
    custom_title: str | None = None


class ChatMemberMember(TelegramObject):
    status: Literal["member"]
    user: User
    until_date: int | None = None


class ChatMemberRestricted(ChatPermissions):
    status: Literal["restricted"]
    user: User
    is_member: bool
    until_date: int


class ChatMemberLeft(TelegramObject):
    status: Literal["left"]
    user: User


class ChatMemberBanned(TelegramObject):
    status: Literal["kicked"]
    user: User
    until_date: int


ChatMember = Annotated[
    Union[
        ChatMemberOwner,
        ChatMemberAdministrator,
        ChatMemberMember,
        ChatMemberRestricted,
        ChatMemberLeft,
        ChatMemberBanned,
    ],
    Field(discriminator="status"),
]


class ChatMemberUpdated(TelegramObject):
    chat: Chat
    from_user: User = Field(alias="from")
    date: int
    old_chat_member: ChatMember
    new_chat_member: ChatMember
    invite_link: ChatInviteLink | None = None
    via_join_request: bool | None = None
    via_chat_folder_invite_link: bool | None = None


class ChatJoinRequest(TelegramObject):
    chat: Chat
    from_user: User = Field(alias="from")
    user_chat_id: int
    date: int
    bio: str | None = None
    invite_link: ChatInviteLink | None = None


class ChatBoostSourcePremium(TelegramObject):
    source: Literal["premium"]
    user: User


class ChatBoostSourceGiftCode(TelegramObject):
    source: Literal["gift_code"]
    user: User


class ChatBoostSourceGiveaway(TelegramObject):
    source: Literal["giveaway"]
    giveaway_message_id: int
    user: User | None = None
    prize_star_count: int | None = None
    is_unclaimed: bool | None = None


ChatBoostSource = Annotated[
    Union[ChatBoostSourcePremium, ChatBoostSourceGiftCode, ChatBoostSourceGiveaway],
    Field(discriminator="source"),
]


class ChatBoost(TelegramObject):
    boost_id: str
    add_date: int
    expiration_date: int
    source: ChatBoostSource


class ChatBoostUpdated(TelegramObject):
    chat: Chat
    boost: ChatBoost


class ChatBoostRemoved(TelegramObject):
    chat: Chat
    boost_id: str
    remove_date: int
    source: ChatBoostSource


class UserChatBoosts(TelegramObject):
    boosts: list[ChatBoost]


class ForumTopic(TelegramObject):
    message_thread_id: int
    name: str
    icon_color: int
    icon_custom_emoji_id: str | None = None


class BusinessConnection(TelegramObject):
    id: str
    user: User
    user_chat_id: int
    date: int
    can_reply: bool
    is_enabled: bool


class BusinessMessagesDeleted(TelegramObject):
    business_connection_id: str
    chat: Chat
    message_ids: list[int]


class ReactionTypeEmoji(TelegramObject):
    type: Literal["emoji"] = "emoji"
    emoji: str


class ReactionTypeCustomEmoji(TelegramObject):
    type: Literal["custom_emoji"] = "custom_emoji"
    custom_emoji_id: str


class ReactionTypePaid(TelegramObject):
    type: Literal["paid"] = "paid"


ReactionType = Annotated[
    Union[ReactionTypeEmoji, ReactionTypeCustomEmoji, ReactionTypePaid],
    Field(discriminator="type"),
]


class ReactionCount(TelegramObject):
    type: ReactionType
    total_count: int


class MessageReactionUpdated(TelegramObject):
    chat: Chat
    message_id: int
    date: int
    old_reaction: list[ReactionType]
    new_reaction: list[ReactionType]
    user: User | None = None
    actor_chat: Chat | None = None


class MessageReactionCountUpdated(TelegramObject):
    chat: Chat
    message_id: int
    date: int
    reactions: list[ReactionCount]

