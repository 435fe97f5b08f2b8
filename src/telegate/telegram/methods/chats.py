"""Chat administration, invite links and forum topics."""

from typing import Any, ClassVar

from telegate.telegram.methods.base import ChatId, TelegramMethod
from telegate.telegram.types.chat import ChatInviteLink, ChatMember, ChatPermissions, ForumTopic
from telegate.telegram.types.media import Sticker
from telegate.telegram.types.message import ChatFullInfo


class _ChatMethod(TelegramMethod):
    returning: ClassVar[Any] = bool

    chat_id: ChatId


class BanChatMember(_ChatMethod):
    api_method: ClassVar[str] = "banChatMember"

    user_id: int
    until_date: int | None = None
    revoke_messages: bool | None = None


class UnbanChatMember(_ChatMethod):
    api_method: ClassVar[str] = "unbanChatMember"

    user_id: int
    only_if_banned: bool | None = None


class RestrictChatMember(_ChatMethod):
    api_method: ClassVar[str] = "restrictChatMember"

    user_id: int
    permissions: ChatPermissions
    use_independent_chat_permissions: bool | None = None
    until_date: int | None = None


class PromoteChatMember(_ChatMethod):
    api_method: ClassVar[str] = "promoteChatMember"

    user_id: int
    is_anonymous: bool | None = None
    can_manage_chat: bool | None = None
    can_delete_messages: bool | None = None
    can_manage_video_chats: bool | None = None
    can_restrict_members: bool | None = None
    can_promote_members: bool | None = None
    can_change_info: bool | None = None
    can_invite_users: bool | None = None
    can_post_stories: bool | None = None
    can_edit_stories: bool | None = None
    can_delete_stories: bool | None = None
    can_post_messages: bool | None = None
    can_edit_messages: bool | None = None
    can_pin_messages: bool | None = None
    can_manage_topics: bool | None = None


class SetChatAdministratorCustomTitle(_ChatMethod):
    api_method: ClassVar[str] = "setChatAdministratorCustomTitle"

    user_id: int
    custom_title: str


class BanChatSenderChat(_ChatMethod):
    api_method: ClassVar[str] = "banChatSenderChat"

    sender_chat_id: int


class UnbanChatSenderChat(_ChatMethod):
    api_method: ClassVar[str] = "unbanChatSenderChat"

    sender_chat_id: int


class SetChatPermissions(_ChatMethod):
    api_method: ClassVar[str] = "setChatPermissions"

    permissions: ChatPermissions
    use_independent_chat_permissions: bool | None = None


class ExportChatInviteLink(_ChatMethod):
    api_method: ClassVar[str] = "exportChatInviteLink"
    returning: ClassVar[Any] = str


class CreateChatInviteLink(_ChatMethod):
    api_method: ClassVar[str] = "createChatInviteLink"
    returning: ClassVar[Any] = ChatInviteLink

    name: str | None = None
    expire_date: int | None = None
    member_limit: int | None = None
    creates_join_request: bool | None = None


class EditChatInviteLink(_ChatMethod):
    api_method: ClassVar[str] = "editChatInviteLink"
    returning: ClassVar[Any] = ChatInviteLink

    invite_link: str
    name: str | None = None
    expire_date: int | None = None
    member_limit: int | None = None
    creates_join_request: bool | None = None


class CreateChatSubscriptionInviteLink(_ChatMethod):
    api_method: ClassVar[str] = "createChatSubscriptionInviteLink"
    returning: ClassVar[Any] = ChatInviteLink

    subscription_period: int
    subscription_price: int
    name: str | None = None


class EditChatSubscriptionInviteLink(_ChatMethod):
    api_method: ClassVar[str] = "editChatSubscriptionInviteLink"
    returning: ClassVar[Any] = ChatInviteLink

    invite_link: str
    name: str | None = None


class RevokeChatInviteLink(_ChatMethod):
    api_method: ClassVar[str] = "revokeChatInviteLink"
    returning: ClassVar[Any] = ChatInviteLink

    invite_link: str


class ApproveChatJoinRequest(_ChatMethod):
    api_method: ClassVar[str] = "approveChatJoinRequest"

    user_id: int


class DeclineChatJoinRequest(_ChatMethod):
    api_method: ClassVar[str] = "declineChatJoinRequest"

    user_id: int


class SetChatPhoto(_ChatMethod):
    api_method: ClassVar[str] = "setChatPhoto"

    photo: str


class DeleteChatPhoto(_ChatMethod):
    api_method: ClassVar[str] = "deleteChatPhoto"


class SetChatTitle(_ChatMethod):
    api_method: ClassVar[str] = "setChatTitle"

    title: str


class SetChatDescription(_ChatMethod):
    api_method: ClassVar[str] = "setChatDescription"

    description: str | None = None


class PinChatMessage(_ChatMethod):
    api_method: ClassVar[str] = "pinChatMessage"

    message_id: int
    business_connection_id: str | None = None
    disable_notification: bool | None = None


class UnpinChatMessage(_ChatMethod):
    api_method: ClassVar[str] = "unpinChatMessage"

    message_id: int | None = None
    business_connection_id: str | None = None


class UnpinAllChatMessages(_ChatMethod):
    api_method: ClassVar[str] = "unpinAllChatMessages"


class LeaveChat(_ChatMethod):
    api_method: ClassVar[str] = "leaveChat"


class GetChat(_ChatMethod):
    api_method: ClassVar[str] = "getChat"
    returning: ClassVar[Any] = ChatFullInfo


class GetChatAdministrators(_ChatMethod):
    api_method: ClassVar[str] = "getChatAdministrators"
    returning: ClassVar[Any] = list[ChatMember]


class GetChatMemberCount(_ChatMethod):
    api_method: ClassVar[str] = "getChatMemberCount"
    returning: ClassVar[Any] = int


class GetChatMember(_ChatMethod):
    api_method: ClassVar[str] = "getChatMember"
    returning: ClassVar[Any] = ChatMember

    user_id: int


class SetChatStickerSet(_ChatMethod):
    api_method: ClassVar[str] = "setChatStickerSet"

    sticker_set_name: str


class DeleteChatStickerSet(_ChatMethod):
    api_method: ClassVar[str] = "deleteChatStickerSet"


class GetForumTopicIconStickers(TelegramMethod):
    api_method: ClassVar[str] = "getForumTopicIconStickers"
    returning: ClassVar[Any] = list[Sticker]


class CreateForumTopic(_ChatMethod):
    api_method: ClassVar[str] = "createForumTopic"
    returning: ClassVar[Any] = ForumTopic

    name: str
    icon_color: int | None = None
    icon_custom_emoji_id: str | None = None


class _ForumTopicMethod(_ChatMethod):
    message_thread_id: int


class EditForumTopic(_ForumTopicMethod):
    api_method: ClassVar[str] = "editForumTopic"

    name: str | None = None
    icon_custom_emoji_id: str | None = None


class CloseForumTopic(_ForumTopicMethod):
    api_method: ClassVar[str] = "closeForumTopic"


class ReopenForumTopic(_ForumTopicMethod):
    api_method: ClassVar[str] = "reopenForumTopic"


class DeleteForumTopic(_ForumTopicMethod):
    api_method: ClassVar[str] = "deleteForumTopic"


class UnpinAllForumTopicMessages(_ForumTopicMethod):
    api_method: ClassVar[str] = "unpinAllForumTopicMessages"


class EditGeneralForumTopic(_ChatMethod):
    api_method: ClassVar[str] = "editGeneralForumTopic"

    name: str


class CloseGeneralForumTopic(_ChatMethod):
    api_method: ClassVar[str] = "closeGeneralForumTopic"


class ReopenGeneralForumTopic(_ChatMethod):
    api_method: ClassVar[str] = "reopenGeneralForumTopic"


class HideGeneralForumTopic(_ChatMethod):
    api_method: ClassVar[str] = "hideGeneralForumTopic"


class UnhideGeneralForumTopic(_ChatMethod):
    api_method: ClassVar[str] = "unhideGeneralForumTopic"


class UnpinAllGeneralForumTopicMessages(_ChatMethod):
    api_method: ClassVar[str] = "unpinAllGeneralForumTopicMessages"
