"""Incoming updates and their classification into a single tagged event."""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import model_validator

from telegate.telegram.types.base import TelegramObject
from telegate.telegram.types.chat import (
    BusinessConnection,
    BusinessMessagesDeleted,
    ChatBoostRemoved,
    ChatBoostUpdated,
    ChatJoinRequest,
    ChatMemberUpdated,
    MessageReactionCountUpdated,
    MessageReactionUpdated,
)
from telegate.telegram.types.inline import ChosenInlineResult, InlineQuery
from telegate.telegram.types.message import CallbackQuery, Message
from telegate.telegram.types.payments import PreCheckoutQuery, ShippingQuery
from telegate.telegram.types.poll import Poll, PollAnswer


class UpdateKind(str, Enum):
    """Variant names, in the order handlers are consulted."""

    MESSAGE = "message"
    EDITED_MESSAGE = "edited_message"
    CHANNEL_POST = "channel_post"
    EDITED_CHANNEL_POST = "edited_channel_post"
    BUSINESS_CONNECTION = "business_connection"
    BUSINESS_MESSAGE = "business_message"
    EDITED_BUSINESS_MESSAGE = "edited_business_message"
    DELETED_BUSINESS_MESSAGES = "deleted_business_messages"
    MESSAGE_REACTION = "message_reaction"
    MESSAGE_REACTION_COUNT = "message_reaction_count"
    INLINE_QUERY = "inline_query"
    CHOSEN_INLINE_RESULT = "chosen_inline_result"
    CALLBACK_QUERY = "callback_query"
    SHIPPING_QUERY = "shipping_query"
    PRE_CHECKOUT_QUERY = "pre_checkout_query"
    POLL = "poll"
    POLL_ANSWER = "poll_answer"
    MY_CHAT_MEMBER = "my_chat_member"
    CHAT_MEMBER = "chat_member"
    CHAT_JOIN_REQUEST = "chat_join_request"
    CHAT_BOOST = "chat_boost"
    REMOVED_CHAT_BOOST = "removed_chat_boost"


UpdatePayload = (
    Message
    | BusinessConnection
    | BusinessMessagesDeleted
    | MessageReactionUpdated
    | MessageReactionCountUpdated
    | InlineQuery
    | ChosenInlineResult
    | CallbackQuery
    | ShippingQuery
    | PreCheckoutQuery
    | Poll
    | PollAnswer
    | ChatMemberUpdated
    | ChatJoinRequest
    | ChatBoostUpdated
    | ChatBoostRemoved
)


def populated_variants(payload: Mapping[str, Any]) -> list[UpdateKind]:
    """Kinds whose field is present and non-null in ``payload``."""
    return [kind for kind in UpdateKind if payload.get(kind.value) is not None]


@dataclass(frozen=True)
class UpdateEvent:
    kind: UpdateKind
    payload: UpdatePayload


class Update(TelegramObject):
    """One incoming update. At most one variant field may be populated.

    Variants this model does not know about are kept as extras and classify
    as no event at all.
    """

    update_id: int
    message: Message | None = None
    edited_message: Message | None = None
    channel_post: Message | None = None
    edited_channel_post: Message | None = None
    business_connection: BusinessConnection | None = None
    business_message: Message | None = None
    edited_business_message: Message | None = None
    deleted_business_messages: BusinessMessagesDeleted | None = None
    message_reaction: MessageReactionUpdated | None = None
    message_reaction_count: MessageReactionCountUpdated | None = None
    inline_query: InlineQuery | None = None
    chosen_inline_result: ChosenInlineResult | None = None
    callback_query: CallbackQuery | None = None
    shipping_query: ShippingQuery | None = None
    pre_checkout_query: PreCheckoutQuery | None = None
    poll: Poll | None = None
    poll_answer: PollAnswer | None = None
    my_chat_member: ChatMemberUpdated | None = None
    chat_member: ChatMemberUpdated | None = None
    chat_join_request: ChatJoinRequest | None = None
    chat_boost: ChatBoostUpdated | None = None
    removed_chat_boost: ChatBoostRemoved | None = None

    @model_validator(mode="after")
    def validate_single_variant(self) -> "Update":
        populated = [kind.value for kind in populated_variants(self.__dict__)]
        if len(populated) > 1:
            raise ValueError(
                f"update {self.update_id} carries more than one variant: {', '.join(populated)}"
            )
        return self

    @property
    def kind(self) -> UpdateKind | None:
        for kind in UpdateKind:
            if getattr(self, kind.value) is not None:
                return kind
        return None

    @property
    def event(self) -> UpdateEvent | None:
        kind = self.kind
        if kind is None:
            return None
        return UpdateEvent(kind=kind, payload=getattr(self, kind.value))
