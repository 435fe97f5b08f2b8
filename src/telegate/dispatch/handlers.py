"""Default per-kind update handlers.

``handle_message`` answers a handful of demo keywords; every other handler
only records that the update arrived.
"""

from __future__ import annotations

import logging

from telegate.core.observability import log_event
from telegate.dispatch.dispatcher import UpdateHandler
from telegate.telegram.bot import BotApi
from telegate.telegram.types import (
    BusinessConnection,
    BusinessMessagesDeleted,
    CallbackQuery,
    ChatBoostRemoved,
    ChatBoostUpdated,
    ChatJoinRequest,
    ChatMemberUpdated,
    ChosenInlineResult,
    InlineQuery,
    Message,
    MessageReactionCountUpdated,
    MessageReactionUpdated,
    Poll,
    PollAnswer,
    PreCheckoutQuery,
    ReactionTypeEmoji,
    ShippingQuery,
    UpdateKind,
)

logger = logging.getLogger(__name__)

DEMO_LATITUDE = 35.525660354512965
DEMO_LONGITUDE = 51.17193735279942
DEMO_VENUE_TITLE = "Funzen Co."
DEMO_VENUE_ADDRESS = "Golestan, Ghobadi St., Banafsheh 1 Alley, Yas Building"
DEMO_VENUE_FOURSQUARE_ID = "63be6904847c3692a84b9b91"
DEMO_REACTION_EMOJI = "\U0001fae1"
DEMO_REPLY_TEXT = "message back to you!"


def _log_received(kind: UpdateKind, **fields: object) -> None:
    log_event(logger, event="telegram.update.received", kind=kind, **fields)


async def handle_message(message: Message, bot: BotApi) -> None:
    """Answer the demo keywords ``reaction``, ``location``, ``message``, ``type`` and ``venue``."""
    _log_received(UpdateKind.MESSAGE, chat_id=message.chat.id, message_id=message.message_id)
    chat_id = message.chat.id
    text = message.text

    if text == "reaction":
        me = await bot.get_me()
        await bot.set_message_reaction(
            chat_id=chat_id,
            message_id=message.message_id,
            reaction=[ReactionTypeEmoji(emoji=DEMO_REACTION_EMOJI)],
        )
        logger.info("Reacted as %s", me.username)
    elif text == "location":
        await bot.send_location(
            chat_id=chat_id,
            latitude=DEMO_LATITUDE,
            longitude=DEMO_LONGITUDE,
        )
    elif text == "message":
        await bot.send_message(chat_id=chat_id, text=DEMO_REPLY_TEXT)
    elif text == "type":
        await bot.send_chat_action(chat_id=chat_id, action="typing")
    elif text == "venue":
        await bot.send_venue(
            chat_id=chat_id,
            latitude=DEMO_LATITUDE,
            longitude=DEMO_LONGITUDE,
            title=DEMO_VENUE_TITLE,
            address=DEMO_VENUE_ADDRESS,
            foursquare_id=DEMO_VENUE_FOURSQUARE_ID,
        )


async def handle_edited_message(message: Message, bot: BotApi) -> None:
    _log_received(UpdateKind.EDITED_MESSAGE, chat_id=message.chat.id, message_id=message.message_id)


async def handle_channel_post(message: Message, bot: BotApi) -> None:
    _log_received(UpdateKind.CHANNEL_POST, chat_id=message.chat.id, message_id=message.message_id)


async def handle_edited_channel_post(message: Message, bot: BotApi) -> None:
    _log_received(
        UpdateKind.EDITED_CHANNEL_POST,
        chat_id=message.chat.id,
        message_id=message.message_id,
    )


async def handle_business_connection(connection: BusinessConnection, bot: BotApi) -> None:
    _log_received(UpdateKind.BUSINESS_CONNECTION, business_connection_id=connection.id)


async def handle_business_message(message: Message, bot: BotApi) -> None:
    _log_received(UpdateKind.BUSINESS_MESSAGE, chat_id=message.chat.id, message_id=message.message_id)


async def handle_edited_business_message(message: Message, bot: BotApi) -> None:
    _log_received(
        UpdateKind.EDITED_BUSINESS_MESSAGE,
        chat_id=message.chat.id,
        message_id=message.message_id,
    )


async def handle_deleted_business_messages(deleted: BusinessMessagesDeleted, bot: BotApi) -> None:
    _log_received(
        UpdateKind.DELETED_BUSINESS_MESSAGES,
        chat_id=deleted.chat.id,
        message_ids=deleted.message_ids,
    )


async def handle_message_reaction(reaction: MessageReactionUpdated, bot: BotApi) -> None:
    _log_received(
        UpdateKind.MESSAGE_REACTION,
        chat_id=reaction.chat.id,
        message_id=reaction.message_id,
    )


async def handle_message_reaction_count(counts: MessageReactionCountUpdated, bot: BotApi) -> None:
    _log_received(
        UpdateKind.MESSAGE_REACTION_COUNT,
        chat_id=counts.chat.id,
        message_id=counts.message_id,
    )


async def handle_inline_query(query: InlineQuery, bot: BotApi) -> None:
    _log_received(UpdateKind.INLINE_QUERY, inline_query_id=query.id)


async def handle_chosen_inline_result(result: ChosenInlineResult, bot: BotApi) -> None:
    _log_received(UpdateKind.CHOSEN_INLINE_RESULT, result_id=result.result_id)


async def handle_callback_query(query: CallbackQuery, bot: BotApi) -> None:
    _log_received(UpdateKind.CALLBACK_QUERY, callback_query_id=query.id)


async def handle_shipping_query(query: ShippingQuery, bot: BotApi) -> None:
    _log_received(UpdateKind.SHIPPING_QUERY, shipping_query_id=query.id)


async def handle_pre_checkout_query(query: PreCheckoutQuery, bot: BotApi) -> None:
    _log_received(UpdateKind.PRE_CHECKOUT_QUERY, pre_checkout_query_id=query.id)


async def handle_poll(poll: Poll, bot: BotApi) -> None:
    _log_received(UpdateKind.POLL, poll_id=poll.id)


async def handle_poll_answer(answer: PollAnswer, bot: BotApi) -> None:
    _log_received(UpdateKind.POLL_ANSWER, poll_id=answer.poll_id)


async def handle_my_chat_member(updated: ChatMemberUpdated, bot: BotApi) -> None:
    _log_received(UpdateKind.MY_CHAT_MEMBER, chat_id=updated.chat.id)


async def handle_chat_member(updated: ChatMemberUpdated, bot: BotApi) -> None:
    _log_received(UpdateKind.CHAT_MEMBER, chat_id=updated.chat.id)


async def handle_chat_join_request(request: ChatJoinRequest, bot: BotApi) -> None:
    _log_received(UpdateKind.CHAT_JOIN_REQUEST, chat_id=request.chat.id)


async def handle_chat_boost(boost: ChatBoostUpdated, bot: BotApi) -> None:
    _log_received(UpdateKind.CHAT_BOOST, chat_id=boost.chat.id)


async def handle_removed_chat_boost(removed: ChatBoostRemoved, bot: BotApi) -> None:
    _log_received(UpdateKind.REMOVED_CHAT_BOOST, chat_id=removed.chat.id)


DEFAULT_HANDLERS: dict[UpdateKind, UpdateHandler] = {
    UpdateKind.MESSAGE: handle_message,
    UpdateKind.EDITED_MESSAGE: handle_edited_message,
    UpdateKind.CHANNEL_POST: handle_channel_post,
    UpdateKind.EDITED_CHANNEL_POST: handle_edited_channel_post,
    UpdateKind.BUSINESS_CONNECTION: handle_business_connection,
    UpdateKind.BUSINESS_MESSAGE: handle_business_message,
    UpdateKind.EDITED_BUSINESS_MESSAGE: handle_edited_business_message,
    UpdateKind.DELETED_BUSINESS_MESSAGES: handle_deleted_business_messages,
    UpdateKind.MESSAGE_REACTION: handle_message_reaction,
    UpdateKind.MESSAGE_REACTION_COUNT: handle_message_reaction_count,
    UpdateKind.INLINE_QUERY: handle_inline_query,
    UpdateKind.CHOSEN_INLINE_RESULT: handle_chosen_inline_result,
    UpdateKind.CALLBACK_QUERY: handle_callback_query,
    UpdateKind.SHIPPING_QUERY: handle_shipping_query,
    UpdateKind.PRE_CHECKOUT_QUERY: handle_pre_checkout_query,
    UpdateKind.POLL: handle_poll,
    UpdateKind.POLL_ANSWER: handle_poll_answer,
    UpdateKind.MY_CHAT_MEMBER: handle_my_chat_member,
    UpdateKind.CHAT_MEMBER: handle_chat_member,
    UpdateKind.CHAT_JOIN_REQUEST: handle_chat_join_request,
    UpdateKind.CHAT_BOOST: handle_chat_boost,
    UpdateKind.REMOVED_CHAT_BOOST: handle_removed_chat_boost,
}


def build_default_registry() -> dict[UpdateKind, UpdateHandler]:
    """Return a fresh mapping of every update kind to its default handler."""
    return dict(DEFAULT_HANDLERS)
