import json
import re

import httpx
import pytest
from pydantic import ValidationError

from telegate.telegram import methods
from telegate.telegram.bot import BotApi
from telegate.telegram.client import TelegramApiClient
from telegate.telegram.types import (
    ChatMemberAdministrator,
    ChatMemberBanned,
    Message,
    MenuButtonWebApp,
    ReactionTypeEmoji,
    Update,
    User,
)


def _message(chat_id: int = 7, text: str = "hi") -> dict[str, object]:
    return {
        "message_id": 100,
        "date": 1700000000,
        "chat": {"id": chat_id, "type": "private"},
        "from": {"id": 1, "is_bot": True, "first_name": "Bot"},
        "text": text,
    }


@pytest.fixture
async def bot(fake_telegram):
    async with httpx.AsyncClient(transport=fake_telegram.transport) as http_client:
        yield BotApi(TelegramApiClient(http_client, token="T"))


async def test_get_me_decodes_user(bot, fake_telegram) -> None:
    fake_telegram.respond(
        "getMe",
        result={"id": 1, "is_bot": True, "first_name": "Bot", "username": "demo_bot"},
    )

    me = await bot.get_me()

    assert isinstance(me, User)
    assert me.username == "demo_bot"


async def test_send_message_decodes_message_and_sends_params(bot, fake_telegram) -> None:
    fake_telegram.respond("sendMessage", result=_message(text="message back to you!"))

    sent = await bot.send_message(chat_id=7, text="message back to you!")

    assert isinstance(sent, Message)
    assert sent.from_user is not None and sent.from_user.first_name == "Bot"
    assert fake_telegram.calls_to("sendMessage") == [
        {"chat_id": "7", "text": "message back to you!"}
    ]


async def test_call_with_parameter_object_matches_keyword_wrapper(bot, fake_telegram) -> None:
    fake_telegram.respond("sendChatAction", result=True)

    assert await bot(methods.SendChatAction(chat_id=7, action="typing")) is True
    assert await bot.send_chat_action(chat_id=7, action="typing") is True
    first, second = fake_telegram.calls_to("sendChatAction")
    assert first == second


async def test_reaction_list_is_json_encoded(bot, fake_telegram) -> None:
    await bot.set_message_reaction(
        chat_id=7,
        message_id=42,
        reaction=[ReactionTypeEmoji(emoji="\U0001fae1")],
    )

    (params,) = fake_telegram.calls_to("setMessageReaction")
    assert json.loads(params["reaction"]) == [{"type": "emoji", "emoji": "\U0001fae1"}]


async def test_chat_member_result_uses_status_variant(bot, fake_telegram) -> None:
    fake_telegram.respond(
        "getChatAdministrators",
        result=[
            {
                "status": "administrator",
                "user": {"id": 2, "is_bot": False, "first_name": "Ada"},
                "can_be_edited": False,
                "is_anonymous": False,
                "can_manage_chat": True,
                "can_delete_messages": True,
                "can_manage_video_chats": False,
                "can_restrict_members": True,
                "can_promote_members": False,
                "can_change_info": True,
                "can_invite_users": True,
                "can_post_stories": False,
                "can_edit_stories": False,
                "can_delete_stories": False,
            }
        ],
    )
    fake_telegram.respond(
        "getChatMember",
        result={
            "status": "kicked",
            "user": {"id": 3, "is_bot": False, "first_name": "Eve"},
            "until_date": 0,
        },
    )

    (admin,) = await bot.get_chat_administrators(chat_id=-100)
    banned = await bot.get_chat_member(chat_id=-100, user_id=3)

    assert isinstance(admin, ChatMemberAdministrator)
    assert isinstance(banned, ChatMemberBanned)


async def test_edit_of_inline_message_returns_true(bot, fake_telegram) -> None:
    fake_telegram.respond("editMessageText", result=True)

    assert await bot.edit_message_text(inline_message_id="abc", text="edited") is True


async def test_edit_of_chat_message_returns_message(bot, fake_telegram) -> None:
    fake_telegram.respond("editMessageText", result=_message(text="edited"))

    edited = await bot.edit_message_text(chat_id=7, message_id=100, text="edited")

    assert isinstance(edited, Message)
    assert edited.text == "edited"


async def test_get_updates_decodes_updates(bot, fake_telegram) -> None:
    fake_telegram.respond("getUpdates", result=[{"update_id": 9, "message": _message()}])

    (update,) = await bot.get_updates(offset=9, timeout=0)

    assert isinstance(update, Update)
    assert update.update_id == 9
    assert fake_telegram.calls_to("getUpdates") == [{"offset": "9", "timeout": "0"}]


async def test_menu_button_result_uses_type_variant(bot, fake_telegram) -> None:
    fake_telegram.respond(
        "getChatMenuButton",
        result={"type": "web_app", "text": "Open", "web_app": {"url": "https://example.org"}},
    )

    button = await bot.get_chat_menu_button(chat_id=7)

    assert isinstance(button, MenuButtonWebApp)


async def test_export_invite_link_returns_plain_string(bot, fake_telegram) -> None:
    fake_telegram.respond("exportChatInviteLink", result="https://t.me/+abc")

    assert await bot.export_chat_invite_link(chat_id=-100) == "https://t.me/+abc"


async def test_unknown_keyword_is_rejected_before_any_call(bot, fake_telegram) -> None:
    with pytest.raises(ValidationError):
        await bot.send_message(chat_id=7, text="hi", not_a_param=True)

    assert fake_telegram.calls == []


def _snake_case(name: str) -> str:
    return re.sub(r"([A-Z])", lambda match: f"_{match.group(1).lower()}", name)


def test_every_method_has_a_keyword_wrapper() -> None:
    """Each parameter model is reachable as a snake_case coroutine on BotApi."""
    method_classes = [
        getattr(methods, name)
        for name in methods.__all__
        if name not in {"ChatId", "TelegramMethod"}
    ]

    assert len(method_classes) == 126
    for method_class in method_classes:
        wrapper = getattr(BotApi, _snake_case(method_class.api_method), None)
        assert wrapper is not None, method_class.api_method
