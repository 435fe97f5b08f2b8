import json

from telegate.telegram.methods import ForwardMessages, SendMessage, SendPoll, SetMyCommands
from telegate.telegram.serialization import serialize_params, serialize_value
from telegate.telegram.types import (
    BotCommand,
    BotCommandScopeChat,
    InlineKeyboardButton,
    InlineKeyboardMarkup,
    InputPollOption,
    MessageEntity,
    ReplyParameters,
)


def test_array_param_becomes_json_text_that_decodes_to_the_original() -> None:
    params = serialize_params(ForwardMessages(chat_id=1, from_chat_id=2, message_ids=[10, 11, 12]))

    assert json.loads(params["message_ids"]) == [10, 11, 12]


def test_omitted_optional_params_are_absent() -> None:
    params = serialize_params(SendMessage(chat_id=7, text="hi"))

    assert params == {"chat_id": "7", "text": "hi"}


def test_nested_models_are_compact_json_without_nulls() -> None:
    params = serialize_params(
        SendMessage(
            chat_id="@channel",
            text="hi",
            entities=[MessageEntity(type="bold", offset=0, length=2)],
            reply_parameters=ReplyParameters(message_id=3),
            reply_markup=InlineKeyboardMarkup(
                inline_keyboard=[[InlineKeyboardButton(text="Go", callback_data="go")]]
            ),
        )
    )

    assert params["chat_id"] == "@channel"
    assert params["entities"] == '[{"type":"bold","offset":0,"length":2}]'
    assert params["reply_parameters"] == '{"message_id":3}'
    assert json.loads(params["reply_markup"]) == {
        "inline_keyboard": [[{"text": "Go", "callback_data": "go"}]]
    }


def test_plain_dicts_are_accepted_for_object_params() -> None:
    params = serialize_params(
        SendPoll(chat_id=1, question="Tea?", options=[{"text": "Yes"}, InputPollOption(text="No")])
    )

    assert json.loads(params["options"]) == [{"text": "Yes"}, {"text": "No"}]


def test_discriminated_params_keep_their_type_tag() -> None:
    params = serialize_params(
        SetMyCommands(
            commands=[BotCommand(command="start", description="Start the bot")],
            scope=BotCommandScopeChat(chat_id=99),
        )
    )

    assert json.loads(params["scope"]) == {"type": "chat", "chat_id": 99}


def test_scalars_serialize_as_query_strings() -> None:
    assert serialize_value(True) == "true"
    assert serialize_value(False) == "false"
    assert serialize_value(35.525660354512965) == "35.525660354512965"
    assert serialize_value(0) == "0"
    assert serialize_value("") == ""
