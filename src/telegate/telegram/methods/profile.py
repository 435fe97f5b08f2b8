"""Callback answers, boosts, business connections and the bot's own profile."""

from typing import Any, ClassVar

from telegate.telegram.methods.base import ChatId, TelegramMethod
from telegate.telegram.types.bot import (
    BotCommand,
    BotCommandScope,
    BotDescription,
    BotName,
    BotShortDescription,
    MenuButton,
)
from telegate.telegram.types.chat import BusinessConnection, ChatAdministratorRights, UserChatBoosts


class AnswerCallbackQuery(TelegramMethod):
    api_method: ClassVar[str] = "answerCallbackQuery"
    returning: ClassVar[Any] = bool

    callback_query_id: str
    text: str | None = None
    show_alert: bool | None = None
    url: str | None = None
    cache_time: int | None = None


class GetUserChatBoosts(TelegramMethod):
    api_method: ClassVar[str] = "getUserChatBoosts"
    returning: ClassVar[Any] = UserChatBoosts

    chat_id: ChatId
    user_id: int


class GetBusinessConnection(TelegramMethod):
    api_method: ClassVar[str] = "getBusinessConnection"
    returning: ClassVar[Any] = BusinessConnection

    business_connection_id: str


class SetMyCommands(TelegramMethod):
    api_method: ClassVar[str] = "setMyCommands"
    returning: ClassVar[Any] = bool

    commands: list[BotCommand]
    scope: BotCommandScope | None = None
    language_code: str | None = None


class DeleteMyCommands(TelegramMethod):
    api_method: ClassVar[str] = "deleteMyCommands"
    returning: ClassVar[Any] = bool

    scope: BotCommandScope | None = None
    language_code: str | None = None


class GetMyCommands(TelegramMethod):
    api_method: ClassVar[str] = "getMyCommands"
    returning: ClassVar[Any] = list[BotCommand]

    scope: BotCommandScope | None = None
    language_code: str | None = None


class SetMyName(TelegramMethod):
    api_method: ClassVar[str] = "setMyName"
    returning: ClassVar[Any] = bool

    name: str | None = None
    language_code: str | None = None


class GetMyName(TelegramMethod):
    api_method: ClassVar[str] = "getMyName"
    returning: ClassVar[Any] = BotName

    language_code: str | None = None


class SetMyDescription(TelegramMethod):
    api_method: ClassVar[str] = "setMyDescription"
    returning: ClassVar[Any] = bool

    description: str | None = None
    language_code: str | None = None


class GetMyDescription(TelegramMethod):
    api_method: ClassVar[str] = "getMyDescription"
    returning: ClassVar[Any] = BotDescription

    language_code: str | None = None


class SetMyShortDescription(TelegramMethod):
    api_method: ClassVar[str] = "setMyShortDescription"
    returning: ClassVar[Any] = bool

    short_description: str | None = None
    language_code: str | None = None


class GetMyShortDescription(TelegramMethod):
    api_method: ClassVar[str] = "getMyShortDescription"
    returning: ClassVar[Any] = BotShortDescription

    language_code: str | None = None


class SetChatMenuButton(TelegramMethod):
    api_method: ClassVar[str] = "setChatMenuButton"
    returning: ClassVar[Any] = bool

    chat_id: int | None = None
    menu_button: MenuButton | None = None


class GetChatMenuButton(TelegramMethod):
    api_method: ClassVar[str] = "getChatMenuButton"
    returning: ClassVar[Any] = MenuButton

    chat_id: int | None = None


class SetMyDefaultAdministratorRights(TelegramMethod):
    api_method: ClassVar[str] = "setMyDefaultAdministratorRights"
    returning: ClassVar[Any] = bool

    rights: ChatAdministratorRights | None = None
    for_channels: bool | None = None


class GetMyDefaultAdministratorRights(TelegramMethod):
    api_method: ClassVar[str] = "getMyDefaultAdministratorRights"
    returning: ClassVar[Any] = ChatAdministratorRights

    for_channels: bool | None = None
