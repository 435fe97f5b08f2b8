"""Bot profile: commands, command scopes, names, descriptions and menu buttons."""

from typing import Annotated, Literal, Union

from pydantic import Field

from telegate.telegram.types.base import TelegramObject
from telegate.telegram.types.user import WebAppInfo


class BotCommand(TelegramObject):
    command: str
    description: str


class BotCommandScopeDefault(TelegramObject):
    type: Literal["default"] = "default"


class BotCommandScopeAllPrivateChats(TelegramObject):
    type: Literal["all_private_chats"] = "all_private_chats"


class BotCommandScopeAllGroupChats(TelegramObject):
    type: Literal["all_group_chats"] = "all_group_chats"


class BotCommandScopeAllChatAdministrators(TelegramObject):
    type: Literal["all_chat_administrators"] = "all_chat_administrators"


class BotCommandScopeChat(TelegramObject):
    type: Literal["chat"] = "chat"
    chat_id: int | str


class BotCommandScopeChatAdministrators(TelegramObject):
    type: Literal["chat_administrators"] = "chat_administrators"
    chat_id: int | str


class BotCommandScopeChatMember(TelegramObject):
    type: Literal["chat_member"] = "chat_member"
    chat_id: int | str
    user_id: int


BotCommandScope = Annotated[
    Union[
        BotCommandScopeDefault,
        BotCommandScopeAllPrivateChats,
        BotCommandScopeAllGroupChats,
        BotCommandScopeAllChatAdministrators,
        BotCommandScopeChat,
        BotCommandScopeChatAdministrators,
        BotCommandScopeChatMember,
    ],
    Field(discriminator="type"),
]


class BotName(TelegramObject):
    name: str


class BotDescription(TelegramObject):
    description: str


class BotShortDescription(TelegramObject):
    short_description: str


class MenuButtonCommands(TelegramObject):
    type: Literal["commands"] = "commands"


class MenuButtonWebApp(TelegramObject):
    type: Literal["web_app"] = "web_app"
    text: str
    web_app: WebAppInfo


class MenuButtonDefault(TelegramObject):
    type: Literal["default"] = "default"


MenuButton = Annotated[
    Union[MenuButtonCommands, MenuButtonWebApp, MenuButtonDefault],
    Field(discriminator="type"),
]
