from typing import Any, ClassVar, Union

from telegate.telegram.methods.base import TelegramMethod
from telegate.telegram.types.formatting import ReplyParameters
from telegate.telegram.types.games import GameHighScore
from telegate.telegram.types.markup import InlineKeyboardMarkup
from telegate.telegram.types.message import Message


class SendGame(TelegramMethod):
    api_method: ClassVar[str] = "sendGame"
    returning: ClassVar[Any] = Message

    chat_id: int
    game_short_name: str
    business_connection_id: str | None = None
    message_thread_id: int | None = None
    disable_notification: bool | None = None
    protect_content: bool | None = None
    message_effect_id: str | None = None
    reply_parameters: ReplyParameters | None = None
    reply_markup: InlineKeyboardMarkup | None = None


class SetGameScore(TelegramMethod):
    api_method: ClassVar[str] = "setGameScore"
    returning: ClassVar[Any] = Union[Message, bool]

    user_id: int
    score: int
    force: bool | None = None
    disable_edit_message: bool | None = None
    chat_id: int | None = None
    message_id: int | None = None
    inline_message_id: str | None = None


class GetGameHighScores(TelegramMethod):
    api_method: ClassVar[str] = "getGameHighScores"
    returning: ClassVar[Any] = list[GameHighScore]

    user_id: int
    chat_id: int | None = None
    message_id: int | None = None
    inline_message_id: str | None = None
