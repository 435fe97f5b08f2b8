from typing import Any, ClassVar

from telegate.telegram.methods.base import TelegramMethod
from telegate.telegram.types.inline import InlineQueryResult, InlineQueryResultsButton, SentWebAppMessage


class AnswerInlineQuery(TelegramMethod):
    api_method: ClassVar[str] = "answerInlineQuery"
    returning: ClassVar[Any] = bool

    inline_query_id: str
    results: list[InlineQueryResult]
    cache_time: int | None = None
    is_personal: bool | None = None
    next_offset: str | None = None
    button: InlineQueryResultsButton | None = None


class AnswerWebAppQuery(TelegramMethod):
    api_method: ClassVar[str] = "answerWebAppQuery"
    returning: ClassVar[Any] = SentWebAppMessage

    web_app_query_id: str
    result: InlineQueryResult
