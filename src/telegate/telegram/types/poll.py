from typing import Literal

from telegate.telegram.types.base import TelegramObject
from telegate.telegram.types.chat import Chat
from telegate.telegram.types.formatting import MessageEntity
from telegate.telegram.types.user import User


class PollOption(TelegramObject):
    text: str
    voter_count: int
    text_entities: list[MessageEntity] | None = None


class InputPollOption(TelegramObject):
    text: str
    text_parse_mode: str | None = None
    text_entities: list[MessageEntity] | None = None


class Poll(TelegramObject):
    id: str
    question: str
    options: list[PollOption]
    total_voter_count: int
    is_closed: bool
    is_anonymous: bool
    type: Literal["regular", "quiz"]
    allows_multiple_answers: bool
    question_entities: list[MessageEntity] | None = None
    correct_option_id: int | None = None
    explanation: str | None = None
    explanation_entities: list[MessageEntity] | None = None
    open_period: int | None = None
    close_date: int | None = None


class PollAnswer(TelegramObject):
    """A vote in a non-anonymous poll; exactly one of voter_chat and user is set."""

    poll_id: str
    option_ids: list[int]
    voter_chat: Chat | None = None
    user: User | None = None
