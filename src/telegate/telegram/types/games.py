from telegate.telegram.types.base import TelegramObject
from telegate.telegram.types.formatting import MessageEntity
from telegate.telegram.types.media import Animation, PhotoSize
from telegate.telegram.types.user import User


class Game(TelegramObject):
    title: str
    description: str
    photo: list[PhotoSize]
    text: str | None = None
    text_entities: list[MessageEntity] | None = None
    animation: Animation | None = None


class GameHighScore(TelegramObject):
    position: int
    user: User
    score: int
