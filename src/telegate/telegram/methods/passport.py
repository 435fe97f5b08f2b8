from typing import Any, ClassVar

from telegate.telegram.methods.base import TelegramMethod
from telegate.telegram.types.passport import PassportElementError


class SetPassportDataErrors(TelegramMethod):
    """Tell a user which Telegram Passport elements must be resubmitted."""

    api_method: ClassVar[str] = "setPassportDataErrors"
    returning: ClassVar[Any] = bool

    user_id: int
    errors: list[PassportElementError]
