"""Parameter objects for Bot API methods."""

from functools import lru_cache
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, TypeAdapter

ChatId = int | str


class TelegramMethod(BaseModel):
    """Parameters of one Bot API call.

    Subclasses name the remote method in ``api_method`` and the type its
    ``result`` decodes into in ``returning``. Every field maps to one query
    parameter of the same name.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    api_method: ClassVar[str]
    returning: ClassVar[Any]

    @classmethod
    def parse_result(cls, result: Any) -> Any:
        """Validate a raw envelope ``result`` into ``returning``."""
        return _result_adapter(cls).validate_python(result)


@lru_cache(maxsize=None)
def _result_adapter(method: type[TelegramMethod]) -> TypeAdapter:
    return TypeAdapter(method.returning)
