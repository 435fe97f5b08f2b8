"""Common base for Bot API objects."""

from pydantic import BaseModel, ConfigDict


class TelegramObject(BaseModel):
    """Base for every object exchanged with the Bot API.

    Fields the platform adds after this model was written are kept as extras,
    so echoing or re-serializing an object never drops data.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    def to_api(self) -> dict:
        """Dump in wire form: aliases applied, unset optionals dropped."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
