"""Query-string encoding of Bot API parameters."""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel
from pydantic_core import to_json

from telegate.telegram.methods.base import TelegramMethod


def serialize_value(value: Any) -> str:
    """Encode one parameter value the way the Bot API reads query strings.

    Objects and arrays travel as compact JSON text. Booleans are lowercase
    literals; every other scalar is its plain string form.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (BaseModel, Mapping, list, tuple)):
        return to_json(value, by_alias=True, exclude_none=True).decode("utf-8")
    return str(value)


def serialize_mapping(params: Mapping[str, Any] | None) -> dict[str, str]:
    """Encode every entry of ``params`` whose value is not ``None``."""
    if not params:
        return {}
    return {key: serialize_value(value) for key, value in params.items() if value is not None}


def serialize_params(method: TelegramMethod) -> dict[str, str]:
    """Encode the set fields of a method's parameter object."""
    return serialize_mapping(
        {name: getattr(method, name) for name in type(method).model_fields}
    )
