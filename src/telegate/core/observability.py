"""One-line structured events for webhook, dispatch and Bot API activity.

Records render as ``event=<name> fields=<json>`` with keys sorted, so
``update_id``, ``kind`` and ``method`` can be grepped across a request.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from pydantic_core import to_jsonable_python

from telegate.core.context import get_request_id


def encode_fields(fields: dict[str, Any]) -> str:
    """Compact JSON of ``fields``; enums by value, models by alias, anything else via ``str``."""
    jsonable = to_jsonable_python(fields, by_alias=True, fallback=str)
    return json.dumps(jsonable, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def log_event(
    logger: logging.Logger,
    *,
    event: str,
    level: int = logging.INFO,
    **fields: Any,
) -> None:
    if not logger.isEnabledFor(level):
        return
    request_id = get_request_id()
    if request_id is not None:
        fields.setdefault("request_id", request_id)
    logger.log(level, "event=%s fields=%s", event, encode_fields(fields))
