"""HTTP transport for Bot API calls and the response envelope contract."""

from __future__ import annotations

import logging
import time
from collections.abc import Mapping
from typing import Any
from urllib.parse import urlencode

import httpx
from pydantic import ValidationError

from telegate.core.config import DEFAULT_API_BASE_URL
from telegate.core.context import get_environment
from telegate.core.metrics import BOT_API_CALL_COUNTER, BOT_API_LATENCY
from telegate.core.observability import log_event
from telegate.telegram.exceptions import TelegramApiError
from telegate.telegram.serialization import serialize_mapping
from telegate.telegram.types.webhook import ApiResponse

logger = logging.getLogger(__name__)


def build_url(
    token: str,
    method_name: str,
    params: Mapping[str, Any] | None = None,
    *,
    base_url: str = DEFAULT_API_BASE_URL,
) -> str:
    """Return ``<base>/bot<token>/<method>`` with non-null params as the query."""
    url = f"{base_url.rstrip('/')}/bot{token}/{method_name}"
    query = serialize_mapping(params)
    if query:
        url = f"{url}?{urlencode(query)}"
    return url


class TelegramApiClient:
    """Issues one GET per Bot API call over a shared ``httpx.AsyncClient``.

    The token is read from the bot environment bound to the current context
    unless one is passed explicitly.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        *,
        base_url: str = DEFAULT_API_BASE_URL,
        token: str | None = None,
    ) -> None:
        self._http_client = http_client
        self._base_url = base_url
        self._token = token

    def _resolve_token(self) -> str:
        if self._token is not None:
            return self._token
        return get_environment().token

    async def call_method(self, method_name: str, params: Mapping[str, Any] | None = None) -> Any:
        """Call ``method_name`` and return the envelope's ``result`` verbatim."""
        url = build_url(self._resolve_token(), method_name, params, base_url=self._base_url)
        started = time.perf_counter()
        try:
            response = await self._http_client.get(url)
        except httpx.HTTPError:
            BOT_API_CALL_COUNTER.labels(method=method_name, outcome="transport_error").inc()
            raise
        elapsed = time.perf_counter() - started
        duration_ms = round(elapsed * 1000, 1)
        BOT_API_LATENCY.labels(method=method_name).observe(elapsed)

        try:
            envelope = ApiResponse.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            BOT_API_CALL_COUNTER.labels(method=method_name, outcome="unreadable").inc()
            log_event(
                logger,
                level=logging.WARNING,
                event="telegram.api.error",
                method=method_name,
                status_code=response.status_code,
                error_code=response.status_code,
                description="unreadable response body",
                duration_ms=duration_ms,
            )
            raise TelegramApiError(
                method_name,
                f"unreadable response body (HTTP {response.status_code})",
                error_code=response.status_code,
            ) from exc

        if not envelope.ok:
            description = envelope.description or "no description"
            BOT_API_CALL_COUNTER.labels(method=method_name, outcome="failed").inc()
            log_event(
                logger,
                level=logging.WARNING,
                event="telegram.api.error",
                method=method_name,
                status_code=response.status_code,
                error_code=envelope.error_code,
                description=description,
                duration_ms=duration_ms,
            )
            raise TelegramApiError(
                method_name,
                description,
                error_code=envelope.error_code,
                parameters=envelope.parameters,
            )

        BOT_API_CALL_COUNTER.labels(method=method_name, outcome="ok").inc()
        log_event(
            logger,
            event="telegram.api.call",
            method=method_name,
            status_code=response.status_code,
            duration_ms=duration_ms,
        )
        return envelope.result
