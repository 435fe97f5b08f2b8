"""HTTP middleware binding per-request context."""

from __future__ import annotations

import logging
from typing import Final
from uuid import uuid4

from fastapi import Request
from fastapi.responses import Response
from starlette.middleware.base import BaseHTTPMiddleware

from telegate.core.config import Settings, get_settings
from telegate.core.context import (
    BotEnvironment,
    EnvironmentNotInitializedError,
    bind_request_id,
    reset_environment,
    set_environment,
    unbind_request_id,
)

REQUEST_ID_HEADER: Final[str] = "X-Request-ID"
MAX_REQUEST_ID_LENGTH: Final[int] = 128

logger = logging.getLogger(__name__)


def _settings_for(request: Request) -> Settings:
    settings = getattr(request.app.state, "settings", None)
    if settings is None:
        settings = get_settings()
    return settings


class RequestCorrelationMiddleware(BaseHTTPMiddleware):
    """Bind an ``X-Request-ID`` for log correlation and echo it on the response."""

    async def dispatch(self, request: Request, call_next) -> Response:
        presented = (request.headers.get(REQUEST_ID_HEADER) or "").strip()
        request_id = presented[:MAX_REQUEST_ID_LENGTH] or uuid4().hex
        token = bind_request_id(request_id)
        try:
            response = await call_next(request)
        finally:
            unbind_request_id(token)
        response.headers[REQUEST_ID_HEADER] = request_id
        return response


class BotEnvironmentMiddleware(BaseHTTPMiddleware):
    """Bind the bot's secret and token for the lifetime of one request.

    When credentials are missing nothing is bound and routes that need them
    answer 503 instead.
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        try:
            environment = BotEnvironment.from_settings(_settings_for(request))
        except EnvironmentNotInitializedError as exc:
            logger.debug("Bot environment not bound for %s: %s", request.url.path, exc)
            return await call_next(request)

        token = set_environment(environment)
        try:
            return await call_next(request)
        finally:
            reset_environment(token)
