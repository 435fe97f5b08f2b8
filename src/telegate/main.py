import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import PlainTextResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from telegate.api.middleware import BotEnvironmentMiddleware, RequestCorrelationMiddleware
from telegate.api.router import build_api_router
from telegate.api.schemas.system import ServiceInfo
from telegate.core.config import get_settings
from telegate.core.logging import configure_logging
from telegate.dispatch.dispatcher import UpdateDispatcher
from telegate.dispatch.handlers import build_default_registry
from telegate.telegram.bot import BotApi
from telegate.telegram.client import TelegramApiClient

logger = logging.getLogger(__name__)

_ROUTING_ERROR_TEXT = {
    status.HTTP_404_NOT_FOUND: "Not found",
    status.HTTP_405_METHOD_NOT_ALLOWED: "Method not allowed",
}


def create_app(
    *,
    dispatcher: UpdateDispatcher | None = None,
    http_transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    ``http_transport`` replaces the network layer under the Bot API client.
    """
    settings = get_settings()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Open the shared Bot API transport and close it on shutdown."""
        client = httpx.AsyncClient(
            timeout=settings.telegram_api_timeout_seconds,
            transport=http_transport,
        )
        app.state.settings = settings
        app.state.http_client = client
        app.state.bot = BotApi(
            TelegramApiClient(client, base_url=settings.telegram_api_base_url)
        )
        app.state.dispatcher = dispatcher or UpdateDispatcher(build_default_registry())
        logger.info(
            "Serving Telegram webhook at %s (environment=%s)",
            settings.telegram_webhook_path,
            settings.environment,
        )
        yield
        try:
            await client.aclose()
        except (RuntimeError, httpx.HTTPError):
            logger.exception("Failed to close Bot API HTTP client")
        app.state.http_client = None
        app.state.bot = None
        app.state.dispatcher = None

    app = FastAPI(
        title=settings.app_name,
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/docs" if settings.is_local else None,
        redoc_url="/redoc" if settings.is_local else None,
        openapi_url="/openapi.json" if settings.is_local else None,
    )
    app.add_middleware(BotEnvironmentMiddleware)
    app.add_middleware(RequestCorrelationMiddleware)
    app.include_router(build_api_router(webhook_path=settings.telegram_webhook_path))

    @app.exception_handler(StarletteHTTPException)
    async def routing_errors_as_text(request: Request, exc: StarletteHTTPException) -> Response:
        text = _ROUTING_ERROR_TEXT.get(exc.status_code)
        if text is None:
            return await http_exception_handler(request, exc)
        return PlainTextResponse(text, status_code=exc.status_code, headers=exc.headers)

    @app.get("/", tags=["meta"], response_model=ServiceInfo, response_model_exclude_none=True)
    def root() -> ServiceInfo:
        """Return basic service metadata."""
        return ServiceInfo(
            name=settings.app_name,
            status="ok",
            webhook_path=settings.telegram_webhook_path,
            environment=settings.environment if settings.is_local else None,
        )

    return app


app = create_app()
