"""Telegram webhook ingress and webhook (un)registration routes."""

import hmac
import json
import logging
from typing import Annotated

import httpx
from fastapi import APIRouter, Depends, Header, Request, status
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import ValidationError

from telegate.api.dependencies import get_bot, get_dispatcher
from telegate.api.responses import build_error_response, build_text_response
from telegate.api.schemas.errors import ErrorResponse
from telegate.core.config import get_settings
from telegate.core.context import EnvironmentNotInitializedError, get_environment
from telegate.core.logging import redact_token
from telegate.core.metrics import WEBHOOK_REQUEST_COUNTER
from telegate.core.observability import log_event
from telegate.dispatch.dispatcher import UpdateDispatcher
from telegate.telegram.bot import BotApi
from telegate.telegram.exceptions import TelegramApiError
from telegate.telegram.types.update import Update, populated_variants

SECRET_HEADER = "X-Telegram-Bot-Api-Secret-Token"
REGISTER_PATH = "/registerWebhook"
UNREGISTER_PATH = "/unRegisterWebhook"
REGISTRATION_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE"]

router = APIRouter(tags=["telegram"])
logger = logging.getLogger(__name__)
Bot = Annotated[BotApi, Depends(get_bot)]
Dispatcher = Annotated[UpdateDispatcher, Depends(get_dispatcher)]


def _misconfigured_response(exc: EnvironmentNotInitializedError) -> JSONResponse:
    return build_error_response(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        code="TELEGRAM_BOT_MISCONFIGURED",
        message=str(exc),
    )


def _rejected_update_response(*, reason: str) -> JSONResponse:
    WEBHOOK_REQUEST_COUNTER.labels(outcome="invalid").inc()
    log_event(
        logger,
        level=logging.WARNING,
        event="telegram.webhook.rejected_update",
        reason=reason,
    )
    return build_error_response(
        status_code=status.HTTP_400_BAD_REQUEST,
        code="TELEGRAM_UPDATE_INVALID",
        message="Request body is not a valid Telegram update",
    )


def _webhook_url(request: Request) -> str:
    """Public URL of the webhook route.

    Uses ``TELEGRAM_WEBHOOK_BASE_URL`` when set, otherwise the scheme and
    host:port this request reached.
    """
    settings = getattr(request.app.state, "settings", None) or get_settings()
    base_url = settings.telegram_webhook_base_url
    if base_url is None:
        base_url = f"{request.url.scheme}://{request.url.netloc}"
    return f"{base_url}{settings.telegram_webhook_path}"


async def telegram_webhook(
    request: Request,
    bot: Bot,
    dispatcher: Dispatcher,
    webhook_secret: Annotated[str | None, Header(alias=SECRET_HEADER)] = None,
) -> JSONResponse:
    """Authenticate, classify and dispatch one update, then echo it back."""
    try:
        environment = get_environment()
    except EnvironmentNotInitializedError as exc:
        return _misconfigured_response(exc)

    if not hmac.compare_digest(
        (webhook_secret or "").encode("utf-8"),
        environment.secret.encode("utf-8"),
    ):
        WEBHOOK_REQUEST_COUNTER.labels(outcome="unauthorized").inc()
        log_event(logger, level=logging.WARNING, event="telegram.webhook.unauthorized")
        return build_error_response(
            status_code=status.HTTP_403_FORBIDDEN,
            code="TELEGRAM_WEBHOOK_UNAUTHORIZED",
            message="Unauthorized",
        )

    body = await request.body()
    try:
        payload = json.loads(body)
    except ValueError:
        return _rejected_update_response(reason="malformed_json")
    if not isinstance(payload, dict):
        return _rejected_update_response(reason="not_an_object")
    if len(populated_variants(payload)) > 1:
        return _rejected_update_response(reason="multiple_variants")

    try:
        update = Update.model_validate(payload)
    except ValidationError as exc:
        # Single-variant updates are always acknowledged.
        WEBHOOK_REQUEST_COUNTER.labels(outcome="skipped").inc()
        log_event(
            logger,
            level=logging.WARNING,
            event="telegram.webhook.invalid_update",
            update_id=payload.get("update_id"),
            error_count=exc.error_count(),
            first_error_loc=".".join(str(part) for part in exc.errors()[0]["loc"]),
        )
        return JSONResponse(status_code=status.HTTP_200_OK, content=payload)

    kind = await dispatcher.dispatch(update, bot)
    WEBHOOK_REQUEST_COUNTER.labels(outcome="accepted").inc()
    log_event(
        logger,
        event="telegram.webhook.ack",
        update_id=update.update_id,
        kind=kind,
    )
    return JSONResponse(status_code=status.HTTP_200_OK, content=payload)


@router.api_route(
    REGISTER_PATH,
    methods=REGISTRATION_METHODS,
    response_class=PlainTextResponse,
    response_model=None,
    responses={503: {"model": ErrorResponse}},
)
async def register_webhook(request: Request, bot: Bot) -> PlainTextResponse | JSONResponse:
    """Point Telegram at this service's webhook route, protected by the shared secret."""
    try:
        environment = get_environment()
    except EnvironmentNotInitializedError as exc:
        return _misconfigured_response(exc)

    url = _webhook_url(request)
    try:
        registered = await bot.set_webhook(url=url, secret_token=environment.secret)
    except (TelegramApiError, httpx.HTTPError) as exc:
        logger.warning("Webhook registration for %s failed: %s", url, exc)
        return build_text_response(f"Error: {redact_token(str(exc))}")

    log_event(logger, event="telegram.webhook.registered", url=url, registered=registered)
    if registered:
        return build_text_response("Webhook registered.")
    return build_text_response("Failed to register webhook.")


@router.api_route(
    UNREGISTER_PATH,
    methods=REGISTRATION_METHODS,
    response_class=PlainTextResponse,
    response_model=None,
    responses={503: {"model": ErrorResponse}},
)
async def unregister_webhook(bot: Bot) -> PlainTextResponse | JSONResponse:
    """Clear the webhook so Telegram stops delivering updates here."""
    try:
        get_environment()
    except EnvironmentNotInitializedError as exc:
        return _misconfigured_response(exc)

    try:
        unregistered = await bot.set_webhook(url="")
    except (TelegramApiError, httpx.HTTPError) as exc:
        logger.warning("Webhook removal failed: %s", exc)
        return build_text_response(f"Error: {redact_token(str(exc))}")

    log_event(logger, event="telegram.webhook.unregistered", unregistered=unregistered)
    if unregistered:
        return build_text_response("Webhook unregistered.")
    return build_text_response("Failed to unregister webhook.")


def build_router(webhook_path: str) -> APIRouter:
    """Return the Telegram routes with the update ingress mounted at ``webhook_path``."""
    telegram_router = APIRouter(tags=["telegram"])
    telegram_router.add_api_route(
        webhook_path,
        telegram_webhook,
        methods=["POST"],
        responses={
            400: {"model": ErrorResponse},
            403: {"model": ErrorResponse},
            503: {"model": ErrorResponse},
        },
    )
    telegram_router.include_router(router)
    return telegram_router
