"""Request-scoped context: correlation id and bot credentials.

Both values live in ``ContextVar`` slots that are bound at the start of an
inbound request and reset when it ends. Two requests served concurrently by
the same process therefore never observe each other's credentials.
"""

from __future__ import annotations

from contextvars import ContextVar, Token
from dataclasses import dataclass

from telegate.core.config import Settings


class EnvironmentNotInitializedError(RuntimeError):
    """Raised when bot credentials are read before being bound."""

    def __init__(self, message: str = "Bot environment is not initialized") -> None:
        super().__init__(message)


@dataclass(frozen=True)
class BotEnvironment:
    """Shared webhook secret and Bot API token for one request."""

    secret: str
    token: str

    def __repr__(self) -> str:
        return "BotEnvironment(secret='***', token='***')"

    @classmethod
    def from_settings(cls, settings: Settings) -> "BotEnvironment":
        """Build an environment from configuration, failing if a credential is absent."""
        if settings.telegram_bot_token is None:
            raise EnvironmentNotInitializedError("TELEGRAM_BOT_TOKEN is not configured")
        if settings.telegram_webhook_secret is None:
            raise EnvironmentNotInitializedError("TELEGRAM_WEBHOOK_SECRET is not configured")
        return cls(
            secret=settings.telegram_webhook_secret.get_secret_value(),
            token=settings.telegram_bot_token.get_secret_value(),
        )


_REQUEST_ID: ContextVar[str | None] = ContextVar("telegate_request_id", default=None)
_ENVIRONMENT: ContextVar[BotEnvironment | None] = ContextVar(
    "telegate_bot_environment",
    default=None,
)


def get_request_id() -> str | None:
    return _REQUEST_ID.get()


def bind_request_id(request_id: str) -> Token[str | None]:
    return _REQUEST_ID.set(request_id)


def unbind_request_id(token: Token[str | None]) -> None:
    _REQUEST_ID.reset(token)


def get_environment() -> BotEnvironment:
    """Return the environment bound to the current context."""
    environment = _ENVIRONMENT.get()
    if environment is None:
        raise EnvironmentNotInitializedError()
    return environment


def set_environment(environment: BotEnvironment) -> Token[BotEnvironment | None]:
    """Bind an environment to the current context, overwriting any earlier binding in it."""
    return _ENVIRONMENT.set(environment)


def reset_environment(token: Token[BotEnvironment | None]) -> None:
    """Restore the binding that was active before ``set_environment``."""
    _ENVIRONMENT.reset(token)
