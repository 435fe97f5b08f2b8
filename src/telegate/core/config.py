from functools import lru_cache

from pydantic import Field, SecretStr, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOCAL_ENVIRONMENTS = frozenset({"development", "dev", "local", "test"})
DEFAULT_API_BASE_URL = "https://api.telegram.org"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,
    )

    app_name: str = Field(default="telegate", validation_alias="APP_NAME")
    environment: str = Field(default="development", validation_alias="ENVIRONMENT")
    host: str = Field(default="127.0.0.1", validation_alias="HOST")
    port: int = Field(default=8000, validation_alias="PORT")
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    telegram_bot_token: SecretStr | None = Field(
        default=None,
        validation_alias="TELEGRAM_BOT_TOKEN",
    )
    telegram_webhook_secret: SecretStr | None = Field(
        default=None,
        validation_alias="TELEGRAM_WEBHOOK_SECRET",
    )
    telegram_api_base_url: str = Field(
        default=DEFAULT_API_BASE_URL,
        validation_alias="TELEGRAM_API_BASE_URL",
    )
    telegram_api_timeout_seconds: float = Field(
        default=20.0,
        validation_alias="TELEGRAM_API_TIMEOUT_SECONDS",
        gt=0,
    )
    telegram_webhook_path: str = Field(
        default="/endpoint",
        validation_alias="TELEGRAM_WEBHOOK_PATH",
    )
    telegram_webhook_base_url: str | None = Field(
        default=None,
        validation_alias="TELEGRAM_WEBHOOK_BASE_URL",
    )
    polling_timeout_seconds: int = Field(
        default=25,
        validation_alias="POLLING_TIMEOUT_SECONDS",
        ge=0,
    )
    polling_error_sleep_seconds: float = Field(
        default=2.0,
        validation_alias="POLLING_ERROR_SLEEP_SECONDS",
        ge=0,
    )

    @field_validator("telegram_bot_token", "telegram_webhook_secret", mode="before")
    @classmethod
    def blank_secret_as_missing(cls, value: object) -> object:
        """Treat empty secrets from the environment as not configured."""
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("telegram_api_base_url", mode="before")
    @classmethod
    def normalize_api_base_url(cls, value: str) -> str:
        """Strip trailing slashes so URL building stays deterministic."""
        return str(value).strip().rstrip("/")

    @field_validator("telegram_webhook_base_url", mode="before")
    @classmethod
    def normalize_webhook_base_url(cls, value: object) -> object:
        """Blank means unset; otherwise drop trailing slashes."""
        if value is None:
            return None
        base_url = str(value).strip().rstrip("/")
        return base_url or None

    @field_validator("telegram_webhook_path", mode="before")
    @classmethod
    def normalize_webhook_path(cls, value: str) -> str:
        """Ensure the webhook path is absolute."""
        path = str(value).strip()
        if not path.startswith("/"):
            path = f"/{path}"
        return path

    @model_validator(mode="after")
    def validate_required_secrets(self) -> "Settings":
        """Require bot credentials outside local environments."""
        environment = self.environment.strip().lower()
        if environment in LOCAL_ENVIRONMENTS:
            return self
        if self.telegram_bot_token is None:
            raise ValueError("TELEGRAM_BOT_TOKEN is required outside development/local/test")
        if self.telegram_webhook_secret is None:
            raise ValueError("TELEGRAM_WEBHOOK_SECRET is required outside development/local/test")
        return self

    @property
    def is_local(self) -> bool:
        return self.environment.strip().lower() in LOCAL_ENVIRONMENTS


@lru_cache
def get_settings() -> Settings:
    """Build settings from environment variables."""
    return Settings()
