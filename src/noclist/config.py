"""Configuration management."""

from functools import cache

from pydantic import ConfigDict, Field, computed_field
from pydantic_settings import BaseSettings

from .consts import AUTH_URL_PATH, DEFAULT_BASE_URL, DEFAULT_MAX_ATTEMPTS, USERS_URL_PATH
from .retry import RetryPolicy


class Config(BaseSettings):
    """Configuration with computed API endpoints."""

    model_config = ConfigDict(
        env_prefix="NOCLIST_", case_sensitive=False, extra="ignore"
    )
    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="Base URL for the BADSEC server",
    )
    log_level: str = Field(
        default="INFO",
        pattern=r"^(DEBUG|INFO|WARNING|ERROR)$",
        description="Logging level",
    )
    timeout_seconds: float = Field(
        default=10, gt=0, le=300, description="HTTP request timeout in seconds"
    )

    # Retry settings
    max_attempts: int = Field(
        default=DEFAULT_MAX_ATTEMPTS,
        ge=1,
        le=10,
        description="Total tries per request before giving up",
    )
    retry_delay_seconds: float = Field(
        default=0.0, ge=0, le=60, description="Delay before the first retry"
    )
    retry_backoff_factor: float = Field(
        default=2.0, ge=1, le=5, description="Delay multiplier for each further retry"
    )
    deadline_seconds: float | None = Field(
        default=None, gt=0, description="Overall deadline for one fetch"
    )

    @computed_field
    @property
    def auth_url(self) -> str:
        """URL for fetching the authentication token."""
        return f"{self.base_url}{AUTH_URL_PATH}"

    @computed_field
    @property
    def users_url(self) -> str:
        """URL for the VIP list."""
        return f"{self.base_url}{USERS_URL_PATH}"

    def retry_policy(self) -> RetryPolicy:
        """Build the RetryPolicy described by these settings."""
        return RetryPolicy(
            max_attempts=self.max_attempts,
            delay_seconds=self.retry_delay_seconds,
            backoff_factor=self.retry_backoff_factor,
        )


@cache
def get_config() -> Config:
    """Get a cached Config instance."""
    return Config()
