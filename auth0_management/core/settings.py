from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="AUTH0_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Tenant
    domain: str | None = None
    audience: str | None = None

    # Credentials - either a static management token or a client credentials pair
    token: str | None = None
    client_id: str | None = None
    client_secret: str | None = None

    # HTTP client
    http_timeout_seconds: float = 30.0
    connect_timeout_seconds: float = 10.0
    user_agent: str = "auth0-management-python"

    # Token endpoint
    token_max_retries: int = 3
    token_expiry_leeway_seconds: int = 60

    # Logging
    log_level: str = "INFO"
    structured_logs: bool = False

    @field_validator("domain")
    @classmethod
    def validate_domain(cls, v):
        if v is None:
            return v
        return normalize_domain(v)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def normalize_domain(value: str) -> str:
    """Reduce "https://tenant.auth0.com/" to the bare authority."""
    cleaned = value.strip().removeprefix("https://").removeprefix("http://").rstrip("/")
    if not cleaned:
        raise ValueError("Tenant domain must not be empty")
    return cleaned
