"""Application settings loaded from environment variables."""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_USER_AGENT = "Mozilla/5.0 (compatible; PageActions/1.0; +https://example.com/privacy)"


class Settings(BaseSettings):
    """
    Application configuration loaded from environment variables.

    Constructed once at startup and handed to the components that need it.
    Variables are unprefixed, e.g. ACTIONS_API_KEY, SERPAPI_KEY and PORT.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # ─── Server Settings ─────────────────────────────────────────────
    debug: bool = False
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 3000

    # CORS (comma-separated origins or "*")
    cors_origins: str = "*"

    # Request bodies above this size are rejected with 413
    max_request_body_bytes: int = 1024 * 1024

    def get_cors_origins(self) -> list[str]:
        """Get CORS origins as a list (parsed from comma-separated string)."""
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    # ─── Secrets ─────────────────────────────────────────────────────
    actions_api_key: str | None = None
    serpapi_key: str | None = None

    # ─── HTTP Client Settings ────────────────────────────────────────
    max_connections: int = 100
    max_keepalive_connections: int = 20
    fetch_timeout_seconds: float = Field(default=20.0, gt=0)
    user_agent: str = DEFAULT_USER_AGENT

    # ─── Extraction Settings ─────────────────────────────────────────
    article_extractor: Literal["readability", "trafilatura"] = "readability"
    batch_default_concurrency: int = Field(default=3, ge=1, le=5)

    def is_actions_key_configured(self) -> bool:
        """Check if the API key guarding the endpoints is set."""
        return bool(self.actions_api_key)

    def is_serpapi_configured(self) -> bool:
        """Check if SerpAPI is configured."""
        return bool(self.serpapi_key)
