"""Configuration for Page Actions."""

from functools import lru_cache

from page_actions.config.settings import Settings


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Build the process-wide settings once, on first use at startup."""
    return Settings()


__all__ = ["Settings", "get_settings"]
