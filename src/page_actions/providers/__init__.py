"""Search providers module."""

from page_actions.providers.serpapi import SerpAPIProvider

__all__ = [
    "SerpAPIProvider",
]
