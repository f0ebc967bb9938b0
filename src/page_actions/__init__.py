"""Page Actions: fetch and extract web pages for LLM agents."""

__version__ = "0.1.0"
