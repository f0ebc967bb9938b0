"""Utility modules for Page Actions."""

from page_actions.utils.urls import is_html_content_type, is_http_url
from page_actions.utils.validation import flatten_validation_error

__all__ = [
    "is_http_url",
    "is_html_content_type",
    "flatten_validation_error",
]
