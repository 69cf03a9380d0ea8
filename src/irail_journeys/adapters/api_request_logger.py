"""Utility for logging outgoing API requests when IRJ_LOG_REQUESTS is enabled."""

import logging
import os
from typing import Any
from urllib.parse import urlencode

logger = logging.getLogger(__name__)


def should_log_requests() -> bool:
    """Check if request logging is enabled via the IRJ_LOG_REQUESTS environment variable."""
    return os.getenv("IRJ_LOG_REQUESTS", "").lower() == "true"


def build_request_url(url: str, params: dict[str, Any] | None = None) -> str:
    """Build the full request URL with sorted query parameters."""
    if not params:
        return url
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{urlencode(sorted(params.items()))}"


def log_api_request(method: str, url: str, params: dict[str, Any] | None = None) -> None:
    """Log an outgoing request if IRJ_LOG_REQUESTS is enabled."""
    if not should_log_requests():
        return
    logger.info(f"API Request: {method} {build_request_url(url, params)}")
