"""Core functionality for the news aggregation service."""

from newsdesk.core.config import settings
from newsdesk.core.exceptions import (
    ConfigurationMissingError,
    NewsdeskError,
    NewsSourceError,
    UnsupportedSourceError,
    UpstreamError,
)

__all__ = [
    "settings",
    "NewsdeskError",
    "NewsSourceError",
    "ConfigurationMissingError",
    "UpstreamError",
    "UnsupportedSourceError",
]
