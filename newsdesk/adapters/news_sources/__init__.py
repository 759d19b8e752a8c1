"""News source adapters."""

from newsdesk.adapters.news_sources.base import NewsSourceAdapter
from newsdesk.adapters.news_sources.guardian import GuardianAdapter
from newsdesk.adapters.news_sources.newsapi import NewsAPIAdapter
from newsdesk.adapters.news_sources.nyt import NYTAdapter
from newsdesk.adapters.news_sources.registry import AdapterRegistry

__all__ = [
    "NewsSourceAdapter",
    "GuardianAdapter",
    "NYTAdapter",
    "NewsAPIAdapter",
    "AdapterRegistry",
]
