"""Registry resolving source identifiers to adapters.

Adapters are built once, with their credentials injected from settings.
Lookups are case-insensitive and unknown identifiers fail closed.
"""

from collections.abc import Mapping

from newsdesk.adapters.news_sources.base import NewsSourceAdapter
from newsdesk.adapters.news_sources.guardian import GuardianAdapter
from newsdesk.adapters.news_sources.newsapi import NewsAPIAdapter
from newsdesk.adapters.news_sources.nyt import NYTAdapter
from newsdesk.core.config import Settings
from newsdesk.core.constants import NYT_ARTICLE_SOURCE, NewsSource
from newsdesk.core.exceptions import UnsupportedSourceError

# Accepted spellings -> canonical source identifier
SOURCE_ALIASES: dict[str, NewsSource] = {
    "guardian": NewsSource.GUARDIAN,
    "nyt": NewsSource.NYT,
    NYT_ARTICLE_SOURCE: NewsSource.NYT,
    "newsapi": NewsSource.NEWSAPI,
}


class AdapterRegistry:
    """Static mapping from source identifier to adapter instance.

    Attributes:
        adapters: Adapter per canonical source identifier
    """

    def __init__(self, adapters: Mapping[NewsSource, NewsSourceAdapter]) -> None:
        missing = set(NewsSource) - set(adapters)
        if missing:
            raise ValueError(
                f"No adapter registered for: {sorted(source.value for source in missing)}"
            )
        self.adapters = dict(adapters)

    @classmethod
    def from_settings(cls, config: Settings) -> "AdapterRegistry":
        """Build every adapter with its credential from ``config``."""
        return cls(
            {
                NewsSource.GUARDIAN: GuardianAdapter(
                    api_key=config.news_guardian_apikey,
                    timeout=config.news_fetch_timeout,
                ),
                NewsSource.NYT: NYTAdapter(
                    api_key=config.news_nyt_apikey,
                    timeout=config.news_fetch_timeout,
                ),
                NewsSource.NEWSAPI: NewsAPIAdapter(
                    api_key=config.news_api_org_key,
                    timeout=config.news_fetch_timeout,
                    domains=config.newsapi_domains,
                    page_size=config.newsapi_page_size,
                ),
            }
        )

    def resolve(self, source_id: str) -> NewsSourceAdapter:
        """Return the adapter responsible for ``source_id``.

        Args:
            source_id: Source identifier, case-insensitive

        Returns:
            The matching adapter

        Raises:
            UnsupportedSourceError: If the identifier names no known source
        """
        source = SOURCE_ALIASES.get(source_id.strip().lower())
        if source is None:
            raise UnsupportedSourceError(source_id)
        return self.adapters[source]

    def configured_sources(self) -> dict[str, bool]:
        """Report, per canonical identifier, whether a credential is set."""
        return {
            source.value: adapter.is_configured()
            for source, adapter in self.adapters.items()
        }
