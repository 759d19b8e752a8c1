"""News aggregation service.

This module provides the NewsAggregationService which fans a filter request
out to the requested news source adapters concurrently, keeps whatever
succeeded, and returns the merged articles sorted newest first.
"""

import asyncio
from datetime import datetime, timezone
from typing import Optional

from dateutil import parser as date_parser

from newsdesk.adapters.news_sources.base import NewsSourceAdapter
from newsdesk.adapters.news_sources.registry import AdapterRegistry
from newsdesk.core.exceptions import UnsupportedSourceError
from newsdesk.models.domain.article import AdapterResult, ArticleResponse, FilterRequest
from newsdesk.utils.logging import get_logger

logger = get_logger(__name__)


def parse_article_date(value: str) -> Optional[datetime]:
    """Parse an article date string into an aware datetime.

    Naive timestamps are read as UTC.

    Args:
        value: Date string as returned by the upstream (usually ISO-8601)

    Returns:
        Parsed datetime, or None if the string is empty or unparseable
    """
    if not value:
        return None

    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        try:
            parsed = date_parser.parse(value)
        except (ValueError, OverflowError):
            return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)

    # dateutil accepts offsets outside the range datetime can convert
    try:
        parsed.timestamp()
    except (ValueError, OverflowError):
        return None
    return parsed


def sort_articles_by_date(articles: list[ArticleResponse]) -> list[ArticleResponse]:
    """Sort articles newest first.

    Articles whose date cannot be parsed go last. The sort is stable, so
    articles with equal dates keep their merge order.
    """

    def sort_key(article: ArticleResponse) -> tuple[int, float]:
        parsed = parse_article_date(article.date)
        if parsed is None:
            return (1, 0.0)
        return (0, -parsed.timestamp())

    return sorted(articles, key=sort_key)


class NewsAggregationService:
    """Service fanning a filter request out to multiple news sources.

    Every requested adapter is invoked concurrently and awaited to completion.
    A source that fails, times out, or is not configured simply contributes no
    articles; the aggregate call itself does not fail.

    Attributes:
        registry: Resolves source identifiers to adapters
        adapter_timeout: Upper bound in seconds on a single adapter invocation
    """

    def __init__(self, registry: AdapterRegistry, adapter_timeout: float = 15.0):
        """Initialize the aggregation service.

        Args:
            registry: Adapter registry
            adapter_timeout: Seconds to wait for one adapter before treating it
                as failed
        """
        self.registry = registry
        self.adapter_timeout = adapter_timeout

    def resolve_adapters(self, source_ids: list[str]) -> list[NewsSourceAdapter]:
        """Resolve source identifiers to distinct adapters, in request order.

        Unknown identifiers are logged and skipped. An adapter named twice
        (e.g. ``nyt`` and ``nytimes``) is only returned once.
        """
        adapters: list[NewsSourceAdapter] = []
        for source_id in source_ids:
            try:
                adapter = self.registry.resolve(source_id)
            except UnsupportedSourceError as e:
                logger.warning(f"Ignoring requested source: {e}")
                continue
            if any(existing is adapter for existing in adapters):
                continue
            adapters.append(adapter)
        return adapters

    async def aggregate(self, request: FilterRequest) -> list[ArticleResponse]:
        """Fetch, merge and sort articles from every requested source.

        Args:
            request: Parsed filter request; ``sources`` is already expanded

        Returns:
            Articles from all sources that succeeded, newest first. Empty if
            no source succeeded.
        """
        adapters = self.resolve_adapters(request.sources)

        logger.info(
            f"Aggregating from {len(adapters)} sources",
            extra={"sources": [adapter.source_name for adapter in adapters]},
        )

        results = await asyncio.gather(
            *(self._invoke(adapter, request) for adapter in adapters),
            return_exceptions=True,
        )

        articles: list[ArticleResponse] = []
        for adapter, result in zip(adapters, results, strict=True):
            if isinstance(result, BaseException):
                logger.warning(
                    f"Dropping {adapter.source_name}: "
                    f"{type(result).__name__}: {result}"
                )
                continue
            if not result.success:
                logger.warning(f"Dropping {adapter.source_name}: source reported failure")
                continue
            articles.extend(result.data)

        logger.info(f"Aggregated {len(articles)} articles")

        return sort_articles_by_date(articles)

    async def _invoke(
        self, adapter: NewsSourceAdapter, request: FilterRequest
    ) -> AdapterResult:
        return await asyncio.wait_for(adapter.fetch(request), timeout=self.adapter_timeout)
