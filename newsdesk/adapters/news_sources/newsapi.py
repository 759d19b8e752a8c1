"""NewsAPI.org adapter.

NewsAPI.org ``/v2/everything`` supports keyword and date filtering only, so
category and author filters are accepted and ignored. Results are restricted
to a fixed set of domains and always sorted newest first upstream.
"""

from typing import Optional

from newsdesk.adapters.news_sources.base import (
    QueryParams,
    get_payload,
    require_api_key,
    soft_fail,
)
from newsdesk.core.constants import (
    NEWSAPI_DEFAULT_DOMAINS,
    NEWSAPI_EVERYTHING_URL,
    NEWSAPI_SORT_BY,
    NewsSource,
)
from newsdesk.models.domain.article import AdapterResult, ArticleResponse, FilterRequest
from newsdesk.models.upstream.newsapi import NewsApiArticle, NewsApiResponse

class NewsAPIAdapter:
    """Adapter for NewsAPI.org.

    The upstream supplies no article id, so ids are synthesized from the
    position in the response (``newsapi-0``, ``newsapi-1``, ...). They are
    not stable across calls.

    ``source`` is the publisher name NewsAPI reports for the article and
    ``category`` is always empty.
    """

    def __init__(
        self,
        api_key: Optional[str],
        timeout: float = 10.0,
        domains: tuple[str, ...] | list[str] = NEWSAPI_DEFAULT_DOMAINS,
        page_size: int = 10,
    ) -> None:
        """Initialize NewsAPI adapter.

        Args:
            api_key: NewsAPI.org key; None disables the adapter
            timeout: Request timeout in seconds
            domains: Domains results are restricted to
            page_size: Number of most recent results to request
        """
        self.source_name = NewsSource.NEWSAPI.value
        self.api_key = api_key
        self.timeout = timeout
        self.domains = tuple(domains)
        self.page_size = page_size

    def is_configured(self) -> bool:
        return bool(self.api_key)

    async def fetch(self, request: FilterRequest) -> AdapterResult:
        """Fetch the most recent NewsAPI.org articles matching ``request``."""
        return await soft_fail(self.source_name, self._fetch_articles(request))

    async def _fetch_articles(self, request: FilterRequest) -> list[ArticleResponse]:
        api_key = require_api_key(self.source_name, self.api_key)
        payload = await get_payload(
            self.source_name,
            NEWSAPI_EVERYTHING_URL,
            self.build_params(request, api_key),
            NewsApiResponse,
            self.timeout,
        )
        return [
            self._to_article(index, article)
            for index, article in enumerate(payload.articles)
        ]

    def build_params(self, request: FilterRequest, api_key: str) -> QueryParams:
        params: list[tuple[str, str]] = [
            ("apiKey", api_key),
            ("domains", ",".join(self.domains)),
        ]

        if request.keyword:
            params.append(("q", request.keyword))

        if request.date:
            params.append(("from", request.date))
            params.append(("to", request.date))

        params.append(("sortBy", NEWSAPI_SORT_BY))
        params.append(("pageSize", str(self.page_size)))

        return params

    def _to_article(self, index: int, article: NewsApiArticle) -> ArticleResponse:
        publisher = article.source.name if article.source else None
        return ArticleResponse(
            id=f"newsapi-{index}",
            title=article.title,
            summary=article.description or "",
            date=article.published_at,
            category="",
            author=article.author or "",
            source=publisher or self.source_name,
            image=article.url_to_image or "",
            url=article.url,
        )
