"""New York Times Article Search API adapter.

This module implements the news source adapter for the NYT Article Search API.
Filters are combined into a single Lucene-style ``fq`` expression.
"""

from typing import Optional

from newsdesk.adapters.news_sources.base import (
    QueryParams,
    get_payload,
    require_api_key,
    soft_fail,
)
from newsdesk.core.constants import (
    NYT_ARTICLE_SEARCH_URL,
    NYT_ARTICLE_SOURCE,
    NYT_MEDIA_HOST,
    NYT_SECTION_MAP,
)
from newsdesk.models.domain.article import AdapterResult, ArticleResponse, FilterRequest
from newsdesk.models.upstream.nyt import NYTApiResponse, NYTDoc

BYLINE_PREFIX = "By "


def map_category_to_section(category: str) -> str:
    """Map a UI category to the NYT ``section_name`` it corresponds to.

    Unmapped categories are passed through unchanged.
    """
    return NYT_SECTION_MAP.get(category.lower(), category)


def build_filter_query(request: FilterRequest) -> str:
    """Build the ``fq`` expression for a filter request.

    Clauses for date, sections and byline are ANDed together; multiple
    sections are ORed inside one ``section_name`` clause.

    Args:
        request: Normalized filter request

    Returns:
        The combined expression, or an empty string if no filter applies
    """
    clauses: list[str] = []

    if request.date:
        clauses.append(f'pub_date:("{request.date}")')

    if request.categories:
        sections = " OR ".join(
            f'"{map_category_to_section(category)}"' for category in request.categories
        )
        clauses.append(f"section_name:({sections})")

    if request.author:
        clauses.append(f'byline:("{request.author}")')

    return " AND ".join(clauses)


class NYTAdapter:
    """Adapter for the NYT Article Search API."""

    def __init__(self, api_key: Optional[str], timeout: float = 10.0) -> None:
        """Initialize NYT adapter.

        Args:
            api_key: Article Search API key; None disables the adapter
            timeout: Request timeout in seconds
        """
        self.source_name = NYT_ARTICLE_SOURCE
        self.api_key = api_key
        self.timeout = timeout

    def is_configured(self) -> bool:
        return bool(self.api_key)

    async def fetch(self, request: FilterRequest) -> AdapterResult:
        """Fetch articles from the NYT matching ``request``."""
        return await soft_fail(self.source_name, self._fetch_articles(request))

    async def _fetch_articles(self, request: FilterRequest) -> list[ArticleResponse]:
        api_key = require_api_key(self.source_name, self.api_key)
        payload = await get_payload(
            self.source_name,
            NYT_ARTICLE_SEARCH_URL,
            self.build_params(request, api_key),
            NYTApiResponse,
            self.timeout,
        )
        return [self._to_article(doc) for doc in payload.response.docs]

    def build_params(self, request: FilterRequest, api_key: str) -> QueryParams:
        params: list[tuple[str, str]] = [("api-key", api_key)]

        if request.keyword:
            params.append(("q", request.keyword))

        filter_query = build_filter_query(request)
        if filter_query:
            params.append(("fq", filter_query))

        return params

    def _to_article(self, doc: NYTDoc) -> ArticleResponse:
        image = f"{NYT_MEDIA_HOST}{doc.multimedia[0].url}" if doc.multimedia else ""

        byline = doc.byline.original if doc.byline else None
        author = byline.removeprefix(BYLINE_PREFIX) if byline else ""

        return ArticleResponse(
            id=doc.id,
            title=doc.headline.main,
            summary=doc.abstract or doc.snippet or "",
            date=doc.pub_date,
            # Section names are labelled as-is; NYT_SECTION_MAP is outbound only
            category=(doc.section_name or "").lower(),
            author=author,
            source=self.source_name,
            image=image,
            url=doc.web_url,
        )
