"""The Guardian Content API adapter.

This module implements the news source adapter for The Guardian, translating
filter requests into Content API search queries and mapping search results
into ArticleResponse objects.
"""

import re
from typing import Optional

from newsdesk.adapters.news_sources.base import (
    QueryParams,
    get_payload,
    require_api_key,
    soft_fail,
)
from newsdesk.core.constants import GUARDIAN_SEARCH_URL, GUARDIAN_SHOW_FIELDS, NewsSource
from newsdesk.models.domain.article import AdapterResult, ArticleResponse, FilterRequest
from newsdesk.models.upstream.guardian import GuardianApiResponse, GuardianResult


def format_author_tags(author: str) -> tuple[str, str]:
    """Build the two contributor profile slugs tried for an author name.

    The Guardian profile slug for a contributor is either the name with
    everything but letters and digits removed, or the name with whitespace
    runs replaced by hyphens.

    Args:
        author: Free-text author name, e.g. "Jane Doe"

    Returns:
        Tuple of (concatenated, hyphenated) slugs, e.g. ("janedoe", "jane-doe")
    """
    concatenated = re.sub(r"[^a-zA-Z0-9]", "", author).lower()
    hyphenated = re.sub(r"\s+", "-", author).lower()
    return concatenated, hyphenated


class GuardianAdapter:
    """Adapter for the Guardian Content API ``/search`` endpoint.

    Only the first requested category is sent as the ``section`` filter; the
    Content API accepts a single section per query. An author is expanded into
    two ``tag`` values which the API treats as alternatives.
    """

    def __init__(self, api_key: Optional[str], timeout: float = 10.0) -> None:
        """Initialize Guardian adapter.

        Args:
            api_key: Content API key; None disables the adapter
            timeout: Request timeout in seconds
        """
        self.source_name = NewsSource.GUARDIAN.value
        self.api_key = api_key
        self.timeout = timeout

    def is_configured(self) -> bool:
        return bool(self.api_key)

    async def fetch(self, request: FilterRequest) -> AdapterResult:
        """Fetch articles from The Guardian matching ``request``."""
        return await soft_fail(self.source_name, self._fetch_articles(request))

    async def _fetch_articles(self, request: FilterRequest) -> list[ArticleResponse]:
        api_key = require_api_key(self.source_name, self.api_key)
        payload = await get_payload(
            self.source_name,
            GUARDIAN_SEARCH_URL,
            self.build_params(request, api_key),
            GuardianApiResponse,
            self.timeout,
        )
        return [self._to_article(result) for result in payload.response.results]

    def build_params(self, request: FilterRequest, api_key: str) -> QueryParams:
        """Translate a filter request into Content API query parameters.

        Args:
            request: Normalized filter request
            api_key: Content API key

        Returns:
            Ordered list of (key, value) pairs; ``tag`` may appear twice
        """
        params: list[tuple[str, str]] = [
            ("api-key", api_key),
            ("show-fields", GUARDIAN_SHOW_FIELDS),
        ]

        if request.keyword:
            params.append(("q", request.keyword))

        if request.categories:
            params.append(("section", request.categories[0]))

        # Single-day range
        if request.date:
            params.append(("from-date", request.date))
            params.append(("to-date", request.date))

        if request.author:
            concatenated, hyphenated = format_author_tags(request.author)
            params.append(("tag", f"profile/{concatenated}"))
            params.append(("tag", f"profile/{hyphenated}"))

        return params

    def _to_article(self, result: GuardianResult) -> ArticleResponse:
        fields = result.fields
        return ArticleResponse(
            id=result.id,
            title=result.web_title,
            summary=(fields.trail_text if fields else None) or "",
            date=result.web_publication_date,
            category=result.section_id,
            author=(fields.byline if fields else None) or "",
            source=self.source_name,
            image=(fields.thumbnail if fields else None) or "",
            url=result.web_url,
        )
