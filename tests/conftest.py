"""Pytest configuration and shared fixtures.

This module provides upstream payload samples, settings and fake adapters
shared by the adapter, service and API tests.
"""

from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from newsdesk.core.config import Settings
from newsdesk.models.domain.article import AdapterResult, ArticleResponse, FilterRequest


def make_article(source: str, article_id: str, date: str) -> ArticleResponse:
    """Build a normalized article with placeholder text fields."""
    return ArticleResponse(
        id=article_id,
        title=f"{source} article {article_id}",
        summary="",
        date=date,
        category="",
        author="",
        source=source,
        image="",
        url=f"https://example.com/{source}/{article_id}",
    )


def make_adapter(source_name: str, result: AdapterResult | None = None) -> MagicMock:
    """Create a fake adapter whose fetch returns ``result``.

    Defaults to a successful result with no articles.
    """
    adapter = MagicMock()
    adapter.source_name = source_name
    adapter.is_configured = MagicMock(return_value=True)
    adapter.fetch = AsyncMock(
        return_value=result if result is not None else AdapterResult.ok(source_name, [])
    )
    return adapter


@pytest.fixture
def test_settings() -> Settings:
    """Settings with every source configured and no .env file."""
    return Settings(
        _env_file=None,
        news_guardian_apikey="guardian-key",
        news_nyt_apikey="nyt-key",
        news_api_org_key="newsapi-key",
        log_level="DEBUG",
        environment="testing",
    )


@pytest.fixture
def empty_request() -> FilterRequest:
    return FilterRequest(sources=["guardian", "nyt", "newsapi"])


@pytest.fixture
def guardian_payload() -> dict[str, Any]:
    """Guardian /search response with two results."""
    return {
        "response": {
            "status": "ok",
            "userTier": "developer",
            "total": 2,
            "results": [
                {
                    "id": "technology/2024/may/01/ai-regulation",
                    "type": "article",
                    "sectionId": "technology",
                    "sectionName": "Technology",
                    "webPublicationDate": "2024-05-01T10:00:00Z",
                    "webTitle": "AI regulation moves forward",
                    "webUrl": "https://www.theguardian.com/technology/2024/may/01/ai-regulation",
                    "apiUrl": "https://content.guardianapis.com/technology/2024/may/01/ai-regulation",
                    "fields": {
                        "trailText": "Lawmakers agree on a framework",
                        "byline": "Jane Doe",
                        "thumbnail": "https://media.guim.co.uk/thumb.jpg",
                    },
                    "isHosted": False,
                    "pillarId": "pillar/news",
                    "pillarName": "News",
                },
                {
                    "id": "world/2024/may/02/summit",
                    "type": "article",
                    "sectionId": "world",
                    "sectionName": "World news",
                    "webPublicationDate": "2024-05-02T08:30:00Z",
                    "webTitle": "Summit opens",
                    "webUrl": "https://www.theguardian.com/world/2024/may/02/summit",
                    "apiUrl": "https://content.guardianapis.com/world/2024/may/02/summit",
                    "isHosted": False,
                },
            ],
        }
    }


@pytest.fixture
def nyt_payload() -> dict[str, Any]:
    """NYT articlesearch response with two documents."""
    return {
        "status": "OK",
        "copyright": "Copyright (c) 2024 The New York Times Company.",
        "response": {
            "docs": [
                {
                    "_id": "nyt://article/1",
                    "abstract": "Congress debates the budget.",
                    "snippet": "Snippet one",
                    "web_url": "https://www.nytimes.com/2024/05/01/us/politics/budget.html",
                    "pub_date": "2024-05-01T12:00:00+0000",
                    "section_name": "Politics",
                    "headline": {"main": "Budget debate"},
                    "byline": {"original": "By Jane Doe"},
                    "multimedia": [
                        {"url": "images/2024/05/01/budget.jpg", "type": "image", "subtype": "xlarge"},
                        {"url": "images/2024/05/01/budget-thumb.jpg", "type": "image", "subtype": "thumb"},
                    ],
                },
                {
                    "_id": "nyt://article/2",
                    "abstract": "",
                    "snippet": "Markets rally",
                    "web_url": "https://www.nytimes.com/2024/05/02/business/markets.html",
                    "pub_date": "2024-05-02T09:00:00+0000",
                    "section_name": "Business Day",
                    "headline": {"main": "Markets rally"},
                    "byline": {"original": None},
                    "multimedia": [],
                },
            ],
            "meta": {"hits": 2, "offset": 0, "time": 12},
        },
    }


@pytest.fixture
def newsapi_payload() -> dict[str, Any]:
    """NewsAPI /everything response with two articles, older one first."""
    return {
        "status": "ok",
        "totalResults": 2,
        "articles": [
            {
                "source": {"id": "bbc-news", "name": "BBC News"},
                "author": "BBC Staff",
                "title": "AI chips in short supply",
                "description": "Demand outpaces production",
                "url": "https://www.bbc.co.uk/news/technology-1",
                "urlToImage": "https://ichef.bbci.co.uk/1.jpg",
                "publishedAt": "2024-05-01T07:00:00Z",
                "content": "Full text",
            },
            {
                "source": {"id": None, "name": "Wired"},
                "author": None,
                "title": "AI models get smaller",
                "description": None,
                "url": "https://www.wired.com/story/ai-small-models/",
                "urlToImage": None,
                "publishedAt": "2024-05-03T15:30:00Z",
                "content": "Full text",
            },
        ],
    }


@pytest.fixture
def article_factory():
    """Expose make_article to tests."""
    return make_article


@pytest.fixture
def adapter_factory():
    """Expose make_adapter to tests."""
    return make_adapter
