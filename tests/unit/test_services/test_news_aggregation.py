"""Unit tests for NewsAggregationService.

This module tests the fan-out, partial failure tolerance and date ordering
of the aggregation service, using fake adapters.
"""

import asyncio
from datetime import datetime, timezone

import pytest

from newsdesk.adapters.news_sources.registry import AdapterRegistry
from newsdesk.core.constants import NewsSource
from newsdesk.models.domain.article import AdapterResult, FilterRequest
from newsdesk.services.news_aggregation import (
    NewsAggregationService,
    parse_article_date,
    sort_articles_by_date,
)


@pytest.fixture
def fake_adapters(adapter_factory):
    return {
        NewsSource.GUARDIAN: adapter_factory("guardian"),
        NewsSource.NYT: adapter_factory("nytimes"),
        NewsSource.NEWSAPI: adapter_factory("newsapi"),
    }


@pytest.fixture
def service(fake_adapters):
    return NewsAggregationService(AdapterRegistry(fake_adapters), adapter_timeout=1)


def test_parse_article_date_formats():
    expected = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)

    assert parse_article_date("2024-05-01T12:00:00Z") == expected
    assert parse_article_date("2024-05-01T12:00:00+0000") == expected
    assert parse_article_date("2024-05-01T14:00:00+02:00") == expected
    assert parse_article_date("2024-05-01T12:00:00") == expected


@pytest.mark.parametrize("value", ["", "not a date", "2024-13-45", "2024-05-01T12:00:00+99:00"])
def test_parse_article_date_invalid(value):
    assert parse_article_date(value) is None


def test_sort_articles_by_date(article_factory):
    articles = [
        article_factory("a", "old", "2024-01-01T00:00:00Z"),
        article_factory("a", "bad", "garbage"),
        article_factory("a", "new", "2024-03-01T00:00:00Z"),
        # 08:00 UTC, older than 09:00 UTC below
        article_factory("a", "offset", "2024-02-01T10:00:00+02:00"),
        article_factory("a", "utc", "2024-02-01T09:00:00Z"),
        article_factory("a", "empty", ""),
        article_factory("a", "bad-offset", "2024-05-01T12:00:00+99:00"),
    ]

    ordered = [article.id for article in sort_articles_by_date(articles)]

    assert ordered == ["new", "utc", "offset", "old", "bad", "empty", "bad-offset"]


def test_sort_is_stable_for_equal_dates(article_factory):
    articles = [
        article_factory("guardian", "g", "2024-01-01T00:00:00Z"),
        article_factory("newsapi", "n", "2024-01-01T00:00:00Z"),
    ]

    assert [a.id for a in sort_articles_by_date(articles)] == ["g", "n"]


@pytest.mark.asyncio
async def test_aggregate_merges_and_sorts(service, fake_adapters, article_factory):
    fake_adapters[NewsSource.GUARDIAN].fetch.return_value = AdapterResult.ok(
        "guardian",
        [
            article_factory("guardian", "g1", "2024-05-01T10:00:00Z"),
            article_factory("guardian", "g2", "2024-05-03T10:00:00Z"),
        ],
    )
    fake_adapters[NewsSource.NYT].fetch.return_value = AdapterResult.ok(
        "nytimes",
        [article_factory("nytimes", "n1", "2024-05-02T10:00:00Z")],
    )

    articles = await service.aggregate(
        FilterRequest(sources=["guardian", "nyt", "newsapi"])
    )

    assert [a.id for a in articles] == ["g2", "n1", "g1"]
    for newer, older in zip(articles, articles[1:]):
        assert parse_article_date(newer.date) >= parse_article_date(older.date)


@pytest.mark.asyncio
async def test_aggregate_invokes_each_requested_adapter(service, fake_adapters):
    request = FilterRequest(keyword="AI", sources=["guardian", "nyt", "newsapi"])

    await service.aggregate(request)

    for adapter in fake_adapters.values():
        adapter.fetch.assert_awaited_once_with(request)


@pytest.mark.asyncio
async def test_aggregate_only_invokes_requested_sources(service, fake_adapters):
    await service.aggregate(FilterRequest(sources=["newsapi"]))

    fake_adapters[NewsSource.NEWSAPI].fetch.assert_awaited_once()
    fake_adapters[NewsSource.GUARDIAN].fetch.assert_not_awaited()
    fake_adapters[NewsSource.NYT].fetch.assert_not_awaited()


@pytest.mark.asyncio
async def test_partial_failure_keeps_successful_sources(
    service, fake_adapters, article_factory
):
    """Guardian fails while NewsAPI succeeds: only NewsAPI articles come back."""
    fake_adapters[NewsSource.GUARDIAN].fetch.return_value = AdapterResult.failure("guardian")
    newsapi_articles = [
        article_factory("newsapi", "newsapi-0", "2024-05-01T10:00:00Z"),
        article_factory("newsapi", "newsapi-1", "2024-05-02T10:00:00Z"),
    ]
    fake_adapters[NewsSource.NEWSAPI].fetch.return_value = AdapterResult.ok(
        "newsapi", newsapi_articles
    )

    articles = await service.aggregate(FilterRequest(sources=["guardian", "newsapi"]))

    assert len(articles) == len(newsapi_articles)
    assert {a.source for a in articles} == {"newsapi"}


@pytest.mark.asyncio
async def test_all_sources_failing_returns_empty_list(service, fake_adapters):
    for source, adapter in fake_adapters.items():
        adapter.fetch.return_value = AdapterResult.failure(source.value)

    articles = await service.aggregate(
        FilterRequest(sources=["guardian", "nyt", "newsapi"])
    )

    assert articles == []


@pytest.mark.asyncio
async def test_raising_adapter_does_not_cancel_siblings(
    service, fake_adapters, article_factory
):
    fake_adapters[NewsSource.GUARDIAN].fetch.side_effect = RuntimeError("unexpected")
    fake_adapters[NewsSource.NYT].fetch.return_value = AdapterResult.ok(
        "nytimes", [article_factory("nytimes", "n1", "2024-05-02T10:00:00Z")]
    )

    articles = await service.aggregate(
        FilterRequest(sources=["guardian", "nyt", "newsapi"])
    )

    assert [a.id for a in articles] == ["n1"]
    fake_adapters[NewsSource.NEWSAPI].fetch.assert_awaited_once()


@pytest.mark.asyncio
async def test_slow_adapter_is_treated_as_failed(fake_adapters, article_factory):
    async def slow_fetch(request):
        await asyncio.sleep(5)
        return AdapterResult.ok(
            "guardian", [article_factory("guardian", "late", "2024-05-01T00:00:00Z")]
        )

    fake_adapters[NewsSource.GUARDIAN].fetch.side_effect = slow_fetch
    fake_adapters[NewsSource.NEWSAPI].fetch.return_value = AdapterResult.ok(
        "newsapi", [article_factory("newsapi", "newsapi-0", "2024-05-01T00:00:00Z")]
    )
    service = NewsAggregationService(AdapterRegistry(fake_adapters), adapter_timeout=0.05)

    articles = await service.aggregate(FilterRequest(sources=["guardian", "newsapi"]))

    assert [a.id for a in articles] == ["newsapi-0"]


@pytest.mark.asyncio
async def test_unknown_sources_are_skipped(service, fake_adapters):
    articles = await service.aggregate(FilterRequest(sources=["bbc", "newsapi"]))

    assert articles == []
    fake_adapters[NewsSource.NEWSAPI].fetch.assert_awaited_once()


@pytest.mark.asyncio
async def test_adapter_named_twice_runs_once(service, fake_adapters):
    await service.aggregate(FilterRequest(sources=["nyt", "nytimes", "NYT"]))

    fake_adapters[NewsSource.NYT].fetch.assert_awaited_once()


@pytest.mark.asyncio
async def test_no_deduplication_across_sources(service, fake_adapters, article_factory):
    shared = article_factory("nytimes", "same-story", "2024-05-01T00:00:00Z")
    fake_adapters[NewsSource.NYT].fetch.return_value = AdapterResult.ok("nytimes", [shared])
    fake_adapters[NewsSource.NEWSAPI].fetch.return_value = AdapterResult.ok("newsapi", [shared])

    articles = await service.aggregate(FilterRequest(sources=["nyt", "newsapi"]))

    assert len(articles) == 2


@pytest.mark.asyncio
async def test_out_of_range_offset_sorts_last(service, fake_adapters, article_factory):
    """A date dateutil accepts but datetime cannot convert must not fail the call."""
    fake_adapters[NewsSource.NEWSAPI].fetch.return_value = AdapterResult.ok(
        "newsapi",
        [
            article_factory("newsapi", "newsapi-0", "2024-05-01T12:00:00+99:00"),
            article_factory("newsapi", "newsapi-1", "2024-05-02T12:00:00Z"),
        ],
    )

    articles = await service.aggregate(FilterRequest(sources=["newsapi"]))

    assert [a.id for a in articles] == ["newsapi-1", "newsapi-0"]
