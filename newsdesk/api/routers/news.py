"""News aggregation API router.

This module provides the endpoint the UI uses to load a filtered, merged
news feed from every requested source.
"""

from typing import Optional, Union

from fastapi import APIRouter, Query, status
from fastapi.responses import JSONResponse

from newsdesk.api.dependencies import AggregationServiceDep
from newsdesk.models.api.news import ErrorResponse, NewsResponse
from newsdesk.services.filter_parser import parse_filter_params
from newsdesk.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter()

GENERIC_ERROR = "Failed to fetch news data"


@router.get(
    "/news",
    response_model=NewsResponse,
    status_code=status.HTTP_200_OK,
    responses={500: {"model": ErrorResponse}},
    summary="Search news across sources",
    description=(
        "Query The Guardian, The New York Times and NewsAPI.org with the same "
        "filters and return the normalized results merged newest first. Sources "
        "that fail or are not configured are left out of the result."
    ),
)
async def get_news(
    aggregation_service: AggregationServiceDep,
    q: Optional[str] = Query(None, description="Free-text keyword"),
    keyword: Optional[str] = Query(None, description="Alias of q"),
    category: Optional[str] = Query(None, description="Comma-separated categories or 'all'"),
    source: Optional[str] = Query(None, description="Comma-separated sources or 'all'"),
    date: Optional[str] = Query(None, description="Publication date, YYYY-MM-DD"),
    author: Optional[str] = Query(None, description="Author name"),
) -> Union[NewsResponse, JSONResponse]:
    """Aggregate news from the requested sources.

    Args:
        aggregation_service: News aggregation service (injected)
        q: Free-text keyword
        keyword: Alias of q, used when q is absent
        category: Comma-separated categories, or "all"
        source: Comma-separated source identifiers, or "all" (default)
        date: Publication date
        author: Author name

    Returns:
        The merged feed, or a generic 500 error body
    """
    raw_params = {
        name: value
        for name, value in (
            ("q", q),
            ("keyword", keyword),
            ("category", category),
            ("source", source),
            ("date", date),
            ("author", author),
        )
        if value is not None
    }

    try:
        filters = parse_filter_params(raw_params)

        logger.info(
            "Received news request",
            extra={
                "keyword": filters.keyword,
                "categories": filters.categories,
                "sources": filters.sources,
            },
        )

        articles = await aggregation_service.aggregate(filters)

        return NewsResponse(
            success=True,
            data=articles,
            sources=filters.sources,
            total=len(articles),
        )

    except Exception as e:
        logger.error(f"Error fetching news data: {e}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ErrorResponse(error=GENERIC_ERROR).model_dump(),
        )
