"""Demo articles API router.

Serves the bundled demo articles through the same filters the UI offers,
without calling any upstream API.
"""

from typing import Optional

from fastapi import APIRouter, Query, status

from newsdesk.api.dependencies import DemoServiceDep
from newsdesk.models.api.news import DemoArticleListResponse
from newsdesk.services.filter_parser import split_list_param
from newsdesk.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter()


@router.get(
    "/demo/articles",
    response_model=DemoArticleListResponse,
    status_code=status.HTTP_200_OK,
    summary="Filter demo articles",
    description="Filter the locally bundled demo articles. List parameters are comma-separated.",
)
async def list_demo_articles(
    demo_service: DemoServiceDep,
    q: str = Query("", description="Substring of title, description or content"),
    sources: Optional[str] = Query(None, description="Comma-separated sources or 'all'"),
    categories: Optional[str] = Query(None, description="Comma-separated categories or 'all'"),
    date: str = Query("", description="Publication date, YYYY-MM-DD"),
    authors: Optional[str] = Query(None, description="Comma-separated author names"),
) -> DemoArticleListResponse:
    articles = demo_service.filter(
        query=q,
        sources=split_list_param(sources),
        categories=split_list_param(categories),
        date=date,
        authors=split_list_param(authors),
    )
    logger.debug(f"Demo filter matched {len(articles)} articles")
    return DemoArticleListResponse(articles=articles, total=len(articles))
