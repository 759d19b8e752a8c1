"""Domain models."""

from newsdesk.models.domain.article import AdapterResult, ArticleResponse, FilterRequest
from newsdesk.models.domain.demo_article import DemoArticle

__all__ = [
    "FilterRequest",
    "ArticleResponse",
    "AdapterResult",
    "DemoArticle",
]
