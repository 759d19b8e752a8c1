"""Response models for the news endpoints."""

from pydantic import BaseModel, Field

from newsdesk.models.domain.article import ArticleResponse
from newsdesk.models.domain.demo_article import DemoArticle


class NewsResponse(BaseModel):
    """Aggregated news feed."""

    success: bool = Field(default=True, description="Always true for a 200 response")
    data: list[ArticleResponse] = Field(description="Articles, newest first")
    sources: list[str] = Field(description="Source identifiers that were requested")
    total: int = Field(description="Number of articles in data")


class ErrorResponse(BaseModel):
    error: str = Field(description="Generic error message")


class DemoArticleListResponse(BaseModel):
    articles: list[DemoArticle]
    total: int


class HealthResponse(BaseModel):
    status: str
    version: str
    environment: str
    sources: dict[str, bool] = Field(
        description="Whether each source has a credential configured"
    )
