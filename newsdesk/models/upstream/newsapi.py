"""NewsAPI.org ``/v2/everything`` response."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class NewsApiSource(BaseModel):
    id: Optional[str] = None
    name: Optional[str] = None


class NewsApiArticle(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    source: Optional[NewsApiSource] = None
    author: Optional[str] = None
    title: str
    description: Optional[str] = None
    url: str
    url_to_image: Optional[str] = Field(default=None, alias="urlToImage")
    published_at: str = Field(default="", alias="publishedAt")


class NewsApiResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    status: str = ""
    total_results: int = Field(default=0, alias="totalResults")
    articles: list[NewsApiArticle] = Field(default_factory=list)
