"""Demo article model used by the local, in-memory filtering path."""

from typing import Optional

from pydantic import BaseModel, ConfigDict


class DemoArticle(BaseModel):
    """A locally bundled article for demos and UI development."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    description: str
    content: str
    source: str
    author: Optional[str] = None
    published_at: str
    url: str
    url_to_image: Optional[str] = None
    category: Optional[str] = None
    read_time: Optional[int] = None
