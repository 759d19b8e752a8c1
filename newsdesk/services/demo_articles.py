"""In-memory filtering over bundled demo articles.

Used by the UI when no upstream credentials are available. Nothing here
touches the network.
"""

import json
from pathlib import Path
from typing import Iterable, Optional

from newsdesk.core.constants import ALL_SENTINEL
from newsdesk.models.domain.demo_article import DemoArticle
from newsdesk.services.news_aggregation import parse_article_date
from newsdesk.utils.logging import get_logger

logger = get_logger(__name__)

DEMO_DATA_PATH = Path(__file__).resolve().parent.parent / "data" / "demo_articles.json"


def load_demo_articles(path: Path = DEMO_DATA_PATH) -> list[DemoArticle]:
    """Load demo articles from a JSON file."""
    with path.open(encoding="utf-8") as f:
        raw = json.load(f)
    return [DemoArticle.model_validate(item) for item in raw]


class DemoArticleService:
    """Filters a fixed list of demo articles.

    Attributes:
        articles: The full, unfiltered demo article list
    """

    def __init__(self, articles: Optional[list[DemoArticle]] = None):
        self.articles = articles if articles is not None else load_demo_articles()
        logger.debug(f"Loaded {len(self.articles)} demo articles")

    def filter(
        self,
        query: str = "",
        sources: Iterable[str] = (),
        categories: Iterable[str] = (),
        date: str = "",
        authors: Iterable[str] = (),
    ) -> list[DemoArticle]:
        """Return demo articles matching every given filter.

        Args:
            query: Case-insensitive substring of title, description or content
            sources: Allowed sources; empty or containing "all" means any
            categories: Allowed categories; empty or containing "all" means any
            date: ``YYYY-MM-DD``; keeps articles published that calendar day
            authors: Allowed authors (exact match); empty means any

        Returns:
            Matching articles in their original order
        """
        sources = list(sources)
        categories = list(categories)
        authors = list(authors)

        results = list(self.articles)

        if query:
            needle = query.lower()
            results = [
                article
                for article in results
                if needle in article.title.lower()
                or needle in article.description.lower()
                or needle in article.content.lower()
            ]

        if sources and ALL_SENTINEL not in sources:
            results = [article for article in results if article.source in sources]

        if categories and ALL_SENTINEL not in categories:
            results = [
                article
                for article in results
                if article.category and article.category in categories
            ]

        if date:
            results = [
                article
                for article in results
                if _published_on(article, date)
            ]

        if authors:
            results = [
                article
                for article in results
                if article.author and article.author in authors
            ]

        return results


def _published_on(article: DemoArticle, date: str) -> bool:
    published = parse_article_date(article.published_at)
    return published is not None and published.date().isoformat() == date
