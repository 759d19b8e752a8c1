"""Source identifiers, upstream endpoints and fixed lookup tables."""

from enum import Enum


class NewsSource(str, Enum):
    """Source identifiers accepted in a filter request."""

    GUARDIAN = "guardian"
    NYT = "nyt"
    NEWSAPI = "newsapi"


# Label carried by NYT articles; requests accept it as an alias of "nyt"
NYT_ARTICLE_SOURCE = "nytimes"

# Sentinel meaning "no filter" for categories and "every source" for sources
ALL_SENTINEL = "all"

# Expansion of the "all" source sentinel, in dispatch order
ALL_SOURCES: tuple[str, ...] = (
    NewsSource.GUARDIAN.value,
    NewsSource.NYT.value,
    NewsSource.NEWSAPI.value,
)

# Upstream endpoints
GUARDIAN_SEARCH_URL = "https://content.guardianapis.com/search"
NYT_ARTICLE_SEARCH_URL = "https://api.nytimes.com/svc/search/v2/articlesearch.json"
NEWSAPI_EVERYTHING_URL = "https://newsapi.org/v2/everything"

# Guardian extra fields needed for summary, author and image
GUARDIAN_SHOW_FIELDS = "byline,trailText,thumbnail"

# Multimedia urls in NYT documents are relative to this host
NYT_MEDIA_HOST = "https://www.nytimes.com/"

# Outbound only: UI category -> NYT section_name
NYT_SECTION_MAP: dict[str, str] = {
    "politics": "U.S.",
    "us-news": "Us",
    "business": "Business Day",
    "environment": "Climate",
}

NEWSAPI_SORT_BY = "publishedAt"

# Domains NewsAPI.org results are restricted to unless configured otherwise
NEWSAPI_DEFAULT_DOMAINS: tuple[str, ...] = ("bbc.co.uk", "cnn.com", "wired.com")
