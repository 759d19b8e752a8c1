"""Parsing of raw query parameters into a FilterRequest.

No vocabulary or date-format validation happens here: unknown categories,
sources or malformed dates are forwarded and fail, if at all, further down.
"""

from collections.abc import Mapping

from newsdesk.core.constants import ALL_SENTINEL, ALL_SOURCES
from newsdesk.models.domain.article import FilterRequest


def split_list_param(value: str | None) -> list[str]:
    """Split a comma-separated parameter, dropping blank items."""
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


def parse_categories(value: str | None) -> list[str]:
    """Parse the ``category`` parameter; ``all`` means unfiltered."""
    categories = split_list_param(value)
    if ALL_SENTINEL in categories:
        return []
    return categories


def parse_sources(value: str | None) -> list[str]:
    """Parse the ``source`` parameter; missing or ``all`` means every source."""
    sources = split_list_param(value)
    if not sources or ALL_SENTINEL in sources:
        return list(ALL_SOURCES)
    return sources


def parse_filter_params(params: Mapping[str, str]) -> FilterRequest:
    """Build a FilterRequest from raw query parameters.

    Args:
        params: Query parameters (``q``/``keyword``, ``category``, ``source``,
            ``author``, ``date``)

    Returns:
        Normalized filter request
    """
    return FilterRequest(
        keyword=params.get("q") or params.get("keyword") or "",
        categories=parse_categories(params.get("category")),
        author=params.get("author") or "",
        date=params.get("date") or "",
        sources=parse_sources(params.get("source")),
    )
