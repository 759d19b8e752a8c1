"""Service layer for business logic.

This module exports all service classes for easy importing.
"""

from newsdesk.services.demo_articles import DemoArticleService
from newsdesk.services.filter_parser import parse_filter_params
from newsdesk.services.news_aggregation import NewsAggregationService

__all__ = [
    "NewsAggregationService",
    "DemoArticleService",
    "parse_filter_params",
]
