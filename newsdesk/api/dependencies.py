"""Dependency injection for FastAPI routes.

This module provides dependency functions for the adapter registry and the
services, so route handlers stay thin and tests can override them.
"""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from newsdesk.adapters.news_sources.registry import AdapterRegistry
from newsdesk.core.config import Settings, settings
from newsdesk.services.demo_articles import DemoArticleService
from newsdesk.services.news_aggregation import NewsAggregationService


def get_settings() -> Settings:
    """Get application settings."""
    return settings


# ============================================================================
# Adapter Dependencies
# ============================================================================


def get_adapter_registry(
    config: Annotated[Settings, Depends(get_settings)],
) -> AdapterRegistry:
    """Get the adapter registry, with credentials taken from settings.

    Args:
        config: Application settings

    Returns:
        Registry holding one adapter per source
    """
    return AdapterRegistry.from_settings(config)


# ============================================================================
# Service Dependencies
# ============================================================================


def get_aggregation_service(
    registry: Annotated[AdapterRegistry, Depends(get_adapter_registry)],
    config: Annotated[Settings, Depends(get_settings)],
) -> NewsAggregationService:
    """Get news aggregation service instance.

    Args:
        registry: Adapter registry
        config: Application settings

    Returns:
        Configured aggregation service
    """
    return NewsAggregationService(
        registry=registry,
        adapter_timeout=config.news_adapter_timeout,
    )


@lru_cache
def get_demo_service() -> DemoArticleService:
    """Get the demo article service; the bundled data is loaded once."""
    return DemoArticleService()


# ============================================================================
# Type Aliases for Dependency Injection
# ============================================================================

SettingsDep = Annotated[Settings, Depends(get_settings)]
AdapterRegistryDep = Annotated[AdapterRegistry, Depends(get_adapter_registry)]
AggregationServiceDep = Annotated[NewsAggregationService, Depends(get_aggregation_service)]
DemoServiceDep = Annotated[DemoArticleService, Depends(get_demo_service)]
