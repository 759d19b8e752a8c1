"""API routers package.

This package contains all FastAPI routers for the application.
"""

from newsdesk.api.routers import demo, health, news

__all__ = [
    "news",
    "demo",
    "health",
]
