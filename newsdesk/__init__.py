"""Newsdesk news aggregation service.

Fans a single filter query out to The Guardian, The New York Times and
NewsAPI.org, normalizes their responses into one article shape, and serves
the merged feed over HTTP.
"""

__version__ = "1.0.0"
