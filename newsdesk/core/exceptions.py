"""Custom exception hierarchy for the news aggregation service.

Adapter-level errors (missing credentials, upstream failures) are raised
inside an adapter and converted into a soft failure at its boundary. Only
errors above that granularity reach the HTTP layer.
"""


class NewsdeskError(Exception):
    """Base exception for all newsdesk errors.

    All custom exceptions in the service inherit from this base class
    to allow for consistent error handling at the API boundary.
    """

    pass


class NewsSourceError(NewsdeskError):
    """Errors raised while talking to a single news source.

    Attributes:
        source: Identifier of the adapter that raised the error
    """

    def __init__(self, source: str, message: str) -> None:
        super().__init__(f"{source}: {message}")
        self.source = source


class ConfigurationMissingError(NewsSourceError):
    """The source has no API credential configured.

    Raised before any network call is made.
    """

    pass


class UpstreamError(NewsSourceError):
    """The upstream API could not be used.

    Raised on network errors, non-2xx responses, or payloads that do not
    match the expected response shape.
    """

    pass


class UnsupportedSourceError(NewsdeskError):
    """A source identifier does not name any known adapter."""

    def __init__(self, source_id: str) -> None:
        super().__init__(f"Unsupported news source: {source_id}")
        self.source_id = source_id
