"""News source adapter contract and shared helpers.

Every adapter translates a FilterRequest into one upstream query and maps the
upstream payload into ArticleResponse objects. Adapters never raise out of
``fetch``: errors are logged and reported as a failed AdapterResult so that
one broken source cannot take down an aggregated request.
"""

from collections.abc import Awaitable, Sequence
from typing import Any, Protocol, TypeVar, runtime_checkable

import httpx
from pydantic import BaseModel, ValidationError

from newsdesk.core.exceptions import ConfigurationMissingError, UpstreamError
from newsdesk.models.domain.article import AdapterResult, ArticleResponse, FilterRequest
from newsdesk.utils.logging import get_logger

logger = get_logger(__name__)

PayloadT = TypeVar("PayloadT", bound=BaseModel)

QueryParams = Sequence[tuple[str, str]]


@runtime_checkable
class NewsSourceAdapter(Protocol):
    """Capability shared by all news source adapters.

    Attributes:
        source_name: Identifier reported in AdapterResult.source
    """

    source_name: str

    def is_configured(self) -> bool:
        """Whether the adapter holds the credential it needs."""
        ...

    async def fetch(self, request: FilterRequest) -> AdapterResult:
        """Fetch and normalize articles matching ``request``.

        Returns:
            A successful result with the normalized articles, or a failed
            result with no articles. Never raises.
        """
        ...


def require_api_key(source: str, api_key: str | None) -> str:
    """Return the credential or raise before any network call is made.

    Raises:
        ConfigurationMissingError: If no credential is configured
    """
    if not api_key:
        raise ConfigurationMissingError(source, "API key is not configured")
    return api_key


async def get_payload(
    source: str,
    url: str,
    params: QueryParams,
    model: type[PayloadT],
    timeout: float,
) -> PayloadT:
    """GET ``url`` and validate the JSON body against ``model``.

    Error messages never include the request url, which carries the api key.

    Args:
        source: Adapter identifier used in error messages
        url: Upstream endpoint
        params: Query parameters; repeated keys are sent as repeated values
        model: Pydantic model describing the expected payload
        timeout: Request timeout in seconds

    Returns:
        The validated payload

    Raises:
        UpstreamError: On network errors, non-2xx status, or malformed payloads
    """
    try:
        async with httpx.AsyncClient(timeout=timeout) as client:
            response = await client.get(url, params=list(params))
            response.raise_for_status()
            data: Any = response.json()
    except httpx.HTTPStatusError as e:
        raise UpstreamError(
            source, f"API returned status {e.response.status_code}"
        ) from e
    except httpx.HTTPError as e:
        raise UpstreamError(source, f"request failed ({type(e).__name__})") from e
    except ValueError as e:
        raise UpstreamError(source, "response body is not valid JSON") from e

    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise UpstreamError(
            source, f"unexpected response shape ({e.error_count()} errors)"
        ) from e


async def soft_fail(
    source: str, articles: Awaitable[list[ArticleResponse]]
) -> AdapterResult:
    """Await an adapter's work and convert any error into a failed result.

    Args:
        source: Adapter identifier
        articles: Pending list of normalized articles

    Returns:
        AdapterResult with success=True and the articles, or success=False
    """
    try:
        data = await articles
    except ConfigurationMissingError as e:
        logger.warning(f"Skipping {source}: {e}", extra={"source": source})
        return AdapterResult.failure(source)
    except Exception as e:
        logger.error(
            f"Error fetching from {source} API: {e}",
            extra={"source": source, "error_type": type(e).__name__},
        )
        return AdapterResult.failure(source)

    logger.info(f"Fetched {len(data)} articles from {source}", extra={"source": source})
    return AdapterResult.ok(source, data)
