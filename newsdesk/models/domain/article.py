"""Domain models shared by the parser, adapters and aggregator."""

from pydantic import BaseModel, ConfigDict, Field


class FilterRequest(BaseModel):
    """Normalized filter parameters for one aggregation call.

    Empty strings and empty lists mean "no filter". The ``"all"`` sentinel has
    already been resolved: ``categories`` never contains it and ``sources``
    holds concrete identifiers.
    """

    model_config = ConfigDict(frozen=True)

    keyword: str = ""
    categories: list[str] = Field(default_factory=list)
    author: str = ""
    date: str = ""
    sources: list[str] = Field(default_factory=list)


class ArticleResponse(BaseModel):
    """Canonical article produced by every source adapter.

    ``date`` keeps the upstream ISO-8601 string as returned. ``id`` is only
    unique within one source.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    summary: str = ""
    date: str = ""
    category: str = ""
    author: str = ""
    source: str
    image: str = ""
    url: str = ""


class AdapterResult(BaseModel):
    """Outcome of one adapter invocation.

    A failed invocation carries ``success=False`` and no articles instead of
    raising, so the aggregator can keep the results of other sources.
    """

    model_config = ConfigDict(frozen=True)

    success: bool
    data: list[ArticleResponse] = Field(default_factory=list)
    source: str

    @classmethod
    def ok(cls, source: str, articles: list[ArticleResponse]) -> "AdapterResult":
        return cls(success=True, data=articles, source=source)

    @classmethod
    def failure(cls, source: str) -> "AdapterResult":
        return cls(success=False, data=[], source=source)
