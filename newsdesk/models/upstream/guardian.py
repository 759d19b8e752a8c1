"""The Guardian Content API search response."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class GuardianFields(BaseModel):
    """Extra fields requested through ``show-fields``."""

    model_config = ConfigDict(populate_by_name=True)

    trail_text: Optional[str] = Field(default=None, alias="trailText")
    byline: Optional[str] = None
    thumbnail: Optional[str] = None


class GuardianResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    section_id: str = Field(default="", alias="sectionId")
    web_publication_date: str = Field(default="", alias="webPublicationDate")
    web_title: str = Field(alias="webTitle")
    web_url: str = Field(default="", alias="webUrl")
    fields: Optional[GuardianFields] = None


class GuardianResponse(BaseModel):
    status: str = ""
    results: list[GuardianResult] = Field(default_factory=list)


class GuardianApiResponse(BaseModel):
    response: GuardianResponse
