"""New York Times Article Search API response."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class NYTMultimedia(BaseModel):
    url: str
    type: str = ""
    subtype: str = ""


class NYTHeadline(BaseModel):
    main: str


class NYTByline(BaseModel):
    original: Optional[str] = None


class NYTDoc(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    web_url: str = ""
    abstract: Optional[str] = None
    snippet: Optional[str] = None
    pub_date: str = ""
    section_name: Optional[str] = None
    headline: NYTHeadline
    byline: Optional[NYTByline] = None
    multimedia: list[NYTMultimedia] = Field(default_factory=list)


class NYTResponse(BaseModel):
    docs: list[NYTDoc] = Field(default_factory=list)


class NYTApiResponse(BaseModel):
    status: str = ""
    response: NYTResponse
