from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from folio.utils import parse_date, strip_xml_illegal


def _check_date(value: Optional[str]) -> Optional[str]:
    if value is not None:
        parse_date(value)  # raises ValueError, surfaced as a ValidationError
    return value


class Post(BaseModel):
    model_config = ConfigDict(frozen=True)

    slug: str
    title: str
    summary: str
    publishedAt: str
    updatedAt: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    image: Optional[str] = None
    og: Optional[str] = None
    readingTime: Optional[str] = None
    body: str = ""  # content without frontmatter

    @field_validator("publishedAt", "updatedAt")
    @classmethod
    def check_date(cls, value: Optional[str]) -> Optional[str]:
        return _check_date(value)


class Project(BaseModel):
    model_config = ConfigDict(frozen=True)

    slug: str
    title: str
    description: Optional[str] = None
    time: Optional[str] = None
    url: Optional[str] = None
    image: Optional[str] = None


class FeedItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    url: str
    date: str
    description: str

    @field_validator("date")
    @classmethod
    def check_date(cls, value: str) -> str:
        return _check_date(value)

    @field_validator("title", "description")
    @classmethod
    def strip_control_characters(cls, value: str) -> str:
        return strip_xml_illegal(value)
