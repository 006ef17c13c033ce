from typing import List, Optional

from pydantic import BaseModel, Field


class OpenGraphImage(BaseModel):
    url: str
    alt: Optional[str] = None


class OpenGraph(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    url: Optional[str] = None
    type: Optional[str] = None
    locale: Optional[str] = None
    site_name: Optional[str] = None
    images: List[OpenGraphImage] = Field(default_factory=list)


class Twitter(BaseModel):
    handle: Optional[str] = None
    site: Optional[str] = None
    cardType: str = "summary_large_image"


class SeoMeta(BaseModel):
    title: str
    description: Optional[str] = None
    canonical: Optional[str] = None
    openGraph: OpenGraph = Field(default_factory=OpenGraph)
    twitter: Optional[Twitter] = None
