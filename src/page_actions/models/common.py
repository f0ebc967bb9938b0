"""Common models shared across the application."""

from typing import Literal

from pydantic import BaseModel, Field


class Heading(BaseModel):
    """A heading (h1-h3) extracted from a web page."""

    tag: Literal["h1", "h2", "h3"]
    text: str

    model_config = {"extra": "ignore", "frozen": True}


class Link(BaseModel):
    """A hyperlink extracted from a web page, href kept as written."""

    href: str
    text: str = ""

    model_config = {"extra": "ignore", "frozen": True}


class PageStructure(BaseModel):
    """Structural fields pulled from a parsed document."""

    title: str = ""
    meta_description: str = ""
    canonical: str = ""
    headings: list[Heading] = Field(default_factory=list)
    links: list[Link] = Field(default_factory=list)

    model_config = {"extra": "ignore", "frozen": True}
