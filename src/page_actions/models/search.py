"""Search-related Pydantic models."""

from pydantic import BaseModel, Field


class SerpQuery(BaseModel):
    """Input parameters for a Google search proxied through SerpApi."""

    q: str = Field(..., min_length=1, description="Search query string")
    location: str | None = Field(default=None, description="Location, e.g. 'United States'")
    hl: str | None = Field(default=None, description="Interface language, e.g. 'en'")
    gl: str | None = Field(default=None, description="Country code, e.g. 'us'")
    num: int | None = Field(
        default=None, ge=1, le=100, strict=True, description="Number of results"
    )

    model_config = {"extra": "ignore", "frozen": True}
