"""Pydantic schemas for API requests and responses."""

from pydantic import BaseModel, Field, StrictInt, StrictStr, field_validator
from typing import List, Optional


class ShortenRequest(BaseModel):
    """Request to shorten a URL."""

    url: StrictStr = Field(..., description="The URL to shorten")
    validity: Optional[StrictInt] = Field(None, gt=0, description="Minutes the link stays valid (default 30)")
    shortcode: Optional[StrictStr] = Field(None, description="Optional custom short code (4-10 alphanumerics)")

    @field_validator("validity", mode="before")
    @classmethod
    def whole_float_validity(cls, v):
        # JSON clients may send 30.0 for 30
        if isinstance(v, float) and v.is_integer():
            return int(v)
        return v

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "url": "https://example.com/very/long/path/to/resource",
                },
                {
                    "url": "https://github.com/user/repo",
                    "validity": 120,
                    "shortcode": "myrepo",
                }
            ]
        }
    }


class ShortenResponse(BaseModel):
    """Response after shortening a URL."""

    shortlink: str = Field(..., description="The complete short URL")
    expiry: str = Field(..., description="ISO-8601 expiry timestamp")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "shortlink": "http://localhost:3000/abc123",
                    "expiry": "2024-01-01T12:30:00.000Z",
                }
            ]
        }
    }


class ClickItem(BaseModel):
    time: str
    referrer: str
    geo: str


class StatsResponse(BaseModel):
    """Statistics for a single short code."""

    originalUrl: str
    createdAt: str
    expiry: str
    totalClicks: int
    clicks: List[ClickItem]


class URLListItem(BaseModel):
    """One entry of the full listing."""

    shortcode: str
    url: str
    createdAt: str
    expiry: str
    clicks: List[ClickItem]
    totalClicks: int
    shortlink: str


class ErrorResponse(BaseModel):
    """Error response."""

    error: str = Field(..., description="Error message")
