"""
Pydantic schemas for fancy resource endpoints.

Request parameters are validated by paramguard validators (see
``api.validators``); these models describe responses only.
"""

from __future__ import annotations

from pydantic import BaseModel


class FancyResourceResponse(BaseModel):
    """Response model for a single fancy resource."""

    id: int
    user_id: int
    fancy_name: str
    colour: str | None = None
    tags: list[str] = []
    is_public: bool = False
    created: str
    updated: str


class FancyResourceListResponse(BaseModel):
    """Paged list of fancy resources."""

    items: list[FancyResourceResponse]
    total: int
    limit: int
    offset: int
