"""
Fancy Resources Router - CRUD endpoints guarded by request validators.

Handlers never read the raw request: each declares the validator it needs
and receives only the cleaned, typed parameters.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException

from paramguard.integration import validated

from ..dependencies import get_fancy_store
from ..schemas import FancyResourceListResponse, FancyResourceResponse, ValidationErrorResponse
from ..services.fancy_store import FancyResourceStore

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/fancy-resources",
    tags=["fancy-resources"],
    responses={400: {"model": ValidationErrorResponse, "description": "Invalid request parameters"}},
)

DEFAULT_PAGE_SIZE = 20


@router.post("", status_code=201, response_model=FancyResourceResponse)
async def create_fancy_resource(
    params: dict[str, Any] = Depends(validated("create_fancy_resource")),
    store: FancyResourceStore = Depends(get_fancy_store),
) -> dict[str, Any]:
    """Create a fancy resource."""
    return store.create(params).to_dict()


@router.get("", response_model=FancyResourceListResponse)
async def list_fancy_resources(
    params: dict[str, Any] = Depends(validated("list_fancy_resources")),
    store: FancyResourceStore = Depends(get_fancy_store),
) -> dict[str, Any]:
    """List fancy resources, optionally filtered by owner and colour."""
    limit = params.get("limit", DEFAULT_PAGE_SIZE)
    offset = params.get("offset", 0)
    items, total = store.query(
        user_id=params.get("user_id"),
        colour=params.get("colour"),
        limit=limit,
        offset=offset,
    )
    return {"items": [r.to_dict() for r in items], "total": total, "limit": limit, "offset": offset}


@router.get("/{resource_id}", response_model=FancyResourceResponse)
async def get_fancy_resource(
    params: dict[str, Any] = Depends(validated("show_fancy_resource")),
    store: FancyResourceStore = Depends(get_fancy_store),
) -> dict[str, Any]:
    """Get a single fancy resource."""
    resource = store.get(params["resource_id"])
    if resource is None:
        raise HTTPException(status_code=404, detail=f"Fancy resource {params['resource_id']} not found")
    return resource.to_dict()


@router.patch("/{resource_id}", response_model=FancyResourceResponse)
async def update_fancy_resource(
    params: dict[str, Any] = Depends(validated("update_fancy_resource")),
    store: FancyResourceStore = Depends(get_fancy_store),
) -> dict[str, Any]:
    """Update the supplied fields of a fancy resource."""
    resource_id = params.pop("resource_id")
    resource = store.update(resource_id, params)
    if resource is None:
        raise HTTPException(status_code=404, detail=f"Fancy resource {resource_id} not found")
    return resource.to_dict()
