"""
Validators Router - Introspection of registered request validators.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from paramguard import ValidatorRegistry

from ..dependencies import get_validator_registry
from ..schemas import ValidatorDescription

router = APIRouter(prefix="/api", tags=["validators"])


@router.get("/validators", response_model=list[ValidatorDescription])
async def list_validators(
    registry: ValidatorRegistry = Depends(get_validator_registry),
) -> list[dict[str, Any]]:
    """Describe every registered validator and its declared fields."""
    return registry.describe()
