"""
Shared dependencies for the paramguard API.

This module provides:
- The validator registry, built once at startup
- The in-memory fancy resource store
"""

from __future__ import annotations

import logging
from functools import lru_cache

from paramguard import ValidatorRegistry

from .services.fancy_store import FancyResourceStore
from .validators import build_registry

logger = logging.getLogger(__name__)

# ========================================
# Validator Registry
# ========================================


@lru_cache
def get_validator_registry() -> ValidatorRegistry:
    """Build the registry on first use and share it for the process lifetime."""
    registry = build_registry()
    logger.debug(f"Validator registry ready: {sorted(registry)}")
    return registry


# ========================================
# Fancy Resource Storage
# ========================================

# In-memory storage (in production, use a database)
fancy_store = FancyResourceStore()


async def get_fancy_store() -> FancyResourceStore:
    """FastAPI dependency returning the shared resource store."""
    return fancy_store


__all__ = [
    "fancy_store",
    "get_fancy_store",
    "get_validator_registry",
]
