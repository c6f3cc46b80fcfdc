"""
Root test configuration and fixtures for the paramguard project.

This conftest.py provides common fixtures for all test categories:
- unit/paramguard/: Engine, registry, binding and FastAPI integration
- unit/api/: Demonstration API endpoints and settings

Note: sys.path manipulation is handled here to ensure imports work correctly.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add project root to path to allow imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from paramguard import (  # noqa: E402
    FieldSpec,
    FieldType,
    RequestCache,
    ValidatorDefinition,
    ValidatorRegistry,
    define,
)


@pytest.fixture
def fancy_definition() -> ValidatorDefinition:
    """user_id: required integer, fancy_name: required string."""
    return define(
        [
            FieldSpec("user_id", FieldType.INTEGER, required=True),
            FieldSpec("fancy_name", FieldType.STRING, required=True),
        ],
        name="create_fancy_resource",
    )


@pytest.fixture
def registry(fancy_definition: ValidatorDefinition) -> ValidatorRegistry:
    """Registry holding only the fancy definition."""
    return ValidatorRegistry([fancy_definition])


@pytest.fixture
def cache() -> RequestCache:
    """Fresh request-scoped cache."""
    return RequestCache()
