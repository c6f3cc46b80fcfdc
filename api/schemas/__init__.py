"""
Pydantic schemas for the paramguard API.

Re-exports all schemas for convenient importing.
"""

from __future__ import annotations

from .fancy import FancyResourceListResponse, FancyResourceResponse
from .validation import (
    FieldDescription,
    FieldErrorDetail,
    ValidationErrorResponse,
    ValidatorDescription,
)

__all__ = [
    # Fancy resources
    "FancyResourceListResponse",
    "FancyResourceResponse",
    # Validation
    "FieldDescription",
    "FieldErrorDetail",
    "ValidationErrorResponse",
    "ValidatorDescription",
]
