"""
Pydantic schemas for validation errors and validator introspection.
"""

from __future__ import annotations

from pydantic import BaseModel


class FieldErrorDetail(BaseModel):
    """One rejected field."""

    field: str
    message: str


class ValidationErrorResponse(BaseModel):
    """Body returned when request parameters fail validation."""

    errors: list[FieldErrorDetail]


class FieldDescription(BaseModel):
    """Declared field of a validator."""

    name: str
    type: str
    required: bool
    rules: list[str]
    description: str = ""


class ValidatorDescription(BaseModel):
    """A registered validator and its declared fields."""

    name: str
    fields: list[FieldDescription]
