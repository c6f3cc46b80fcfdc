"""
paramguard - Declarative request-parameter validation for web controllers.

This package contains:
- types / rules / coercion: field declarations and built-in rules
- engine: define() and validate()
- registry: explicit validator-name to definition table
- binding: bind() with a request-scoped cache
- integration: FastAPI dependency and rejection handler

Usage:
    from paramguard import FieldSpec, FieldType, ValidatorRegistry, define, rules

    registry = ValidatorRegistry(
        [
            define(
                [
                    FieldSpec("user_id", FieldType.INTEGER, required=True, rules=(rules.min_value(1),)),
                    FieldSpec("fancy_name", FieldType.STRING, required=True),
                ],
                name="create_fancy_resource",
            )
        ]
    )
"""

from __future__ import annotations

from . import rules
from .binding import BindOutcome, Proceed, Reject, RequestCache, bind, classify
from .coercion import CoercionError, coerce
from .engine import (
    Invalid,
    Valid,
    ValidationResult,
    ValidatorDefinition,
    define,
    validate,
)
from .errors import (
    DefinitionError,
    DuplicateFieldError,
    DuplicateValidatorError,
    FieldError,
    FieldRequiredError,
    FieldRuleError,
    FieldTypeError,
    ParamGuardError,
    UnknownValidatorError,
)
from .registry import ValidatorRegistry
from .types import FieldSpec, FieldType, Rule

__all__ = [
    # Declarations
    "FieldSpec",
    "FieldType",
    "Rule",
    "rules",
    # Engine
    "ValidatorDefinition",
    "ValidationResult",
    "Valid",
    "Invalid",
    "define",
    "validate",
    "coerce",
    "CoercionError",
    # Registry and binding
    "ValidatorRegistry",
    "RequestCache",
    "BindOutcome",
    "Proceed",
    "Reject",
    "bind",
    "classify",
    # Errors
    "ParamGuardError",
    "DefinitionError",
    "DuplicateFieldError",
    "DuplicateValidatorError",
    "UnknownValidatorError",
    "FieldError",
    "FieldRequiredError",
    "FieldTypeError",
    "FieldRuleError",
]
