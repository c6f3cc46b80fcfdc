"""
Field declaration and validation engine.

A ``ValidatorDefinition`` is a static table of ``FieldSpec`` entries for one
logical action. ``validate`` runs a definition against raw request input and
returns either ``Valid`` (the cleaned, typed, allow-listed fields) or
``Invalid`` (every field error, in declaration order).

Usage:
    from paramguard import FieldSpec, FieldType, define, validate

    create_fancy = define(
        [
            FieldSpec("user_id", FieldType.INTEGER, required=True),
            FieldSpec("fancy_name", FieldType.STRING, required=True),
        ],
        name="create_fancy_resource",
    )

    result = validate(create_fancy, {"user_id": "5", "fancy_name": "abc"})
    if result:
        result.cleaned  # {"user_id": 5, "fancy_name": "abc"}
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from .coercion import CoercionError, coerce
from .errors import (
    DefinitionError,
    DuplicateFieldError,
    FieldError,
    FieldRequiredError,
    FieldRuleError,
    FieldTypeError,
)
from .types import FieldSpec


@dataclass(frozen=True)
class ValidatorDefinition:
    """Named, immutable collection of field specs with unique names."""

    name: str
    fields: tuple[FieldSpec, ...]
    _by_name: Mapping[str, FieldSpec] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.fields, tuple):
            object.__setattr__(self, "fields", tuple(self.fields))
        if not self.fields:
            raise DefinitionError(f"Validator '{self.name}' declares no fields")

        by_name: dict[str, FieldSpec] = {}
        for spec in self.fields:
            if not spec.name:
                raise DefinitionError(f"Validator '{self.name}' has a field with an empty name")
            if spec.name in by_name:
                raise DuplicateFieldError(spec.name, self.name)
            by_name[spec.name] = spec
        object.__setattr__(self, "_by_name", MappingProxyType(by_name))

    @property
    def field_names(self) -> tuple[str, ...]:
        return tuple(self._by_name)

    def get_field(self, name: str) -> FieldSpec | None:
        return self._by_name.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def describe(self) -> dict[str, Any]:
        """Summarize the definition for introspection endpoints."""
        return {"name": self.name, "fields": [spec.describe() for spec in self.fields]}


@dataclass(frozen=True)
class Valid:
    """Successful validation: only declared fields, with coerced values."""

    cleaned: Mapping[str, Any]

    def __post_init__(self) -> None:
        if not isinstance(self.cleaned, MappingProxyType):
            object.__setattr__(self, "cleaned", MappingProxyType(dict(self.cleaned)))

    @property
    def is_valid(self) -> bool:
        return True

    def __bool__(self) -> bool:
        return True


@dataclass(frozen=True)
class Invalid:
    """Failed validation: accumulated field errors in declaration order."""

    errors: tuple[FieldError, ...]

    def __post_init__(self) -> None:
        if not isinstance(self.errors, tuple):
            object.__setattr__(self, "errors", tuple(self.errors))

    @property
    def is_valid(self) -> bool:
        return False

    def __bool__(self) -> bool:
        return False

    def errors_for(self, field_name: str) -> list[FieldError]:
        """Return the errors reported for one field."""
        return [e for e in self.errors if e.field == field_name]

    def to_dict(self) -> dict[str, list[dict[str, str]]]:
        """Serialize to the ``{"errors": [...]}`` response body shape."""
        return {"errors": [e.to_dict() for e in self.errors]}


ValidationResult = Valid | Invalid


def define(fields: Iterable[FieldSpec], name: str = "") -> ValidatorDefinition:
    """
    Build a validator definition from field specs.

    Args:
        fields: Field specs in the order their errors should be reported
        name: Name the definition is registered and bound under

    Returns:
        The immutable definition

    Raises:
        DuplicateFieldError: If two specs share a name
        DefinitionError: If no fields are given or a field name is empty
    """
    return ValidatorDefinition(name=name, fields=tuple(fields))


def is_missing(value: Any) -> bool:
    """Loose presence check: None, blank strings and empty lists count as missing."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple)):
        return len(value) == 0
    return False


def _validate_field(spec: FieldSpec, value: Any) -> tuple[Any, list[FieldError]]:
    try:
        coerced = coerce(value, spec.field_type)
    except CoercionError:
        return None, [FieldTypeError(field=spec.name)]

    if is_missing(coerced):
        return coerced, []

    # Rules accumulate: every failing rule is reported, not just the first
    errors: list[FieldError] = [
        FieldRuleError(field=spec.name, message=r.message, rule=r.name) for r in spec.rules if not r.check(coerced)
    ]
    return coerced, errors


def validate(definition: ValidatorDefinition, raw_input: Mapping[str, Any]) -> ValidationResult:
    """
    Validate raw input against a definition.

    Undeclared input keys are dropped. Absent optional fields are omitted from
    the cleaned mapping and skip their rules. A value that is blank only after
    coercion (a list of separators) counts as absent too. The function is
    pure: it never mutates ``raw_input`` and performs no I/O.

    Args:
        definition: The validator definition to apply
        raw_input: Untrusted request parameters

    Returns:
        ``Valid`` with the cleaned mapping, or ``Invalid`` with all errors
    """
    cleaned: dict[str, Any] = {}
    errors: list[FieldError] = []

    for spec in definition.fields:
        value = raw_input.get(spec.name)

        if is_missing(value):
            if spec.required:
                errors.append(FieldRequiredError(field=spec.name))
            continue

        coerced, field_errors = _validate_field(spec, value)
        if not field_errors and is_missing(coerced):
            # e.g. " , " as a list coerces to []
            if spec.required:
                errors.append(FieldRequiredError(field=spec.name))
            continue
        if field_errors:
            errors.extend(field_errors)
        else:
            cleaned[spec.name] = coerced

    if errors:
        return Invalid(errors=tuple(errors))
    return Valid(cleaned=cleaned)
