"""Field declaration types.

Defines the declarative building blocks of a validator: the supported value
types, named rules, and the per-field spec that ties them together.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class FieldType(Enum):
    """Supported field value types."""

    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    DATE = "date"
    DATETIME = "datetime"
    LIST = "list"


@dataclass(frozen=True)
class Rule:
    """A named predicate paired with the message reported when it fails.

    Attributes:
        name: Short identifier (e.g., "min_value")
        predicate: Called with the coerced value; returns True if valid
        message: Error message reported for the field on failure
    """

    name: str
    predicate: Callable[[Any], bool]
    message: str

    def check(self, value: Any) -> bool:
        """Return True if the value satisfies this rule."""
        return bool(self.predicate(value))


@dataclass(frozen=True)
class FieldSpec:
    """
    Declaration of one allowed input field.

    Attributes:
        name: Key looked up in the raw input
        field_type: Type the raw value is coerced to
        required: If True, the field must be present and non-empty
        rules: Extra rules run in order against the coerced value
        description: Human-readable description
    """

    name: str
    field_type: FieldType = FieldType.STRING
    required: bool = False
    rules: tuple[Rule, ...] = field(default_factory=tuple)
    description: str = ""

    def __post_init__(self) -> None:
        # Accept any sequence of rules but store an immutable tuple
        if not isinstance(self.rules, tuple):
            object.__setattr__(self, "rules", tuple(self.rules))

    def describe(self) -> dict[str, Any]:
        """Summarize this field for introspection endpoints."""
        return {
            "name": self.name,
            "type": self.field_type.value,
            "required": self.required,
            "rules": [r.name for r in self.rules],
            "description": self.description,
        }
