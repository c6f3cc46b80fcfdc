"""Error classes for paramguard.

Two families live here:

- Configuration errors (``ParamGuardError`` subclasses) are raised when a
  validator is declared or resolved incorrectly. They indicate a bug in the
  application's validator setup and are never caught by the library.
- Field errors (``FieldError`` subclasses) are plain records describing why a
  single input field was rejected. They are accumulated into an ``Invalid``
  result and are never raised.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


class ParamGuardError(Exception):
    """Base exception for validator configuration errors."""

    pass


class DefinitionError(ParamGuardError):
    """Raised when a validator definition is malformed."""

    pass


class DuplicateFieldError(DefinitionError):
    """Raised when two field specs in one definition share a name."""

    def __init__(self, field: str, definition: str = ""):
        self.field = field
        self.definition = definition
        where = f" in validator '{definition}'" if definition else ""
        super().__init__(f"Duplicate field '{field}'{where}")


class DuplicateValidatorError(DefinitionError):
    """Raised when two definitions are registered under the same name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Validator '{name}' is already registered")


class UnknownValidatorError(ParamGuardError, LookupError):
    """Raised when a validator name is not present in the registry."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown validator: '{name}'")


@dataclass(frozen=True)
class FieldError:
    """A single field's validation failure, reported as data."""

    kind: ClassVar[str] = "field"

    field: str
    message: str

    def to_dict(self) -> dict[str, str]:
        """Convert to the JSON shape used in 400 response bodies."""
        return {"field": self.field, "message": self.message}


@dataclass(frozen=True)
class FieldRequiredError(FieldError):
    """A required field was absent or empty."""

    kind: ClassVar[str] = "required"

    message: str = "required"


@dataclass(frozen=True)
class FieldTypeError(FieldError):
    """A field's value could not be coerced to its declared type."""

    kind: ClassVar[str] = "type"

    message: str = "invalid type"


@dataclass(frozen=True)
class FieldRuleError(FieldError):
    """A coerced value failed one of the field's extra rules."""

    kind: ClassVar[str] = "rule"

    rule: str = ""
