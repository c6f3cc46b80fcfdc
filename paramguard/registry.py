"""Validator registry.

An explicit name-to-definition table built once at application startup and
passed by reference to the binding adapter. Unknown names are rejected rather
than resolved by naming convention.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from .engine import ValidatorDefinition
from .errors import DefinitionError, DuplicateValidatorError, UnknownValidatorError

logger = logging.getLogger(__name__)


class ValidatorRegistry(Mapping[str, ValidatorDefinition]):
    """Read-only mapping of validator name to definition.

    Definitions are added with ``register`` during startup; the mapping
    interface exposes no way to remove or replace them afterwards.
    """

    def __init__(self, definitions: Iterable[ValidatorDefinition] = ()):
        self._definitions: dict[str, ValidatorDefinition] = {}
        for definition in definitions:
            self.register(definition)

    def register(self, definition: ValidatorDefinition) -> ValidatorDefinition:
        """
        Add a definition under its own name.

        Returns the definition so registration can be used inline.

        Raises:
            DefinitionError: If the definition has no name
            DuplicateValidatorError: If the name is already registered
        """
        if not definition.name:
            raise DefinitionError("Cannot register a validator without a name")
        if definition.name in self._definitions:
            raise DuplicateValidatorError(definition.name)
        self._definitions[definition.name] = definition
        logger.debug(f"Registered validator '{definition.name}' with fields {list(definition.field_names)}")
        return definition

    def resolve(self, name: str) -> ValidatorDefinition:
        """
        Look up a definition by name.

        Raises:
            UnknownValidatorError: If no definition is registered under the name
        """
        return resolve(self, name)

    def describe(self) -> list[dict[str, Any]]:
        """Describe every registered definition, sorted by name."""
        return [self._definitions[name].describe() for name in sorted(self._definitions)]

    def __getitem__(self, name: str) -> ValidatorDefinition:
        return self._definitions[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._definitions)

    def __len__(self) -> int:
        return len(self._definitions)

    def __repr__(self) -> str:
        return f"ValidatorRegistry({sorted(self._definitions)!r})"


def resolve(registry: Mapping[str, ValidatorDefinition], name: str) -> ValidatorDefinition:
    """Resolve a name against any mapping registry (``ValidatorRegistry`` or plain dict)."""
    definition = registry.get(name)
    if definition is None:
        raise UnknownValidatorError(name)
    return definition
