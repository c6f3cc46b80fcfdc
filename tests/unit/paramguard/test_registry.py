"""Tests for paramguard.registry."""

from __future__ import annotations

import pytest

from paramguard import (
    DefinitionError,
    DuplicateValidatorError,
    FieldSpec,
    FieldType,
    UnknownValidatorError,
    ValidatorRegistry,
    define,
)
from paramguard.registry import resolve


class TestValidatorRegistry:
    def test_resolve_registered(self, registry, fancy_definition):
        assert registry.resolve("create_fancy_resource") is fancy_definition

    def test_resolve_unknown_raises(self, registry):
        with pytest.raises(UnknownValidatorError) as exc_info:
            registry.resolve("delete_everything")
        assert exc_info.value.name == "delete_everything"

    def test_unknown_validator_is_lookup_error(self, registry):
        with pytest.raises(LookupError):
            registry.resolve("missing")

    def test_duplicate_name_rejected(self, fancy_definition):
        registry = ValidatorRegistry([fancy_definition])
        with pytest.raises(DuplicateValidatorError):
            registry.register(define([FieldSpec("other")], name="create_fancy_resource"))

    def test_unnamed_definition_rejected(self):
        with pytest.raises(DefinitionError):
            ValidatorRegistry([define([FieldSpec("x")])])

    def test_register_returns_definition(self):
        registry = ValidatorRegistry()
        definition = define([FieldSpec("x", FieldType.INTEGER)], name="x_only")
        assert registry.register(definition) is definition
        assert len(registry) == 1

    def test_mapping_interface(self, registry):
        assert list(registry) == ["create_fancy_resource"]
        assert "create_fancy_resource" in registry
        assert registry.get("nope") is None

    def test_describe_sorted_by_name(self):
        registry = ValidatorRegistry(
            [
                define([FieldSpec("b")], name="zeta"),
                define([FieldSpec("a")], name="alpha"),
            ]
        )
        assert [d["name"] for d in registry.describe()] == ["alpha", "zeta"]


class TestResolveFunction:
    def test_plain_dict_registry(self, fancy_definition):
        assert resolve({"create": fancy_definition}, "create") is fancy_definition

    def test_plain_dict_unknown(self):
        with pytest.raises(UnknownValidatorError):
            resolve({}, "create")
