"""
Request validators for the fancy resource endpoints.

One definition per action. Field tables are declared here, next to each
other, rather than inside the route handlers so every accepted parameter of
the API can be read in one place.
"""

from __future__ import annotations

from paramguard import FieldSpec, FieldType, ValidatorRegistry, define, rules

COLOURS = ("crimson", "teal", "saffron", "violet")

FANCY_NAME_RULES = (
    rules.min_length(1),
    rules.max_length(80),
    rules.matches(r"[\w\- ]+", "may only contain letters, digits, spaces, '-' and '_'"),
)

TAG_RULES = (rules.rule("max_tags", lambda tags: len(tags) <= 5, "must have at most 5 tags"),)

CREATE_FANCY_RESOURCE = define(
    [
        FieldSpec(
            "user_id",
            FieldType.INTEGER,
            required=True,
            rules=(rules.min_value(1),),
            description="Owner of the resource",
        ),
        FieldSpec("fancy_name", FieldType.STRING, required=True, rules=FANCY_NAME_RULES),
        FieldSpec("colour", FieldType.STRING, rules=(rules.one_of(COLOURS),)),
        FieldSpec("tags", FieldType.LIST, rules=TAG_RULES),
        FieldSpec("is_public", FieldType.BOOLEAN),
    ],
    name="create_fancy_resource",
)

UPDATE_FANCY_RESOURCE = define(
    [
        FieldSpec("resource_id", FieldType.INTEGER, required=True, rules=(rules.min_value(1),)),
        FieldSpec("fancy_name", FieldType.STRING, rules=FANCY_NAME_RULES),
        FieldSpec("colour", FieldType.STRING, rules=(rules.one_of(COLOURS),)),
        FieldSpec("tags", FieldType.LIST, rules=TAG_RULES),
        FieldSpec("is_public", FieldType.BOOLEAN),
    ],
    name="update_fancy_resource",
)

SHOW_FANCY_RESOURCE = define(
    [FieldSpec("resource_id", FieldType.INTEGER, required=True, rules=(rules.min_value(1),))],
    name="show_fancy_resource",
)

LIST_FANCY_RESOURCES = define(
    [
        FieldSpec("user_id", FieldType.INTEGER, rules=(rules.min_value(1),)),
        FieldSpec("colour", FieldType.STRING, rules=(rules.one_of(COLOURS),)),
        FieldSpec("limit", FieldType.INTEGER, rules=(rules.between(1, 100),)),
        FieldSpec("offset", FieldType.INTEGER, rules=(rules.min_value(0),)),
    ],
    name="list_fancy_resources",
)


def build_registry() -> ValidatorRegistry:
    """Build the registry of every validator the API uses."""
    return ValidatorRegistry(
        [
            CREATE_FANCY_RESOURCE,
            UPDATE_FANCY_RESOURCE,
            SHOW_FANCY_RESOURCE,
            LIST_FANCY_RESOURCES,
        ]
    )
