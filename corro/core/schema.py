from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Union


@dataclass(frozen=True)
class RuleApplication:
    """A schema key naming a rule; `args` is the schema value for that key."""

    name: str
    args: Any


@dataclass(frozen=True)
class NestedSchema:
    """A schema key whose value is itself a schema (nested object or array elements)."""

    key: str
    node: 'SchemaNode'


SchemaEntry = Union[RuleApplication, NestedSchema]


@dataclass(frozen=True)
class SchemaNode:
    """
    A schema mapping with each key classified once.

    A key whose value is a mapping describes a child schema; any other key
    applies the rule of that name with the value as its arguments. Rule
    arguments that are themselves mappings are therefore not expressible.
    """

    entries: tuple[SchemaEntry, ...]

    @classmethod
    def compile(cls, schema: Union[Mapping[Any, Any], 'SchemaNode']) -> 'SchemaNode':
        if isinstance(schema, SchemaNode):
            return schema

        entries: list[SchemaEntry] = []
        for key, value in schema.items():
            if isinstance(value, Mapping):
                entries.append(NestedSchema(str(key), cls.compile(value)))
            else:
                entries.append(RuleApplication(str(key), value))
        return cls(tuple(entries))
