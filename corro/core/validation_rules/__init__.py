"""Built-in rules, each a standalone predicate plus message."""

from corro.contracts.rule_definition import RuleDefinition

from .conform_validator_rule import conform
from .format_validator_rule import FORMATS, format_
from .length_validator_rules import max_length, min_length
from .match_validator_rule import match
from .not_empty_validator_rule import not_empty
from .present_validator_rule import present
from .range_validator_rules import max_value, min_value
from .required_validator_rule import required
from .type_validator_rule import TYPES, type_

DEFAULT_RULES: dict[str, RuleDefinition] = {
    "required": required,
    "notEmpty": not_empty,
    "minLength": min_length,
    "maxLength": max_length,
    "min": min_value,
    "max": max_value,
    "match": match,
    "format": format_,
    "type": type_,
    "present": present,
    "conform": conform,
}

__all__ = [
    "DEFAULT_RULES",
    "FORMATS",
    "TYPES",
]
