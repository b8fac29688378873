from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Mapping, Optional

from pydantic import ValidationError

from corro.contracts.rule_definition import RuleDefinition
from corro.contracts.validator_rule import ValidatorRule
from corro.exceptions.common_exceptions import InvalidRuleDefinitionException

logger = logging.getLogger(__name__)


def to_rule_definition(rule: Any) -> Optional[RuleDefinition]:
    """
    Coerce a rule block into a `RuleDefinition`.

    Accepts a `RuleDefinition`, a `ValidatorRule` instance, or a mapping with a
    callable `func`. Returns None for anything else.
    """
    if isinstance(rule, RuleDefinition):
        return rule
    if isinstance(rule, ValidatorRule):
        return rule.definition()
    if RuleDefinition.is_block(rule):
        try:
            return RuleDefinition.model_validate(dict(rule))
        except ValidationError as e:
            logger.debug(f"Rule block rejected: {e}")
            return None
    return None


class RuleRegistry:
    """
    Name to `RuleDefinition` mapping: the built-in rules overlaid with custom ones.

    A custom rule replaces a built-in of the same name entirely. The registry
    is not modified after construction, so one instance can serve any number
    of validations at once.
    """

    def __init__(self, custom_rules: Optional[Mapping[str, Any]] = None):
        from corro.core.validation_rules import DEFAULT_RULES

        rules: dict[str, RuleDefinition] = dict(DEFAULT_RULES)
        for name, rule in (custom_rules or {}).items():
            definition = self._coerce_custom_rule(name, rule)
            if name in rules:
                logger.debug(f"Custom rule `{name}` replaces the built-in rule")
            rules[name] = definition

        self._rules = MappingProxyType(rules)

    @staticmethod
    def _coerce_custom_rule(name: str, rule: Any) -> RuleDefinition:
        if isinstance(rule, Mapping):
            try:
                return RuleDefinition.model_validate(dict(rule))
            except ValidationError as e:
                raise InvalidRuleDefinitionException(name, str(e)) from e

        definition = to_rule_definition(rule)
        if definition is None:
            raise InvalidRuleDefinitionException(
                name, "expected a RuleDefinition, ValidatorRule or mapping with a callable `func`"
            )
        return definition

    @property
    def rules(self) -> Mapping[str, RuleDefinition]:
        return self._rules

    def resolve(self, name_or_block: Any) -> Optional[RuleDefinition]:
        """
        Find the definition for a rule reference.

        Inline blocks are recognised by shape and returned as definitions;
        strings are looked up by name. Unknown names and unrecognised values
        resolve to None.
        """
        if isinstance(name_or_block, str):
            return self._rules.get(name_or_block)
        return to_rule_definition(name_or_block)

    def __contains__(self, name: str) -> bool:
        return name in self._rules

    def __len__(self) -> int:
        return len(self._rules)
