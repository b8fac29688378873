from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional

from corro.utils.undefined import UNDEFINED

if TYPE_CHECKING:
    from corro.core.results import ErrorMap
    from corro.core.validator import RuleRef, SchemaLike, Validator


@dataclass(frozen=True)
class EvaluationContext:
    """
    Handed to every predicate as its first argument.

    `data` is the nearest enclosing data node of the value being checked: the
    mapping that holds it, or the list for an array element. Predicates use it
    for cross-field checks and can call back into the validator that invoked
    them.
    """

    data: Any
    validator: 'Validator'

    def run_rule(self, rule: 'RuleRef', value: Any = UNDEFINED, args: Any = None) -> list[str]:
        return self.validator.run_rule(self.data, rule, value, args)

    def evaluate_object(self, schema: 'SchemaLike', value: Any = UNDEFINED, name: Optional[str] = None) -> 'ErrorMap':
        return self.validator.evaluate_object(self.data, schema, value, name)
