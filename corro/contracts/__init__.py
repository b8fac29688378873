"""Contract classes and abstract interfaces.

These are the building blocks rules are written against and are exported so
they can be imported directly from :mod:`corro`.
"""

from .evaluation_context import EvaluationContext
from .rule_definition import RuleDefinition
from .validator_rule import ValidatorRule

__all__ = [
    "EvaluationContext",
    "RuleDefinition",
    "ValidatorRule",
]
