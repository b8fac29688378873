from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from corro.contracts.rule_definition import RuleDefinition

if TYPE_CHECKING:
    from corro.contracts.evaluation_context import EvaluationContext


class ValidatorRule(ABC):
    """
    Contract for class-based rules.

    Subclasses set `message` and any flags as class attributes and implement
    `passes`. Instances can be registered as custom rules or used inline
    wherever a rule block is accepted.

        class Even(ValidatorRule):
            message = "must be even"

            def passes(self, context, value, *args):
                return value % 2 == 0
    """

    message: str = ""
    evaluate_null: bool = False
    evaluate_undefined: bool = False
    always_run: bool = False
    arg_array: bool = False
    include_args: bool = True

    @abstractmethod
    def passes(self, context: 'EvaluationContext', value: Any, *args: Any) -> bool | list[str]:
        """
        Check a value.

        Args:
            context: Enclosing data node and a handle back to the validator.
            value: The value under validation.
            *args: Arguments configured for the rule in the schema.

        Returns:
            True to pass, False to fail with `message`, or a list of failure
            messages (empty list passes).
        """
        raise NotImplementedError

    def definition(self) -> RuleDefinition:
        return RuleDefinition(
            func=self.passes,
            message=self.message,
            evaluate_null=self.evaluate_null,
            evaluate_undefined=self.evaluate_undefined,
            always_run=self.always_run,
            arg_array=self.arg_array,
            include_args=self.include_args,
        )
