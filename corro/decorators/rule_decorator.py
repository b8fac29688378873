from typing import Any, Callable

from corro.contracts.rule_definition import RuleDefinition


def validator_rule(message: str = "", **flags: Any) -> Callable[[Callable], RuleDefinition]:
    """
    Decorator that turns a predicate into a `RuleDefinition`.

    Args:
        message: Failure message template, positional placeholders allowed.
        **flags: Any of evaluate_null, evaluate_undefined, always_run,
            arg_array, include_args (camelCase spellings accepted).

    Example usage:
        @validator_rule("must be longer than {0} characters")
        def longer_than(context, value, length):
            return len(value) > length

        validator = Validator({"longerThan": longer_than})
    """
    def decorator(func: Callable) -> RuleDefinition:
        return RuleDefinition.model_validate({"func": func, "message": message, **flags})

    return decorator
