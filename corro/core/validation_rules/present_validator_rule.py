from typing import Any, Collection

from corro.decorators.rule_decorator import validator_rule


@validator_rule("not in allowed values", arg_array=True)
def present(context, value: Any, allowed: Collection[Any]) -> bool:
    try:
        return value in allowed
    except TypeError:
        # unhashable value checked against a set
        return any(value == candidate for candidate in allowed)
