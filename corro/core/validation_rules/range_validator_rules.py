from typing import Any

from corro.decorators.rule_decorator import validator_rule


@validator_rule("is too small")
def min_value(context, value: Any, minimum: Any) -> bool:
    try:
        return value >= minimum
    except TypeError:
        return False


@validator_rule("is too large")
def max_value(context, value: Any, maximum: Any) -> bool:
    try:
        return value <= maximum
    except TypeError:
        return False
