from typing import Any

from corro.decorators.rule_decorator import validator_rule


def _length(value: Any) -> int | None:
    try:
        return len(value)
    except TypeError:
        return None


@validator_rule("is too short")
def min_length(context, value: Any, minimum: int) -> bool:
    length = _length(value)
    return length is None or length >= minimum


@validator_rule("is too long")
def max_length(context, value: Any, maximum: int) -> bool:
    length = _length(value)
    return length is None or length <= maximum
