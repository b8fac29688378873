from typing import Any

from corro.decorators.rule_decorator import validator_rule


@validator_rule("cannot be blank", include_args=False)
def not_empty(context, value: Any, *_) -> bool:
    """Fails whitespace-only strings and empty collections."""
    if isinstance(value, str):
        return value.strip() != ""
    if isinstance(value, (list, tuple, dict, set)):
        return len(value) > 0
    return True
