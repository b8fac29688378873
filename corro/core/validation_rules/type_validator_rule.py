from datetime import date
from typing import Any, Callable, Mapping

from corro.decorators.rule_decorator import validator_rule


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


TYPES: dict[str, Callable[[Any], bool]] = {
    "string": lambda value: isinstance(value, str),
    "number": _is_number,
    "integer": lambda value: isinstance(value, int) and not isinstance(value, bool),
    "boolean": lambda value: isinstance(value, bool),
    "array": lambda value: isinstance(value, (list, tuple)),
    "object": lambda value: isinstance(value, Mapping),
    "null": lambda value: value is None,
    "date": lambda value: isinstance(value, date),
    "function": callable,
}


@validator_rule("expected type {0}")
def type_(context, value: Any, *names: str) -> bool:
    """Passes when the value is any one of the named types."""
    return any(TYPES.get(name, lambda _: False)(value) for name in names)
