from typing import Any

from corro.decorators.rule_decorator import validator_rule
from corro.utils.undefined import is_missing


@validator_rule("is required", evaluate_null=True, evaluate_undefined=True, include_args=False)
def required(context, value: Any, *_) -> bool:
    return not is_missing(value)
