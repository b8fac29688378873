import re
from typing import Any

from corro.decorators.rule_decorator import validator_rule


@validator_rule("does not match supplied pattern", include_args=False)
def match(context, value: Any, pattern: str | re.Pattern) -> bool:
    if not isinstance(value, str):
        return False
    return re.search(pattern, value) is not None
