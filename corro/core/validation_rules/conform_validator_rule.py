from typing import Any

from corro.contracts.rule_definition import RuleDefinition
from corro.decorators.rule_decorator import validator_rule


@validator_rule(arg_array=True, include_args=False)
def conform(context, value: Any, blocks: Any) -> list[str]:
    """
    Run every inline rule block against the value and collect all failures.

        {"bio": {"conform": [
            {"func": lambda context, bio: "innovation" in bio, "message": "not disruptive enough"},
        ]}}
    """
    if RuleDefinition.is_block(blocks) or not isinstance(blocks, (list, tuple)):
        blocks = [blocks]

    messages: list[str] = []
    for block in blocks:
        messages.extend(context.run_rule(block, value))
    return messages
