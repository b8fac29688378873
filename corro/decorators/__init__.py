from .rule_decorator import validator_rule

__all__ = [
    "validator_rule",
]
