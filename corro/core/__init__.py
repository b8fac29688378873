"""Core engine re-exported for convenient access."""

from .localization import __, clear_cache, get_locale, set_locale, set_locale_path, trans
from .messages import MessageFormatter, format_message
from .registry import RuleRegistry, to_rule_definition
from .results import ErrorMap, ResultEntry, ValidationResult, merge_error_maps
from .schema import NestedSchema, RuleApplication, SchemaNode
from .validator import Validator
from corro.utils.undefined import UNDEFINED

__all__ = [
    "__",
    "trans",
    "set_locale",
    "get_locale",
    "set_locale_path",
    "clear_cache",
    "MessageFormatter",
    "format_message",
    "RuleRegistry",
    "to_rule_definition",
    "ErrorMap",
    "ResultEntry",
    "ValidationResult",
    "merge_error_maps",
    "NestedSchema",
    "RuleApplication",
    "SchemaNode",
    "Validator",
    "UNDEFINED",
]
