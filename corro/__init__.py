"""
corro - declarative, schema-driven validation of nested data.

Describe the rules each field must satisfy in a plain dict, hand it a payload,
and get back a flat report of every violation keyed by dotted path:

    from corro import validate

    result = validate({"email": {"required": True, "format": "email"}}, {"email": "test"})
    result.valid   # False
    result.errors  # {"email": [ResultEntry(rule="format", result="expected format email", args="email")]}

Rules are reusable named predicates (see `corro.core.validation_rules`) or
ad-hoc blocks; custom rules are passed to `Validator(...)`.
"""

__version__ = "0.2.0"
__author__ = "Patrik Mojzis"
__email__ = "patrikm53@gmail.com"
__license__ = "MIT"

from typing import Any, Optional

from .contracts import *  # noqa: F401,F403
from .core import *  # noqa: F401,F403
from .core.localization import __, set_locale, get_locale, trans
from .decorators import *  # noqa: F401,F403
from .exceptions import *  # noqa: F401,F403

_default_validator: Optional[Validator] = None  # noqa: F405


def get_default_validator() -> 'Validator':  # noqa: F405
    """Validator with only the built-in rules, created on first use."""
    global _default_validator
    if _default_validator is None:
        _default_validator = Validator()  # noqa: F405
    return _default_validator


def validate(schema: Any, obj: Any) -> 'ValidationResult':  # noqa: F405
    """Validate `obj` against `schema` using the built-in rules."""
    return get_default_validator().validate(schema, obj)
