import re
from typing import Any

from corro.utils.undefined import UNDEFINED


def serialise(val: Any) -> Any:
    if val is UNDEFINED:
        return None
    if isinstance(val, re.Pattern):
        return val.pattern
    if hasattr(val, "to_dict"):
        return val.to_dict()
    elif isinstance(val, (list, tuple, set, frozenset)):
        return [serialise(item) for item in val]
    elif isinstance(val, dict):
        return {key: serialise(value) for key, value in val.items()}

    return val


def pascal_case_to_snake_case(pascal: type | str) -> str:
    """
    Convert a class name (CamelCase or PascalCase) to snake_case.

    Args:
        pascal: The class or class name as a string.

    Returns:
        str: The snake_case version of the class name.
    """
    if not isinstance(pascal, str):
        pascal = pascal.__name__
    s1 = re.sub('(.)([A-Z][a-z]+)', r'\1_\2', pascal)
    return re.sub('([a-z0-9])([A-Z])', r'\1_\2', s1).lower()


def get_exception_error_type(exception: Exception) -> str:
    name = exception.__class__.__name__
    if name.endswith("Exception"):
        name = name[: -len("Exception")]
    return pascal_case_to_snake_case(name)
