from .serialisation import serialise, pascal_case_to_snake_case, get_exception_error_type
from .undefined import UNDEFINED, is_missing

__all__ = [
    "serialise",
    "pascal_case_to_snake_case",
    "get_exception_error_type",
    "UNDEFINED",
    "is_missing",
]
