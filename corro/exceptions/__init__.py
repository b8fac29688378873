"""Exceptions raised by corro for misconfiguration (never for invalid data)."""

from .common_exceptions import (
    CorroException,
    InvalidRuleDefinitionException,
    ValidationFailedException,
    EnvInvalidException,
)


__all__ = [
    "CorroException",
    "InvalidRuleDefinitionException",
    "ValidationFailedException",
    "EnvInvalidException",
]
