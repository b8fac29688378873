from typing import Optional

from corro.utils.serialisation import get_exception_error_type


class CorroException(Exception):
    def __init__(self,
        message: str,
        *,
        error_type: Optional[str] = None,
        data: Optional[dict] = None
    ):
        """
        Base exception for programming errors surfaced by corro.

        Data that fails validation is never reported through exceptions; it is
        returned as an error map. These exceptions cover misconfiguration only.

        Args:
            message: The error message.
            error_type: The error type (inferred from the class name if not provided).
            data: Extra context for the caller.
        """
        self.message = message
        self.error_type = error_type or get_exception_error_type(self)
        self.data = data
        super().__init__(message)


class InvalidRuleDefinitionException(CorroException):
    def __init__(self, name: str, reason: Optional[str] = None):
        message = f"[INVALID RULE] Rule `{name}` cannot be registered"
        if reason:
            message += f": {reason}"
        super().__init__(message, data={"rule": name})
        self.rule_name = name


class ValidationFailedException(ValueError):
    """
    Raised by `Validator.assert_valid` when the validated object has errors.

    `validate` itself never raises for data problems; this exception exists for
    callers that prefer to bail out on the first invalid payload.
    """

    def __init__(
        self,
        message: str,
        *,
        errors: dict[str, list[dict]] | None = None,
        error_type: str = "validation_error",
    ):
        super().__init__(message)
        self.message = message
        self.errors = errors or {}
        self.error_type = error_type


class EnvInvalidException(ValueError):
    def __init__(self, env_name: str, value: str = None, supported_values: list[str] = None):
        message = f"[ENV INVALID] Invalid environment variable: `{env_name}`"
        if value:
            message += f" (value: `{value}`) "
        if supported_values:
            message += f" (supported values: {', '.join(supported_values)})"
        super().__init__(message)
