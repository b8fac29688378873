from __future__ import annotations

import inspect
from typing import TYPE_CHECKING, Any, Callable, Mapping, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

if TYPE_CHECKING:
    from corro.contracts.evaluation_context import EvaluationContext


def positional_capacity(func: Callable) -> Optional[int]:
    """
    Number of positional parameters `func` accepts, or None when unbounded.

    Callables whose signature cannot be read are treated as unbounded.
    """
    try:
        parameters = inspect.signature(func).parameters.values()
    except (TypeError, ValueError):
        return None

    count = 0
    for parameter in parameters:
        if parameter.kind == inspect.Parameter.VAR_POSITIONAL:
            return None
        if parameter.kind in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD):
            count += 1
    return count


class RuleDefinition(BaseModel):
    """
    A predicate plus the message reported when it fails.

    The predicate is called as `func(context, value, *args)` and returns a bool
    (False fails with `message`) or a list of failure messages.
    """

    func: Callable[..., Any] = Field(..., description="Predicate called as func(context, value, *args)")
    message: str = Field(default="", description="Failure message template with positional {0} placeholders")
    evaluate_null: bool = Field(default=False, alias="evaluateNull", description="Run even when the value is None")
    evaluate_undefined: bool = Field(default=False, alias="evaluateUndefined", description="Run even when the value is absent")
    always_run: bool = Field(default=False, alias="alwaysRun", description="Run even when the schema sets the rule to False")
    arg_array: bool = Field(default=False, alias="argArray", description="Pass a list argument as one value instead of expanding it")
    include_args: bool = Field(default=True, alias="includeArgs", description="Copy the schema arguments into result entries")

    model_config = ConfigDict(frozen=True, populate_by_name=True, arbitrary_types_allowed=True)

    _capacity: Optional[int] = PrivateAttr(default=None)

    def model_post_init(self, __context: Any) -> None:
        self._capacity = positional_capacity(self.func)

    @classmethod
    def is_block(cls, value: Any) -> bool:
        """Whether `value` is shaped like an inline rule block."""
        if isinstance(value, RuleDefinition):
            return True
        return isinstance(value, Mapping) and callable(value.get("func"))

    def call(self, context: 'EvaluationContext', value: Any, args: Sequence[Any]) -> Any:
        """Invoke the predicate, dropping trailing arguments it cannot take."""
        call_args = (context, value, *args)
        if self._capacity is not None:
            call_args = call_args[:self._capacity]
        return self.func(*call_args)
