from __future__ import annotations

from typing import Any, Dict, List, Mapping

from pydantic import BaseModel, ConfigDict, Field, computed_field

from corro.utils.serialisation import serialise


class ResultEntry(BaseModel):
    """One failed rule invocation, or one message of a multi-message rule."""

    rule: str = Field(..., description="Rule name, suffixed -<index> when one rule produced several messages")
    result: str = Field(..., description="The failure message")
    args: Any = Field(default=None, description="Schema arguments of the rule; unset when the rule excludes them")

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    @property
    def has_args(self) -> bool:
        return "args" in self.model_fields_set

    def to_dict(self) -> dict:
        data: dict[str, Any] = {"rule": self.rule, "result": self.result}
        if self.has_args:
            data["args"] = serialise(self.args)
        return data


ErrorMap = Dict[str, List[ResultEntry]]


def merge_error_maps(a: Mapping[str, List[ResultEntry]], b: Mapping[str, List[ResultEntry]]) -> ErrorMap:
    """
    Merge two error maps into a new one.

    Keys keep first-seen order; entries of a key present in both are
    concatenated, `a`'s first. Neither input is modified.
    """
    merged: ErrorMap = {key: list(entries) for key, entries in a.items()}
    for key, entries in b.items():
        merged.setdefault(key, []).extend(entries)
    return merged


class ValidationResult(BaseModel):
    """Outcome of `Validator.validate`. Valid exactly when there are no errors."""

    errors: ErrorMap = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)

    @computed_field
    @property
    def valid(self) -> bool:
        return not self.errors

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "errors": {path: [entry.to_dict() for entry in entries] for path, entries in self.errors.items()},
        }
