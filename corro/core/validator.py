from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Sequence, Union

from corro import config
from corro.contracts.evaluation_context import EvaluationContext
from corro.contracts.rule_definition import RuleDefinition
from corro.contracts.validator_rule import ValidatorRule
from corro.core.messages import MessageFormatter, format_message
from corro.core.registry import RuleRegistry
from corro.core.results import ErrorMap, ResultEntry, ValidationResult, merge_error_maps
from corro.core.schema import NestedSchema, RuleApplication, SchemaNode
from corro.exceptions.common_exceptions import ValidationFailedException
from corro.utils.undefined import UNDEFINED, is_missing

logger = logging.getLogger(__name__)

RuleRef = Union[str, RuleDefinition, ValidatorRule, Mapping[str, Any]]
SchemaLike = Union[Mapping[Any, Any], SchemaNode]


def _is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


class Validator:
    """
    Validates nested data against a declarative schema.

    A schema is a mapping. Each key either names a rule (the key's value holds
    the rule's arguments) or, when its value is itself a mapping, describes a
    nested object or the elements of an array:

        validator = Validator()
        result = validator.validate(
            {"user": {"required": True, "name": {"required": True, "minLength": 2}}},
            {"user": {"name": "a"}},
        )
        result.errors  # {"user.name": [ResultEntry(rule="minLength", result="is too short", args=2)]}

    Failures are reported as data in a flat error map keyed by dotted path.
    """

    def __init__(
        self,
        custom_rules: Optional[Mapping[str, Any]] = None,
        *,
        formatter: Optional[MessageFormatter] = None,
    ):
        self.registry = RuleRegistry(custom_rules)
        self.formatter = formatter or format_message
        self.root_key = config.ROOT_KEY
        self.separator = config.PATH_SEPARATOR
        self.invalid_rule_message = config.INVALID_RULE_MESSAGE

    @property
    def rules(self) -> Mapping[str, RuleDefinition]:
        return self.registry.rules

    def run_rule(self, context: Any, rule: RuleRef, value: Any = UNDEFINED, args: Any = None) -> list[str]:
        """
        Run a single rule against a value.

        Args:
            context: The enclosing data node, handed to the predicate.
            rule: A registered rule name or an inline rule block.
            value: The value to check.
            args: The rule's arguments as configured in the schema.

        Returns:
            The failure messages; empty when the rule passes or is skipped.
        """
        _, messages = self._run(context, rule, value, args)
        return messages

    def _run(
        self, context: Any, rule: RuleRef, value: Any, args: Any
    ) -> tuple[Optional[RuleDefinition], list[str]]:
        definition = self.registry.resolve(rule)
        if definition is None:
            logger.warning(f"Invalid rule specified: {rule!r}")
            return None, [self.invalid_rule_message]

        if args is None:
            args = []

        if not self._should_run(definition, value, args):
            logger.debug(f"Rule {rule!r} skipped for value {value!r}")
            return definition, []

        if definition.arg_array:
            call_args = [args]
        elif _is_array(args):
            call_args = list(args)
        else:
            call_args = [args]

        outcome = definition.call(EvaluationContext(context, self), value, call_args)

        if outcome is False:
            return definition, [self.formatter(definition.message, call_args)]
        if isinstance(outcome, (list, tuple)):
            return definition, [str(message) for message in outcome]
        return definition, []

    @staticmethod
    def _should_run(definition: RuleDefinition, value: Any, args: Any) -> bool:
        if value is None and not definition.evaluate_null:
            return False
        if value is UNDEFINED and not definition.evaluate_undefined:
            return False
        if args is False and not definition.always_run:
            return False
        return True

    def evaluate_object(
        self,
        context: Any,
        schema: SchemaLike,
        value: Any = UNDEFINED,
        name: Optional[str] = None,
    ) -> ErrorMap:
        """
        Apply a schema node to a value, recursing into nested schemas.

        Args:
            context: The data node enclosing `value`.
            schema: A schema mapping or compiled `SchemaNode`.
            value: The data the schema node describes.
            name: Dotted path of `value`; None at the root.

        Returns:
            Error map of every failure under this node, keyed by full path.
        """
        node = SchemaNode.compile(schema)
        errors: ErrorMap = {}

        for entry in node.entries:
            if isinstance(entry, RuleApplication):
                errors = merge_error_maps(errors, self._evaluate_rule(context, entry, value, name))
            else:
                errors = merge_error_maps(errors, self._evaluate_nested(entry, value, name))

        return errors

    def _evaluate_rule(self, context: Any, entry: RuleApplication, value: Any, name: Optional[str]) -> ErrorMap:
        definition, messages = self._run(context, entry.name, value, entry.args)
        if not messages:
            return {}

        include_args = definition is None or definition.include_args

        results = []
        for index, message in enumerate(messages):
            rule_id = entry.name if len(messages) == 1 else f"{entry.name}-{index}"
            if include_args:
                results.append(ResultEntry(rule=rule_id, result=message, args=entry.args))
            else:
                results.append(ResultEntry(rule=rule_id, result=message))

        return {name or self.root_key: results}

    def _evaluate_nested(self, entry: NestedSchema, value: Any, name: Optional[str]) -> ErrorMap:
        if is_missing(value):
            logger.debug(f"Nested schema `{entry.key}` skipped at {name or self.root_key}: no value")
            return {}

        if _is_array(value):
            errors: ErrorMap = {}
            for index, element in enumerate(value):
                errors = merge_error_maps(
                    errors, self.evaluate_object(value, entry.node, element, self._join(name, index))
                )
            return errors

        # A scalar has no children: rules one level down still see an absent value
        child = value.get(entry.key, UNDEFINED) if isinstance(value, Mapping) else UNDEFINED
        return self.evaluate_object(value, entry.node, child, self._join(name, entry.key))

    def _join(self, name: Optional[str], part: Any) -> str:
        return f"{name}{self.separator}{part}" if name else str(part)

    def validate(self, schema: SchemaLike, obj: Any) -> ValidationResult:
        """
        Validate an object against a schema.

        Each top-level schema key that holds a nested schema is evaluated
        against the matching property of `obj`; any other top-level key is a
        rule applied to `obj` itself and reported under the root key.
        """
        node = SchemaNode.compile(schema)
        errors: ErrorMap = {}

        for entry in node.entries:
            if isinstance(entry, NestedSchema):
                child = obj.get(entry.key, UNDEFINED) if isinstance(obj, Mapping) else UNDEFINED
                errors = merge_error_maps(errors, self.evaluate_object(obj, entry.node, child, entry.key))
            else:
                errors = merge_error_maps(errors, self._evaluate_rule(obj, entry, obj, None))

        return ValidationResult(errors=errors)

    def assert_valid(self, schema: SchemaLike, obj: Any) -> ValidationResult:
        """Validate and raise `ValidationFailedException` if anything failed."""
        result = self.validate(schema, obj)
        if not result.valid:
            raise ValidationFailedException(
                f"Validation failed for {len(result.errors)} path(s)",
                errors=result.to_dict()["errors"],
            )
        return result
