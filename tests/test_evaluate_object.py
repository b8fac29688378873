from corro import UNDEFINED, ResultEntry, SchemaNode, Validator


def test_returns_empty_map_if_all_rules_pass(validator):
    errors = validator.evaluate_object({"field": "value"}, {"required": True}, "value", "field")

    assert errors == {}


def test_reports_failures_under_the_field_name(validator):
    errors = validator.evaluate_object({"field": None}, {"required": True}, None, "field")

    assert list(errors) == ["field"]
    assert errors["field"][0].rule == "required"
    assert errors["field"][0].result == "is required"


def test_root_level_failures_use_root_key(validator):
    errors = validator.evaluate_object({}, {"required": True}, None)

    assert list(errors) == ["*"]


def test_explodes_multiple_result_messages(validator):
    errors = validator.evaluate_object({"field": "test"}, {
        "conform": [
            {"func": lambda context, value: value != "test", "message": "one"},
            {"func": lambda context, value: value != "test", "message": "two"},
        ],
    }, "test", "field")

    assert [entry.to_dict() for entry in errors["field"]] == [
        {"rule": "conform-0", "result": "one"},
        {"rule": "conform-1", "result": "two"},
    ]


def test_single_message_from_multi_result_rule_keeps_bare_name(validator):
    errors = validator.evaluate_object({"field": "test"}, {
        "conform": [
            {"func": lambda context, value: value != "test", "message": "one"},
            {"func": lambda context, value: True, "message": "two"},
        ],
    }, "test", "field")

    assert [entry.rule for entry in errors["field"]] == ["conform"]


def test_three_messages_are_numbered_from_zero():
    validator = Validator({
        "checks": {"func": lambda context, value: ["a", "b", "c"], "message": "unused"},
    })

    errors = validator.evaluate_object({}, {"checks": True}, "x", "field")

    assert [entry.rule for entry in errors["field"]] == ["checks-0", "checks-1", "checks-2"]
    assert [entry.result for entry in errors["field"]] == ["a", "b", "c"]


def test_args_are_included_by_default(validator):
    errors = validator.evaluate_object({}, {"minLength": 5}, "abc", "field")

    assert errors["field"][0].to_dict() == {"rule": "minLength", "result": "is too short", "args": 5}


def test_only_includes_args_if_the_rule_allows_it():
    validator = Validator({
        "rule": {
            "func": lambda context, value, length: len(value) > length,
            "message": "message",
            "includeArgs": False,
        },
    })

    errors = validator.evaluate_object({"field": "not 10"}, {"rule": [10]}, "not 10", "field")

    assert len(errors["field"]) == 1
    assert errors["field"][0].has_args is False
    assert "args" not in errors["field"][0].to_dict()


def test_unknown_rule_in_schema_is_reported_with_its_args(validator):
    errors = validator.evaluate_object({}, {"slithy": "toves"}, "x", "field")

    assert errors["field"][0].to_dict() == {"rule": "slithy", "result": "invalid rule specified", "args": "toves"}


def test_rule_disabled_in_schema_produces_no_entries(validator):
    errors = validator.evaluate_object({}, {"required": False, "minLength": False}, None, "field")

    # switched off even though the value is missing
    assert errors == {}


def test_messages_follow_schema_declaration_order(validator):
    errors = validator.evaluate_object({}, {"maxLength": 1, "match": "^x", "minLength": 10}, "abc", "field")

    assert [entry.rule for entry in errors["field"]] == ["maxLength", "match", "minLength"]


def test_accepts_a_compiled_schema(validator):
    node = SchemaNode.compile({"obj": {"field": {"required": True}}})

    errors = validator.evaluate_object({"obj": {}}, node, {"obj": {}})

    assert list(errors) == ["obj.field"]


# recursion into object trees

def test_validates_nested_objects(validator):
    errors = validator.evaluate_object(
        {"obj": {"field": "value"}},
        {"obj": {"required": True, "field": {"required": True}}},
        {"obj": {"field": "value"}},
    )

    assert errors == {}


def test_returns_an_error_found_deeper_in_the_tree(validator):
    errors = validator.evaluate_object(
        {"parent": {"obj": {}}},
        {"parent": {"obj": {"field": {"required": True}}}},
        {"parent": {"obj": {}}},
    )

    assert list(errors) == ["parent.obj.field"]


def test_nested_rules_receive_the_enclosing_object_as_context():
    seen = []
    validator = Validator({
        "spy": {"func": lambda context, value: seen.append(context.data) or True, "message": "m"},
    })
    data = {"parent": {"child": "value"}}

    validator.evaluate_object(data, {"parent": {"child": {"spy": True}}}, data)

    assert seen == [{"child": "value"}]


def test_cross_field_rules_can_read_siblings():
    validator = Validator({
        "sameAs": {
            "func": lambda context, value, other: value == context.data.get(other),
            "message": "must match {0}",
        },
    })
    data = {"account": {"password": "hunter2", "confirm": "hunter3"}}

    errors = validator.evaluate_object(data, {"account": {"confirm": {"sameAs": "password"}}}, data)

    assert errors["account.confirm"][0].to_dict() == {"rule": "sameAs", "result": "must match password", "args": "password"}


def test_aborts_gracefully_for_nulls(validator):
    errors = validator.evaluate_object(
        {"obj": None},
        {"obj": {"field": {"minLength": 10}}},
        {"obj": None},
    )

    assert errors == {}


def test_aborts_as_gracefully_as_possible_for_wrong_types(validator):
    errors = validator.evaluate_object(
        {"obj": "stop here"},
        {"obj": {"field": {"subfield": {"required": True}}}},
        {"obj": "stop here"},
    )

    assert errors == {}


def test_immediate_property_of_wrong_typed_object_can_still_fail(validator):
    errors = validator.evaluate_object(
        {"obj": "stop here"},
        {"obj": {"field": {"required": True, "subfield": {"required": True}}}},
        {"obj": "stop here"},
    )

    assert list(errors) == ["obj.field"]
    assert errors["obj.field"][0].rule == "required"


def test_absent_nested_object_does_not_cascade_into_descendants(validator):
    errors = validator.evaluate_object(
        {},
        {"address": {"required": True, "city": {"required": True}, "zip": {"required": True}}},
        {},
    )

    assert list(errors) == ["address"]


# recursion into array elements

def test_passes_arrays_where_all_simple_values_conform(validator):
    errors = validator.evaluate_object(
        {"array": ["one", "two"]},
        {"array": {"required": True, "values": {"required": True}}},
        {"array": ["one", "two"]},
    )

    assert errors == {}


def test_passes_arrays_where_all_complex_values_conform(validator):
    errors = validator.evaluate_object(
        {"array": [{"field": "value"}]},
        {"array": {"required": True, "values": {"required": True, "field": {"required": True}}}},
        {"array": [{"field": "value"}]},
    )

    assert errors == {}


def test_fails_individual_nonconforming_elements(validator):
    errors = validator.evaluate_object(
        {"array": ["one", "two", None]},
        {"array": {"required": True, "values": {"required": True}}},
        {"array": ["one", "two", None]},
    )

    assert list(errors) == ["array.2"]
    assert [entry.rule for entry in errors["array.2"]] == ["required"]


def test_failing_element_does_not_stop_its_siblings(validator):
    errors = validator.evaluate_object(
        {"array": [None, "x", None]},
        {"array": {"values": {"required": True}}},
        {"array": [None, "x", None]},
    )

    assert list(errors) == ["array.0", "array.2"]


def test_fails_individual_nonconforming_complex_elements(validator):
    errors = validator.evaluate_object(
        {"array": [{"notfield": "value"}]},
        {"array": {"required": True, "values": {"required": True, "field": {"required": True}}}},
        {"array": [{"notfield": "value"}]},
    )

    assert list(errors) == ["array.0.field"]


def test_array_elements_see_the_array_as_context():
    seen = []
    validator = Validator({
        "spy": {"func": lambda context, value: seen.append(context.data) or True, "message": "m"},
    })
    data = {"tags": ["a", "b"]}

    validator.evaluate_object(data, {"tags": {"values": {"spy": True}}}, data)

    assert seen == [["a", "b"], ["a", "b"]]


def test_tuples_are_treated_as_arrays(validator):
    errors = validator.evaluate_object(
        {"array": ("one", None)},
        {"array": {"values": {"required": True}}},
        {"array": ("one", None)},
    )

    assert list(errors) == ["array.1"]


def test_array_aborts_gracefully_for_nulls(validator):
    errors = validator.evaluate_object(
        {"array": None},
        {"array": {"values": {"required": True}}},
        {"array": None},
    )

    assert errors == {}


def test_array_aborts_as_gracefully_as_possible_for_wrong_types(validator):
    errors = validator.evaluate_object(
        {"array": "this is not an array"},
        {"array": {"values": {"field": {"required": True}}}},
        {"array": "this is not an array"},
    )

    assert errors == {}


def test_immediate_property_of_wrong_typed_array_can_still_fail(validator):
    errors = validator.evaluate_object(
        {"array": "this is not an array"},
        {"array": {"values": {"required": True, "field": {"required": True}}}},
        {"array": "this is not an array"},
    )

    assert list(errors) == ["array.values"]


def test_multiple_array_subschemas_accumulate_per_element(validator):
    errors = validator.evaluate_object(
        {"array": ["one", "two"]},
        {"array": {"required": True, "values": {"minLength": 5}, "values2": {"maxLength": 2}}},
        {"array": ["one", "two"]},
    )

    assert [entry.rule for entry in errors["array.0"]] == ["minLength", "maxLength"]
    assert [entry.rule for entry in errors["array.1"]] == ["minLength", "maxLength"]


def test_nested_arrays_build_index_paths(validator):
    data = {"matrix": [[1, None], [None]]}

    errors = validator.evaluate_object(data, {"matrix": {"rows": {"cells": {"required": True}}}}, data)

    assert list(errors) == ["matrix.0.1", "matrix.1.0"]


def test_does_not_mutate_schema_or_value(validator):
    schema = {"array": {"values": {"required": True, "field": {"required": True}}}}
    data = {"array": [{"field": None}, None]}
    schema_before = repr(schema)
    data_before = repr(data)

    validator.evaluate_object(data, schema, data)

    assert repr(schema) == schema_before
    assert repr(data) == data_before


def test_missing_value_defaults_to_undefined(validator):
    errors = validator.evaluate_object({}, {"required": True}, name="field")

    assert errors["field"][0].result == "is required"
    assert validator.evaluate_object({}, {"type": "string"}, UNDEFINED, "field") == {}


def test_entries_are_result_entry_models(validator):
    errors = validator.evaluate_object({}, {"required": True}, None, "field")

    assert isinstance(errors["field"][0], ResultEntry)


def test_failing_rule_is_resolved_once(validator, monkeypatch):
    calls = []
    resolve = validator.registry.resolve

    def counting_resolve(rule):
        calls.append(rule)
        return resolve(rule)

    monkeypatch.setattr(validator.registry, "resolve", counting_resolve)

    errors = validator.evaluate_object({}, {"minLength": 3}, "ab", "name")

    assert errors == {"name": [ResultEntry(rule="minLength", result="is too short", args=3)]}
    assert calls == ["minLength"]
