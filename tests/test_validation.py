"""Tests for argument validation against declared input schemas."""

import pytest
from pydantic import ValidationError

from greeting_server.greetings import CREATE_GREETING_SCHEMA
from greeting_server.types.actions import InputSchema
from greeting_server.types.json_rpc import ErrorCode, ErrorData
from greeting_server.types.resources import ReadResourceParams
from greeting_server.validation import apply_defaults, describe_validation_error, validate_arguments


def test_defaults_applied_for_omitted_fields():
    assert apply_defaults(CREATE_GREETING_SCHEMA, {"name": "John"}) == {"name": "John", "style": "casual"}


def test_apply_defaults_does_not_mutate_input():
    arguments = {"name": "John"}
    apply_defaults(CREATE_GREETING_SCHEMA, arguments)
    assert arguments == {"name": "John"}


@pytest.mark.parametrize("style", ["formal", "casual", "excited"])
def test_enum_values_pass_through(style: str):
    assert validate_arguments(CREATE_GREETING_SCHEMA, {"name": "Ana", "style": style}) == {"name": "Ana", "style": style}


def test_unknown_optional_enum_falls_back_to_default():
    assert validate_arguments(CREATE_GREETING_SCHEMA, {"name": "Lee", "style": "bogus"}) == {
        "name": "Lee",
        "style": "casual",
    }


def test_unknown_optional_enum_rejected_when_strict():
    result = validate_arguments(CREATE_GREETING_SCHEMA, {"name": "Lee", "style": "bogus"}, strict_enums=True)
    assert isinstance(result, ErrorData)
    assert result.code == ErrorCode.INVALID_PARAMS
    assert "bogus" in result.message


def test_unknown_optional_enum_without_default_is_dropped():
    schema = InputSchema(properties={"mode": {"type": "string", "enum": ["a", "b"]}})
    assert validate_arguments(schema, {"mode": "c"}) == {}


def test_unknown_required_enum_is_rejected():
    schema = InputSchema(properties={"mode": {"type": "string", "enum": ["a", "b"]}}, required=["mode"])
    result = validate_arguments(schema, {"mode": "c"})
    assert isinstance(result, ErrorData)
    assert result.code == ErrorCode.INVALID_PARAMS


def test_missing_required_field():
    result = validate_arguments(CREATE_GREETING_SCHEMA, {"style": "formal"})
    assert isinstance(result, ErrorData)
    assert result.code == ErrorCode.INVALID_PARAMS
    assert result.message == "Input validation error: 'name' is a required property"


def test_missing_arguments_treated_as_empty():
    result = validate_arguments(CREATE_GREETING_SCHEMA, None)
    assert isinstance(result, ErrorData)
    assert "'name' is a required property" in result.message


def test_wrong_type_rejected():
    result = validate_arguments(CREATE_GREETING_SCHEMA, {"name": 42})
    assert isinstance(result, ErrorData)
    assert result.message == "Input validation error: 42 is not of type 'string'"


def test_describe_validation_error():
    with pytest.raises(ValidationError) as exc_info:
        ReadResourceParams.model_validate({"uri": 5})

    assert describe_validation_error(exc_info.value) == "uri: Input should be a valid string"
