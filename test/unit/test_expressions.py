"""Tests for condition, update and key-condition expressions."""

from typing import Any

import pytest

from ddbformat.exceptions import EmptyUpdateError, MissingArgumentError, TypeMismatchError
from ddbformat.expressions import (
    ExpressionBuilder,
    build_condition,
    build_key_conditions,
    build_uniqueness_condition,
    build_update_expression,
)


class TestBuildUniquenessCondition:
    """Test attribute_not_exists condition generation."""

    def test_two_fields(self) -> None:
        result = build_uniqueness_condition(["email", "username"])

        assert result == "attribute_not_exists(email) AND attribute_not_exists(username)"

    def test_single_field(self) -> None:
        assert build_uniqueness_condition(("id",)) == "attribute_not_exists(id)"

    @pytest.mark.parametrize("field_names", [None, [], "email", {"email": True}, ["id", 1]])
    def test_unrecognized_shapes_return_none(self, field_names: Any) -> None:
        assert build_uniqueness_condition(field_names) is None


class TestBuildCondition:
    """Test the mapping-shaped condition entry point."""

    def test_unique(self) -> None:
        result = build_condition({"unique": ["id", "sort"]})

        assert result == {
            "ConditionExpression": "attribute_not_exists(id) AND attribute_not_exists(sort)"
        }

    @pytest.mark.parametrize(
        "condition",
        [None, {}, {"equals": {"id": "1"}}, {"unique": "id"}, ["id"]],
    )
    def test_no_condition(self, condition: Any) -> None:
        assert build_condition(condition) is None


class TestBuildUpdateExpression:
    """Test SET expression generation with placeholders."""

    def test_two_fields(self) -> None:
        result = build_update_expression({"age": 5, "name": "bob"})

        assert result == {
            "ExpressionAttributeNames": {"#ageAttribute": "age", "#nameAttribute": "name"},
            "ExpressionAttributeValues": {":ageValue": {"N": "5"}, ":nameValue": {"S": "bob"}},
            "UpdateExpression": "SET #ageAttribute = :ageValue, #nameAttribute = :nameValue",
        }

    def test_preserves_field_order(self) -> None:
        result = build_update_expression({"b": 1, "a": 2, "c": 3})

        assert result["UpdateExpression"] == (
            "SET #bAttribute = :bValue, #aAttribute = :aValue, #cAttribute = :cValue"
        )

    def test_set_values(self) -> None:
        result = build_update_expression({"tags": ["x", "y"]})

        assert result["ExpressionAttributeValues"] == {":tagsValue": {"SS": ["x", "y"]}}

    def test_empty_updates_raise(self) -> None:
        with pytest.raises(EmptyUpdateError):
            build_update_expression({})

    def test_invalid_value_raises(self) -> None:
        with pytest.raises(TypeMismatchError):
            build_update_expression({"mixed": [1, "a"]})

    def test_none_value_raises(self) -> None:
        with pytest.raises(MissingArgumentError):
            build_update_expression({"gone": None})

    def test_does_not_mutate_input(self) -> None:
        updates = {"age": 5}

        build_update_expression(updates)

        assert updates == {"age": 5}


class TestExpressionBuilder:
    """Test placeholder bookkeeping."""

    def test_builder_collects_placeholders(self) -> None:
        builder = ExpressionBuilder()

        expression = builder.build_update_expression({"score": 1.5})

        assert expression == "SET #scoreAttribute = :scoreValue"
        assert builder.attribute_names == {"#scoreAttribute": "score"}
        assert builder.attribute_values == {":scoreValue": {"N": "1.5"}}

    def test_fresh_builders_do_not_share_state(self) -> None:
        ExpressionBuilder().build_update_expression({"a": 1})

        assert ExpressionBuilder().attribute_names == {}


class TestBuildKeyConditions:
    """Test equality KeyConditions generation."""

    def test_single_key(self) -> None:
        result = build_key_conditions({"id": "abc"})

        assert result == {
            "KeyConditions": {
                "id": {"ComparisonOperator": "EQ", "AttributeValueList": [{"S": "abc"}]}
            }
        }

    def test_hash_and_range_keys(self) -> None:
        result = build_key_conditions({"id": "abc", "ts": 10})

        assert list(result["KeyConditions"]) == ["id", "ts"]
        assert result["KeyConditions"]["ts"] == {
            "ComparisonOperator": "EQ",
            "AttributeValueList": [{"N": "10"}],
        }

    def test_empty_keys(self) -> None:
        assert build_key_conditions({}) == {"KeyConditions": {}}
