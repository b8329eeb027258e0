"""Expression builders for conditional writes, updates and key lookups.

Placeholders are derived from the field name:

- attribute names become ``#<field>Attribute``
- attribute values become ``:<field>Value``

Two fields always map to distinct placeholders, but field names containing
characters outside [A-Za-z0-9_] produce placeholders the store will reject.
"""

import logging
from collections.abc import Mapping
from typing import Any, Final

from typing_extensions import TypedDict

from ddbformat.exceptions import EmptyUpdateError
from ddbformat.keys import AttributeValue, NativeValue
from ddbformat.serializer import serialize_value

logger = logging.getLogger(__name__)

NAME_PLACEHOLDER: Final = "#{field}Attribute"
VALUE_PLACEHOLDER: Final = ":{field}Value"
EQ: Final = "EQ"


class UpdateExpressionParams(TypedDict):
    ExpressionAttributeNames: dict[str, str]
    ExpressionAttributeValues: dict[str, AttributeValue]
    UpdateExpression: str


class KeyCondition(TypedDict):
    ComparisonOperator: str
    AttributeValueList: list[AttributeValue]


class KeyConditionsParams(TypedDict):
    KeyConditions: dict[str, KeyCondition]


class ExpressionBuilder:
    """Collects placeholder mappings while building expressions.

    Each builder instance accumulates ExpressionAttributeNames and
    ExpressionAttributeValues for one request.

    Example:
        builder = ExpressionBuilder()
        builder.build_update_expression({"age": 5})
        Returns "SET #ageAttribute = :ageValue".

        builder.attribute_names
        Returns {"#ageAttribute": "age"}.

    """

    def __init__(self) -> None:
        self.attribute_names: dict[str, str] = {}
        self.attribute_values: dict[str, AttributeValue] = {}

    def _get_name_placeholder(self, field: str) -> str:
        placeholder = NAME_PLACEHOLDER.format(field=field)
        self.attribute_names[placeholder] = field
        return placeholder

    def _get_value_placeholder(self, field: str, value: NativeValue) -> str:
        placeholder = VALUE_PLACEHOLDER.format(field=field)
        self.attribute_values[placeholder] = serialize_value(value)
        return placeholder

    def build_update_expression(self, updates: Mapping[str, NativeValue]) -> str:
        """Build a SET expression assigning each field its new value.

        Raises:
            EmptyUpdateError: If updates is empty.

        """
        if not updates:
            raise EmptyUpdateError()

        assignments = []
        for field, value in updates.items():
            name_placeholder = self._get_name_placeholder(field)
            value_placeholder = self._get_value_placeholder(field, value)
            assignments.append(f"{name_placeholder} = {value_placeholder}")

        return "SET " + ", ".join(assignments)


def build_uniqueness_condition(field_names: Any) -> str | None:
    """Build a condition that none of the given attributes exist yet.

    Args:
        field_names: A non-empty list or tuple of attribute names.

    Returns:
        The condition expression, or None when field_names is not a non-empty
        sequence of strings.

    Example:
        build_uniqueness_condition(["email", "username"])
        Returns "attribute_not_exists(email) AND attribute_not_exists(username)".

    """
    if not isinstance(field_names, (list, tuple)) or not field_names:
        return None
    if not all(isinstance(name, str) for name in field_names):
        return None

    return " AND ".join(f"attribute_not_exists({name})" for name in field_names)


def build_condition(condition: Mapping[str, Any] | None = None) -> dict[str, str] | None:
    """Build ConditionExpression params from a condition description.

    Only the {"unique": [...]} shape is understood; anything else means no
    condition applies.
    """
    if not isinstance(condition, Mapping):
        return None

    expression = build_uniqueness_condition(condition.get("unique"))
    if expression is None:
        return None
    return {"ConditionExpression": expression}


def build_update_expression(updates: Mapping[str, NativeValue]) -> UpdateExpressionParams:
    """Build the update_item expression and placeholders for a set of fields.

    Fields keep their input order in the expression.

    Raises:
        EmptyUpdateError: If updates is empty.
        SerializationError: If a value cannot be serialized.

    Example:
        build_update_expression({"age": 5, "name": "bob"})
        Returns UpdateExpression
        "SET #ageAttribute = :ageValue, #nameAttribute = :nameValue".

    """
    builder = ExpressionBuilder()
    update_expression = builder.build_update_expression(updates)

    logger.debug("Built update expression: %s", update_expression)
    return {
        "ExpressionAttributeNames": builder.attribute_names,
        "ExpressionAttributeValues": builder.attribute_values,
        "UpdateExpression": update_expression,
    }


def build_key_conditions(keys: Mapping[str, NativeValue]) -> KeyConditionsParams:
    """Build equality KeyConditions for a lookup by key attributes.

    Example:
        build_key_conditions({"id": "abc"})
        Returns {"KeyConditions": {"id": {"ComparisonOperator": "EQ",
        "AttributeValueList": [{"S": "abc"}]}}}.

    """
    key_conditions: dict[str, KeyCondition] = {}
    for field, value in keys.items():
        key_conditions[field] = {
            "ComparisonOperator": EQ,
            "AttributeValueList": [serialize_value(value)],
        }

    return {"KeyConditions": key_conditions}


__all__ = [
    "ExpressionBuilder",
    "KeyCondition",
    "KeyConditionsParams",
    "UpdateExpressionParams",
    "build_condition",
    "build_key_conditions",
    "build_uniqueness_condition",
    "build_update_expression",
]
