"""Format native Python values and records as DynamoDB request parameters."""

from ddbformat.exceptions import (
    DdbFormatError,
    DeserializationError,
    DuplicateSetMemberError,
    EmptySetError,
    EmptyUpdateError,
    InvalidKeyDefinitionError,
    InvalidKeySchemaError,
    InvalidNumberError,
    MissingArgumentError,
    SerializationError,
    TypeMismatchError,
    UnknownAttributeTypeError,
    UnsupportedTypeError,
    ValidationError,
)
from ddbformat.expressions import (
    ExpressionBuilder,
    build_condition,
    build_key_conditions,
    build_uniqueness_condition,
    build_update_expression,
)
from ddbformat.keys import AttributeValue, KeyDefinition, Record
from ddbformat.params import build_put_item_params, build_query_params, build_update_item_params
from ddbformat.schema import (
    DEFAULT_PROVISIONED_THROUGHPUT,
    build_key_schema,
    build_table_params,
    parse_key_schema,
)
from ddbformat.serializer import (
    MISSING,
    deserialize_item,
    deserialize_items,
    deserialize_value,
    serialize_item,
    serialize_value,
)

__all__ = [
    "DEFAULT_PROVISIONED_THROUGHPUT",
    "MISSING",
    "AttributeValue",
    "DdbFormatError",
    "DeserializationError",
    "DuplicateSetMemberError",
    "EmptySetError",
    "EmptyUpdateError",
    "ExpressionBuilder",
    "InvalidKeyDefinitionError",
    "InvalidKeySchemaError",
    "InvalidNumberError",
    "KeyDefinition",
    "MissingArgumentError",
    "Record",
    "SerializationError",
    "TypeMismatchError",
    "UnknownAttributeTypeError",
    "UnsupportedTypeError",
    "ValidationError",
    "build_condition",
    "build_key_conditions",
    "build_key_schema",
    "build_put_item_params",
    "build_query_params",
    "build_table_params",
    "build_uniqueness_condition",
    "build_update_expression",
    "build_update_item_params",
    "deserialize_item",
    "deserialize_items",
    "deserialize_value",
    "parse_key_schema",
    "serialize_item",
    "serialize_value",
]
