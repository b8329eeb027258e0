"""Key schema and table-creation parameters.

Builds the AttributeDefinitions, KeySchema and ProvisionedThroughput structures
accepted by the DynamoDB create_table call, and reads a key schema back into
its hash and range attribute names.
"""

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, Final

from typing_extensions import TypedDict

from ddbformat.exceptions import InvalidKeySchemaError
from ddbformat.keys import KeyDefinitionLike, as_key_definition

if TYPE_CHECKING:
    from mypy_boto3_dynamodb.type_defs import (
        AttributeDefinitionTypeDef,
        KeySchemaElementTypeDef,
    )
else:
    AttributeDefinitionTypeDef = dict
    KeySchemaElementTypeDef = dict

logger = logging.getLogger(__name__)

HASH: Final = "HASH"
RANGE: Final = "RANGE"

DEFAULT_PROVISIONED_THROUGHPUT: Final = {"ReadCapacityUnits": 1, "WriteCapacityUnits": 1}


class KeySchemaParams(TypedDict):
    """The key-related part of a create_table request.

    Attributes:
        AttributeDefinitions: One definition per key attribute.
        KeySchema: The hash key element, then the range key element if any.

    """

    AttributeDefinitions: list[AttributeDefinitionTypeDef]
    KeySchema: list[KeySchemaElementTypeDef]


def build_key_schema(
    hash_key: KeyDefinitionLike,
    range_key: KeyDefinitionLike | None = None,
) -> KeySchemaParams:
    """Build attribute definitions and key schema for a hash and optional range key.

    Args:
        hash_key: The partition key definition.
        range_key: The sort key definition, if the table has one.

    Returns:
        A dict with AttributeDefinitions and KeySchema, hash key first in both.

    Raises:
        InvalidKeyDefinitionError: If a definition is malformed.

    Example:
        build_key_schema({"name": "id", "type": "S"}, {"name": "ts", "type": "N"})
        Returns AttributeDefinitions for id and ts, and KeySchema
        [{"AttributeName": "id", "KeyType": "HASH"},
         {"AttributeName": "ts", "KeyType": "RANGE"}].

    """
    keys = [(as_key_definition(hash_key), HASH)]
    if range_key is not None:
        keys.append((as_key_definition(range_key), RANGE))

    params: KeySchemaParams = {"AttributeDefinitions": [], "KeySchema": []}
    for key, key_type in keys:
        params["AttributeDefinitions"].append(
            {"AttributeName": key.name, "AttributeType": key.type}
        )
        params["KeySchema"].append({"AttributeName": key.name, "KeyType": key_type})

    return params


def build_table_params(
    table_name: str,
    hash_key: KeyDefinitionLike,
    range_key: KeyDefinitionLike | None = None,
    params: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Compose the parameters for a create_table request.

    Caller-supplied AttributeDefinitions (for example, attributes used by
    secondary indexes) are kept first and the key definitions are appended.
    KeySchema and ProvisionedThroughput always overwrite caller values.

    Args:
        table_name: The table name.
        hash_key: The partition key definition.
        range_key: The sort key definition, if any.
        params: Extra create_table parameters. Mutated in place and returned.

    Returns:
        The completed parameters, the same dict as params when one is given.

    """
    if params is None:
        params = {}

    key_params = build_key_schema(hash_key, range_key)

    params["TableName"] = table_name
    params["AttributeDefinitions"] = [
        *(params.get("AttributeDefinitions") or []),
        *key_params["AttributeDefinitions"],
    ]
    params["KeySchema"] = key_params["KeySchema"]
    params["ProvisionedThroughput"] = dict(DEFAULT_PROVISIONED_THROUGHPUT)

    logger.debug(
        "Built create_table params for %s with key schema %s",
        table_name,
        params["KeySchema"],
    )
    return params


def parse_key_schema(key_schema: Sequence[KeySchemaElementTypeDef]) -> tuple[str, str | None]:
    """Parse a DynamoDB key schema into partition and sort key attributes.

    Raises:
        InvalidKeySchemaError: If no partition key is present.

    """
    partition_key_attribute: str | None = None
    sort_key_attribute: str | None = None

    for key_element in key_schema:
        if key_element["KeyType"] == HASH:
            partition_key_attribute = key_element["AttributeName"]
        elif key_element["KeyType"] == RANGE:
            sort_key_attribute = key_element["AttributeName"]

    if partition_key_attribute is None:
        raise InvalidKeySchemaError()

    return partition_key_attribute, sort_key_attribute


__all__ = [
    "DEFAULT_PROVISIONED_THROUGHPUT",
    "HASH",
    "RANGE",
    "KeySchemaParams",
    "build_key_schema",
    "build_table_params",
    "parse_key_schema",
]
