"""Complete request parameters for DynamoDB client calls.

Each function returns the keyword arguments for one low-level client call
(put_item, update_item, query), ready to be passed as ``client.put_item(**params)``.
"""

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from ddbformat.expressions import (
    build_key_conditions,
    build_uniqueness_condition,
    build_update_expression,
)
from ddbformat.keys import NativeValue, Record
from ddbformat.serializer import serialize_item

logger = logging.getLogger(__name__)


def build_put_item_params(
    table_name: str,
    item: Record,
    *,
    unique: Sequence[str] | None = None,
) -> dict[str, Any]:
    """Build kwargs for put_item.

    Args:
        table_name: The target table.
        item: The record to write. Serialized in place.
        unique: Attribute names that must not already exist on a stored item
            with the same key.

    Returns:
        Dictionary of kwargs to pass to client.put_item().

    """
    put_kwargs: dict[str, Any] = {"TableName": table_name, "Item": serialize_item(item)}

    condition_expression = build_uniqueness_condition(unique)
    if condition_expression is not None:
        put_kwargs["ConditionExpression"] = condition_expression

    logger.debug("Built put_item params for %s with fields %s", table_name, list(item))
    return put_kwargs


def build_update_item_params(
    table_name: str,
    key: Record,
    updates: Mapping[str, NativeValue],
) -> dict[str, Any]:
    """Build kwargs for update_item.

    Args:
        table_name: The target table.
        key: The key attributes identifying the item. Serialized in place.
        updates: Field updates mapping.

    Returns:
        Dictionary of kwargs to pass to client.update_item().

    Raises:
        EmptyUpdateError: If updates is empty.

    """
    update_kwargs: dict[str, Any] = {"TableName": table_name}
    update_kwargs |= build_update_expression(updates)
    update_kwargs["Key"] = serialize_item(key)

    return update_kwargs


def build_query_params(
    table_name: str,
    keys: Mapping[str, NativeValue],
    *,
    index_name: str | None = None,
    consistent_read: bool = False,
) -> dict[str, Any]:
    """Build kwargs for query using equality KeyConditions.

    Args:
        table_name: The target table.
        keys: Key attribute values to match.
        index_name: Optional index name.
        consistent_read: Whether to use consistent reads.

    Returns:
        Dictionary of kwargs to pass to client.query().

    """
    query_kwargs: dict[str, Any] = {
        "TableName": table_name,
        "ConsistentRead": consistent_read,
    }
    query_kwargs |= build_key_conditions(keys)

    if index_name is not None:
        query_kwargs["IndexName"] = index_name

    return query_kwargs


__all__ = [
    "build_put_item_params",
    "build_query_params",
    "build_update_item_params",
]
