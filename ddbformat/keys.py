"""Key definitions and type aliases for DynamoDB wire structures.

Type aliases:
    ScalarAttributeType: The attribute types a key attribute may have
        (S for string, N for number, B for binary).

    AttributeValue: A typed attribute in wire form, a single-entry dict such
        as {"S": "bob"} or {"NS": ["1", "2"]}.

    NativeValue: The Python values the serializer accepts.

    Record: A mapping of field name to value. Holds native values before
        serialization and typed attributes after it.
"""

from collections.abc import Mapping
from decimal import Decimal
from typing import Any, Literal, TypeAlias

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from ddbformat.exceptions import InvalidKeyDefinitionError

ScalarAttributeType: TypeAlias = Literal["S", "N", "B"]
KeyType: TypeAlias = Literal["HASH", "RANGE"]

Number: TypeAlias = int | float | Decimal
NativeValue: TypeAlias = (
    Number | str | list[Number] | list[str] | tuple[Any, ...] | set[Any] | frozenset[Any]
)
AttributeValue: TypeAlias = dict[str, str | list[str]]
Record: TypeAlias = dict[str, Any]


class KeyDefinition(BaseModel):
    """One attribute participating in a table's primary key.

    Attributes:
        name: The attribute name.
        type: The attribute type, one of S, N or B.

    Example:
        KeyDefinition(name="id", type="S")

    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(min_length=1)
    type: ScalarAttributeType


KeyDefinitionLike: TypeAlias = KeyDefinition | Mapping[str, Any]


def as_key_definition(key: KeyDefinitionLike) -> KeyDefinition:
    """Validate a key definition given as a model or a plain mapping.

    Raises:
        InvalidKeyDefinitionError: If the name is missing or the type unsupported.

    """
    if isinstance(key, KeyDefinition):
        return key
    try:
        return KeyDefinition.model_validate(key)
    except PydanticValidationError as e:
        raise InvalidKeyDefinitionError(f"Invalid key definition {key!r}: {e}") from e


__all__ = [
    "AttributeValue",
    "KeyDefinition",
    "KeyDefinitionLike",
    "KeyType",
    "NativeValue",
    "Number",
    "Record",
    "ScalarAttributeType",
    "as_key_definition",
]
