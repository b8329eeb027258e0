"""ddbformat exceptions.

This module defines the exception hierarchy for the ddbformat library.
All custom exceptions inherit from DdbFormatError, allowing users to catch
all library-specific errors with a single except clause.

Exception categories:
- SerializationError: A native value cannot be converted to a typed attribute
- DeserializationError: A typed attribute cannot be converted back
- ValidationError: Key definitions, key schemas or updates are malformed

The encoding errors also subclass the matching builtin (TypeError or
ValueError), so code that already guards conversions with those keeps working.
DynamoDB API errors are not wrapped; they come directly from boto3/botocore
when the produced parameters are sent.
"""

from typing import Any


class DdbFormatError(Exception):
    """Base exception for all ddbformat errors.

    Example:
        try:
            serialize_item(record)
        except DdbFormatError as e:
            pass

    """


class SerializationError(DdbFormatError):
    """Base class for errors raised while encoding a native value."""


class TypeMismatchError(SerializationError, TypeError):
    """Raised when a sequence mixes numbers and strings or holds other types.

    Example:
        serialize_value([1, "two"])
        Raises TypeMismatchError.

    Attributes:
        value: The offending sequence.

    """

    def __init__(self, value: Any = None) -> None:
        self.value = value
        super().__init__("Expected homogeneous array of numbers or strings")


class UnsupportedTypeError(SerializationError, TypeError):
    """Raised when a value has no typed-attribute representation.

    Nested mappings, bytes, booleans and non-finite numbers fall here.

    Attributes:
        value: The offending value.

    """

    def __init__(self, value: Any = None, *, reason: str | None = None) -> None:
        self.value = value
        message = f"Object of type {type(value).__name__} is not serializable to a DynamoDB type"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class MissingArgumentError(SerializationError, TypeError):
    """Raised when None or another empty, non-numeric value is serialized.

    The empty string is a valid string and empty sequences raise
    EmptySetError, so this covers None, False and empty bytes.

    Attributes:
        field: The record field holding the missing value, if known.

    """

    def __init__(self, *, field: str | None = None) -> None:
        self.field = field
        message = "Cannot serialize a missing value"
        if field is not None:
            message = f"Cannot serialize a missing value for field '{field}'"
        super().__init__(message)


class EmptySetError(SerializationError, ValueError):
    """Raised when an empty sequence is serialized.

    An empty sequence is both "all numbers" and "all strings", and DynamoDB
    rejects empty sets anyway, so it is refused instead of guessed.

    Example:
        serialize_value([])
        Raises EmptySetError.

    """

    def __init__(self) -> None:
        super().__init__("Cannot serialize an empty set")


class DuplicateSetMemberError(SerializationError, ValueError):
    """Raised when a sequence holds the same member twice.

    Numbers are compared by value, so 1 and 1.0 count as duplicates.

    Attributes:
        member: The first repeated member, as wire text.

    """

    def __init__(self, member: str) -> None:
        self.member = member
        super().__init__(f"Duplicate set member: {member!r}")


class DeserializationError(DdbFormatError):
    """Base class for errors raised while decoding a typed attribute."""


class InvalidNumberError(DeserializationError):
    """Raised when an N or NS attribute does not hold valid number text.

    Only raised by strict decoding; pass strict=False to drop such fields.

    Attributes:
        attribute: The attribute that could not be decoded.

    """

    def __init__(self, attribute: Any) -> None:
        self.attribute = attribute
        super().__init__(f"Invalid number in attribute: {attribute!r}")


class UnknownAttributeTypeError(DeserializationError):
    """Raised when a typed attribute carries none of the supported tags.

    Only raised by strict decoding; pass strict=False to drop such fields.

    Attributes:
        attribute: The attribute that could not be decoded.

    """

    def __init__(self, attribute: Any) -> None:
        self.attribute = attribute
        tags = sorted(attribute) if isinstance(attribute, dict) else type(attribute).__name__
        super().__init__(f"Unknown attribute type: {tags}")


class ValidationError(DdbFormatError):
    """Base class for malformed key definitions, key schemas and updates."""


class InvalidKeyDefinitionError(ValidationError):
    """Raised when a key definition has no name or an unsupported type.

    Example:
        build_key_schema({"name": "id", "type": "X"})
        Raises InvalidKeyDefinitionError.

    """

    def __init__(self, message: str = "Invalid key definition") -> None:
        super().__init__(message)


class InvalidKeySchemaError(ValidationError):
    """Raised when a DynamoDB key schema is invalid.

    This occurs when the key schema doesn't contain a partition key (HASH key).

    """

    def __init__(self, message: str = "Invalid key schema: no partition key found") -> None:
        super().__init__(message)


class EmptyUpdateError(ValidationError):
    """Raised when an update operation has no fields to update.

    Example:
        build_update_expression({})

    """

    def __init__(self) -> None:
        super().__init__("No updates provided")


__all__ = [
    "DdbFormatError",
    "DeserializationError",
    "DuplicateSetMemberError",
    "EmptySetError",
    "EmptyUpdateError",
    "InvalidKeyDefinitionError",
    "InvalidKeySchemaError",
    "InvalidNumberError",
    "MissingArgumentError",
    "SerializationError",
    "TypeMismatchError",
    "UnknownAttributeTypeError",
    "UnsupportedTypeError",
    "ValidationError",
]
