"""Conversion between native Python values and DynamoDB typed attributes.

Only the four tags below are produced or understood:

- S: string
- N: number, carried as decimal text
- SS: string set
- NS: number set, carried as a list of decimal text

The item-level helpers convert every field of a record and mutate the record
in place, returning the same dict.
"""

import logging
import math
from collections.abc import Callable, Hashable, Iterable, Mapping
from decimal import Decimal, DecimalException
from enum import Enum
from typing import Any, Final

from boto3.dynamodb.types import DYNAMODB_CONTEXT

from ddbformat.exceptions import (
    DuplicateSetMemberError,
    EmptySetError,
    InvalidNumberError,
    MissingArgumentError,
    TypeMismatchError,
    UnknownAttributeTypeError,
    UnsupportedTypeError,
)
from ddbformat.keys import AttributeValue, NativeValue, Number, Record

logger = logging.getLogger(__name__)

STRING: Final = "S"
NUMBER: Final = "N"
STRING_SET: Final = "SS"
NUMBER_SET: Final = "NS"

# Decoding checks tags in this order; the first one present wins.
TAG_PRIORITY: Final = (STRING, STRING_SET, NUMBER, NUMBER_SET)

# float repr switches to exponent notation from here on.
_EXACT_FLOAT_LIMIT: Final = 1e16


class _Missing(Enum):
    MISSING = "MISSING"

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Final = _Missing.MISSING
"""Returned by lenient decoding for attributes it cannot decode."""


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)


def _to_dynamodb_decimal(text: str, value: Any) -> Decimal:
    try:
        return DYNAMODB_CONTEXT.create_decimal(text)
    except DecimalException as e:
        raise UnsupportedTypeError(
            value, reason="number exceeds DynamoDB precision or range"
        ) from e


def format_number(value: Number) -> str:
    """Render a number as the decimal text DynamoDB expects.

    Integral values render without a fractional part, so 5 and 5.0 both
    become "5". Large or tiny floats keep their exponent notation.

    Raises:
        UnsupportedTypeError: If the number is NaN or infinite, has more than
            38 significant digits, or falls outside DynamoDB's exponent range.

    """
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise UnsupportedTypeError(value, reason="number must be finite")
        text = str(value)
    elif isinstance(value, float):
        if not math.isfinite(value):
            raise UnsupportedTypeError(value, reason="number must be finite")
        if value.is_integer() and abs(value) < _EXACT_FLOAT_LIMIT:
            text = str(int(value))
        else:
            text = repr(value)
    else:
        text = str(value)

    _to_dynamodb_decimal(text, value)
    return text


def _check_unique(members: list[str], key: Callable[[str], Hashable]) -> None:
    seen = set()
    for member in members:
        member_key = key(member)
        if member_key in seen:
            raise DuplicateSetMemberError(member)
        seen.add(member_key)


def _serialize_set(values: Iterable[Any]) -> AttributeValue:
    elements = list(values)
    if not elements:
        raise EmptySetError()
    if all(_is_number(element) for element in elements):
        numbers = [format_number(element) for element in elements]
        _check_unique(numbers, key=Decimal)
        return {NUMBER_SET: numbers}
    if all(isinstance(element, str) for element in elements):
        _check_unique(elements, key=str)
        return {STRING_SET: elements}
    raise TypeMismatchError(values)


def serialize_value(value: NativeValue | None) -> AttributeValue:
    """Convert a native value to its typed attribute.

    Args:
        value: A number, a string, or a non-empty homogeneous list, tuple or
            set of distinct numbers or strings.

    Returns:
        A single-entry dict keyed by the attribute tag.

    Raises:
        MissingArgumentError: If value is None or another empty non-number,
            such as False or b"".
        TypeMismatchError: If a sequence mixes element types.
        EmptySetError: If a sequence is empty.
        DuplicateSetMemberError: If a sequence repeats a member.
        UnsupportedTypeError: For mappings, out-of-range numbers and any
            other type.

    Example:
        serialize_value(5)
        Returns {"N": "5"}.

        serialize_value(["a", "b"])
        Returns {"SS": ["a", "b"]}.

    """
    if value is None:
        raise MissingArgumentError()
    if isinstance(value, (list, tuple, set, frozenset)):
        return _serialize_set(value)
    if _is_number(value):
        return {NUMBER: format_number(value)}
    if isinstance(value, str):
        return {STRING: value}
    if isinstance(value, Mapping):
        raise UnsupportedTypeError(value)
    if not value:
        raise MissingArgumentError()
    raise UnsupportedTypeError(value)


def deserialize_value(attribute: Any, *, strict: bool = True) -> Any:
    """Convert a typed attribute back to a native value.

    Lists of attributes are decoded element by element, keeping positions.
    Numbers come back as floats.

    Args:
        attribute: A typed attribute, or a list of them.
        strict: When False, an attribute with no recognized tag or with
            invalid number text decodes to MISSING instead of raising. Inside
            a list, MISSING stays at the element's position.

    Raises:
        UnknownAttributeTypeError: If strict and no recognized tag is present.
        InvalidNumberError: If strict and an N or NS value is not number text.

    """
    if isinstance(attribute, list):
        return [deserialize_value(element, strict=strict) for element in attribute]

    if isinstance(attribute, dict):
        for tag in TAG_PRIORITY:
            if tag not in attribute:
                continue
            raw = attribute[tag]
            if tag not in (NUMBER, NUMBER_SET):
                return raw
            try:
                if tag == NUMBER:
                    return float(raw)
                return [float(element) for element in raw]
            except (TypeError, ValueError) as e:
                if strict:
                    raise InvalidNumberError(attribute) from e
                return MISSING

    if strict:
        raise UnknownAttributeTypeError(attribute)
    return MISSING


def serialize_item(item: Record) -> Record:
    """Replace every value of a record with its typed attribute.

    The record is mutated in place and returned.

    Raises:
        MissingArgumentError: If any field holds None.

    """
    for name, value in item.items():
        if value is None:
            raise MissingArgumentError(field=name)
        item[name] = serialize_value(value)
    return item


def deserialize_item(item: Record, *, strict: bool = True) -> Record:
    """Replace every typed attribute of a record with its native value.

    The record is mutated in place and returned. With strict=False, fields
    whose attribute carries no recognized tag or holds invalid number text
    are removed.
    """
    dropped = []
    for name, attribute in item.items():
        value = deserialize_value(attribute, strict=strict)
        if value is MISSING:
            dropped.append(name)
        else:
            item[name] = value

    for name in dropped:
        logger.debug("Dropping field %r that could not be decoded", name)
        del item[name]
    return item


def deserialize_items(items: list[Record], *, strict: bool = True) -> list[Record]:
    """Decode each record of a query or scan response in place."""
    for item in items:
        deserialize_item(item, strict=strict)
    return items


__all__ = [
    "MISSING",
    "NUMBER",
    "NUMBER_SET",
    "STRING",
    "STRING_SET",
    "deserialize_item",
    "deserialize_items",
    "deserialize_value",
    "format_number",
    "serialize_item",
    "serialize_value",
]
