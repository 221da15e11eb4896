#!filepath: tabledb/core/value.py
from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union

from tabledb.utils.errors import MalformedInputError

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

_INT_RE = re.compile(r"[+-]?\d+", re.ASCII)
_FLOAT_RE = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf|infinity|nan)",
    re.IGNORECASE | re.ASCII,
)


class FieldType(str, Enum):
    """
    Column / value type. The enum value is the wire name.
    """

    INT = "INT"
    FLOAT = "FLOAT"
    STRING = "STRING"

    @classmethod
    def parse(cls, name: str) -> "FieldType":
        try:
            return cls(name)
        except ValueError:
            raise MalformedInputError(f"unrecognized column type: {name!r}") from None

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class IntValue:
    val: int
    kind: ClassVar[FieldType] = FieldType.INT

    def render(self) -> str:
        return str(self.val)


@dataclass(frozen=True, slots=True)
class FloatValue:
    val: float
    kind: ClassVar[FieldType] = FieldType.FLOAT

    def render(self) -> str:
        # shortest text that parses back to the same float
        return repr(self.val)


@dataclass(frozen=True, slots=True)
class StringValue:
    val: str
    kind: ClassVar[FieldType] = FieldType.STRING

    def render(self) -> str:
        return self.val


# Closed sum type. Dataclass equality compares the class first, so
# IntValue(5) == FloatValue(5.0) is simply False.
Value = Union[IntValue, FloatValue, StringValue]

VALUE_TYPES = {
    FieldType.INT: IntValue,
    FieldType.FLOAT: FloatValue,
    FieldType.STRING: StringValue,
}


def parse_value(kind: FieldType, text: str) -> Value:
    """
    Build a Value from one raw text field according to the column type.

    No coercion: the literal must match the declared type exactly.
    """
    if kind is FieldType.STRING:
        return StringValue(text)

    if kind is FieldType.INT:
        if not _INT_RE.fullmatch(text):
            raise MalformedInputError(f"invalid INT literal: {text!r}")
        val = int(text)
        if not INT64_MIN <= val <= INT64_MAX:
            raise MalformedInputError(f"INT literal out of 64-bit range: {text!r}")
        return IntValue(val)

    if kind is FieldType.FLOAT:
        if not _FLOAT_RE.fullmatch(text):
            raise MalformedInputError(f"invalid FLOAT literal: {text!r}")
        val = float(text)
        if math.isinf(val) and "inf" not in text.lower():
            raise MalformedInputError(f"FLOAT literal out of range: {text!r}")
        return FloatValue(val)

    raise MalformedInputError(f"unrecognized field type: {kind!r}")
