"""A polymorphic value of one of the types the connector supports."""

from __future__ import annotations

import struct
from enum import Enum, auto
from typing import Any

from tuitioncentre.connector.errors import Error

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_UINT64_MAX = 2**64 - 1


class ValueType(Enum):
    """Kinds of value a Value can hold."""

    VNULL = auto()
    UINT64 = auto()
    INT64 = auto()
    FLOAT = auto()
    DOUBLE = auto()
    BOOL = auto()
    STRING = auto()
    USTRING = auto()
    RAW = auto()
    EXPR = auto()
    JSON = auto()


def _to_float32(number: float) -> float:
    return struct.unpack("<f", struct.pack("<f", number))[0]


def _infer_type(data: Any) -> ValueType:
    if data is None:
        return ValueType.VNULL
    if isinstance(data, bool):
        return ValueType.BOOL
    if isinstance(data, int):
        return ValueType.INT64 if data <= _INT64_MAX else ValueType.UINT64
    if isinstance(data, float):
        return ValueType.DOUBLE
    if isinstance(data, str):
        return ValueType.STRING
    if isinstance(data, (bytes, bytearray, memoryview)):
        return ValueType.RAW
    raise Error(f"Unsupported value type: {type(data).__name__}")


class Value:
    """A value that is null, a number, a boolean, a string or raw bytes."""

    __slots__ = ("_type", "_number", "_raw", "_text")

    def __init__(self, data: Any = None, type: ValueType | None = None) -> None:
        value_type = _infer_type(data) if type is None else ValueType(type)
        self._type = value_type
        self._number: Any = None
        self._raw = b""
        self._text = ""

        if value_type is ValueType.VNULL:
            return
        if value_type is ValueType.BOOL:
            self._number = bool(data)
        elif value_type is ValueType.INT64:
            number = int(data)
            if not _INT64_MIN <= number <= _INT64_MAX:
                raise Error("Value out of range for signed 64-bit integer")
            self._number = number
        elif value_type is ValueType.UINT64:
            number = int(data)
            if not 0 <= number <= _UINT64_MAX:
                raise Error("Value out of range for unsigned 64-bit integer")
            self._number = number
        elif value_type is ValueType.FLOAT:
            self._number = _to_float32(float(data))
        elif value_type is ValueType.DOUBLE:
            self._number = float(data)
        elif value_type is ValueType.USTRING:
            self._text = str(data)
        elif value_type is ValueType.RAW:
            self._raw = bytes(data)
        else:
            self._raw = data.encode("utf-8") if isinstance(data, str) else bytes(data)

    @property
    def type(self) -> ValueType:
        return self._type

    def __repr__(self) -> str:
        if self._type is ValueType.VNULL:
            shown: Any = None
        elif self._number is not None:
            shown = self._number
        elif self._type is ValueType.USTRING:
            shown = self._text
        else:
            shown = self._raw
        return f"Value({shown!r}, {self._type.name})"

    def is_null(self) -> bool:
        return self._type is ValueType.VNULL

    def as_bool(self) -> bool:
        if self._type is ValueType.BOOL:
            return self._number
        if self._type in (ValueType.UINT64, ValueType.INT64):
            return self._number != 0
        raise Error("Can not convert to Boolean value")

    def as_uint(self) -> int:
        if self._type not in (ValueType.UINT64, ValueType.INT64, ValueType.BOOL):
            raise Error("Can not convert to integer value")
        if self._type is ValueType.BOOL:
            return 1 if self._number else 0
        if self._type is ValueType.INT64 and self._number < 0:
            raise Error("Converting negative integer to unsigned value")
        return self._number

    def as_sint(self) -> int:
        if self._type is ValueType.INT64:
            return self._number
        number = self.as_uint()
        if number > _INT64_MAX:
            raise Error("Value cannot be converted to signed integer number")
        return number

    def as_float(self) -> float:
        if self._type in (ValueType.INT64, ValueType.UINT64):
            return _to_float32(float(self._number))
        if self._type is ValueType.FLOAT:
            return self._number
        raise Error("Value cannot be converted to float number")

    def as_double(self) -> float:
        if self._type in (ValueType.INT64, ValueType.UINT64):
            return float(self._number)
        if self._type in (ValueType.FLOAT, ValueType.DOUBLE):
            return self._number
        raise Error("Value can not be converted to double number")

    def as_bytes(self) -> bytes:
        """Return the raw representation: UTF-8 for strings, UTF-16 for wide ones."""
        if self._type is ValueType.USTRING and self._text:
            return self._text.encode("utf-16-le")
        if self._type in (ValueType.RAW, ValueType.STRING):
            return self._raw
        if not self._raw:
            raise Error("Value cannot be converted to raw bytes")
        return self._raw

    def as_string(self) -> str:
        if self._type is ValueType.USTRING:
            return self._text
        if self._type in (ValueType.STRING, ValueType.EXPR, ValueType.JSON, ValueType.RAW):
            try:
                return self._raw.decode("utf-8")
            except UnicodeDecodeError as exc:
                raise Error("Value cannot be converted to string") from exc
        raise Error("Value cannot be converted to string")