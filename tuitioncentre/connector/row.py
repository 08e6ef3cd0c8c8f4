"""A single row of field values."""

from __future__ import annotations

from typing import Any

from tuitioncentre.connector.value import Value


def _as_value(data: Any) -> Value:
    return data if isinstance(data, Value) else Value(data)


class Row:
    """A row of fields addressed by 0-based position; a row with no fields is null."""

    def __init__(self, *args: Any) -> None:
        self._fields: list[Value] | None = None
        for pos, data in enumerate(args):
            self.set(pos, data)

    def col_count(self) -> int:
        """Return the number of fields."""
        return len(self._fields) if self._fields is not None else 0

    def get(self, pos: int) -> Value:
        """Return the field at pos; IndexError when it does not exist."""
        if self._fields is None or not 0 <= pos < len(self._fields):
            raise IndexError(f"Row has no field at position {pos}")
        return self._fields[pos]

    def get_bytes(self, pos: int) -> bytes | None:
        """Return the raw bytes of a field, or None when the field is NULL."""
        value = self.get(pos)
        if value.is_null():
            return None
        return value.as_bytes()

    def set(self, pos: int, value: Any) -> Value:
        """Set the field at pos, creating it (and NULL fields before it) if needed."""
        if pos < 0:
            raise IndexError(f"Invalid field position {pos}")
        if self._fields is None:
            self._fields = []
        if pos >= len(self._fields):
            self._fields.extend(Value() for _ in range(pos + 1 - len(self._fields)))
        self._fields[pos] = _as_value(value)
        return self._fields[pos]

    def field(self, pos: int) -> Value:
        """Return the field at pos, creating it as NULL when missing."""
        try:
            return self.get(pos)
        except IndexError:
            return self.set(pos, Value())

    def __getitem__(self, pos: int) -> Value:
        return self.get(pos)

    def __len__(self) -> int:
        return self.col_count()

    def is_null(self) -> bool:
        return self._fields is None

    def __bool__(self) -> bool:
        return not self.is_null()

    def clear(self) -> None:
        """Drop all fields, leaving a null row."""
        self._fields = None