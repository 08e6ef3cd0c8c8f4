import pytest

from tuitioncentre.connector.errors import Error
from tuitioncentre.connector.row import Row
from tuitioncentre.connector.value import Value, ValueType


def test_empty_row_is_null():
    row = Row()
    assert row.is_null()
    assert not row
    assert len(row) == 0


def test_row_from_values():
    row = Row(1, "a", Value(2.5))
    assert row.col_count() == 3
    assert row.get(0).as_sint() == 1
    assert row[1].as_string() == "a"
    assert row[2].as_double() == 2.5
    assert bool(row)


def test_get_out_of_range():
    row = Row(1)
    with pytest.raises(IndexError):
        row.get(1)
    with pytest.raises(IndexError):
        Row()[0]


def test_set_extends_with_nulls():
    row = Row()
    stored = row.set(2, "x")
    assert stored.as_string() == "x"
    assert len(row) == 3
    assert row[0].is_null()
    assert row[1].is_null()


def test_set_replaces():
    row = Row(1, 2)
    row.set(0, 9)
    assert row[0].as_sint() == 9
    assert len(row) == 2


def test_field_creates_null():
    row = Row(7)
    assert row.field(0).as_sint() == 7
    assert row.field(3).is_null()
    assert len(row) == 4


def test_get_bytes():
    row = Row("abc", None, b"\x00\x01", 5)
    assert row.get_bytes(0) == b"abc"
    assert row.get_bytes(1) is None
    assert row.get_bytes(2) == b"\x00\x01"
    with pytest.raises(Error):
        row.get_bytes(3)


def test_values_keep_type():
    row = Row(True)
    assert row[0].type is ValueType.BOOL


def test_clear():
    row = Row(1, 2)
    row.clear()
    assert row.is_null()
    assert len(row) == 0