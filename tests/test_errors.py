import pytest

from tuitioncentre.connector.errors import Error, Warning, WarningLevel, throw_error


def test_throw_error_raises_with_message():
    with pytest.raises(Error, match="boom"):
        throw_error("boom")


def test_error_is_runtime_error():
    with pytest.raises(RuntimeError):
        throw_error("x")


def test_error_str_is_message():
    assert str(Error("message text")) == "message text"


@pytest.mark.parametrize(
    "level,name",
    [(WarningLevel.ERROR, "Error"), (WarningLevel.WARNING, "Warning"), (WarningLevel.INFO, "Info")],
)
def test_warning_format_with_code(level, name):
    assert str(Warning(level, 1045, "denied")) == f"{name} 1045: denied"


def test_warning_format_without_code_omits_it():
    assert str(Warning(WarningLevel.WARNING, 0, "careful")) == "Warning: careful"


def test_unknown_level():
    assert str(Warning(7, 5, "odd")) == "<Unknown> 5: odd"


def test_warning_fields():
    w = Warning(WarningLevel.INFO, 3, "note")
    assert (w.level, w.code, w.message) == (WarningLevel.INFO, 3, "note")