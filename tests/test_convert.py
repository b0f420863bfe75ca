"""Text -> value conversion dispatch"""
import pytest
from py_frame.convert import coerce, render, supported_types
from py_frame.errors import PyFrameConversionError, PyFrameTypeError


@pytest.mark.parametrize("text,expected", [
    ("1", 1),
    ("-12", -12),
    ("+5", 5),
    ("  7", 7),
    ("3.9", 3),
    ("12kg", 12),
])
def test_int(text, expected):
    assert coerce(text, int) == expected


@pytest.mark.parametrize("text,expected", [
    ("1.5", 1.5),
    ("-0.25", -0.25),
    (".5", 0.5),
    ("1e3", 1000.0),
    ("2", 2.0),
    ("4.5mm", 4.5),
])
def test_float(text, expected):
    assert coerce(text, float) == expected


@pytest.mark.parametrize("text,expected", [
    ("1", True),
    ("0", False),
    (" 1", True),
])
def test_bool(text, expected):
    assert coerce(text, bool) is expected


@pytest.mark.parametrize("text", ["true", "2", "", "yes"])
def test_bool_rejects_anything_but_zero_and_one(text):
    with pytest.raises(PyFrameConversionError):
        coerce(text, bool)


def test_str_is_passthrough():
    assert coerce("  a b  ", str) == "  a b  "
    assert coerce("", str) == ""


@pytest.mark.parametrize("target", [int, float])
def test_no_numeric_prefix(target):
    with pytest.raises(PyFrameConversionError):
        coerce("abc", target)
    with pytest.raises(PyFrameConversionError):
        coerce("", target)


def test_conversion_error_is_value_error():
    with pytest.raises(ValueError):
        coerce("x", int)


def test_unsupported_target():
    with pytest.raises(PyFrameTypeError, match="complex"):
        coerce("1", complex)


def test_unsupported_target_lists_supported_types():
    with pytest.raises(PyFrameTypeError) as info:
        coerce("1", list)
    for target in supported_types():
        assert target.__name__ in str(info.value)


def test_supported_types():
    assert set(supported_types()) == {str, int, float, bool}


@pytest.mark.parametrize("value,expected", [
    (True, "1"),
    (False, "0"),
    (2.0, "2"),
    (2.5, "2.5"),
    (1234567.0, "1.23457e+06"),
    (7, "7"),
])
def test_render(value, expected):
    assert render(value) == expected


def test_render_rejects_text():
    with pytest.raises(PyFrameTypeError):
        render("1")
