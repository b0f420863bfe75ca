"""PyScalar tagged values"""
import copy

import pytest
from py_frame import PyScalar, Kind
from py_frame.errors import PyFrameTypeError, PyFrameConversionError, PyFrameValueError


class TestCreation:
    """Test which Kind a literal produces"""

    @pytest.mark.parametrize("value,kind,stored", [
        (True, Kind.BOOLEAN, True),
        (False, Kind.BOOLEAN, False),
        (3, Kind.NUMBER, 3.0),
        (2.5, Kind.NUMBER, 2.5),
        ("x", Kind.TEXT, "x"),
        ("", Kind.TEXT, ""),
    ])
    def test_kind(self, value, kind, stored):
        s = PyScalar(value)
        assert s.kind is kind
        assert s.value == stored
        assert type(s.value) is type(stored)

    def test_bool_is_not_a_number(self):
        assert PyScalar(True).is_boolean
        assert not PyScalar(True).is_number

    def test_unsupported_type(self):
        with pytest.raises(PyFrameTypeError):
            PyScalar([1, 2])
        with pytest.raises(PyFrameTypeError):
            PyScalar(None)

    def test_int_too_large_for_float(self):
        with pytest.raises(PyFrameValueError, match="too large"):
            PyScalar(10 ** 400)

    def test_mismatched_kind(self):
        with pytest.raises(PyFrameTypeError):
            PyScalar("x", Kind.NUMBER)

    def test_explicit_matching_kind(self):
        assert PyScalar(1.0, Kind.NUMBER) == PyScalar(1.0)


class TestCopy:
    """Copies are equal and independent"""

    def test_copy_equal(self):
        s = PyScalar("text")
        c = s.copy()
        assert c == s
        assert c is not s

    def test_copy_module(self):
        s = PyScalar("text")
        assert copy.deepcopy(s) == s

    def test_immutable(self):
        s = PyScalar("text")
        with pytest.raises(AttributeError):
            s.value = "other"


class TestAsType:
    """Test PyScalar.as_type()"""

    def test_text_as_str(self):
        assert PyScalar(";").as_type(str) == ";"

    def test_non_text_as_str_is_empty(self):
        assert PyScalar(True).as_type(str) == ""
        assert PyScalar(1.5).as_type(str) == ""

    def test_bool_as_bool(self):
        assert PyScalar(True).as_type(bool) is True
        assert PyScalar(False).as_type(bool) is False

    def test_bool_as_number(self):
        assert PyScalar(True).as_type(int) == 1
        assert PyScalar(False).as_type(float) == 0.0

    def test_number_as_int_truncates_through_text(self):
        assert PyScalar(2.5).as_type(int) == 2
        assert PyScalar(-7).as_type(int) == -7

    def test_number_as_float(self):
        assert PyScalar(0.25).as_type(float) == 0.25

    def test_number_rendering_keeps_six_digits(self):
        assert PyScalar(3.14159265).as_type(float) == pytest.approx(3.14159)

    def test_number_as_bool(self):
        assert PyScalar(1).as_type(bool) is True
        assert PyScalar(0).as_type(bool) is False
        with pytest.raises(PyFrameConversionError):
            PyScalar(2).as_type(bool)

    def test_text_parsed(self):
        assert PyScalar("42").as_type(int) == 42
        assert PyScalar("0").as_type(bool) is False
