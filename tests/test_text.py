"""Splitting, joining and trimming of raw text"""
import pytest
from py_frame.text import split, concat, trim


class TestSplit:
    """Test split()"""

    @pytest.mark.parametrize("text,separator,expected", [
        ("a,b,c", ",", ["a", "b", "c"]),
        ("a,b,", ",", ["a", "b", ""]),
        (",a", ",", ["", "a"]),
        ("a", ",", ["a"]),
        ("a::b::c", "::", ["a", "b", "c"]),
        ("a\r\nb\r\n", "\r\n", ["a", "b", ""]),
        (",,", ",", ["", "", ""]),
    ])
    def test_split(self, text, separator, expected):
        assert split(text, separator) == expected

    def test_empty_text_gives_empty_list(self):
        assert split("", ",") == []
        assert split("", ",", True) == []

    def test_empty_separator_returns_whole_text(self):
        assert split("  a,b  ", "") == ["  a,b  "]
        # No trimming either
        assert split("  a,b  ", "", True) == ["  a,b  "]

    def test_trim_strips_each_field(self):
        assert split(" a ,\tb\t, c\r", ",", True) == ["a", "b", "c"]

    def test_no_trim_keeps_whitespace(self):
        assert split(" a , b ", ",") == [" a ", " b "]

    def test_trailing_segment_kept_after_trim(self):
        assert split("a, ", ",", trim=True) == ["a", ""]


class TestConcat:
    """Test concat()"""

    def test_concat(self):
        assert concat(["a", "b", "c"], ",") == "a,b,c"

    def test_concat_multichar_separator(self):
        assert concat(["a", "b"], " | ") == "a | b"

    def test_concat_single(self):
        assert concat(["a"], ",") == "a"

    def test_concat_empty(self):
        assert concat([], ",") == ""

    def test_concat_inverts_split(self):
        text = "x;;y;z"
        assert concat(split(text, ";"), ";") == text


class TestTrim:
    """Test trim()"""

    @pytest.mark.parametrize("text,expected", [
        ("  abc  ", "abc"),
        ("\t\n\r\f\vabc\v\f\r\n\t", "abc"),
        ("a b", "a b"),
        ("   ", ""),
        ("", ""),
    ])
    def test_trim(self, text, expected):
        assert trim(text) == expected
