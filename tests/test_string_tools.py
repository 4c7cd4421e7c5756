"""
Test the string_tools module
"""
import pytest
from hypothesis import given, strategies as st
from fplus.string_tools import (
    is_whitespace, is_line_break, is_letter_or_digit, trim_whitespace, trim_whitespace_left,
    trim_whitespace_right, split_lines, split_words, split_words_by, split_words_by_many,
    to_upper_case, to_lower_case, to_string_fill_left, to_string_fill_right,
)
from fplus.maybe import just

def test_char_classes() -> None:
    assert is_whitespace(" ") and is_whitespace("\t") and is_whitespace("\n")
    assert not is_whitespace("a")
    assert is_line_break("\r") and not is_line_break(" ")
    assert is_letter_or_digit("a") and is_letter_or_digit("7")
    assert not is_letter_or_digit("*")

def test_char_classes_take_single_chars() -> None:
    assert not is_whitespace("")
    assert not is_whitespace(" \t")
    assert not is_line_break("")
    assert not is_line_break("\n\r")
    assert not is_letter_or_digit("ab")

def test_trim_whitespace(untrimmed) -> None:
    assert trim_whitespace_left(untrimmed) == "foo  "
    assert trim_whitespace_right(untrimmed) == "  \n \t   foo"
    assert trim_whitespace(untrimmed) == "foo"
    assert trim_whitespace("   ") == ""

def test_split_lines(text) -> None:
    assert split_lines(True, text) == ["Hi,", "I am a", "***strange***", "", "string."]
    assert split_lines(False, text) == ["Hi,", "I am a", "***strange***", "string."]
    assert split_lines(True, "") == [""]
    assert split_lines(True, "a\n") == ["a", ""]

def test_split_words(text) -> None:
    assert split_words(False, text) == ["Hi", "I", "am", "a", "strange", "string"]
    assert split_words_by(" ", False, text) == ["Hi,\nI", "am", "a\r\n***strange***\n\rstring."]
    assert split_words_by_many(" ,\r\n", False, text) == ["Hi", "I", "am", "a", "***strange***", "string."]
    assert split_words(True, "a  b") == ["a", "", "b"]

def test_case() -> None:
    assert to_upper_case("Hi there") == "HI THERE"
    assert to_lower_case("Hi there") == "hi there"

def test_fill() -> None:
    assert to_string_fill_left("0", 5, 42) == "00042"
    assert to_string_fill_right(" ", 5, 42) == "42   "
    assert to_string_fill_left("0", 2, 12345) == "12345"
    assert to_string_fill_left(" ", 8)(just(1)) == "  Just 1"

@given(st.text(alphabet=" \tab\n", max_size=12))
def test_trim_is_idempotent(s) -> None:
    trimmed = trim_whitespace(s)
    assert trim_whitespace(trimmed) == trimmed
    assert trimmed == s.strip(" \t\n")

@given(st.lists(st.text(alphabet="abc", min_size=1), max_size=5))
def test_split_lines_inverts_newline_join(lines) -> None:
    assert split_lines(True, "\n".join(lines)) == (lines or [""])
