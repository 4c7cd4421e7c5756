"""
Text helpers built on the sequence functions; strings go in and strings come out.

Contains:
    is_whitespace, is_line_break    (c: str) -> bool
    is_letter_or_digit              (c: str) -> bool
    trim_whitespace_left, trim_whitespace_right, trim_whitespace (text: str) -> str
    split_lines                     (allow_empty: bool, text: str) -> list[str]
    split_words                     (allow_empty: bool, text: str) -> list[str]
    split_words_by                  (delimiter: str, allow_empty: bool, text: str) -> list[str]
    split_words_by_many             (delimiters: str, allow_empty: bool, text: str) -> list[str]
    to_upper_case, to_lower_case    (text: str) -> str
    to_string_fill_left, to_string_fill_right (fill: str, min_size: int, x) -> str
"""
from __future__ import annotations

from fplus.basetypes import *
from fplus.composition import logical_not
from fplus.container_tools import fill_left, fill_right, split_by, trim_by, trim_left_by, trim_right_by
from fplus.show import show

import re
from toolz import curry

WHITESPACE = " \t\n\r\v\f"
LINE_BREAKS = "\n\r"
LINE_BREAK_PATTERN = re.compile(r"\r\n|\n|\r")


def is_whitespace(c: str) -> bool:
    return len(c) == 1 and c in WHITESPACE


def is_line_break(c: str) -> bool:
    return len(c) == 1 and c in LINE_BREAKS


def is_letter_or_digit(c: str) -> bool:
    return len(c) == 1 and c.isalnum()


def trim_whitespace_left(text: str) -> str:
    """trim_whitespace_left("  \\n \\t   foo  ") == "foo  " """
    return trim_left_by(is_whitespace, text)


def trim_whitespace_right(text: str) -> str:
    return trim_right_by(is_whitespace, text)


def trim_whitespace(text: str) -> str:
    return trim_by(is_whitespace, text)


@curry
def split_lines(allow_empty: bool, text: str) -> list[str]:
    """
    Splits at line breaks. "\\r\\n" counts as one break, a lone "\\n" or "\\r" as one each,
    so "a\\n\\rb" holds an empty line between "a" and "b".
    :param allow_empty: Whether empty lines are kept.
    :param text: The text to split.
    :returns: The lines without their line breaks.
    """
    lines = LINE_BREAK_PATTERN.split(text)
    return [line for line in lines if allow_empty or line]


@curry
def split_words(allow_empty: bool, text: str) -> list[str]:
    """
    Splits into runs of letters and digits; everything else separates.
    split_words(False, "Hi, I am a ***strange*** string.") == ["Hi", "I", "am", "a", "strange", "string"]
    """
    return split_by(logical_not(is_letter_or_digit), allow_empty, text)


@curry
def split_words_by(delimiter: str, allow_empty: bool, text: str) -> list[str]:
    return split_by(lambda c: c == delimiter, allow_empty, text)


@curry
def split_words_by_many(delimiters: str, allow_empty: bool, text: str) -> list[str]:
    """split_words_by_many(" ,", False, "Hi, you") == ["Hi", "you"]"""
    return split_by(lambda c: c in delimiters, allow_empty, text)


def to_upper_case(text: str) -> str:
    return text.upper()


def to_lower_case(text: str) -> str:
    return text.lower()


@curry
def to_string_fill_left(fill: str, min_size: int, x: Any) -> str:
    """to_string_fill_left("0", 5, 42) == "00042" """
    return fill_left(fill, min_size, show(x))


@curry
def to_string_fill_right(fill: str, min_size: int, x: Any) -> str:
    return fill_right(fill, min_size, show(x))
