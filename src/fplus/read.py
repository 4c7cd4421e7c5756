"""
Parsing text tokens into values, with Maybe/Result as the failure channel.

A token only parses if it is consumed entirely: read_value(int, "3 thousand") is Nothing,
not Just(3). Surrounding whitespace counts as unconsumed input.

Contains:
    read_value                  (type_: type[T], text: str) -> Maybe[T]
    read_value_result           (type_: type[T], text: str) -> Result[T, str]
    read_value_with_default     (type_: type[T], default: T, text: str) -> T
"""
from __future__ import annotations

from fplus.basetypes import *
from fplus.maybe import Maybe, just, nothing
from fplus.result import Result, ok, error

import logging
import re
from functools import lru_cache
from pydantic import TypeAdapter, ValidationError
from toolz import curry

logger = logging.getLogger(__name__)

INT_PATTERN = re.compile(r'[+-]?\d+')
FLOAT_PATTERN = re.compile(r'[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|[+-]?(?:inf|infinity|nan)', re.IGNORECASE)

# types whose textual form is checked here before conversion; everything else goes through pydantic
_TOKEN_PATTERNS: dict[type, re.Pattern] = {
    int: INT_PATTERN,
    float: FLOAT_PATTERN,
}


@lru_cache(maxsize=128)
def _adapter(type_: Any) -> TypeAdapter:
    return TypeAdapter(type_)


def _parse(type_: type[T], text: str) -> Result[T, str]:
    if not isinstance(text, str):
        msg = f"read_value expects a string token, got {type(text).__name__}"
        raise TypeError(msg)
    name = getattr(type_, '__name__', str(type_))
    if text != text.strip() or not text:
        return error(f"cannot read {name} from {text!r}")
    pattern = _TOKEN_PATTERNS.get(type_)
    if pattern is not None:
        if not pattern.fullmatch(text):
            return error(f"cannot read {name} from {text!r}")
        return ok(type_(text))
    try:
        return ok(_adapter(type_).validate_python(text))
    except ValidationError as e:
        return error(f"cannot read {name} from {text!r}: {e.errors()[0]['msg']}")


@curry
def read_value_result(type_: type[T], text: str) -> Result[T, str]:
    """
    Parses 'text' as a 'type_'.
    :param type_: The target type, e.g. int, float, decimal.Decimal, datetime.date.
    :param text: The token to parse.
    :returns: Ok(value), or Error(message) naming the type and the token.
    """
    result = _parse(type_, text)
    if result._is_ok:
        return result
    logger.debug(result._error)
    return result


@curry
def read_value(type_: type[T], text: str) -> Maybe[T]:
    """
    read_value(int, "42") == just(42)
    read_value(int, "twenty") == nothing()
    read_value(int, "3 thousand") == nothing()
    """
    result = read_value_result(type_, text)
    return just(result._value) if result._is_ok else nothing()


@curry
def read_value_with_default(type_: type[T], default: T, text: str) -> T:
    return read_value(type_, text).get_with_default(default)
