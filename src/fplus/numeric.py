"""
Numeric helpers.

Contains:
    is_in_range             (low, high) -> Predicate  # low <= x < high
    is_negative, is_positive (x) -> bool
    round, floor, ceil      (x: float) -> int
    clamp                   (low, high) -> End
    int_power               (base: int, exp: int) -> int
    min_2 ... min_5, max_2 ... max_5
    min_2_by, max_2_by      (key: Callable) -> Callable[[T, T], T]

round, floor and ceil shadow the builtins of the same name when imported with *.
"""
from __future__ import annotations

from fplus.basetypes import *

import builtins
import math


def is_in_range(low: T, high: T) -> Predicate[T]:
    """
    is_in_range(1, 3)(1) == True, is_in_range(1, 3)(3) == False
    :param low: Inclusive lower bound.
    :param high: Exclusive upper bound.
    :returns: The range predicate.
    """
    return lambda x: low <= x < high


def is_negative(x: Any) -> bool:
    return x < 0


def is_positive(x: Any) -> bool:
    return not is_negative(x)


def round(x: float) -> int:
    """
    Rounds half away from zero, unlike builtins.round which rounds half to even.
    round(2.5) == 3, round(-1.6) == -2
    """
    # x + 0.5 can itself round up, so the fraction is compared on the magnitude
    magnitude = abs(x)
    whole = math.floor(magnitude)
    rounded = whole + (magnitude - whole >= 0.5)
    return rounded if x >= 0 else -rounded


def floor(x: float) -> int:
    return math.floor(x)


def ceil(x: float) -> int:
    return math.ceil(x)


def clamp(low: T, high: T) -> End[T]:
    """
    clamp(2, 6)(8) == 6
    :param low: Smallest admissible value.
    :param high: Largest admissible value.
    :returns: A function pushing its argument into [low, high].
    """
    if high < low:
        msg = f"clamp: upper bound {high} is below lower bound {low}"
        raise ValueError(msg)
    return lambda x: builtins.min(builtins.max(x, low), high)


def int_power(base: int, exp: int) -> int:
    """
    Integer exponentiation by squaring.
    :param base: The base.
    :param exp: A non-negative exponent.
    :returns: base ** exp.
    """
    if exp < 0:
        msg = f"int_power: negative exponent {exp}"
        raise ValueError(msg)
    result = 1
    while exp:
        if exp & 1:
            result *= base
        base *= base
        exp >>= 1
    return result


def min_2(a: T, b: T) -> T:
    return a if a <= b else b


def min_3(a: T, b: T, c: T) -> T:
    return min_2(min_2(a, b), c)


def min_4(a: T, b: T, c: T, d: T) -> T:
    return min_2(min_3(a, b, c), d)


def min_5(a: T, b: T, c: T, d: T, e: T) -> T:
    return min_2(min_4(a, b, c, d), e)


def max_2(a: T, b: T) -> T:
    return a if a >= b else b


def max_3(a: T, b: T, c: T) -> T:
    return max_2(max_2(a, b), c)


def max_4(a: T, b: T, c: T, d: T) -> T:
    return max_2(max_3(a, b, c), d)


def max_5(a: T, b: T, c: T, d: T, e: T) -> T:
    return max_2(max_4(a, b, c, d), e)


def min_2_by(key: Callable[[T], Any]) -> Callable[[T, T], T]:
    """min_2_by(len)("hello", "hi") == "hi"; ties go to the first argument"""
    return lambda a, b: a if key(a) <= key(b) else b


def max_2_by(key: Callable[[T], Any]) -> Callable[[T, T], T]:
    # ties go to the second argument, mirroring min_2_by
    return lambda a, b: b if key(a) <= key(b) else a
