"""
Comparison predicates and predicate factories.

Contains:
    identity                            (x: T) -> T
    always                              (c: T) -> Callable[..., T]
    is_equal, is_not_equal              (x, y) -> bool
    is_less, is_less_or_equal           (x, y) -> bool
    is_greater, is_greater_or_equal     (x, y) -> bool
    is_equal_to, is_not_equal_to        (x) -> Predicate
    is_less_than, is_less_or_equal_than (x) -> Predicate
    is_greater_than, is_greater_or_equal_than (x) -> Predicate
    is_equal_by_and_by                  (f, g) -> BinaryPredicate
    is_equal_by                         (f) -> BinaryPredicate
    is_not_equal_by_and_by              (f, g) -> BinaryPredicate
    is_not_equal_by                     (f) -> BinaryPredicate
    xor_bools                           (x: bool, y: bool) -> bool
    ord_to_eq, ord_to_not_eq            (less: Compare) -> BinaryPredicate
    ord_eq_to_eq, ord_eq_to_not_eq      (less_or_equal: Compare) -> BinaryPredicate

The factories compare their argument against the bound value: is_less_than(3)(2) is 2 < 3.
"""
from __future__ import annotations

from fplus.basetypes import *

import operator


def identity(x: T) -> T:
    return x


def always(c: T) -> Callable[..., T]:
    """
    always(c) is a constant function that returns c regardless of its input.
    :param c: The value to return.
    :returns: The constant function.
    """
    def _(*args, **kwargs) -> T:
        return c
    return _


is_equal = operator.eq
is_not_equal = operator.ne
is_less = operator.lt
is_less_or_equal = operator.le
is_greater = operator.gt
is_greater_or_equal = operator.ge


def _against(op: BinaryPredicate[Any], x: Any) -> Predicate[Any]:
    return lambda y: op(y, x)


def is_equal_to(x: T) -> Predicate[T]:
    return _against(operator.eq, x)


def is_not_equal_to(x: T) -> Predicate[T]:
    return _against(operator.ne, x)


def is_less_than(x: T) -> Predicate[T]:
    return _against(operator.lt, x)


def is_less_or_equal_than(x: T) -> Predicate[T]:
    return _against(operator.le, x)


def is_greater_than(x: T) -> Predicate[T]:
    return _against(operator.gt, x)


def is_greater_or_equal_than(x: T) -> Predicate[T]:
    return _against(operator.ge, x)


def is_equal_by_and_by(f: Callable[[X], Any], g: Callable[[Y], Any]) -> Callable[[X, Y], bool]:
    """
    Compares two values after projecting the first with f and the second with g.
    is_equal_by_and_by(is_odd, is_even)(1, 2) == True
    """
    return lambda x, y: f(x) == g(y)


def is_equal_by(f: Callable[[T], Any]) -> BinaryPredicate[T]:
    """is_equal_by(square)(2, -2) == True"""
    return is_equal_by_and_by(f, f)


def is_not_equal_by_and_by(f: Callable[[X], Any], g: Callable[[Y], Any]) -> Callable[[X, Y], bool]:
    return lambda x, y: f(x) != g(y)


def is_not_equal_by(f: Callable[[T], Any]) -> BinaryPredicate[T]:
    return is_not_equal_by_and_by(f, f)


def xor_bools(x: bool, y: bool) -> bool:
    return bool(x) != bool(y)


# Equality derived from an ordering: with a strict 'less', x == y iff neither is less than the other.
def ord_to_eq(less: Compare[T]) -> BinaryPredicate[T]:
    return lambda x, y: not less(x, y) and not less(y, x)


def ord_to_not_eq(less: Compare[T]) -> BinaryPredicate[T]:
    return lambda x, y: less(x, y) or less(y, x)


def ord_eq_to_eq(less_or_equal: Compare[T]) -> BinaryPredicate[T]:
    return lambda x, y: less_or_equal(x, y) and less_or_equal(y, x)


def ord_eq_to_not_eq(less_or_equal: Compare[T]) -> BinaryPredicate[T]:
    return lambda x, y: not (less_or_equal(x, y) and less_or_equal(y, x))
