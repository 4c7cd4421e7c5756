"""
Function composition, argument binding and logical combinators.

Contains:
    forward_apply           (x: X, f: Callable[[X], Y]) -> Y
    compose                 (*fs: Callable) -> Callable  # left to right
    flip                    (f: Callable[[X, Y], T]) -> Callable[[Y, X], T]
    bind_1st_of_2           (f, x) -> Callable
    bind_2nd_of_2           (f, y) -> Callable
    bind_1st_of_3           (f, x) -> Callable
    bind_1st_and_2nd_of_3   (f, x, y) -> Callable
    logical_not             (p: Predicate) -> Predicate
    logical_and, logical_or, logical_xor (*ps: Predicate) -> Predicate
    apply_to_pair           (f: Callable[[X, Y], T]) -> Callable[[tuple[X, Y]], T]
    arity                   (f: Callable) -> int
"""
from __future__ import annotations

from fplus.basetypes import *

import inspect
from functools import partial
from toolz import compose_left


def forward_apply(x: X, f: Callable[[X], Y]) -> Y:
    """forward_apply(3, square) == 9"""
    return f(x)


def compose(*fs: Func) -> Func:
    """
    Composes functions from left to right: compose(f, g, h)(x) == h(g(f(x))).
    The first function may take any arguments, the others take the previous result.
    :param fs: The functions to compose.
    :returns: The composed function.
    """
    if not fs:
        raise TypeError("compose needs at least one function")
    return compose_left(*fs)


def flip(f: Callable[[X, Y], T]) -> Callable[[Y, X], T]:
    """
    Swaps the two arguments of a binary function.
    flip(lambda a, b: a + 2 * b)(2, 1) == 5
    """
    @wraps(f)
    def flipped(y: Y, x: X) -> T:
        return f(x, y)
    return flipped


def bind_1st_of_2(f: Callable[[X, Y], T], x: X) -> Callable[[Y], T]:
    return partial(f, x)


def bind_2nd_of_2(f: Callable[[X, Y], T], y: Y) -> Callable[[X], T]:
    return lambda x: f(x, y)


def bind_1st_of_3(f: Func, x: Any) -> Func:
    return partial(f, x)


def bind_1st_and_2nd_of_3(f: Func, x: Any, y: Any) -> Func:
    """bind_1st_and_2nd_of_3(add3, 3, 5)(7) == 15"""
    return partial(f, x, y)


def logical_not(p: Predicate[T]) -> Predicate[T]:
    return lambda *args: not p(*args)


def logical_and(*ps: Predicate[T]) -> Predicate[T]:
    """
    Conjunction of predicates; evaluation stops at the first false one.
    all_by(logical_and(is_calm, is_bright), entities)
    """
    return lambda *args: all(p(*args) for p in ps)


def logical_or(*ps: Predicate[T]) -> Predicate[T]:
    return lambda *args: any(p(*args) for p in ps)


def logical_xor(p: Predicate[T], q: Predicate[T]) -> Predicate[T]:
    return lambda *args: bool(p(*args)) != bool(q(*args))


def apply_to_pair(f: Callable[[X, Y], T]) -> Callable[[tuple[X, Y]], T]:
    """apply_to_pair(lambda a, b: a + 2 * b)((1, 2)) == 5"""
    return lambda pair: f(pair[0], pair[1])


def arity(f: Func) -> int:
    """
    Counts the positional parameters of f that have no default value.
    :param f: The function to inspect.
    :returns: The number of required positional parameters.
    :raises ValueError: if f has no inspectable signature (some builtins).
    """
    sig = inspect.signature(f)
    return len([p for p in sig.parameters.values()
                if p.kind in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)
                and p.default is inspect.Parameter.empty])
