"""
Pairs and zipping.

Contains:
    fst, snd                (pair: tuple[X, Y]) -> X | Y
    swap_pair_elems         (pair: tuple[X, Y]) -> tuple[Y, X]
    transform_fst           (f: Callable[[X], T], pair) -> tuple[T, Y]
    transform_snd           (f: Callable[[Y], T], pair) -> tuple[X, T]
    transform_pair          (f, g, pair) -> tuple
    zip_with                (f: Callable[[X, Y], T], xs, ys) -> list[T]
    zip                     (xs, ys) -> list[tuple[X, Y]]
    unzip                   (pairs) -> tuple[list[X], list[Y]]
    enumerate               (xs) -> list[tuple[int, T]]

Zipping stops at the end of the shorter input.
zip and enumerate shadow the builtins of the same name when imported with *.
"""
from __future__ import annotations

from fplus.basetypes import *

import builtins
from toolz import curry


def fst(pair: tuple[X, Y]) -> X:
    return pair[0]


def snd(pair: tuple[X, Y]) -> Y:
    return pair[1]


def swap_pair_elems(pair: tuple[X, Y]) -> tuple[Y, X]:
    return pair[1], pair[0]


@curry
def transform_fst(f: Callable[[X], T], pair: tuple[X, Y]) -> tuple[T, Y]:
    """transform_fst(str, (1, 2)) == ("1", 2)"""
    return f(pair[0]), pair[1]


@curry
def transform_snd(f: Callable[[Y], T], pair: tuple[X, Y]) -> tuple[X, T]:
    return pair[0], f(pair[1])


@curry
def transform_pair(f: Callable[[X], A], g: Callable[[Y], B], pair: tuple[X, Y]) -> tuple[A, B]:
    return f(pair[0]), g(pair[1])


@curry
def zip_with(f: Callable[[X, Y], T], xs: Iterable[X], ys: Iterable[Y]) -> list[T]:
    """
    Combines two sequences element-wise.
    zip_with(operator.add, [1, 2, 3], [10, 20]) == [11, 22]
    :param f: Takes one element of each sequence.
    :param xs: The first sequence.
    :param ys: The second sequence.
    :returns: The results, as long as the shorter sequence.
    """
    return [f(x, y) for x, y in builtins.zip(xs, ys)]


@curry
def zip(xs: Iterable[X], ys: Iterable[Y]) -> list[tuple[X, Y]]:
    return list(builtins.zip(xs, ys))


def unzip(pairs: Iterable[tuple[X, Y]]) -> tuple[list[X], list[Y]]:
    """unzip([(1, "a"), (2, "b")]) == ([1, 2], ["a", "b"])"""
    firsts, seconds = [], []
    for x, y in pairs:
        firsts.append(x)
        seconds.append(y)
    return firsts, seconds


def enumerate(xs: Iterable[T]) -> list[tuple[int, T]]:
    return list(builtins.enumerate(xs))
