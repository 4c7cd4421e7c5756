"""
Cartesian products, permutations, combinations and rotations.

Results are lists. Where a result element is itself a selection from the input, it has the kind
of the input, so combinations(2, "ABC") gives strings. Orders follow itertools, i.e. the
lexicographic order of the input positions.

Contains:
    carthesian_product_with_where   (f, p: BinaryPredicate, xs, ys) -> list
    carthesian_product_with         (f: Callable[[X, Y], T], xs, ys) -> list[T]
    carthesian_product_where        (p: Callable[[X, Y], bool], xs, ys) -> list[tuple[X, Y]]
    carthesian_product              (xs, ys) -> list[tuple[X, Y]]
    carthesian_product_n            (power: int, xs) -> list[Seq]
    permutations                    (power: int, xs) -> list[Seq]
    combinations                    (power: int, xs) -> list[Seq]
    combinations_with_replacement   (power: int, xs) -> list[Seq]
    power_set                       (xs) -> list[Seq]  # ordered by subset size
    rotations_left, rotations_right (xs) -> list[Seq]
"""
from __future__ import annotations

from fplus.basetypes import *
from fplus.container_common import Seq, as_sequence

import itertools
from toolz import curry


@curry
def carthesian_product_with_where(f: Callable[[X, Y], T], p: Callable[[X, Y], bool],
                                  xs: Iterable[X], ys: Iterable[Y]) -> list[T]:
    """
    carthesian_product_with_where(operator.add, lambda x, y: (ord(x) + ord(y)) % 2 == 0, "ABC", "XY")
        == ["AY", "BX", "CY"]
    :param f: Combines one element of each input.
    :param p: Selects the pairs to combine.
    :param xs: Outer input; it varies slowest.
    :param ys: Inner input.
    :returns: f(x, y) for every selected pair.
    """
    ys = as_sequence(ys)
    return [f(x, y) for x in xs for y in ys if p(x, y)]


@curry
def carthesian_product_with(f: Callable[[X, Y], T], xs: Iterable[X], ys: Iterable[Y]) -> list[T]:
    """carthesian_product_with(operator.add, "ABC", "XY") == ["AX", "AY", "BX", "BY", "CX", "CY"]"""
    return carthesian_product_with_where(f, lambda x, y: True, xs, ys)


@curry
def carthesian_product_where(p: Callable[[X, Y], bool], xs: Iterable[X], ys: Iterable[Y]) -> list[tuple[X, Y]]:
    return carthesian_product_with_where(lambda x, y: (x, y), p, xs, ys)


@curry
def carthesian_product(xs: Iterable[X], ys: Iterable[Y]) -> list[tuple[X, Y]]:
    return list(itertools.product(xs, as_sequence(ys)))


def _selections(selector: Callable[..., Iterable[tuple]], power: int, xs: Iterable[T]) -> list[Seq]:
    if power < 0:
        msg = f"cannot select {power} elements"
        raise ValueError(msg)
    seq = as_sequence(xs)
    return [rebuild(xs, choice) for choice in selector(seq, power)]


@curry
def carthesian_product_n(power: int, xs: Iterable[T]) -> list[Seq]:
    """
    All length-'power' sequences of elements of xs.
    carthesian_product_n(2, "AB") == ["AA", "AB", "BA", "BB"]; carthesian_product_n(0, [1, 2]) == [[]]
    """
    return _selections(lambda seq, n: itertools.product(seq, repeat=n), power, xs)


@curry
def permutations(power: int, xs: Iterable[T]) -> list[Seq]:
    """permutations(2, "ABC") == ["AB", "AC", "BA", "BC", "CA", "CB"]"""
    return _selections(itertools.permutations, power, xs)


@curry
def combinations(power: int, xs: Iterable[T]) -> list[Seq]:
    """combinations(2, "ABCD") == ["AB", "AC", "AD", "BC", "BD", "CD"]"""
    return _selections(itertools.combinations, power, xs)


@curry
def combinations_with_replacement(power: int, xs: Iterable[T]) -> list[Seq]:
    return _selections(itertools.combinations_with_replacement, power, xs)


def power_set(xs: Iterable[T]) -> list[Seq]:
    """power_set("xyz") == ["", "x", "y", "z", "xy", "xz", "yz", "xyz"]"""
    seq = as_sequence(xs)
    return [subset for n in range(len(seq) + 1) for subset in combinations(n, rebuild(xs, seq))]


def rotations_left(xs: Iterable[T]) -> list[Seq]:
    """rotations_left("abcd") == ["abcd", "bcda", "cdab", "dabc"]"""
    seq = as_sequence(xs)
    return [rebuild(xs, [*seq[i:], *seq[:i]]) for i in range(len(seq))]


def rotations_right(xs: Iterable[T]) -> list[Seq]:
    """rotations_right("abcd") == ["abcd", "dabc", "cdab", "bcda"]"""
    seq = as_sequence(xs)
    n = len(seq)
    return [rebuild(xs, [*seq[n - i:], *seq[:n - i]]) for i in range(n)]
