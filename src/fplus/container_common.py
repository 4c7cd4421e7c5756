"""
Basic sequence operations.

Every function takes its sequence read-only (last argument) and returns a new one.
Operations that keep the elements as they are (take, drop, reverse, sort, get_range, ...)
return the same kind of sequence they received: str, tuple or list (see basetypes.rebuild);
transform and the folds/scans return lists. All functions of two or more arguments are curried,
so take(2) is a function of a sequence.

Contains:
    is_empty, is_not_empty          (xs) -> bool
    size_of_cont                    (xs) -> int
    get_range                       (begin: int, end: int, xs) -> Seq
    set_range                       (begin: int, token: Seq, xs) -> Seq
    remove_range                    (begin: int, end: int, xs) -> Seq
    insert_at                       (begin: int, token: Seq, xs) -> Seq
    replace_range                   (begin: int, token: Seq, xs) -> Seq
    elem_at_idx                     (idx: int, xs) -> T
    elems_at_idxs                   (idxs: Iterable[int], xs) -> list
    nth_element                     (n: int) -> Callable[[Seq], T]
    nth_element_flipped             (xs) -> Callable[[int], T]
    transform                       (f: Callable[[X], Y], xs) -> list[Y]
    reverse, sort, unique, nub      (xs) -> Seq
    take, drop                      (amount: int, xs) -> Seq
    fold_left, fold_right           (f, init, xs) -> Acc
    fold_left_1, fold_right_1       (f, xs) -> T
    scan_left, scan_right           (f, init, xs) -> list[Acc]
    scan_left_1, scan_right_1       (f, xs) -> list[T]
    sum                             (xs) -> T
    append                          (xs, ys) -> Seq
    concat                          (xss) -> Seq
    sort_by                         (less: Compare, xs) -> Seq
    sort_on                         (key: Callable, xs) -> Seq
    unique_by                       (p: BinaryPredicate, xs) -> Seq
    intersperse                     (value, xs) -> Seq
    join                            (separator: Seq, xss) -> Seq
    is_elem_of_by                   (p: Predicate, xs) -> bool
    is_elem_of                      (x, xs) -> bool
    nub_by                          (p: BinaryPredicate, xs) -> Seq
    all_unique_by_eq                (p: BinaryPredicate, xs) -> bool
    all_unique, all_unique_less     (xs) -> bool
    is_strictly_sorted_by, is_sorted_by (less: Compare, xs) -> bool
    is_strictly_sorted, is_sorted   (xs) -> bool
    is_prefix_of, is_suffix_of      (token, xs) -> bool
    all_by                          (p: Predicate, xs) -> bool
    all                             (xs) -> bool
    all_the_same_by                 (p: BinaryPredicate, xs) -> bool
    all_the_same                    (xs) -> bool
    generate_range_step             (start, end, step) -> list
    generate_range                  (start, end) -> list
    all_idxs                        (xs) -> list[int]
    init, tail                      (xs) -> Seq

sum and all shadow the builtins of the same name when imported with *.
"""
from __future__ import annotations

from fplus.basetypes import *

import builtins
import itertools
import operator
from functools import cmp_to_key
from toolz import curry, sliding_window

Seq: TypeAlias = Sequence[Any]


def as_sequence(xs: Iterable[T]) -> Sequence[T]:
    """Materializes one-shot iterables so they can be indexed and traversed twice."""
    if isinstance(xs, Sequence):
        return xs
    return list(xs)


def is_empty(xs: Iterable[Any]) -> bool:
    return size_of_cont(xs) == 0


def is_not_empty(xs: Iterable[Any]) -> bool:
    return not is_empty(xs)


def size_of_cont(xs: Iterable[Any]) -> int:
    if hasattr(xs, '__len__'):
        return len(xs)
    return builtins.sum(1 for _ in xs)


@curry
def get_range(begin: int, end: int, xs: Iterable[T]) -> Seq:
    """
    get_range(2, 5, [0, 1, 2, 3, 4, 5, 6, 7, 8]) == [2, 3, 4]
    :param begin: First index taken.
    :param end: First index not taken.
    :param xs: The sequence.
    :returns: The elements in [begin, end).
    :raises ValueError: unless 0 <= begin <= end <= len(xs).
    """
    seq = as_sequence(xs)
    check_index(end, len(seq), "end")
    check_index(begin, end, "begin")
    return rebuild(xs, seq[begin:end])


@curry
def set_range(begin: int, token: Iterable[T], xs: Iterable[T]) -> Seq:
    """
    Overwrites the elements starting at 'begin' with those of 'token'.
    set_range(2, [9, 9, 9], [0, 1, 2, 3, 4, 5, 6, 7, 8]) == [0, 1, 9, 9, 9, 5, 6, 7, 8]
    """
    seq, tok = as_sequence(xs), list(token)
    check_index(begin + len(tok), len(seq), "end of token")
    check_index(begin, len(seq), "begin")
    return rebuild(xs, [*seq[:begin], *tok, *seq[begin + len(tok):]])


@curry
def remove_range(begin: int, end: int, xs: Iterable[T]) -> Seq:
    """remove_range(2, 5, [0, 1, 2, 3, 4, 5, 6, 7]) == [0, 1, 5, 6, 7]"""
    seq = as_sequence(xs)
    check_index(end, len(seq), "end")
    check_index(begin, end, "begin")
    return rebuild(xs, [*seq[:begin], *seq[end:]])


@curry
def insert_at(begin: int, token: Iterable[T], xs: Iterable[T]) -> Seq:
    """insert_at(2, [8, 9], [0, 1, 2, 3, 4]) == [0, 1, 8, 9, 2, 3, 4]"""
    seq = as_sequence(xs)
    check_index(begin, len(seq), "begin")
    return rebuild(xs, [*seq[:begin], *token, *seq[begin:]])


@curry
def replace_range(begin: int, token: Iterable[T], xs: Iterable[T]) -> Seq:
    """
    Like set_range, but the token may run past the end of xs.
    replace_range(2, [8, 9], [0, 1, 2, 3, 4]) == [0, 1, 8, 9, 4]
    """
    seq, tok = as_sequence(xs), list(token)
    end = builtins.min(begin + len(tok), len(seq))
    return insert_at(begin, tok, remove_range(begin, end, rebuild(xs, seq)))


@curry
def elem_at_idx(idx: int, xs: Iterable[T]) -> T:
    seq = as_sequence(xs)
    if not 0 <= idx < len(seq):
        msg = f"index {idx} out of range for a sequence of length {len(seq)}"
        raise ValueError(msg)
    return seq[idx]


@curry
def elems_at_idxs(idxs: Iterable[int], xs: Iterable[T]) -> list[T]:
    seq = as_sequence(xs)
    return [elem_at_idx(i, seq) for i in idxs]


def nth_element(n: int) -> Callable[[Iterable[T]], T]:
    return elem_at_idx(n)


def nth_element_flipped(xs: Iterable[T]) -> Callable[[int], T]:
    seq = as_sequence(xs)
    return lambda n: elem_at_idx(n, seq)


@curry
def transform(f: Callable[[X], Y], xs: Iterable[X]) -> list[Y]:
    """
    Applies 'f' to each element in 'xs', returning a new list of results.
    :param f: A callable taking X and returning Y.
    :param xs: The X items to process.
    :return: A new list of type Y with the function applied to each element.
    """
    return [f(x) for x in xs]


def reverse(xs: Iterable[T]) -> Seq:
    return rebuild(xs, reversed(as_sequence(xs)))


@curry
def take(amount: int, xs: Iterable[T]) -> Seq:
    """take(2, [1, 2, 3]) == [1, 2]; taking more than there is returns everything"""
    return rebuild(xs, itertools.islice(xs, builtins.max(amount, 0)))


@curry
def drop(amount: int, xs: Iterable[T]) -> Seq:
    return rebuild(xs, itertools.islice(xs, builtins.max(amount, 0), None))


@curry
def fold_left(f: Callable[[Any, T], Any], init: Any, xs: Iterable[T]) -> Any:
    """
    fold_left(f, init, [x1, x2]) == f(f(init, x1), x2)
    :param f: Combines the accumulator (first argument) with the next element.
    :param init: The starting accumulator.
    :param xs: The elements to fold, left to right.
    :returns: The final accumulator.
    """
    return reduce(f, xs, init)


@curry
def fold_left_1(f: Callable[[T, T], T], xs: Iterable[T]) -> T:
    seq = as_sequence(xs)
    if not seq:
        raise ValueError("fold_left_1 of an empty sequence")
    return reduce(f, seq)


@curry
def fold_right(f: Callable[[T, Any], Any], init: Any, xs: Iterable[T]) -> Any:
    """
    fold_right(f, init, [x1, x2]) == f(x1, f(x2, init))
    Note the argument order of f: element first, accumulator second.
    """
    acc = init
    for x in reversed(as_sequence(xs)):
        acc = f(x, acc)
    return acc


@curry
def fold_right_1(f: Callable[[T, T], T], xs: Iterable[T]) -> T:
    seq = as_sequence(xs)
    if not seq:
        raise ValueError("fold_right_1 of an empty sequence")
    return fold_right(f, seq[-1], seq[:-1])


@curry
def scan_left(f: Callable[[Any, T], Any], init: Any, xs: Iterable[T]) -> list[Any]:
    """scan_left(operator.add, 20, [1, 2, 2, 3, 2]) == [20, 21, 23, 25, 28, 30]"""
    return list(itertools.accumulate(xs, f, initial=init))


@curry
def scan_left_1(f: Callable[[T, T], T], xs: Iterable[T]) -> list[T]:
    seq = as_sequence(xs)
    if not seq:
        raise ValueError("scan_left_1 of an empty sequence")
    return list(itertools.accumulate(seq, f))


@curry
def scan_right(f: Callable[[T, Any], Any], init: Any, xs: Iterable[T]) -> list[Any]:
    """scan_right(operator.add, 20, [1, 2, 2, 3, 2]) == [30, 29, 27, 25, 22, 20]"""
    result = [init]
    for x in reversed(as_sequence(xs)):
        result.append(f(x, result[-1]))
    return result[::-1]


@curry
def scan_right_1(f: Callable[[T, T], T], xs: Iterable[T]) -> list[T]:
    seq = as_sequence(xs)
    if not seq:
        raise ValueError("scan_right_1 of an empty sequence")
    return scan_right(f, seq[-1], seq[:-1])


def sum(xs: Iterable[T]) -> T:
    """
    Adds up the elements with +, starting from the first one, so non-numeric
    summands (lists, strings) work as well. The sum of nothing is 0.
    """
    seq = as_sequence(xs)
    if not seq:
        return 0
    return reduce(operator.add, seq)


@curry
def append(xs: Iterable[T], ys: Iterable[T]) -> Seq:
    return rebuild(xs, itertools.chain(xs, ys))


def concat(xss: Iterable[Iterable[T]]) -> Seq:
    """
    Flattens one level, keeping the kind of the inner sequences.
    concat([[1], [2, 2], [3]]) == [1, 2, 2, 3]; concat(["ab", "c"]) == "abc"
    """
    xss = as_sequence(xss)
    if not xss:
        return []
    return rebuild(xss[0], itertools.chain.from_iterable(xss))


def _less_to_key(less: Compare[T]) -> Callable[[T], Any]:
    return cmp_to_key(lambda a, b: -1 if less(a, b) else (1 if less(b, a) else 0))


@curry
def sort_by(less: Compare[T], xs: Iterable[T]) -> Seq:
    """
    Stable sort with a strict 'less' comparison.
    sort_by(operator.gt, [1, 3, 2]) == [3, 2, 1]
    """
    return rebuild(xs, sorted(xs, key=_less_to_key(less)))


@curry
def sort_on(key: Callable[[T], Any], xs: Iterable[T]) -> Seq:
    return rebuild(xs, sorted(xs, key=key))


def sort(xs: Iterable[T]) -> Seq:
    return rebuild(xs, sorted(xs))


@curry
def unique_by(p: BinaryPredicate[T], xs: Iterable[T]) -> Seq:
    """
    Collapses runs of adjacent elements for which p holds against the first element of the run.
    unique_by(operator.eq, [1, 2, 2, 3, 2]) == [1, 2, 3, 2]
    """
    result: list[T] = []
    for x in xs:
        if not result or not p(result[-1], x):
            result.append(x)
    return rebuild(xs, result)


def unique(xs: Iterable[T]) -> Seq:
    return unique_by(operator.eq, xs)


@curry
def intersperse(value: T, xs: Iterable[T]) -> Seq:
    """intersperse(0, [1, 2, 3]) == [1, 0, 2, 0, 3]"""
    seq = as_sequence(xs)
    result: list[T] = []
    for i, x in enumerate(seq):
        if i:
            result.append(value)
        result.append(x)
    return rebuild(xs, result)


@curry
def join(separator: Iterable[T], xss: Iterable[Iterable[T]]) -> Seq:
    """
    Concatenates the sequences with 'separator' between them (also known as intercalate).
    join([0, 0], [[1], [2], [3, 4]]) == [1, 0, 0, 2, 0, 0, 3, 4]; join(", ", ["a", "b"]) == "a, b"
    """
    xss = as_sequence(xss)
    if not xss:
        return rebuild(separator, [])
    return concat(intersperse(separator, list(xss)))


@curry
def is_elem_of_by(p: Predicate[T], xs: Iterable[T]) -> bool:
    return builtins.any(p(x) for x in xs)


@curry
def is_elem_of(x: T, xs: Iterable[T]) -> bool:
    return is_elem_of_by(lambda y: y == x, xs)


@curry
def nub_by(p: BinaryPredicate[T], xs: Iterable[T]) -> Seq:
    """
    Removes all later elements that p considers equal to an earlier kept one. O(n^2).
    nub_by(lambda a, b: a % 2 == b % 2, [1, 2, 2, 3, 2]) == [1, 2]
    """
    result: list[T] = []
    for x in xs:
        if not is_elem_of_by(lambda y: p(x, y), result):
            result.append(x)
    return rebuild(xs, result)


def nub(xs: Iterable[T]) -> Seq:
    """nub([1, 2, 2, 3, 2]) == [1, 2, 3]; works for unhashable elements too"""
    return nub_by(operator.eq, xs)


@curry
def all_unique_by_eq(p: BinaryPredicate[T], xs: Iterable[T]) -> bool:
    # true for empty sequences
    seq = as_sequence(xs)
    return len(nub_by(p, list(seq))) == len(seq)


def all_unique(xs: Iterable[T]) -> bool:
    return all_unique_by_eq(operator.eq, xs)


def all_unique_less(xs: Iterable[T]) -> bool:
    """all_unique for orderable elements, in O(n log n)"""
    return is_strictly_sorted(sorted(xs))


@curry
def is_strictly_sorted_by(less: Compare[T], xs: Iterable[T]) -> bool:
    return builtins.all(less(a, b) for a, b in sliding_window(2, xs))


@curry
def is_sorted_by(less: Compare[T], xs: Iterable[T]) -> bool:
    return builtins.all(not less(b, a) for a, b in sliding_window(2, xs))


def is_strictly_sorted(xs: Iterable[T]) -> bool:
    return is_strictly_sorted_by(operator.lt, xs)


def is_sorted(xs: Iterable[T]) -> bool:
    return is_sorted_by(operator.lt, xs)


@curry
def is_prefix_of(token: Iterable[T], xs: Iterable[T]) -> bool:
    """is_prefix_of("Fun", "FunctionalPlus") == True"""
    tok, seq = list(token), list(xs)
    return len(tok) <= len(seq) and seq[:len(tok)] == tok


@curry
def is_suffix_of(token: Iterable[T], xs: Iterable[T]) -> bool:
    """is_suffix_of("us", "FunctionalPlus") == True"""
    tok, seq = list(token), list(xs)
    return len(tok) <= len(seq) and seq[len(seq) - len(tok):] == tok


@curry
def all_by(p: Predicate[T], xs: Iterable[T]) -> bool:
    # true for empty sequences
    return builtins.all(p(x) for x in xs)


def all(xs: Iterable[Any]) -> bool:
    return builtins.all(xs)


@curry
def all_the_same_by(p: BinaryPredicate[T], xs: Iterable[T]) -> bool:
    seq = as_sequence(xs)
    if len(seq) < 2:
        return True
    return all_by(lambda x: p(seq[0], x), seq)


def all_the_same(xs: Iterable[T]) -> bool:
    return all_the_same_by(operator.eq, xs)


@curry
def generate_range_step(start: T, end: T, step: T) -> list[T]:
    """
    generate_range_step(2, 9, 2) == [2, 4, 6, 8]
    :raises ValueError: if step is not positive.
    """
    if not step > 0:
        msg = f"generate_range_step needs a positive step, got {step}"
        raise ValueError(msg)
    result = []
    x = start
    while x < end:
        result.append(x)
        x += step
    return result


@curry
def generate_range(start: T, end: T) -> list[T]:
    """generate_range(2, 9) == [2, 3, 4, 5, 6, 7, 8]"""
    return generate_range_step(start, end, 1)


def all_idxs(xs: Iterable[Any]) -> list[int]:
    return list(range(size_of_cont(xs)))


def init(xs: Iterable[T]) -> Seq:
    """init([0, 1, 2, 3]) == [0, 1, 2]"""
    seq = as_sequence(xs)
    if not seq:
        raise ValueError("init of an empty sequence")
    return rebuild(xs, seq[:-1])


def tail(xs: Iterable[T]) -> Seq:
    """tail([0, 1, 2, 3]) == [1, 2, 3]"""
    seq = as_sequence(xs)
    if not seq:
        raise ValueError("tail of an empty sequence")
    return rebuild(xs, seq[1:])
