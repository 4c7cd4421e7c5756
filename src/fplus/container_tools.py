"""
Filtering, grouping, trimming, searching, splitting and summarizing sequences.

Conventions follow container_common: sequences come last and are not modified, element-preserving
results keep the kind of the input (str, tuple or list), and functions of two or more arguments are
curried. Searches that may come up empty return a Maybe.

Contains:
    keep_if, drop_if                (p: Predicate, xs) -> Seq
    without                         (x, xs) -> Seq
    keep_if_with_idx, drop_if_with_idx (p: Callable[[int, T], bool], xs) -> Seq
    keep_by_idx, drop_by_idx        (p: Predicate[int], xs) -> Seq
    keep_idxs, drop_idxs            (idxs: Iterable[int], xs) -> Seq
    partition                       (p: Predicate, xs) -> tuple[Seq, Seq]
    group_by, group_globally_by     (p: BinaryPredicate, xs) -> list[Seq]
    group_on                        (f: Callable, xs) -> list[Seq]
    group, group_globally           (xs) -> list[Seq]
    run_length_encode_by            (p: BinaryPredicate, xs) -> list[tuple[int, T]]
    run_length_encode               (xs) -> list[tuple[int, T]]
    run_length_decode               (pairs: Iterable[tuple[int, T]]) -> list[T]
    trim_left_by, trim_right_by, trim_by (p: Predicate, xs) -> Seq
    trim_left, trim_right, trim     (x, xs) -> Seq
    trim_token_left, trim_token_right, trim_token (token: Seq, xs) -> Seq
    take_while, drop_while          (p: Predicate, xs) -> Seq
    repeat                          (n: int, xs) -> Seq
    replicate                       (n: int, x) -> list
    infixes                         (length: int, xs) -> list[Seq]
    inits, tails                    (xs) -> list[Seq]
    fill_left, fill_right           (x, min_size: int, xs) -> Seq
    find_first_by, find_last_by     (p: Predicate, xs) -> Maybe[T]
    find_first_idx_by, find_last_idx_by (p: Predicate, xs) -> Maybe[int]
    find_first_idx, find_last_idx   (x, xs) -> Maybe[int]
    find_all_idxs_by                (p: Predicate, xs) -> list[int]
    find_all_idxs_of                (x, xs) -> list[int]
    find_all_instances_of_token     (token: Seq, xs) -> list[int]
    find_all_instances_of_token_non_overlapping (token: Seq, xs) -> list[int]
    find_first_instance_of_token    (token: Seq, xs) -> Maybe[int]
    is_infix_of, is_subsequence_of  (token: Seq, xs) -> bool
    split_at_idx                    (idx: int, xs) -> tuple[Seq, Seq]
    split_at_idxs                   (idxs: Iterable[int], xs) -> list[Seq]
    split_every                     (n: int, xs) -> list[Seq]
    split_by                        (p: Predicate, allow_empty: bool, xs) -> list[Seq]
    split                           (x, allow_empty: bool, xs) -> list[Seq]
    split_by_token                  (token: Seq, allow_empty: bool, xs) -> list[Seq]
    replace_if                      (p: Predicate, dest, xs) -> Seq
    replace_elems                   (source, dest, xs) -> Seq
    replace_tokens                  (source: Seq, dest: Seq, xs) -> Seq
    count_if                        (p: Predicate, xs) -> int
    count                           (x, xs) -> int
    count_occurrences               (xs) -> dict[T, int]
    any_by, none_by                 (p: Predicate, xs) -> bool
    any, none                       (xs) -> bool
    minimum, maximum                (xs) -> T
    minimum_by, maximum_by          (less: Compare, xs) -> T
    minimum_idx, maximum_idx        (xs) -> int
    minimum_idx_by, maximum_idx_by  (less: Compare, xs) -> int
    mean, median                    (xs) -> float
    transpose                       (rows) -> list[Seq]
    sample                          (n: int, xs) -> list
    transform_with_idx              (f: Callable[[int, X], Y], xs) -> list[Y]
    transform_and_concat            (f: Callable[[X], Seq], xs) -> Seq
    generate                        (f: Callable[[], T], amount: int) -> list[T]
    generate_by_idx                 (f: Callable[[int], T], amount: int) -> list[T]
    iterate                         (f: End, size: int, x) -> list

any and count shadow the builtins of the same name when imported with *.
"""
from __future__ import annotations

from fplus.basetypes import *
from fplus.container_common import (
    Seq, as_sequence, concat, is_prefix_of, is_suffix_of, join, transform,
)
from fplus.maybe import Maybe, just, nothing, is_just

import builtins
import itertools
import logging
import operator
import random
from toolz import curry, frequencies, partition_all, sliding_window

logger = logging.getLogger(__name__)


@curry
def keep_if(p: Predicate[T], xs: Iterable[T]) -> Seq:
    """
    Filters elements in 'xs' using the boolean predicate 'p'.
    keep_if(is_even, [1, 2, 2, 3, 2]) == [2, 2, 2]
    :param p: Returns True for elements to keep.
    :param xs: The elements to filter.
    :return: The kept elements, in the kind of sequence 'xs' is.
    """
    return rebuild(xs, (x for x in xs if p(x)))


@curry
def drop_if(p: Predicate[T], xs: Iterable[T]) -> Seq:
    return rebuild(xs, (x for x in xs if not p(x)))


@curry
def without(x: T, xs: Iterable[T]) -> Seq:
    return drop_if(lambda y: y == x, xs)


@curry
def keep_if_with_idx(p: Callable[[int, T], bool], xs: Iterable[T]) -> Seq:
    """keep_if_with_idx(lambda i, x: (i + x) % 2 == 0, [1, 2, 2, 3, 2]) == [2, 3, 2]"""
    return rebuild(xs, (x for i, x in enumerate(xs) if p(i, x)))


@curry
def drop_if_with_idx(p: Callable[[int, T], bool], xs: Iterable[T]) -> Seq:
    return rebuild(xs, (x for i, x in enumerate(xs) if not p(i, x)))


@curry
def keep_by_idx(p: Predicate[int], xs: Iterable[T]) -> Seq:
    return keep_if_with_idx(lambda i, _: p(i), xs)


@curry
def drop_by_idx(p: Predicate[int], xs: Iterable[T]) -> Seq:
    return drop_if_with_idx(lambda i, _: p(i), xs)


@curry
def keep_idxs(idxs: Iterable[int], xs: Iterable[T]) -> Seq:
    """
    Keeps the elements at the given indices, in their original order.
    Duplicate and out-of-range indices are ignored: keep_idxs([3, 1, 1, 7], [1, 2, 2, 3, 2]) == [2, 3]
    """
    wanted = set(idxs)
    return keep_by_idx(lambda i: i in wanted, xs)


@curry
def drop_idxs(idxs: Iterable[int], xs: Iterable[T]) -> Seq:
    unwanted = set(idxs)
    return drop_by_idx(lambda i: i in unwanted, xs)


@curry
def partition(p: Predicate[T], xs: Iterable[T]) -> tuple[Seq, Seq]:
    """partition(is_even, [1, 2, 2, 3, 2]) == ([2, 2, 2], [1, 3])"""
    seq = as_sequence(xs)
    return keep_if(p, rebuild(xs, seq)), drop_if(p, rebuild(xs, seq))


@curry
def group_by(p: BinaryPredicate[T], xs: Iterable[T]) -> list[Seq]:
    """
    Groups adjacent elements; an element joins the current group if p(first of group, element) holds.
    group_by(operator.eq, [1, 2, 2, 3, 2]) == [[1], [2, 2], [3], [2]]
    """
    groups: list[list[T]] = []
    for x in xs:
        if groups and p(groups[-1][0], x):
            groups[-1].append(x)
        else:
            groups.append([x])
    return [rebuild(xs, g) for g in groups]


@curry
def group_on(f: Callable[[T], Any], xs: Iterable[T]) -> list[Seq]:
    return group_by(lambda a, b: f(a) == f(b), xs)


def group(xs: Iterable[T]) -> list[Seq]:
    return group_by(operator.eq, xs)


@curry
def group_globally_by(p: BinaryPredicate[T], xs: Iterable[T]) -> list[Seq]:
    """
    Like group_by, but an element joins the first matching group anywhere, not just the last one.
    group_globally_by(operator.eq, [1, 2, 2, 3, 2]) == [[1], [2, 2, 2], [3]]
    """
    groups: list[list[T]] = []
    for x in xs:
        for g in groups:
            if p(g[0], x):
                g.append(x)
                break
        else:
            groups.append([x])
    return [rebuild(xs, g) for g in groups]


def group_globally(xs: Iterable[T]) -> list[Seq]:
    return group_globally_by(operator.eq, xs)


@curry
def run_length_encode_by(p: BinaryPredicate[T], xs: Iterable[T]) -> list[tuple[int, T]]:
    return [(len(g), g[0]) for g in group_by(p, list(xs))]


def run_length_encode(xs: Iterable[T]) -> list[tuple[int, T]]:
    """run_length_encode([1, 2, 2, 2, 2, 3, 3, 2]) == [(1, 1), (4, 2), (2, 3), (1, 2)]"""
    return run_length_encode_by(operator.eq, xs)


def run_length_decode(pairs: Iterable[tuple[int, T]]) -> list[T]:
    return [x for n, x in pairs for _ in range(n)]


@curry
def trim_left_by(p: Predicate[T], xs: Iterable[T]) -> Seq:
    return rebuild(xs, itertools.dropwhile(p, xs))


@curry
def trim_right_by(p: Predicate[T], xs: Iterable[T]) -> Seq:
    seq = as_sequence(xs)
    end = len(seq)
    while end > 0 and p(seq[end - 1]):
        end -= 1
    return rebuild(xs, seq[:end])


@curry
def trim_by(p: Predicate[T], xs: Iterable[T]) -> Seq:
    return trim_right_by(p, trim_left_by(p, rebuild(xs, as_sequence(xs))))


@curry
def trim_left(x: T, xs: Iterable[T]) -> Seq:
    """trim_left(1, [1, 2, 2, 3, 2]) == [2, 2, 3, 2]"""
    return trim_left_by(lambda y: y == x, xs)


@curry
def trim_right(x: T, xs: Iterable[T]) -> Seq:
    return trim_right_by(lambda y: y == x, xs)


@curry
def trim(x: T, xs: Iterable[T]) -> Seq:
    """trim(0, [0, 2, 4, 5, 6, 7, 8, 0, 0]) == [2, 4, 5, 6, 7, 8]"""
    return trim_by(lambda y: y == x, xs)


@curry
def trim_token_left(token: Iterable[T], xs: Iterable[T]) -> Seq:
    """
    Removes leading repetitions of a whole token.
    trim_token_left([0, 1, 2], [0, 1, 2, 0, 1, 2, 7, 5, 9]) == [7, 5, 9]
    """
    tok, seq = list(token), as_sequence(xs)
    start = 0
    while tok and is_prefix_of(tok, seq[start:]):
        start += len(tok)
    return rebuild(xs, seq[start:])


@curry
def trim_token_right(token: Iterable[T], xs: Iterable[T]) -> Seq:
    tok, seq = list(token), as_sequence(xs)
    end = len(seq)
    while tok and is_suffix_of(tok, seq[:end]):
        end -= len(tok)
    return rebuild(xs, seq[:end])


@curry
def trim_token(token: Iterable[T], xs: Iterable[T]) -> Seq:
    tok = list(token)
    return trim_token_right(tok, trim_token_left(tok, rebuild(xs, as_sequence(xs))))


@curry
def take_while(p: Predicate[T], xs: Iterable[T]) -> Seq:
    return rebuild(xs, itertools.takewhile(p, xs))


@curry
def drop_while(p: Predicate[T], xs: Iterable[T]) -> Seq:
    return trim_left_by(p, xs)


@curry
def repeat(n: int, xs: Iterable[T]) -> Seq:
    """repeat(2, [1, 2]) == [1, 2, 1, 2]"""
    seq = as_sequence(xs)
    return rebuild(xs, itertools.chain.from_iterable(itertools.repeat(seq, builtins.max(n, 0))))


@curry
def replicate(n: int, x: T) -> list[T]:
    """replicate(3, 1) == [1, 1, 1]"""
    return [x] * builtins.max(n, 0)


@curry
def infixes(length: int, xs: Iterable[T]) -> list[Seq]:
    """infixes(3, [1, 2, 2, 3, 2]) == [[1, 2, 2], [2, 2, 3], [2, 3, 2]]"""
    if length < 1:
        msg = f"infixes needs a positive length, got {length}"
        raise ValueError(msg)
    return [rebuild(xs, w) for w in sliding_window(length, as_sequence(xs))]


def inits(xs: Iterable[T]) -> list[Seq]:
    """inits([1, 2]) == [[], [1], [1, 2]]"""
    seq = as_sequence(xs)
    return [rebuild(xs, seq[:i]) for i in range(len(seq) + 1)]


def tails(xs: Iterable[T]) -> list[Seq]:
    """tails([1, 2]) == [[1, 2], [2], []]"""
    seq = as_sequence(xs)
    return [rebuild(xs, seq[i:]) for i in range(len(seq) + 1)]


@curry
def fill_left(x: T, min_size: int, xs: Iterable[T]) -> Seq:
    """fill_left(" ", 6, "12") == "    12" """
    seq = as_sequence(xs)
    return rebuild(xs, [*replicate(min_size - len(seq), x), *seq])


@curry
def fill_right(x: T, min_size: int, xs: Iterable[T]) -> Seq:
    seq = as_sequence(xs)
    return rebuild(xs, [*seq, *replicate(min_size - len(seq), x)])


@curry
def find_first_idx_by(p: Predicate[T], xs: Iterable[T]) -> Maybe[int]:
    for i, x in enumerate(xs):
        if p(x):
            return just(i)
    return nothing()


@curry
def find_last_idx_by(p: Predicate[T], xs: Iterable[T]) -> Maybe[int]:
    seq = as_sequence(xs)
    for i in range(len(seq) - 1, -1, -1):
        if p(seq[i]):
            return just(i)
    return nothing()


@curry
def find_first_by(p: Predicate[T], xs: Iterable[T]) -> Maybe[T]:
    """find_first_by(lambda x: x == 3, [1, 2, 2, 3, 2]) == just(3)"""
    seq = as_sequence(xs)
    return find_first_idx_by(p, seq).map(lambda i: seq[i])


@curry
def find_last_by(p: Predicate[T], xs: Iterable[T]) -> Maybe[T]:
    seq = as_sequence(xs)
    return find_last_idx_by(p, seq).map(lambda i: seq[i])


@curry
def find_first_idx(x: T, xs: Iterable[T]) -> Maybe[int]:
    """find_first_idx(2, [1, 2, 2, 3, 2]) == just(1)"""
    return find_first_idx_by(lambda y: y == x, xs)


@curry
def find_last_idx(x: T, xs: Iterable[T]) -> Maybe[int]:
    return find_last_idx_by(lambda y: y == x, xs)


@curry
def find_all_idxs_by(p: Predicate[T], xs: Iterable[T]) -> list[int]:
    return [i for i, x in enumerate(xs) if p(x)]


@curry
def find_all_idxs_of(x: T, xs: Iterable[T]) -> list[int]:
    """find_all_idxs_of("h", "oh, ha!") == [1, 4]"""
    return find_all_idxs_by(lambda y: y == x, xs)


@curry
def find_all_instances_of_token(token: Iterable[T], xs: Iterable[T]) -> list[int]:
    """
    Start indices of every occurrence of 'token', overlapping ones included.
    find_all_instances_of_token("xx", "bxxxxc") == [1, 2, 3]
    The empty token occurs at every position, the end included: find_all_instances_of_token([], [1]) == [0, 1]
    """
    tok, seq = list(token), list(xs)
    n = len(tok)
    return [i for i in range(len(seq) - n + 1) if seq[i:i + n] == tok]


@curry
def find_all_instances_of_token_non_overlapping(token: Iterable[T], xs: Iterable[T]) -> list[int]:
    """find_all_instances_of_token_non_overlapping("xx", "xxxx") == [0, 2]"""
    tok = list(token)
    result: list[int] = []
    for i in find_all_instances_of_token(tok, xs):
        if not result or i >= result[-1] + builtins.max(len(tok), 1):
            result.append(i)
    return result


@curry
def find_first_instance_of_token(token: Iterable[T], xs: Iterable[T]) -> Maybe[int]:
    """find_first_instance_of_token("haha", "oh, hahaha!") == just(4)"""
    tok, seq = list(token), list(xs)
    n = len(tok)
    for i in range(len(seq) - n + 1):
        if seq[i:i + n] == tok:
            return just(i)
    return nothing()


@curry
def is_infix_of(token: Iterable[T], xs: Iterable[T]) -> bool:
    return is_just(find_first_instance_of_token(token, xs))


@curry
def is_subsequence_of(token: Iterable[T], xs: Iterable[T]) -> bool:
    """
    True if the elements of 'token' appear in 'xs' in the same order, not necessarily adjacent.
    is_subsequence_of([1, 3], [1, 2, 2, 3, 2]) == True
    """
    remaining = iter(xs)
    return builtins.all(builtins.any(y == t for y in remaining) for t in token)


@curry
def split_at_idx(idx: int, xs: Iterable[T]) -> tuple[Seq, Seq]:
    """split_at_idx(2, [1, 2, 2, 3, 2]) == ([1, 2], [2, 3, 2])"""
    seq = as_sequence(xs)
    check_index(idx, len(seq))
    return rebuild(xs, seq[:idx]), rebuild(xs, seq[idx:])


@curry
def split_at_idxs(idxs: Iterable[int], xs: Iterable[T]) -> list[Seq]:
    """split_at_idxs([1, 3], [1, 2, 2, 3, 2]) == [[1], [2, 2], [3, 2]]"""
    seq = as_sequence(xs)
    cuts = sorted(set(idxs))
    for i in cuts:
        check_index(i, len(seq))
    bounds = [0, *cuts, len(seq)]
    return [rebuild(xs, seq[a:b]) for a, b in sliding_window(2, bounds)]


@curry
def split_every(n: int, xs: Iterable[T]) -> list[Seq]:
    """split_every(2, [1, 2, 3, 4, 5]) == [[1, 2], [3, 4], [5]]"""
    if n < 1:
        msg = f"split_every needs a positive chunk size, got {n}"
        raise ValueError(msg)
    return [rebuild(xs, chunk) for chunk in partition_all(n, as_sequence(xs))]


@curry
def split_by(p: Predicate[T], allow_empty: bool, xs: Iterable[T]) -> list[Seq]:
    """
    Splits at every element satisfying p; those elements are dropped.
    split_by(is_even, True, [1, 3, 2, 2, 5, 5, 3, 6, 7, 9]) == [[1, 3], [], [5, 5, 3], [7, 9]]
    :param p: Marks the separators.
    :param allow_empty: Whether empty parts are kept.
    :param xs: The sequence to split.
    :returns: The parts between separators.
    """
    parts: list[list[T]] = [[]]
    for x in xs:
        if p(x):
            parts.append([])
        else:
            parts[-1].append(x)
    return [rebuild(xs, part) for part in parts if allow_empty or part]


@curry
def split(x: T, allow_empty: bool, xs: Iterable[T]) -> list[Seq]:
    """split(2, True, [5, 2, 0, 3]) == [[5], [0, 3]]"""
    return split_by(lambda y: y == x, allow_empty, xs)


@curry
def split_by_token(token: Iterable[T], allow_empty: bool, xs: Iterable[T]) -> list[Seq]:
    """
    Splits at every non-overlapping occurrence of a whole token.
    An empty token splits between all elements, and also before the first and after the last:
    split_by_token([], True, [1, 2]) == [[], [1], [2], []]
    """
    tok, seq = list(token), as_sequence(xs)
    parts = []
    start = 0
    for i in find_all_instances_of_token_non_overlapping(tok, seq):
        parts.append(seq[start:i])
        start = i + len(tok)
    parts.append(seq[start:])
    return [rebuild(xs, part) for part in parts if allow_empty or len(part)]


@curry
def replace_if(p: Predicate[T], dest: T, xs: Iterable[T]) -> Seq:
    return rebuild(xs, (dest if p(x) else x for x in xs))


@curry
def replace_elems(source: T, dest: T, xs: Iterable[T]) -> Seq:
    """replace_elems(2, 5, [1, 2, 2, 3, 2]) == [1, 5, 5, 3, 5]"""
    return replace_if(lambda y: y == source, dest, xs)


@curry
def replace_tokens(source: Iterable[T], dest: Iterable[T], xs: Iterable[T]) -> Seq:
    """replace_tokens("123", "_", "--123----123123") == "--_----__" """
    return join(rebuild(xs, dest), split_by_token(source, True, xs))


@curry
def count_if(p: Predicate[T], xs: Iterable[T]) -> int:
    return builtins.sum(1 for x in xs if p(x))


@curry
def count(x: T, xs: Iterable[T]) -> int:
    return count_if(lambda y: y == x, xs)


def count_occurrences(xs: Iterable[T]) -> dict[T, int]:
    """count_occurrences([1, 2, 2, 3, 2]) == {1: 1, 2: 3, 3: 1}"""
    return frequencies(xs)


@curry
def any_by(p: Predicate[T], xs: Iterable[T]) -> bool:
    # false for empty sequences
    return builtins.any(p(x) for x in xs)


def any(xs: Iterable[Any]) -> bool:
    return builtins.any(xs)


@curry
def none_by(p: Predicate[T], xs: Iterable[T]) -> bool:
    return not any_by(p, xs)


def none(xs: Iterable[Any]) -> bool:
    return not builtins.any(xs)


def _non_empty(xs: Iterable[T], name: str) -> Sequence[T]:
    seq = as_sequence(xs)
    if not seq:
        msg = f"{name} of an empty sequence"
        raise ValueError(msg)
    return seq


@curry
def minimum_idx_by(less: Compare[T], xs: Iterable[T]) -> int:
    """Index of the first element no other element is less than."""
    seq = _non_empty(xs, "minimum_idx_by")
    best = 0
    for i in range(1, len(seq)):
        if less(seq[i], seq[best]):
            best = i
    return best


@curry
def maximum_idx_by(less: Compare[T], xs: Iterable[T]) -> int:
    """Index of the first element not less than any other element."""
    seq = _non_empty(xs, "maximum_idx_by")
    best = 0
    for i in range(1, len(seq)):
        if less(seq[best], seq[i]):
            best = i
    return best


@curry
def minimum_by(less: Compare[T], xs: Iterable[T]) -> T:
    """minimum_by(operator.gt, [1, 2, 2, 3, 2]) == 3"""
    seq = as_sequence(xs)
    return seq[minimum_idx_by(less, seq)]


@curry
def maximum_by(less: Compare[T], xs: Iterable[T]) -> T:
    seq = as_sequence(xs)
    return seq[maximum_idx_by(less, seq)]


def minimum_idx(xs: Iterable[T]) -> int:
    return minimum_idx_by(operator.lt, xs)


def maximum_idx(xs: Iterable[T]) -> int:
    return maximum_idx_by(operator.lt, xs)


def minimum(xs: Iterable[T]) -> T:
    return minimum_by(operator.lt, xs)


def maximum(xs: Iterable[T]) -> T:
    return maximum_by(operator.lt, xs)


def mean(xs: Iterable[Any]) -> float:
    seq = _non_empty(xs, "mean")
    return builtins.sum(seq) / len(seq)


def median(xs: Iterable[Any]) -> Any:
    """
    The middle element of the sorted input, or the mean of the two middle ones for even lengths.
    median([3, 9, 5]) == 5; median([3, 4]) == 3.5
    """
    seq = sorted(_non_empty(xs, "median"))
    mid = len(seq) // 2
    if len(seq) % 2:
        return seq[mid]
    return (seq[mid - 1] + seq[mid]) / 2


def transpose(rows: Iterable[Iterable[T]]) -> list[Seq]:
    """
    transpose([[1, 2, 3], [4, 5, 6]]) == [[1, 4], [2, 5], [3, 6]]
    :raises ValueError: if the rows differ in length.
    """
    rows = [as_sequence(r) for r in rows]
    if not rows:
        return []
    if len({len(r) for r in rows}) > 1:
        raise ValueError("transpose needs rows of equal length")
    return [rebuild(rows[0], column) for column in builtins.zip(*rows)]


@curry
def sample(n: int, xs: Iterable[T]) -> list[T]:
    """
    n randomly chosen elements, without replacement.
    Asking for more than there is returns all of them, shuffled.
    """
    seq = as_sequence(xs)
    if n > len(seq):
        logger.warning(f"sample: asked for {n} elements of a sequence of length {len(seq)}")
        n = len(seq)
    return random.sample(list(seq), builtins.max(n, 0))


@curry
def transform_with_idx(f: Callable[[int, X], Y], xs: Iterable[X]) -> list[Y]:
    """transform_with_idx(operator.add, [1, 2, 2, 3, 2]) == [1, 3, 4, 6, 6]"""
    return [f(i, x) for i, x in enumerate(xs)]


@curry
def transform_and_concat(f: Callable[[X], Iterable[Y]], xs: Iterable[X]) -> Seq:
    """transform_and_concat(replicate(3), [1, 2]) == [1, 1, 1, 2, 2, 2]"""
    return concat(transform(f, xs))


@curry
def generate(f: Callable[[], T], amount: int) -> list[T]:
    return [f() for _ in range(amount)]


@curry
def generate_by_idx(f: Callable[[int], T], amount: int) -> list[T]:
    """generate_by_idx(lambda i: i * i, 3) == [0, 1, 4]"""
    return [f(i) for i in range(amount)]


@curry
def iterate(f: End[T], size: int, x: T) -> list[T]:
    """
    The first 'size' elements of x, f(x), f(f(x)), ...
    iterate(lambda y: 2 * y, 5, 3) == [3, 6, 12, 24, 48]
    """
    result = []
    for _ in range(size):
        result.append(x)
        x = f(x)
    return result
