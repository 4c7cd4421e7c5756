"""
Dictionary helpers. Inputs are never modified; every function returns a new dict or value.

Contains:
    swap_keys_and_values    (d: Mapping[KT, VT]) -> dict[VT, KT]
    get_map_keys            (d) -> list[KT]
    get_map_values          (d) -> list[VT]
    create_map              (keys, values) -> dict
    create_map_with         (f: Callable[[KT], VT], keys) -> dict
    pairs_to_map            (pairs) -> dict
    pairs_to_map_grouped    (pairs) -> dict[KT, list[VT]]
    get_from_map            (d, key) -> Maybe[VT]
    get_from_map_with_def   (d, default, key) -> VT
    map_contains            (d, key) -> bool
    transform_map_values    (f: Callable[[VT], T], d) -> dict[KT, T]
    map_keep_if, map_drop_if (p: Predicate[KT], d) -> dict
    map_keep_if_value, map_drop_if_value (p: Predicate[VT], d) -> dict
    map_union               (d1, d2) -> dict  # d1 wins on shared keys
"""
from __future__ import annotations

from fplus.basetypes import *
from fplus.maybe import Maybe, just, nothing

import builtins
import logging
from toolz import curry, keyfilter, merge, valfilter, valmap

logger = logging.getLogger(__name__)


def swap_keys_and_values(d: Mapping[KT, VT]) -> dict[VT, KT]:
    """
    swap_keys_and_values({1: "a", 2: "b"}) == {"a": 1, "b": 2}
    If several keys share a value, the last of them is kept.
    """
    result = {v: k for k, v in d.items()}
    if len(result) < len(d):
        logger.debug(f"swap_keys_and_values: {len(d) - len(result)} duplicate values collapsed")
    return result


def get_map_keys(d: Mapping[KT, VT]) -> list[KT]:
    return list(d.keys())


def get_map_values(d: Mapping[KT, VT]) -> list[VT]:
    return list(d.values())


@curry
def create_map(keys: Iterable[KT], values: Iterable[VT]) -> dict[KT, VT]:
    """
    :param keys: The keys.
    :param values: One value per key.
    :returns: The mapping from each key to its value.
    :raises ValueError: if there are not as many values as keys.
    """
    keys, values = list(keys), list(values)
    if len(keys) != len(values):
        msg = f"create_map: {len(keys)} keys but {len(values)} values"
        raise ValueError(msg)
    return dict(builtins.zip(keys, values))


@curry
def create_map_with(f: Callable[[KT], VT], keys: Iterable[KT]) -> dict[KT, VT]:
    """create_map_with(len, ["one", "three"]) == {"one": 3, "three": 5}"""
    return {k: f(k) for k in keys}


def pairs_to_map(pairs: Iterable[tuple[KT, VT]]) -> dict[KT, VT]:
    return dict(pairs)


def pairs_to_map_grouped(pairs: Iterable[tuple[KT, VT]]) -> dict[KT, list[VT]]:
    """pairs_to_map_grouped([("a", 1), ("b", 2), ("a", 3)]) == {"a": [1, 3], "b": [2]}"""
    result: dict[KT, list[VT]] = {}
    for k, v in pairs:
        result.setdefault(k, []).append(v)
    return result


@curry
def get_from_map(d: Mapping[KT, VT], key: KT) -> Maybe[VT]:
    """get_from_map({1: "a"}, 1) == just("a"), get_from_map({1: "a"}, 2) == nothing()"""
    if key in d:
        return just(d[key])
    return nothing()


@curry
def get_from_map_with_def(d: Mapping[KT, VT], default: VT, key: KT) -> VT:
    return d.get(key, default)


@curry
def map_contains(d: Mapping[KT, Any], key: KT) -> bool:
    return key in d


@curry
def transform_map_values(f: Callable[[VT], T], d: Mapping[KT, VT]) -> dict[KT, T]:
    return valmap(f, d)


@curry
def map_keep_if(p: Predicate[KT], d: Mapping[KT, VT]) -> dict[KT, VT]:
    return keyfilter(p, d)


@curry
def map_drop_if(p: Predicate[KT], d: Mapping[KT, VT]) -> dict[KT, VT]:
    return keyfilter(lambda k: not p(k), d)


@curry
def map_keep_if_value(p: Predicate[VT], d: Mapping[KT, VT]) -> dict[KT, VT]:
    return valfilter(p, d)


@curry
def map_drop_if_value(p: Predicate[VT], d: Mapping[KT, VT]) -> dict[KT, VT]:
    return valfilter(lambda v: not p(v), d)


@curry
def map_union(d1: Mapping[KT, VT], d2: Mapping[KT, VT]) -> dict[KT, VT]:
    # merge lets later dicts win
    return merge(d2, d1)
