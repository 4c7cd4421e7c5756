"""
Shared type variables, callable aliases and container plumbing for the other modules.

Defines types:
    Type variables
        T, T1, X, Y  # generic type variables
        A, B, C      # successive stages of a chain A -> B -> C
        E            # error payloads
        KT, VT       # for dictionaries
    Type aliases
        Func                Callable[..., Any]
        End[T]              Callable[[T], T]
        Hom[X, Y]           Callable[[X], Y]
        Predicate[T]        Callable[[T], bool]
        BinaryPredicate[T]  Callable[[T, T], bool]
        Compare[T]          Callable[[T, T], bool], true iff the first argument sorts strictly first

    class UnwrapError(AssertionError)

    is_container            (x: Any) -> bool
    is_pair                 (x: Any) -> bool
    rebuild                 (template: Iterable, items: Iterable) -> Sequence
    check_index             (idx: int, size: int, name: str) -> None
"""
from __future__ import annotations

from typing import TypeVar, TypeAlias, Any, Generic
from typing import get_args

from collections.abc import Hashable, Iterable, Iterator, Callable, Mapping, Sequence, Container

from functools import wraps, reduce

T, T1, X, Y = TypeVar('T'), TypeVar('T1'), TypeVar('X'), TypeVar('Y')
A, B, C = TypeVar('A'), TypeVar('B'), TypeVar('C')
E = TypeVar('E')
KT, VT = TypeVar('KT', bound=Hashable), TypeVar('VT')

Func = Callable[..., Any]
End = Callable[[T], T]
Hom = Callable[[X], Y]
Predicate = Callable[[T], bool]
BinaryPredicate = Callable[[T, T], bool]
Compare = Callable[[T, T], bool]
Typelike: TypeAlias = Any


class UnwrapError(AssertionError):
    """
    Raised by the unsafe accessors (unsafe_get_just, unsafe_get_ok, unsafe_get_error) when called on the wrong variant.
    This marks a broken precondition in the caller, not a recoverable condition, hence the AssertionError base.
    It is raised explicitly, so it still fires when Python runs with -O.
    """


def is_container(x: Any) -> bool:
    """
    Check if x is considered a 'container' for iteration, ignoring strings and bytes.
    Checks for list, tuple, dict, set, or classes implementing __iter__ and __len__.
    :param x: The object to examine.
    :return: True if x is container-like (non-str), otherwise False.
    """
    if isinstance(x, (str, bytes)) or isinstance(x, type):
        return False
    if isinstance(x, (list, tuple, dict, set, frozenset)):
        return True
    return hasattr(x, "__iter__") and hasattr(x, "__len__") and isinstance(x, Container)


def is_pair(x: Any) -> bool:
    return isinstance(x, tuple) and len(x) == 2


def rebuild(template: Iterable[Any], items: Iterable[Any]) -> Sequence[Any]:
    """
    Packs 'items' into the same kind of sequence as 'template'.
    Strings are re-joined, tuples stay tuples, and every other iterable comes back as a list.
    So take(2, "abc") is "ab" rather than ['a', 'b'].
    :param template: The sequence whose type should be kept.
    :param items: The elements of the new sequence.
    :return: A new sequence of the same kind as 'template'.
    """
    if isinstance(template, str):
        return "".join(items)
    if isinstance(template, bytes):
        return bytes(items)
    if isinstance(template, tuple):
        return tuple(items)
    return list(items)


def check_index(idx: int, size: int, name: str = "index") -> None:
    """
    Raises ValueError unless 0 <= idx <= size.
    :param idx: The index to check.
    :param size: The largest admissible value.
    :param name: How the index is called in the error message.
    """
    if idx < 0 or idx > size:
        msg = f"{name} {idx} out of range for a sequence of length {size}"
        raise ValueError(msg)
