"""
Optional values without None checks.

A Maybe[T] is either Just(value) or Nothing. It is immutable, compares by value
and never raises on construction, comparison, mapping or chaining; the only
raising operations are unsafe_get_just and raise_on_nothing.

Contains:
    class Maybe(Generic[T])
        map                 (self, f: Callable[[T], X]) -> Maybe[X]
        and_then            (self, f: Callable[[T], Maybe[X]]) -> Maybe[X]
        get_with_default    (self, default: T) -> T
        >>                  alias of and_then, so just(256) >> f >> g chains left to right

    just                        (value: T) -> Maybe[T]
    nothing                     () -> Maybe
    is_just, is_nothing         (m: Maybe) -> bool
    unsafe_get_just             (m: Maybe[T]) -> T
    just_with_default           (default: T, m: Maybe[T]) -> T
    lift_maybe                  (f: Callable[[X], Y], m: Maybe[X]) -> Maybe[Y]
    bind_maybe                  (m: Maybe[X], f: Callable[[X], Maybe[Y]]) -> Maybe[Y]
    and_then_maybe              (*fs: Callable[..., Maybe]) -> Callable[..., Maybe]
    justs                       (xs: Iterable[Maybe[T]]) -> list[T]
    transform_and_keep_justs    (f: Callable[[X], Maybe[Y]], xs: Iterable[X]) -> list[Y]
    show_maybe                  (m: Maybe) -> str
    raise_on_nothing            (exc: BaseException, m: Maybe[T]) -> T

Functions of two or more arguments are curried (toolz.curry), so just_with_default(42) is a function of a Maybe.
"""
from __future__ import annotations

from fplus.basetypes import *
from fplus.show import show

import logging
from pydantic_core import core_schema
from toolz import curry

logger = logging.getLogger(__name__)

JUST_TOKEN = "Just "
NOTHING_TOKEN = "Nothing"


class Maybe(Generic[T]):
    """
    Wrapper for a value that may be absent.
    Build instances with just(x) and nothing(); the constructor itself is internal.
    """
    __slots__ = ('_is_just', '_value')

    def __init__(self, is_just: bool, value: Any = None) -> None:
        object.__setattr__(self, '_is_just', is_just)
        object.__setattr__(self, '_value', value if is_just else None)

    def __setattr__(self, name: str, value: Any) -> None:
        msg = f"Maybe is immutable; cannot set {name}"
        raise AttributeError(msg)

    def __delattr__(self, name: str) -> None:
        msg = f"Maybe is immutable; cannot delete {name}"
        raise AttributeError(msg)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Maybe):
            return NotImplemented
        if self._is_just != other._is_just:
            return False
        return not self._is_just or self._value == other._value

    def __hash__(self) -> int:
        return hash((Maybe, self._is_just, self._value))

    def __repr__(self) -> str:
        return f"Just({self._value!r})" if self._is_just else "Nothing"

    def __show__(self) -> str:
        return show_maybe(self)

    def __iter__(self) -> Iterator[T]:
        # zero or one element, so `for x in m` and list(m) work as expected
        if self._is_just:
            yield self._value

    def __copy__(self) -> Maybe[T]:
        return self

    def __deepcopy__(self, memo: dict) -> Maybe[T]:
        from copy import deepcopy
        return Maybe(self._is_just, deepcopy(self._value, memo))

    def __reduce__(self) -> tuple:
        return (Maybe, (self._is_just, self._value))

    def map(self, f: Callable[[T], X]) -> Maybe[X]:
        """
        Applies f to the contained value, if any.
        :param f: The function to apply.
        :returns: Just(f(value)), or Nothing without calling f.
        """
        return Maybe(True, f(self._value)) if self._is_just else self

    def and_then(self, f: Callable[[T], Maybe[X]]) -> Maybe[X]:
        """
        Monadic bind: feeds the contained value to f, which itself returns a Maybe.
        :param f: The next step of the chain.
        :returns: f(value), or Nothing without calling f.
        """
        return bind_maybe(self, f)

    __rshift__ = and_then

    def get_with_default(self, default: T) -> T:
        return self._value if self._is_just else default

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Callable[[Any], core_schema.CoreSchema]) -> core_schema.CoreSchema:
        # Maybe[int] as a model field: None -> Nothing, 3 -> Just(3), and back again on dump
        args = get_args(source_type)
        inner = handler(args[0]) if args else core_schema.any_schema()
        from_none = core_schema.no_info_after_validator_function(lambda _: nothing(), core_schema.none_schema())
        from_value = core_schema.no_info_after_validator_function(just, inner)
        return core_schema.json_or_python_schema(
            json_schema=core_schema.union_schema([from_none, from_value]),
            python_schema=core_schema.union_schema([core_schema.is_instance_schema(cls), from_none, from_value]),
            serialization=core_schema.plain_serializer_function_ser_schema(lambda m: m._value),
        )


_NOTHING: Maybe[Any] = Maybe(False)


def just(value: T) -> Maybe[T]:
    """
    Wraps a present value. just(None) is a present None, distinct from nothing().
    :param value: The value to wrap.
    :returns: Just(value).
    """
    return Maybe(True, value)


def nothing() -> Maybe[Any]:
    return _NOTHING


def _check_maybe(m: Any, where: str) -> Maybe[Any]:
    if not isinstance(m, Maybe):
        msg = f"{where}: expected a Maybe, got {type(m).__name__}"
        raise TypeError(msg)
    return m


def is_just(m: Maybe[Any]) -> bool:
    return _check_maybe(m, "is_just")._is_just


def is_nothing(m: Maybe[Any]) -> bool:
    return not _check_maybe(m, "is_nothing")._is_just


def unsafe_get_just(m: Maybe[T]) -> T:
    """
    Returns the contained value of a Maybe the caller already knows to be Just.
    :param m: A Just.
    :returns: The contained value.
    :raises UnwrapError: if m is Nothing.
    """
    if not is_just(m):
        raise UnwrapError("unsafe_get_just called on Nothing")
    return m._value


@curry
def just_with_default(default: T, m: Maybe[T]) -> T:
    """
    Returns the contained value, or 'default' for Nothing.
    just_with_default(42)(nothing()) == 42
    """
    return _check_maybe(m, "just_with_default").get_with_default(default)


@curry
def lift_maybe(f: Callable[[X], Y], m: Maybe[X]) -> Maybe[Y]:
    """
    Lifts a plain function into one from Maybe to Maybe.
    lift_maybe(square)(just(2)) == just(4); lift_maybe(square)(nothing()) == nothing(), and square is never called.
    :param f: The function to lift.
    :param m: The Maybe to map over.
    :returns: The mapped Maybe.
    """
    return _check_maybe(m, "lift_maybe").map(f)


def bind_maybe(m: Maybe[X], f: Callable[[X], Maybe[Y]]) -> Maybe[Y]:
    """
    The binary monadic bind. Nothing short-circuits: f is not called.
    :param m: The incoming Maybe.
    :param f: A function returning a Maybe.
    :returns: f(value) for Just(value), otherwise Nothing.
    """
    if not _check_maybe(m, "bind_maybe")._is_just:
        return m
    return _check_maybe(f(m._value), f"result of {getattr(f, '__name__', f)!s}")


def and_then_maybe(*fs: Callable[..., Maybe[Any]]) -> Callable[..., Maybe[Any]]:
    """
    Chains Maybe-returning functions from left to right.
    and_then_maybe(f, g, h)(x) is f(x), then g of its value, then h of that value,
    stopping at the first Nothing; the functions after it are not called.
    E.g. with sqrt_int returning Nothing for negative inputs, and_then_maybe(sqrt_int, sqrt_int, sqrt_int)(256) == just(2).
    :param fs: The steps of the chain. The first may take any arguments; the others take one value.
    :returns: The chained function.
    """
    if not fs:
        raise TypeError("and_then_maybe needs at least one function")
    first, rest = fs[0], fs[1:]

    def chained(*args, **kwargs) -> Maybe[Any]:
        start = _check_maybe(first(*args, **kwargs), f"result of {getattr(first, '__name__', first)!s}")
        return reduce(bind_maybe, rest, start)
    return chained


def justs(xs: Iterable[Maybe[T]]) -> list[T]:
    """
    Keeps the present values, in order.
    justs([just(1), nothing(), just(2)]) == [1, 2]
    """
    return [m._value for m in xs if is_just(m)]


@curry
def transform_and_keep_justs(f: Callable[[X], Maybe[Y]], xs: Iterable[X]) -> list[Y]:
    """
    Applies f to every element and keeps the present results, in one pass.
    transform_and_keep_justs(sqrt_int, [-3, 4, 16, -1]) == [2, 4]
    """
    result = []
    for x in xs:
        m = _check_maybe(f(x), f"result of {getattr(f, '__name__', f)!s}")
        if m._is_just:
            result.append(m._value)
    return result


def show_maybe(m: Maybe[Any]) -> str:
    """show_maybe(just(42)) == "Just 42"; show_maybe(nothing()) == "Nothing" """
    if is_just(m):
        return JUST_TOKEN + show(m._value)
    return NOTHING_TOKEN


@curry
def raise_on_nothing(exc: BaseException, m: Maybe[T]) -> T:
    """
    Leaves the Maybe world for exception-based error handling.
    :param exc: The exception object to raise, as given.
    :param m: The Maybe to unwrap.
    :returns: The contained value.
    :raises exc: if m is Nothing.
    """
    if is_just(m):
        return m._value
    logger.debug(f"raise_on_nothing: raising {exc!r}")
    raise exc
