"""
Fallible values carrying either a result or an error payload.

A Result[T, E] is either Ok(value) or Error(error). The error payload is never
interpreted by this module: it is forwarded, shown, or handed to an exception
constructor. Like Maybe, a Result is immutable and never raises on its own;
unsafe_get_ok, unsafe_get_error and the raise_* functions are the exceptions.

Contains:
    class Result(Generic[T, E])
        map                 (self, f: Callable[[T], X]) -> Result[X, E]
        map_error           (self, f: Callable[[E], Y]) -> Result[T, Y]
        and_then            (self, f: Callable[[T], Result[X, E]]) -> Result[X, E]
        get_with_default    (self, default: T) -> T
        >>                  alias of and_then

    ok, error                   (value) -> Result
    is_ok, is_error             (r: Result) -> bool
    unsafe_get_ok               (r: Result[T, E]) -> T
    unsafe_get_error            (r: Result[T, E]) -> E
    ok_with_default             (default: T, r: Result[T, E]) -> T
    lift_result                 (f: Callable[[X], Y], r: Result[X, E]) -> Result[Y, E]
    bind_result                 (r: Result[X, E], f: Callable[[X], Result[Y, E]]) -> Result[Y, E]
    and_then_result             (*fs: Callable[..., Result]) -> Callable[..., Result]
    oks                         (xs: Iterable[Result[T, E]]) -> list[T]
    errors                      (xs: Iterable[Result[T, E]]) -> list[E]
    transform_and_keep_oks      (f: Callable[[X], Result[Y, E]], xs: Iterable[X]) -> list[Y]
    to_maybe                    (r: Result[T, E]) -> Maybe[T]
    from_maybe                  (m: Maybe[T], err: E) -> Result[T, E]
    show_result                 (r: Result) -> str
    raise_on_error              (exc: BaseException, r: Result[T, E]) -> T
    raise_type_on_error         (exc_type: type[BaseException], r: Result[T, E]) -> T
    try_result                  (f: Callable[..., T]) -> Callable[..., Result[T, Exception]]
"""
from __future__ import annotations

from fplus.basetypes import *
from fplus.maybe import Maybe, just, nothing, is_just
from fplus.show import show

import logging
from toolz import curry

logger = logging.getLogger(__name__)

OK_TOKEN = "Ok "
ERROR_TOKEN = "Error "


class Result(Generic[T, E]):
    """
    Wrapper for the outcome of an operation that can fail with a payload.
    Build instances with ok(x) and error(e).
    """
    __slots__ = ('_is_ok', '_value', '_error')

    def __init__(self, is_ok: bool, value: Any = None, error: Any = None) -> None:
        object.__setattr__(self, '_is_ok', is_ok)
        object.__setattr__(self, '_value', value if is_ok else None)
        object.__setattr__(self, '_error', None if is_ok else error)

    def __setattr__(self, name: str, value: Any) -> None:
        msg = f"Result is immutable; cannot set {name}"
        raise AttributeError(msg)

    def __delattr__(self, name: str) -> None:
        msg = f"Result is immutable; cannot delete {name}"
        raise AttributeError(msg)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Result):
            return NotImplemented
        if self._is_ok != other._is_ok:
            return False
        if self._is_ok:
            return self._value == other._value
        return self._error == other._error

    def __hash__(self) -> int:
        return hash((Result, self._is_ok, self._value if self._is_ok else self._error))

    def __repr__(self) -> str:
        return f"Ok({self._value!r})" if self._is_ok else f"Error({self._error!r})"

    def __show__(self) -> str:
        return show_result(self)

    def __copy__(self) -> Result[T, E]:
        return self

    def __deepcopy__(self, memo: dict) -> Result[T, E]:
        from copy import deepcopy
        return Result(self._is_ok, deepcopy(self._value, memo), deepcopy(self._error, memo))

    def __reduce__(self) -> tuple:
        return (Result, (self._is_ok, self._value, self._error))

    def map(self, f: Callable[[T], X]) -> Result[X, E]:
        return Result(True, f(self._value)) if self._is_ok else self

    def map_error(self, f: Callable[[E], Y]) -> Result[T, Y]:
        """
        Applies f to the error payload, leaving an Ok untouched.
        Useful to make the error types of two chains agree before joining them.
        """
        return self if self._is_ok else Result(False, error=f(self._error))

    def and_then(self, f: Callable[[T], Result[X, E]]) -> Result[X, E]:
        return bind_result(self, f)

    __rshift__ = and_then

    def get_with_default(self, default: T) -> T:
        return self._value if self._is_ok else default


def ok(value: T) -> Result[T, Any]:
    return Result(True, value)


def error(err: E) -> Result[Any, E]:
    return Result(False, error=err)


def _check_result(r: Any, where: str) -> Result[Any, Any]:
    if not isinstance(r, Result):
        msg = f"{where}: expected a Result, got {type(r).__name__}"
        raise TypeError(msg)
    return r


def _name(f: Any) -> str:
    return str(getattr(f, '__name__', f))


def is_ok(r: Result[Any, Any]) -> bool:
    return _check_result(r, "is_ok")._is_ok


def is_error(r: Result[Any, Any]) -> bool:
    return not _check_result(r, "is_error")._is_ok


def unsafe_get_ok(r: Result[T, Any]) -> T:
    """
    Returns the value of a Result the caller already knows to be Ok.
    :raises UnwrapError: if r is an Error.
    """
    if not is_ok(r):
        msg = f"unsafe_get_ok called on Error({r._error!r})"
        raise UnwrapError(msg)
    return r._value


def unsafe_get_error(r: Result[Any, E]) -> E:
    """
    Returns the payload of a Result the caller already knows to be an Error.
    :raises UnwrapError: if r is Ok.
    """
    if not is_error(r):
        msg = f"unsafe_get_error called on Ok({r._value!r})"
        raise UnwrapError(msg)
    return r._error


@curry
def ok_with_default(default: T, r: Result[T, Any]) -> T:
    """ok_with_default(42)(error("an error")) == 42"""
    return _check_result(r, "ok_with_default").get_with_default(default)


@curry
def lift_result(f: Callable[[X], Y], r: Result[X, E]) -> Result[Y, E]:
    """
    Lifts a plain function into one from Result to Result.
    An Error passes through with the very same payload, and f is not called.
    :param f: The function to lift.
    :param r: The Result to map over.
    :returns: The mapped Result.
    """
    return _check_result(r, "lift_result").map(f)


def bind_result(r: Result[X, E], f: Callable[[X], Result[Y, E]]) -> Result[Y, E]:
    """
    The binary monadic bind. An Error short-circuits with its original payload.
    :param r: The incoming Result.
    :param f: A function returning a Result.
    :returns: f(value) for Ok(value), otherwise r itself.
    """
    if not _check_result(r, "bind_result")._is_ok:
        return r
    return _check_result(f(r._value), f"result of {_name(f)}")


def and_then_result(*fs: Callable[..., Result[Any, Any]]) -> Callable[..., Result[Any, Any]]:
    """
    Chains Result-returning functions from left to right.
    The first Error stops the chain and becomes the overall result, payload unchanged.
    All steps are expected to share one error type; use Result.map_error inside a step to convert.
    :param fs: The steps of the chain. The first may take any arguments; the others take one value.
    :returns: The chained function.
    """
    if not fs:
        raise TypeError("and_then_result needs at least one function")
    first, rest = fs[0], fs[1:]

    def chained(*args, **kwargs) -> Result[Any, Any]:
        start = _check_result(first(*args, **kwargs), f"result of {_name(first)}")
        return reduce(bind_result, rest, start)
    return chained


def oks(xs: Iterable[Result[T, Any]]) -> list[T]:
    """oks([ok(1), error("e"), ok(2)]) == [1, 2]"""
    return [r._value for r in xs if is_ok(r)]


def errors(xs: Iterable[Result[Any, E]]) -> list[E]:
    """errors([ok(1), error("e"), ok(2)]) == ["e"]"""
    return [r._error for r in xs if is_error(r)]


@curry
def transform_and_keep_oks(f: Callable[[X], Result[Y, Any]], xs: Iterable[X]) -> list[Y]:
    """
    Applies f to every element and keeps the Ok payloads, in one pass.
    """
    result = []
    for x in xs:
        r = _check_result(f(x), f"result of {_name(f)}")
        if r._is_ok:
            result.append(r._value)
    return result


def to_maybe(r: Result[T, Any]) -> Maybe[T]:
    """
    Ok(x) becomes Just(x); an Error becomes Nothing and its payload is dropped.
    """
    return just(r._value) if is_ok(r) else nothing()


@curry
def from_maybe(m: Maybe[T], err: E) -> Result[T, E]:
    """
    Just(x) becomes Ok(x); Nothing becomes Error(err), with 'err' supplied by the caller.
    :param m: The Maybe to convert.
    :param err: The error payload to use for Nothing.
    :returns: The corresponding Result.
    """
    return ok(m._value) if is_just(m) else error(err)


def show_result(r: Result[Any, Any]) -> str:
    """show_result(ok(42)) == "Ok 42"; show_result(error("fail")) == "Error fail" """
    if is_ok(r):
        return OK_TOKEN + show(r._value)
    return ERROR_TOKEN + show(r._error)


@curry
def raise_on_error(exc: BaseException, r: Result[T, Any]) -> T:
    """
    Leaves the Result world by raising the caller's exception object as-is.
    The error payload of r does not end up in the raised exception.
    :param exc: The exception to raise.
    :param r: The Result to unwrap.
    :returns: The value of an Ok.
    :raises exc: if r is an Error.
    """
    if is_ok(r):
        return r._value
    logger.debug(f"raise_on_error: raising {exc!r}, discarding error payload {r._error!r}")
    raise exc


@curry
def raise_type_on_error(exc_type: type[BaseException], r: Result[T, Any]) -> T:
    """
    Leaves the Result world by raising exc_type built from the error payload.
    raise_type_on_error(ValueError, error("failed")) raises ValueError("failed").
    :param exc_type: The exception class; it is called with the payload as its only argument.
    :param r: The Result to unwrap.
    :returns: The value of an Ok.
    """
    if is_ok(r):
        return r._value
    logger.debug(f"raise_type_on_error: raising {exc_type.__name__} from {r._error!r}")
    raise exc_type(r._error)


def try_result(f: Callable[..., T]) -> Callable[..., Result[T, Exception]]:
    """
    Wraps a raising function into one that returns a Result.
    Any Exception raised by f becomes the Error payload; anything else is wrapped in Ok.
    E.g. try_result(int)("42") == ok(42), and is_error(try_result(int)("x")).
    :param f: The function to wrap.
    :returns: The wrapped function.
    """
    @wraps(f)
    def wrapper(*args, **kwargs) -> Result[T, Exception]:
        try:
            return ok(f(*args, **kwargs))
        except Exception as e:
            return error(e)
    return wrapper
