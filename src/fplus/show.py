"""
Rendering values and containers as text.

Contains:
    show                    (x: Any) -> str
    show_cont_with          (separator: str, xs: Iterable) -> str
    show_cont               (xs: Iterable) -> str
    show_float              (precision: int, x: float) -> str
"""
from __future__ import annotations

from fplus.basetypes import *

from toolz import curry


def show(x: Any) -> str:
    """
    Renders a single value.
    Strings are shown as they are (no quotes), 2-tuples as '(a, b)', containers via show_cont,
    and anything implementing __show__ (Maybe, Result) through that hook. Everything else falls back to str().
    :param x: The value to render.
    :returns: The textual representation.
    """
    if isinstance(x, str):
        return x
    if hasattr(type(x), '__show__'):
        return x.__show__()
    if is_pair(x):
        return f"({show(x[0])}, {show(x[1])})"
    if isinstance(x, Mapping) or is_container(x):
        return show_cont(x)
    return str(x)


@curry
def show_cont_with(separator: str, xs: Iterable[Any]) -> str:
    """
    show_cont_with(" => ", [1, 2, 3]) == "[1 => 2 => 3]"
    Mappings are shown as the list of their (key, value) pairs.
    :param separator: Placed between the rendered elements.
    :param xs: The elements to render.
    :returns: The bracketed rendering.
    """
    if isinstance(xs, Mapping):
        xs = xs.items()
    return "[" + separator.join(show(x) for x in xs) + "]"


def show_cont(xs: Iterable[Any]) -> str:
    """show_cont([1, 2, 3]) == "[1, 2, 3]" """
    return show_cont_with(", ", xs)


@curry
def show_float(precision: int, x: float) -> str:
    # show_float(2, 3.14159) == "3.14"
    if precision < 0:
        msg = f"precision must be non-negative, got {precision}"
        raise ValueError(msg)
    return f"{x:.{precision}f}"
